"""Configuration for the sequential thinking server.

All values are read once at startup; the resulting ServerConfig is frozen.

Environment:
    DISABLE_THOUGHT_LOGGING       "true" turns off the stderr thought boxes
    SEQUENTIAL_THINKING_STRICT    1/true/yes/on rejects mistyped optional fields
    SEQUENTIAL_THINKING_LOG_LEVEL logging level name (default WARNING)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

# === Constants ===

SERVER_NAME = "sequential-thinking-server"
SERVER_VERSION = "0.2.0"
TOOL_NAME = "sequentialthinking"

DISABLE_LOGGING_ENV_VAR = "DISABLE_THOUGHT_LOGGING"
STRICT_ENV_VAR = "SEQUENTIAL_THINKING_STRICT"
LOG_LEVEL_ENV_VAR = "SEQUENTIAL_THINKING_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Startup configuration."""

    disable_thought_logging: bool = False
    strict: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() in _TRUTHY


def load_config(environ: Mapping[str, str] | None = None) -> ServerConfig:
    """Build a ServerConfig from the environment.

    ``DISABLE_THOUGHT_LOGGING`` only honours the literal "true" (any case),
    matching the upstream server; the other flags accept the usual truthy
    spellings.
    """
    if environ is None:
        environ = os.environ

    return ServerConfig(
        disable_thought_logging=environ.get(DISABLE_LOGGING_ENV_VAR, "").lower() == "true",
        strict=_flag(environ, STRICT_ENV_VAR),
        log_level=environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL,
    )
