"""Error types for the sequential thinking server."""

from __future__ import annotations

from dataclasses import dataclass

INVALID_INPUT = "INVALID_INPUT"
UNKNOWN_TOOL = "UNKNOWN_TOOL"


@dataclass(frozen=True, slots=True)
class ThinkingError:
    """Base error type for thought processing."""

    message: str
    code: str | None = None


@dataclass(frozen=True, slots=True)
class ValidationError(ThinkingError):
    """A required field is missing or has the wrong type.

    ``field_name`` is the wire name of the offending field
    (e.g. ``nextThoughtNeeded``).
    """

    field_name: str | None = None


class ToolCallError(Exception):
    """Raised from the MCP tool handler; the SDK reports it as an ``isError`` result."""

    def __init__(self, error: ThinkingError):
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> str | None:
        return self.error.code
