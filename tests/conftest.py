"""Pytest fixtures for all test modules."""
import io

import pytest
from rich.console import Console

from sequential_thinking_mcp.config import ServerConfig
from sequential_thinking_mcp.formatting import ThoughtLogger
from sequential_thinking_mcp.processor import SequentialThinkingProcessor


@pytest.fixture
def console_buffer():
    """In-memory stream for captured thought boxes."""
    return io.StringIO()


@pytest.fixture
def quiet_processor():
    """Processor with thought logging disabled."""
    return SequentialThinkingProcessor(config=ServerConfig(disable_thought_logging=True))


@pytest.fixture
def logging_processor(console_buffer):
    """Processor writing thought boxes to ``console_buffer``."""
    console = Console(file=console_buffer, width=200, color_system=None, highlight=False)
    return SequentialThinkingProcessor(
        config=ServerConfig(),
        thought_logger=ThoughtLogger(console=console),
    )


@pytest.fixture
def first_thought():
    """A valid first thought, as sent by a client."""
    return {
        "thought": "A",
        "thoughtNumber": 1,
        "totalThoughts": 3,
        "nextThoughtNeeded": True,
    }


@pytest.fixture
def branch_thought():
    """A thought past its estimate that starts branch ``x``."""
    return {
        "thought": "B",
        "thoughtNumber": 5,
        "totalThoughts": 3,
        "nextThoughtNeeded": False,
        "branchFromThought": 1,
        "branchId": "x",
    }
