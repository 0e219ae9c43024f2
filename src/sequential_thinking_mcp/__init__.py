"""
sequential-thinking-mcp - MCP server for step-by-step reflective reasoning

Usage:
    from sequential_thinking_mcp import SequentialThinkingProcessor

    processor = SequentialThinkingProcessor()

    result = processor.process_thought({
        "thought": "Let me break down this problem...",
        "thoughtNumber": 1,
        "totalThoughts": 5,
        "nextThoughtNeeded": True,
    })

    if result.is_ok():
        summary = result.value
        print(f"Thought {summary.thought_number}/{summary.total_thoughts}")
        print(summary.to_json())
    else:
        print(f"Error: {result.error.message}")

    # Convenience function for one-off thoughts
    from sequential_thinking_mcp import process_thought

    result = process_thought(
        thought="Quick analysis...",
        thought_number=1,
        total_thoughts=1,
        next_thought_needed=False,
    )

MCP Server:
    from sequential_thinking_mcp import run_stdio_server
    await run_stdio_server()
"""

from .config import ServerConfig, load_config
from .errors import ThinkingError, ToolCallError, ValidationError
from .formatting import ThoughtLogger, classify, render_thought
from .processor import SequentialThinkingProcessor, process_thought
from .response import ThoughtSummary
from .result import Err, Ok, Result
from .server import build_server, handle_tool_call, run_stdio_server
from .types import ThoughtKind, ThoughtRecord
from .validation import validate_thought

__all__ = [
    # Processing
    "SequentialThinkingProcessor",
    "process_thought",
    "validate_thought",
    # Server
    "build_server",
    "handle_tool_call",
    "run_stdio_server",
    # Config
    "ServerConfig",
    "load_config",
    # Formatting
    "ThoughtLogger",
    "classify",
    "render_thought",
    # Types
    "ThoughtRecord",
    "ThoughtKind",
    "ThoughtSummary",
    "ThinkingError",
    "ValidationError",
    "ToolCallError",
    # Result
    "Result",
    "Ok",
    "Err",
]

__version__ = "0.2.0"
