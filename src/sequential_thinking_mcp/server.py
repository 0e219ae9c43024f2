"""MCP stdio server exposing the sequentialthinking tool."""

from __future__ import annotations

import logging
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from .config import SERVER_NAME, SERVER_VERSION, TOOL_NAME, ServerConfig, load_config
from .errors import UNKNOWN_TOOL, ThinkingError, ToolCallError
from .processor import SequentialThinkingProcessor
from .tool_schemas import get_tool_schemas

logger = logging.getLogger(__name__)


def handle_tool_call(
    processor: SequentialThinkingProcessor,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """Dispatch one tool call.

    Raises:
        ToolCallError: unknown tool or invalid arguments. The SDK turns it
            into a result with ``isError`` set; shared state is untouched.
    """
    if name != TOOL_NAME:
        raise ToolCallError(ThinkingError(message=f"Unknown tool: {name}", code=UNKNOWN_TOOL))

    result = processor.process_thought(arguments)
    if result.is_err():
        raise ToolCallError(result.error)

    return [types.TextContent(type="text", text=result.value.to_json())]


def build_server(
    *,
    config: ServerConfig | None = None,
    processor: SequentialThinkingProcessor | None = None,
) -> Server:
    config = config or load_config()
    processor = processor or SequentialThinkingProcessor(config=config)
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return get_tool_schemas()

    # Arguments are checked by the validator, which drops mistyped optional
    # fields; SDK schema validation would reject them instead.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        return handle_tool_call(processor, name, arguments)

    return server


async def run_stdio_server(config: ServerConfig | None = None) -> None:
    """Serve over stdio until the client disconnects.

    Transport failures propagate to the caller.
    """
    config = config or load_config()
    server = build_server(config=config)
    logger.info(
        "Starting %s %s (thought logging %s)",
        SERVER_NAME,
        SERVER_VERSION,
        "disabled" if config.disable_thought_logging else "enabled",
    )

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=SERVER_VERSION,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )
