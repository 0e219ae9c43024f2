"""Command line entry point for the sequential thinking server."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys

from .config import SERVER_NAME, SERVER_VERSION, ServerConfig, load_config
from .formatting import render_thought
from .server import run_stdio_server
from .validation import validate_thought

logger = logging.getLogger("sequential_thinking_mcp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sequential-thinking-mcp",
        description="Sequential thinking MCP server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    sequential-thinking-mcp                      # serve over stdio
    sequential-thinking-mcp --strict serve
    sequential-thinking-mcp render '{"thought": "Start", "thoughtNumber": 1,
        "totalThoughts": 3, "nextThoughtNeeded": true}'

Environment:
    DISABLE_THOUGHT_LOGGING=true      suppress thought boxes on stderr
    SEQUENTIAL_THINKING_STRICT=1      reject mistyped optional fields
    SEQUENTIAL_THINKING_LOG_LEVEL     logging level (default WARNING)
        """,
    )
    parser.add_argument("--version", action="version", version=f"{SERVER_NAME} {SERVER_VERSION}")
    parser.add_argument(
        "--disable-thought-logging",
        action="store_true",
        help="Don't write formatted thoughts to stderr",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject mistyped optional fields instead of ignoring them",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG, INFO)")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("serve", help="Run the MCP server over stdio (default)")

    render_parser = subparsers.add_parser("render", help="Print the formatted box for a thought")
    render_parser.add_argument(
        "payload",
        nargs="?",
        help="Thought arguments as a JSON object (read from stdin if omitted)",
    )
    render_parser.add_argument(
        "-j", "--json",
        action="store_true",
        help="Print the decoded thought as JSON instead of the box",
    )
    return parser


def resolve_config(args: argparse.Namespace, config: ServerConfig | None = None) -> ServerConfig:
    """Apply command line overrides on top of the environment config."""
    config = config or load_config()
    overrides = {}
    if args.disable_thought_logging:
        overrides["disable_thought_logging"] = True
    if args.strict:
        overrides["strict"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(config, **overrides) if overrides else config


def cmd_render(args: argparse.Namespace, config: ServerConfig) -> None:
    raw = args.payload if args.payload is not None else sys.stdin.read()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"Error: invalid JSON: {e}", file=sys.stderr)
        sys.exit(1)

    if not isinstance(data, dict):
        print("Error: thought arguments must be a JSON object", file=sys.stderr)
        sys.exit(1)

    result = validate_thought(data, strict=config.strict)
    if result.is_err():
        print(f"Error: {result.error.message}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(result.value.to_dict(), indent=2))
    else:
        print(render_thought(result.value))


def cmd_serve(config: ServerConfig) -> None:
    try:
        asyncio.run(run_stdio_server(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.debug("Server failure", exc_info=True)
        print(f"Server error: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = resolve_config(args)

    # stdout is the MCP channel; logs go to stderr
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "render":
        cmd_render(args, config)
    else:
        cmd_serve(config)


if __name__ == "__main__":
    main()
