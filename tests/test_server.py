"""Tests for the MCP tool surface."""
import asyncio
import json

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from sequential_thinking_mcp.config import SERVER_NAME, TOOL_NAME, ServerConfig
from sequential_thinking_mcp.errors import INVALID_INPUT, UNKNOWN_TOOL, ToolCallError
from sequential_thinking_mcp.server import build_server, handle_tool_call
from sequential_thinking_mcp.tool_schemas import get_tool_schemas


class TestToolSchema:
    """Tests for the advertised tool definition."""

    def test_single_tool(self):
        """Test exactly one tool is advertised."""
        tools = get_tool_schemas()
        assert [tool.name for tool in tools] == ["sequentialthinking"]

    def test_required_fields(self):
        """Test the schema marks the four core fields required."""
        schema = get_tool_schemas()[0].inputSchema
        assert sorted(schema["required"]) == sorted(
            ["thought", "nextThoughtNeeded", "thoughtNumber", "totalThoughts"]
        )
        assert set(schema["properties"]) >= {
            "isRevision",
            "revisesThought",
            "branchFromThought",
            "branchId",
            "needsMoreThoughts",
        }


class TestHandleToolCall:
    """Tests for transport-independent dispatch."""

    def test_success_returns_json_text(self, quiet_processor, first_thought):
        """Test a valid call returns the indented JSON summary."""
        content = handle_tool_call(quiet_processor, TOOL_NAME, first_thought)
        assert len(content) == 1
        assert content[0].type == "text"
        assert content[0].text.startswith("{\n  ")
        assert json.loads(content[0].text)["thoughtHistoryLength"] == 1

    def test_validation_failure_raises(self, quiet_processor):
        """Test invalid arguments raise ToolCallError naming the field."""
        with pytest.raises(ToolCallError) as exc_info:
            handle_tool_call(quiet_processor, TOOL_NAME, {"thought": "x", "thoughtNumber": 1})
        assert str(exc_info.value) == "invalid totalThoughts: must be a number"
        assert exc_info.value.code == INVALID_INPUT
        assert quiet_processor.get_history() == []

    def test_unknown_tool(self, quiet_processor, first_thought):
        """Test calling an unknown tool name."""
        with pytest.raises(ToolCallError) as exc_info:
            handle_tool_call(quiet_processor, "other", first_thought)
        assert exc_info.value.code == UNKNOWN_TOOL
        assert quiet_processor.get_history() == []


class TestServerRoundTrip:
    """Tests through an in-memory MCP client session."""

    @staticmethod
    def _run(coro_factory):
        server = build_server(config=ServerConfig(disable_thought_logging=True))

        async def scenario():
            async with create_connected_server_and_client_session(server) as client:
                return await coro_factory(client)

        return asyncio.run(scenario())

    def test_server_name(self):
        """Test the server identifies itself."""
        assert build_server(config=ServerConfig(disable_thought_logging=True)).name == SERVER_NAME

    def test_list_tools(self):
        """Test the tool is listed over the protocol."""

        async def scenario(client):
            return await client.list_tools()

        result = self._run(scenario)
        assert [tool.name for tool in result.tools] == [TOOL_NAME]

    def test_call_sequence(self, first_thought, branch_thought):
        """Test two calls share state and return summaries."""

        async def scenario(client):
            first = await client.call_tool(TOOL_NAME, first_thought)
            second = await client.call_tool(TOOL_NAME, branch_thought)
            return first, second

        first, second = self._run(scenario)
        assert not first.isError
        assert json.loads(first.content[0].text)["thoughtHistoryLength"] == 1
        assert json.loads(second.content[0].text) == {
            "thoughtNumber": 5,
            "totalThoughts": 5,
            "nextThoughtNeeded": False,
            "branches": ["x"],
            "thoughtHistoryLength": 2,
        }

    def test_validation_error_is_tool_error(self, first_thought):
        """Test a missing field yields an isError result, not a protocol fault."""
        payload = dict(first_thought)
        del payload["nextThoughtNeeded"]

        async def scenario(client):
            failed = await client.call_tool(TOOL_NAME, payload)
            after = await client.call_tool(TOOL_NAME, first_thought)
            return failed, after

        failed, after = self._run(scenario)
        assert failed.isError
        assert "nextThoughtNeeded" in failed.content[0].text
        assert json.loads(after.content[0].text)["thoughtHistoryLength"] == 1

    def test_mistyped_optional_field_passes_through(self, first_thought):
        """Test the SDK does not reject a mistyped optional field."""

        async def scenario(client):
            return await client.call_tool(TOOL_NAME, {**first_thought, "isRevision": "yes"})

        result = self._run(scenario)
        assert not result.isError
        assert json.loads(result.content[0].text)["thoughtHistoryLength"] == 1
