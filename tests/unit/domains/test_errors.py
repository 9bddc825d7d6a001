"""
Tests for the error taxonomy.
"""

from agent_relay.domains.errors import (
    AgentRelayError,
    ConfigurationError,
    ToolExecutionError,
    ToolValidationError,
    UnknownToolError,
    error_payload,
)


class TestErrors:
    def test_validation_error_lists_problems(self):
        error = ToolValidationError("add", ["a: required field is missing", "b: bad"])

        assert error.tool_name == "add"
        assert error.problems == ["a: required field is missing", "b: bad"]
        assert str(error) == (
            "Invalid arguments for tool 'add': a: required field is missing; b: bad"
        )

    def test_unknown_tool_echoes_name(self):
        error = UnknownToolError("bogusTool", available=["add", "askResearchAgent"])

        assert "bogusTool" in str(error)
        assert str(error).endswith("Available tools: add, askResearchAgent")

    def test_unknown_tool_without_available(self):
        assert str(UnknownToolError("bogusTool")) == "Unknown tool 'bogusTool'"

    def test_execution_error_message(self):
        error = ToolExecutionError("add", "boom")
        assert str(error) == "Error executing tool 'add': boom"

    def test_configuration_error_is_value_error(self):
        error = ConfigurationError("missing key")
        assert isinstance(error, ValueError)
        assert isinstance(error, AgentRelayError)

    def test_error_payload(self):
        assert error_payload("unknown_tool", "nope") == {
            "status": "error",
            "error": "unknown_tool",
            "message": "nope",
        }
