"""
Tests for the AutoTool base class.

This module provides test coverage for the AutoTool implementation,
including initialization, configuration, schema derivation and execution.
"""

import pytest
from unittest.mock import MagicMock
from pydantic import Field

from agent_relay.plugins.tools.auto_tool import AutoTool, ToolInput
from agent_relay.interfaces.plugins.plugins import Tool


class GreetInput(ToolInput):
    name: str = Field(..., description="Who to greet")
    excited: bool = Field(False, description="Add an exclamation mark")


class GreetTool(AutoTool):
    """Concrete implementation of AutoTool for testing."""

    input_schema = GreetInput

    async def execute(self, name: str, excited: bool = False):
        return {"greeting": f"Hello {name}{'!' if excited else ''}"}


@pytest.fixture
def mock_registry():
    """Create a mock registry."""
    return MagicMock()


class TestAutoTool:
    """Test suite for AutoTool base class."""

    def test_init_basic(self):
        tool = GreetTool("greet", "Greets someone")

        assert isinstance(tool, Tool)
        assert tool.name == "greet"
        assert tool.description == "Greets someone"
        assert tool.input_model is GreetInput
        assert tool._config == {}

    def test_init_with_registry(self, mock_registry):
        tool = GreetTool("greet", "Greets someone", registry=mock_registry)
        mock_registry.register_tool.assert_called_once_with(tool)

    def test_configure(self):
        tool = GreetTool("greet", "Greets someone")
        tool.configure({"key": "value"})
        assert tool._config == {"key": "value"}

    def test_configure_none(self):
        tool = GreetTool("greet", "Greets someone")
        with pytest.raises(TypeError):
            tool.configure(None)

    def test_get_schema_from_input_model(self):
        schema = GreetTool("greet", "Greets someone").get_schema()

        assert "title" not in schema
        assert schema["type"] == "object"
        assert schema["required"] == ["name"]
        assert schema["properties"]["name"]["type"] == "string"
        assert schema["properties"]["excited"]["default"] is False
        assert schema["additionalProperties"] is False

    def test_get_schema_without_fields(self):
        schema = AutoTool("noop", "Does nothing").get_schema()
        assert schema["properties"] == {}

    @pytest.mark.asyncio
    async def test_execute(self):
        tool = GreetTool("greet", "Greets someone")
        assert await tool.execute(name="Ada", excited=True) == {"greeting": "Hello Ada!"}

    @pytest.mark.asyncio
    async def test_base_execute_not_implemented(self):
        with pytest.raises(NotImplementedError):
            await AutoTool("noop", "Does nothing").execute()
