"""
AutoTool implementation for the Agent Relay system.

A tool is described by a pydantic input model; the model doubles as the
JSON schema shown to the language model and as the validation shape for
the arguments it sends back.
"""
from typing import Any, Dict, Type

from pydantic import BaseModel, ConfigDict

from agent_relay.interfaces.plugins.plugins import Tool


class ToolInput(BaseModel):
    """Base class for tool input shapes.

    Unknown fields are rejected and values are not coerced across types, so a
    string or boolean sent for a number fails validation. Integers are still
    accepted for float fields.
    """

    model_config = ConfigDict(extra="forbid", strict=True)


class AutoTool(Tool):
    """Base class for tools described by a pydantic input model."""

    input_schema: Type[BaseModel] = ToolInput

    def __init__(self, name: str, description: str, registry=None):
        """Create the tool, registering it right away when a registry is given."""
        self._name = name
        self._description = description
        self._config = {}

        if registry is not None:
            registry.register_tool(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def input_model(self) -> Type[BaseModel]:
        return self.input_schema

    def configure(self, config: Dict[str, Any]) -> None:
        """Keep the global config for subclasses that need settings."""
        if config is None:
            raise TypeError("Config cannot be None")
        self._config = config

    def get_schema(self) -> Dict[str, Any]:
        """Return the JSON schema derived from the input model."""
        schema = self.input_model.model_json_schema()
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema

    async def execute(self, **params) -> Dict[str, Any]:
        """Run the tool on validated arguments; subclasses implement this."""
        raise NotImplementedError("Tool must implement execute method")
