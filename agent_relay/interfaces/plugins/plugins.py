"""
Tool system interfaces.

These interfaces define the contracts for tools and the registry that
exposes them to the language model.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel


class Tool(ABC):
    """Interface for tools that can be requested by a model."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the name of the tool."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Get the description shown to the model."""
        pass

    @property
    @abstractmethod
    def input_model(self) -> Type[BaseModel]:
        """Get the declarative input shape of the tool."""
        pass

    @abstractmethod
    def configure(self, config: Dict[str, Any]) -> None:
        """Configure the tool with global configuration."""
        pass

    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """Get the JSON schema for the tool parameters."""
        pass

    @abstractmethod
    async def execute(self, **params) -> Dict[str, Any]:
        """Execute the tool with validated parameters."""
        pass


class ToolRegistry(ABC):
    """Interface for the tool registry."""

    @abstractmethod
    def register_tool(self, tool: Tool) -> None:
        """Register a tool; duplicate names are rejected."""
        pass

    @abstractmethod
    def get_tool(self, tool_name: str) -> Optional[Tool]:
        """Get a tool by name."""
        pass

    @abstractmethod
    def list_tools(self) -> List[Tool]:
        """List registered tools in registration order."""
        pass

    @abstractmethod
    def list_all_tools(self) -> List[str]:
        """List all registered tool names."""
        pass

    @abstractmethod
    def get_tool_schemas(self) -> List[Dict[str, Any]]:
        """Get function-calling definitions for every registered tool."""
        pass
