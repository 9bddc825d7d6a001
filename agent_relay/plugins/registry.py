"""
Tool registry for the Agent Relay system.

This module implements the concrete ToolRegistry that maps tool names to
tool instances and presents them to the model gateway.
"""

import logging
from typing import Dict, List, Any, Optional

from agent_relay.domains.errors import ToolRegistrationError
from agent_relay.interfaces.plugins.plugins import (
    ToolRegistry as ToolRegistryInterface,
)
from agent_relay.interfaces.plugins.plugins import Tool

logger = logging.getLogger(__name__)


class ToolRegistry(ToolRegistryInterface):
    """Instance-based registry; read-only once startup wiring is done."""

    def __init__(self, config: Dict[str, Any] = None):
        self._tools: Dict[str, Tool] = {}
        self._config = config or {}

    def register_tool(self, tool: Tool) -> None:
        """Register and configure a tool.

        Raises:
            ToolRegistrationError: if the name is taken or configuration fails
        """
        if tool.name in self._tools:
            raise ToolRegistrationError(
                f"Tool '{tool.name}' is already registered"
            )
        try:
            tool.configure(self._config)
        except Exception as e:
            logger.error(f"Error configuring tool {tool.name}: {e}")
            raise ToolRegistrationError(
                f"Tool '{tool.name}' failed to configure: {e}"
            ) from e

        self._tools[tool.name] = tool
        logger.info(f"Successfully registered and configured tool: {tool.name}")

    def get_tool(self, tool_name: str) -> Optional[Tool]:
        return self._tools.get(tool_name)

    def list_tools(self) -> List[Tool]:
        return list(self._tools.values())

    def list_all_tools(self) -> List[str]:
        return list(self._tools.keys())

    def get_tool_schemas(self) -> List[Dict[str, Any]]:
        """Function-calling definitions; the only view of a tool the model gets."""
        schemas = [
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.get_schema(),
                },
            }
            for tool in self._tools.values()
        ]
        logger.debug(f"Tools presented to model: {self.list_all_tools()}")
        return schemas

    def __contains__(self, tool_name: str) -> bool:
        return tool_name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
