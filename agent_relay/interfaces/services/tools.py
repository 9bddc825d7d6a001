from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from pydantic import BaseModel

from agent_relay.domains.messages import ToolCall, ToolResult


class SchemaValidator(ABC):
    """Interface for validating untrusted tool arguments."""

    @abstractmethod
    def validate(
        self, shape: Type[BaseModel], raw_input: Any, tool_name: str = ""
    ) -> Dict[str, Any]:
        """Return validated arguments or raise ToolValidationError."""
        pass


class ToolExecutor(ABC):
    """Interface for executing model-requested tool calls."""

    @abstractmethod
    async def execute(self, tool_call: ToolCall) -> ToolResult:
        """Execute one tool call; failures become error results."""
        pass

    @abstractmethod
    async def execute_all(self, tool_calls: List[ToolCall]) -> List[ToolResult]:
        """Execute tool calls concurrently, returning results in call order."""
        pass
