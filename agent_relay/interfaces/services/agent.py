from abc import ABC, abstractmethod
from typing import Any, List, Optional

from agent_relay.domains.messages import AgentRunResult, Message


class SubAgent(ABC):
    """Interface for specialized agents the main agent delegates to."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the agent name."""
        pass

    @abstractmethod
    async def invoke(self, *args: Any, **kwargs: Any) -> str:
        """Run the agent on a domain input and return its text answer."""
        pass


class OrchestratorService(ABC):
    """Interface for the main agent handling a chat conversation."""

    @abstractmethod
    async def process(
        self, messages: List[Message], system_prompt: Optional[str] = None
    ) -> AgentRunResult:
        """Run the main agent over a conversation."""
        pass
