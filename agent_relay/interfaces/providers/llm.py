from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from agent_relay.domains.messages import CompletionResult, Message


class LLMProvider(ABC):
    """Interface for language model providers (the Model Gateway)."""

    @abstractmethod
    async def complete(
        self,
        messages: Sequence[Message],
        tools: Optional[List[Dict[str, Any]]] = None,
        model: Optional[str] = None,
    ) -> CompletionResult:
        """Ask the model for a completion or a tool-call decision.

        Raises GatewayError when the provider call fails.
        """
        pass
