"""
Conversation continuation engine.

Drives the tool-call continuation protocol: when a model round stops because
it wants tools and has produced no text, the requested tools are executed, the
conversation is extended with the tool-call and tool-result messages, and the
model is asked once more. At most one continuation round is performed, so a
request costs at most two model calls.
"""
import logging
from typing import List, Optional, Sequence

from agent_relay.domains.errors import GatewayError
from agent_relay.domains.messages import (
    AgentRunResult,
    CompletionResult,
    Conversation,
    FinishReason,
    Message,
    ToolResult,
)
from agent_relay.interfaces.plugins.plugins import ToolRegistry
from agent_relay.interfaces.providers.llm import LLMProvider
from agent_relay.interfaces.services.tools import ToolExecutor

logger = logging.getLogger(__name__)


class ContinuationEngine:
    """Runs a model conversation through at most one tool continuation."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        tool_registry: ToolRegistry,
        tool_executor: ToolExecutor,
        model: Optional[str] = None,
    ):
        self.llm_provider = llm_provider
        self.tool_registry = tool_registry
        self.tool_executor = tool_executor
        self.model = model

    async def run(
        self, messages: Sequence[Message], system_prompt: str
    ) -> AgentRunResult:
        """Run the conversation to a final answer.

        Args:
            messages: Caller-supplied conversation, without the system prompt
            system_prompt: Prepended as the first message

        Returns:
            Final text with the first round's tool calls and tool results

        Raises:
            GatewayError: if a model call fails; not retried
        """
        conversation = Conversation.start(system_prompt, messages)
        first = await self._complete(conversation)

        if not self._needs_continuation(first):
            return AgentRunResult(
                text=first.text,
                tool_calls=first.tool_calls,
                tool_results=first.tool_results,
                finish_reason=first.finish_reason,
            )

        logger.info(
            f"Round 1 requested {len(first.tool_calls)} tool call(s) without text; continuing"
        )
        tool_results = await self._resolve_tool_results(first)
        continued = conversation.extend(self._continuation_messages(first, tool_results))
        second = await self._complete(continued)

        if second.finish_reason == FinishReason.TOOL_CALLS and not second.text:
            logger.warning(
                "Continuation round requested more tools; returning without another round"
            )

        return AgentRunResult(
            text=second.text or first.text or "",
            tool_calls=first.tool_calls,
            tool_results=tool_results,
            finish_reason=second.finish_reason or first.finish_reason,
        )

    async def _complete(self, conversation: Conversation) -> CompletionResult:
        tools = self.tool_registry.get_tool_schemas() or None
        try:
            return await self.llm_provider.complete(
                list(conversation.messages), tools=tools, model=self.model
            )
        except GatewayError:
            raise
        except Exception as e:
            logger.exception(f"Model gateway call failed: {e}")
            raise GatewayError(str(e)) from e

    @staticmethod
    def _needs_continuation(result: CompletionResult) -> bool:
        if result.text or result.finish_reason == FinishReason.STOP:
            return False
        return result.finish_reason == FinishReason.TOOL_CALLS and bool(
            result.tool_calls
        )

    async def _resolve_tool_results(self, result: CompletionResult) -> List[ToolResult]:
        """Use the gateway's own results when complete, else execute the calls."""
        if self._gateway_answered_all(result):
            return result.tool_results
        return await self.tool_executor.execute_all(result.tool_calls)

    @staticmethod
    def _gateway_answered_all(result: CompletionResult) -> bool:
        answered = {r.tool_call_id for r in result.tool_results}
        return bool(result.tool_results) and all(
            call.id in answered for call in result.tool_calls
        )

    def _continuation_messages(
        self, result: CompletionResult, tool_results: List[ToolResult]
    ) -> List[Message]:
        """Messages appended before the continuation round.

        The gateway's canonical response messages are reused verbatim when it
        executed the tools itself; otherwise the assistant tool-call message and
        one tool message per result are rebuilt here.
        """
        if result.response_messages and self._gateway_answered_all(result):
            return list(result.response_messages)

        rebuilt = [Message.assistant_tool_calls(result.tool_calls, content=result.text)]
        rebuilt.extend(Message.tool_result(r) for r in tool_results)
        return rebuilt
