"""
LLM provider adapter for the Agent Relay system.

Implements the LLMProvider interface (the model gateway) on top of the
OpenAI Chat Completions API with function calling.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import logfire
from openai import AsyncOpenAI, OpenAIError

from agent_relay.domains.errors import GatewayError
from agent_relay.domains.messages import (
    CompletionResult,
    FinishReason,
    Message,
    Role,
    ToolCall,
)
from agent_relay.interfaces.providers.llm import LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_CHAT_MODEL = "gpt-4o"
DEFAULT_SUB_AGENT_MODEL = "gpt-4o-mini"


def _content_for_wire(content: Any) -> Any:
    """Strings and content-part lists pass through; other values become JSON."""
    if content is None:
        return ""
    if isinstance(content, (str, list)):
        return content
    return json.dumps(content)


def message_to_openai(message: Message) -> Dict[str, Any]:
    """Convert a domain message into a Chat Completions message."""
    if message.role == Role.TOOL:
        return {
            "role": "tool",
            "tool_call_id": message.tool_call_id or "",
            "content": _content_for_wire(message.content),
        }

    if message.role == Role.ASSISTANT and message.tool_calls:
        return {
            "role": "assistant",
            "content": message.content or None,
            "tool_calls": [
                {
                    "id": tc.id,
                    "type": "function",
                    "function": {
                        "name": tc.name,
                        "arguments": tc.arguments
                        if isinstance(tc.arguments, str)
                        else json.dumps(tc.arguments),
                    },
                }
                for tc in message.tool_calls
            ],
        }

    return {"role": message.role.value, "content": _content_for_wire(message.content)}


def parse_tool_arguments(raw: Optional[str]) -> Any:
    """Decode provider tool arguments, keeping the raw string if it is not JSON."""
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"Tool call arguments are not valid JSON: {raw[:200]}")
        return raw


class OpenAIAdapter(LLMProvider):
    """OpenAI implementation of LLMProvider using Chat Completions."""

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        instrument_logfire: bool = False,
    ):
        self.api_key = api_key
        self.client = AsyncOpenAI(api_key=api_key)
        self.text_model = model or DEFAULT_CHAT_MODEL

        self.logfire = False
        if instrument_logfire:
            try:
                logfire.instrument_openai(self.client)
                self.logfire = True
                logger.info("OpenAI client instrumented with Logfire.")
            except Exception as e:
                logger.error(f"Failed to instrument OpenAI client with Logfire: {e}")

    async def complete(
        self,
        messages: Sequence[Message],
        tools: Optional[List[Dict[str, Any]]] = None,
        model: Optional[str] = None,
    ) -> CompletionResult:
        request_params: Dict[str, Any] = {
            "model": model or self.text_model,
            "messages": [message_to_openai(m) for m in messages],
        }
        if tools:
            request_params["tools"] = tools

        try:
            response = await self.client.chat.completions.create(**request_params)
        except OpenAIError as e:
            logger.error(f"OpenAI API error during completion: {e}")
            raise GatewayError(f"OpenAI API error: {e}") from e
        except Exception as e:
            logger.exception(f"Error in complete: {e}")
            raise GatewayError(str(e)) from e

        if not response.choices:
            raise GatewayError("OpenAI returned no choices")

        choice = response.choices[0]
        message = choice.message
        tool_calls = [
            ToolCall(
                id=tc.id,
                name=tc.function.name,
                arguments=parse_tool_arguments(tc.function.arguments),
            )
            for tc in (message.tool_calls or [])
        ]

        usage = None
        if getattr(response, "usage", None):
            usage = {
                "input_tokens": response.usage.prompt_tokens,
                "output_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }
            logger.info(
                f"OpenAI API Usage: Input={usage['input_tokens']}, "
                f"Output={usage['output_tokens']}, Total={usage['total_tokens']}"
            )

        return CompletionResult(
            text=message.content or "",
            tool_calls=tool_calls,
            finish_reason=FinishReason.from_provider(choice.finish_reason),
            usage=usage,
        )
