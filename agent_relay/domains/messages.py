"""
Domain models for conversations, tool calls and agent run results.

Tool arguments and results are dynamic JSON values because their shapes are
only known at the registry's validation boundary.
"""
import json
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model accepting and emitting camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class FinishReason(str, Enum):
    """Why a model round ended."""

    STOP = "stop"
    TOOL_CALLS = "tool-calls"
    LENGTH = "length"
    CONTENT_FILTER = "content-filter"
    ERROR = "error"
    OTHER = "other"

    @classmethod
    def from_provider(cls, value: Optional[str]) -> "FinishReason":
        """Normalize a provider finish reason (e.g. ``tool_calls``)."""
        if not value:
            return cls.OTHER
        normalized = value.strip().lower().replace("_", "-")
        if normalized == "function-call":
            return cls.TOOL_CALLS
        try:
            return cls(normalized)
        except ValueError:
            return cls.OTHER


class ToolCall(WireModel):
    """A model's request to invoke a named tool."""

    id: str = Field(..., description="Identifier unique within one model turn")
    name: str = Field(..., description="Registered tool name")
    arguments: JsonValue = Field(
        default_factory=dict, description="Raw, unvalidated arguments"
    )


class ToolResult(WireModel):
    """The answer to exactly one ToolCall."""

    tool_call_id: str = Field(..., description="Id of the ToolCall answered")
    tool_name: str = Field("", description="Name of the tool that produced it")
    value: JsonValue = Field(None, description="Structured payload or plain text")
    is_error: bool = Field(False, description="True when value describes a failure")

    def content_text(self) -> str:
        """Render the value as message content, JSON-encoding non-strings."""
        if isinstance(self.value, str):
            return self.value
        return json.dumps(self.value)


class Message(WireModel):
    """One entry in an ordered conversation."""

    role: Role
    content: JsonValue = ""
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant_tool_calls(
        cls, tool_calls: List[ToolCall], content: str = ""
    ) -> "Message":
        return cls(role=Role.ASSISTANT, content=content, tool_calls=list(tool_calls))

    @classmethod
    def tool_result(cls, result: ToolResult) -> "Message":
        return cls(
            role=Role.TOOL,
            content=result.content_text(),
            tool_call_id=result.tool_call_id,
        )


class Conversation(BaseModel):
    """Immutable, append-only message sequence.

    Every extension returns a new Conversation, so each model round can be
    inspected independently.
    """

    model_config = ConfigDict(frozen=True)

    messages: Tuple[Message, ...] = ()

    @classmethod
    def start(
        cls, system_prompt: str, messages: Optional[Iterable[Message]] = None
    ) -> "Conversation":
        return cls(messages=(Message.system(system_prompt), *(messages or ())))

    def extend(self, messages: Iterable[Message]) -> "Conversation":
        return Conversation(messages=(*self.messages, *messages))

    def __len__(self) -> int:
        return len(self.messages)


class CompletionResult(BaseModel):
    """What the Model Gateway returns for one round.

    ``tool_results`` and ``response_messages`` are only set by gateways that
    execute tools themselves and can hand back the canonical transcript.
    """

    text: str = ""
    tool_calls: List[ToolCall] = Field(default_factory=list)
    tool_results: List[ToolResult] = Field(default_factory=list)
    finish_reason: FinishReason = FinishReason.OTHER
    response_messages: Optional[List[Message]] = None
    usage: Optional[Dict[str, Any]] = None


class AgentRunResult(WireModel):
    """Final structured response of an agent run."""

    text: str = ""
    tool_calls: List[ToolCall] = Field(default_factory=list)
    tool_results: List[ToolResult] = Field(default_factory=list)
    finish_reason: FinishReason = FinishReason.OTHER


__all__ = [
    "WireModel",
    "Role",
    "FinishReason",
    "ToolCall",
    "ToolResult",
    "Message",
    "Conversation",
    "CompletionResult",
    "AgentRunResult",
]
