"""
Error taxonomy for the Agent Relay system.

Tool-level errors are recovered locally and converted into error tool results so
the model can explain the failure. Gateway errors propagate to the caller.
"""
from typing import Dict, Iterable, List, Optional


class AgentRelayError(Exception):
    """Base class for all Agent Relay errors."""


class ConfigurationError(AgentRelayError, ValueError):
    """Invalid or incomplete configuration detected at startup."""


class ToolRegistrationError(AgentRelayError):
    """A tool could not be registered (duplicate name or failed configuration)."""


class ToolValidationError(AgentRelayError):
    """Tool-call arguments do not satisfy the tool's declared input shape."""

    def __init__(self, tool_name: str, problems: Iterable[str]):
        self.tool_name = tool_name
        self.problems: List[str] = list(problems)
        details = "; ".join(self.problems) or "invalid arguments"
        super().__init__(f"Invalid arguments for tool '{tool_name}': {details}")


class UnknownToolError(AgentRelayError):
    """The model requested a tool that is not registered."""

    def __init__(self, tool_name: str, available: Optional[Iterable[str]] = None):
        self.tool_name = tool_name
        self.available: List[str] = list(available or [])
        message = f"Unknown tool '{tool_name}'"
        if self.available:
            message += f". Available tools: {', '.join(self.available)}"
        super().__init__(message)


class ToolExecutionError(AgentRelayError):
    """A tool's own logic failed or timed out."""

    def __init__(self, tool_name: str, message: str):
        self.tool_name = tool_name
        super().__init__(f"Error executing tool '{tool_name}': {message}")


class GatewayError(AgentRelayError):
    """The language model provider call failed."""


class TraceFlushError(AgentRelayError):
    """Buffered trace runs could not be persisted."""


def error_payload(kind: str, message: str) -> Dict[str, str]:
    """Build the structured value carried by an error tool result."""
    return {"status": "error", "error": kind, "message": message}


__all__ = [
    "AgentRelayError",
    "ConfigurationError",
    "ToolRegistrationError",
    "ToolValidationError",
    "UnknownToolError",
    "ToolExecutionError",
    "GatewayError",
    "TraceFlushError",
    "error_payload",
]
