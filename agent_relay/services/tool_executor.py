"""
Tool executor service.

Looks up, validates and runs the tools a model asked for. Every failure is
converted into an error tool result so the conversation can continue and the
model can explain what went wrong.
"""
import asyncio
import logging
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from agent_relay.domains.errors import (
    ToolExecutionError,
    ToolValidationError,
    UnknownToolError,
    error_payload,
)
from agent_relay.domains.messages import ToolCall, ToolResult
from agent_relay.interfaces.plugins.plugins import ToolRegistry
from agent_relay.interfaces.providers.tracing import TraceSink
from agent_relay.interfaces.services.tools import (
    SchemaValidator as SchemaValidatorInterface,
    ToolExecutor as ToolExecutorInterface,
)
from agent_relay.services.tracing import trace_run
from agent_relay.services.validation import SchemaValidator

logger = logging.getLogger(__name__)

DEFAULT_TOOL_TIMEOUT = 60.0


class ToolExecutor(ToolExecutorInterface):
    """Executes tool calls against a registry."""

    def __init__(
        self,
        tool_registry: ToolRegistry,
        validator: Optional[SchemaValidatorInterface] = None,
        timeout: Optional[float] = DEFAULT_TOOL_TIMEOUT,
        trace_sink: Optional[TraceSink] = None,
    ):
        """Initialize the executor.

        Args:
            tool_registry: Registry the tool names are resolved against
            validator: Argument validator, defaults to SchemaValidator
            timeout: Seconds a single tool may run; None disables the bound
            trace_sink: Optional sink recording one ``tool`` run per call
        """
        self.tool_registry = tool_registry
        self.validator = validator or SchemaValidator()
        self.timeout = timeout
        self.trace_sink = trace_sink

    async def execute(self, tool_call: ToolCall) -> ToolResult:
        """Execute one tool call. Never raises for tool-level failures."""
        async with trace_run(
            self.trace_sink,
            tool_call.name,
            run_type="tool",
            inputs={"id": tool_call.id, "arguments": tool_call.arguments},
        ) as run:
            result = await self._execute(tool_call)
            if run is not None:
                run.outputs = {"value": result.value, "is_error": result.is_error}
                if result.is_error:
                    run.error = result.content_text()
            return result

    async def _execute(self, tool_call: ToolCall) -> ToolResult:
        try:
            value = await self._run_tool(tool_call)
        except UnknownToolError as e:
            logger.warning(str(e))
            return self._error_result(tool_call, "unknown_tool", str(e))
        except ToolValidationError as e:
            return self._error_result(tool_call, "validation_error", str(e))
        except ToolExecutionError as e:
            return self._error_result(tool_call, "execution_error", str(e))
        except Exception as e:
            logger.exception(f"Unexpected error handling tool '{tool_call.name}': {e}")
            return self._error_result(
                tool_call, "execution_error", f"{type(e).__name__}: {e}"
            )

        try:
            return ToolResult(
                tool_call_id=tool_call.id, tool_name=tool_call.name, value=value
            )
        except PydanticValidationError:
            logger.error(f"Tool '{tool_call.name}' returned a non-JSON result")
            return self._error_result(
                tool_call, "execution_error", "tool returned a non-JSON result"
            )

    async def _run_tool(self, tool_call: ToolCall) -> Any:
        tool = self.tool_registry.get_tool(tool_call.name)
        if tool is None:
            raise UnknownToolError(
                tool_call.name, available=self.tool_registry.list_all_tools()
            )

        params = self.validator.validate(
            tool.input_model, tool_call.arguments, tool_name=tool.name
        )

        logger.info(f"Executing tool '{tool.name}' with params: {params}")
        try:
            result = await asyncio.wait_for(tool.execute(**params), self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Tool '{tool.name}' timed out after {self.timeout}s")
            raise ToolExecutionError(
                tool.name, f"timed out after {self.timeout} seconds"
            ) from e
        except Exception as e:
            logger.exception(f"Error executing tool '{tool.name}': {e}")
            raise ToolExecutionError(tool.name, str(e)) from e

        logger.info(f"Tool '{tool.name}' completed")
        return result

    def _error_result(
        self, tool_call: ToolCall, kind: str, message: str
    ) -> ToolResult:
        return ToolResult(
            tool_call_id=tool_call.id,
            tool_name=tool_call.name,
            value=error_payload(kind, message),
            is_error=True,
        )

    async def execute_all(self, tool_calls: List[ToolCall]) -> List[ToolResult]:
        """Run the calls concurrently; results keep the order of ``tool_calls``."""
        if not tool_calls:
            return []
        results = await asyncio.gather(
            *(self.execute(tool_call) for tool_call in tool_calls)
        )
        return list(results)

