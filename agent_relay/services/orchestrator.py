"""
Main agent service.

Receives a chat conversation, lets the model decide whether to delegate to
the research or sales sub-agent, and returns the structured result.
"""
import logging
from typing import List, Optional

from agent_relay.domains.messages import AgentRunResult, Message
from agent_relay.interfaces.providers.tracing import TraceSink
from agent_relay.interfaces.services.agent import (
    OrchestratorService as OrchestratorServiceInterface,
)
from agent_relay.prompts import MAIN_AGENT_SYSTEM_PROMPT
from agent_relay.services.continuation import ContinuationEngine
from agent_relay.services.tracing import trace_run

logger = logging.getLogger(__name__)


class OrchestratorService(OrchestratorServiceInterface):
    """Runs the main agent over the continuation engine."""

    def __init__(
        self,
        engine: ContinuationEngine,
        trace_sink: Optional[TraceSink] = None,
        system_prompt: str = MAIN_AGENT_SYSTEM_PROMPT,
        run_name: str = "main_agent",
    ):
        """Initialize the orchestrator.

        Args:
            engine: Continuation engine over the main tool registry
            trace_sink: Optional sink; the whole request is one ``chain`` run
            system_prompt: Default system prompt of the main agent
            run_name: Name of the root trace run
        """
        self.engine = engine
        self.trace_sink = trace_sink
        self.system_prompt = system_prompt
        self.run_name = run_name

    async def process(
        self, messages: List[Message], system_prompt: Optional[str] = None
    ) -> AgentRunResult:
        logger.info(f"Processing conversation with {len(messages)} message(s)")
        async with trace_run(
            self.trace_sink,
            self.run_name,
            run_type="chain",
            inputs={"messages": [m.to_wire() for m in messages]},
        ) as run:
            result = await self.engine.run(
                messages, system_prompt=system_prompt or self.system_prompt
            )
            logger.info(
                f"Main agent finished: finish_reason={result.finish_reason.value}, "
                f"tool_calls={len(result.tool_calls)}"
            )
            if run is not None:
                run.outputs = result.to_wire()
            return result
