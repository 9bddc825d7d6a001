"""
Sub-agent implementations.

Each sub-agent turns a domain input into text through its own model
interaction and records itself as one traced run. The sales agent owns a
private dataset lookup tool and runs its own continuation engine.
"""
import logging
from typing import Optional

from agent_relay.domains.agent import SubAgentConfig
from agent_relay.domains.messages import Message
from agent_relay.domains.sales import SalesDataset
from agent_relay.interfaces.providers.llm import LLMProvider
from agent_relay.interfaces.providers.tracing import TraceSink
from agent_relay.interfaces.services.agent import SubAgent
from agent_relay.plugins.registry import ToolRegistry
from agent_relay.plugins.tools.sales_lookup import SalesLookupTool
from agent_relay.prompts import RESEARCH_AGENT_SYSTEM_PROMPT, SALES_AGENT_SYSTEM_PROMPT
from agent_relay.services.continuation import ContinuationEngine
from agent_relay.services.tool_executor import DEFAULT_TOOL_TIMEOUT, ToolExecutor
from agent_relay.services.tracing import trace_run

logger = logging.getLogger(__name__)

DEFAULT_RESEARCH_AGENT = SubAgentConfig(
    name="research_agent",
    instructions=RESEARCH_AGENT_SYSTEM_PROMPT,
    run_type="llm",
)

DEFAULT_SALES_AGENT = SubAgentConfig(
    name="sales_agent",
    instructions=SALES_AGENT_SYSTEM_PROMPT,
    run_type="tool",
)


class ModelSubAgent(SubAgent):
    """Shared wiring for sub-agents backed by the model gateway."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        config: SubAgentConfig,
        trace_sink: Optional[TraceSink] = None,
    ):
        self.llm_provider = llm_provider
        self.config = config
        self.trace_sink = trace_sink

    @property
    def name(self) -> str:
        return self.config.name


class ResearchAgent(ModelSubAgent):
    """Answers open-ended research questions in a single model round."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        config: SubAgentConfig = DEFAULT_RESEARCH_AGENT,
        trace_sink: Optional[TraceSink] = None,
    ):
        super().__init__(llm_provider, config, trace_sink)

    async def invoke(self, query: str) -> str:
        async with trace_run(
            self.trace_sink,
            self.config.name,
            run_type=self.config.run_type,
            inputs={"query": query},
            replicas=self.config.replicas,
        ) as run:
            result = await self.llm_provider.complete(
                [
                    Message.system(self.config.instructions),
                    Message.user(query),
                ],
                model=self.config.model,
            )
            text = result.text or ""
            if run is not None:
                run.outputs = {"text": text}
            return text


class SalesAgent(ModelSubAgent):
    """Summarizes the sales pipeline using its private lookup tool."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        dataset: SalesDataset,
        config: SubAgentConfig = DEFAULT_SALES_AGENT,
        trace_sink: Optional[TraceSink] = None,
        tool_timeout: Optional[float] = DEFAULT_TOOL_TIMEOUT,
    ):
        super().__init__(llm_provider, config, trace_sink)
        self.dataset = dataset
        self.tool_registry = ToolRegistry()
        self.tool_registry.register_tool(SalesLookupTool(dataset))
        self.engine = ContinuationEngine(
            llm_provider=llm_provider,
            tool_registry=self.tool_registry,
            tool_executor=ToolExecutor(
                self.tool_registry, timeout=tool_timeout, trace_sink=trace_sink
            ),
            model=config.model,
        )

    @staticmethod
    def build_prompt(company: Optional[str] = None) -> str:
        if company:
            return f"Get sales pipeline information for {company}"
        return "Get sales pipeline information"

    async def invoke(self, company: Optional[str] = None) -> str:
        async with trace_run(
            self.trace_sink,
            self.config.name,
            run_type=self.config.run_type,
            inputs={"company": company},
            replicas=self.config.replicas,
        ) as run:
            result = await self.engine.run(
                [Message.user(self.build_prompt(company))],
                system_prompt=self.config.instructions,
            )
            if not result.text:
                logger.warning(
                    f"Sales agent produced no text (finish_reason={result.finish_reason.value})"
                )
            if run is not None:
                run.outputs = {
                    "text": result.text,
                    "tool_calls": len(result.tool_calls),
                }
            return result.text or ""
