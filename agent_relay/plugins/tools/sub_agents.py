"""
Tools exposing the sub-agents to the main agent.

Each tool calls the sub-agent's ``invoke`` and wraps the text in a
structured result. When ``detached`` is set the sub-agent runs as the root
of a new trace instead of a child of the main agent's run.
"""
import logging
from typing import Any, Dict, Optional

from pydantic import Field

from agent_relay.interfaces.services.agent import SubAgent
from agent_relay.plugins.tools.auto_tool import AutoTool, ToolInput
from agent_relay.services.tracing import detached_run

logger = logging.getLogger(__name__)


class ResearchQueryInput(ToolInput):
    query: str = Field(
        ..., min_length=1, description="The research question or topic to investigate"
    )


class SalesQueryInput(ToolInput):
    company: Optional[str] = Field(
        None,
        description="Optional company name to filter on; leave empty for full summary",
    )


class SubAgentTool(AutoTool):
    """Base class for tools that delegate to a sub-agent."""

    def __init__(
        self,
        name: str,
        description: str,
        agent: SubAgent,
        detached: bool = True,
        registry=None,
    ):
        self.agent = agent
        self.detached = detached
        super().__init__(name=name, description=description, registry=registry)

    def configure(self, config: Dict[str, Any]) -> None:
        super().configure(config)
        tracing = config.get("tracing", {})
        if isinstance(tracing, dict) and "detach_sub_agents" in tracing:
            self.detached = bool(tracing["detach_sub_agents"])

    async def _invoke(self, **kwargs: Any) -> str:
        logger.info(
            f"Delegating to sub-agent '{self.agent.name}' (detached={self.detached})"
        )
        if self.detached:
            with detached_run():
                return await self.agent.invoke(**kwargs)
        return await self.agent.invoke(**kwargs)


class AskResearchAgentTool(SubAgentTool):
    input_schema = ResearchQueryInput

    def __init__(self, agent: SubAgent, detached: bool = True, registry=None):
        super().__init__(
            name="askResearchAgent",
            description=(
                "Delegate complex research or analysis questions to a specialized "
                "research agent. Use this when you need detailed information or "
                "in-depth analysis."
            ),
            agent=agent,
            detached=detached,
            registry=registry,
        )

    async def execute(self, query: str) -> Dict[str, Any]:
        answer = await self._invoke(query=query)
        return {"answer": answer}


class QuerySalesAgentTool(SubAgentTool):
    input_schema = SalesQueryInput

    def __init__(self, agent: SubAgent, detached: bool = True, registry=None):
        super().__init__(
            name="querySalesAgent",
            description=(
                "Look up deals in the sales database. Use to gather pipeline "
                "info about companies."
            ),
            agent=agent,
            detached=detached,
            registry=registry,
        )

    async def execute(self, company: Optional[str] = None) -> Dict[str, Any]:
        summary = await self._invoke(company=company)
        return {"summary": summary}
