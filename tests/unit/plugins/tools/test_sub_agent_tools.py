"""
Tests for the tools exposing sub-agents to the main agent.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from agent_relay.domains.tracing import RunHandle
from agent_relay.interfaces.services.agent import SubAgent
from agent_relay.plugins.tools.sub_agents import (
    AskResearchAgentTool,
    QuerySalesAgentTool,
    ResearchQueryInput,
    SalesQueryInput,
)
from agent_relay.services.tracing import _current_run, get_current_run


def make_agent(name, reply):
    agent = MagicMock(spec=SubAgent)
    agent.name = name
    agent.invoke = AsyncMock(return_value=reply)
    return agent


@pytest.fixture
def research_agent():
    return make_agent("research_agent", "Quantum computing uses qubits.")


@pytest.fixture
def sales_agent():
    return make_agent("sales_agent", "Acme is in negotiation.")


class TestAskResearchAgentTool:
    def test_metadata(self, research_agent):
        tool = AskResearchAgentTool(research_agent)

        assert tool.name == "askResearchAgent"
        assert tool.input_model is ResearchQueryInput
        assert tool.get_schema()["required"] == ["query"]

    @pytest.mark.asyncio
    async def test_execute_wraps_answer(self, research_agent):
        result = await AskResearchAgentTool(research_agent).execute(query="What is QC?")

        assert result == {"answer": "Quantum computing uses qubits."}
        research_agent.invoke.assert_awaited_once_with(query="What is QC?")


class TestQuerySalesAgentTool:
    def test_metadata(self, sales_agent):
        tool = QuerySalesAgentTool(sales_agent)

        assert tool.name == "querySalesAgent"
        assert tool.input_model is SalesQueryInput
        assert "required" not in tool.get_schema()

    @pytest.mark.asyncio
    async def test_execute_wraps_summary(self, sales_agent):
        result = await QuerySalesAgentTool(sales_agent).execute(company="Acme")

        assert result == {"summary": "Acme is in negotiation."}
        sales_agent.invoke.assert_awaited_once_with(company="Acme")

    @pytest.mark.asyncio
    async def test_execute_without_company(self, sales_agent):
        await QuerySalesAgentTool(sales_agent).execute()
        sales_agent.invoke.assert_awaited_once_with(company=None)


class TestDetachedInvocation:
    """Sub-agents start a new root trace unless configured otherwise."""

    @pytest.mark.asyncio
    async def test_detached_clears_parent_run(self, research_agent):
        seen = []

        async def invoke(**kwargs):
            seen.append(get_current_run())
            return "ok"

        research_agent.invoke = AsyncMock(side_effect=invoke)
        parent = RunHandle(name="main_agent")
        token = _current_run.set(parent)
        try:
            await AskResearchAgentTool(research_agent).execute(query="q")
            assert get_current_run() is parent
        finally:
            _current_run.reset(token)

        assert seen == [None]

    @pytest.mark.asyncio
    async def test_attached_keeps_parent_run(self, research_agent):
        seen = []

        async def invoke(**kwargs):
            seen.append(get_current_run())
            return "ok"

        research_agent.invoke = AsyncMock(side_effect=invoke)
        parent = RunHandle(name="main_agent")
        token = _current_run.set(parent)
        try:
            await AskResearchAgentTool(research_agent, detached=False).execute(query="q")
        finally:
            _current_run.reset(token)

        assert seen == [parent]

    def test_configure_reads_tracing_section(self, research_agent):
        tool = AskResearchAgentTool(research_agent)
        tool.configure({"tracing": {"detach_sub_agents": False}})
        assert tool.detached is False

    def test_configure_without_tracing_section(self, research_agent):
        tool = AskResearchAgentTool(research_agent, detached=False)
        tool.configure({})
        assert tool.detached is False
