"""
Factory for creating and wiring components of the Agent Relay system.

This module handles the creation and dependency injection for the model
gateway, the trace sink, the sub-agents, their tools and the main agent.
"""

import logging
from typing import Any, Dict, List, Optional

from agent_relay.adapters.logfire_tracer import DEFAULT_PROJECT, LogfireTraceSink
from agent_relay.adapters.openai_adapter import DEFAULT_SUB_AGENT_MODEL, OpenAIAdapter
from agent_relay.domains.agent import SubAgentConfig
from agent_relay.domains.errors import ConfigurationError
from agent_relay.domains.sales import SalesDataset
from agent_relay.plugins.registry import ToolRegistry
from agent_relay.plugins.tools.sub_agents import (
    AskResearchAgentTool,
    QuerySalesAgentTool,
)
from agent_relay.prompts import (
    MAIN_AGENT_SYSTEM_PROMPT,
    RESEARCH_AGENT_SYSTEM_PROMPT,
    SALES_AGENT_SYSTEM_PROMPT,
)
from agent_relay.services.continuation import ContinuationEngine
from agent_relay.services.orchestrator import OrchestratorService
from agent_relay.services.sub_agents import ResearchAgent, SalesAgent
from agent_relay.services.tool_executor import DEFAULT_TOOL_TIMEOUT, ToolExecutor

logger = logging.getLogger(__name__)

DEFAULT_REPLICAS = {
    "research": ["research-agent"],
    "sales": ["sales-agent"],
}


class AgentRelayFactory:
    """Factory for creating and wiring components of the Agent Relay system."""

    @staticmethod
    def _section(config: Dict[str, Any], key: str) -> Dict[str, Any]:
        section = config.get(key, {})
        if not isinstance(section, dict):
            raise ConfigurationError(f"Config section '{key}' must be an object.")
        return section

    @staticmethod
    def _tool_timeout(config: Dict[str, Any]) -> Optional[float]:
        tools_config = AgentRelayFactory._section(config, "tools")
        timeout = tools_config.get("timeout_seconds", DEFAULT_TOOL_TIMEOUT)
        if timeout is None:
            return None
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"tools.timeout_seconds must be a number, got {timeout!r}"
            ) from e
        if timeout <= 0:
            raise ConfigurationError("tools.timeout_seconds must be positive.")
        return timeout

    @staticmethod
    def _replicas(logfire_config: Dict[str, Any], agent: str) -> List[str]:
        replicas = logfire_config.get("replicas", DEFAULT_REPLICAS)
        if not isinstance(replicas, dict):
            raise ConfigurationError(
                "logfire.replicas must map agent names to lists of replica names."
            )
        names = replicas.get(agent, [])
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ConfigurationError(
                f"logfire.replicas.{agent} must be a list of replica names."
            )
        return list(names)

    @staticmethod
    def create_trace_sink(config: Dict[str, Any]) -> LogfireTraceSink:
        logfire_config = AgentRelayFactory._section(config, "logfire")
        if logfire_config and "api_key" not in logfire_config:
            raise ConfigurationError("Pydantic Logfire API key is required.")
        return LogfireTraceSink(
            api_key=logfire_config.get("api_key"),
            project=logfire_config.get("project", DEFAULT_PROJECT),
        )

    @staticmethod
    def load_dataset(config: Dict[str, Any]) -> SalesDataset:
        data_path = AgentRelayFactory._section(config, "sales").get("data_path")
        if data_path:
            try:
                return SalesDataset.from_json_file(data_path)
            except FileNotFoundError as e:
                raise ConfigurationError(
                    f"Sales dataset not found at '{data_path}'"
                ) from e
        return SalesDataset.default()

    @staticmethod
    def create_from_config(config: Dict[str, Any]) -> OrchestratorService:
        """Create the agent system from configuration.

        Args:
            config: Configuration dictionary

        Returns:
            Configured OrchestratorService instance

        Raises:
            ConfigurationError: if required settings are missing or invalid
        """
        openai_config = AgentRelayFactory._section(config, "openai")
        if "api_key" not in openai_config:
            raise ConfigurationError("OpenAI API key is required in config.")

        llm_model = openai_config.get("model")
        sub_agent_model = openai_config.get("sub_agent_model", DEFAULT_SUB_AGENT_MODEL)
        if llm_model:
            logger.info(f"Using OpenAI as LLM provider with model: {llm_model}")
        else:
            logger.info("Using OpenAI as LLM provider")

        trace_sink = AgentRelayFactory.create_trace_sink(config)
        llm_adapter = OpenAIAdapter(
            api_key=openai_config["api_key"],
            model=llm_model,
            instrument_logfire=trace_sink.enabled,
        )
        logfire_config = AgentRelayFactory._section(config, "logfire")
        tool_timeout = AgentRelayFactory._tool_timeout(config)

        research_agent = ResearchAgent(
            llm_provider=llm_adapter,
            config=SubAgentConfig(
                name="research_agent",
                instructions=AgentRelayFactory._section(config, "research_agent").get(
                    "instructions", RESEARCH_AGENT_SYSTEM_PROMPT
                ),
                model=sub_agent_model,
                run_type="llm",
                replicas=AgentRelayFactory._replicas(logfire_config, "research"),
            ),
            trace_sink=trace_sink,
        )

        dataset = AgentRelayFactory.load_dataset(config)
        logger.info(f"Sales dataset ready with {len(dataset)} records")
        sales_agent = SalesAgent(
            llm_provider=llm_adapter,
            dataset=dataset,
            config=SubAgentConfig(
                name="sales_agent",
                instructions=AgentRelayFactory._section(config, "sales_agent").get(
                    "instructions", SALES_AGENT_SYSTEM_PROMPT
                ),
                model=sub_agent_model,
                run_type="tool",
                replicas=AgentRelayFactory._replicas(logfire_config, "sales"),
            ),
            trace_sink=trace_sink,
            tool_timeout=tool_timeout,
        )

        tool_registry = ToolRegistry(config=config)
        tool_registry.register_tool(AskResearchAgentTool(research_agent))
        tool_registry.register_tool(QuerySalesAgentTool(sales_agent))
        logger.debug(f"Main agent tools: {tool_registry.list_all_tools()}")

        engine = ContinuationEngine(
            llm_provider=llm_adapter,
            tool_registry=tool_registry,
            tool_executor=ToolExecutor(
                tool_registry, timeout=tool_timeout, trace_sink=trace_sink
            ),
            model=llm_model,
        )

        return OrchestratorService(
            engine=engine,
            trace_sink=trace_sink,
            system_prompt=AgentRelayFactory._section(config, "main_agent").get(
                "instructions", MAIN_AGENT_SYSTEM_PROMPT
            ),
        )
