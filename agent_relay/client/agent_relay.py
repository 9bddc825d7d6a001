"""
Simplified client interface for interacting with the Agent Relay system.

This module provides a clean API for running one request through the main
agent, including the trace flush that must complete before responding.
"""

import importlib.util
import json
import logging
from typing import Any, Dict, List, Optional, Union

from agent_relay.domains.errors import TraceFlushError
from agent_relay.domains.messages import AgentRunResult, Message
from agent_relay.factories.agent_factory import AgentRelayFactory

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from a JSON file or a Python module exposing ``config``."""
    with open(config_path, "r") as f:
        if config_path.endswith(".json"):
            return json.load(f)

    # Assume it's a Python file
    spec = importlib.util.spec_from_file_location("config", config_path)
    config_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(config_module)
    return config_module.config


class AgentRelay:
    """Simplified client interface for interacting with the agent system."""

    def __init__(self, config_path: str = None, config: Dict[str, Any] = None):
        """Initialize the agent system from config file or dictionary.

        Args:
            config_path: Path to configuration file (JSON or Python)
            config: Configuration dictionary
        """
        if not config and not config_path:
            raise ValueError("Either config or config_path must be provided")

        if config_path:
            config = load_config(config_path)

        self.orchestrator = AgentRelayFactory.create_from_config(config)

    async def process(
        self,
        messages: List[Union[Message, Dict[str, Any]]],
        system_prompt: Optional[str] = None,
    ) -> AgentRunResult:
        """Run the main agent over a conversation and flush its traces.

        Args:
            messages: Conversation as Message objects or wire dictionaries
            system_prompt: Optional system prompt override

        Returns:
            The structured agent result
        """
        parsed = [
            m if isinstance(m, Message) else Message.model_validate(m)
            for m in messages or []
        ]
        try:
            return await self.orchestrator.process(parsed, system_prompt=system_prompt)
        finally:
            await self.flush_traces()

    async def ask(self, text: str) -> AgentRunResult:
        """Send a single user message."""
        return await self.process([Message.user(text)])

    async def flush_traces(self) -> None:
        """Flush buffered trace runs; failures are logged, never raised."""
        trace_sink = self.orchestrator.trace_sink
        if trace_sink is None:
            return
        try:
            await trace_sink.flush_pending()
        except TraceFlushError as e:
            logger.error(f"Failed to flush traces: {e}")
