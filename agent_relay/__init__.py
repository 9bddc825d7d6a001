"""
Agent Relay - a main agent that delegates to research and sales sub-agents.

This package provides the tool-call continuation engine, a tool registry with
schema validation, sub-agent tools and a traced, HTTP-facing client.
"""

# Client interface (main entry point)
from agent_relay.client.agent_relay import AgentRelay

# Factory for creating agent systems
from agent_relay.factories.agent_factory import AgentRelayFactory

# Useful tools and utilities
from agent_relay.plugins.registry import ToolRegistry
from agent_relay.plugins.tools.auto_tool import AutoTool, ToolInput
from agent_relay.interfaces.plugins.plugins import Tool
from agent_relay.services.continuation import ContinuationEngine

# Package metadata
__all__ = [
    # Main client interfaces
    "AgentRelay",
    # Factories
    "AgentRelayFactory",
    # Tools
    "ToolRegistry",
    "AutoTool",
    "ToolInput",
    "Tool",
    # Engine
    "ContinuationEngine",
]
