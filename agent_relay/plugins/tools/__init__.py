"""
Tools for the Agent Relay system.

This package contains the base AutoTool class and the built-in tools.
"""

from agent_relay.plugins.tools.auto_tool import AutoTool, ToolInput
from agent_relay.plugins.tools.sales_lookup import SalesLookupInput, SalesLookupTool
from agent_relay.plugins.tools.sub_agents import (
    AskResearchAgentTool,
    QuerySalesAgentTool,
    ResearchQueryInput,
    SalesQueryInput,
    SubAgentTool,
)
