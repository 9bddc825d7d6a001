"""
Domain models for the Agent Relay system.

This package contains the core domain models that represent
conversations, tool calls, trace runs and the sales dataset.
"""

from agent_relay.domains.agent import *
from agent_relay.domains.errors import *
from agent_relay.domains.messages import *
from agent_relay.domains.sales import *
from agent_relay.domains.tracing import *
