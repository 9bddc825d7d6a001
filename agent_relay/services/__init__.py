"""
Service implementations for the Agent Relay system.

These services implement the interfaces defined in
agent_relay.interfaces.services: argument validation, tool execution,
the continuation engine, the sub-agents and the main agent.
"""
