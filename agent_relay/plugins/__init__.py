"""
Tool system for Agent Relay.

This package provides the tool registry and the built-in tools exposed
to the main agent and the sub-agents.
"""
