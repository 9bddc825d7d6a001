"""
Client interface for the Agent Relay system.
"""
