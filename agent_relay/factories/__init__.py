"""
Factories wiring the Agent Relay system from configuration.
"""
