"""
HTTP surface of the Agent Relay system.
"""
