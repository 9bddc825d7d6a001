"""
Abstract interfaces for the Agent Relay system.

These interfaces define the contracts that concrete implementations
must adhere to, following the Dependency Inversion Principle.

This package contains:
- Provider interfaces for the model gateway and the trace sink
- Service interfaces for agents and tool execution
- Tool and registry interfaces
"""
