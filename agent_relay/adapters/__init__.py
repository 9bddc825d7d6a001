"""
Adapters for external systems and services.

These adapters implement the interfaces defined in agent_relay.interfaces
and provide concrete implementations for the language model provider and
the tracing backend.
"""
