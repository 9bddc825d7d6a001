"""Static datasets bundled with Agent Relay."""
