"""
Domain models for the agents in the relay.

This module defines the configuration of the main agent and the
specialized sub-agents it delegates to.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator


class SubAgentConfig(BaseModel):
    """Configuration of one model-backed agent."""

    name: str = Field(..., description="Unique agent identifier name, used as run name")
    instructions: str = Field(..., description="System prompt for the agent")
    model: Optional[str] = Field(None, description="Model override for this agent")
    run_type: Literal["chain", "llm", "tool"] = Field(
        "chain", description="Kind recorded for the agent's trace runs"
    )
    replicas: List[str] = Field(
        default_factory=list,
        description="Extra tracing projects the agent's runs are copied to",
    )

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        """Validate that name is not empty."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v

    @field_validator("instructions")
    @classmethod
    def instructions_not_empty(cls, v: str) -> str:
        """Validate that instructions are not empty."""
        if not v.strip():
            raise ValueError("Instructions cannot be empty")
        if len(v) < 10:
            raise ValueError("Instructions must be at least 10 characters")
        return v


__all__ = ["SubAgentConfig"]
