"""
Tests for domain models in agent.py.

These tests verify the SubAgentConfig model, including its field
validations and defaults.
"""

import pytest
from pydantic import ValidationError

from agent_relay.domains.agent import SubAgentConfig


class TestSubAgentConfig:
    """Test suite for the SubAgentConfig model."""

    def test_valid_config_full(self):
        """Test creating a config with all fields."""
        config = SubAgentConfig(
            name="research_agent",
            instructions="You are a research assistant.",
            model="gpt-4o-mini",
            run_type="llm",
            replicas=["research-agent", "analytics"],
        )

        assert config.name == "research_agent"
        assert config.model == "gpt-4o-mini"
        assert config.run_type == "llm"
        assert config.replicas == ["research-agent", "analytics"]

    def test_valid_config_minimal(self):
        """Test defaults when only required fields are given."""
        config = SubAgentConfig(name="sales_agent", instructions="Summarize deals.")

        assert config.model is None
        assert config.run_type == "chain"
        assert config.replicas == []

    def test_invalid_empty_name(self):
        with pytest.raises(ValidationError) as excinfo:
            SubAgentConfig(name="   ", instructions="Summarize deals.")

        assert "Name cannot be empty" in str(excinfo.value)

    def test_invalid_empty_instructions(self):
        with pytest.raises(ValidationError) as excinfo:
            SubAgentConfig(name="agent", instructions="  ")

        assert "Instructions cannot be empty" in str(excinfo.value)

    def test_invalid_short_instructions(self):
        with pytest.raises(ValidationError) as excinfo:
            SubAgentConfig(name="agent", instructions="Too short")

        assert "at least 10 characters" in str(excinfo.value)

    def test_invalid_run_type(self):
        with pytest.raises(ValidationError):
            SubAgentConfig(
                name="agent", instructions="Summarize deals.", run_type="retriever"
            )
