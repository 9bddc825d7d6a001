"""
FastAPI application exposing the main agent.

One POST endpoint runs a conversation through the main agent and returns the
structured result; buffered trace runs are flushed before the response is sent.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import Field

from agent_relay.client.agent_relay import AgentRelay
from agent_relay.domains.messages import Message, WireModel

logger = logging.getLogger(__name__)


class AgentRequest(WireModel):
    """Inbound request body."""

    messages: List[Message] = Field(default_factory=list)


def create_app(
    client: Optional[AgentRelay] = None,
    config: Optional[Dict[str, Any]] = None,
    config_path: Optional[str] = None,
) -> FastAPI:
    """Create the HTTP application.

    Args:
        client: Ready client; built from ``config`` / ``config_path`` if omitted
        config: Configuration dictionary
        config_path: Path to configuration file (JSON or Python)
    """
    if client is None:
        client = AgentRelay(config_path=config_path, config=config)

    app = FastAPI(
        title="Agent Relay API",
        description="Main agent delegating to research and sales sub-agents",
    )
    app.state.client = client

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.post("/api/agent")
    async def run_agent(body: AgentRequest, request: Request):
        """Run the main agent over the posted conversation."""
        result = await request.app.state.client.process(body.messages)
        return result.to_wire()

    return app
