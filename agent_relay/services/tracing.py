"""
Run-tree context for tracing.

The current run is carried in a context variable, so concurrently executing
tool calls each record their runs under the correct parent. Sinks backed by
OpenTelemetry nest their spans through the active OpenTelemetry context,
which follows the same rules.
"""
import logging
from contextlib import asynccontextmanager, contextmanager
from contextvars import ContextVar
from typing import Any, AsyncIterator, Dict, Iterator, List, Optional

from opentelemetry import context as otel_context

from agent_relay.domains.tracing import RunHandle
from agent_relay.interfaces.providers.tracing import TraceSink

logger = logging.getLogger(__name__)

_current_run: ContextVar[Optional[RunHandle]] = ContextVar(
    "agent_relay_current_run", default=None
)


def get_current_run() -> Optional[RunHandle]:
    """Return the innermost open run in this context, if any."""
    return _current_run.get()


@asynccontextmanager
async def trace_run(
    sink: Optional[TraceSink],
    name: str,
    run_type: str = "chain",
    inputs: Optional[Dict[str, Any]] = None,
    replicas: Optional[List[str]] = None,
) -> AsyncIterator[Optional[RunHandle]]:
    """Record the enclosed block as a run, nested under the current run.

    Set ``handle.outputs`` inside the block to record outputs. Exceptions are
    recorded on the run and re-raised. Without a sink this is a no-op.
    """
    if sink is None:
        yield None
        return

    handle = sink.start_run(
        name,
        run_type,
        inputs=inputs,
        parent=_current_run.get(),
        replicas=replicas,
    )
    token = _current_run.set(handle)
    try:
        yield handle
    except Exception as e:
        sink.finish_run(handle, error=f"{type(e).__name__}: {e}")
        raise
    else:
        sink.finish_run(handle, outputs=handle.outputs)
    finally:
        _current_run.reset(token)


@contextmanager
def detached_run() -> Iterator[None]:
    """Drop the current parent so runs opened inside start a new trace."""
    token = _current_run.set(None)
    otel_token = otel_context.attach(otel_context.Context())
    try:
        yield
    finally:
        otel_context.detach(otel_token)
        _current_run.reset(token)
