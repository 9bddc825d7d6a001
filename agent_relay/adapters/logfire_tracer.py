"""
Trace sink adapter backed by Pydantic Logfire.

Every run is a Logfire span, opened on ``start_run`` and closed on
``finish_run``. Logfire nests each span under the one active in the current
context, so the run tree is the OpenTelemetry trace itself. Replica names are
attached to the span as tags; they are copies inside the configured project,
not separate projects. ``flush_pending`` blocks until the exporter has
delivered the finished spans. Without a Logfire token runs are still tracked
and discarded on flush.
"""

import asyncio
import logging
import time
import uuid
from typing import Any, Dict, List, Optional

import logfire

from agent_relay.domains.errors import TraceFlushError
from agent_relay.domains.tracing import RunHandle, RunStatus
from agent_relay.interfaces.providers.tracing import TraceSink

logger = logging.getLogger(__name__)

DEFAULT_PROJECT = "agent-relay"
FLUSH_TIMEOUT_MILLIS = 5000


class LogfireTraceSink(TraceSink):
    """Records runs as Logfire spans and flushes them on demand."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        project: str = DEFAULT_PROJECT,
        flush_timeout_millis: int = FLUSH_TIMEOUT_MILLIS,
    ):
        self.project = project
        self.flush_timeout_millis = flush_timeout_millis
        self._pending: List[RunHandle] = []
        self._spans: Dict[str, Any] = {}

        self.enabled = False
        if api_key:
            try:
                logfire.configure(token=api_key, service_name=project)
                self.enabled = True
                logger.info(f"Logfire configured for project '{project}'.")
            except Exception as e:
                logger.error(f"Failed to configure Logfire: {e}")
                self.enabled = False

    @property
    def pending_runs(self) -> List[RunHandle]:
        return list(self._pending)

    def start_run(
        self,
        name: str,
        run_type: str,
        inputs: Optional[Dict[str, Any]] = None,
        parent: Optional[RunHandle] = None,
        replicas: Optional[List[str]] = None,
    ) -> RunHandle:
        handle = RunHandle(
            name=name,
            run_type=run_type,
            inputs=inputs or {},
            parent_id=parent.id if parent else None,
            trace_id=parent.trace_id if parent else uuid.uuid4().hex,
            replicas=list(replicas or []),
        )
        if self.enabled:
            span = logfire.span(
                "{run_name} run",
                _span_name=name,
                _tags=[self.project, *handle.replicas],
                run_name=name,
                run_type=run_type,
                run_id=handle.id,
                parent_run_id=handle.parent_id,
                inputs=handle.inputs,
            )
            span.__enter__()
            self._spans[handle.id] = span
        logger.debug(
            f"Started run {name} ({run_type}) id={handle.id} parent={handle.parent_id}"
        )
        return handle

    def finish_run(
        self,
        handle: RunHandle,
        outputs: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
    ) -> None:
        handle.end_time = time.time()
        if outputs is not None:
            handle.outputs = outputs
        if error is not None:
            handle.error = error
        handle.status = RunStatus.ERROR if handle.error else RunStatus.SUCCESS

        span = self._spans.pop(handle.id, None)
        if span is not None:
            span.set_attribute("outputs", handle.outputs)
            span.set_attribute("duration_ms", handle.duration_ms)
            if handle.error:
                span.set_attribute("error", handle.error)
                span.set_level("error")
            span.__exit__(None, None, None)

        self._pending.append(handle)

    async def flush_pending(self) -> None:
        runs, self._pending = self._pending, []
        if not runs:
            return
        if not self.enabled:
            logger.debug(f"Logfire disabled; dropping {len(runs)} trace run(s)")
            return

        try:
            flushed = await asyncio.to_thread(
                logfire.force_flush, self.flush_timeout_millis
            )
        except Exception as e:
            raise TraceFlushError(f"Failed to persist trace runs: {e}") from e

        if flushed is False:
            raise TraceFlushError(
                f"Timed out flushing {len(runs)} trace run(s) after "
                f"{self.flush_timeout_millis}ms"
            )
        logger.debug(f"Flushed {len(runs)} trace run(s) to Logfire")
