from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from agent_relay.domains.tracing import RunHandle


class TraceSink(ABC):
    """Interface for the observability backend recording agent runs."""

    @abstractmethod
    def start_run(
        self,
        name: str,
        run_type: str,
        inputs: Optional[Dict[str, Any]] = None,
        parent: Optional[RunHandle] = None,
        replicas: Optional[List[str]] = None,
    ) -> RunHandle:
        """Open a run, as a child of ``parent`` or as a new root."""
        pass

    @abstractmethod
    def finish_run(
        self,
        handle: RunHandle,
        outputs: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
    ) -> None:
        """Close a run with its outputs or error and buffer it for persistence."""
        pass

    @abstractmethod
    async def flush_pending(self) -> None:
        """Wait until all buffered runs are persisted.

        Raises TraceFlushError when persistence fails.
        """
        pass
