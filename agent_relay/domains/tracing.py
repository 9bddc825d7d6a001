"""
Domain models for trace runs.
"""
import time
import uuid
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class RunStatus(str, Enum):
    RUNNING = "running"
    SUCCESS = "success"
    ERROR = "error"


class RunHandle(BaseModel):
    """A recorded unit of execution with parent linkage."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    trace_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    parent_id: Optional[str] = None
    name: str
    run_type: str = "chain"
    inputs: Dict[str, Any] = Field(default_factory=dict)
    outputs: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    replicas: List[str] = Field(default_factory=list)
    status: RunStatus = RunStatus.RUNNING
    start_time: float = Field(default_factory=time.time)
    end_time: Optional[float] = None

    @property
    def duration_ms(self) -> Optional[float]:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time) * 1000

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


__all__ = ["RunStatus", "RunHandle"]
