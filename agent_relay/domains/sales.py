"""
Domain models for the static sales pipeline dataset.
"""
import json
import logging
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

logger = logging.getLogger(__name__)


class DealStage(str, Enum):
    PROSPECTING = "prospecting"
    QUALIFIED = "qualified"
    PROPOSAL = "proposal"
    NEGOTIATION = "negotiation"
    CLOSED = "closed"


class SalesRecord(BaseModel):
    """One deal in the sales pipeline."""

    model_config = {"frozen": True}

    company_name: str = Field(..., description="Company the deal is with")
    description: str = Field("", description="Free-text deal notes")
    deal_stage: DealStage = Field(..., description="Current pipeline stage")

    @field_validator("company_name")
    @classmethod
    def company_not_empty(cls, v: str) -> str:
        """Validate that the company name is not empty."""
        if not v.strip():
            raise ValueError("Company name cannot be empty")
        return v


_records_adapter = TypeAdapter(List[SalesRecord])


class SalesDataset:
    """Read-only collection of sales records, loaded once at startup."""

    def __init__(self, records: List[SalesRecord]):
        self._records = tuple(records)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "SalesDataset":
        with open(path, "r") as f:
            raw = json.load(f)
        records = _records_adapter.validate_python(raw)
        logger.info(f"Loaded {len(records)} sales records from {path}")
        return cls(records)

    @classmethod
    def default(cls) -> "SalesDataset":
        """Load the dataset bundled with the package."""
        raw = (
            resources.files("agent_relay.data")
            .joinpath("fake_sales_data.json")
            .read_text()
        )
        return cls(_records_adapter.validate_json(raw))

    @property
    def records(self) -> List[SalesRecord]:
        return list(self._records)

    def filter(self, company: Optional[str] = None) -> List[SalesRecord]:
        """Return records whose company name contains ``company``, ignoring case.

        An empty or missing filter returns every record.
        """
        needle = (company or "").strip().lower()
        if not needle:
            return list(self._records)
        return [r for r in self._records if needle in r.company_name.lower()]

    def __len__(self) -> int:
        return len(self._records)


def summarize_records(records: List[SalesRecord]) -> Dict[str, Any]:
    """Shape lookup output as ``{count, records, stages}``."""
    stages: List[str] = []
    for record in records:
        if record.deal_stage.value not in stages:
            stages.append(record.deal_stage.value)
    return {
        "count": len(records),
        "records": [r.model_dump(mode="json") for r in records],
        "stages": stages,
    }


__all__ = ["DealStage", "SalesRecord", "SalesDataset", "summarize_records"]
