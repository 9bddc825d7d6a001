"""
Dataset lookup tool owned by the sales agent.
"""
import logging
from typing import Any, Dict, Optional

from pydantic import Field

from agent_relay.domains.sales import SalesDataset, summarize_records
from agent_relay.plugins.tools.auto_tool import AutoTool, ToolInput

logger = logging.getLogger(__name__)


class SalesLookupInput(ToolInput):
    company: Optional[str] = Field(None, description="Company name to filter on")


class SalesLookupTool(AutoTool):
    """Filters the static sales dataset by company name."""

    input_schema = SalesLookupInput

    def __init__(self, dataset: SalesDataset, registry=None):
        self.dataset = dataset
        super().__init__(
            name="lookupSalesData",
            description=(
                "Look up deals in the sales dataset. "
                "Returns the matching records."
            ),
            registry=registry,
        )

    async def execute(self, company: Optional[str] = None) -> Dict[str, Any]:
        records = self.dataset.filter(company)
        logger.info(
            f"Sales lookup for company={company!r} matched {len(records)} records"
        )
        return summarize_records(records)
