# ============================================================================
# HEALTH REPORT SCHEMAS
# ============================================================================
# STATUS: Core - Wire format models
# PURPOSE: Pydantic models for health endpoint responses
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Report Schemas

Wire format:
    {
      "status": "UP" | "DOWN",
      "checks": [
        {"id": "<check name>", "status": "UP" | "DOWN", "data": {...}},
        ...
      ]
    }

"data" is omitted when a check reported no metadata.
"""

from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field

from health.core import HealthStatus

DataValue = Union[bool, int, float, str]


class HealthCheckEntry(BaseModel):
    """One check in a health report."""
    id: str = Field(..., min_length=1, description="Check name")
    status: HealthStatus
    data: Optional[Dict[str, DataValue]] = None
    checks: Optional[List["HealthCheckEntry"]] = Field(
        None,
        description="Nested sub-check results, when the check reported any"
    )


class HealthReport(BaseModel):
    """Aggregated health report for one group."""
    status: HealthStatus
    checks: List[HealthCheckEntry] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "UP",
                    "checks": [
                        {"id": "db", "status": "UP", "data": {"pool": "5"}}
                    ]
                }
            ]
        }
    }

    def to_wire(self) -> dict:
        """JSON-ready dict with empty optional fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)


HealthCheckEntry.model_rebuild()


__all__ = [
    "HealthCheckEntry",
    "HealthReport",
]
