# ============================================================================
# HEALTH REPORTER
# ============================================================================
# STATUS: Core - Result serialization
# PURPOSE: Render aggregated results into the wire format
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Reporter

Maps an AggregatedHealthResult onto the HealthReport wire model and the
HTTP status convention (200 when UP, 503 when DOWN). Rendering never
mutates its input.
"""

from typing import Any, Dict

from health.core import AggregatedHealthResult, HealthCheckResult, HealthStatus
from health.schemas import HealthCheckEntry, HealthReport

HTTP_OK = 200
HTTP_SERVICE_UNAVAILABLE = 503


def _status_to_http_code(status: HealthStatus) -> int:
    """Map health status to HTTP status code."""
    return {
        HealthStatus.UP: HTTP_OK,
        HealthStatus.DOWN: HTTP_SERVICE_UNAVAILABLE,
    }[status]


class HealthReporter:
    """Renders aggregated health results."""

    def render(self, result: AggregatedHealthResult) -> HealthReport:
        return HealthReport(
            status=result.status,
            checks=[self._entry(check) for check in result.checks],
        )

    def to_dict(self, result: AggregatedHealthResult) -> Dict[str, Any]:
        return self.render(result).to_wire()

    def http_status(self, result: AggregatedHealthResult) -> int:
        return _status_to_http_code(result.status)

    def _entry(self, result: HealthCheckResult) -> HealthCheckEntry:
        return HealthCheckEntry(
            id=result.name,
            status=result.status,
            data=dict(result.data) if result.data else None,
            checks=[self._entry(c) for c in result.checks] if result.checks else None,
        )


__all__ = [
    "HealthReporter",
    "HTTP_OK",
    "HTTP_SERVICE_UNAVAILABLE",
]
