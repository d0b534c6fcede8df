# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# STATUS: Core - Health check registry and aggregation
# PURPOSE: Grouped liveness / readiness / startup checks over HTTP
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Module

Grouped health check system:
- /health: every registered check
- /health/live: liveness checks
- /health/ready: readiness checks
- /health/started: startup checks

Architecture:
- HealthCheckPlugin: Base class for health checks
- HealthCheckRegistry: Thread-safe named checks for one group
- HealthCheckExecutor: Concurrent execution with timeouts
- HealthGroupManager: Four registries and marker-based placement
- HealthReporter: Wire format rendering

Usage:
    from health import HealthGroupManager, create_health_router, readiness

    @readiness
    class MyCheck(HealthCheckPlugin):
        name = "my-check"

        async def check(self) -> HealthCheckResult:
            return self.up()

    manager = HealthGroupManager()
    manager.initialize()
    manager.activate([MyCheck()])
    app.include_router(create_health_router(manager))
"""

from health.errors import (
    HealthError,
    InvalidNameError,
    InvalidGroupError,
    InvalidMarkerError,
)
from health.core import (
    HealthStatus,
    HealthCheckMarker,
    HealthCheckResult,
    AggregatedHealthResult,
    HealthCheckPlugin,
    FunctionHealthCheck,
)
from health.registry import HealthCheckRegistry
from health.executor import HealthCheckExecutor
from health.reporter import HealthReporter
from health.schemas import HealthCheckEntry, HealthReport
from health.groups import (
    HealthGroup,
    HealthGroupManager,
    liveness,
    readiness,
    startup,
    generic,
    markers_of,
)
from health.router import create_health_router

__all__ = [
    # Errors
    "HealthError",
    "InvalidNameError",
    "InvalidGroupError",
    "InvalidMarkerError",
    # Core types
    "HealthStatus",
    "HealthCheckMarker",
    "HealthCheckResult",
    "AggregatedHealthResult",
    "HealthCheckPlugin",
    "FunctionHealthCheck",
    # Registry / executor / reporter
    "HealthCheckRegistry",
    "HealthCheckExecutor",
    "HealthReporter",
    "HealthCheckEntry",
    "HealthReport",
    # Groups
    "HealthGroup",
    "HealthGroupManager",
    "liveness",
    "readiness",
    "startup",
    "generic",
    "markers_of",
    # Router
    "create_health_router",
]
