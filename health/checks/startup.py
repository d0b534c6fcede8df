# ============================================================================
# BUILT-IN HEALTH CHECKS
# ============================================================================
# STATUS: Infrastructure - Process, configuration and startup checks
# PURPOSE: Checks every deployment gets without writing its own
# CREATED: 17 OCT 2026
# ============================================================================
"""
Built-in Health Checks

- ProcessCheck (liveness): always UP if the check runs
- ConfigCheck (readiness): required environment variables present
- StartupCompleteCheck (startup): health checks have been activated
"""

import os
import platform
import time
import logging
from typing import Iterable, List, Optional

from health.core import HealthCheckPlugin, HealthCheckResult
from health.groups import HealthGroupManager, liveness, readiness, startup

logger = logging.getLogger(__name__)

_PROCESS_STARTED = time.monotonic()


@liveness
class ProcessCheck(HealthCheckPlugin):
    """
    Basic process health check.

    Always returns UP if the check runs (proves the event loop is alive).
    """

    name = "process"
    timeout_seconds = 1.0

    async def check(self) -> HealthCheckResult:
        return self.up(
            pid=os.getpid(),
            python_version=platform.python_version(),
            uptime_seconds=int(time.monotonic() - _PROCESS_STARTED),
        )


@readiness
class ConfigCheck(HealthCheckPlugin):
    """
    Configuration health check.

    Verifies required environment variables are present.
    Does NOT check if values are valid (that's for other checks).
    A blocking check: runs on the executor's thread pool.
    """

    name = "config"
    timeout_seconds = 1.0

    def __init__(self, required_vars: Optional[Iterable[str]] = None):
        if required_vars is None:
            raw = os.environ.get("HEALTH_REQUIRED_ENV", "")
            required_vars = [v.strip() for v in raw.split(",") if v.strip()]
        self.required_vars: List[str] = list(required_vars)

    def check(self) -> HealthCheckResult:
        missing = [var for var in self.required_vars if not os.environ.get(var)]

        if missing:
            return self.down(
                reason=f"Missing required config: {', '.join(missing)}",
                missing=len(missing),
            )

        return self.up(present=len(self.required_vars))


@startup
class StartupCompleteCheck(HealthCheckPlugin):
    """UP once the group manager has been activated."""

    name = "startup"
    timeout_seconds = 1.0

    def __init__(self, manager: HealthGroupManager):
        self.manager = manager

    async def check(self) -> HealthCheckResult:
        if self.manager.is_active:
            return self.up()
        return self.down(reason="Health checks not yet activated")


__all__ = [
    "ProcessCheck",
    "ConfigCheck",
    "StartupCompleteCheck",
]
