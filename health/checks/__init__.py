# ============================================================================
# HEALTH CHECK PLUGINS
# ============================================================================
# STATUS: Infrastructure - Health check implementations
# PURPOSE: Built-in checks registered by the application at startup
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Plugins

Built-in checks:
- process (liveness): process is running
- config (readiness): required environment variables present
- startup (startup): health checks activated

Application-specific checks are discovered by the host and passed to
HealthGroupManager.activate() alongside these.
"""

from typing import List

from health.core import HealthCheckPlugin
from health.groups import HealthGroupManager
from health.checks.startup import ProcessCheck, ConfigCheck, StartupCompleteCheck


def default_checks(manager: HealthGroupManager) -> List[HealthCheckPlugin]:
    """Instances of every built-in check."""
    return [
        ProcessCheck(),
        ConfigCheck(),
        StartupCompleteCheck(manager),
    ]


__all__ = [
    "ProcessCheck",
    "ConfigCheck",
    "StartupCompleteCheck",
    "default_checks",
]
