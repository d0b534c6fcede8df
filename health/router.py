# ============================================================================
# HEALTH CHECK ROUTER
# ============================================================================
# STATUS: Infrastructure - FastAPI health check endpoints
# PURPOSE: Expose each health group over HTTP
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Router

FastAPI router exposing one endpoint per health group (default paths):

    GET /health         - Aggregate: every registered check
    GET /health/live    - Liveness: restart the container if DOWN
    GET /health/ready   - Readiness: stop routing traffic if DOWN
    GET /health/started - Startup: initialization finished

Response Codes:
    200 - UP
    503 - DOWN (service unavailable)

Paths and the enabled flag come from HealthOptions. When disabled the
router carries no routes.
"""

import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.config import HealthOptions, get_options
from core.logging import log_context
from health.groups import HealthGroup, HealthGroupManager
from health.schemas import HealthReport

logger = logging.getLogger(__name__)

_GROUP_SUMMARIES = {
    HealthGroup.ALL: "Aggregate health of every registered check",
    HealthGroup.LIVENESS: "Liveness check (is the process alive?)",
    HealthGroup.READINESS: "Readiness check (can we accept traffic?)",
    HealthGroup.STARTUP: "Startup check (has initialization finished?)",
}


def _make_endpoint(manager: HealthGroupManager, group: HealthGroup, path: str):
    async def endpoint() -> JSONResponse:
        report, http_code = await manager.report(group)
        # Context is thread-local, so only wrap the synchronous part
        with log_context(group=group.value, request_path=path):
            if http_code != 200:
                logger.info(f"Health group {group.value} reported {report.status.value}")
            else:
                logger.debug(f"Health group {group.value} reported UP")
        return JSONResponse(status_code=http_code, content=report.to_wire())

    endpoint.__name__ = f"{group.value}_health"
    return endpoint


def create_health_router(
    manager: HealthGroupManager,
    options: Optional[HealthOptions] = None,
) -> APIRouter:
    """
    Build the health router for a group manager.

    Args:
        manager: Group manager whose registries back the endpoints
        options: Endpoint configuration (defaults from environment)
    """
    options = options or get_options()
    router = APIRouter(tags=["Health"])

    if not options.enabled:
        logger.info("Health endpoints disabled")
        return router

    for group in HealthGroup:
        path = options.path_for(group)
        router.add_api_route(
            path,
            _make_endpoint(manager, group, path),
            methods=["GET"],
            summary=_GROUP_SUMMARIES[group],
            response_model=HealthReport,
            responses={503: {"model": HealthReport, "description": "DOWN"}},
        )
        logger.debug(f"Health endpoint {path} -> {group.value}")

    return router


__all__ = [
    "create_health_router",
]
