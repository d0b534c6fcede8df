# ============================================================================
# HEALTH GROUPS - MAIN APPLICATION
# ============================================================================
# STATUS: Core - FastAPI application entry point
# PURPOSE: Host process owning the health group manager and endpoints
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Groups Main Application

FastAPI application that:
1. Creates the health group manager once per process
2. Registers the built-in (and any discovered) checks at startup
3. Exposes /health, /health/live, /health/ready, /health/started

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager
from typing import Iterable, Optional

from fastapi import FastAPI

from __version__ import __version__, BUILD_DATE
from core.config import HealthOptions, get_defaults
from core.logging import configure_logging, get_logger
from health import HealthCheckExecutor, HealthCheckPlugin, HealthGroupManager, create_health_router
from health.checks import default_checks

logger = get_logger(__name__, component="api")


def create_app(
    options: Optional[HealthOptions] = None,
    checks: Iterable[HealthCheckPlugin] = (),
    include_defaults: bool = True,
) -> FastAPI:
    """
    Build the application.

    Args:
        options: Endpoint configuration (defaults from environment)
        checks: Checks discovered by the host, registered at startup
        include_defaults: Also register the built-in checks
    """
    defaults = get_defaults()
    options = options or defaults.health

    manager = HealthGroupManager(
        executor=HealthCheckExecutor(
            default_timeout=options.check_timeout_seconds,
            overall_timeout=options.overall_timeout_seconds,
            max_workers=options.max_workers,
        )
    )
    manager.initialize()
    discovered = list(checks)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Activate health checks after startup, release them on shutdown."""
        to_register = list(discovered)
        if include_defaults:
            to_register = default_checks(manager) + to_register
        manager.activate(to_register)
        logger.info(f"Health groups started (version {__version__})")

        yield

        manager.shutdown()
        logger.info("Health groups stopped")

    app = FastAPI(
        title="Health Groups",
        description="Grouped liveness, readiness and startup health checks",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.health_manager = manager
    app.include_router(create_health_router(manager, options))

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": "Health Groups",
            "version": __version__,
            "build_date": BUILD_DATE,
            "health_enabled": options.enabled,
            "paths": options.paths() if options.enabled else {},
        }

    return app


_logging = get_defaults().logging
configure_logging(level=_logging.level, json_output=_logging.json_output)

app = create_app()
