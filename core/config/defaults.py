# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for health endpoints, timeouts, logging
# CREATED: 17 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for the health check service.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    if value.strip().lower() in ("none", "off"):
        return None
    return float(value)


@dataclass(frozen=True)
class HealthOptions:
    """
    Health endpoint configuration.

    Consumed by the web layer: whether the endpoints are mounted at all,
    and the path of each group's endpoint.
    """
    enabled: bool = True

    # Endpoint paths by group
    path: str = "/health"
    liveness_path: str = "/health/live"
    readiness_path: str = "/health/ready"
    startup_path: str = "/health/started"

    # Execution budget (seconds)
    check_timeout_seconds: Optional[float] = 1.0
    overall_timeout_seconds: Optional[float] = None

    # Thread pool size for blocking checks
    max_workers: int = 8

    def paths(self) -> Dict[str, str]:
        """Endpoint path keyed by group name."""
        return {
            "all": self.path,
            "liveness": self.liveness_path,
            "readiness": self.readiness_path,
            "startup": self.startup_path,
        }

    def path_for(self, group) -> str:
        """Endpoint path for a group (HealthGroup or its string value)."""
        return self.paths()[getattr(group, "value", group)]

    @classmethod
    def from_env(cls) -> "HealthOptions":
        """Create from environment variables."""
        return cls(
            enabled=_env_bool("HEALTH_ENABLED", True),
            path=os.getenv("HEALTH_PATH", "/health"),
            liveness_path=os.getenv("HEALTH_LIVENESS_PATH", "/health/live"),
            readiness_path=os.getenv("HEALTH_READINESS_PATH", "/health/ready"),
            startup_path=os.getenv("HEALTH_STARTUP_PATH", "/health/started"),
            check_timeout_seconds=_env_float("HEALTH_CHECK_TIMEOUT", 1.0),
            overall_timeout_seconds=_env_float("HEALTH_OVERALL_TIMEOUT", None),
            max_workers=int(os.getenv("HEALTH_MAX_WORKERS", 8)),
        )


@dataclass(frozen=True)
class LoggingDefaults:
    """Defaults for log output."""
    level: str = "INFO"
    json_output: bool = False

    @classmethod
    def from_env(cls) -> "LoggingDefaults":
        """Create from environment variables."""
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            json_output=os.getenv("LOG_FORMAT", "").lower() == "json",
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    health: HealthOptions = field(default_factory=HealthOptions)
    logging: LoggingDefaults = field(default_factory=LoggingDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            health=HealthOptions.from_env(),
            logging=LoggingDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def get_options() -> HealthOptions:
    """Get health endpoint options."""
    return get_defaults().health


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthOptions",
    "LoggingDefaults",
    "Defaults",
    "get_defaults",
    "get_options",
    "reset_defaults",
]
