# ============================================================================
# HEALTH CHECK REGISTRY
# ============================================================================
# STATUS: Core - Named check collection for one group
# PURPOSE: Thread-safe register / unregister / snapshot of health checks
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Registry

Holds the checks of one logical group, keyed by name.

Semantics:
- register() is an upsert: the last registration of a name wins
- unregister() of an unknown name is a no-op
- snapshot() returns a point-in-time copy ordered by name, safe to
  iterate while other callers register or unregister

Usage:
    registry = HealthCheckRegistry("readiness")
    registry.register(PostgresCheck())
    registry.register(FunctionHealthCheck("cache", ping_cache))

    for name, check in registry.snapshot():
        ...
"""

import logging
import threading
from typing import Dict, List, Optional, Tuple

from health.core import HealthCheckPlugin
from health.errors import InvalidNameError

logger = logging.getLogger(__name__)


class HealthCheckRegistry:
    """
    Registry for health check plugins.

    All operations take an internal lock, so callers never need
    external synchronization.
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self._checks: Dict[str, HealthCheckPlugin] = {}
        self._lock = threading.Lock()

    def register(
        self,
        check: HealthCheckPlugin,
        name: Optional[str] = None,
    ) -> str:
        """
        Register (or replace) a health check.

        Args:
            check: Plugin instance to register
            name: Registry key (defaults to check.name)

        Returns:
            The key the check was registered under

        Raises:
            InvalidNameError: If the key is empty or blank
        """
        key = check.name if name is None else name
        if not isinstance(key, str) or not key.strip():
            raise InvalidNameError(key)

        with self._lock:
            replaced = key in self._checks
            self._checks[key] = check

        if replaced:
            logger.warning(f"Overwriting health check: {key} (group={self.name})")
        else:
            logger.debug(f"Registered health check: {key} (group={self.name})")
        return key

    def unregister(self, name: str) -> bool:
        """
        Remove a health check by name.

        Returns:
            True if a check was removed
        """
        with self._lock:
            removed = self._checks.pop(name, None) is not None

        if removed:
            logger.debug(f"Unregistered health check: {name} (group={self.name})")
        return removed

    def get(self, name: str) -> Optional[HealthCheckPlugin]:
        """Get health check by name."""
        with self._lock:
            return self._checks.get(name)

    def names(self) -> List[str]:
        """Registered names in ascending order."""
        with self._lock:
            return sorted(self._checks)

    def snapshot(self) -> List[Tuple[str, HealthCheckPlugin]]:
        """Consistent copy of (name, check) pairs, ordered by name."""
        with self._lock:
            items = list(self._checks.items())
        items.sort(key=lambda item: item[0])
        return items

    def clear(self) -> None:
        """Remove all registered checks."""
        with self._lock:
            self._checks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._checks)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._checks

    def __repr__(self) -> str:
        return f"HealthCheckRegistry(name={self.name!r}, checks={len(self)})"


__all__ = [
    "HealthCheckRegistry",
]
