# ============================================================================
# HEALTH CHECK GROUPS
# ============================================================================
# STATUS: Core - Group registries and classification
# PURPOSE: Own the four group registries and place checks into them
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Groups

Four registries, one per group:
- all: every registered check (aggregate endpoint)
- liveness: checks marked @liveness
- readiness: checks marked @readiness
- startup: checks marked @startup

Classification:
- A check marked liveness/readiness/startup is placed in each marked
  group and mirrored into "all" exactly once
- A check with no group marker (or only @generic) goes into "all" only
- Re-registering a name replaces the entry in every group it touches.
  Entries under markers that no longer apply are NOT removed; call
  unregister_check() first to reclassify a check.

Lifecycle (called by the hosting application, in order):
    manager = HealthGroupManager()
    manager.initialize()                 # create empty registries
    manager.activate(discovered_checks)  # bulk-register
    ...
    manager.shutdown()                   # release the executor thread pool

Usage:
    @liveness
    @readiness
    class DatabaseCheck(HealthCheckPlugin):
        name = "db"

        async def check(self) -> HealthCheckResult:
            return self.up(pool="5")

    manager.register_check(DatabaseCheck())
    report = await manager.report("readiness")
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from core.logging import log_context
from health.core import (
    AggregatedHealthResult,
    HealthCheckMarker,
    HealthCheckPlugin,
)
from health.errors import InvalidGroupError, InvalidNameError
from health.executor import HealthCheckExecutor
from health.registry import HealthCheckRegistry
from health.reporter import HealthReporter
from health.schemas import HealthReport

logger = logging.getLogger(__name__)


class HealthGroup(str, Enum):
    """Logical health check groups."""
    ALL = "all"
    LIVENESS = "liveness"
    READINESS = "readiness"
    STARTUP = "startup"

    @classmethod
    def parse(cls, value: Union["HealthGroup", str]) -> "HealthGroup":
        """Resolve a group identifier, raising InvalidGroupError if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidGroupError(value) from None


# Specialized groups selected by each marker
_MARKER_GROUPS = {
    HealthCheckMarker.LIVENESS: HealthGroup.LIVENESS,
    HealthCheckMarker.READINESS: HealthGroup.READINESS,
    HealthCheckMarker.STARTUP: HealthGroup.STARTUP,
}

MarkerLike = Union[HealthCheckMarker, str]


# ============================================================================
# MARKER DECORATORS
# ============================================================================

def _marker_decorator(marker: HealthCheckMarker):
    def decorator(cls):
        cls.markers = frozenset(getattr(cls, "markers", frozenset())) | {marker}
        return cls
    decorator.__name__ = marker.value
    decorator.__doc__ = f"Mark a health check class as {marker.value}."
    return decorator


liveness = _marker_decorator(HealthCheckMarker.LIVENESS)
readiness = _marker_decorator(HealthCheckMarker.READINESS)
startup = _marker_decorator(HealthCheckMarker.STARTUP)
generic = _marker_decorator(HealthCheckMarker.GENERIC)


def markers_of(check: HealthCheckPlugin) -> FrozenSet[HealthCheckMarker]:
    """Markers declared on a check instance or its class."""
    return frozenset(
        HealthCheckMarker.parse(m) for m in (getattr(check, "markers", None) or ())
    )


# ============================================================================
# GROUP MANAGER
# ============================================================================

class HealthGroupManager:
    """
    Owns the four group registries of one process.

    Construct once at startup and pass it to whatever registers or
    queries checks.
    """

    def __init__(
        self,
        executor: Optional[HealthCheckExecutor] = None,
        reporter: Optional[HealthReporter] = None,
    ):
        self.executor = executor or HealthCheckExecutor()
        self.reporter = reporter or HealthReporter()
        self._registries: Dict[HealthGroup, HealthCheckRegistry] = {}
        self._active = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Create the four empty registries. Calling again is a no-op."""
        if self._registries:
            return
        self._registries = {
            group: HealthCheckRegistry(group.value) for group in HealthGroup
        }
        logger.info("Health check registries initialized")

    def activate(self, checks: Iterable[HealthCheckPlugin] = ()) -> int:
        """
        Bulk-register discovered checks using their declared markers.

        Returns:
            Number of checks registered
        """
        self.initialize()
        count = 0
        for check in checks:
            self.register_check(check)
            count += 1
        self._active = True
        logger.info(
            f"Health checks activated ({count} registered, "
            f"{len(self._registries[HealthGroup.ALL])} in aggregate group)"
        )
        return count

    def shutdown(self) -> None:
        """Release executor resources. Registries are left as they are."""
        self.executor.close()
        self._active = False
        logger.info("Health checks shut down")

    @property
    def is_initialized(self) -> bool:
        return bool(self._registries)

    @property
    def is_active(self) -> bool:
        return self._active

    # ------------------------------------------------------------------
    # Classification and registration
    # ------------------------------------------------------------------

    def classify(
        self,
        check: HealthCheckPlugin,
        markers: Optional[Iterable[MarkerLike]] = None,
    ) -> FrozenSet[HealthGroup]:
        """
        Groups a check belongs in.

        Args:
            check: The check to classify
            markers: Explicit markers (defaults to the check's own markers)
        """
        if markers is None:
            resolved = markers_of(check)
        else:
            resolved = frozenset(HealthCheckMarker.parse(m) for m in markers)

        groups = {_MARKER_GROUPS[m] for m in resolved if m in _MARKER_GROUPS}
        groups.add(HealthGroup.ALL)
        return frozenset(groups)

    def register_check(
        self,
        check: HealthCheckPlugin,
        markers: Optional[Iterable[MarkerLike]] = None,
        name: Optional[str] = None,
    ) -> FrozenSet[HealthGroup]:
        """
        Register a check into every group its markers select.

        Upsert by name in each touched group; "all" is written once.

        Returns:
            The groups the check was registered into

        Raises:
            InvalidNameError: If the check name is empty (no group modified)
            InvalidMarkerError: If a marker is unrecognized (no group modified)
        """
        key = check.name if name is None else name
        if not isinstance(key, str) or not key.strip():
            raise InvalidNameError(key)

        self.initialize()
        groups = self.classify(check, markers)

        with log_context(check_name=key):
            for group in sorted(groups, key=lambda g: g.value):
                self._registries[group].register(check, name=key)
            logger.debug(
                f"Health check {key} registered in: "
                f"{', '.join(sorted(g.value for g in groups))}"
            )
        return groups

    def unregister_check(
        self,
        name: str,
        groups: Optional[Iterable[Union[HealthGroup, str]]] = None,
    ) -> List[HealthGroup]:
        """
        Remove a check by name.

        Args:
            name: Check name
            groups: Groups to remove from (defaults to all four)

        Returns:
            Groups the check was actually removed from
        """
        self.initialize()
        targets = list(HealthGroup) if groups is None else [HealthGroup.parse(g) for g in groups]
        removed = [g for g in targets if self._registries[g].unregister(name)]
        if removed:
            logger.debug(
                f"Health check {name} unregistered from: "
                f"{', '.join(g.value for g in removed)}"
            )
        return removed

    def get_registry(self, group: Union[HealthGroup, str]) -> HealthCheckRegistry:
        """
        Get the registry of one group.

        Raises:
            InvalidGroupError: If the group identifier is unrecognized
        """
        resolved = HealthGroup.parse(group)
        self.initialize()
        return self._registries[resolved]

    def registries(self) -> List[Tuple[HealthGroup, HealthCheckRegistry]]:
        self.initialize()
        return [(group, self._registries[group]) for group in HealthGroup]

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def run(self, group: Union[HealthGroup, str]) -> AggregatedHealthResult:
        """Execute every check of one group."""
        return await self.executor.run(self.get_registry(group))

    async def report(self, group: Union[HealthGroup, str]) -> Tuple[HealthReport, int]:
        """Execute one group and render it: (report, HTTP status code)."""
        result = await self.run(group)
        return self.reporter.render(result), self.reporter.http_status(result)


__all__ = [
    "HealthGroup",
    "HealthGroupManager",
    "liveness",
    "readiness",
    "startup",
    "generic",
    "markers_of",
]
