# ============================================================================
# HEALTH CHECK CORE TYPES
# ============================================================================
# STATUS: Core - Check interface and result types
# PURPOSE: Plugin interface, per-check results and aggregated results
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Core Types

Defines the plugin interface and result types for health checks.

Status combination (DOWN wins):
- UP: the check (or every check in a group) passed
- DOWN: at least one check failed, raised, or timed out
- An empty group is vacuously UP

Markers classify a check into groups:
- liveness: is the process alive enough to avoid a restart
- readiness: is the process ready to accept traffic
- startup: has the process finished initializing
- generic: aggregate group only
"""

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from health.errors import InvalidMarkerError, InvalidNameError

# Values allowed in result data (bool is a subclass of int)
SCALAR_TYPES = (str, int, float)


class HealthStatus(str, Enum):
    """Health check status values."""
    UP = "UP"
    DOWN = "DOWN"

    @classmethod
    def of(cls, up: bool) -> "HealthStatus":
        return cls.UP if up else cls.DOWN

    @classmethod
    def aggregate(cls, statuses: Iterable["HealthStatus"]) -> "HealthStatus":
        """Aggregate multiple statuses (DOWN wins, empty is UP)."""
        for status in statuses:
            if status == cls.DOWN:
                return cls.DOWN
        return cls.UP


class HealthCheckMarker(str, Enum):
    """Classification markers carried by a check."""
    LIVENESS = "liveness"
    READINESS = "readiness"
    STARTUP = "startup"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: Union["HealthCheckMarker", str]) -> "HealthCheckMarker":
        """Resolve a marker, raising InvalidMarkerError if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidMarkerError(value) from None


def _validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidNameError(name)
    return name


def _freeze_data(name: str, data: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    if not data:
        return None
    frozen = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise TypeError(f"Health check {name}: data key {key!r} is not a string")
        if not isinstance(value, SCALAR_TYPES):
            raise TypeError(
                f"Health check {name}: data value for {key!r} must be "
                f"str, int, float or bool, got {type(value).__name__}"
            )
        frozen[key] = value
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class HealthCheckResult:
    """
    Immutable outcome of one check execution.

    Attributes:
        name: Check identifier (non-empty)
        up: True if the check passed
        data: Optional flat metadata (None when empty)
        checks: Optional nested sub-results
        duration_ms: Execution time, filled in by the executor
    """
    name: str
    up: bool
    data: Optional[Mapping[str, Any]] = None
    checks: Tuple["HealthCheckResult", ...] = ()
    duration_ms: float = 0.0

    def __post_init__(self):
        _validate_name(self.name)
        object.__setattr__(self, "up", bool(self.up))
        object.__setattr__(self, "data", _freeze_data(self.name, self.data))
        object.__setattr__(self, "checks", tuple(self.checks or ()))

    def __hash__(self) -> int:
        data = tuple(sorted(self.data.items())) if self.data else None
        return hash((self.name, self.up, data, self.checks, self.duration_ms))

    @property
    def status(self) -> HealthStatus:
        return HealthStatus.of(self.up)

    @classmethod
    def up_result(cls, name: str, **data) -> "HealthCheckResult":
        """Create UP result."""
        return cls(name=name, up=True, data=data)

    @classmethod
    def down_result(cls, name: str, **data) -> "HealthCheckResult":
        """Create DOWN result."""
        return cls(name=name, up=False, data=data)

    @classmethod
    def from_exception(cls, name: str, e: BaseException) -> "HealthCheckResult":
        """Create DOWN result from exception. The reason is never empty."""
        reason = str(e).strip() or type(e).__name__
        return cls(name=name, up=False, data={"reason": reason})

    @classmethod
    def timed_out(cls, name: str, timeout: Optional[float]) -> "HealthCheckResult":
        """Create DOWN result for a check that did not finish in time."""
        return cls(
            name=name,
            up=False,
            data={"reason": f"Timeout after {timeout}s", "timeout": True},
        )

    def with_name(self, name: str) -> "HealthCheckResult":
        if name == self.name:
            return self
        return replace(self, name=name)

    def with_duration(self, duration_ms: float) -> "HealthCheckResult":
        return replace(self, duration_ms=duration_ms)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and debugging."""
        result: Dict[str, Any] = {
            "name": self.name,
            "status": self.status.value,
            "duration_ms": round(self.duration_ms, 2),
        }
        if self.data:
            result["data"] = dict(self.data)
        if self.checks:
            result["checks"] = [c.to_dict() for c in self.checks]
        return result


@dataclass(frozen=True)
class AggregatedHealthResult:
    """Aggregated result of one executor pass over a registry."""
    up: bool
    checks: Tuple[HealthCheckResult, ...] = ()
    total_duration_ms: float = 0.0
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def combine(
        cls,
        results: Iterable[HealthCheckResult],
        total_duration_ms: float = 0.0,
    ) -> "AggregatedHealthResult":
        """Combine results: UP iff every result is UP, ordered by name."""
        ordered = tuple(sorted(results, key=lambda r: r.name))
        return cls(
            up=all(r.up for r in ordered),
            checks=ordered,
            total_duration_ms=total_duration_ms,
        )

    @property
    def status(self) -> HealthStatus:
        return HealthStatus.of(self.up)

    def get(self, name: str) -> Optional[HealthCheckResult]:
        for result in self.checks:
            if result.name == name:
                return result
        return None

    def names(self) -> List[str]:
        return [r.name for r in self.checks]


class HealthCheckPlugin(ABC):
    """
    Base class for health check plugins.

    Subclass and implement check() to create custom health checks.
    check() may be a coroutine function or a plain blocking function;
    blocking checks are run on the executor's thread pool.

    Attributes:
        name: Unique identifier for the check within a group
        timeout_seconds: Max execution time (None uses the executor default)
        markers: Classification markers (see health.groups decorators)

    Example:
        @readiness
        class PostgresCheck(HealthCheckPlugin):
            name = "postgres"
            timeout_seconds = 5.0

            async def check(self) -> HealthCheckResult:
                await db.execute("SELECT 1")
                return self.up(pool=str(db.pool_size))
    """

    name: str = ""
    timeout_seconds: Optional[float] = None
    markers: FrozenSet[HealthCheckMarker] = frozenset()

    @abstractmethod
    async def check(self) -> HealthCheckResult:
        """
        Execute health check.

        Raising is allowed: the executor records a DOWN result
        with the exception message as the reason.
        """

    def is_async(self) -> bool:
        # Look through functools.wraps decorators to the real function
        return inspect.iscoroutinefunction(inspect.unwrap(self.check))

    def up(self, **data) -> HealthCheckResult:
        return HealthCheckResult.up_result(self.name, **data)

    def down(self, **data) -> HealthCheckResult:
        return HealthCheckResult.down_result(self.name, **data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


CheckFunction = Callable[[], Any]


class FunctionHealthCheck(HealthCheckPlugin):
    """
    Adapts a bare callable into a health check.

    The callable may be sync or async and may return either a
    HealthCheckResult or a bool.

    Example:
        registry.register(FunctionHealthCheck("down-check", lambda: False))
    """

    def __init__(
        self,
        name: str,
        func: CheckFunction,
        timeout_seconds: Optional[float] = None,
        markers: Iterable[Union[HealthCheckMarker, str]] = (),
    ):
        self.name = _validate_name(name)
        self.func = func
        self.timeout_seconds = timeout_seconds
        self.markers = frozenset(HealthCheckMarker.parse(m) for m in markers)

    def is_async(self) -> bool:
        return inspect.iscoroutinefunction(inspect.unwrap(self.func))

    def check(self):
        value = self.func()
        if inspect.isawaitable(value):
            return self._await_result(value)
        return self._coerce(value)

    async def _await_result(self, awaitable) -> HealthCheckResult:
        return self._coerce(await awaitable)

    def _coerce(self, value: Any) -> HealthCheckResult:
        if isinstance(value, HealthCheckResult):
            return value
        if isinstance(value, bool):
            return HealthCheckResult(name=self.name, up=value)
        raise TypeError(
            f"Health check {self.name} returned {type(value).__name__}, "
            "expected HealthCheckResult or bool"
        )


__all__ = [
    "HealthStatus",
    "HealthCheckMarker",
    "HealthCheckResult",
    "AggregatedHealthResult",
    "HealthCheckPlugin",
    "FunctionHealthCheck",
]
