# ============================================================================
# HEALTH CHECK EXECUTOR
# ============================================================================
# STATUS: Core - Concurrent health check execution
# PURPOSE: Execute a group's checks with timeouts and aggregate results
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Executor

Executes the checks of one registry with:
- Fan-out / fan-in: every check starts at once, the executor waits for all
- Per-check timeouts (check.timeout_seconds or the executor default)
- Optional overall timeout for the whole pass
- Failure containment: exceptions and timeouts become DOWN results
- Aggregation: UP iff every check is UP, results ordered by name

Coroutine checks run on the event loop. Blocking checks run on the
executor's thread pool; a blocking check that outlives its timeout keeps
its thread until it returns, but its late result is discarded.
"""

import asyncio
import inspect
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from health.core import (
    HealthCheckResult,
    HealthCheckPlugin,
    AggregatedHealthResult,
)
from health.registry import HealthCheckRegistry

logger = logging.getLogger(__name__)


class HealthCheckExecutor:
    """
    Executes health checks concurrently with timeouts.

    The executor never mutates the registry: it works on a snapshot,
    so registration may continue while a pass is in flight.
    """

    def __init__(
        self,
        default_timeout: Optional[float] = 1.0,
        overall_timeout: Optional[float] = None,
        max_workers: int = 8,
    ):
        """
        Initialize executor.

        Args:
            default_timeout: Per-check timeout when the check sets none
            overall_timeout: Max total execution time (None waits for all)
            max_workers: Thread pool size for blocking checks
        """
        self.default_timeout = default_timeout
        self.overall_timeout = overall_timeout
        self.max_workers = max_workers
        self._thread_pool: Optional[ThreadPoolExecutor] = None

    async def run(self, registry: HealthCheckRegistry) -> AggregatedHealthResult:
        """
        Execute every check in the registry.

        Never raises for check failures. If the caller cancels the run,
        in-flight checks are cancelled and the cancellation propagates.

        Returns:
            Aggregated result with all check outcomes
        """
        start_time = time.monotonic()
        snapshot = registry.snapshot()

        if not snapshot:
            return AggregatedHealthResult(up=True, checks=(), total_duration_ms=0.0)

        tasks: Dict[asyncio.Task, str] = {
            asyncio.create_task(self._execute_check(name, check)): name
            for name, check in snapshot
        }

        try:
            done, pending = await asyncio.wait(
                list(tasks),
                timeout=self.overall_timeout,
                return_when=asyncio.ALL_COMPLETED,
            )
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            raise

        if pending:
            logger.warning(
                f"Health check overall timeout ({self.overall_timeout}s) exceeded "
                f"for group {registry.name}: {len(pending)} check(s) abandoned"
            )
            for task in pending:
                task.cancel()

        results: List[HealthCheckResult] = []
        for task, name in tasks.items():
            if task in pending:
                results.append(HealthCheckResult.timed_out(name, self.overall_timeout))
            elif task.cancelled():
                results.append(HealthCheckResult.down_result(name, reason="Cancelled"))
            else:
                results.append(task.result())

        total_duration_ms = (time.monotonic() - start_time) * 1000
        aggregated = AggregatedHealthResult.combine(results, total_duration_ms)

        logger.debug(
            f"Health group {registry.name}: {aggregated.status.value} "
            f"({len(results)} checks, {total_duration_ms:.1f}ms)"
        )
        return aggregated

    async def execute_single(
        self,
        registry: HealthCheckRegistry,
        name: str,
    ) -> Optional[HealthCheckResult]:
        """Execute a single check by name (None if not registered)."""
        check = registry.get(name)
        if check is None:
            return None

        return await self._execute_check(name, check)

    async def _execute_check(
        self,
        name: str,
        check: HealthCheckPlugin,
    ) -> HealthCheckResult:
        """Execute a single check with timeout. Never raises Exception."""
        timeout = check.timeout_seconds
        if timeout is None:
            timeout = self.default_timeout
        start_time = time.monotonic()

        try:
            if check.is_async():
                outcome = await asyncio.wait_for(check.check(), timeout=timeout)
            else:
                loop = asyncio.get_running_loop()
                outcome = await asyncio.wait_for(
                    loop.run_in_executor(self._get_thread_pool(), check.check),
                    timeout=timeout,
                )
                # A plain callable may still hand back a coroutine
                if inspect.isawaitable(outcome):
                    remaining = None
                    if timeout is not None:
                        remaining = max(timeout - (time.monotonic() - start_time), 0)
                    outcome = await asyncio.wait_for(outcome, timeout=remaining)

            if not isinstance(outcome, HealthCheckResult):
                raise TypeError(
                    f"check() returned {type(outcome).__name__}, "
                    "expected HealthCheckResult"
                )
            result = outcome.with_name(name)

            logger.debug(f"Health check {name}: {result.status.value}")

        except asyncio.TimeoutError:
            logger.warning(f"Health check {name} timed out after {timeout}s")
            result = HealthCheckResult.timed_out(name, timeout)

        except Exception as e:
            logger.error(f"Health check {name} failed: {e}")
            result = HealthCheckResult.from_exception(name, e)

        return result.with_duration((time.monotonic() - start_time) * 1000)

    def _get_thread_pool(self) -> ThreadPoolExecutor:
        if self._thread_pool is None:
            self._thread_pool = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix="health-check",
            )
        return self._thread_pool

    def close(self) -> None:
        """Release the thread pool. A later run() creates a new one."""
        if self._thread_pool is not None:
            self._thread_pool.shutdown(wait=False)
            self._thread_pool = None


__all__ = [
    "HealthCheckExecutor",
]
