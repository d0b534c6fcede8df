# ============================================================================
# HEALTH CORE TYPE TESTS
# ============================================================================
# STATUS: Tests - Results, statuses and function checks
# PURPOSE: Verify result construction rules and status combination
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Core Type Tests

Covers:
1. HealthCheckResult validation (names, data values, empty data)
2. Result factories (up/down/exception/timeout)
3. HealthStatus aggregation (DOWN wins, empty is UP)
4. AggregatedHealthResult combination and ordering
5. FunctionHealthCheck adapting sync and async callables

Run with:
    pytest tests/test_health_core.py -v
"""

import asyncio
import functools
import pytest

from health.core import (
    AggregatedHealthResult,
    FunctionHealthCheck,
    HealthCheckMarker,
    HealthCheckResult,
    HealthStatus,
)
from health.errors import InvalidMarkerError, InvalidNameError


# ============================================================================
# RESULT CONSTRUCTION
# ============================================================================

class TestHealthCheckResult:
    """HealthCheckResult construction rules."""

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, name):
        with pytest.raises(InvalidNameError):
            HealthCheckResult(name=name, up=True)

    def test_invalid_name_is_value_error(self):
        with pytest.raises(ValueError):
            HealthCheckResult.up_result("")

    def test_empty_data_normalized_to_none(self):
        assert HealthCheckResult(name="db", up=True, data={}).data is None
        assert HealthCheckResult.up_result("db").data is None

    def test_scalar_data_kept(self):
        result = HealthCheckResult.up_result("db", pool="5", size=3, ok=True, ratio=0.5)
        assert dict(result.data) == {"pool": "5", "size": 3, "ok": True, "ratio": 0.5}

    def test_non_scalar_data_rejected(self):
        with pytest.raises(TypeError):
            HealthCheckResult.up_result("db", nested={"a": 1})

    def test_data_is_read_only(self):
        result = HealthCheckResult.up_result("db", pool="5")
        with pytest.raises(TypeError):
            result.data["pool"] = "6"

    def test_data_copied_from_input(self):
        source = {"pool": "5"}
        result = HealthCheckResult(name="db", up=True, data=source)
        source["pool"] = "9"
        assert result.data["pool"] == "5"

    def test_status_property(self):
        assert HealthCheckResult.up_result("a").status == HealthStatus.UP
        assert HealthCheckResult.down_result("a").status == HealthStatus.DOWN

    def test_from_exception_uses_message(self):
        result = HealthCheckResult.from_exception("db", RuntimeError("connection refused"))
        assert result.up is False
        assert result.data["reason"] == "connection refused"

    def test_from_exception_without_message_uses_type(self):
        result = HealthCheckResult.from_exception("db", KeyError())
        assert result.data["reason"]
        result = HealthCheckResult.from_exception("db", RuntimeError())
        assert result.data["reason"] == "RuntimeError"

    def test_timed_out_marks_timeout(self):
        result = HealthCheckResult.timed_out("db", 2.0)
        assert result.up is False
        assert result.data["timeout"] is True
        assert "2.0" in result.data["reason"]

    def test_with_name_returns_renamed_copy(self):
        original = HealthCheckResult.up_result("inner", pool="5")
        renamed = original.with_name("db")
        assert renamed.name == "db"
        assert original.name == "inner"
        assert renamed.data == original.data

    def test_nested_checks_stored_as_tuple(self):
        child = HealthCheckResult.up_result("replica")
        parent = HealthCheckResult(name="db", up=True, checks=[child])
        assert parent.checks == (child,)
        assert parent.to_dict()["checks"][0]["name"] == "replica"

    def test_equal_results_hash_equal(self):
        first = HealthCheckResult.up_result("db", pool="5", replicas=2)
        second = HealthCheckResult.up_result("db", replicas=2, pool="5")
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second, HealthCheckResult.up_result("db")}) == 2

    def test_results_usable_as_dict_keys(self):
        child = HealthCheckResult.down_result("replica", reason="lag")
        parent = HealthCheckResult(name="db", up=False, data={"reason": "replica"}, checks=[child])
        seen = {parent: "parent", child: "child"}
        assert seen[HealthCheckResult.down_result("replica", reason="lag")] == "child"


# ============================================================================
# STATUS AGGREGATION
# ============================================================================

class TestAggregation:
    """DOWN wins; empty is vacuously UP."""

    def test_status_aggregate_empty_is_up(self):
        assert HealthStatus.aggregate([]) == HealthStatus.UP

    def test_status_aggregate_down_wins(self):
        statuses = [HealthStatus.UP, HealthStatus.DOWN, HealthStatus.UP]
        assert HealthStatus.aggregate(statuses) == HealthStatus.DOWN

    def test_combine_empty(self):
        aggregated = AggregatedHealthResult.combine([])
        assert aggregated.up is True
        assert aggregated.checks == ()

    @pytest.mark.parametrize("down_count", [1, 2, 5])
    def test_combine_any_down_is_down(self, down_count):
        results = [HealthCheckResult.up_result(f"up-{i}") for i in range(5)]
        results += [HealthCheckResult.down_result(f"down-{i}") for i in range(down_count)]
        assert AggregatedHealthResult.combine(results).up is False

    def test_combine_all_up_is_up(self):
        results = [HealthCheckResult.up_result(f"c{i}") for i in range(5)]
        assert AggregatedHealthResult.combine(results).status == HealthStatus.UP

    def test_combine_orders_by_name(self):
        results = [
            HealthCheckResult.up_result("redis"),
            HealthCheckResult.up_result("cache"),
            HealthCheckResult.up_result("db"),
        ]
        aggregated = AggregatedHealthResult.combine(results)
        assert aggregated.names() == ["cache", "db", "redis"]
        assert aggregated.get("db").name == "db"
        assert aggregated.get("missing") is None


# ============================================================================
# FUNCTION CHECKS
# ============================================================================

class TestFunctionHealthCheck:
    """Adapting bare callables."""

    def test_blank_name_rejected(self):
        with pytest.raises(InvalidNameError):
            FunctionHealthCheck("", lambda: True)

    def test_sync_bool(self):
        check = FunctionHealthCheck("flag", lambda: False)
        assert check.is_async() is False
        result = check.check()
        assert result.name == "flag"
        assert result.up is False

    def test_sync_result_passthrough(self):
        check = FunctionHealthCheck("db", lambda: HealthCheckResult.up_result("db", pool="5"))
        assert check.check().data["pool"] == "5"

    def test_async_callable(self):
        async def ping():
            return True

        check = FunctionHealthCheck("ping", ping)
        assert check.is_async() is True
        result = asyncio.run(check.check())
        assert result.up is True

    def test_wrong_return_type_raises(self):
        check = FunctionHealthCheck("bad", lambda: "yes")
        with pytest.raises(TypeError):
            check.check()

    def test_markers_parsed(self):
        check = FunctionHealthCheck("m", lambda: True, markers=["liveness", HealthCheckMarker.STARTUP])
        assert check.markers == {HealthCheckMarker.LIVENESS, HealthCheckMarker.STARTUP}

    def test_unknown_marker_rejected(self):
        with pytest.raises(InvalidMarkerError, match="bogus"):
            FunctionHealthCheck("m", lambda: True, markers=["bogus"])

    def test_wrapped_async_callable(self):
        async def ping():
            return True

        @functools.wraps(ping)
        def traced():
            return ping()

        check = FunctionHealthCheck("traced", traced)
        assert check.is_async() is True
        assert asyncio.run(check.check()).up is True

    def test_lambda_returning_coroutine(self):
        async def ping():
            return False

        check = FunctionHealthCheck("lam", lambda: ping())
        assert check.is_async() is False
        result = asyncio.run(check.check())
        assert result.name == "lam"
        assert result.up is False
