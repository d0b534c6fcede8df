# ============================================================================
# HEALTH CHECK ERRORS
# ============================================================================
# STATUS: Core - Structural misuse errors
# PURPOSE: Errors raised to callers of registration and lookup operations
# CREATED: 17 OCT 2026
# ============================================================================
"""
Health Check Errors

Only structural misuse surfaces as an exception. Failures inside a check
are converted to DOWN results by the executor and never raised.
"""


class HealthError(Exception):
    """Base class for health check errors."""


class InvalidNameError(HealthError, ValueError):
    """A check or result was given an empty or blank name."""

    def __init__(self, name=None):
        self.name = name
        super().__init__(f"Health check name must not be empty: {name!r}")


class InvalidGroupError(HealthError, ValueError):
    """An unrecognized health group identifier was requested."""

    def __init__(self, group):
        self.group = group
        super().__init__(f"Unknown health group: {group!r}")


class InvalidMarkerError(HealthError, ValueError):
    """An unrecognized classification marker was given for a check."""

    def __init__(self, marker):
        self.marker = marker
        super().__init__(f"Unknown health check marker: {marker!r}")


__all__ = [
    "HealthError",
    "InvalidNameError",
    "InvalidGroupError",
    "InvalidMarkerError",
]
