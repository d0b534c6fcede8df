# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 17 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the health service.
"""

from core.config.defaults import (
    HealthOptions,
    LoggingDefaults,
    get_defaults,
    get_options,
    reset_defaults,
)

__all__ = [
    "HealthOptions",
    "LoggingDefaults",
    "get_defaults",
    "get_options",
    "reset_defaults",
]
