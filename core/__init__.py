# ============================================================================
# CORE MODULE
# ============================================================================
# STATUS: Core module initialization
# PURPOSE: Shared configuration and structured logging
# LAST_REVIEWED: 17 OCT 2026
# ============================================================================
