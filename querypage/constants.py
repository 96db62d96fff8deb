"""
Application-level constants for hardcoded business logic.

These values represent core application behavior and should NEVER be changed
via environment variables or configuration.

For configurable values (database URL, default page size, log level),
see querypage/settings.py where values can be overridden via environment
variables.
"""

# ============================================================================
# Pagination Safety Limits
# ============================================================================

# Maximum allowed page size to prevent excessive database loads
# Hard safety limit regardless of what client requests
# For default page size, see querypage/settings.py (DEFAULT_PAGE_SIZE)
MAX_PAGE_SIZE = 1000


# ============================================================================
# Query Execution Stages
# ============================================================================

# Names of the two delegated calls made while fetching a page. Carried on
# QueryExecutionError so callers can tell which of them failed.
STAGE_FETCH = "fetch"
STAGE_COUNT = "count"


# ============================================================================
# Logging
# ============================================================================

# Upper bound (bytes) of a single JSON log line written to the error file
MAX_LOG_LINE_BYTES = 100_000
