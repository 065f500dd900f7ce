"""Application-wide constants.

This module centralizes magic numbers and configuration constants
that are used across multiple modules. For environment-specific
configuration, see config.py.
"""

# =============================================================================
# Projects
# =============================================================================

# Allowed characters in a project slug
PROJECT_SLUG_PATTERN: str = r"^[a-z0-9._-]+$"

# Maximum slug length
PROJECT_SLUG_MAX_LENGTH: int = 64

# =============================================================================
# External Registries
# =============================================================================

GITHUB_API_URL: str = "https://api.github.com"
MODRINTH_API_URL: str = "https://api.modrinth.com/v2"
SPIGET_API_URL: str = "https://api.spiget.org/v2"
HANGAR_API_URL: str = "https://hangar.papermc.io/api/v1"

# Releases/assets requested per page from GitHub
GITHUB_PAGE_SIZE: int = 50

# Safety cap on paged GitHub release listings
GITHUB_MAX_RELEASE_PAGES: int = 20

# HTTP timeout for a single registry request (seconds)
REGISTRY_HTTP_TIMEOUT_SECONDS: float = 15.0

# User agent sent to registries that require one
REGISTRY_USER_AGENT: str = "project-stats-api/1.0"

# =============================================================================
# Charts
# =============================================================================

# Default query parameters for the transactions chart
DEFAULT_CHART_PAST_DAYS: int = 30
DEFAULT_CHART_DAY_GROUPING: int = 7

# Upper bound for pastDays and dayGrouping; keeps every bucket boundary a valid datetime
MAX_CHART_DAYS: int = 36_600

# Series presentation
CHART_SERIES_TYPE: str = "line"
CHART_SERIES_STACK: str = "Total"

# Bucket widths with dedicated label formats
WEEK_GROUPING_DAYS: int = 7
MONTH_GROUPING_DAYS: int = 30
YEAR_GROUPING_DAYS: tuple[int, ...] = (365, 366)
