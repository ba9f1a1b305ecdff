"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_PREFIX = "/api"
DEFAULT_RECENT_ACTIVITIES_LIMIT = 5
TOP_SCHOOLS_LIMIT = 5
MIN_PASSWORD_LENGTH = 6
