"""Application-wide constants."""

PROJECT_NAME = "Hotel Voice Assistant"
API_PREFIX = "/api"
SCHEMA_VERSION = "v1"

# Every websocket client joins this room; staff dashboards listen here.
STAFF_ROOM = "staff_requests"

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "fr", "zh", "ru", "ko")

TOKEN_COOKIE_NAME = "token"

RECENT_SUMMARIES_MIN_HOURS = 1
RECENT_SUMMARIES_MAX_HOURS = 168
