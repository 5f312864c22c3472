"""Constants for the LinkedIn Groups client.

Centralizes the API host, request headers, request bodies and
environment variable names so they are not duplicated across modules.
"""

from enum import Enum
from typing import Final


# API constants
API_BASE_URL: Final[str] = "https://api.linkedin.com/v1"
REQUEST_TIMEOUT_SECONDS: Final[int] = 30
JSON_CONTENT_TYPE: Final[str] = "application/json"
ACCESS_TOKEN_PARAM: Final[str] = "oauth2_access_token"

DEFAULT_HEADERS: Final[dict] = {
    "x-li-format": "json",
    "Accept": JSON_CONTENT_TYPE,
}

# Body sent when the current user joins (or asks to join) a group
MEMBERSHIP_STATE_MEMBER: Final[dict] = {"membership-state": {"code": "member"}}

# Query parameters with a dedicated QueryOptions field
COUNT_PARAM: Final[str] = "count"
START_PARAM: Final[str] = "start"

# Environment variable names
ENV_ACCESS_TOKEN: Final[str] = "LINKEDIN_ACCESS_TOKEN"
ENV_CREDENTIALS_FILE: Final[str] = "LINKEDIN_CREDENTIALS_FILE"
ENV_API_BASE_URL: Final[str] = "LINKEDIN_API_BASE_URL"
ENV_TIMEOUT: Final[str] = "LINKEDIN_TIMEOUT"
ENV_LOG_LEVEL: Final[str] = "LINKEDIN_LOG_LEVEL"

# Logging configuration
LOG_FORMAT: Final[str] = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
LOG_LEVEL_DEFAULT: Final[str] = "INFO"
LOG_LEVEL_DEBUG: Final[str] = "DEBUG"
LOG_LEVELS: Final[tuple] = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class HTTPMethod(Enum):
    """HTTP request methods used by the Groups API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
