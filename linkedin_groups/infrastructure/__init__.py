"""Infrastructure: HTTP transport and token providers."""

from linkedin_groups.infrastructure.http_client import LinkedInHTTPClient
from linkedin_groups.infrastructure.token_provider import (
    FileBasedTokenProvider,
    StaticTokenProvider,
)

__all__ = ["LinkedInHTTPClient", "FileBasedTokenProvider", "StaticTokenProvider"]
