"""LinkedIn client facade.

Wires configuration, token provider and HTTP transport together and exposes
the API wrappers as attributes:

    with LinkedInClient.from_config(ClientConfig.from_env()) as client:
        client.groups.group_memberships()
"""

from loguru import logger

from linkedin_groups.api.groups import GroupsClient
from linkedin_groups.core.config import ClientConfig
from linkedin_groups.core.exceptions import ConfigurationError
from linkedin_groups.core.protocols import TokenProvider, Transport
from linkedin_groups.infrastructure.http_client import LinkedInHTTPClient
from linkedin_groups.infrastructure.token_provider import (
    FileBasedTokenProvider,
    StaticTokenProvider,
)


class LinkedInClient:
    """Entry point owning one transport shared by all API wrappers."""

    def __init__(self, transport: Transport):
        self.transport = transport
        self.groups = GroupsClient(transport)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "LinkedInClient":
        """Build a client from configuration.

        An explicit access token wins over a credentials file.

        Raises:
            ConfigurationError: If neither a token nor a credentials file is set
            AuthenticationError: If the token cannot be loaded
        """
        transport = LinkedInHTTPClient(
            token_provider=cls._token_provider(config),
            api_base_url=config.api_base_url,
            timeout=config.timeout,
        )
        return cls(transport)

    @staticmethod
    def _token_provider(config: ClientConfig) -> TokenProvider:
        if config.access_token:
            logger.debug("Using access token from configuration")
            return StaticTokenProvider(config.access_token)
        if config.credentials_file:
            return FileBasedTokenProvider(config.credentials_file)
        raise ConfigurationError(
            "No LinkedIn credentials configured: set an access token or a credentials file"
        )

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "LinkedInClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
