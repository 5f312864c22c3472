"""Token provider implementations for OAuth2 authentication.

StaticTokenProvider wraps a token handed over by the caller (for example
from the LINKEDIN_ACCESS_TOKEN environment variable). FileBasedTokenProvider
reads the token from a YAML credentials file laid out per platform:

    linkedin:
      access_token: AQX...
"""

from pathlib import Path
from typing import Any, Dict
import yaml
from loguru import logger

from linkedin_groups.core.exceptions import AuthenticationError


class StaticTokenProvider:
    """Token provider returning a fixed access token."""

    def __init__(self, access_token: str):
        if not access_token:
            raise AuthenticationError("Access token cannot be empty")
        self._access_token = access_token

    def get_access_token(self) -> str:
        return self._access_token


class FileBasedTokenProvider:
    """Token provider that reads credentials from a YAML file.

    The file is read once, at construction time.
    """

    def __init__(self, credentials_file: str, platform: str = "linkedin"):
        """Initialize file-based token provider.

        Args:
            credentials_file: Path to the credentials YAML file
            platform: Top-level section holding the token

        Raises:
            AuthenticationError: If the file or token cannot be read
        """
        self.platform = platform.lower()
        self.credentials_file = Path(credentials_file)
        self._credentials = self._load_credentials()

        logger.info(f"FileBasedTokenProvider initialized for {self.platform}")

    def _load_credentials(self) -> Dict[str, Any]:
        """Load the platform section from the credentials file.

        Returns:
            Dictionary with platform credentials

        Raises:
            AuthenticationError: If credentials file not found or invalid
        """
        if not self.credentials_file.exists():
            raise AuthenticationError(
                f"Credentials file not found: {self.credentials_file}",
                details={"platform": self.platform},
            )

        try:
            with open(self.credentials_file, "r") as f:
                all_credentials = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise AuthenticationError(
                f"Invalid YAML in credentials file: {self.credentials_file}",
                details={"error": str(e)},
            )

        if not isinstance(all_credentials, dict) or self.platform not in all_credentials:
            raise AuthenticationError(
                f"Platform '{self.platform}' not found in credentials file",
                details={"file": str(self.credentials_file)},
            )

        credentials = all_credentials[self.platform] or {}
        if not isinstance(credentials, dict):
            raise AuthenticationError(
                f"Credentials for platform '{self.platform}' must be a mapping",
                details={"file": str(self.credentials_file)},
            )
        if not credentials.get("access_token"):
            raise AuthenticationError(
                f"No access_token for platform '{self.platform}' in credentials file",
                details={"file": str(self.credentials_file)},
            )

        return credentials

    def get_access_token(self) -> str:
        """Get the access token from the loaded credentials.

        Returns:
            Access token string
        """
        return self._credentials["access_token"]
