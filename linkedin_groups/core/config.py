"""Configuration management for the LinkedIn Groups client.

Configuration can come from environment variables (optionally loaded from a
.env file) or from a YAML file. Both sources produce the same ClientConfig
dataclass, which validates itself on creation.
"""

import yaml
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv
from loguru import logger

from linkedin_groups.core.exceptions import ConfigurationError
from linkedin_groups.utils.env import get_env, get_env_int
from linkedin_groups.core.constants import (
    API_BASE_URL,
    REQUEST_TIMEOUT_SECONDS,
    LOG_LEVEL_DEFAULT,
    LOG_LEVELS,
    ENV_ACCESS_TOKEN,
    ENV_CREDENTIALS_FILE,
    ENV_API_BASE_URL,
    ENV_TIMEOUT,
    ENV_LOG_LEVEL,
)


@dataclass
class ClientConfig:
    """Settings for building a LinkedInClient."""

    access_token: Optional[str] = None
    credentials_file: Optional[str] = None
    api_base_url: str = API_BASE_URL
    timeout: int = REQUEST_TIMEOUT_SECONDS
    log_level: str = LOG_LEVEL_DEFAULT

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.api_base_url:
            raise ConfigurationError("API base URL cannot be empty")
        if self.timeout <= 0:
            raise ConfigurationError(
                f"Timeout must be positive, got {self.timeout}",
                details={"timeout": self.timeout},
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level!r}",
                details={"allowed": list(LOG_LEVELS)},
            )
        self.api_base_url = self.api_base_url.rstrip("/")
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "ClientConfig":
        """Create configuration from environment variables.

        A .env file is loaded first when present; variables already set in
        the environment take precedence over it.

        Args:
            dotenv_path: Optional explicit path to a .env file

        Returns:
            ClientConfig instance

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        load_dotenv(dotenv_path)

        try:
            timeout = get_env_int(ENV_TIMEOUT, REQUEST_TIMEOUT_SECONDS)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid timeout: {e}",
                details={"env_var": ENV_TIMEOUT},
            )

        return cls(
            access_token=get_env(ENV_ACCESS_TOKEN),
            credentials_file=get_env(ENV_CREDENTIALS_FILE),
            api_base_url=get_env(ENV_API_BASE_URL, API_BASE_URL),
            timeout=timeout,
            log_level=get_env(ENV_LOG_LEVEL, LOG_LEVEL_DEFAULT),
        )

    @classmethod
    def from_yaml(cls, path: str) -> "ClientConfig":
        """Create configuration from a YAML file.

        The file holds a mapping whose keys match the dataclass fields.
        Unknown keys are ignored with a warning.

        Args:
            path: Path to the YAML file

        Returns:
            ClientConfig instance

        Raises:
            ConfigurationError: If the file is missing or malformed
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r") as ymlfile:
                data = yaml.safe_load(ymlfile) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {config_path}",
                details={"error": str(e)},
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {config_path}"
            )

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key in known:
                values[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")

        if "timeout" in values:
            try:
                values["timeout"] = int(values["timeout"])
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"Invalid timeout: {values['timeout']}",
                    details={"file": str(config_path)},
                )

        logger.debug(f"Loaded configuration from {config_path}")
        return cls(**values)
