"""
Environment variable utilities.
Provides functions for accessing environment variables with proper error handling.
"""

import os
from typing import Optional


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.environ.get(key, default)


def get_env_int(key: str, default: int) -> int:
    """
    Get environment variable as integer.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Integer value

    Raises:
        ValueError: If the variable is set but is not an integer
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable '{key}' must be an integer, got '{value}'")
