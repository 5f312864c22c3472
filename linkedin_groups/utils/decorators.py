"""Shared decorator functions."""
import warnings
from functools import wraps
from typing import Callable
from loguru import logger


def deprecated(replacement: str):
    """
    Mark a function as deprecated in favour of another one.

    Each call emits one DeprecationWarning and a log line, then runs the
    wrapped function with its arguments unchanged.

    Args:
        replacement: Name of the function callers should use instead

    Returns:
        Decorated function
    """

    def wrapper(func: Callable):
        message = (
            f"Use {replacement} over {func.__name__}. "
            f"This will be taken out in future versions"
        )

        @wraps(func)
        def wrapper_func(*args, **kwargs):
            warnings.warn(message, DeprecationWarning, stacklevel=2)
            logger.warning(message)
            return func(*args, **kwargs)

        wrapper_func.__deprecated__ = message
        return wrapper_func

    return wrapper
