"""
Error Handling Utilities

Provides the logging and argument checks shared by the factory registration
methods and the build pipeline.
"""

import logging
from typing import Dict, Any, Optional

from factory_kit.core.errors import ErrorCode, ValidationError

logger = logging.getLogger(__name__)


def log_factory_error(factory_name: str, stage: str, error: Exception,
                      context: Optional[Dict[str, Any]] = None) -> None:
    """
    Log a build failure with consistent formatting.

    Args:
        factory_name: Name of the factory whose build failed
        stage: Pipeline stage that raised (options, attributes, create, after)
        error: Exception that occurred
        context: Optional context information
    """
    context_str = f" Context: {context}" if context else ""
    logger.error(f"Error in {factory_name} during {stage}: {type(error).__name__}: {str(error)}{context_str}")


def log_factory_action(factory_name: str, action: str, context: Optional[Dict[str, Any]] = None,
                       level: int = logging.DEBUG) -> None:
    """
    Log factory actions with consistent formatting.

    Args:
        factory_name: Name of the factory
        action: Action being performed
        context: Optional context information
        level: Logging level, DEBUG unless the caller asks for more
    """
    context_str = f" Context: {context}" if context else ""
    logger.log(level, f"{factory_name}: {action}{context_str}")


def validate_key(key: Any, kind: str) -> str:
    """
    Ensure an attribute or option name is a non-empty string.

    Raises:
        ValidationError: If the key is not usable
    """
    if not isinstance(key, str) or not key:
        raise ValidationError(
            ErrorCode.INVALID_KEY,
            f"Invalid {kind} key: {key!r} - expected a non-empty string",
            {"kind": kind, "key": repr(key)}
        )
    return key


def validate_callable(func: Any, kind: str) -> None:
    """
    Ensure a callback or closure can be invoked.

    Raises:
        ValidationError: If the value is not callable
    """
    if not callable(func):
        raise ValidationError(
            ErrorCode.INVALID_CALLBACK,
            f"{kind} must be callable, got {type(func).__name__}",
            {"kind": kind}
        )


def validate_count(count: Any) -> int:
    """
    Ensure a batch size is a non-negative integer.

    Raises:
        ValidationError: If the count is invalid
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ValidationError(
            ErrorCode.INVALID_COUNT,
            f"Invalid batch count: {count!r}",
            {"count": repr(count)}
        )
    return count
