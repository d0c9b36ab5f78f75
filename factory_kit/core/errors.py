"""
Core error definitions for factory_kit

Provides error codes and the validation exception raised when a factory is
configured with invalid arguments. Failures that happen inside ``build`` are
never wrapped in these types.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorCode(Enum):
    """Standardized error codes for factory registration."""

    INVALID_KEY = "INVALID_KEY"
    INVALID_CALLBACK = "INVALID_CALLBACK"
    INVALID_COUNT = "INVALID_COUNT"


class ValidationError(Exception):
    """Custom exception for invalid factory configuration."""

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)
