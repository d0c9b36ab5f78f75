"""
factory_kit - declarative object factories for test fixtures.
"""

from .factory import Factory
from .core.errors import ErrorCode, ValidationError

__all__ = [
    'Factory',
    'ErrorCode',
    'ValidationError'
]
