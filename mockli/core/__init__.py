"""
Core package for Mockli error definitions.
"""

from .errors import ErrorCode, MockliError, MergeCollisionError, FixtureValidationError

__all__ = [
    'ErrorCode',
    'MockliError',
    'MergeCollisionError',
    'FixtureValidationError'
]
