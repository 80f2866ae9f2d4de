"""
Core error definitions for Mockli

Provides error codes and the exception hierarchy raised by the opt-in strict
merge mode, fixture loading and configuration validation. Ordinary builder
usage never raises.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorCode(Enum):
    """Standardized error codes for the library."""

    # Fixture Errors
    INVALID_FIXTURE = "INVALID_FIXTURE"

    # Merge Errors
    METHOD_COLLISION = "METHOD_COLLISION"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"


class MockliError(Exception):
    """Base exception carrying an error code and optional details."""

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MergeCollisionError(MockliError):
    """Raised in strict mode when two blueprints define the same member."""

    def __init__(self, name: str, previous_origin: str, origin: str):
        super().__init__(
            ErrorCode.METHOD_COLLISION,
            f"Member '{name}' from {origin} collides with definition from {previous_origin}",
            {'name': name, 'previous_origin': previous_origin, 'origin': origin}
        )
        self.name = name


class FixtureValidationError(MockliError):
    """Raised when fixture content does not have the section/key/entry shape."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(ErrorCode.INVALID_FIXTURE, message, details)
