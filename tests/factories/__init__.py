"""
Test Data Factories and Builders

Example domain extensions used across the test suite. Each one subclasses
MockBuilder and adds chained ``with_*`` methods for a fixture domain.
"""

from .user_mock import UserMock, UserDirectoryMock
from .catalog_mock import ProductMock, OrderMock

__all__ = [
    'UserMock',
    'UserDirectoryMock',
    'ProductMock',
    'OrderMock'
]
