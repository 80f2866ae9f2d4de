"""
Mockli - composable mock data builders for test suites.

Domain extensions subclass MockBuilder and add chained ``with_*`` methods;
merge_all combines several of them onto one builder sharing a single mapping.
"""

from .builder import MockBuilder, BuilderT, entity
from .merger import MergedMockBuilder, merge_all
from .fixtures import FixtureMock, load_fixture
from .core.errors import ErrorCode, MockliError, MergeCollisionError, FixtureValidationError
from .utils.logging_utils import configure_logging

__version__ = '0.1.0'

__all__ = [
    'MockBuilder',
    'BuilderT',
    'entity',
    'MergedMockBuilder',
    'merge_all',
    'FixtureMock',
    'load_fixture',
    'ErrorCode',
    'MockliError',
    'MergeCollisionError',
    'FixtureValidationError',
    'configure_logging'
]
