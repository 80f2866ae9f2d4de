"""
Utility helpers for Mockli.
"""

from .logging_utils import configure_logging, log_builder_action

__all__ = [
    'configure_logging',
    'log_builder_action'
]
