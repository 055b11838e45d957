"""Helpers - Pure utility functions with no side effects."""

from .text import escape, expand_variables
from .timespan import format_timespan

__all__ = [
    'escape',
    'expand_variables',
    'format_timespan',
]
