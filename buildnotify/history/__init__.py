"""
Build History

Lookup interface over project build chains, with an in-memory index and a
JSON history file loader.
"""

from .base import BuildHistoryProvider, EnvironmentUnavailableError
from .memory import InMemoryBuildHistory
from .loader import load_history

__all__ = [
    'BuildHistoryProvider',
    'EnvironmentUnavailableError',
    'InMemoryBuildHistory',
    'load_history',
]
