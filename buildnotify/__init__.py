"""Build Notifier - Chat notifications for build lifecycle events.

This package decides when a build start or completion deserves a chat
message and renders that message from the build and its history.

Modules:
    models - Data models (dataclasses)
    history - Build history lookups and history file loading
    notifier - Notification policy, message rendering and orchestration
    transport - Chat endpoint clients
    helpers - Pure utility functions
    monitoring - Sentry error tracking
    config - Configuration
"""

from .config import CommitInfoChoice, NotifierConfig
from .notifier import BuildNotifier, MessageComposer, NotificationPolicy

__all__ = [
    'CommitInfoChoice',
    'NotifierConfig',
    'BuildNotifier',
    'MessageComposer',
    'NotificationPolicy',
]

__version__ = '1.0.0'
