"""
Notification Engine

Decides when a build notification fires and renders its chat message.
"""

from .messages import MessageComposer, status_label
from .notifier import BuildNotifier
from .policy import NotificationPolicy

__all__ = [
    'BuildNotifier',
    'MessageComposer',
    'NotificationPolicy',
    'status_label',
]
