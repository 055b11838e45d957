"""
Chat Transport

Publishes rendered notification messages to a chat endpoint.
"""

from .base import ChatTransport, RecordingTransport
from .webhook import WebhookTransport

__all__ = [
    'ChatTransport',
    'RecordingTransport',
    'WebhookTransport',
]
