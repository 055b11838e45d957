"""Chat Transport - Interface for publishing rendered messages."""

from abc import ABC, abstractmethod
from typing import List


class ChatTransport(ABC):
    """Abstract interface for a chat endpoint."""

    @abstractmethod
    def publish(self, message: str) -> bool:
        """
        Publish a message.

        Returns:
            True if the endpoint accepted the message
        """
        pass


class RecordingTransport(ChatTransport):
    """Keeps published messages in memory (dry runs and tests)."""

    def __init__(self, accept: bool = True):
        self.messages: List[str] = []
        self.accept = accept

    def publish(self, message: str) -> bool:
        self.messages.append(message)
        return self.accept
