"""Notification intents produced by the notification policy."""

from dataclasses import dataclass
from enum import Enum


class IntentKind(Enum):
    """Lifecycle event a notification belongs to."""
    STARTED = "started"
    COMPLETED = "completed"


@dataclass(frozen=True)
class NotificationIntent:
    """Decision to notify, plus what the rendered message should contain."""

    kind: IntentKind
    include_test_summary: bool = False
    include_custom_message: bool = False
    include_commit_list: bool = False
    # Started only: render the change-set summary instead of the cause description
    use_change_summary: bool = False

    @property
    def is_started(self) -> bool:
        return self.kind is IntentKind.STARTED
