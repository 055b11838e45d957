"""
Notification Policy

Decides whether a lifecycle event produces a notification, and what the
message should contain.
"""

import logging
from typing import Optional

from ..config import NotifierConfig
from ..history.base import BuildHistoryProvider
from ..models.build import BuildOutcome, BuildRecord, SCMTriggerCause
from ..models.intent import IntentKind, NotificationIntent

logger = logging.getLogger(__name__)


class NotificationPolicy:
    """
    Maps (event, build, history) to zero or one NotificationIntent.

    Usage:
        policy = NotificationPolicy(config, history)
        intent = policy.evaluate(IntentKind.COMPLETED, build)
        if intent is not None:
            ...
    """

    def __init__(self, config: NotifierConfig, history: BuildHistoryProvider):
        self.config = config
        self.history = history

    def evaluate(self, event: IntentKind, build: BuildRecord) -> Optional[NotificationIntent]:
        """
        Evaluate one lifecycle event.

        Args:
            event: STARTED or COMPLETED
            build: Build the event belongs to

        Returns:
            NotificationIntent, or None when no notification should be sent
        """
        if event is IntentKind.STARTED:
            return self.on_started(build)
        return self.on_completed(build)

    def on_started(self, build: BuildRecord) -> NotificationIntent:
        """Start events always notify.

        SCM-triggered builds (and builds without any recorded cause) show
        the change-set summary; other builds show their cause description.
        """
        scm_triggered = build.find_cause(SCMTriggerCause) is not None
        return NotificationIntent(
            kind=IntentKind.STARTED,
            include_custom_message=self.config.include_custom_message,
            use_change_summary=scm_triggered or not build.causes,
        )

    def on_completed(self, build: BuildRecord) -> Optional[NotificationIntent]:
        result = build.outcome
        previous = self.history.previous_result(build, completed_only=True)

        triggers = {
            "aborted": result is BuildOutcome.ABORTED and self.config.notify_aborted,
            "failure": (result is BuildOutcome.FAILURE
                        and previous is not BuildOutcome.FAILURE
                        and self.config.notify_failure),
            "repeated_failure": (result is BuildOutcome.FAILURE
                                 and previous is BuildOutcome.FAILURE
                                 and self.config.notify_repeated_failure),
            "not_built": result is BuildOutcome.NOT_BUILT and self.config.notify_not_built,
            "back_to_normal": (result is BuildOutcome.SUCCESS
                               and previous in (BuildOutcome.FAILURE, BuildOutcome.UNSTABLE)
                               and self.config.notify_back_to_normal),
            "success": result is BuildOutcome.SUCCESS and self.config.notify_success,
            "unstable": result is BuildOutcome.UNSTABLE and self.config.notify_unstable,
        }
        matched = [name for name, fired in triggers.items() if fired]

        if not matched:
            logger.debug(
                "No trigger matched for %s %s (result=%s, previous=%s)",
                build.project_name,
                build.name,
                result.value,
                previous.value,
            )
            return None

        logger.info(
            "Notifying %s %s: %s",
            build.project_name,
            build.name,
            ", ".join(matched),
        )
        return NotificationIntent(
            kind=IntentKind.COMPLETED,
            include_test_summary=self.config.include_test_summary,
            include_custom_message=self.config.include_custom_message,
            include_commit_list=self.config.commit_info_choice.show_anything,
        )
