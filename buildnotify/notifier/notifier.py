"""
Build Notifier

Lifecycle hooks: evaluate the policy, render the messages and publish them.
"""

import logging
from typing import List

from ..config import NotifierConfig
from ..history.base import BuildHistoryProvider
from ..models.build import BuildRecord
from ..models.intent import IntentKind
from ..monitoring.sentry import add_breadcrumb, set_build_context
from ..transport.base import ChatTransport
from .messages import MessageComposer
from .policy import NotificationPolicy

logger = logging.getLogger(__name__)


class BuildNotifier:
    """
    Sends chat notifications for build lifecycle events.

    Usage:
        notifier = BuildNotifier(config, history, WebhookTransport(config))
        notifier.started(build)
        ...
        notifier.completed(build)
    """

    def __init__(
        self,
        config: NotifierConfig,
        history: BuildHistoryProvider,
        transport: ChatTransport,
    ):
        self.config = config
        self.history = history
        self.transport = transport
        self.policy = NotificationPolicy(config, history)
        self.composer = MessageComposer(config, history)

    def started(self, build: BuildRecord) -> bool:
        """
        Publish the start notification for a build.

        Returns:
            Publish result from the transport
        """
        set_build_context(build, event=IntentKind.STARTED.value)
        intent = self.policy.evaluate(IntentKind.STARTED, build)
        message = self.composer.render(intent, build)
        return self._publish(message)

    def completed(self, build: BuildRecord) -> List[bool]:
        """
        Publish the completion notifications for a build, if any trigger fires.

        The status message is sent first, followed by the commit list when
        commit details are configured.

        Returns:
            Publish results, one per message sent (empty when silent)
        """
        logger.info("Build completed: %s %s", build.project_name, build.name)
        set_build_context(build, event=IntentKind.COMPLETED.value)

        intent = self.policy.evaluate(IntentKind.COMPLETED, build)
        if intent is None:
            return []

        results = [self._publish(self.composer.render(intent, build))]
        if intent.include_commit_list:
            results.append(self._publish(self.composer.render_commit_list(build)))
        return results

    def finalized(self, build: BuildRecord) -> None:
        pass

    def deleted(self, build: BuildRecord) -> None:
        pass

    def _publish(self, message: str) -> bool:
        add_breadcrumb(message="Publishing notification", category="notifier")
        sent = self.transport.publish(message)
        if not sent:
            logger.warning("Notification was not delivered")
        return sent
