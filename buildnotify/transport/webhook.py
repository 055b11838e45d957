"""
Webhook Chat Client

Posts plain-text messages to a Rocket.Chat or Slack incoming webhook.
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import NotifierConfig
from ..monitoring.sentry import add_breadcrumb
from .base import ChatTransport

logger = logging.getLogger(__name__)


class WebhookTransport(ChatTransport):
    """
    Sends messages to a chat incoming webhook.

    Usage:
        config = NotifierConfig.from_env()
        transport = WebhookTransport(config)
        transport.publish("api-server - #12 Failure after 3 min 12 sec")
    """

    def __init__(self, config: Optional[NotifierConfig] = None):
        """
        Initialize webhook transport.

        Args:
            config: NotifierConfig with webhook URL, channel and timeout
        """
        self.config = config or NotifierConfig.from_env()
        self._webhook_url = self.config.webhook_url

    @property
    def enabled(self) -> bool:
        """Check if the webhook is configured."""
        return bool(self._webhook_url)

    def publish(self, message: str) -> bool:
        """
        Post a message to the webhook.

        Args:
            message: Rendered message text

        Returns:
            True if sent successfully
        """
        if not self.enabled:
            logger.debug("Webhook not configured, skipping notification")
            return False

        payload: Dict[str, Any] = {"text": message}
        if self.config.channel:
            payload["channel"] = self.config.channel

        try:
            response = requests.post(
                self._webhook_url,
                json=payload,
                timeout=self.config.webhook_timeout,
            )
            response.raise_for_status()
            logger.debug("Chat notification sent successfully")
            add_breadcrumb(message="Chat notification sent", category="transport")
            return True

        except requests.RequestException as e:
            logger.error("Failed to send chat notification: %s", e)
            return False
