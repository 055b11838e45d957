"""
Notifier Configuration

Loads notification settings from environment variables.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

ENV_PREFIX = "BUILDNOTIFY_"


class CommitInfoChoice(Enum):
    """Which commit details to include in the commit list message."""
    NONE = "none"
    AUTHOR = "author"
    TITLE = "title"
    AUTHOR_AND_TITLE = "author_and_title"

    @property
    def show_title(self) -> bool:
        return self in (CommitInfoChoice.TITLE, CommitInfoChoice.AUTHOR_AND_TITLE)

    @property
    def show_author(self) -> bool:
        return self in (CommitInfoChoice.AUTHOR, CommitInfoChoice.AUTHOR_AND_TITLE)

    @property
    def show_anything(self) -> bool:
        return self.show_title or self.show_author

    @classmethod
    def parse(cls, value: str) -> "CommitInfoChoice":
        """Parse a choice from its name or value (case-insensitive)."""
        normalized = value.strip().lower()
        for choice in cls:
            if normalized in (choice.value, choice.name.lower()):
                return choice
        valid = ", ".join(c.value for c in cls)
        raise ValueError(f"Unknown commit info choice '{value}' (expected one of: {valid})")


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


def _env_flag(name: str, default: bool) -> bool:
    return _env(name, "true" if default else "false").lower() == "true"


@dataclass
class NotifierConfig:
    """Configuration for build notifications."""

    # Completion triggers
    notify_aborted: bool = False
    notify_failure: bool = True
    notify_repeated_failure: bool = False
    notify_not_built: bool = False
    notify_back_to_normal: bool = True
    notify_success: bool = False
    notify_unstable: bool = True

    # Message content
    include_test_summary: bool = False
    include_custom_message: bool = False
    commit_info_choice: CommitInfoChoice = CommitInfoChoice.NONE
    custom_message: str = ""
    build_server_url: str = "http://localhost:8080/"

    # Chat transport
    webhook_url: Optional[str] = field(default=None)
    channel: Optional[str] = field(default=None)
    webhook_timeout: float = 10.0

    # Sentry settings
    sentry_dsn: Optional[str] = field(default=None)
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 0.0

    @classmethod
    def from_env(cls) -> "NotifierConfig":
        """Create config from environment variables."""
        defaults = cls()
        return cls(
            notify_aborted=_env_flag("NOTIFY_ABORTED", defaults.notify_aborted),
            notify_failure=_env_flag("NOTIFY_FAILURE", defaults.notify_failure),
            notify_repeated_failure=_env_flag("NOTIFY_REPEATED_FAILURE", defaults.notify_repeated_failure),
            notify_not_built=_env_flag("NOTIFY_NOT_BUILT", defaults.notify_not_built),
            notify_back_to_normal=_env_flag("NOTIFY_BACK_TO_NORMAL", defaults.notify_back_to_normal),
            notify_success=_env_flag("NOTIFY_SUCCESS", defaults.notify_success),
            notify_unstable=_env_flag("NOTIFY_UNSTABLE", defaults.notify_unstable),
            include_test_summary=_env_flag("INCLUDE_TEST_SUMMARY", defaults.include_test_summary),
            include_custom_message=_env_flag("INCLUDE_CUSTOM_MESSAGE", defaults.include_custom_message),
            commit_info_choice=CommitInfoChoice.parse(_env("COMMIT_INFO", defaults.commit_info_choice.value)),
            custom_message=_env("CUSTOM_MESSAGE", defaults.custom_message),
            build_server_url=_env("BUILD_SERVER_URL", defaults.build_server_url),
            webhook_url=os.getenv(ENV_PREFIX + "WEBHOOK_URL"),
            channel=os.getenv(ENV_PREFIX + "CHANNEL"),
            webhook_timeout=float(_env("WEBHOOK_TIMEOUT", str(defaults.webhook_timeout))),
            sentry_dsn=os.getenv("SENTRY_DSN"),
            sentry_environment=os.getenv("SENTRY_ENVIRONMENT", defaults.sentry_environment),
            sentry_traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
        )

    @property
    def webhook_enabled(self) -> bool:
        """Check if the chat webhook is configured."""
        return bool(self.webhook_url)

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)
