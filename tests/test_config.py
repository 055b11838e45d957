"""Tests for notifier configuration (config.py)."""

import pytest

from buildnotify.config import CommitInfoChoice, NotifierConfig


# CommitInfoChoice

class TestCommitInfoChoice:
    @pytest.mark.parametrize("choice, title, author", [
        (CommitInfoChoice.NONE, False, False),
        (CommitInfoChoice.AUTHOR, False, True),
        (CommitInfoChoice.TITLE, True, False),
        (CommitInfoChoice.AUTHOR_AND_TITLE, True, True),
    ])
    def test_flags(self, choice, title, author):
        assert choice.show_title is title
        assert choice.show_author is author
        assert choice.show_anything is (title or author)

    @pytest.mark.parametrize("value, expected", [
        ("author", CommitInfoChoice.AUTHOR),
        ("AUTHOR_AND_TITLE", CommitInfoChoice.AUTHOR_AND_TITLE),
        (" Title ", CommitInfoChoice.TITLE),
        ("none", CommitInfoChoice.NONE),
    ])
    def test_parse(self, value, expected):
        assert CommitInfoChoice.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown commit info choice"):
            CommitInfoChoice.parse("everything")


# NotifierConfig.from_env

class TestFromEnv:
    def test_defaults(self, monkeypatch):
        for name in ("BUILDNOTIFY_NOTIFY_SUCCESS", "BUILDNOTIFY_WEBHOOK_URL", "SENTRY_DSN"):
            monkeypatch.delenv(name, raising=False)
        config = NotifierConfig.from_env()

        assert config.notify_failure is True
        assert config.notify_success is False
        assert config.commit_info_choice is CommitInfoChoice.NONE
        assert not config.webhook_enabled
        assert not config.sentry_enabled

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BUILDNOTIFY_NOTIFY_SUCCESS", "TRUE")
        monkeypatch.setenv("BUILDNOTIFY_NOTIFY_FAILURE", "false")
        monkeypatch.setenv("BUILDNOTIFY_COMMIT_INFO", "title")
        monkeypatch.setenv("BUILDNOTIFY_CUSTOM_MESSAGE", "on $BRANCH")
        monkeypatch.setenv("BUILDNOTIFY_BUILD_SERVER_URL", "https://ci.example.com/")
        monkeypatch.setenv("BUILDNOTIFY_WEBHOOK_URL", "https://chat.example.com/hooks/x")
        monkeypatch.setenv("BUILDNOTIFY_WEBHOOK_TIMEOUT", "2.5")

        config = NotifierConfig.from_env()

        assert config.notify_success is True
        assert config.notify_failure is False
        assert config.commit_info_choice is CommitInfoChoice.TITLE
        assert config.custom_message == "on $BRANCH"
        assert config.build_server_url == "https://ci.example.com/"
        assert config.webhook_enabled
        assert config.webhook_timeout == 2.5

    def test_invalid_commit_info(self, monkeypatch):
        monkeypatch.setenv("BUILDNOTIFY_COMMIT_INFO", "bogus")
        with pytest.raises(ValueError):
            NotifierConfig.from_env()
