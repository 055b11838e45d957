"""Tests for the buildnotify CLI."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from buildnotify.cli.main import cli

ENV = {
    "BUILDNOTIFY_WEBHOOK_URL": None,
    "BUILDNOTIFY_BUILD_SERVER_URL": "https://ci.example.com/",
    "BUILDNOTIFY_COMMIT_INFO": "author_and_title",
    "BUILDNOTIFY_NOTIFY_FAILURE": "true",
    "SENTRY_DSN": None,
}


@pytest.fixture
def runner():
    return CliRunner()


def _invoke(runner, history_file, *args, env=None):
    merged = dict(ENV)
    merged.update(env or {})
    return runner.invoke(cli, ["--history", str(history_file), *args], env=merged)


class TestStatusCommand:
    def test_latest_build(self, runner, history_file):
        result = _invoke(runner, history_file, "status", "api-server")
        assert result.exit_code == 0
        assert "Label:   Failure" in result.output
        assert "API Server - #2 Failure after 3 min 12 sec" in result.output

    def test_specific_build_with_tests(self, runner, history_file):
        result = _invoke(runner, history_file, "status", "api-server", "2", "--tests")
        assert "Passed: 7, Failed: 1, Skipped: 2" in result.output

    def test_unknown_project(self, runner, history_file):
        result = _invoke(runner, history_file, "status", "nope")
        assert result.exit_code == 1
        assert "unknown project 'nope'" in result.output

    def test_unknown_build(self, runner, history_file):
        result = _invoke(runner, history_file, "status", "api-server", "42")
        assert result.exit_code == 1
        assert "has no build #42" in result.output

    def test_missing_history_file(self, runner, tmp_path):
        result = _invoke(runner, tmp_path / "missing.json", "status", "api-server")
        assert result.exit_code == 1
        assert "history file not found" in result.output

    def test_malformed_history_file(self, runner, tmp_path):
        path = tmp_path / "history.json"
        path.write_text('{"projects": [{"name": "api-server", "builds": [{"number": 1, "outcome": null}]}]}')
        result = _invoke(runner, path, "status", "api-server")
        assert result.exit_code == 1
        assert "could not read" in result.output
        assert isinstance(result.exception, SystemExit)


class TestPreviewCommand:
    def test_completed_renders_status_and_commits(self, runner, history_file):
        result = _invoke(runner, history_file, "preview", "completed", "api-server")
        assert result.exit_code == 0
        assert "--- message 1 ---" in result.output
        assert "Failure after 3 min 12 sec" in result.output
        assert "Changes:\n- Fix parser [Ana]\n- Add tests [Bo]" in result.output

    def test_started_scm_build_renders_changes(self, runner, history_file):
        result = _invoke(runner, history_file, "preview", "started", "api-server", "2")
        assert "Started by changes from Ana, Bo (2 file(s) changed)" in result.output

    def test_started_upstream_build_renders_cause(self, runner, history_file):
        result = _invoke(runner, history_file, "preview", "started", "deploy")
        assert 'Started by upstream project "api-server" build number 2' in result.output

    def test_silent(self, runner, history_file):
        result = _invoke(runner, history_file, "preview", "completed", "api-server", "1")
        assert result.exit_code == 0
        assert "No notification" in result.output

    def test_invalid_config(self, runner, history_file):
        result = _invoke(
            runner, history_file, "preview", "completed", "api-server",
            env={"BUILDNOTIFY_COMMIT_INFO": "bogus"},
        )
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestNotifyCommand:
    def test_requires_webhook(self, runner, history_file):
        result = _invoke(runner, history_file, "notify", "completed", "api-server")
        assert result.exit_code == 1
        assert "BUILDNOTIFY_WEBHOOK_URL is not set" in result.output

    @patch("buildnotify.transport.webhook.requests.post")
    def test_publishes(self, mock_post, runner, history_file):
        mock_post.return_value = MagicMock()
        result = _invoke(
            runner, history_file, "notify", "completed", "api-server",
            env={"BUILDNOTIFY_WEBHOOK_URL": "https://chat.example.com/hooks/x"},
        )
        assert result.exit_code == 0
        assert "Sent 2 message(s)" in result.output
        assert mock_post.call_count == 2

    @patch("buildnotify.transport.webhook.requests.post")
    def test_reports_failed_delivery(self, mock_post, runner, history_file):
        import requests
        mock_post.side_effect = requests.ConnectionError("down")
        result = _invoke(
            runner, history_file, "notify", "started", "deploy",
            env={"BUILDNOTIFY_WEBHOOK_URL": "https://chat.example.com/hooks/x"},
        )
        assert result.exit_code == 1
        assert "Sent 0/1 messages" in result.output
