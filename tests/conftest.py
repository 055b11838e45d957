"""Shared pytest fixtures for Build Notifier tests."""

import json

import pytest

from buildnotify.config import NotifierConfig
from buildnotify.history.memory import InMemoryBuildHistory
from buildnotify.models.build import BuildOutcome, BuildRecord

SERVER_URL = "https://ci.example.com/"


@pytest.fixture
def history():
    """Empty in-memory build history."""
    return InMemoryBuildHistory()


@pytest.fixture
def config():
    """Notifier config with the library defaults and a fixed server URL."""
    return NotifierConfig(build_server_url=SERVER_URL)


@pytest.fixture
def make_build(history):
    """Factory that creates a build and registers it in the history."""
    def _make(number, outcome, project="api-server", **kwargs):
        build = BuildRecord(project_name=project, number=number, outcome=outcome, **kwargs)
        return history.add_build(build)
    return _make


@pytest.fixture
def make_chain(make_build):
    """
    Factory for a project history, oldest build first.

    Returns the newest build.
    """
    def _chain(*outcomes, project="api-server"):
        build = None
        for number, outcome in enumerate(outcomes, 1):
            build = make_build(number, outcome, project=project)
        return build
    return _chain


@pytest.fixture
def sample_history_document():
    """Sample history file contents for loader and CLI tests."""
    return {
        "projects": [
            {
                "name": "api-server",
                "display_name": "API Server",
                "builds": [
                    {
                        "number": 1,
                        "outcome": "success",
                        "start_time_ms": 0,
                        "duration_ms": 60000,
                    },
                    {
                        "number": 2,
                        "outcome": "failure",
                        "start_time_ms": 100000,
                        "duration_ms": 192000,
                        "causes": [{"type": "scm"}],
                        "change_set": [
                            {"author": "Ana", "message": "Fix parser", "files": ["a.py", "b.py"]},
                            {"author": "Bo", "message": "Add tests", "files": ["b.py"]},
                        ],
                        "tests": {"total": 10, "failed": 1, "skipped": 2},
                        "variables": {"BRANCH": "main"},
                    },
                ],
            },
            {
                "name": "deploy",
                "builds": [
                    {
                        "number": 7,
                        "outcome": "building",
                        "causes": [
                            {"type": "upstream", "project": "api-server", "build": 2},
                        ],
                        "change_set": [],
                    },
                ],
            },
        ]
    }


@pytest.fixture
def history_file(tmp_path, sample_history_document):
    """Sample history document written to disk."""
    path = tmp_path / "history.json"
    path.write_text(json.dumps(sample_history_document))
    return path
