"""
History File Loader

Reads a JSON snapshot of project build histories into an InMemoryBuildHistory.

File layout:
    {
        "projects": [
            {
                "name": "api-server",
                "display_name": "API Server",
                "builds": [
                    {
                        "number": 12,
                        "outcome": "failure",
                        "start_time_ms": 1700000000000,
                        "duration_ms": 192000,
                        "causes": [{"type": "upstream", "project": "lib", "build": 4}],
                        "change_set": [{"author": "Ana", "message": "Fix", "files": ["a.py"]}],
                        "tests": {"total": 10, "failed": 1, "skipped": 2},
                        "variables": {"BRANCH": "main"}
                    }
                ]
            }
        ]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.build import (
    BuildOutcome,
    BuildRecord,
    Cause,
    ChangeSetEntry,
    ManualCause,
    SCMTriggerCause,
    TestSummary,
    UpstreamCause,
)
from .memory import InMemoryBuildHistory

logger = logging.getLogger(__name__)


def _parse_outcome(value: str) -> BuildOutcome:
    try:
        return BuildOutcome(value.lower())
    except ValueError:
        valid = ", ".join(o.value for o in BuildOutcome)
        raise ValueError(f"Unknown build outcome '{value}' (expected one of: {valid})")


def _parse_cause(data: Dict[str, Any]) -> Cause:
    cause_type = data.get("type", "manual")
    if cause_type == "manual":
        return ManualCause(description=data.get("description", ManualCause().description))
    elif cause_type == "scm":
        return SCMTriggerCause()
    elif cause_type == "upstream":
        return UpstreamCause(
            upstream_project=data["project"],
            upstream_build=int(data["build"]),
        )
    raise ValueError(f"Unknown cause type '{cause_type}'")


def _parse_change_set(entries: Optional[List[Dict[str, Any]]]) -> Optional[Tuple[ChangeSetEntry, ...]]:
    if entries is None:
        return None
    return tuple(
        ChangeSetEntry(
            author=entry.get("author", ""),
            message=entry.get("message", ""),
            affected_files=frozenset(entry.get("files", [])),
        )
        for entry in entries
    )


def _parse_tests(data: Optional[Dict[str, Any]]) -> Optional[TestSummary]:
    if data is None:
        return None
    return TestSummary(
        total=int(data.get("total", 0)),
        failed=int(data.get("failed", 0)),
        skipped=int(data.get("skipped", 0)),
    )


def parse_build(project: Dict[str, Any], data: Dict[str, Any]) -> BuildRecord:
    """Convert one build entry of a history file into a BuildRecord."""
    return BuildRecord(
        project_name=project["name"],
        project_display_name=project.get("display_name"),
        number=int(data["number"]),
        outcome=_parse_outcome(data.get("outcome", "unknown")),
        start_time_ms=int(data.get("start_time_ms", 0)),
        duration_ms=int(data.get("duration_ms", 0)),
        display_name=data.get("display_name"),
        url=data.get("url"),
        causes=tuple(_parse_cause(c) for c in data.get("causes", [])),
        change_set=_parse_change_set(data.get("change_set")),
        test_summary=_parse_tests(data.get("tests")),
        variables={str(k): str(v) for k, v in data.get("variables", {}).items()},
    )


def load_history(path: Union[str, Path]) -> InMemoryBuildHistory:
    """
    Load a build history file.

    Args:
        path: Path to the JSON history file

    Returns:
        InMemoryBuildHistory with every project and build from the file

    Raises:
        ValueError: If the file is not valid JSON, is missing required fields
            or contains unknown values
    """
    path = Path(path)
    try:
        document = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid history file {path}: {e}") from e

    history = InMemoryBuildHistory()
    try:
        for project in document.get("projects", []):
            history.add_project(project["name"], project.get("display_name"))
            for data in project.get("builds", []):
                history.add_build(parse_build(project, data))
    except KeyError as e:
        raise ValueError(f"Invalid history file {path}: missing field {e}") from e
    except (TypeError, AttributeError) as e:
        raise ValueError(f"Invalid history file {path}: {e}") from e

    logger.debug(
        "Loaded %d projects from %s",
        len(history.projects),
        path,
    )
    return history
