"""
Build Models

Read-only records describing one build execution, its causes, change set and
test results. Records are created by the build-history provider and never
mutated by the notifier.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple, Type, TypeVar, Union


class BuildOutcome(Enum):
    """Result classification of a build."""
    SUCCESS = "success"
    FAILURE = "failure"
    UNSTABLE = "unstable"
    ABORTED = "aborted"
    NOT_BUILT = "not_built"
    BUILDING = "building"  # Only valid while the build is running
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ManualCause:
    """Build started by a user, a timer, or anything without a richer cause."""

    description: str = "Started by user"

    @property
    def short_description(self) -> str:
        return self.description


@dataclass(frozen=True)
class SCMTriggerCause:
    """Build started by a source-control change."""

    @property
    def short_description(self) -> str:
        return "Started by an SCM change"


@dataclass(frozen=True)
class UpstreamCause:
    """Build started by the completion of another project's build."""

    upstream_project: str
    upstream_build: int

    @property
    def short_description(self) -> str:
        return (
            f'Started by upstream project "{self.upstream_project}" '
            f'build number {self.upstream_build}'
        )


Cause = Union[ManualCause, SCMTriggerCause, UpstreamCause]

C = TypeVar('C', ManualCause, SCMTriggerCause, UpstreamCause)


@dataclass(frozen=True)
class ChangeSetEntry:
    """One source-control change included in a build."""

    author: str
    message: str
    affected_files: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class TestSummary:
    """Aggregated test counts for a build."""

    __test__ = False  # not a pytest test class

    total: int
    failed: int = 0
    skipped: int = 0

    def __post_init__(self):
        if min(self.total, self.failed, self.skipped) < 0:
            raise ValueError(
                f"Test counts must be non-negative: total={self.total}, "
                f"failed={self.failed}, skipped={self.skipped}"
            )
        if self.passed < 0:
            raise ValueError(
                f"failed + skipped ({self.failed + self.skipped}) exceeds total ({self.total})"
            )

    @property
    def passed(self) -> int:
        return self.total - self.failed - self.skipped


@dataclass(frozen=True)
class BuildRecord:
    """A single build of a project.

    History links (previous build, previous successful build) are not stored
    here; they are looked up through a BuildHistoryProvider.
    """

    project_name: str
    number: int
    outcome: BuildOutcome
    start_time_ms: int = 0
    duration_ms: int = 0
    display_name: Optional[str] = None
    project_display_name: Optional[str] = None
    url: Optional[str] = None
    causes: Tuple[Cause, ...] = ()
    change_set: Optional[Tuple[ChangeSetEntry, ...]] = None  # None = not computed yet
    test_summary: Optional[TestSummary] = None
    variables: Dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def name(self) -> str:
        """Display name of the build, e.g. '#42'."""
        return self.display_name or f"#{self.number}"

    @property
    def project_full_display_name(self) -> str:
        return self.project_display_name or self.project_name

    @property
    def relative_url(self) -> str:
        """Build URL relative to the build server root."""
        return self.url or f"job/{self.project_name}/{self.number}/"

    @property
    def end_time_ms(self) -> int:
        return self.start_time_ms + self.duration_ms

    @property
    def is_building(self) -> bool:
        return self.outcome is BuildOutcome.BUILDING

    @property
    def has_change_set_computed(self) -> bool:
        return self.change_set is not None

    @property
    def change_set_entries(self) -> Tuple[ChangeSetEntry, ...]:
        return self.change_set or ()

    def find_cause(self, cause_type: Type[C]) -> Optional[C]:
        """Return the first cause of the given type, if any."""
        for cause in self.causes:
            if isinstance(cause, cause_type):
                return cause
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and Sentry context."""
        return {
            "project": self.project_name,
            "number": self.number,
            "outcome": self.outcome.value,
            "start_time_ms": self.start_time_ms,
            "duration_ms": self.duration_ms,
            "url": self.relative_url,
            "causes": [c.short_description for c in self.causes],
            "changes": len(self.change_set_entries),
        }


@dataclass(frozen=True)
class Project:
    """A project (job) whose builds form a history chain."""

    name: str
    display_name: Optional[str] = None

    @property
    def full_display_name(self) -> str:
        return self.display_name or self.name
