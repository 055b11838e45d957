"""Build History Provider - Interface for looking up projects and their build chains."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..models.build import BuildOutcome, BuildRecord, Project


class EnvironmentUnavailableError(Exception):
    """Raised when a build's environment variables cannot be resolved."""


class BuildHistoryProvider(ABC):
    """Abstract interface for build history lookups.

    Builds never hold references to each other; every history link is
    resolved through one of these lookups.
    """

    @abstractmethod
    def get_project(self, name: str) -> Optional[Project]:
        """Find a project by its full name."""
        pass

    @abstractmethod
    def last_build(self, project_name: str) -> Optional[BuildRecord]:
        """Most recent build of a project, running or not."""
        pass

    @abstractmethod
    def get_build(self, project_name: str, number: int) -> Optional[BuildRecord]:
        """Find a build by project name and build number."""
        pass

    @abstractmethod
    def previous_build(self, build: BuildRecord) -> Optional[BuildRecord]:
        """Build immediately before this one."""
        pass

    @abstractmethod
    def previous_completed_build(self, build: BuildRecord) -> Optional[BuildRecord]:
        """Closest earlier build that is no longer running."""
        pass

    @abstractmethod
    def previous_successful_build(self, build: BuildRecord) -> Optional[BuildRecord]:
        """Closest earlier build whose outcome is SUCCESS."""
        pass

    @abstractmethod
    def get_environment(self, build: BuildRecord) -> Dict[str, str]:
        """
        Environment variables available to the build.

        Raises:
            EnvironmentUnavailableError: If the environment cannot be resolved
        """
        pass

    def previous_result(self, build: BuildRecord, completed_only: bool = False) -> BuildOutcome:
        """
        Outcome of the closest earlier build that was not aborted.

        Aborted builds do not count as transitions: failure -> aborted -> success
        is treated as failure -> success. When every earlier build was aborted,
        or there is none, SUCCESS is returned.

        Args:
            build: Build whose history is walked
            completed_only: Skip builds that are still running

        Returns:
            Outcome of the closest non-aborted earlier build
        """
        step = self.previous_completed_build if completed_only else self.previous_build
        previous = step(build)
        while previous is not None and previous.outcome is BuildOutcome.ABORTED:
            previous = step(previous)
        return previous.outcome if previous is not None else BuildOutcome.SUCCESS
