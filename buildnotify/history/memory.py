from typing import Dict, List, Optional, Set, Tuple

from ..models.build import BuildOutcome, BuildRecord, Project
from .base import BuildHistoryProvider, EnvironmentUnavailableError


class InMemoryBuildHistory(BuildHistoryProvider):
    """In-memory index of build records per project.

    Used by the CLI (loaded from a history file) and by tests as a fake
    provider returning canned chains.
    """

    def __init__(self):
        self.projects: Dict[str, Project] = {}
        self.builds: Dict[str, Dict[int, BuildRecord]] = {}
        self._broken_environments: Set[Tuple[str, int]] = set()

    def add_project(self, name: str, display_name: Optional[str] = None) -> Project:
        project = Project(name=name, display_name=display_name)
        self.projects[name] = project
        self.builds.setdefault(name, {})
        return project

    def add_build(self, build: BuildRecord) -> BuildRecord:
        if build.project_name not in self.projects:
            self.add_project(build.project_name, build.project_display_name)
        self.builds[build.project_name][build.number] = build
        return build

    def break_environment(self, build: BuildRecord) -> None:
        """Test helper: make get_environment fail for this build."""
        self._broken_environments.add((build.project_name, build.number))

    def _numbers_before(self, build: BuildRecord) -> List[int]:
        numbers = self.builds.get(build.project_name, {})
        return sorted((n for n in numbers if n < build.number), reverse=True)

    def get_project(self, name: str) -> Optional[Project]:
        return self.projects.get(name)

    def last_build(self, project_name: str) -> Optional[BuildRecord]:
        builds = self.builds.get(project_name)
        if not builds:
            return None
        return builds[max(builds)]

    def get_build(self, project_name: str, number: int) -> Optional[BuildRecord]:
        return self.builds.get(project_name, {}).get(number)

    def previous_build(self, build: BuildRecord) -> Optional[BuildRecord]:
        numbers = self._numbers_before(build)
        if not numbers:
            return None
        return self.builds[build.project_name][numbers[0]]

    def previous_completed_build(self, build: BuildRecord) -> Optional[BuildRecord]:
        for number in self._numbers_before(build):
            candidate = self.builds[build.project_name][number]
            if not candidate.is_building:
                return candidate
        return None

    def previous_successful_build(self, build: BuildRecord) -> Optional[BuildRecord]:
        for number in self._numbers_before(build):
            candidate = self.builds[build.project_name][number]
            if candidate.outcome is BuildOutcome.SUCCESS:
                return candidate
        return None

    def get_environment(self, build: BuildRecord) -> Dict[str, str]:
        if (build.project_name, build.number) in self._broken_environments:
            raise EnvironmentUnavailableError(
                f"Environment unavailable for {build.project_name} {build.name}"
            )
        env = {
            "JOB_NAME": build.project_name,
            "BUILD_NUMBER": str(build.number),
            "BUILD_DISPLAY_NAME": build.name,
            "BUILD_URL": build.relative_url,
        }
        env.update(build.variables)
        return env
