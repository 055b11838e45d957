"""
Chat Message Builders

Renders build notifications as chat text. Every piece of build metadata is
escaped before it is added; links are added verbatim.
"""

import logging
from typing import Optional, Set, Tuple

from ..config import NotifierConfig
from ..helpers.text import escape, expand_variables
from ..helpers.timespan import format_timespan
from ..history.base import BuildHistoryProvider, EnvironmentUnavailableError
from ..models.build import BuildOutcome, BuildRecord, UpstreamCause
from ..models.intent import NotificationIntent
from ..monitoring.sentry import capture_exception
from .changes import changed_file_count, commit_lines, unique_authors

logger = logging.getLogger(__name__)

STARTING_STATUS = "Starting..."
END_STATUS = "Finished"
BACK_TO_NORMAL_STATUS = "Back to normal"
STILL_FAILING_STATUS = "Still Failing"
SUCCESS_STATUS = "Success"
FAILURE_STATUS = "Failure"
ABORTED_STATUS = "Aborted"
NOT_BUILT_STATUS = "Not built"
UNSTABLE_STATUS = "Unstable"
UNKNOWN_STATUS = "Unknown"

NO_CHANGES = "No Changes."
NO_TESTS = "\nNo Tests found."


def status_label(build: BuildRecord, finished: bool, history: BuildHistoryProvider) -> str:
    """
    Status label for a build, given its history.

    "Back to normal" is only used when the project has succeeded at some
    point before; a first-ever success after failures is plain "Success".

    Args:
        build: Build to describe
        finished: Whether the build lifecycle has ended (for running builds)
        history: Provider used to walk the previous builds

    Returns:
        One of the fixed status labels
    """
    if build.is_building:
        return END_STATUS if finished else STARTING_STATUS

    result = build.outcome
    previous = history.previous_result(build)
    had_prior_success = history.previous_successful_build(build) is not None

    if (result is BuildOutcome.SUCCESS
            and previous in (BuildOutcome.FAILURE, BuildOutcome.UNSTABLE)
            and had_prior_success):
        return BACK_TO_NORMAL_STATUS
    if result is BuildOutcome.FAILURE and previous is BuildOutcome.FAILURE:
        return STILL_FAILING_STATUS
    if result is BuildOutcome.SUCCESS:
        return SUCCESS_STATUS
    if result is BuildOutcome.FAILURE:
        return FAILURE_STATUS
    if result is BuildOutcome.ABORTED:
        return ABORTED_STATUS
    if result is BuildOutcome.NOT_BUILT:
        return NOT_BUILT_STATUS
    if result is BuildOutcome.UNSTABLE:
        return UNSTABLE_STATUS
    return UNKNOWN_STATUS


def back_to_normal_duration_ms(build: BuildRecord, history: BuildHistoryProvider) -> int:
    """Time from the end of the previous successful build to the end of this one."""
    previous_success = history.previous_successful_build(build)
    if previous_success is None:
        return build.duration_ms
    return build.end_time_ms - previous_success.end_time_ms


def header(build: BuildRecord) -> str:
    """'<project> - <build> ' prefix shared by every message."""
    return f"{escape(build.project_full_display_name)} - {escape(build.name)} "


def open_link(build: BuildRecord, server_url: str) -> str:
    return f" (<{server_url}{build.relative_url}|Open>)"


def test_summary_block(build: BuildRecord) -> str:
    summary = build.test_summary
    if summary is None:
        return NO_TESTS
    return (
        "\nTest Status:\n"
        f"\tPassed: {summary.passed}, Failed: {summary.failed}, Skipped: {summary.skipped}"
    )


class MessageComposer:
    """
    Renders notification messages for builds.

    Usage:
        composer = MessageComposer(config, history)
        text = composer.render_status(build, finished=True, include_test_summary=True)
    """

    def __init__(self, config: NotifierConfig, history: BuildHistoryProvider):
        self.config = config
        self.history = history

    def render(self, intent: NotificationIntent, build: BuildRecord) -> str:
        """
        Render the main message for a notification intent.

        Started intents render the change-set summary (when requested and
        available) or the cause description; completed intents render the
        status message.
        """
        if intent.is_started:
            if intent.use_change_summary:
                changes = self.render_change_summary(
                    build, finished=False, include_custom_message=intent.include_custom_message
                )
                if changes is not None:
                    return changes
                return self.render_status(
                    build, finished=False, include_custom_message=intent.include_custom_message
                )
            return self.render_cause(build)

        return self.render_status(
            build,
            finished=True,
            include_test_summary=intent.include_test_summary,
            include_custom_message=intent.include_custom_message,
        )

    def render_status(
        self,
        build: BuildRecord,
        finished: bool,
        include_test_summary: bool = False,
        include_custom_message: bool = False,
    ) -> str:
        """Status message: header, label, duration, link, optional test and custom blocks."""
        label = status_label(build, finished, self.history)

        if label == BACK_TO_NORMAL_STATUS:
            duration_ms = back_to_normal_duration_ms(build, self.history)
        else:
            duration_ms = build.duration_ms

        message = header(build) + escape(label)
        message += f" after {format_timespan(duration_ms)}"
        message += open_link(build, self.config.build_server_url)
        if include_test_summary:
            message += test_summary_block(build)
        if include_custom_message:
            message += self.custom_message_block(build)
        return message

    def render_cause(self, build: BuildRecord) -> str:
        """Start message naming what triggered the build."""
        description = build.causes[0].short_description if build.causes else "N/A"
        return header(build) + escape(description) + open_link(build, self.config.build_server_url)

    def render_change_summary(
        self,
        build: BuildRecord,
        finished: bool = False,
        include_custom_message: bool = False,
    ) -> Optional[str]:
        """
        Start message listing who changed what.

        Returns:
            The message, or None when the change set is not computed or empty
        """
        if not build.has_change_set_computed:
            logger.info("No change set computed for %s %s", build.project_name, build.name)
            return None

        entries = build.change_set_entries
        if not entries:
            logger.info("Empty change set for %s %s", build.project_name, build.name)
            return None

        authors = ", ".join(unique_authors(entries))
        message = header(build)
        message += escape(f"Started by changes from {authors}")
        message += f" ({changed_file_count(entries)} file(s) changed)"
        message += open_link(build, self.config.build_server_url)
        if include_custom_message:
            message += self.custom_message_block(build)
        return message

    def render_commit_list(self, build: BuildRecord) -> str:
        """
        Commit list message.

        A build without changes that was triggered by an upstream build
        shows the upstream build's commits instead.
        """
        return self._commit_list(build, visited=set())

    def _commit_list(self, build: BuildRecord, visited: Set[Tuple[str, int]]) -> str:
        visited.add((build.project_name, build.number))
        entries = build.change_set_entries

        if not entries:
            upstream = self._upstream_build(build, visited)
            if upstream is None:
                return NO_CHANGES
            return self._commit_list(upstream, visited)

        lines = commit_lines(entries, self.config.commit_info_choice)
        return header(build) + "Changes:\n- " + "\n- ".join(escape(line) for line in lines)

    def _upstream_build(
        self,
        build: BuildRecord,
        visited: Set[Tuple[str, int]],
    ) -> Optional[BuildRecord]:
        cause = build.find_cause(UpstreamCause)
        if cause is None:
            return None

        key = (cause.upstream_project, cause.upstream_build)
        if key in visited:
            logger.warning("Upstream cycle detected at %s #%d", *key)
            return None

        if self.history.get_project(cause.upstream_project) is None:
            logger.debug("Upstream project %s not found", cause.upstream_project)
            return None

        upstream = self.history.get_build(*key)
        if upstream is None:
            logger.debug("Upstream build %s #%d not found", *key)
        return upstream

    def custom_message_block(self, build: BuildRecord) -> str:
        """Newline plus the custom message with build variables expanded."""
        try:
            variables = self.history.get_environment(build)
        except (EnvironmentUnavailableError, OSError) as e:
            logger.warning(
                "Failed to load environment for %s %s: %s",
                build.project_name,
                build.name,
                e,
            )
            capture_exception(e, tags={"project": build.project_name})
            variables = {}

        return "\n" + escape(expand_variables(self.config.custom_message, variables))
