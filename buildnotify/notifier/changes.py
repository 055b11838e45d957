"""Change Set Summaries - Pure functions over a build's change set entries."""

from typing import Iterable, List, Set

from ..config import CommitInfoChoice
from ..models.build import ChangeSetEntry


def unique_authors(entries: Iterable[ChangeSetEntry]) -> List[str]:
    """Author display names in first-seen order, without duplicates."""
    authors: List[str] = []
    for entry in entries:
        if entry.author not in authors:
            authors.append(entry.author)
    return authors


def changed_file_count(entries: Iterable[ChangeSetEntry]) -> int:
    """Number of distinct files touched across all entries."""
    files: Set[str] = set()
    for entry in entries:
        files.update(entry.affected_files)
    return len(files)


def format_commit(entry: ChangeSetEntry, choice: CommitInfoChoice) -> str:
    """Render one commit line: title and/or ' [author]'."""
    commit = ""
    if choice.show_title:
        commit += entry.message
    if choice.show_author:
        commit += f" [{entry.author}]"
    return commit


def commit_lines(entries: Iterable[ChangeSetEntry], choice: CommitInfoChoice) -> List[str]:
    """
    Rendered commit lines with identical lines merged.

    Two distinct commits with the same title and author collapse into one
    line. First-seen order is kept.
    """
    # TODO: merge by commit id once ChangeSetEntry carries one
    lines: List[str] = []
    seen: Set[str] = set()
    for entry in entries:
        commit = format_commit(entry, choice)
        if commit not in seen:
            seen.add(commit)
            lines.append(commit)
    return lines
