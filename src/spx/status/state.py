"""Status determination for a single work item directory."""

from __future__ import annotations

from dataclasses import dataclass

from ..tree.models import WorkItemStatus


@dataclass(frozen=True, slots=True)
class StatusFlags:
    """Filesystem facts about a work item's marker directory."""

    has_marker_dir: bool
    has_completion_marker: bool
    marker_dir_is_empty: bool


def determine_status(flags: StatusFlags) -> WorkItemStatus:
    """Map marker directory facts to a status.

    | has_marker_dir | has_completion_marker | marker_dir_is_empty | status      |
    |----------------|-----------------------|---------------------|-------------|
    | False          | -                     | -                   | OPEN        |
    | True           | True                  | -                   | DONE        |
    | True           | False                 | True                | OPEN        |
    | True           | False                 | False               | IN_PROGRESS |
    """

    if not flags.has_marker_dir:
        return WorkItemStatus.OPEN
    # The completion marker wins regardless of what else the directory holds.
    if flags.has_completion_marker:
        return WorkItemStatus.DONE
    if flags.marker_dir_is_empty:
        return WorkItemStatus.OPEN
    return WorkItemStatus.IN_PROGRESS


__all__ = ["StatusFlags", "determine_status"]
