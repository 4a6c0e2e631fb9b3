"""Indented text rendering of a work item tree."""

from __future__ import annotations

from rich.text import Text

from ..tree.models import WorkItemStatus, WorkItemTree

INDENT = "  "

STATUS_STYLES: dict[WorkItemStatus, str] = {
    WorkItemStatus.DONE: "green",
    WorkItemStatus.IN_PROGRESS: "yellow",
    WorkItemStatus.OPEN: "dim",
}


def render_text(tree: WorkItemTree) -> Text:
    """Render the tree with colored status markers for terminal output."""

    output = Text()
    for index, (depth, node) in enumerate(tree.walk()):
        if index:
            output.append("\n")
        output.append(f"{INDENT * depth}{node.name} ")
        output.append(f"[{node.status.value}]", style=STATUS_STYLES.get(node.status, ""))
    return output


def format_text(tree: WorkItemTree) -> str:
    """Plain text variant, e.g. ``capability-21_core-cli [IN_PROGRESS]``."""

    return render_text(tree).plain


__all__ = ["format_text", "render_text"]
