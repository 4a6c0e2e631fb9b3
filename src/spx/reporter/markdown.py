"""Markdown rendering: one heading per node, nested by depth."""

from __future__ import annotations

from ..tree.models import WorkItemTree


def format_markdown(tree: WorkItemTree) -> str:
    sections: list[str] = []
    for depth, node in tree.walk():
        sections.append(f"{'#' * (depth + 1)} {node.name}")
        sections.append(f"Status: {node.status.value}")
    return "\n\n".join(sections)


__all__ = ["format_markdown"]
