"""Aligned table rendering of a work item tree."""

from __future__ import annotations

from ..tree.models import WorkItemTree

COLUMNS = ("Level", "Number", "Name", "Status")


def _collect_rows(tree: WorkItemTree) -> list[tuple[str, str, str, str]]:
    return [
        (
            "  " * depth + node.kind.value.capitalize(),
            str(node.display_number),
            node.slug,
            node.status.value,
        )
        for depth, node in tree.walk()
    ]


def format_table(tree: WorkItemTree) -> str:
    rows = _collect_rows(tree)
    widths = [len(column) for column in COLUMNS]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    def _format_row(cells) -> str:
        return "| " + " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)) + " |"

    lines = [_format_row(COLUMNS)]
    lines.append("|" + "|".join("-" * (width + 2) for width in widths) + "|")
    lines.extend(_format_row(row) for row in rows)
    return "\n".join(lines)


__all__ = ["format_table"]
