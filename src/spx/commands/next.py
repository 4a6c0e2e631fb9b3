"""``spx next``: report the next actionable story."""

from __future__ import annotations

from pathlib import Path

from ..config import SpxSettings
from ..tree import TreeNode, find_next_work_item, find_parents
from .pipeline import empty_message, load_tree

ALL_DONE_MESSAGE = "All work items are complete!"


def format_next(node: TreeNode, parents: tuple[TreeNode | None, ...]) -> str:
    chain = [parent for parent in parents if parent is not None]
    breadcrumb = " > ".join(item.name for item in (*chain, node))
    lines = [
        "Next work item:",
        "",
        f"  {breadcrumb}",
        "",
        f"  Status: {node.status.value}",
        f"  Path: {node.path}",
    ]
    return "\n".join(lines)


async def next_command(cwd: str | Path, settings: SpxSettings) -> str:
    # Priority follows tree order, so the tree is always validated here.
    tree = await load_tree(cwd, settings, validate=True)
    if tree is None:
        return empty_message(settings)

    node = find_next_work_item(tree)
    if node is None:
        return ALL_DONE_MESSAGE
    return format_next(node, find_parents(tree, node))


__all__ = ["ALL_DONE_MESSAGE", "format_next", "next_command"]
