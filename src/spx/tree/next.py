"""Priority search for the next actionable work item."""

from __future__ import annotations

from typing import NamedTuple, Sequence

from .models import TreeNode, WorkItemStatus, WorkItemTree


class WorkItemParents(NamedTuple):
    capability: TreeNode | None
    feature: TreeNode | None


def find_next_work_item(tree: WorkItemTree) -> TreeNode | None:
    """Return the first story in BSP order that is not DONE.

    BSP order is absolute: a lower-numbered story comes next whether it is
    OPEN or IN_PROGRESS. Children are expected to be sorted already.
    """

    return _first_unfinished_leaf(tree.nodes)


def _first_unfinished_leaf(nodes: Sequence[TreeNode]) -> TreeNode | None:
    for node in nodes:
        if node.is_leaf:
            if node.status is not WorkItemStatus.DONE:
                return node
            continue
        found = _first_unfinished_leaf(node.children)
        if found is not None:
            return found
    return None


def find_parents(tree: WorkItemTree, target: TreeNode) -> WorkItemParents:
    """Locate the capability and feature enclosing ``target``."""

    for capability in tree.nodes:
        for feature in capability.children:
            for story in feature.children:
                if story.path == target.path:
                    return WorkItemParents(capability, feature)
    return WorkItemParents(None, None)


__all__ = ["WorkItemParents", "find_next_work_item", "find_parents"]
