"""Structural checks over a built work item tree."""

from __future__ import annotations

from typing import Sequence

from ..errors import CycleError, DuplicateNumberError, HierarchyError
from .models import LEAF_KIND, TreeNode, WorkItemKind, WorkItemTree, child_kind, parent_kind

ROOT = "root"


def validate_tree(tree: WorkItemTree) -> None:
    """Raise on the first violated invariant.

    - every kind sits directly under the kind that precedes it (the root kind at
      the root) and only holds the kind that follows it; leaves hold nothing
    - sibling BSP numbers are distinct
    - no path repeats along a root-to-node walk
    """

    check_duplicate_numbers(tree.nodes)
    for node in tree.nodes:
        _validate_node(node, None, set())


def _validate_node(node: TreeNode, parent: WorkItemKind | None, visited: set[str]) -> None:
    if node.path in visited:
        raise CycleError(node.path)
    visited.add(node.path)

    validate_hierarchy(node, parent)

    if node.children:
        check_duplicate_numbers(node.children)
        for child in node.children:
            _validate_node(child, node.kind, set(visited))


def validate_hierarchy(node: TreeNode, parent: WorkItemKind | None) -> None:
    """Check ``node`` against its parent's kind and its children's kinds."""

    expected_parent = parent_kind(node.kind)
    if parent is not expected_parent:
        location = expected_parent.value if expected_parent else "root level"
        found = parent.value if parent else ROOT
        raise HierarchyError(
            f'Hierarchy error: {node.kind.value} "{node.slug}" must be under {location}, '
            f"found under {found}"
        )

    if node.kind is LEAF_KIND:
        if node.children:
            raise HierarchyError(
                f'Hierarchy error: {node.kind.value} "{node.slug}" has children, '
                f"but {node.kind.value} is the leaf kind"
            )
        return

    allowed = child_kind(node.kind)
    for child in node.children:
        if child.kind is not allowed:
            raise HierarchyError(
                f'Hierarchy error: {node.kind.value} "{node.slug}" has {child.kind.value} child '
                f'"{child.slug}", but can only contain {allowed.value} children'
            )


def check_duplicate_numbers(nodes: Sequence[TreeNode]) -> None:
    """Raise :class:`DuplicateNumberError` when two siblings share a number."""

    seen: set[int] = set()
    for node in nodes:
        if node.number in seen:
            raise DuplicateNumberError(node.kind.value, node.number)
        seen.add(node.number)


__all__ = ["check_duplicate_numbers", "validate_hierarchy", "validate_tree"]
