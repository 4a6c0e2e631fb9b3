"""Build a work item tree from a flat list of scanned items."""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Iterable, Protocol, Sequence

from ..errors import OrphanWorkItemError
from .models import (
    ROOT_KIND,
    TreeNode,
    WorkItem,
    WorkItemStatus,
    WorkItemTree,
    parent_kind,
)

logger = logging.getLogger(__name__)


class TreeBuildDeps(Protocol):
    """Status lookup injected into :func:`build_tree`."""

    async def get_status(self, path: str) -> WorkItemStatus: ...


def normalize_path(path: str) -> str:
    """Use forward slashes and drop any trailing separator."""

    normalized = path.replace("\\", "/")
    return normalized.rstrip("/") or "/"


def _is_ancestor(ancestor: str, path: str) -> bool:
    prefix = ancestor if ancestor.endswith("/") else ancestor + "/"
    return path.startswith(prefix)


def _parent_directory(path: str) -> str:
    head, _, _ = path.rpartition("/")
    return head or "/"


def rollup_status(own: WorkItemStatus, child_statuses: Iterable[WorkItemStatus]) -> WorkItemStatus:
    """Combine a node's own status with its children's rolled-up statuses."""

    statuses = list(child_statuses)
    if not statuses:
        return own
    if own is WorkItemStatus.DONE and all(s is WorkItemStatus.DONE for s in statuses):
        return WorkItemStatus.DONE
    if own is WorkItemStatus.OPEN and all(s is WorkItemStatus.OPEN for s in statuses):
        return WorkItemStatus.OPEN
    return WorkItemStatus.IN_PROGRESS


def link_items(items: Sequence[WorkItem]) -> dict[str, list[WorkItem]]:
    """Map each item's path to its direct children.

    A child's parent is the item of the enclosing kind whose path is the longest
    directory prefix of the child's path. That prefix must be the directory
    holding the child; an item buried deeper is an orphan.
    """

    by_kind: dict[object, list[tuple[str, WorkItem]]] = defaultdict(list)
    for item in items:
        by_kind[item.kind].append((normalize_path(item.path), item))

    children: dict[str, list[WorkItem]] = defaultdict(list)
    for item in items:
        expected = parent_kind(item.kind)
        if expected is None:
            continue
        path = normalize_path(item.path)
        candidates = [
            candidate_path
            for candidate_path, _ in by_kind[expected]
            if _is_ancestor(candidate_path, path)
        ]
        parent = max(candidates, key=len, default=None)
        if parent is None or parent != _parent_directory(path):
            raise OrphanWorkItemError(item.path, item.kind.value)
        children[parent].append(item)
    return children


async def build_tree(items: Sequence[WorkItem], deps: TreeBuildDeps) -> WorkItemTree:
    """Link, probe, roll up and sort ``items`` into a :class:`WorkItemTree`.

    Linking happens before any status probe runs, so an orphan fails the build
    without touching the filesystem. Probes are awaited concurrently; the
    result does not depend on their completion order.
    """

    children = link_items(items)

    paths = [item.path for item in items]
    resolved = await asyncio.gather(*(deps.get_status(path) for path in paths))
    own_status = dict(zip(paths, resolved))

    def assemble(item: WorkItem) -> TreeNode:
        nodes = sorted(
            (assemble(child) for child in children.get(normalize_path(item.path), [])),
            key=lambda node: node.number,
        )
        status = rollup_status(own_status[item.path], (node.status for node in nodes))
        return TreeNode(
            kind=item.kind,
            number=item.number,
            slug=item.slug,
            path=item.path,
            status=status,
            children=nodes,
        )

    roots = sorted(
        (assemble(item) for item in items if item.kind is ROOT_KIND),
        key=lambda node: node.number,
    )
    logger.debug("Built work item tree", extra={"items": len(items), "roots": len(roots)})
    return WorkItemTree(nodes=roots)


__all__ = ["TreeBuildDeps", "build_tree", "link_items", "normalize_path", "rollup_status"]
