"""JSON rendering of a work item tree."""

from __future__ import annotations

import json
from typing import Any

from ..config import SpxSettings
from ..tree.models import (
    ROOT_KIND,
    WORK_ITEM_STATUSES,
    TreeNode,
    WorkItemKind,
    WorkItemStatus,
    WorkItemTree,
    child_kind,
)

GROUP_KEYS: dict[WorkItemKind, str] = {
    WorkItemKind.CAPABILITY: "capabilities",
    WorkItemKind.FEATURE: "features",
    WorkItemKind.STORY: "stories",
}


def _node_payload(node: TreeNode) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "number": node.display_number,
        "slug": node.slug,
        "status": node.status.value,
        "path": node.path,
    }
    kind = child_kind(node.kind)
    if kind is not None:
        payload[GROUP_KEYS[kind]] = [_node_payload(child) for child in node.children]
    return payload


def summarize(tree: WorkItemTree) -> dict[str, int]:
    """Count statuses over every node below the top level."""

    counts = {status: 0 for status in WORK_ITEM_STATUSES}
    for _, node in tree.walk():
        if node.kind is not ROOT_KIND:
            counts[node.status] += 1
    return {
        "done": counts[WorkItemStatus.DONE],
        "in_progress": counts[WorkItemStatus.IN_PROGRESS],
        "open": counts[WorkItemStatus.OPEN],
    }


def format_json(tree: WorkItemTree, settings: SpxSettings) -> str:
    document = {
        "config": {
            "specs_root": settings.specs_root,
            "work_dir": settings.work_dir,
            "doing_dir": settings.doing_dir,
            "backlog_dir": settings.backlog_dir,
            "done_dir": settings.done_dir,
        },
        "summary": summarize(tree),
        GROUP_KEYS[ROOT_KIND]: [_node_payload(node) for node in tree.nodes],
    }
    return json.dumps(document, indent=2)


__all__ = ["format_json", "summarize"]
