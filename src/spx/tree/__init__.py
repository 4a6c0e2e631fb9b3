"""Work item tree engine: models, builder, validator and next-item search."""

from .build import TreeBuildDeps, build_tree, link_items, normalize_path, rollup_status
from .models import (
    LEAF_KIND,
    ROOT_KIND,
    TreeNode,
    WORK_ITEM_KINDS,
    WORK_ITEM_STATUSES,
    WorkItem,
    WorkItemKind,
    WorkItemStatus,
    WorkItemTree,
)
from .next import WorkItemParents, find_next_work_item, find_parents
from .validate import validate_tree

__all__ = [
    "LEAF_KIND",
    "ROOT_KIND",
    "TreeBuildDeps",
    "TreeNode",
    "WORK_ITEM_KINDS",
    "WORK_ITEM_STATUSES",
    "WorkItem",
    "WorkItemKind",
    "WorkItemParents",
    "WorkItemStatus",
    "WorkItemTree",
    "build_tree",
    "find_next_work_item",
    "find_parents",
    "link_items",
    "normalize_path",
    "rollup_status",
    "validate_tree",
]
