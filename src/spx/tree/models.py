"""Work item and tree models.

All three kinds share one node shape, discriminated by ``kind``. Hierarchy
legality is derived from the order of ``WORK_ITEM_KINDS`` rather than from
per-kind classes.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WorkItemKind(str, Enum):
    CAPABILITY = "capability"
    FEATURE = "feature"
    STORY = "story"


class WorkItemStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


WORK_ITEM_KINDS: tuple[WorkItemKind, ...] = (
    WorkItemKind.CAPABILITY,
    WorkItemKind.FEATURE,
    WorkItemKind.STORY,
)
ROOT_KIND = WORK_ITEM_KINDS[0]
LEAF_KIND = WORK_ITEM_KINDS[-1]

WORK_ITEM_STATUSES: tuple[WorkItemStatus, ...] = (
    WorkItemStatus.OPEN,
    WorkItemStatus.IN_PROGRESS,
    WorkItemStatus.DONE,
)


def parent_kind(kind: WorkItemKind) -> WorkItemKind | None:
    """Return the kind that must enclose ``kind``, or ``None`` for the root kind."""

    index = WORK_ITEM_KINDS.index(kind)
    return WORK_ITEM_KINDS[index - 1] if index > 0 else None


def child_kind(kind: WorkItemKind) -> WorkItemKind | None:
    """Return the only kind ``kind`` may contain, or ``None`` for the leaf kind."""

    index = WORK_ITEM_KINDS.index(kind)
    return WORK_ITEM_KINDS[index + 1] if index + 1 < len(WORK_ITEM_KINDS) else None


def display_number(kind: WorkItemKind, number: int) -> int:
    """Capability directories are numbered one above their internal BSP number."""

    return number + 1 if kind is ROOT_KIND else number


class _WorkItemFields(BaseModel):
    kind: WorkItemKind = Field(..., description="Level of the item in the hierarchy.")
    number: int = Field(..., ge=0, description="Internal BSP number used for ordering.")
    slug: str = Field(..., min_length=1, description="URL-safe identifier.")
    path: str = Field(..., min_length=1, description="Absolute path of the work item directory.")

    @property
    def display_number(self) -> int:
        return display_number(self.kind, self.number)

    @property
    def name(self) -> str:
        """Directory-style name, e.g. ``capability-21_core-cli``."""

        return f"{self.kind.value}-{self.display_number}_{self.slug}"


class WorkItem(_WorkItemFields):
    """A discovered work item directory. Carries no status."""

    model_config = ConfigDict(frozen=True)


class TreeNode(_WorkItemFields):
    """A work item placed in the tree with its rolled-up status."""

    status: WorkItemStatus = Field(..., description="Own status rolled up with children.")
    children: list[TreeNode] = Field(
        default_factory=list,
        description="Child nodes sorted ascending by BSP number.",
    )

    @property
    def is_leaf(self) -> bool:
        return self.kind is LEAF_KIND


class WorkItemTree(BaseModel):
    """Root container holding the top-level nodes in BSP order."""

    nodes: list[TreeNode] = Field(default_factory=list)

    def walk(self):
        """Yield ``(depth, node)`` pairs in document order."""

        stack = [(0, node) for node in reversed(self.nodes)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, child) for child in reversed(node.children))


__all__ = [
    "LEAF_KIND",
    "ROOT_KIND",
    "TreeNode",
    "WORK_ITEM_KINDS",
    "WORK_ITEM_STATUSES",
    "WorkItem",
    "WorkItemKind",
    "WorkItemStatus",
    "WorkItemTree",
    "child_kind",
    "display_number",
    "parent_kind",
]
