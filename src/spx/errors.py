"""Error taxonomy shared by the scanner, tree engine and command layer."""

from __future__ import annotations


class SpxError(RuntimeError):
    """Base class for errors surfaced to the command line."""


class OrphanWorkItemError(SpxError):
    """Raised when a feature or story has no enclosing parent among the scanned items."""

    def __init__(self, path: str, kind: str | None = None) -> None:
        self.path = path
        self.kind = kind
        label = f"{kind} " if kind else ""
        super().__init__(f"Orphan work item: {label}at {path} has no parent work item")


class TreeValidationError(SpxError):
    """Raised when a built tree violates a structural invariant."""


class HierarchyError(TreeValidationError):
    """A node sits under the wrong kind of parent or holds the wrong kind of child."""


class DuplicateNumberError(TreeValidationError):
    """Two siblings share the same BSP number."""

    def __init__(self, kind: str, number: int) -> None:
        self.kind = kind
        self.number = number
        super().__init__(
            f"Duplicate BSP number detected: multiple {kind} items have number {number} at the same level"
        )


class CycleError(TreeValidationError):
    """A path repeats along a root-to-node walk."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cycle detected: node at {path} appears multiple times in tree")


class InvalidWorkItemNameError(SpxError):
    """Raised when a directory name does not follow the work item naming pattern."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid work item name: {name}")


class ScanError(SpxError):
    """Raised when the work item directory cannot be walked."""


class StatusProbeError(SpxError):
    """Raised when the filesystem cannot be inspected for a work item's status."""


class ProjectConfigError(SpxError):
    """Raised when the per-project configuration file cannot be loaded."""


__all__ = [
    "CycleError",
    "DuplicateNumberError",
    "HierarchyError",
    "InvalidWorkItemNameError",
    "OrphanWorkItemError",
    "ProjectConfigError",
    "ScanError",
    "SpxError",
    "StatusProbeError",
    "TreeValidationError",
]
