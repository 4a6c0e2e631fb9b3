"""Scan, build and optionally validate the work item tree for a project."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import SpxSettings
from ..scanner import Scanner
from ..status import StatusProbe
from ..tree import WorkItemTree, build_tree, validate_tree

logger = logging.getLogger(__name__)


async def load_tree(cwd: str | Path, settings: SpxSettings, *, validate: bool) -> WorkItemTree | None:
    """Return the project's tree, or ``None`` when no work items exist."""

    items = Scanner(cwd, settings).scan()
    if not items:
        return None

    tree = await build_tree(items, StatusProbe(settings))
    if validate:
        validate_tree(tree)
        logger.debug("Validated work item tree", extra={"roots": len(tree.nodes)})
    return tree


def empty_message(settings: SpxSettings) -> str:
    return f"No work items found in {settings.doing_display_path}"


__all__ = ["empty_message", "load_tree"]
