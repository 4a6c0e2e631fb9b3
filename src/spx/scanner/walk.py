"""Directory walking and work item name parsing."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ..config import SpxSettings
from ..errors import InvalidWorkItemNameError, ScanError
from ..tree.build import normalize_path
from ..tree.models import ROOT_KIND, WORK_ITEM_KINDS, WorkItem, WorkItemKind

logger = logging.getLogger(__name__)

_KIND_PATTERN = "|".join(kind.value for kind in WORK_ITEM_KINDS)
WORK_ITEM_NAME = re.compile(
    rf"^(?P<kind>{_KIND_PATTERN})-(?P<number>\d+)_(?P<slug>[a-z0-9]+(?:-[a-z0-9]+)*)$"
)


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    name: str
    path: str
    is_directory: bool = True


@dataclass(frozen=True, slots=True)
class ParsedName:
    kind: WorkItemKind
    number: int
    slug: str


def parse_work_item_name(name: str) -> ParsedName:
    """Parse ``<kind>-<number>_<slug>``.

    Capability directories store their BSP number one above the internal
    number, so ``capability-21`` parses to 20.
    """

    match = WORK_ITEM_NAME.match(name)
    if match is None:
        raise InvalidWorkItemNameError(name)

    kind = WorkItemKind(match.group("kind"))
    number = int(match.group("number"))
    if kind is ROOT_KIND:
        if number < 1:
            raise InvalidWorkItemNameError(name)
        number -= 1
    return ParsedName(kind=kind, number=number, slug=match.group("slug"))


def is_work_item_directory(name: str) -> bool:
    try:
        parse_work_item_name(name)
    except InvalidWorkItemNameError:
        return False
    return True


def walk_directory(root: str | Path) -> list[DirectoryEntry]:
    """Recursively list directories below ``root``, skipping hidden ones."""

    root_path = Path(root)
    if not root_path.is_dir():
        raise ScanError(f"Failed to walk directory {root_path}: directory does not exist")

    def _raise(exc: OSError) -> None:
        raise ScanError(f"Failed to walk directory {root_path}: {exc}") from exc

    entries: list[DirectoryEntry] = []
    for current, dirnames, _ in os.walk(root_path, onerror=_raise):
        dirnames[:] = sorted(name for name in dirnames if not name.startswith("."))
        for name in dirnames:
            entries.append(DirectoryEntry(name=name, path=normalize_path(os.path.join(current, name))))
    return entries


def filter_work_item_directories(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    return [entry for entry in entries if entry.is_directory and is_work_item_directory(entry.name)]


def build_work_item_list(entries: Iterable[DirectoryEntry]) -> list[WorkItem]:
    """Convert work item directory entries into :class:`WorkItem` objects."""

    items: list[WorkItem] = []
    for entry in entries:
        parsed = parse_work_item_name(entry.name)
        items.append(
            WorkItem(kind=parsed.kind, number=parsed.number, slug=parsed.slug, path=entry.path)
        )
    return items


class Scanner:
    """Discover in-flight work items for a project."""

    def __init__(self, cwd: str | Path, settings: SpxSettings) -> None:
        self._cwd = Path(cwd).resolve()
        self._settings = settings

    @property
    def work_root(self) -> Path:
        return self._settings.work_root(self._cwd)

    def scan(self) -> list[WorkItem]:
        entries = filter_work_item_directories(walk_directory(self.work_root))
        items = build_work_item_list(entries)
        logger.info(
            "Scanned work items",
            extra={"work_root": str(self.work_root), "count": len(items)},
        )
        return items


__all__ = [
    "DirectoryEntry",
    "ParsedName",
    "Scanner",
    "WORK_ITEM_NAME",
    "build_work_item_list",
    "filter_work_item_directories",
    "is_work_item_directory",
    "parse_work_item_name",
    "walk_directory",
]
