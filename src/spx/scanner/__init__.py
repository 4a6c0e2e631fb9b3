"""Work item discovery on disk."""

from .walk import (
    DirectoryEntry,
    ParsedName,
    Scanner,
    build_work_item_list,
    filter_work_item_directories,
    is_work_item_directory,
    parse_work_item_name,
    walk_directory,
)

__all__ = [
    "DirectoryEntry",
    "ParsedName",
    "Scanner",
    "build_work_item_list",
    "filter_work_item_directories",
    "is_work_item_directory",
    "parse_work_item_name",
    "walk_directory",
]
