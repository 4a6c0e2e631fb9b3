"""Read-only renderers for work item trees."""

from __future__ import annotations

from typing import Literal

from ..config import SpxSettings
from ..tree.models import WorkItemTree
from .json_format import format_json, summarize
from .markdown import format_markdown
from .table import format_table
from .text import format_text, render_text

OutputFormat = Literal["text", "json", "markdown", "table"]
OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "markdown", "table")


def format_tree(tree: WorkItemTree, output_format: OutputFormat, settings: SpxSettings) -> str:
    """Render ``tree`` in the requested format."""

    if output_format == "json":
        return format_json(tree, settings)
    if output_format == "markdown":
        return format_markdown(tree)
    if output_format == "table":
        return format_table(tree)
    if output_format == "text":
        return format_text(tree)
    raise ValueError(f"Unknown output format '{output_format}'")


__all__ = [
    "OUTPUT_FORMATS",
    "OutputFormat",
    "format_json",
    "format_markdown",
    "format_table",
    "format_text",
    "format_tree",
    "render_text",
    "summarize",
]
