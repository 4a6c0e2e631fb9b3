"""``spx status``: render the state of the whole tree."""

from __future__ import annotations

from pathlib import Path

from ..config import SpxSettings
from ..reporter import OutputFormat, format_tree
from .pipeline import empty_message, load_tree


async def status_command(
    cwd: str | Path,
    settings: SpxSettings,
    output_format: OutputFormat = "text",
    *,
    validate: bool = False,
) -> str:
    tree = await load_tree(cwd, settings, validate=validate)
    if tree is None:
        return empty_message(settings)
    return format_tree(tree, output_format, settings)


__all__ = ["status_command"]
