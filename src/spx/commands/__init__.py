"""Command implementations shared by the CLI and the MCP tools."""

from .next import ALL_DONE_MESSAGE, format_next, next_command
from .pipeline import empty_message, load_tree
from .status import status_command

__all__ = [
    "ALL_DONE_MESSAGE",
    "empty_message",
    "format_next",
    "load_tree",
    "next_command",
    "status_command",
]
