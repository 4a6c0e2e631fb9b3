"""Tool registration for the spx MCP server."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from fastmcp import Context, FastMCP

from ..commands import ALL_DONE_MESSAGE, empty_message, load_tree, status_command
from ..config import SpxSettings, load_project_settings
from ..tree import TreeNode, find_next_work_item, find_parents


@dataclass(slots=True)
class ToolHandles:
    spec_status: Any
    spec_next: Any


def _node_summary(node: TreeNode) -> dict[str, Any]:
    return {
        "kind": node.kind.value,
        "name": node.name,
        "number": node.display_number,
        "slug": node.slug,
        "status": node.status.value,
        "path": node.path,
    }


def register_tools(
    server: FastMCP,
    *,
    settings: SpxSettings,
    root: Path,
) -> ToolHandles:
    """Register the spx tools on the server."""

    def _project_settings() -> SpxSettings:
        return load_project_settings(root, settings)

    async def _spec_status(
        format: Literal["text", "json", "markdown", "table"] = "json",
        validate: bool = False,
        context: Context | None = None,
    ) -> dict[str, Any]:
        """Render the status of every in-flight work item."""

        project = _project_settings()
        output = await status_command(root, project, format, validate=validate)
        empty = output == empty_message(project)
        content: Any = output
        if format == "json" and not empty:
            content = json.loads(output)

        _emit_log(
            context,
            "debug",
            "Rendered work item status",
            extra={"root": str(root), "format": format, "empty": empty},
        )
        return {"format": format, "empty": empty, "content": content}

    async def _spec_next(context: Context | None = None) -> dict[str, Any]:
        """Return the next story to work on with its capability and feature."""

        project = _project_settings()
        tree = await load_tree(root, project, validate=True)
        if tree is None:
            return {"next": None, "parents": [], "message": empty_message(project)}

        node = find_next_work_item(tree)
        if node is None:
            _emit_log(context, "info", "All work items complete", extra={"root": str(root)})
            return {"next": None, "parents": [], "message": ALL_DONE_MESSAGE}

        parents = [parent for parent in find_parents(tree, node) if parent is not None]
        _emit_log(
            context,
            "info",
            "Selected next work item",
            extra={"path": node.path, "status": node.status.value},
        )
        return {
            "next": _node_summary(node),
            "parents": [_node_summary(parent) for parent in parents],
            "message": None,
        }

    tool_status = server.tool(
        name="spec_status",
        description=(
            "Report the rolled-up status of every capability, feature and story under "
            "the project's in-flight work directory. Formats: text, json, markdown, table."
        ),
    )(_spec_status)

    tool_next = server.tool(
        name="spec_next",
        description=(
            "Find the next story to work on: the lowest-numbered story in BSP order that "
            "is not DONE, with its parent capability and feature."
        ),
    )(_spec_next)

    return ToolHandles(spec_status=tool_status, spec_next=tool_next)


__all__ = ["register_tools", "ToolHandles"]

logger = logging.getLogger(__name__)


def _emit_log(
    context: Context | None,
    level: str,
    message: str,
    *,
    extra: dict[str, Any] | None = None,
) -> None:
    """Log through the MCP context logger when one is attached to the request."""

    payload = extra or {}

    if context is not None:
        ctx_logger = getattr(context, "logger", None)
        if ctx_logger is not None:
            log_method = getattr(ctx_logger, level, None)
            if callable(log_method):
                log_method(message, extra=payload)
                return

    fallback = getattr(logger, level, logger.info)
    fallback(message, extra=payload)
