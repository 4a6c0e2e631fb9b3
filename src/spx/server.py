"""FastMCP server bootstrap for spx."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastmcp import FastMCP

from . import __version__
from .commands import load_tree
from .config import SpxSettings, get_settings, load_project_settings
from .errors import SpxError
from .reporter import summarize
from .tools import register_tools


def configure_logging(level: str) -> None:
    """Configure root logging for spx."""

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )


def create_server(
    settings: Optional[SpxSettings] = None,
    root: Path | None = None,
) -> FastMCP:
    """Instantiate the FastMCP server for the project rooted at ``root``."""

    settings = settings or get_settings()
    root = (root or Path.cwd()).resolve()

    server = FastMCP(
        name="spx",
        version=__version__,
        instructions=(
            "spx reports the status of a spec-driven project's capability, feature and "
            "story directories and picks the next story to work on in BSP order."
        ),
    )

    handles = register_tools(server, settings=settings, root=root)

    @server.resource(
        "resource://spx/status",
        name="spx_status",
        description="Status summary of the in-flight work items for the served project.",
        mime_type="application/json",
    )
    async def status_resource() -> str:
        """Return a JSON string summarizing the work item tree."""

        work_root = settings.work_root(root)
        summary = None
        error = None
        try:
            project = load_project_settings(root, settings)
            work_root = project.work_root(root)
            tree = await load_tree(root, project, validate=False)
            if tree is not None:
                summary = summarize(tree)
        except SpxError as exc:
            error = str(exc)

        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "server_version": __version__,
            "root": str(root),
            "work_root": str(work_root),
            "summary": summary,
            "error": error,
        }
        return json.dumps(payload)

    setattr(server, "tool_handles", handles)
    setattr(server, "project_root", root)
    return server


def main() -> None:
    """Entry point for running the spx MCP server."""

    settings = get_settings()
    configure_logging(settings.log_level)

    server = create_server(settings)
    logging.getLogger(__name__).info(
        "Launching spx MCP server",
        extra={
            "version": __version__,
            "log_level": settings.log_level,
            "root": str(getattr(server, "project_root", "")),
        },
    )
    server.run()


if __name__ == "__main__":
    main()
