"""Filesystem status probe injected into the tree builder."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from ..config import SpxSettings
from ..errors import StatusProbeError
from ..tree.models import WorkItemStatus
from .state import StatusFlags, determine_status

logger = logging.getLogger(__name__)


class StatusProbe:
    """Resolve a work item's own status from its marker directory."""

    def __init__(self, settings: SpxSettings) -> None:
        self._marker_dir = settings.marker_dir
        self._completion_marker = settings.completion_marker

    def read_flags(self, path: str | Path) -> StatusFlags:
        marker_dir = Path(path) / self._marker_dir
        try:
            if not marker_dir.is_dir():
                return StatusFlags(
                    has_marker_dir=False,
                    has_completion_marker=False,
                    marker_dir_is_empty=True,
                )
            entries = [entry.name for entry in marker_dir.iterdir()]
        except OSError as exc:
            raise StatusProbeError(f"Failed to inspect {marker_dir}: {exc}") from exc

        has_completion = self._completion_marker in entries
        others = [name for name in entries if name != self._completion_marker]
        return StatusFlags(
            has_marker_dir=True,
            has_completion_marker=has_completion,
            marker_dir_is_empty=not others,
        )

    async def get_status(self, path: str) -> WorkItemStatus:
        flags = await asyncio.to_thread(self.read_flags, path)
        status = determine_status(flags)
        logger.debug("Resolved work item status", extra={"path": path, "status": status.value})
        return status


__all__ = ["StatusProbe"]
