from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

WORK_ROOT = Path("specs") / "work" / "doing"


def _write_item(root: Path, relative: str, *, tests: list[str] | None = None) -> Path:
    item = root / WORK_ROOT / relative
    item.mkdir(parents=True, exist_ok=True)
    if tests is not None:
        marker = item / "tests"
        marker.mkdir(exist_ok=True)
        for name in tests:
            (marker / name).write_text("", encoding="utf-8")
    return item


@pytest.fixture
def make_item(tmp_path: Path) -> Callable[..., Path]:
    """Create a work item directory under ``tmp_path/specs/work/doing``.

    ``tests`` lists files to create in the item's ``tests`` marker directory;
    ``None`` leaves the marker directory absent.
    """

    def _make(relative: str, *, tests: list[str] | None = None) -> Path:
        return _write_item(tmp_path, relative, tests=tests)

    return _make


@pytest.fixture
def sample_project(tmp_path: Path, make_item) -> Path:
    """A project with one finished story, one started story and one untouched story."""

    make_item("capability-21_core-cli", tests=["cli.test.ts"])
    make_item("capability-21_core-cli/feature-32_walk")
    make_item("capability-21_core-cli/feature-32_walk/story-21_list", tests=["DONE.md", "walk.test.ts"])
    make_item("capability-21_core-cli/feature-32_walk/story-32_filter", tests=["filter.test.ts"])
    make_item("capability-21_core-cli/feature-32_walk/story-43_sort")
    return tmp_path
