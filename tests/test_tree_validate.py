from __future__ import annotations

import asyncio

import pytest

from spx.errors import CycleError, DuplicateNumberError, HierarchyError, TreeValidationError
from spx.tree import TreeNode, WorkItem, WorkItemKind, WorkItemStatus, WorkItemTree, build_tree, validate_tree


def make_node(
    kind: WorkItemKind,
    number: int,
    slug: str = "test",
    children: list[TreeNode] | None = None,
    *,
    path: str | None = None,
    status: WorkItemStatus = WorkItemStatus.OPEN,
) -> TreeNode:
    return TreeNode(
        kind=kind,
        number=number,
        slug=slug,
        path=path or f"/test/{kind.value}-{number}_{slug}",
        status=status,
        children=children or [],
    )


def _story(number: int, slug: str = "story", **kwargs) -> TreeNode:
    return make_node(WorkItemKind.STORY, number, slug, **kwargs)


def _feature(number: int, children=None, slug: str = "feat", **kwargs) -> TreeNode:
    return make_node(WorkItemKind.FEATURE, number, slug, children, **kwargs)


def _capability(number: int, children=None, slug: str = "cap", **kwargs) -> TreeNode:
    return make_node(WorkItemKind.CAPABILITY, number, slug, children, **kwargs)


class OpenLookup:
    async def get_status(self, path: str) -> WorkItemStatus:
        return WorkItemStatus.OPEN


def test_valid_tree_passes() -> None:
    tree = WorkItemTree(
        nodes=[
            _capability(20, [_feature(21, [_story(21, "a"), _story(32, "b")])]),
            _capability(31, [_feature(21, slug="other")], slug="second"),
        ]
    )

    validate_tree(tree)


def test_built_tree_passes_validation() -> None:
    cap = "/specs/capability-21_test"
    items = [
        WorkItem(kind=WorkItemKind.CAPABILITY, number=20, slug="test", path=cap),
        WorkItem(kind=WorkItemKind.FEATURE, number=32, slug="feat", path=f"{cap}/feature-32_feat"),
        WorkItem(
            kind=WorkItemKind.STORY,
            number=21,
            slug="s",
            path=f"{cap}/feature-32_feat/story-21_s",
        ),
    ]

    validate_tree(asyncio.run(build_tree(items, OpenLookup())))


def test_empty_tree_passes() -> None:
    validate_tree(WorkItemTree(nodes=[]))


def test_story_under_capability_is_hierarchy_error() -> None:
    tree = WorkItemTree(nodes=[_capability(20, [_story(21, "stray")])])

    with pytest.raises(HierarchyError) as excinfo:
        validate_tree(tree)

    assert "capability" in str(excinfo.value)
    assert "story" in str(excinfo.value)


def test_feature_at_root_is_hierarchy_error() -> None:
    tree = WorkItemTree(nodes=[_feature(21, slug="rootless")])

    with pytest.raises(HierarchyError, match="rootless"):
        validate_tree(tree)


def test_capability_under_capability_is_hierarchy_error() -> None:
    tree = WorkItemTree(nodes=[_capability(20, [_capability(21, slug="nested")])])

    with pytest.raises(HierarchyError, match="nested"):
        validate_tree(tree)


def test_story_with_children_is_hierarchy_error() -> None:
    story = _story(21, "parent", children=[_story(32, "child")])
    tree = WorkItemTree(nodes=[_capability(20, [_feature(21, [story])])])

    with pytest.raises(HierarchyError, match="leaf"):
        validate_tree(tree)


def test_duplicate_story_numbers_name_level_and_number() -> None:
    feature = _feature(21, [_story(32, "a"), _story(32, "b")])
    tree = WorkItemTree(nodes=[_capability(20, [feature])])

    with pytest.raises(DuplicateNumberError) as excinfo:
        validate_tree(tree)

    assert excinfo.value.kind == "story"
    assert excinfo.value.number == 32
    assert "story" in str(excinfo.value) and "32" in str(excinfo.value)


def test_duplicate_capability_numbers_at_root() -> None:
    tree = WorkItemTree(nodes=[_capability(20, slug="a"), _capability(20, slug="b")])

    with pytest.raises(DuplicateNumberError, match="capability"):
        validate_tree(tree)


def test_same_number_in_different_branches_is_allowed() -> None:
    tree = WorkItemTree(
        nodes=[
            _capability(20, [_feature(21, [_story(21)])]),
            _capability(21, [_feature(21, [_story(21, path="/other/story")], path="/other")], slug="b"),
        ]
    )

    validate_tree(tree)


def test_repeated_path_on_branch_is_cycle() -> None:
    story = _story(21, path="/loop")
    feature = _feature(21, [story], path="/loop")
    tree = WorkItemTree(nodes=[_capability(20, [feature])])

    with pytest.raises(CycleError) as excinfo:
        validate_tree(tree)

    assert excinfo.value.path == "/loop"


def test_siblings_do_not_share_visited_paths() -> None:
    shared = "/shared/story"
    tree = WorkItemTree(
        nodes=[
            _capability(
                20,
                [
                    _feature(21, [_story(21, path=shared)], slug="a"),
                    _feature(32, [_story(21, path=shared)], slug="b"),
                ],
            )
        ]
    )

    validate_tree(tree)


def test_validation_errors_share_base_class() -> None:
    tree = WorkItemTree(nodes=[_story(21)])

    with pytest.raises(TreeValidationError):
        validate_tree(tree)
