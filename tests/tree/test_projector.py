"""Tests for TreeProjector and TreeNode.

Covers root shape, leaf/container discrimination for every JSON type, array
children keyed by index, paths, default expansion, toggle, and carrying the
collapse state over a re-projection.
"""

from __future__ import annotations

import pytest

from json_tree_translator.document.paths import set_at_path
from json_tree_translator.tree import ROOT_KEY, TreeNode, TreeProjector

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def projector() -> TreeProjector:
    """A fresh TreeProjector instance for each test."""
    return TreeProjector()


@pytest.fixture
def doc() -> dict:
    return {"common": {"hello": "Hi", "n": 1, "null": None}, "list": ["a", {"b": True}]}


# ---------------------------------------------------------------------------
# project
# ---------------------------------------------------------------------------


class TestProject:
    def test_root_node(self, projector: TreeProjector, doc: dict) -> None:
        tree = projector.project(doc)
        assert tree.key == ROOT_KEY == "root"
        assert tree.path == ()
        assert tree.is_leaf is False
        assert tree.expanded is True

    def test_children_in_insertion_order(self, projector: TreeProjector, doc: dict) -> None:
        tree = projector.project(doc)
        assert tree.children is not None
        assert [c.key for c in tree.children] == ["common", "list"]

    def test_leaf_carries_value(self, projector: TreeProjector, doc: dict) -> None:
        leaf = projector.project(doc).find(["common", "hello"])
        assert leaf is not None
        assert leaf.is_leaf is True
        assert leaf.value == "Hi"
        assert leaf.children is None
        assert leaf.path == ("common", "hello")

    def test_null_leaf(self, projector: TreeProjector, doc: dict) -> None:
        leaf = projector.project(doc).find(["common", "null"])
        assert leaf is not None
        assert leaf.is_leaf is True
        assert leaf.value is None

    def test_arrays_are_containers_keyed_by_index(
        self, projector: TreeProjector, doc: dict
    ) -> None:
        node = projector.project(doc).find(["list"])
        assert node is not None
        assert node.is_leaf is False
        assert node.is_array is True
        assert node.children is not None
        assert [c.key for c in node.children] == ["0", "1"]
        nested = node.find(["1", "b"])
        assert nested is not None
        assert nested.value is True
        assert nested.path == ("list", "1", "b")

    def test_scalar_document_is_leaf_root(self, projector: TreeProjector) -> None:
        tree = projector.project("just text")
        assert tree.is_leaf is True
        assert tree.value == "just text"

    def test_empty_container_has_empty_children(self, projector: TreeProjector) -> None:
        tree = projector.project({})
        assert tree.is_leaf is False
        assert tree.children == ()

    def test_every_container_expanded(self, projector: TreeProjector, doc: dict) -> None:
        tree = projector.project(doc)
        assert all(n.expanded for n in tree.walk() if not n.is_leaf)

    def test_walk_visits_all_nodes(self, projector: TreeProjector, doc: dict) -> None:
        paths = [n.path for n in projector.project(doc).walk()]
        assert paths == [
            (),
            ("common",),
            ("common", "hello"),
            ("common", "n"),
            ("common", "null"),
            ("list",),
            ("list", "0"),
            ("list", "1"),
            ("list", "1", "b"),
        ]

    def test_find_unknown_path(self, projector: TreeProjector, doc: dict) -> None:
        tree = projector.project(doc)
        assert tree.find(["nope"]) is None
        assert tree.find(["common", "hello", "deeper"]) is None


# ---------------------------------------------------------------------------
# toggle
# ---------------------------------------------------------------------------


class TestToggle:
    def test_flips_only_target(self, projector: TreeProjector, doc: dict) -> None:
        tree = projector.project(doc)
        toggled = projector.toggle(tree, ["common"])

        common = toggled.find(["common"])
        assert common is not None
        assert common.expanded is False
        assert toggled.expanded is True
        list_node = toggled.find(["list"])
        assert list_node is not None
        assert list_node.expanded is True

    def test_original_tree_unchanged(self, projector: TreeProjector, doc: dict) -> None:
        tree = projector.project(doc)
        projector.toggle(tree, ["common"])
        common = tree.find(["common"])
        assert common is not None
        assert common.expanded is True

    def test_double_toggle_restores(self, projector: TreeProjector, doc: dict) -> None:
        tree = projector.project(doc)
        assert projector.toggle(projector.toggle(tree, ["list"]), ["list"]) == tree

    def test_root_toggle(self, projector: TreeProjector, doc: dict) -> None:
        assert projector.toggle(projector.project(doc), []).expanded is False

    def test_unknown_path_and_leaf_change_nothing(
        self, projector: TreeProjector, doc: dict
    ) -> None:
        tree = projector.project(doc)
        assert projector.toggle(tree, ["missing"]) == tree
        assert projector.toggle(tree, ["common", "hello"]) == tree


# ---------------------------------------------------------------------------
# Re-projection keeps collapse state
# ---------------------------------------------------------------------------


class TestReprojection:
    def test_collapsed_node_stays_collapsed(
        self, projector: TreeProjector, doc: dict
    ) -> None:
        tree = projector.toggle(projector.project(doc), ["common"])
        edited = set_at_path(doc, ["common", "bye"], "Bye")

        again = projector.project(edited, previous=tree)

        common = again.find(["common"])
        assert common is not None
        assert common.expanded is False
        assert again.find(["common", "bye"]) is not None

    def test_without_previous_everything_expanded(
        self, projector: TreeProjector, doc: dict
    ) -> None:
        projector.toggle(projector.project(doc), ["common"])
        again = projector.project(doc)
        common = again.find(["common"])
        assert common is not None
        assert common.expanded is True


# ---------------------------------------------------------------------------
# TreeNode invariants
# ---------------------------------------------------------------------------


class TestTreeNodeInvariants:
    def test_leaf_with_children_rejected(self) -> None:
        with pytest.raises(ValueError):
            TreeNode(key="x", path=("x",), is_leaf=True, children=())

    def test_container_without_children_rejected(self) -> None:
        with pytest.raises(ValueError):
            TreeNode(key="x", path=("x",), is_leaf=False)
