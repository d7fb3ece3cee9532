"""TreeProjector: derives the editable tree view from a JSON value.

Uses recursive dispatch to turn mappings and arrays into container nodes and
everything else into leaves.  Arrays are containers too (children keyed by
stringified index) so the tree shows exactly the leaves the string extractor
visits.

Paths are tuples of string segments:
- Root is ``()`` with key ``"root"``
- Each nested level appends the key or stringified index
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from json_tree_translator.tree.nodes import ROOT_KEY, TreeNode
from json_tree_translator.types import JsonValue, Path, as_path


@dataclass
class TreeProjector:
    """Converts a JSON value into a ``TreeNode`` tree and flips expansion state.

    Every container is expanded on a fresh projection.  Passing the previous
    tree to ``project`` keeps collapsed containers collapsed as long as their
    path still exists, so an edit does not reset the view.

    Example::

        projector = TreeProjector()
        tree = projector.project({"common": {"hello": "Hi"}})
        tree = projector.toggle(tree, ["common"])
        tree.find(["common"]).expanded   # False
    """

    def project(self, doc: JsonValue, previous: TreeNode | None = None) -> TreeNode:
        """Build the tree for ``doc``.

        Args:
            doc:      Any JSON value.
            previous: An earlier projection whose collapsed containers should
                      stay collapsed.

        Returns:
            The root node (key ``"root"``, path ``()``).
        """
        collapsed: set[Path] = set()
        if previous is not None:
            collapsed = {
                node.path
                for node in previous.walk()
                if not node.is_leaf and not node.expanded
            }
        return self._build(doc, ROOT_KEY, (), collapsed)

    def _build(
        self, value: Any, key: str, path: Path, collapsed: set[Path]
    ) -> TreeNode:
        if isinstance(value, dict):
            children = tuple(
                self._build(child, child_key, (*path, child_key), collapsed)
                for child_key, child in value.items()
            )
        elif isinstance(value, list):
            children = tuple(
                self._build(child, str(index), (*path, str(index)), collapsed)
                for index, child in enumerate(value)
            )
        else:
            return TreeNode(key=key, path=path, is_leaf=True, value=value)

        return TreeNode(
            key=key,
            path=path,
            is_leaf=False,
            children=children,
            expanded=path not in collapsed,
            is_array=isinstance(value, list),
        )

    def toggle(self, tree: TreeNode, path: Iterable[object]) -> TreeNode:
        """Return a new tree with the node at ``path`` expanded/collapsed.

        ``path`` is absolute (relative to the root).  Leaves have no
        expansion state and an unknown path changes nothing; in both cases a
        tree equal to ``tree`` is returned.
        """
        return self._toggle(tree, as_path(path))

    def _toggle(self, node: TreeNode, rest: Path) -> TreeNode:
        if not rest:
            if node.is_leaf:
                return node
            return replace(node, expanded=not node.expanded)
        if node.children is None:
            return node
        head, tail = rest[0], rest[1:]
        children = tuple(
            self._toggle(child, tail) if child.key == head else child
            for child in node.children
        )
        return replace(node, children=children)
