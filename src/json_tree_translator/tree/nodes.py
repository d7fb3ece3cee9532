"""TreeNode dataclass for the editable tree view of a JSON document.

A TreeNode is a disposable projection of a JSON value: the value itself stays
the source of truth and the tree is re-derived after every edit.  The only
state a node owns is its ``expanded`` flag.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from json_tree_translator.types import Path, as_path

ROOT_KEY = "root"


@dataclass(frozen=True, slots=True)
class TreeNode:
    """A node in the tree view of a JSON value.

    Attributes:
        key:      Local name: the mapping key, the stringified list index, or
                  ``"root"`` for the root node.
        path:     Segments from the root to this node; ``()`` for the root.
        is_leaf:  True for scalars (string, number, boolean, null).
        value:    The scalar value for leaves; None for containers (check
                  ``is_leaf`` to tell a container from a JSON null leaf).
        children: Child nodes for containers, in key / index order; None for
                  leaves.
        expanded: Whether a container is shown expanded.  Always True for leaves.
        is_array: True when the container is a JSON array.
    """

    key: str
    path: Path
    is_leaf: bool
    value: Any = None
    children: tuple[TreeNode, ...] | None = None
    expanded: bool = True
    is_array: bool = False

    def __post_init__(self) -> None:
        if self.is_leaf and self.children is not None:
            msg = f"leaf node at {self.path!r} cannot have children"
            raise ValueError(msg)
        if not self.is_leaf and self.children is None:
            msg = f"container node at {self.path!r} must have children"
            raise ValueError(msg)

    def walk(self) -> Iterator[TreeNode]:
        """Yield this node and all descendants in depth-first pre-order."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    def find(self, path: Iterable[object]) -> TreeNode | None:
        """Return the descendant at ``path`` (relative to this node), or None."""
        node: TreeNode | None = self
        for segment in as_path(path):
            if node is None or node.children is None:
                return None
            node = next((c for c in node.children if c.key == segment), None)
        return node
