"""Tree subpackage for the editable JSON tree view.

Re-exports the public API for the tree module:
- TreeNode: frozen dataclass representing a node in the tree view
- TreeProjector: converts any JSON value into a TreeNode tree and toggles nodes
"""

from json_tree_translator.tree.nodes import ROOT_KEY, TreeNode
from json_tree_translator.tree.projector import TreeProjector

__all__ = ["ROOT_KEY", "TreeNode", "TreeProjector"]
