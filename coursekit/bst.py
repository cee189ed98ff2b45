"""Binary search tree: insertion, search, traversals, extremes, height and printing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A tree node with an integer value and two children."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def insert_node(node: Optional[TreeNode], data: int) -> TreeNode:
    """Insert ``data`` below ``node`` and return the subtree root.

    Smaller values go left; equal or larger values go right.
    """
    if node is None:
        return TreeNode(data)
    if data < node.data:
        node.left = insert_node(node.left, data)
    else:
        node.right = insert_node(node.right, data)
    return node


def bst_search(node: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Return the node holding ``key``, or None."""
    while node is not None:
        if node.data == key:
            return node
        node = node.left if key < node.data else node.right
    return None


def preorder(node: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    if node is None:
        return []
    return [node.data, *preorder(node.left), *preorder(node.right)]


def inorder(node: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    if node is None:
        return []
    return [*inorder(node.left), node.data, *inorder(node.right)]


def postorder(node: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    if node is None:
        return []
    return [*postorder(node.left), *postorder(node.right), node.data]


def find_min(node: Optional[TreeNode]) -> TreeNode:
    """Leftmost node of a non-empty tree."""
    if node is None:
        raise ValueError("empty tree has no minimum")
    while node.left is not None:
        node = node.left
    return node


def find_max(node: Optional[TreeNode]) -> TreeNode:
    """Rightmost node of a non-empty tree."""
    if node is None:
        raise ValueError("empty tree has no maximum")
    while node.right is not None:
        node = node.right
    return node


def get_height(node: Optional[TreeNode]) -> int:
    """Edges on the longest root-to-leaf path; -1 for an empty tree."""
    if node is None:
        return -1
    return max(get_height(node.left), get_height(node.right)) + 1


def format_tree(node: Optional[TreeNode], level: int = 0) -> str:
    """Render the tree sideways: right subtree above, tab-indented by depth, ``*`` for empty."""
    if node is None:
        return "\t" * level + "*\n"
    return (
        format_tree(node.right, level + 1)
        + "\t" * level
        + f"{node.data}\n"
        + format_tree(node.left, level + 1)
    )