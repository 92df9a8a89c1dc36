"""Binary tree helpers: height, balance checks and rebalancing of search trees."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _postorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield the nodes of a tree children first, without recursion."""
    stack: list[tuple[TreeNode, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, False))


def _subtree_heights(root: Optional[TreeNode]) -> dict[int, int]:
    """Map the identity of every node to the height of its subtree."""
    heights: dict[int, int] = {}

    def of(node: Optional[TreeNode]) -> int:
        return 0 if node is None else heights[id(node)]

    for node in _postorder(root):
        heights[id(node)] = 1 + max(of(node.left), of(node.right))
    return heights


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return _subtree_heights(root)[id(root)]


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    heights = _subtree_heights(root)

    def of(node: Optional[TreeNode]) -> int:
        return 0 if node is None else heights[id(node)]

    return all(abs(of(node.left) - of(node.right)) <= 1 for node in _postorder(root))


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values of a tree in in-order sequence."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def _build(values: Sequence[int], lo: int, hi: int) -> Optional[TreeNode]:
    if lo > hi:
        return None
    mid = (lo + hi) // 2
    return TreeNode(values[mid], _build(values, lo, mid - 1), _build(values, mid + 1, hi))


def balance_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a height-balanced tree with the same in-order values."""
    values = inorder(root)
    return _build(values, 0, len(values) - 1)