"""Binary trees: search-tree insertion, traversals and the bottom view."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "TreeNode",
    "BinarySearchTree",
    "preorder",
    "inorder",
    "postorder",
    "build_level_order",
    "bottom_view",
]

ABSENT = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinarySearchTree:
    """A binary search tree that ignores duplicate keys."""

    def __init__(self, keys: Iterable[Any] = ()):
        self.root: TreeNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Insert key unless it is already present."""
        if self.root is None:
            self.root = TreeNode(key)
            return
        node = self.root
        while True:
            if key < node.data:
                if node.left is None:
                    node.left = TreeNode(key)
                    return
                node = node.left
            elif key > node.data:
                if node.right is None:
                    node.right = TreeNode(key)
                    return
                node = node.right
            else:
                return

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return inorder(self.root)

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key < node.data:
                node = node.left
            elif key > node.data:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())


def preorder(root: TreeNode | None) -> list[Any]:
    """Return node data in root, left, right order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[Any]:
    """Return node data in left, root, right order."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Return node data in left, right, root order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def _is_absent(value: Any) -> bool:
    return value is None or value == ABSENT


def build_level_order(values: Iterable[Any]) -> TreeNode:
    """Build a tree from the root value followed by each node's two children in level order.

    A child given as -1 or None is absent. Raises ValueError when the values run out
    before every node has had its children given.
    """
    items = iter(values)
    try:
        root = TreeNode(next(items))
    except StopIteration:
        raise ValueError("no values to build a tree from") from None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        try:
            left, right = next(items), next(items)
        except StopIteration:
            raise ValueError("values end before every node has its two children") from None
        if not _is_absent(left):
            node.left = TreeNode(left)
            queue.append(node.left)
        if not _is_absent(right):
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def bottom_view(root: TreeNode | None) -> list[Any]:
    """Return the lowest node seen at each horizontal distance, from left to right.

    When nodes share a distance and depth, the one later in level order wins.
    """
    if root is None:
        return []
    view: dict[int, Any] = {}
    queue = deque([(root, 0)])
    while queue:
        node, distance = queue.popleft()
        view[distance] = node.data
        if node.left is not None:
            queue.append((node.left, distance - 1))
        if node.right is not None:
            queue.append((node.right, distance + 1))
    return [view[distance] for distance in sorted(view)]