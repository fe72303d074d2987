"""A binary tree filled by always descending into the left child once both are taken."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from structkit.bst import TreeNode, _inorder


class BinaryTree:
    """Binary tree with no ordering between values.

    A new value fills the first empty child of a node, left before right;
    when both are taken it descends into the left child.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add value at the next free place on the left-descending path."""
        self._size += 1
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if node.left is None:
                node.left = TreeNode(value)
                return
            if node.right is None:
                node.right = TreeNode(value)
                return
            node = node.left

    def inorder(self) -> list:
        """Return the values in left, node, right order."""
        return list(_inorder(self.root))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"