"""A binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from structkit.errors import EmptyError
from structkit.linked_list import _ValuesRepr


@dataclass
class TreeNode:
    """One node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield the values below root in left, node, right order."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


class BinarySearchTree(_ValuesRepr):
    """Binary search tree; values less than a node go left, greater go right.

    Duplicate values are ignored on insertion.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _nodes(self) -> Iterator[TreeNode]:
        """Yield every node, in pre-order."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _count(self, predicate: Callable[[TreeNode], bool]) -> int:
        return sum(1 for node in self._nodes() if predicate(node))

    def insert(self, value: Any) -> bool:
        """Insert value; return False when it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            self._size += 1
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def _replace_child(
        self, parent: TreeNode | None, old: TreeNode, new: TreeNode | None
    ) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def delete(self, value: Any) -> None:
        """Remove value; raise KeyError when it is not in the tree.

        A node with two children takes the value of its in-order successor,
        which is then removed from the right subtree.
        """
        parent: TreeNode | None = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)

        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.value = succ.value
            self._replace_child(succ_parent, succ, succ.right)
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
        self._size -= 1

    def search(self, value: Any) -> TreeNode | None:
        """Return the node holding value, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending (in-order) order."""
        return _inorder(self.root)

    def __len__(self) -> int:
        return self._size

    def _extreme(self, side: str) -> Any:
        if self.root is None:
            raise EmptyError("The tree is empty.")
        node = self.root
        while (child := getattr(node, side)) is not None:
            node = child
        return node.value

    def minimum(self) -> Any:
        """Return the smallest value; raise EmptyError when the tree is empty."""
        return self._extreme("left")

    def maximum(self) -> Any:
        """Return the largest value; raise EmptyError when the tree is empty."""
        return self._extreme("right")

    def height(self) -> int:
        """Return the number of edges on the longest root-to-leaf path; -1 if empty."""
        level = [self.root] if self.root is not None else []
        height = -1
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def second_highest(self) -> Any:
        """Return the second-largest value; raise ValueError with fewer than two nodes."""
        root = self.root
        if root is None or (root.left is None and root.right is None):
            raise ValueError("Tree must have at least two nodes.")
        parent: TreeNode | None = None
        current = root
        while current.right is not None:
            parent = current
            current = current.right
        if current.left is not None:
            node = current.left
            while node.right is not None:
                node = node.right
            return node.value
        return parent.value

    def leaf_count(self) -> int:
        """Return the number of nodes with no children."""
        return self._count(lambda n: n.left is None and n.right is None)

    def one_child_count(self) -> int:
        """Return the number of nodes with exactly one child."""
        return self._count(lambda n: (n.left is None) != (n.right is None))

    def two_child_count(self) -> int:
        """Return the number of nodes with both children."""
        return self._count(lambda n: n.left is not None and n.right is not None)

    def sibling_count(self) -> int:
        """Return the number of nodes that share their parent with another node."""
        return 2 * self.two_child_count()