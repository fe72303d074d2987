"""Queries over binary search trees and traversals of plain binary trees."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import Any

from structkit.bst import BinarySearchTree, TreeNode


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def kth_smallest(tree: BinarySearchTree, k: int) -> Any:
    """Return the k-th smallest value (1-based); raise IndexError if there is none."""
    if k >= 1:
        found = next(islice(tree, k - 1, None), _MISSING)
        if found is not _MISSING:
            return found
    raise IndexError(f"There are fewer than {k} nodes in the tree.")


_MISSING = object()


def _lca_node(tree: BinarySearchTree, first: Any, second: Any) -> TreeNode:
    node = tree.root
    while node is not None:
        if first < node.value and second < node.value:
            node = node.left
        elif first > node.value and second > node.value:
            node = node.right
        else:
            return node
    raise KeyError((first, second))


def lowest_common_ancestor(tree: BinarySearchTree, first: Any, second: Any) -> Any:
    """Return the value of the node where the search paths to first and second split.

    Raises KeyError when the descent runs off the tree.
    """
    return _lca_node(tree, first, second).value


def common_parent_count(tree: BinarySearchTree, first: Any, second: Any) -> int:
    """Return how many nodes lie on the path from the root to the lowest common
    ancestor of first and second, both ends included.

    Raises KeyError when no ancestor is found.
    """
    target = _lca_node(tree, first, second).value
    count = 0
    node = tree.root
    while node is not None:
        count += 1
        if target < node.value:
            node = node.left
        elif target > node.value:
            node = node.right
        else:
            break
    return count


def _greater(root: TreeNode | None, threshold: Any) -> Iterator[Any]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            if node.value > threshold:
                stack.append(node)
                node = node.left
            else:
                node = node.right
        if not stack:
            return
        node = stack.pop()
        yield node.value
        node = node.right


def values_greater_than(tree: BinarySearchTree, threshold: Any) -> list:
    """Return the values greater than threshold, in ascending order."""
    return list(_greater(tree.root, threshold))


def sum_greater_than(tree: BinarySearchTree, threshold: Any) -> Any:
    """Return the sum of the values greater than threshold."""
    return sum(_greater(tree.root, threshold))


def total(tree: BinarySearchTree) -> Any:
    """Return the sum of every value in the tree; 0 for an empty tree."""
    return sum(tree)


def left_subtree_size(tree: BinarySearchTree) -> int:
    """Return the number of nodes in the root's left subtree."""
    if tree.root is None:
        return 0
    return sum(1 for _ in _inorder_nodes(tree.root.left))


def is_bst(root: TreeNode | None) -> bool:
    """Return True when an in-order walk from root yields strictly increasing values."""
    previous: TreeNode | None = None
    for node in _inorder_nodes(root):
        if previous is not None and node.value <= previous.value:
            return False
        previous = node
    return True


def preorder(root: TreeNode | None) -> list:
    """Return the values in node, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list:
    """Return the values in left, node, right order."""
    return [node.value for node in _inorder_nodes(root)]


def postorder(root: TreeNode | None) -> list:
    """Return the values in left, right, node order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result