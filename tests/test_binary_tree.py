from structkit.binary_tree import BinaryTree


def test_empty_tree():
    tree = BinaryTree()
    assert len(tree) == 0
    assert tree.inorder() == []
    assert tree.root is None


def test_first_value_is_root():
    tree = BinaryTree([7, 8, 9])
    assert tree.root.value == 7
    assert tree.root.left.value == 8
    assert tree.root.right.value == 9


def test_three_values_inorder():
    assert BinaryTree([1, 2, 3]).inorder() == [2, 1, 3]


def test_descends_left_when_full():
    tree = BinaryTree([1, 2, 3, 4, 5, 6])
    assert tree.root.left.left.value == 4
    assert tree.root.left.right.value == 5
    assert tree.root.left.left.left.value == 6
    assert tree.root.right.left is None
    assert tree.root.right.right is None


def test_inorder_keeps_every_value():
    values = [5, 3, 3, 9, 1, 7, 2, 8]
    tree = BinaryTree(values)
    assert len(tree) == len(values)
    assert sorted(tree.inorder()) == sorted(values)


def test_insert_grows_length():
    tree = BinaryTree()
    for count, value in enumerate([10, 20, 30, 40], start=1):
        tree.insert(value)
        assert len(tree) == count
        assert len(tree.inorder()) == count