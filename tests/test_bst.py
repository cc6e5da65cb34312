import random

from dsakit.bst import BinarySearchTree, TreeNode


def test_tree_node_starts_without_children():
    node = TreeNode(7)
    assert node.data == 7
    assert node.left is None and node.right is None


def test_inorder_is_sorted_and_unique():
    tree = BinarySearchTree([5, 3, 8, 3, 1, 9, 8])
    assert tree.inorder() == [1, 3, 5, 8, 9]


def test_contains():
    tree = BinarySearchTree([5, 3, 8])
    assert 3 in tree
    assert 4 not in tree


def test_height_of_empty_and_single():
    tree = BinarySearchTree()
    assert tree.height() == 0
    tree.insert(1)
    assert tree.height() == 1


def test_height_of_degenerate_chain():
    values = [1, 2, 3, 4, 5]
    tree = BinarySearchTree(values)
    assert tree.height() == len(values)


def test_delete_leaf():
    tree = BinarySearchTree([5, 3, 8])
    tree.delete(3)
    assert tree.inorder() == [5, 8]
    assert tree.root.left is None


def test_delete_node_with_one_child():
    tree = BinarySearchTree([5, 3, 4])
    tree.delete(3)
    assert tree.inorder() == [4, 5]
    assert tree.root.left.data == 4


def test_delete_with_two_children_uses_left_maximum():
    tree = BinarySearchTree([5, 3, 8, 4])
    tree.delete(5)
    assert tree.root.data == 4
    assert tree.inorder() == [3, 4, 8]


def test_delete_missing_value_leaves_tree():
    tree = BinarySearchTree([2, 1, 3])
    tree.delete(10)
    assert tree.inorder() == [1, 2, 3]


def test_delete_from_empty_tree():
    tree = BinarySearchTree()
    tree.delete(1)
    assert tree.root is None


def test_random_operations_match_set():
    rng = random.Random(99)
    tree = BinarySearchTree()
    present = set()
    for _ in range(300):
        value = rng.randrange(60)
        if rng.random() < 0.4:
            tree.delete(value)
            present.discard(value)
        else:
            tree.insert(value)
            present.add(value)
        assert tree.inorder() == sorted(present)
        assert all(v in tree for v in present)
    assert tree.height() <= len(present)