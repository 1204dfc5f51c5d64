import pytest

from algokit.trees import (
    BinarySearchTree,
    TreeNode,
    bottom_view,
    build_level_order,
    inorder,
    postorder,
    preorder,
)


def _sample_tree():
    root = TreeNode(1)
    root.left = TreeNode(2)
    root.right = TreeNode(3)
    root.left.left = TreeNode(4)
    root.left.right = TreeNode(5)
    return root


def test_bst_source_example_inorder():
    keys = [50, 30, 20, 40, 70, 60, 80]
    tree = BinarySearchTree(keys)
    assert tree.inorder() == sorted(keys)
    assert tree.root.data == 50


@pytest.mark.parametrize("keys", [[], [5], [9, 1, 8, 2, 7, 3], list(range(10, 0, -1))])
def test_bst_inorder_is_sorted(keys):
    tree = BinarySearchTree()
    for key in keys:
        tree.insert(key)
    assert tree.inorder() == sorted(keys)
    assert list(tree) == sorted(keys)


def test_bst_ignores_duplicates():
    tree = BinarySearchTree([4, 2, 4, 6, 2])
    assert tree.inorder() == sorted({4, 2, 6})


def test_bst_contains():
    tree = BinarySearchTree([50, 30, 70])
    assert 30 in tree
    assert 31 not in tree


def test_bst_preorder_starts_with_first_key():
    keys = [50, 30, 20, 40, 70, 60, 80]
    tree = BinarySearchTree(keys)
    order = preorder(tree.root)
    assert order[0] == keys[0]
    assert postorder(tree.root)[-1] == keys[0]
    assert sorted(order) == sorted(keys)


def test_traversals_of_source_tree():
    root = _sample_tree()
    assert preorder(root) == [1, 2, 4, 5, 3]
    assert postorder(root) == [4, 5, 2, 3, 1]
    assert sorted(inorder(root)) == [1, 2, 3, 4, 5]
    assert inorder(root)[-1] == 3


def test_traversals_of_empty_tree():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []


def test_build_level_order_shape():
    root = build_level_order([1, 2, 3, 4, 5, -1, -1, -1, -1, -1, -1])
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left.data == 4
    assert root.left.right.data == 5
    assert root.right.left is None and root.right.right is None


def test_build_level_order_accepts_none():
    root = build_level_order([1, None, 2, None, None])
    assert root.left is None
    assert root.right.data == 2


def test_build_level_order_empty():
    with pytest.raises(ValueError):
        build_level_order([])


def test_build_level_order_too_short():
    with pytest.raises(ValueError):
        build_level_order([1, 2, 3, -1])


def test_bottom_view_example():
    root = build_level_order([1, 2, 3, 4, 5, -1, -1, -1, -1, -1, -1])
    assert bottom_view(root) == [4, 2, 5, 3]


def test_bottom_view_right_chain():
    root = build_level_order([1, -1, 2, -1, 3, -1, -1])
    assert bottom_view(root) == [1, 2, 3]


def test_bottom_view_single_and_empty():
    assert bottom_view(TreeNode(7)) == [7]
    assert bottom_view(None) == []


def test_bottom_view_length_matches_horizontal_span():
    root = _sample_tree()
    view = bottom_view(root)
    assert len(view) == len(set(view))
    assert view[0] == root.left.left.data
    assert view[-1] == root.right.data