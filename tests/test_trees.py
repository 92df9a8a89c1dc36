import pytest

from solvebook.trees import TreeNode, balance_bst, height, inorder, is_balanced


def chain(values):
    root = None
    for value in reversed(list(values)):
        root = TreeNode(value, right=root)
    return root


def test_height_of_empty_tree():
    assert height(None) == 0


def test_height_of_chain_equals_length():
    values = list(range(1, 6))
    assert height(chain(values)) == len(values)


def test_height_of_deep_chain():
    values = list(range(5000))
    assert height(chain(values)) == len(values)


def test_empty_tree_is_balanced():
    assert is_balanced(None) is True


def test_chain_is_not_balanced():
    assert is_balanced(chain([1, 2, 3])) is False


def test_small_complete_tree_is_balanced():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert is_balanced(root) is True


def test_inorder_reads_left_root_right():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert inorder(root) == [1, 2, 3]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 10, 31, 100])
def test_balance_bst_keeps_values_and_balances(size):
    values = list(range(size))
    balanced = balance_bst(chain(values))
    assert inorder(balanced) == values
    assert is_balanced(balanced)
    assert height(balanced) == size.bit_length()


def test_balance_bst_root_is_middle_value():
    balanced = balance_bst(chain(range(1, 8)))
    assert balanced.val == 4


def test_balance_bst_of_empty_tree():
    assert balance_bst(None) is None