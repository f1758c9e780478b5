import math
import random

import pytest

from dsalgo.avl import AVLTree


def _tree(values):
    tree = AVLTree()
    for value in values:
        tree.insert(value)
    return tree


def test_right_right_case_from_worked_example():
    tree = _tree([6, 7, 8])
    assert tree.preorder() == [7, 6, 8]
    assert tree.render() == "\n        8\n7\n        6"


def test_left_left_case_from_worked_example():
    assert _tree([8, 4, 2]).preorder() == [4, 2, 8]


def test_double_rotations_keep_root_at_middle_value():
    assert _tree([3, 1, 2]).preorder()[0] == 2
    assert _tree([1, 3, 2]).preorder()[0] == 2


@pytest.mark.parametrize("levels", [1, 2, 3, 4, 5])
def test_ascending_inserts_give_perfect_tree(levels):
    tree = _tree(range(1, 2**levels))
    assert tree.height() == levels


def test_duplicates_are_ignored():
    values = [5, 3, 5, 9, 3, 1]
    assert _tree(values).inorder() == sorted(set(values))


def test_random_inserts_stay_sorted_and_balanced():
    rng = random.Random(42)
    values = [rng.randint(-1000, 1000) for _ in range(500)]
    tree = _tree(values)
    distinct = sorted(set(values))
    assert tree.inorder() == distinct
    assert sorted(tree.preorder()) == distinct
    assert tree.height() <= 1.45 * math.log2(len(distinct) + 2)


def test_render_lists_every_value_once():
    values = [10, 20, 30, 40, 50, 25]
    lines = _tree(values).render().split("\n")[1:]
    assert sorted(int(line.strip()) for line in lines) == sorted(values)
    assert [int(line.strip()) for line in lines] == sorted(values, reverse=True)


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert tree.inorder() == []
    assert tree.render() == ""