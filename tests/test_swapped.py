import pytest

from dsalgo.swapped import find_swapped


def test_source_example():
    assert find_swapped([1, 3, 5, 4, 7, 6]) == ((2, 5), (5, 6))


@pytest.mark.parametrize("i,j", [(0, 5), (1, 4), (0, 2), (2, 7), (3, 6)])
def test_non_adjacent_swap_is_found(i, j):
    values = list(range(10, 90, 10))
    values[i], values[j] = values[j], values[i]
    assert find_swapped(values) == ((i, values[i]), (j, values[j]))


@pytest.mark.parametrize("i", [0, 3, 6])
def test_adjacent_swap_is_found(i):
    values = list(range(8))
    values[i], values[i + 1] = values[i + 1], values[i]
    assert find_swapped(values) == ((i, values[i]), (i + 1, values[i + 1]))


@pytest.mark.parametrize("values", [[], [4], [1, 2, 3], [2, 2, 5]])
def test_ordered_sequence_raises(values):
    with pytest.raises(ValueError):
        find_swapped(values)