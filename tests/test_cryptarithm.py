import pytest

from dsalgo.cryptarithm import LETTERS, is_valid_solution, solve


def test_known_assignment_is_valid():
    assert is_valid_solution([8, 1, 9, 2, 0, 3]) is True


def test_wrong_assignment_is_invalid():
    assert is_valid_solution([0, 1, 2, 3, 4, 5]) is False


def test_extra_digits_are_ignored():
    assert is_valid_solution([8, 1, 9, 2, 0, 3, 4, 5, 6, 7]) is True


def test_too_few_digits_raises():
    with pytest.raises(ValueError):
        is_valid_solution([1, 2, 3])


def test_solution_satisfies_equation():
    solution = solve()
    assert set(solution) == set(LETTERS)
    digits = [solution[letter] for letter in LETTERS]
    assert is_valid_solution(digits) is True
    assert len(set(digits)) == len(digits)


def test_solution_words_add_up():
    s = solve()
    eat = int(f"{s['E']}{s['A']}{s['T']}")
    that = int(f"{s['T']}{s['H']}{s['A']}{s['T']}")
    apple = int(f"{s['A']}{s['P']}{s['P']}{s['L']}{s['E']}")
    assert eat + that == apple