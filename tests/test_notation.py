import pytest

from dsalgo.notation import infix_to_postfix, infix_to_prefix, priority

EXPRESSIONS = ["a+b*(c-d)", "a*b+c", "(a+b)*(c+d)", "a^b^c", "x/y-z", "1+2*3"]


def test_priorities_from_source():
    assert priority("(") == 0
    assert priority("+") == priority("-") == 1
    assert priority("*") == priority("/") == 2
    assert priority("^") == 3


def test_postfix_worked_example():
    assert infix_to_postfix("a+b*(c-d)") == "abcd-*+"


def test_prefix_worked_example():
    assert infix_to_prefix("a+b*(c-d)") == "+a*b-cd"


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_postfix_keeps_operands_in_order(expression):
    result = infix_to_postfix(expression)
    operands = [c for c in expression if c.isalnum()]
    assert [c for c in result if c.isalnum()] == operands
    assert "(" not in result and ")" not in result
    assert sorted(result) == sorted(c for c in expression if c not in "()")


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_prefix_keeps_operands_in_order(expression):
    result = infix_to_prefix(expression)
    operands = [c for c in expression if c.isalnum()]
    assert [c for c in result if c.isalnum()] == operands
    assert sorted(result) == sorted(c for c in expression if c not in "()")


@pytest.mark.parametrize("expression", EXPRESSIONS)
def test_output_shapes(expression):
    postfix = infix_to_postfix(expression)
    prefix = infix_to_prefix(expression)
    assert postfix[0].isalnum() and not postfix[-1].isalnum()
    assert not prefix[0].isalnum() and prefix[-1].isalnum()


def test_single_operand():
    assert infix_to_postfix("a") == "a"
    assert infix_to_prefix("a") == "a"


def test_whitespace_is_ignored():
    assert infix_to_postfix("a + b * ( c - d )") == infix_to_postfix("a+b*(c-d)")


@pytest.mark.parametrize("expression", ["(a+b", "a+b)", "a)+(b"])
def test_unbalanced_parentheses(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)
    with pytest.raises(ValueError):
        infix_to_prefix(expression)


def test_unsupported_character():
    with pytest.raises(ValueError):
        infix_to_postfix("a$b")