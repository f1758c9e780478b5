"""Conversion of infix expressions to postfix and prefix notation."""

from __future__ import annotations

_PRIORITY = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def priority(op: str) -> int:
    """Return the binding strength of ``op``; 0 for parentheses and anything unknown."""
    return _PRIORITY.get(op, 0)


def _tokens(expression: str) -> list[str]:
    tokens = []
    for char in expression:
        if char.isspace():
            continue
        if not (char.isalnum() or char in _PRIORITY or char == ")"):
            raise ValueError(f"unsupported character {char!r}")
        tokens.append(char)
    return tokens


def _convert(tokens: list[str], opening: str, closing: str) -> list[str]:
    out: list[str] = []
    stack: list[str] = []
    for token in tokens:
        if token.isalnum():
            out.append(token)
        elif token == opening:
            stack.append(token)
        elif token == closing:
            while True:
                if not stack:
                    raise ValueError("unbalanced parentheses")
                top = stack.pop()
                if top == opening:
                    break
                out.append(top)
        else:
            while stack and priority(stack[-1]) >= priority(token):
                out.append(stack.pop())
            stack.append(token)
    while stack:
        top = stack.pop()
        if top == opening:
            raise ValueError("unbalanced parentheses")
        out.append(top)
    return out


def infix_to_postfix(expression: str) -> str:
    """Return ``expression`` in postfix order; operands are single letters or digits."""
    return "".join(_convert(_tokens(expression), "(", ")"))


def infix_to_prefix(expression: str) -> str:
    """Return ``expression`` in prefix order; operands are single letters or digits."""
    reversed_tokens = _tokens(expression)[::-1]
    return "".join(_convert(reversed_tokens, ")", "("))[::-1]