"""Reverse Polish notation calculator over single-digit operands."""

from __future__ import annotations

import sys
from typing import Sequence

_DIGITS = "0123456789"
_OPERATORS = ("+", "-", "*", "/")
_WHITESPACE = " \n\t\r\v"


class RPNError(Exception):
    """Base class for expression errors."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


class WrongFormatError(RPNError):
    """The expression is malformed."""


class ImpossibleExpressionError(RPNError):
    """The expression cannot be evaluated, e.g. division by zero."""


def _divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(expression: str) -> int:
    """Evaluate a space separated RPN expression and return its value."""
    stack: list[int] = []
    for token in expression.split(" "):
        if len(token) == 1 and token in _DIGITS:
            stack.append(int(token))
        elif token in _OPERATORS and len(stack) >= 2:
            right = stack.pop()
            left = stack.pop()
            if token == "+":
                stack.append(left + right)
            elif token == "-":
                stack.append(left - right)
            elif token == "*":
                stack.append(left * right)
            else:
                if right == 0:
                    raise ImpossibleExpressionError()
                stack.append(_divide(left, right))
        elif not token.strip(_WHITESPACE):
            continue
        else:
            raise WrongFormatError()
    if len(stack) != 1:
        raise WrongFormatError()
    return stack[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: evaluate one expression and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print('Too many arguments, input a single argument!\ntype in RPN "<expression>"')
        return 1
    if not args:
        return 2
    try:
        print(evaluate(args[0]))
    except RPNError as exc:
        print(exc, file=sys.stderr)
        return 3
    return 0


if __name__ == "__main__":
    sys.exit(main())