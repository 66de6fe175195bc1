"""Infix arithmetic evaluated through reverse Polish notation."""

from __future__ import annotations

import math
import re
import sys
from typing import Callable, Union

Token = Union[float, str]

_DEFAULT_EXPRESSION = "-1+5+3+dfghdfgdfg"
_SPACES = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?")
_ALLOWED = frozenset("()+-*/")
_PRIORITY = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2}


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_BINARY: dict[str, Callable[[float, float], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
}


class Converter:
    """Shunting-yard conversion of infix text into RPN tokens."""

    def to_rpn(self, infix: str) -> list[Token]:
        """Return numbers (as floats) and operator characters in RPN order."""
        output: list[Token] = []
        operators: list[str] = []
        wrong: list[str] = []
        pos = 0
        while pos < len(infix):
            symbol = infix[pos]
            if symbol in _SPACES:
                pos += 1
                continue
            if symbol in _DIGITS:
                match = _NUMBER.match(infix, pos)
                output.append(float(match.group()))
                pos = match.end()
                continue
            if symbol == "(":
                operators.append(symbol)
            elif symbol == ")":
                self._collapse_bracket(operators, output)
            elif symbol in _ALLOWED:
                while operators and _PRIORITY[symbol] <= _PRIORITY[operators[-1]]:
                    output.append(operators.pop())
                operators.append(symbol)
            else:
                wrong.append(symbol)
            pos += 1

        if wrong:
            raise ValueError("Invalid param " + "".join(wrong))

        output.extend(reversed(operators))
        return output

    @staticmethod
    def _collapse_bracket(operators: list[str], output: list[Token]) -> None:
        while operators:
            top = operators.pop()
            if top == "(":
                break
            output.append(top)


class Calculator:
    """Evaluates infix expressions with + - * / and parentheses."""

    def calculate(self, infix_notation: str) -> float:
        """Evaluate the expression; raise ValueError on bad input."""
        stack: list[float] = []
        for token in Converter().to_rpn(infix_notation):
            if isinstance(token, float):
                stack.append(token)
            elif len(stack) == 1:
                if token == "-":
                    stack.append(-stack.pop())
            elif token in _BINARY:
                if len(stack) < 2:
                    raise ValueError("malformed expression")
                right = stack.pop()
                left = stack.pop()
                stack.append(_BINARY[token](left, right))
        if not stack:
            raise ValueError("empty expression")
        return stack[-1]


def main(argv: list[str] | None = None) -> int:
    """Evaluate the expression given on the command line and print it."""
    args = sys.argv[1:] if argv is None else argv
    expression = " ".join(args) if args else _DEFAULT_EXPRESSION
    try:
        value = Calculator().calculate(expression)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 0
    print(f"{value:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())