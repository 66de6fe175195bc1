"""Recursive evaluation of single-digit arithmetic expressions.

Operands are single digits. The operators ``+ - * /`` are supported, and an
operand after an operator may be a parenthesised expression, which ends at
its closing bracket. Text is not skipped: spaces and unknown symbols are
errors.
"""

from __future__ import annotations

import math
from typing import Callable


def is_number(symbol: str) -> bool:
    """True when ``symbol`` is one of the digits 0 to 9."""
    return len(symbol) == 1 and "0" <= symbol <= "9"


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _digit(text: str, pos: int) -> float:
    if pos >= len(text):
        raise ValueError("expression ends where an operand is expected")
    symbol = text[pos]
    if not is_number(symbol):
        raise ValueError(f"unexpected symbol {symbol!r} at position {pos}")
    return float(ord(symbol) - ord("0"))


def _operand(text: str, pos: int, combine: Callable[[float], float]) -> float:
    """Evaluate the operand at ``pos`` and the chain behind it.

    A digit is combined before the chain continues; a bracketed expression is
    evaluated first and combined with its whole result.
    """
    if pos >= len(text):
        raise ValueError("expression ends where an operand is expected")
    if text[pos] == "(":
        inner = pos + 1
        return combine(_chain(_digit(text, inner), text, inner))
    return _chain(combine(_digit(text, pos)), text, pos)


def _chain(number: float, text: str, pos: int) -> float:
    """Continue from the digit at ``pos`` whose value is already in ``number``."""
    if pos >= len(text):
        return number
    if not is_number(text[pos]):
        raise ValueError(f"unexpected symbol {text[pos]!r} at position {pos}")
    op_pos = pos + 1
    if op_pos >= len(text):
        return number
    op = text[op_pos]
    nxt = op_pos + 1
    if op == "+":
        return number + _operand(text, nxt, lambda value: value)
    if op == "-":
        return number + _operand(text, nxt, lambda value: -value)
    if op == "*":
        return _operand(text, nxt, lambda value: number * value)
    if op == "/":
        return _operand(text, nxt, lambda value: _divide(number, value))
    if op == ")":
        return number
    if op == "(":
        return _chain(0.0, text, nxt)
    raise ValueError(f"wrong type: unexpected symbol {op!r} at position {op_pos}")


def evaluate(expression: str) -> float:
    """Evaluate the expression; an empty expression gives zero."""
    if not expression:
        return 0.0
    return _chain(_digit(expression, 0), expression, 0)