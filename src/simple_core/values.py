"""Value types for SIMPLE Core and the operator table shared by both engines.

``Number`` and ``Boolean`` are the only two value kinds. They double as the
literal expression nodes: a literal is a value, and a value is an
expression in normal form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import TypeMismatch


@dataclass(frozen=True, slots=True)
class Number:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


Value = Union[Number, Boolean]


def is_value(obj: object) -> bool:
    return isinstance(obj, (Number, Boolean))


# ---------------------------------------------------------------------------
# Operator table
# ---------------------------------------------------------------------------

def _numbers(operator: str, left: Value, right: Value) -> tuple[int, int]:
    """Unwrap two Number operands, failing fast on anything else."""
    if not isinstance(left, Number) or not isinstance(right, Number):
        raise TypeMismatch(operator, left, right)
    return left.value, right.value


def add(left: Value, right: Value) -> Number:
    a, b = _numbers("+", left, right)
    return Number(a + b)


def multiply(left: Value, right: Value) -> Number:
    a, b = _numbers("*", left, right)
    return Number(a * b)


def less_than(left: Value, right: Value) -> Boolean:
    a, b = _numbers("<", left, right)
    return Boolean(a < b)


def more_than(left: Value, right: Value) -> Boolean:
    a, b = _numbers(">", left, right)
    return Boolean(a > b)


def equal(left: Value, right: Value) -> Boolean:
    """Equal only when both the value kind and the scalar match."""
    if not is_value(left) or not is_value(right):
        raise TypeMismatch("==", left, right)
    return Boolean(type(left) is type(right) and left.value == right.value)


def truth(condition: Value) -> bool:
    """Truth of a resolved ``If`` / ``While`` condition."""
    if not isinstance(condition, Boolean):
        raise TypeMismatch("condition", condition)
    return condition.value
