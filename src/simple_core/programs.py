"""Ready-made SIMPLE programs for demonstrations and tests.

Each factory returns a ``(node, environment)`` pair.
"""

from __future__ import annotations

from typing import Callable

from .environment import Environment
from .model import (
    Add,
    Assign,
    Equal,
    If,
    LessThan,
    Multiply,
    Node,
    Sequence,
    Variable,
    While,
)
from .values import Number

Program = tuple[Node, Environment]


def add_numbers() -> Program:
    return Add(Number(1), Number(2)), Environment()


def nested_arithmetic() -> Program:
    """1 + 2 * 3, reaching 7 in two steps."""
    return Add(Number(1), Multiply(Number(2), Number(3))), Environment()


def variable_addition() -> Program:
    return Add(Number(10), Variable("x")), Environment({"x": Number(20)})


def assignment() -> Program:
    return Assign(Variable("x"), Number(40)), Environment({"x": Number(20)})


def sequence() -> Program:
    node = Sequence(
        Assign("x", Add(Number(1), Number(1))),
        Assign("y", Add(Variable("x"), Number(3))),
    )
    return node, Environment()


def branch() -> Program:
    """Double both x and y when x is 100, otherwise reset them."""
    node = If(
        Equal(Variable("x"), Number(100)),
        Sequence(
            Assign("x", Multiply(Variable("x"), Number(2))),
            Assign("y", Multiply(Variable("y"), Number(2))),
        ),
        Sequence(
            Assign("x", Number(10)),
            Assign("y", Add(Variable("y"), Variable("x"))),
        ),
    )
    return node, Environment({"x": Number(100), "y": Number(10)})


def sum_to_100() -> Program:
    """sum = 1 + 2 + ... + 100."""
    node = While(
        LessThan(Variable("x"), Number(101)),
        Sequence(
            Assign("sum", Add(Variable("sum"), Variable("x"))),
            Assign("x", Add(Variable("x"), Number(1))),
        ),
    )
    return node, Environment({"x": Number(1), "sum": Number(0)})


PROGRAMS: dict[str, Callable[[], Program]] = {
    "add_numbers": add_numbers,
    "nested_arithmetic": nested_arithmetic,
    "variable_addition": variable_addition,
    "assignment": assignment,
    "sequence": sequence,
    "branch": branch,
    "sum_to_100": sum_to_100,
}
