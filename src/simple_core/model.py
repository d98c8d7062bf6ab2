"""Abstract syntax for SIMPLE expressions and statements.

Nodes are immutable. Reduction and evaluation always build new nodes and
never edit existing ones, so any intermediate state can be kept around and
inspected later.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .values import Boolean, Number


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Variable:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Add:
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"({self.left} + {self.right})"


@dataclass(frozen=True, slots=True)
class Multiply:
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"({self.left} * {self.right})"


@dataclass(frozen=True, slots=True)
class LessThan:
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"{self.left} < {self.right}"


@dataclass(frozen=True, slots=True)
class MoreThan:
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"{self.left} > {self.right}"


@dataclass(frozen=True, slots=True)
class Equal:
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"{self.left} == {self.right}"


BinaryExpression = Union[Add, Multiply, LessThan, MoreThan, Equal]
BINARY_EXPRESSIONS = (Add, Multiply, LessThan, MoreThan, Equal)

Expression = Union[Number, Boolean, Variable, Add, Multiply, LessThan, MoreThan, Equal]
EXPRESSIONS = (Number, Boolean, Variable) + BINARY_EXPRESSIONS


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DoNothing:
    def __str__(self) -> str:
        return "do nothing"


@dataclass(frozen=True, slots=True)
class Assign:
    target: str | Variable
    expression: Expression

    @property
    def name(self) -> str:
        """The assigned identifier, whether given as a string or a Variable."""
        if isinstance(self.target, Variable):
            return self.target.name
        return self.target

    def __str__(self) -> str:
        return f"{self.name} = {self.expression}"


@dataclass(frozen=True, slots=True)
class Sequence:
    first: Statement
    second: Statement

    def __str__(self) -> str:
        return f"{self.first}; {self.second}"


@dataclass(frozen=True, slots=True)
class If:
    cond: Expression
    consequence: Statement
    alternative: Statement

    def __str__(self) -> str:
        return f"if ({self.cond}) {{ {self.consequence} }} else {{ {self.alternative} }}"


@dataclass(frozen=True, slots=True)
class While:
    cond: Expression
    body: Statement

    def __str__(self) -> str:
        return f"while ({self.cond}) {{ {self.body} }}"


Statement = Union[DoNothing, Assign, Sequence, If, While]
STATEMENTS = (DoNothing, Assign, Sequence, If, While)

Node = Union[Expression, Statement]


def is_expression(node: object) -> bool:
    return isinstance(node, EXPRESSIONS)


def is_statement(node: object) -> bool:
    return isinstance(node, STATEMENTS)
