"""Exception hierarchy for SIMPLE Core."""

from __future__ import annotations

from typing import Any


class SimpleCoreError(Exception):
    """Base class for every error raised while reducing or evaluating."""


class UnboundVariable(SimpleCoreError, KeyError):
    """Lookup of an identifier that the environment does not bind."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unbound variable '{self.name}'"


class TypeMismatch(SimpleCoreError, TypeError):
    """An operator or condition received a value of the wrong kind."""

    def __init__(self, operator: str, *operands: Any) -> None:
        rendered = ", ".join(repr(o) for o in operands)
        super().__init__(f"{operator} cannot be applied to {rendered}")
        self.operator = operator
        self.operands = operands


class IrreducibleNode(SimpleCoreError, ValueError):
    """``reduce`` was asked to step a node already in normal form."""

    def __init__(self, node: Any) -> None:
        super().__init__(f"{node!r} is in normal form")
        self.node = node


class UnknownNode(SimpleCoreError, TypeError):
    """An engine received an object outside the closed set of AST variants."""

    def __init__(self, node: Any) -> None:
        super().__init__(f"not a SIMPLE node: {node!r}")
        self.node = node
