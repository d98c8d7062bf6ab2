"""SIMPLE Core — small-step and big-step semantics for the SIMPLE language."""

from .big_step import evaluate
from .environment import Environment, as_environment
from .errors import (
    IrreducibleNode,
    SimpleCoreError,
    TypeMismatch,
    UnboundVariable,
    UnknownNode,
)
from .machine import Machine
from .model import (
    Add,
    Assign,
    DoNothing,
    Equal,
    Expression,
    If,
    LessThan,
    MoreThan,
    Multiply,
    Node,
    Sequence,
    Statement,
    Variable,
    While,
)
from .small_step import reduce, reducible, run, trace
from .values import Boolean, Number, Value

__all__ = [
    "evaluate",
    "reduce",
    "reducible",
    "run",
    "trace",
    "Machine",
    "Environment",
    "as_environment",
    "Value",
    "Number",
    "Boolean",
    "Expression",
    "Statement",
    "Node",
    "Variable",
    "Add",
    "Multiply",
    "LessThan",
    "MoreThan",
    "Equal",
    "DoNothing",
    "Assign",
    "Sequence",
    "If",
    "While",
    "SimpleCoreError",
    "UnboundVariable",
    "TypeMismatch",
    "IrreducibleNode",
    "UnknownNode",
]
