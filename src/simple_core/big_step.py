"""Big-step engine: direct structural evaluation to a value or environment."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable

from .environment import Environment, as_environment
from .errors import UnknownNode
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
from .values import Boolean, Number, Value, add, equal, less_than, more_than, multiply, truth

logger = logging.getLogger("simple_core.big_step")

_OPERATORS: dict[type, Callable[[Value, Value], Value]] = {
    Add: add,
    Multiply: multiply,
    LessThan: less_than,
    MoreThan: more_than,
    Equal: equal,
}


def evaluate(
    node: Node, environment: Mapping[str, Value] | None = None
) -> Value | Environment:
    """Evaluate *node* under *environment*.

    Expressions produce a Value; statements produce the final Environment.
    """
    env = as_environment(environment)
    if isinstance(node, (DoNothing, Assign, Sequence, If, While)):
        return _execute(node, env)
    return _value(node, env)


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

def _value(node: Expression, env: Environment) -> Value:
    if isinstance(node, (Number, Boolean)):
        return node

    if isinstance(node, Variable):
        return env.lookup(node.name)

    operator = _OPERATORS.get(type(node))
    if operator is not None:
        left = _value(node.left, env)
        right = _value(node.right, env)
        return operator(left, right)

    raise UnknownNode(node)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

def _execute(node: Statement, env: Environment) -> Environment:
    if isinstance(node, DoNothing):
        return env

    if isinstance(node, Assign):
        return env.assign(node.name, _value(node.expression, env))

    if isinstance(node, Sequence):
        return _execute(node.second, _execute(node.first, env))

    if isinstance(node, If):
        if truth(_value(node.cond, env)):
            return _execute(node.consequence, env)
        return _execute(node.alternative, env)

    if isinstance(node, While):
        return _loop(node, env)

    raise UnknownNode(node)


def _loop(node: While, env: Environment) -> Environment:
    """Run a While without growing the call stack per iteration."""
    iterations = 0
    while truth(_value(node.cond, env)):
        env = _execute(node.body, env)
        iterations += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("iteration %d: %s", iterations, env)
    return env
