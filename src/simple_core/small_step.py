"""Small-step engine: a one-step transition relation iterated to normal form."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Callable

from .environment import Environment, as_environment
from .errors import IrreducibleNode, UnknownNode
from .model import (
    Add,
    Assign,
    BinaryExpression,
    DoNothing,
    Equal,
    If,
    LessThan,
    MoreThan,
    Multiply,
    Node,
    Sequence,
    Variable,
    While,
)
from .values import Boolean, Number, Value, add, equal, less_than, more_than, multiply, truth

logger = logging.getLogger("simple_core.small_step")

State = tuple[Node, Environment]

_OPERATORS: dict[type, Callable[[Value, Value], Value]] = {
    Add: add,
    Multiply: multiply,
    LessThan: less_than,
    MoreThan: more_than,
    Equal: equal,
}


# ---------------------------------------------------------------------------
# Reducibility
# ---------------------------------------------------------------------------

def reducible(node: Node) -> bool:
    """False for literals and DoNothing; true for every other variant."""
    if isinstance(node, (Number, Boolean, DoNothing)):
        return False
    if isinstance(node, (Variable, Assign, Sequence, If, While)) or type(node) in _OPERATORS:
        return True
    raise UnknownNode(node)


# ---------------------------------------------------------------------------
# One transition
# ---------------------------------------------------------------------------

def reduce(node: Node, env: Environment) -> State:
    """Take exactly one step from ``(node, env)``.

    Expressions never change the environment. Raises ``IrreducibleNode``
    when *node* is already in normal form.
    """
    operator = _OPERATORS.get(type(node))
    if operator is not None:
        return _reduce_binary(node, operator, env), env

    if isinstance(node, Variable):
        return env.lookup(node.name), env

    if isinstance(node, Assign):
        return _reduce_assign(node, env)

    if isinstance(node, Sequence):
        return _reduce_sequence(node, env)

    if isinstance(node, If):
        return _reduce_if(node, env)

    if isinstance(node, While):
        # Loop by unrolling once; the If and Sequence rules do the rest.
        return If(node.cond, Sequence(node.body, node), DoNothing()), env

    if isinstance(node, (Number, Boolean, DoNothing)):
        raise IrreducibleNode(node)
    raise UnknownNode(node)


def _reduce_binary(
    node: BinaryExpression, operator: Callable[[Value, Value], Value], env: Environment
) -> Node:
    """Leftmost-innermost: step the left operand, then the right, then combine."""
    if reducible(node.left):
        left, _ = reduce(node.left, env)
        return type(node)(left, node.right)
    if reducible(node.right):
        right, _ = reduce(node.right, env)
        return type(node)(node.left, right)
    return operator(node.left, node.right)


def _reduce_assign(node: Assign, env: Environment) -> State:
    if reducible(node.expression):
        expression, _ = reduce(node.expression, env)
        return Assign(node.target, expression), env
    return DoNothing(), env.assign(node.name, node.expression)


def _reduce_sequence(node: Sequence, env: Environment) -> State:
    if isinstance(node.first, DoNothing):
        return node.second, env
    first, env = reduce(node.first, env)
    return Sequence(first, node.second), env


def _reduce_if(node: If, env: Environment) -> State:
    if reducible(node.cond):
        cond, _ = reduce(node.cond, env)
        return If(cond, node.consequence, node.alternative), env
    branch = node.consequence if truth(node.cond) else node.alternative
    if isinstance(branch, DoNothing):
        return DoNothing(), env
    # The If is discarded; the chosen branch takes its first step here.
    return reduce(branch, env)


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------

def trace(node: Node, environment: Mapping[str, Value] | None = None) -> Iterator[State]:
    """Yield every state from ``(node, environment)`` up to the normal form.

    The first item is the starting state itself. For a program that never
    terminates the iterator never ends; cap it with ``itertools.islice``.
    """
    env = as_environment(environment)
    yield node, env
    steps = 0
    while reducible(node):
        node, env = reduce(node, env)
        steps += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("step %d: %s | %s", steps, node, env)
        yield node, env


def run(node: Node, environment: Mapping[str, Value] | None = None) -> State:
    """Reduce until ``reducible`` fails; return the final node and environment."""
    env = as_environment(environment)
    state = (node, env)
    for state in trace(node, env):
        pass
    return state
