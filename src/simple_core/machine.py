"""Machine — stateful driver that keeps its environment across runs."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from .big_step import evaluate
from .environment import Environment, as_environment
from .model import DoNothing, Node, is_statement
from .small_step import State, trace
from .values import Value

STRATEGIES = ("small", "big")


class Machine:
    """Run SIMPLE programs against an environment that persists between calls.

    Usage::

        vm = Machine({"x": Number(20)})
        vm.run(Assign("x", Number(40)))   # → DoNothing()
        vm.run(Add(Variable("x"), Number(2)))   # → Number(42)

        vm.environment   # {x: 40}
        vm.steps         # reductions taken by the last small-step run
        vm.reset()       # back to {x: 20}
    """

    def __init__(
        self,
        environment: Mapping[str, Value] | None = None,
        strategy: str = "small",
    ) -> None:
        if strategy not in STRATEGIES:
            raise ValueError(f"unknown strategy {strategy!r}; expected one of {STRATEGIES}")
        self.strategy = strategy
        self._initial = as_environment(environment)
        self.environment: Environment = self._initial
        self.steps = 0

    def run(self, node: Node) -> Node:
        """Evaluate *node* and keep the resulting environment.

        Returns the terminal node: a value for expressions, ``DoNothing()``
        for statements, under either strategy.
        """
        if self.strategy == "big":
            result = evaluate(node, self.environment)
            self.steps = 0
            if is_statement(node):
                self.environment = result
                return DoNothing()
            return result

        # Commit only once the run reaches normal form; a failure keeps the old state.
        state: State = (node, self.environment)
        steps = 0
        for steps, state in enumerate(trace(node, self.environment)):
            pass
        self.environment = state[1]
        self.steps = steps
        return state[0]

    def trace(self, node: Node) -> Iterator[State]:
        """Yield small-step states, updating the machine as each one arrives.

        Unlike ``run``, the environment and step count follow the trace live,
        so stopping early or hitting an error leaves the last state reached.
        """
        if self.strategy != "small":
            raise ValueError("trace() needs the small-step strategy")
        self.steps = 0
        for index, state in enumerate(trace(node, self.environment)):
            self.steps = index
            self.environment = state[1]
            yield state

    def reset(self) -> None:
        """Restore the environment the machine was created with."""
        self.environment = self._initial
        self.steps = 0
