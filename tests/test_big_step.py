"""Tests for simple_core.big_step."""

import logging

import pytest

from simple_core.big_step import evaluate
from simple_core.environment import Environment
from simple_core.errors import TypeMismatch, UnboundVariable, UnknownNode
from simple_core.model import (
    Add,
    Assign,
    DoNothing,
    Equal,
    If,
    LessThan,
    MoreThan,
    Multiply,
    Sequence,
    Variable,
    While,
)
from simple_core.values import Boolean, Number


class TestExpressions:
    def test_add(self):
        assert evaluate(Add(Number(1), Number(2)), {}) == Number(3)

    def test_multiply(self):
        assert evaluate(Multiply(Number(8), Number(2)), {}) == Number(16)

    def test_literals_are_identity(self):
        assert evaluate(Boolean(True), {"x": Number(20)}) == Boolean(True)

    def test_variable(self):
        assert evaluate(Add(Variable("x"), Number(8)), {"x": Number(20)}) == Number(28)

    def test_comparisons(self):
        assert evaluate(LessThan(Number(1), Number(2))) == Boolean(True)
        assert evaluate(MoreThan(Number(1), Number(2))) == Boolean(False)
        assert evaluate(Equal(Add(Number(1), Number(1)), Number(2))) == Boolean(True)

    def test_unbound_variable(self):
        with pytest.raises(UnboundVariable):
            evaluate(Add(Variable("x"), Number(1)), {})

    def test_type_mismatch(self):
        with pytest.raises(TypeMismatch):
            evaluate(Multiply(Boolean(True), Number(2)), {})

    def test_left_evaluated_before_right(self):
        # The left failure wins over the right one.
        with pytest.raises(UnboundVariable) as info:
            evaluate(Add(Variable("a"), Variable("b")), {})
        assert info.value.name == "a"

    def test_unknown_node(self):
        with pytest.raises(UnknownNode):
            evaluate(Add(Number(1), 2), {})


class TestStatements:
    def test_do_nothing(self):
        env = Environment({"x": Number(1)})
        assert evaluate(DoNothing(), env) is env

    def test_assign(self):
        env = Environment({"x": Number(20)})
        result = evaluate(Assign(Variable("x"), Number(100)), env)
        assert result == {"x": Number(100)}
        assert env == {"x": Number(20)}

    def test_returns_environment_for_plain_mapping(self):
        result = evaluate(Assign("x", Number(1)), {})
        assert isinstance(result, Environment)

    def test_sequence(self):
        node = Sequence(
            Assign("x", Number(100)),
            Assign("x", Multiply(Variable("x"), Number(5))),
        )
        assert evaluate(node, {"x": Number(20)}) == {"x": Number(500)}

    def test_if_alternative(self):
        node = If(
            LessThan(Variable("x"), Number(2)),
            Assign("x", Number(2)),
            Sequence(
                Assign("x", Add(Variable("x"), Number(2))),
                Assign("x", Multiply(Variable("x"), Number(10))),
            ),
        )
        assert evaluate(node, {"x": Number(3)}) == {"x": Number(50)}

    def test_if_consequence(self):
        node = If(Boolean(True), Assign("y", Number(1)), Assign("y", Number(2)))
        assert evaluate(node, {}) == {"y": Number(1)}

    def test_if_needs_boolean(self):
        with pytest.raises(TypeMismatch):
            evaluate(If(Number(0), DoNothing(), DoNothing()), {})

    def test_while_sum(self):
        node = While(
            LessThan(Variable("n"), Number(101)),
            Sequence(
                Assign("sum", Add(Variable("sum"), Variable("n"))),
                Assign("n", Add(Variable("n"), Number(1))),
            ),
        )
        result = evaluate(node, {"n": Number(1), "sum": Number(0)})
        assert result == {"n": Number(101), "sum": Number(5050)}

    def test_while_false(self):
        env = Environment({"x": Number(9)})
        assert evaluate(While(Boolean(False), Assign("x", Number(0))), env) is env

    def test_long_loop_does_not_grow_the_stack(self):
        node = While(
            LessThan(Variable("i"), Number(20000)),
            Assign("i", Add(Variable("i"), Number(1))),
        )
        assert evaluate(node, {"i": Number(0)}) == {"i": Number(20000)}

    def test_logs_iterations(self, caplog):
        node = While(LessThan(Variable("i"), Number(2)), Assign("i", Add(Variable("i"), Number(1))))
        with caplog.at_level(logging.DEBUG, logger="simple_core.big_step"):
            evaluate(node, {"i": Number(0)})
        assert "iteration 2" in caplog.text
