"""Tests for simple_core.model."""

import dataclasses

import pytest

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
    is_expression,
    is_statement,
)
from simple_core.values import Boolean, Number


class TestConstruction:
    def test_binary_accessors(self):
        node = Add(Number(1), Variable("x"))
        assert node.left == Number(1)
        assert node.right == Variable("x")

    def test_nodes_are_frozen(self):
        node = Multiply(Number(1), Number(2))
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.left = Number(5)

    def test_do_nothing_instances_are_equal(self):
        assert DoNothing() == DoNothing()

    def test_no_validation_at_construction(self):
        node = Add(Boolean(True), Boolean(False))
        assert node.left == Boolean(True)

    def test_while_accessors(self):
        body = Assign("x", Number(1))
        node = While(Boolean(False), body)
        assert node.cond == Boolean(False)
        assert node.body is body


class TestAssignTarget:
    def test_string_target(self):
        assert Assign("x", Number(1)).name == "x"

    def test_variable_target(self):
        assert Assign(Variable("x"), Number(1)).name == "x"


class TestStr:
    def test_arithmetic(self):
        node = Add(Number(1), Multiply(Number(2), Number(3)))
        assert str(node) == "(1 + (2 * 3))"

    def test_comparisons(self):
        assert str(LessThan(Variable("x"), Number(5))) == "x < 5"
        assert str(MoreThan(Variable("x"), Number(5))) == "x > 5"
        assert str(Equal(Variable("x"), Boolean(True))) == "x == true"

    def test_statements(self):
        assert str(DoNothing()) == "do nothing"
        assert str(Assign(Variable("x"), Number(40))) == "x = 40"
        seq = Sequence(Assign("a", Number(1)), Assign("b", Number(2)))
        assert str(seq) == "a = 1; b = 2"

    def test_if(self):
        node = If(Boolean(True), DoNothing(), Assign("x", Number(1)))
        assert str(node) == "if (true) { do nothing } else { x = 1 }"

    def test_while(self):
        node = While(
            LessThan(Variable("x"), Number(5)),
            Assign("x", Add(Variable("x"), Number(1))),
        )
        assert str(node) == "while (x < 5) { x = (x + 1) }"


class TestClassification:
    def test_expressions(self):
        for node in (Number(1), Boolean(True), Variable("x"), Equal(Number(1), Number(1))):
            assert is_expression(node)
            assert not is_statement(node)

    def test_statements(self):
        for node in (DoNothing(), Assign("x", Number(1)), While(Boolean(False), DoNothing())):
            assert is_statement(node)
            assert not is_expression(node)

    def test_foreign_objects(self):
        assert not is_expression(1)
        assert not is_statement("x")
