"""Tests for record lifters (fail-fast vs fail-slow)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from pydantic import BaseModel

from eitherkit import Left, Right, lift_props, lift_props_collect


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class Pair(NamedTuple):
    first: str
    second: str


class User(BaseModel):
    name: str
    age: int


def test_lift_props_all_right() -> None:
    assert lift_props({"a": Right(1), "b": Right("two")}) == Right({"a": 1, "b": "two"})


def test_lift_props_first_failure_only() -> None:
    fields = {"a": Left("x"), "b": Left("y"), "c": Right(1)}

    assert lift_props(fields) == Left("x")


def test_lift_props_collect_accumulates_in_field_order() -> None:
    fields = {"a": Left("x"), "b": Left("y"), "c": Right(1)}

    assert lift_props_collect(fields) == Left(["x", "y"])
    assert lift_props_collect({"c": Right(1), "b": Left("y"), "a": Left("x")}) == Left(["y", "x"])


def test_lift_props_collect_all_right() -> None:
    assert lift_props_collect({"a": Right(1), "b": Right(2)}) == Right({"a": 1, "b": 2})


def test_empty_record() -> None:
    assert lift_props({}) == Right({})
    assert lift_props_collect({}) == Right({})


def test_inputs_are_not_mutated() -> None:
    fields = {"a": Right(1), "b": Right(2)}
    result = lift_props(fields)

    assert fields == {"a": Right(1), "b": Right(2)}
    assert result.value is not fields


# ═════════════════════════════════════════════════════════════════════════════
# Typed Records
# ═════════════════════════════════════════════════════════════════════════════


def test_into_dataclass() -> None:
    assert lift_props({"x": Right(1), "y": Right(2)}, into=Point) == Right(Point(1, 2))
    assert lift_props_collect({"x": Right(1), "y": Right(2)}, into=Point) == Right(Point(1, 2))


def test_into_named_tuple() -> None:
    assert lift_props({"first": Right("a"), "second": Right("b")}, into=Pair) == Right(Pair("a", "b"))


def test_into_pydantic_model() -> None:
    result = lift_props({"name": Right("ada"), "age": Right(36)}, into=User)

    assert result == Right(User(name="ada", age=36))


def test_into_not_called_on_failure(counter) -> None:
    build = counter()

    assert lift_props({"x": Left("bad"), "y": Right(2)}, into=build) == Left("bad")
    assert lift_props_collect({"x": Right(1), "y": Left("bad")}, into=build) == Left(["bad"])
    assert build.calls == []
