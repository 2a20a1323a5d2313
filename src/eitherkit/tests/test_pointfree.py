"""Tests for the curried operator suite.

Validates:
- Functor / bifunctor / monad behaviour of the curried forms
- Short-circuit order of the applicative combinators
- Laziness of alt_lazy
"""

from __future__ import annotations

from typing import Callable

from eitherkit import (
    Either,
    Left,
    Right,
    alt,
    alt_lazy,
    apply,
    apply_first,
    apply_second,
    bimap,
    chain,
    extend,
    flap,
    lift2,
    lift3,
    map_,
    of,
)


def add(a: int, b: int) -> int:
    return a + b


# ═════════════════════════════════════════════════════════════════════════════
# Functor / Bifunctor / Monad
# ═════════════════════════════════════════════════════════════════════════════


def test_map_laws() -> None:
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 3

    assert map_(lambda x: x)(Right(2)) == Right(2)
    assert map_(g)(map_(f)(Right(2))) == map_(lambda x: g(f(x)))(Right(2))
    assert map_(f)(Left("x")) == Left("x")


def test_flap() -> None:
    assert flap(Right(lambda x: x * 2))(4) == Right(8)
    assert flap(Left("no function"))(4) == Left("no function")


def test_bimap_invokes_one_side(counter) -> None:
    on_left, on_right = counter("L"), counter("R")

    assert bimap(on_left)(on_right)(Right(1)) == Right("R")
    assert bimap(on_left)(on_right)(Left(0)) == Left("L")
    assert on_left.calls == [0]
    assert on_right.calls == [1]


def test_chain_identities() -> None:
    f: Callable[[int], Either[str, int]] = lambda x: Right(x - 1) if x > 0 else Left("not positive")

    assert chain(f)(of(3)) == f(3)
    assert chain(f)(of(0)) == f(0)
    assert chain(of)(Right(9)) == Right(9)
    assert chain(of)(Left("e")) == Left("e")


def test_chain_short_circuits_on_left(counter) -> None:
    f = counter(Right(1))

    assert chain(f)(Left("stop")) == Left("stop")
    assert f.calls == []


# ═════════════════════════════════════════════════════════════════════════════
# Alternative / Extend
# ═════════════════════════════════════════════════════════════════════════════


def test_alt_first_success_wins() -> None:
    assert alt(Right(1))(Right(2)) == Right(1)
    assert alt(Left("a"))(Right(2)) == Right(2)
    assert alt(Left("a"))(Left("b")) == Left("b")


def test_alt_lazy_skips_thunk_on_right(counter) -> None:
    thunk = counter(Right(2))

    assert alt_lazy(Right(1))(thunk) == Right(1)
    assert thunk.calls == []


def test_alt_lazy_runs_thunk_on_left() -> None:
    calls: list[int] = []

    def fallback() -> Either[str, int]:
        calls.append(1)
        return Right(2)

    assert alt_lazy(Left("a"))(fallback) == Right(2)
    assert calls == [1]


def test_extend() -> None:
    assert extend(lambda e: e.is_right())(Right(0)) == Right(True)
    assert extend(lambda e: e.is_right())(Left("e")) == Left("e")


# ═════════════════════════════════════════════════════════════════════════════
# Applicative
# ═════════════════════════════════════════════════════════════════════════════


def test_apply() -> None:
    double = Right(lambda x: x * 2)

    assert apply(double)(Right(5)) == Right(10)
    assert apply(double)(Left("bad value")) == Left("bad value")
    assert apply(Left("bad func"))(Right(5)) == Left("bad func")
    assert apply(Left("bad func"))(Left("bad value")) == Left("bad func")


def test_lift2_short_circuit_order() -> None:
    lifted = lift2(add)

    assert lifted(Right(1), Right(2)) == Right(3)
    assert lifted(Left("a"), Right(2)) == Left("a")
    assert lifted(Left("a"), Left("b")) == Left("a")
    assert lifted(Right(1), Left("b")) == Left("b")


def test_lift2_does_not_call_function_on_failure(counter) -> None:
    f = counter()

    lift2(f)(Right(1), Left("b"))
    assert f.calls == []


def test_lift3() -> None:
    lifted = lift3(lambda a, b, c: a + b + c)

    assert lifted(Right(1), Right(2), Right(3)) == Right(6)
    assert lifted(Left("a"), Left("b"), Left("c")) == Left("a")
    assert lifted(Right(1), Left("b"), Left("c")) == Left("b")
    assert lifted(Right(1), Right(2), Left("c")) == Left("c")


def test_apply_first_and_second() -> None:
    assert apply_first(Right(1))(Right("x")) == Right(1)
    assert apply_second(Right(1))(Right("x")) == Right("x")

    assert apply_first(Left("a"))(Left("b")) == Left("a")
    assert apply_second(Left("a"))(Left("b")) == Left("a")
    assert apply_first(Right(1))(Left("b")) == Left("b")
    assert apply_second(Right(1))(Left("b")) == Left("b")
