"""Curried (pointfree) forms of the algebraic operators.

Each function takes its configuration first and returns a function of the
Either operand(s), so operators compose without a subject:

    parse_stripped = lambda e: chain(parse)(map_(str.strip)(e))

Multi-operand combinators (apply, lift2, lift3, apply_first, apply_second)
report the leftmost failure. alt / alt_lazy report the leftmost success.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from .either import Either, Right

E = TypeVar("E")
T = TypeVar("T")
R = TypeVar("R")
F = TypeVar("F")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")


# ─────────────────────────────────────────────────────────────────────────────
# Functor / Bifunctor
# ─────────────────────────────────────────────────────────────────────────────


def map_(f: Callable[[T], R]) -> Callable[[Either[E, T]], Either[E, R]]:
    """Functor map. Named with a trailing underscore to keep the builtin."""
    return lambda value: value.map(f)


def flap(func: Either[E, Callable[[T], R]]) -> Callable[[T], Either[E, R]]:
    """Apply a wrapped function to a plain value: ``flap(Right(f))(x) == Right(f(x))``."""
    return lambda value: func.map(lambda f: f(value))


def bimap(left_fn: Callable[[E], F]) -> Callable[[Callable[[T], R]], Callable[[Either[E, T]], Either[F, R]]]:
    """``bimap(on_left)(on_right)(either)``."""
    return lambda right_fn: lambda value: value.bimap(left_fn, right_fn)


# ─────────────────────────────────────────────────────────────────────────────
# Monad / Alternative / Extend
# ─────────────────────────────────────────────────────────────────────────────


def chain(f: Callable[[T], Either[E, R]]) -> Callable[[Either[E, T]], Either[E, R]]:
    return lambda value: value.chain(f)


def alt(first: Either[E, T]) -> Callable[[Either[E, T]], Either[E, T]]:
    """``alt(a)(b)``: a if a is Right, else b. Both are already evaluated."""
    return lambda second: first.alt(second)


def alt_lazy(first: Either[E, T]) -> Callable[[Callable[[], Either[E, T]]], Either[E, T]]:
    """``alt_lazy(a)(thunk)``: thunk only runs when a is a Left."""
    return lambda second: first.alt_lazy(second)


def extend(f: Callable[[Either[E, T]], R]) -> Callable[[Either[E, T]], Either[E, R]]:
    return lambda value: value.extend(f)


# ─────────────────────────────────────────────────────────────────────────────
# Applicative
# ─────────────────────────────────────────────────────────────────────────────


def apply(func: Either[E, Callable[[T], R]]) -> Callable[[Either[E, T]], Either[E, R]]:
    """Apply a wrapped function to a wrapped value.

    A Left func wins over a Left value.

    Type signature: Either[E, T -> R] -> Either[E, T] -> Either[E, R]
    """
    return lambda value: func.chain(lambda f: value.map(f))


def lift2(f: Callable[[T1, T2], R]) -> Callable[[Either[E, T1], Either[E, T2]], Either[E, R]]:
    """Lift a two-argument function over Eithers.

    Example:
        >>> lift2(lambda a, b: a + b)(Right(1), Right(2))
        Right(3)
        >>> lift2(lambda a, b: a + b)(Left("a"), Left("b"))
        Left('a')
    """

    def lifted(first: Either[E, T1], second: Either[E, T2]) -> Either[E, R]:
        if first.is_left():
            return first  # type: ignore[return-value]
        if second.is_left():
            return second  # type: ignore[return-value]
        return Right(f(first.value, second.value))  # type: ignore[arg-type]

    return lifted


def lift3(f: Callable[[T1, T2, T3], R]) -> Callable[[Either[E, T1], Either[E, T2], Either[E, T3]], Either[E, R]]:
    """Three-argument lift2. The leftmost Left wins."""

    def lifted(first: Either[E, T1], second: Either[E, T2], third: Either[E, T3]) -> Either[E, R]:
        for operand in (first, second, third):
            if operand.is_left():
                return operand  # type: ignore[return-value]
        return Right(f(first.value, second.value, third.value))  # type: ignore[arg-type]

    return lifted


def apply_first(first: Either[E, T1]) -> Callable[[Either[E, T2]], Either[E, T1]]:
    """Keep first's payload once both succeed (``<*``)."""
    return lambda second: lift2(lambda a, _: a)(first, second)


def apply_second(first: Either[E, T1]) -> Callable[[Either[E, T2]], Either[E, T2]]:
    """Keep second's payload once both succeed (``*>``)."""
    return lambda second: lift2(lambda _, b: b)(first, second)
