"""Lift plain collections into Either.

- single_from_list / first_from_list: decide by cardinality
- sequence / traverse: many Eithers into one, fail-fast
- collect_all: many Eithers into one, accumulating every failure
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

from .either import Either, Left, Right
from .types import TakeFirstError, TakeSingleError

E = TypeVar("E")
T = TypeVar("T")
R = TypeVar("R")


def single_from_list(items: Sequence[T]) -> Either[TakeSingleError, T]:
    """Right(only element) when there is exactly one element.

    Example:
        >>> single_from_list([7])
        Right(7)
        >>> single_from_list([1, 2])
        Left(<TakeSingleError.MORE_THAN_ONE: 'more_than_one'>)
    """
    match len(items):
        case 0:
            return Left(TakeSingleError.EMPTY)
        case 1:
            return Right(items[0])
        case _:
            return Left(TakeSingleError.MORE_THAN_ONE)


def first_from_list(items: Sequence[T]) -> Either[TakeFirstError, T]:
    """Right(first element), or Left(EMPTY) for an empty sequence."""
    return Right(items[0]) if len(items) > 0 else Left(TakeFirstError.EMPTY)


def sequence(items: Iterable[Either[E, T]]) -> Either[E, list[T]]:
    """Convert Eithers into an Either of list, failing on the first Left.

    Type signature: [Either[E, T]] -> Either[E, [T]]

    Example:
        >>> sequence([Right(1), Right(2)])
        Right([1, 2])
        >>> sequence([Right(1), Left("a"), Left("b")])
        Left('a')
    """
    values: list[T] = []
    for item in items:
        if item.is_left():
            return item
        values.append(item.value)  # type: ignore[arg-type]
    return Right(values)


def traverse(f: Callable[[T], Either[E, R]]) -> Callable[[Iterable[T]], Either[E, list[R]]]:
    """Map f over items and sequence the results.

    f is not called again after it first returns a Left.

    Type signature: (T -> Either[E, R]) -> [T] -> Either[E, [R]]
    """
    return lambda items: sequence(f(item) for item in items)


def collect_all(items: Iterable[Either[E, T]]) -> Either[list[E], list[T]]:
    """Like sequence, but collects every Left payload instead of stopping.

    Example:
        >>> collect_all([Right(1), Left("e1"), Right(3), Left("e2")])
        Left(['e1', 'e2'])
    """
    values: list[T] = []
    errors: list[E] = []
    for item in items:
        item.case_of(right=values.append, left=errors.append)
    return Right(values) if not errors else Left(errors)
