"""Extraction and conversion combinators.

All of these are total except get_right_or_fail / get_left_or_fail, which raise
LogicError when handed the other variant. Those two are for call sites that
already know which variant they hold.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from ..foundation.config import get_settings
from ..foundation.errors import LogicError, Variant
from ..foundation.logging import get_logger
from .either import Either

E = TypeVar("E")
T = TypeVar("T")
F = TypeVar("F")

logger = get_logger("extract")


def map_left(f: Callable[[E], F]) -> Callable[[Either[E, T]], Either[F, T]]:
    """Curried map over the Left payload."""
    return lambda value: value.map_left(f)


def to_list(value: Either[E, T]) -> list[T]:
    """[x] for Right(x), [] for Left."""
    return value.to_list()


def default_to(fallback: T) -> Callable[[Either[E, T]], T]:
    """Curried default: ``default_to(0)(Left("e")) == 0``."""
    return lambda value: value.default_to(fallback)


def _fail(expected: Variant, payload: object) -> LogicError:
    settings = get_settings()
    error = LogicError.create(expected, payload, limit=settings.render_limit)
    if settings.log_failures:
        logger.error("unsafe extraction failed: %s", error.failure.message)
    return error


def get_right_or_fail(value: Either[E, T]) -> T:
    """Right payload, or raise LogicError naming the Left payload.

    Raises:
        LogicError: If value is a Left
    """
    if value.is_right():
        return value.value  # type: ignore[return-value]
    raise _fail("right", value.value)


def get_left_or_fail(value: Either[E, T]) -> E:
    """Left payload, or raise LogicError naming the Right payload.

    Raises:
        LogicError: If value is a Right
    """
    if value.is_left():
        return value.value  # type: ignore[return-value]
    raise _fail("left", value.value)
