"""Record lifters: turn a mapping of Either fields into an Either of a record.

- lift_props: fail-fast, the first Left in field order is returned
- lift_props_collect: fail-slow, every Left payload is gathered in field order

Both build the success record with ``into(**fields)`` when ``into`` is given
(a dataclass, NamedTuple or pydantic model class), otherwise a plain dict.
The field mapping itself is untyped per field; pass ``into`` to give the
result a statically known record shape.

Example:
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Point:
    ...     x: int
    ...     y: int
    >>> lift_props({"x": Right(1), "y": Right(2)}, into=Point)
    Right(Point(x=1, y=2))
    >>> lift_props_collect({"x": Left("bad x"), "y": Left("bad y")}, into=Point)
    Left(['bad x', 'bad y'])
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar, overload

from .either import Either, Left, Right
from .types import EitherProps

E = TypeVar("E")
R = TypeVar("R")


@overload
def lift_props(fields: EitherProps[E], *, into: None = None) -> Either[E, dict[str, Any]]: ...
@overload
def lift_props(fields: EitherProps[E], *, into: Callable[..., R]) -> Either[E, R]: ...


def lift_props(fields: EitherProps[E], *, into: Callable[..., Any] | None = None) -> Either[E, Any]:
    """Unwrap every field, or return the first Left in field order."""
    values: dict[str, Any] = {}
    for name, field in fields.items():
        if field.is_left():
            return field
        values[name] = field.value
    return Right(into(**values) if into is not None else values)


@overload
def lift_props_collect(fields: EitherProps[E], *, into: None = None) -> Either[list[E], dict[str, Any]]: ...
@overload
def lift_props_collect(fields: EitherProps[E], *, into: Callable[..., R]) -> Either[list[E], R]: ...


def lift_props_collect(fields: EitherProps[E], *, into: Callable[..., Any] | None = None) -> Either[list[E], Any]:
    """Unwrap every field, or return all Left payloads in field order."""
    values: dict[str, Any] = {}
    errors: list[E] = []
    for name, field in fields.items():
        if field.is_left():
            errors.append(field.value)  # type: ignore[arg-type]
        elif not errors:
            values[name] = field.value
    if errors:
        return Left(errors)
    return Right(into(**values) if into is not None else values)
