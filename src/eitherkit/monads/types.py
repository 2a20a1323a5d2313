"""Failure reasons and shape aliases used by the lifters."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, TypeAlias, TypeVar

from .either import Either

E = TypeVar("E")


class TakeSingleError(Enum):
    """Why a sequence did not hold exactly one element."""

    EMPTY = "empty"
    MORE_THAN_ONE = "more_than_one"


class TakeFirstError(Enum):
    """Why a sequence had no first element."""

    EMPTY = "empty"


# Labeled record whose every field is independently wrapped in Either.
EitherProps: TypeAlias = Mapping[str, Either[E, Any]]
