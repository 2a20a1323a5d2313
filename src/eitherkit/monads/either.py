"""Either monad: a value that is exactly one of Left (failure) or Right (success).

Implements a discriminated union with the single-operand operators as methods:
- Dispatch: case_of
- Functor: map, map_left
- Bifunctor: bimap
- Monad: chain
- Alternative: alt, alt_lazy
- Extend: extend
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Literal,
    NoReturn,
    TypeVar,
    cast,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

E = TypeVar("E")  # Failure type
T = TypeVar("T")  # Success type
R = TypeVar("R")  # Mapped success / handler result type
F = TypeVar("F")  # Mapped failure type

Tag = Literal["left", "right"]


class Either(Generic[E, T]):
    """Discriminated union representing failure (Left) or success (Right).

    The variant is fixed at construction; every operation returns a new
    Either (or the same instance when nothing changes).

    Examples:
        >>> Right(5).map(lambda x: x * 2)
        Right(10)

        >>> Left("oops").map(lambda x: x * 2)
        Left('oops')

        >>> str(Right(5))
        '(right 5)'

        Pattern matching:
        >>> match Left("oops"):
        ...     case Either(tag="left", value=err):
        ...         print(err)
        oops
    """

    __slots__ = ("_value", "_is_right")
    __match_args__ = ("tag", "value")

    def __init__(self, value: E | T, is_right: bool) -> None:
        """Private constructor. Use Right() or Left() instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_right", is_right)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Either[E, T]], tuple[E | T, bool]]:
        """Rebuild through __init__ so copy, deepcopy and pickle bypass __setattr__."""
        return (Either, (self._value, self._is_right))

    # ─────────────────────────────────────────────────────────────────
    # Variant Inspection
    # ─────────────────────────────────────────────────────────────────

    def is_right(self) -> bool:
        """Check if Either is the Right variant."""
        return self._is_right

    def is_left(self) -> bool:
        """Check if Either is the Left variant."""
        return not self._is_right

    @property
    def tag(self) -> Tag:
        return "right" if self._is_right else "left"

    @property
    def value(self) -> E | T:
        """Raw payload of whichever variant is active."""
        return self._value

    # ─────────────────────────────────────────────────────────────────
    # Dispatch
    # ─────────────────────────────────────────────────────────────────

    def case_of(self, *, right: Callable[[T], R], left: Callable[[E], R]) -> R:
        """Apply the handler matching the active variant to its payload.

        Exactly one handler is called, exactly once.

        Example:
            >>> Right(42).case_of(right=lambda x: f"ok {x}", left=lambda e: f"failed {e}")
            'ok 42'
        """
        if self._is_right:
            return right(cast(T, self._value))
        return left(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Functor / Bifunctor
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], R]) -> Either[E, R]:
        """Map f over a Right payload; a Left is returned as is.

        Type signature: Either[E, T] -> (T -> R) -> Either[E, R]
        """
        return self.case_of(right=lambda x: Right(f(x)), left=lambda _: cast(Either[E, R], self))

    def map_left(self, f: Callable[[E], F]) -> Either[F, T]:
        """Map f over a Left payload; a Right is returned as is.

        Type signature: Either[E, T] -> (E -> F) -> Either[F, T]
        """
        return self.case_of(right=lambda _: cast(Either[F, T], self), left=lambda e: Left(f(e)))

    def bimap(self, left_fn: Callable[[E], F], right_fn: Callable[[T], R]) -> Either[F, R]:
        """Map whichever side is active. Exactly one of the functions runs.

        Type signature: Either[E, T] -> (E -> F, T -> R) -> Either[F, R]
        """
        return self.case_of(right=lambda x: Right(right_fn(x)), left=lambda e: Left(left_fn(e)))

    # ─────────────────────────────────────────────────────────────────
    # Monad / Alternative / Extend
    # ─────────────────────────────────────────────────────────────────

    def chain(self, f: Callable[[T], Either[E, R]]) -> Either[E, R]:
        """Monadic bind (>>=). f is not called on a Left.

        Type signature: Either[E, T] -> (T -> Either[E, R]) -> Either[E, R]

        Example:
            >>> def positive(n: int) -> Either[str, int]:
            ...     return Right(n) if n > 0 else Left("must be positive")
            >>> Right(3).chain(positive)
            Right(3)
            >>> Right(-1).chain(positive)
            Left('must be positive')
        """
        return self.case_of(right=f, left=lambda _: cast(Either[E, R], self))

    def alt(self, other: Either[E, T]) -> Either[E, T]:
        """self if Right, otherwise other (first success wins)."""
        return self if self._is_right else other

    def alt_lazy(self, other: Callable[[], Either[E, T]]) -> Either[E, T]:
        """Like alt, but other is only computed when self is a Left."""
        return self if self._is_right else other()

    def extend(self, f: Callable[[Either[E, T]], R]) -> Either[E, R]:
        """Right(f(self)) when Right; a Left is returned as is.

        Unlike map, f receives the whole Either rather than the payload.
        """
        return Right(f(self)) if self._is_right else cast(Either[E, R], self)

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_list(self) -> list[T]:
        """[value] for Right, [] for Left."""
        return self.case_of(right=lambda x: [x], left=lambda _: [])

    def default_to(self, fallback: T) -> T:
        """Right payload, or fallback for a Left."""
        return self.case_of(right=lambda x: x, left=lambda _: fallback)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        variant = "Right" if self._is_right else "Left"
        return f"{variant}({self._value!r})"

    def __str__(self) -> str:
        """Diagnostic rendering, e.g. ``(right 5)`` or ``(left 'oops')``."""
        return f"({self.tag} {self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Either):
            return NotImplemented
        return self._is_right == other._is_right and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_right, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the Right payload (zero or one element)."""
        if self._is_right:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Right(value: T) -> Either[Any, T]:  # noqa: N802
    """Construct the Right variant (success).

    Type signature: T -> Either[E, T]
    """
    return Either(value, is_right=True)


def Left(value: E) -> Either[E, Any]:  # noqa: N802
    """Construct the Left variant (failure).

    Type signature: E -> Either[E, T]
    """
    return Either(value, is_right=False)


# Applicative pure/unit
of = Right


# ═════════════════════════════════════════════════════════════════════════════
# Function Forms
# ═════════════════════════════════════════════════════════════════════════════


def is_right(value: Either[E, T]) -> bool:
    return value.is_right()


def is_left(value: Either[E, T]) -> bool:
    return value.is_left()


def case_of(*, right: Callable[[T], R], left: Callable[[E], R]) -> Callable[[Either[E, T]], R]:
    """Curried dispatch: ``case_of(right=f, left=g)(either)``."""
    return lambda value: value.case_of(right=right, left=left)
