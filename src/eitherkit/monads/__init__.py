"""Either type and its combinators.

Example:
    >>> from eitherkit.monads import Either, Left, Right, chain, map_
    >>>
    >>> def divide(a: int, b: int) -> Either[str, float]:
    ...     if b == 0:
    ...         return Left("division by zero")
    ...     return Right(a / b)
    >>>
    >>> chain(lambda x: Right(x + 1))(map_(lambda x: x * 2)(divide(10, 2)))
    Right(11.0)
"""

from .either import Either, Left, Right, case_of, is_left, is_right, of
from .extract import default_to, get_left_or_fail, get_right_or_fail, map_left, to_list
from .lifters import collect_all, first_from_list, sequence, single_from_list, traverse
from .pointfree import (
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
)
from .records import lift_props, lift_props_collect
from .types import EitherProps, TakeFirstError, TakeSingleError

__all__ = [
    # Core
    "Either", "Left", "Right", "of", "is_left", "is_right", "case_of",
    # Extraction & conversion
    "map_left", "to_list", "default_to", "get_right_or_fail", "get_left_or_fail",
    # Collection lifters
    "single_from_list", "first_from_list", "sequence", "traverse", "collect_all",
    "TakeSingleError", "TakeFirstError",
    # Operators
    "map_", "flap", "bimap", "chain", "alt", "alt_lazy", "extend",
    "apply", "lift2", "lift3", "apply_first", "apply_second",
    # Records
    "EitherProps", "lift_props", "lift_props_collect",
]
