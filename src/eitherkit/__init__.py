"""eitherkit: a Left/Right result type with pure, composable combinators.

Failures are values. Only get_right_or_fail / get_left_or_fail raise, and
only when the caller was wrong about which variant it holds.

Quick Start:
    >>> from eitherkit import Left, Right, lift_props_collect, map_
    >>> map_(lambda x: x + 1)(Right(1))
    Right(2)
    >>> lift_props_collect({"a": Left("x"), "b": Left("y"), "c": Right(1)})
    Left(['x', 'y'])
"""

from .foundation import (
    EitherkitSettings,
    ExtractionFailure,
    LogicError,
    clear_settings_cache,
    configure_logging,
    get_settings,
)
from .monads import (
    Either,
    EitherProps,
    Left,
    Right,
    TakeFirstError,
    TakeSingleError,
    alt,
    alt_lazy,
    apply,
    apply_first,
    apply_second,
    bimap,
    case_of,
    chain,
    collect_all,
    default_to,
    extend,
    first_from_list,
    flap,
    get_left_or_fail,
    get_right_or_fail,
    is_left,
    is_right,
    lift2,
    lift3,
    lift_props,
    lift_props_collect,
    map_,
    map_left,
    of,
    sequence,
    single_from_list,
    to_list,
    traverse,
)

__version__ = "0.1.0"

__all__ = [
    "Either", "Left", "Right", "of", "is_left", "is_right", "case_of",
    "map_left", "to_list", "default_to", "get_right_or_fail", "get_left_or_fail",
    "single_from_list", "first_from_list", "sequence", "traverse", "collect_all",
    "TakeSingleError", "TakeFirstError",
    "map_", "flap", "bimap", "chain", "alt", "alt_lazy", "extend",
    "apply", "lift2", "lift3", "apply_first", "apply_second",
    "EitherProps", "lift_props", "lift_props_collect",
    "LogicError", "ExtractionFailure",
    "EitherkitSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
