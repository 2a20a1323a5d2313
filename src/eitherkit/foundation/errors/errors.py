"""Programmer-error signal raised by unsafe extraction.

Representable failures are always returned as Left values. LogicError exists
only for call sites that asserted a variant and were wrong.
"""

from __future__ import annotations

from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field

Variant = Literal["right", "left"]


def render_payload(value: object, limit: int) -> str:
    """repr() of value, truncated to limit characters."""
    text = repr(value)
    if len(text) <= limit:
        return text
    if limit < 3:
        return text[:limit]
    return f"{text[: limit - 3]}..."


class ExtractionFailure(BaseModel):
    """Structured description of a failed unsafe extraction."""

    model_config = ConfigDict(frozen=True)

    expected: Variant
    actual: Variant
    payload: str = Field(description="Rendered payload of the unexpected variant")

    @computed_field
    @property
    def message(self) -> str:
        return f"Tried to get {self.expected} out of a {self.actual}: {self.payload}"


class LogicError(Exception):
    """Raised when get_right_or_fail / get_left_or_fail meet the other variant."""

    __slots__ = ("failure",)

    def __init__(self, failure: ExtractionFailure) -> None:
        self.failure = failure
        super().__init__(failure.message)

    def __reduce__(self) -> tuple[type[LogicError], tuple[ExtractionFailure]]:
        return (type(self), (self.failure,))

    @classmethod
    def create(cls, expected: Variant, value: object, *, limit: int) -> Self:
        """Build from the unexpected payload, rendering it within limit characters."""
        actual: Variant = "left" if expected == "right" else "right"
        return cls(ExtractionFailure(expected=expected, actual=actual, payload=render_payload(value, limit)))
