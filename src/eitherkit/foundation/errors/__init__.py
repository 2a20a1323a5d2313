"""Error types.

- LogicError: raised only by unsafe extraction on the wrong variant
- ExtractionFailure: pydantic model carried by LogicError
"""

from .errors import ExtractionFailure, LogicError, Variant, render_payload

__all__ = ["ExtractionFailure", "LogicError", "Variant", "render_payload"]
