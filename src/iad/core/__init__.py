# src/iad/core/__init__.py
"""Public facade for iad.core: re-export the transformations from CamelCase modules.

Keeps the CamelCase file names (FieldTransformer.py, RomanNumerals.py, ...),
but provides flat imports for convenience and stability.
"""

# Re-export classes/symbols from CamelCase modules
from .EditResult import (  # noqa: F401
    AlreadyLinkedError,
    AlreadyPunctuatedError,
    EditResult,
    FieldCountError,
    InsufficientTokensError,
    NoSyntaxError,
    NothingToDoError,
    RangeExhaustedError,
    SpanEdit,
    TransformError,
)
from .FieldTransformer import (  # noqa: F401
    FieldSpan,
    copy_field,
    field_count,
    field_span,
    locate_field,
    locate_name,
    swap_name,
)
from .LinkMarkup import insert_link, link_markup  # noqa: F401
from .RomanNumerals import step_numeral  # noqa: F401
from .TextSurface import LineBuffer, TextSurface  # noqa: F401


__all__ = [
    "EditResult",
    "SpanEdit",
    "TransformError",
    "NoSyntaxError",
    "FieldCountError",
    "AlreadyPunctuatedError",
    "InsufficientTokensError",
    "RangeExhaustedError",
    "NothingToDoError",
    "AlreadyLinkedError",
    "FieldSpan",
    "locate_field",
    "field_span",
    "field_count",
    "copy_field",
    "locate_name",
    "swap_name",
    "step_numeral",
    "insert_link",
    "link_markup",
    "TextSurface",
    "LineBuffer",
]
