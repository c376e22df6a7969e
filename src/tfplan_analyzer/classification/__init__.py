"""Rule tables mapping plan changes onto categories and diff symbols."""

from .classifier import (
    REPLACE_REASON,
    classify,
    classify_output,
    classify_output_symbol,
    classify_symbol,
)

__all__ = [
    "REPLACE_REASON",
    "classify",
    "classify_output",
    "classify_output_symbol",
    "classify_symbol",
]
