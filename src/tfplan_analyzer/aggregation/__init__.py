"""Single-pass aggregation of a classified plan document."""

from .aggregator import (
    AggregateResult,
    aggregate,
    basic_action_summary,
    detail_action_summary,
    output_action_summary,
    type_summary,
)

__all__ = [
    "AggregateResult",
    "aggregate",
    "basic_action_summary",
    "detail_action_summary",
    "output_action_summary",
    "type_summary",
]
