"""Text and Markdown presentations of an aggregated plan."""

from .markup import MarkdownMarkup, PlainMarkup
from .renderer import NO_CHANGES_MESSAGE, PlanRenderer, RenderMode, render_no_changes

__all__ = [
    "MarkdownMarkup",
    "NO_CHANGES_MESSAGE",
    "PlainMarkup",
    "PlanRenderer",
    "RenderMode",
    "render_no_changes",
]
