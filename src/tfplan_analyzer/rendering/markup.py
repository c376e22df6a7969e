"""Line builders for the plain text and Markdown report flavors."""

from __future__ import annotations

from typing import List


class PlainMarkup:
    """Plain text: headings underlined with a rule as long as the heading."""

    _RULES = {1: "=", 2: "-", 3: "-"}

    def heading(self, level: int, text: str) -> List[str]:
        return [text, self._RULES[level] * len(text)]

    def item(self, text: str) -> str:
        return f"  - {text}"

    def stat(self, label: str, value: object) -> str:
        return f"{label}: {value}"

    def paragraph(self, text: str) -> List[str]:
        return [text]


class MarkdownMarkup:
    """Markdown: ``#`` headings and bullet lists."""

    def heading(self, level: int, text: str) -> List[str]:
        return [f"{'#' * level} {text}", ""]

    def item(self, text: str) -> str:
        return f"- {text}"

    def stat(self, label: str, value: object) -> str:
        return f"- **{label}**: {value}"

    def paragraph(self, text: str) -> List[str]:
        return [text, ""]


Markup = PlainMarkup | MarkdownMarkup


class Document:
    """Accumulates report lines, separating sections with a blank line."""

    def __init__(self, markup: Markup) -> None:
        self.markup = markup
        self.lines: List[str] = []

    def heading(self, level: int, text: str) -> None:
        self._separate()
        self.lines.extend(self.markup.heading(level, text))

    def paragraph(self, text: str) -> None:
        self.lines.extend(self.markup.paragraph(text))

    def item(self, text: str) -> None:
        self.lines.append(self.markup.item(text))

    def stat(self, label: str, value: object) -> None:
        self.lines.append(self.markup.stat(label, value))

    def render(self) -> str:
        lines = list(self.lines)
        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines)

    def _separate(self) -> None:
        if self.lines and self.lines[-1]:
            self.lines.append("")


def markup_for(markdown: bool) -> Markup:
    return MarkdownMarkup() if markdown else PlainMarkup()
