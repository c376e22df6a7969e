"""Report rendering for the basic, short, detail and no-op presentations."""

from __future__ import annotations

from enum import Enum
from typing import List

from ..aggregation import (
    AggregateResult,
    basic_action_summary,
    detail_action_summary,
    output_action_summary,
    type_summary,
)
from ..aggregation.aggregator import OUTPUT_CHANGE_CATEGORIES
from ..classification import classify_output_symbol, classify_symbol
from ..models import ChangeCategory, ChangeSymbol, OutputSymbol, PlanDocument, ResourceChange
from .markup import Document, markup_for

NO_CHANGES_MESSAGE = "No changes detected"
NO_CHANGES_DETAIL = (
    "All resources and outputs are up-to-date and no actions need to be performed."
)
IMPORT_SUFFIX = " Import"
SHORT_LEGEND = (
    "`+` create , `~` update , `-` delete , `-/+` replace , "
    "`+/-` replace (create first) , `#` remove , `=` import(no change)"
)

DETAIL_CATEGORIES = (
    ChangeCategory.CREATE,
    ChangeCategory.UPDATE,
    ChangeCategory.UPDATE_IMPORT,
    ChangeCategory.DELETE,
    ChangeCategory.IMPORT_NO_CHANGE,
    ChangeCategory.REMOVE_FORGET,
    ChangeCategory.REPLACE,
    ChangeCategory.REPLACE_IMPORT,
)


class RenderMode(str, Enum):
    """Presentations supported by :class:`PlanRenderer`."""

    BASIC = "basic"
    SHORT = "short"
    DETAIL = "detail"
    NOOP = "no-op"


def render_no_changes(markdown: bool = False) -> str:
    """Render the notice shown when the plan has nothing to apply."""

    doc = Document(markup_for(markdown))
    doc.heading(1, "No Changes")
    if markdown:
        doc.paragraph(f"✅ **{NO_CHANGES_MESSAGE}, nothing to apply.**")
        doc.paragraph(NO_CHANGES_DETAIL)
    else:
        doc.paragraph(f"{NO_CHANGES_MESSAGE}, nothing to apply.")
        doc.paragraph(NO_CHANGES_DETAIL)
    return doc.render()


def _listing_label(change: ResourceChange) -> str:
    return change.address + (IMPORT_SUFFIX if change.importing else "")


class PlanRenderer:
    """Render an aggregated plan in one of the :class:`RenderMode` presentations.

    The renderer only reads ``result``; listings come from the per-category
    tuples collected during aggregation. ``document`` supplies the plan-level
    facts and the original ordering used by the short listing.
    """

    def __init__(
        self,
        document: PlanDocument,
        result: AggregateResult,
        *,
        markdown: bool = False,
        source: str | None = None,
        expanded: bool = False,
    ) -> None:
        self.document = document
        self.result = result
        self.markdown = markdown
        self.source = source
        self.expanded = expanded

    def render(self, mode: RenderMode | str = RenderMode.BASIC) -> str:
        """Return the report text for ``mode``."""

        mode = RenderMode(mode)
        if mode is RenderMode.NOOP:
            return self.render_no_op()
        if not self.result.has_any_changes:
            return render_no_changes(self.markdown)
        if mode is RenderMode.SHORT:
            return self.render_short()
        if mode is RenderMode.DETAIL:
            return self.render_detail()
        return self.render_basic()

    # ------------------------------------------------------------------
    def render_basic(self) -> str:
        doc = self._document()
        if self.markdown:
            doc.heading(1, "Terraform Plan Analysis")
            if self.source:
                doc.paragraph(f"**File:** `{self.source}`")
        else:
            title = "Terraform Plan Analysis"
            doc.heading(1, f"{title} for: {self.source}" if self.source else title)

        doc.heading(2, "Change Actions Summary")
        for verb, count in basic_action_summary(self.result):
            doc.stat(verb, count)
        self._importing_stat(doc)

        doc.heading(2, "Resource Types")
        for resource_type, count in type_summary(self.result):
            doc.stat(resource_type, count)

        doc.heading(2, "Plan Summary")
        doc.stat("Terraform Version", self.document.terraform_version)
        doc.stat("Total Resource Changes", self.result.total_resource_changes)
        doc.stat("Applyable", str(self.document.applyable).lower())
        return doc.render()

    def render_short(self) -> str:
        lines = self.short_lines()
        if not self.markdown:
            return "\n".join(lines)

        if self.expanded:
            opening = "<details open><summary>Short Terraform Plan Output</summary>"
        else:
            opening = "<details><summary>Short Result (Click me)</summary>"
        return "\n".join([opening, "", SHORT_LEGEND, "```hcl", *lines, "```", "</details>"])

    def short_lines(self) -> List[str]:
        """One diff-style line per resource and output change that has an effect."""

        unclassified = {
            change.address
            for change in self.result.resources_by_category[ChangeCategory.UNCLASSIFIED]
        }
        lines: List[str] = []
        for change in self.document.resource_changes:
            if change.address in unclassified:
                continue
            symbol = classify_symbol(change)
            if symbol is ChangeSymbol.SUPPRESSED:
                continue
            if symbol is ChangeSymbol.IMPORT_NO_CHANGE:
                lines.append(f"{symbol.value} {change.address}")
            else:
                lines.append(f"{symbol.value} {_listing_label(change)}")

        for output in self.document.output_changes.values():
            output_symbol = classify_output_symbol(output)
            if output_symbol is not OutputSymbol.SUPPRESSED:
                lines.append(f"{output_symbol.value} output.{output.name}")
        return lines

    def render_detail(self) -> str:
        doc = self._document()
        doc.heading(1, "Analyze Terraform Plan")
        doc.heading(2, "Resource Changes Detail")
        for category in DETAIL_CATEGORIES:
            changes = self.result.resources_by_category[category]
            if not changes:
                continue
            doc.heading(3, f"{category.label} Actions")
            for change in changes:
                doc.item(_listing_label(change))

        if self.result.has_output_changes:
            doc.heading(2, "Output Changes Detail")
            for output_category in OUTPUT_CHANGE_CATEGORIES:
                outputs = self.result.outputs_by_category[output_category]
                if not outputs:
                    continue
                doc.heading(3, f"OUTPUT {output_category.label} Actions")
                for output in outputs:
                    doc.item(output.name)

        doc.heading(2, "Summary")
        doc.heading(3, "Resource Changes Summary")
        for verb, count in detail_action_summary(self.result):
            doc.stat(verb, count)
        self._importing_stat(doc)

        if self.result.has_output_changes:
            doc.heading(3, "Output Changes Summary")
            for verb, count in output_action_summary(self.result):
                doc.stat(verb, count)
        return doc.render()

    def render_no_op(self) -> str:
        doc = self._document()
        doc.heading(1, "No-Op Resources")
        doc.paragraph("Resources with no changes:")
        changes = self.result.resources_by_category[ChangeCategory.NOOP]
        if changes:
            doc.heading(3, f"{ChangeCategory.NOOP.label} Actions")
            for change in changes:
                doc.item(change.address)
        return doc.render()

    # ------------------------------------------------------------------
    def _document(self) -> Document:
        return Document(markup_for(self.markdown))

    def _importing_stat(self, doc: Document) -> None:
        if self.result.importing_total > 0:
            doc.stat("importing", self.result.importing_total)
