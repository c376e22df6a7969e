"""Orchestration layer used by the CLI to analyze a plan document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .adapters import PlanLoader, PlanLoaderError
from .aggregation import AggregateResult, aggregate
from .budget import GITHUB_COMMENT_LIMIT, LimitCheck, check_limit, format_limit_warning
from .models import PlanDocument
from .normalization import PlanFormatError, PlanNormalizer
from .rendering import PlanRenderer, RenderMode

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AnalysisResult:
    """Result returned by :class:`PlanAnalysisService` runs."""

    report: str
    document: PlanDocument
    aggregate: AggregateResult
    limit_check: LimitCheck | None = None

    @property
    def warning(self) -> str:
        return format_limit_warning(self.limit_check) if self.limit_check else ""

    @property
    def output(self) -> str:
        """The report with the limit warning, if any, placed above it."""

        if self.warning:
            return f"{self.warning}\n\n{self.report}"
        return self.report


PlanLoaderFactory = Callable[[Path], PlanLoader]


class PlanAnalysisService:
    """High level service responsible for plan ingestion, aggregation and rendering."""

    def __init__(
        self,
        *,
        plan_loader_factory: PlanLoaderFactory | None = None,
        normalizer: PlanNormalizer | None = None,
    ) -> None:
        self._plan_loader_factory = plan_loader_factory or PlanLoader
        self._normalizer = normalizer or PlanNormalizer()

    # ------------------------------------------------------------------
    def analyze(
        self,
        plan_json_path: Path,
        *,
        mode: RenderMode | str = RenderMode.BASIC,
        markdown: bool = False,
        github_comment: bool = False,
        char_limit: int = GITHUB_COMMENT_LIMIT,
    ) -> AnalysisResult:
        """Load, classify and render the plan stored at ``plan_json_path``.

        ``github_comment`` implies Markdown output and measures the report
        against ``char_limit``.
        """

        loader = self._plan_loader_factory(plan_json_path)
        raw_plan = loader.load_plan()
        document = self._normalizer.normalize(raw_plan)
        result = aggregate(document)

        renderer = PlanRenderer(
            document,
            result,
            markdown=markdown or github_comment,
            source=str(plan_json_path),
            expanded=github_comment,
        )
        report = renderer.render(mode)
        logger.debug("Rendered %s report with %d characters", RenderMode(mode).value, len(report))

        limit_check = check_limit(report, char_limit) if github_comment else None
        return AnalysisResult(
            report=report,
            document=document,
            aggregate=result,
            limit_check=limit_check,
        )


__all__ = ["AnalysisResult", "PlanAnalysisService", "PlanFormatError", "PlanLoaderError"]
