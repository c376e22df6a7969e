from __future__ import annotations

from pathlib import Path
from typing import Any

from tfplan_analyzer.models import ChangeCategory
from tfplan_analyzer.rendering import RenderMode
from tfplan_analyzer.service import AnalysisResult, PlanAnalysisService


class DummyPlanLoader:
    def __init__(self, plan_json_path: Path, plan: dict[str, Any] | None = None) -> None:
        self.plan_json_path = plan_json_path
        self.plan = plan

    def load_plan(self) -> dict[str, Any]:
        return self.plan or {
            "terraform_version": "1.7.5",
            "applyable": True,
            "resource_changes": [
                {
                    "address": "aws_s3_bucket.example",
                    "type": "aws_s3_bucket",
                    "change": {"actions": ["create"]},
                }
            ],
        }


def test_service_runs_pipeline() -> None:
    service = PlanAnalysisService(plan_loader_factory=DummyPlanLoader)

    result = service.analyze(Path("plan.json"), mode=RenderMode.SHORT)

    assert isinstance(result, AnalysisResult)
    assert result.report == "+ aws_s3_bucket.example"
    assert result.aggregate.resource_counts[ChangeCategory.CREATE] == 1
    assert result.limit_check is None
    assert result.output == result.report


def test_github_comment_implies_markdown_and_checks_limit() -> None:
    service = PlanAnalysisService(plan_loader_factory=DummyPlanLoader)

    result = service.analyze(Path("plan.json"), mode="short", github_comment=True)

    assert result.report.startswith("<details open>")
    assert result.limit_check is not None
    assert not result.limit_check.exceeded


def test_oversized_report_keeps_full_body() -> None:
    changes = [
        {
            "address": f"aws_s3_bucket.bucket_{index:05d}",
            "type": "aws_s3_bucket",
            "change": {"actions": ["create"]},
        }
        for index in range(3000)
    ]

    def factory(path: Path) -> DummyPlanLoader:
        return DummyPlanLoader(path, {"resource_changes": changes})

    service = PlanAnalysisService(plan_loader_factory=factory)

    result = service.analyze(
        Path("plan.json"), mode=RenderMode.SHORT, github_comment=True, char_limit=1000
    )

    assert result.limit_check is not None
    assert result.limit_check.exceeded
    assert result.limit_check.length == len(result.report)
    assert result.output.startswith(result.warning)
    assert result.output.endswith(result.report)
    assert "aws_s3_bucket.bucket_02999" in result.output
