from __future__ import annotations

import json
from pathlib import Path

import pytest

from tfplan_analyzer.aggregation import (
    aggregate,
    basic_action_summary,
    detail_action_summary,
    output_action_summary,
    type_summary,
)
from tfplan_analyzer.models import (
    ChangeCategory,
    OutputCategory,
    OutputChange,
    PlanDocument,
    ResourceChange,
)
from tfplan_analyzer.normalization import PlanNormalizer

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def load_document(name: str) -> PlanDocument:
    raw = json.loads((FIXTURES / name).read_text(encoding="utf-8"))
    return PlanNormalizer().normalize(raw)


def test_every_category_counted_once() -> None:
    result = aggregate(load_document("plan-mixed.json"))

    assert set(result.resource_counts) == set(ChangeCategory)
    for category in ChangeCategory:
        expected = 0 if category is ChangeCategory.UNCLASSIFIED else 1
        assert result.resource_counts[category] == expected
    assert sum(result.resource_counts.values()) == result.total_resource_changes == 9


def test_listings_preserve_document_order() -> None:
    result = aggregate(load_document("plan-mixed.json"))

    replaced = result.resources_by_category[ChangeCategory.REPLACE]
    assert [change.address for change in replaced] == ["aws_instance.web"]
    assert [output.name for output in result.outputs_by_category[OutputCategory.CREATE]] == [
        "bucket_arn"
    ]


def test_importing_total_spans_categories() -> None:
    result = aggregate(load_document("plan-mixed.json"))

    assert result.importing_total == 3


def test_output_counts() -> None:
    result = aggregate(load_document("plan-mixed.json"))

    assert result.output_counts == {
        OutputCategory.CREATE: 1,
        OutputCategory.UPDATE: 1,
        OutputCategory.DELETE: 1,
        OutputCategory.NOOP: 1,
    }
    assert result.has_output_changes


def test_type_histogram_is_sorted_and_complete() -> None:
    result = aggregate(load_document("plan-mixed.json"))

    summary = type_summary(result)

    assert [name for name, _ in summary] == sorted(name for name, _ in summary)
    assert dict(summary)["aws_instance"] == 2
    assert sum(count for _, count in summary) == result.total_resource_changes


def test_basic_summary_rank_order() -> None:
    result = aggregate(load_document("plan-mixed.json"))

    assert basic_action_summary(result) == [
        ("create", 3),
        ("update", 2),
        ("delete", 3),
        ("no-op", 2),
        ("forget", 1),
    ]


def test_detail_summary_excludes_no_op() -> None:
    result = aggregate(load_document("plan-mixed.json"))

    assert detail_action_summary(result) == [
        ("create", 3),
        ("update", 2),
        ("delete", 3),
        ("forget", 1),
    ]
    assert output_action_summary(result) == [("create", 1), ("update", 1), ("delete", 1)]


def test_other_verbs_ranked_last_by_name() -> None:
    document = PlanDocument(
        resource_changes=(
            ResourceChange(address="a.b", type="a", actions=("read",)),
            ResourceChange(address="a.c", type="a", actions=("forget",)),
            ResourceChange(address="a.d", type="a", actions=("no-op",)),
        )
    )

    assert basic_action_summary(aggregate(document)) == [
        ("no-op", 1),
        ("forget", 1),
        ("read", 1),
    ]


def test_no_op_only_plan_has_no_changes() -> None:
    result = aggregate(load_document("plan-noop.json"))

    assert result.resource_counts[ChangeCategory.NOOP] == 2
    assert not result.has_resource_changes
    assert not result.has_output_changes
    assert not result.has_any_changes


def test_unclassified_replace_is_not_a_change() -> None:
    document = PlanDocument(
        resource_changes=(
            ResourceChange(address="aws_instance.web", type="aws_instance", actions=("create", "delete")),
        )
    )

    result = aggregate(document)

    assert result.resource_counts[ChangeCategory.UNCLASSIFIED] == 1
    assert not result.has_resource_changes
    assert sum(result.resource_counts.values()) == 1


def test_import_without_change_counts_as_change() -> None:
    document = PlanDocument(
        resource_changes=(
            ResourceChange(address="aws_vpc.main", type="aws_vpc", actions=("no-op",), importing=True),
        )
    )

    result = aggregate(document)

    assert result.has_resource_changes
    assert result.importing_total == 1


@pytest.mark.parametrize("fixture_name", ["plan-mixed.json", "plan-noop.json"])
def test_aggregate_is_idempotent(fixture_name: str) -> None:
    document = load_document(fixture_name)

    assert aggregate(document) == aggregate(document)


def test_output_only_changes() -> None:
    document = PlanDocument(
        output_changes={"endpoint": OutputChange(name="endpoint", actions=("update",))},
    )

    result = aggregate(document)

    assert not result.has_resource_changes
    assert result.has_output_changes
    assert result.has_any_changes
