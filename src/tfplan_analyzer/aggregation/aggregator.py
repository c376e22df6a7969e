"""Aggregation of classified changes into counts, listings and histograms."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from ..classification import classify, classify_output
from ..models import (
    ChangeAction,
    ChangeCategory,
    OutputCategory,
    OutputChange,
    PlanDocument,
    ResourceChange,
)

logger = logging.getLogger(__name__)

CHANGE_CATEGORIES = (
    ChangeCategory.CREATE,
    ChangeCategory.UPDATE,
    ChangeCategory.UPDATE_IMPORT,
    ChangeCategory.DELETE,
    ChangeCategory.REPLACE,
    ChangeCategory.REPLACE_IMPORT,
    ChangeCategory.IMPORT_NO_CHANGE,
    ChangeCategory.REMOVE_FORGET,
)
OUTPUT_CHANGE_CATEGORIES = (OutputCategory.CREATE, OutputCategory.UPDATE, OutputCategory.DELETE)

BASIC_ACTION_RANK = {
    ChangeAction.CREATE.value: 1,
    ChangeAction.UPDATE.value: 2,
    ChangeAction.DELETE.value: 3,
    ChangeAction.NOOP.value: 4,
}
DETAIL_ACTION_RANK = {
    ChangeAction.CREATE.value: 1,
    ChangeAction.UPDATE.value: 2,
    ChangeAction.DELETE.value: 3,
    ChangeAction.FORGET.value: 4,
}
OUTPUT_ACTION_RANK = {
    ChangeAction.CREATE.value: 1,
    ChangeAction.UPDATE.value: 2,
    ChangeAction.DELETE.value: 3,
}
OTHER_RANK = 5


@dataclass(frozen=True, slots=True)
class AggregateResult:
    """Counts and listings computed once per plan document.

    ``resource_counts`` holds every :class:`ChangeCategory`, ``UNCLASSIFIED``
    included, so its values always sum to ``total_resource_changes``. The
    ``action_counts`` tallies count individual verbs rather than records.
    """

    total_resource_changes: int
    resource_counts: Mapping[ChangeCategory, int]
    output_counts: Mapping[OutputCategory, int]
    resources_by_category: Mapping[ChangeCategory, Tuple[ResourceChange, ...]]
    outputs_by_category: Mapping[OutputCategory, Tuple[OutputChange, ...]]
    importing_total: int
    type_histogram: Mapping[str, int]
    action_counts: Mapping[str, int]
    output_action_counts: Mapping[str, int]

    @property
    def has_resource_changes(self) -> bool:
        return sum(self.resource_counts[category] for category in CHANGE_CATEGORIES) > 0

    @property
    def has_output_changes(self) -> bool:
        return sum(self.output_counts[category] for category in OUTPUT_CHANGE_CATEGORIES) > 0

    @property
    def has_any_changes(self) -> bool:
        return self.has_resource_changes or self.has_output_changes


def aggregate(document: PlanDocument) -> AggregateResult:
    """Classify every change of ``document`` and collect the results."""

    resources: Dict[ChangeCategory, List[ResourceChange]] = {
        category: [] for category in ChangeCategory
    }
    type_histogram: Counter[str] = Counter()
    action_counts: Counter[str] = Counter()
    importing_total = 0

    for change in document.resource_changes:
        category = classify(change)
        if category is ChangeCategory.UNCLASSIFIED:
            logger.info(
                "Resource %s with actions %s matched no category",
                change.address,
                list(change.actions),
            )
        resources[category].append(change)
        type_histogram[change.type] += 1
        action_counts.update(change.actions)
        if change.importing:
            importing_total += 1

    outputs: Dict[OutputCategory, List[OutputChange]] = {
        category: [] for category in OutputCategory
    }
    output_action_counts: Counter[str] = Counter()

    for output in document.output_changes.values():
        outputs[classify_output(output)].append(output)
        output_action_counts.update(output.actions)

    result = AggregateResult(
        total_resource_changes=len(document.resource_changes),
        resource_counts={category: len(items) for category, items in resources.items()},
        output_counts={category: len(items) for category, items in outputs.items()},
        resources_by_category={category: tuple(items) for category, items in resources.items()},
        outputs_by_category={category: tuple(items) for category, items in outputs.items()},
        importing_total=importing_total,
        type_histogram=dict(type_histogram),
        action_counts=dict(action_counts),
        output_action_counts=dict(output_action_counts),
    )
    logger.debug(
        "Aggregated %d resource changes (%d importing)",
        result.total_resource_changes,
        importing_total,
    )
    return result


def _ranked(counts: Mapping[str, int], rank: Mapping[str, int]) -> List[Tuple[str, int]]:
    return sorted(counts.items(), key=lambda item: (rank.get(item[0], OTHER_RANK), item[0]))


def basic_action_summary(result: AggregateResult) -> List[Tuple[str, int]]:
    """Verb counts ordered create, update, delete, no-op, then anything else."""

    return _ranked(result.action_counts, BASIC_ACTION_RANK)


def detail_action_summary(result: AggregateResult) -> List[Tuple[str, int]]:
    """Verb counts without no-op, ordered create, update, delete, forget, other."""

    counts = {
        verb: count
        for verb, count in result.action_counts.items()
        if verb != ChangeAction.NOOP.value
    }
    return _ranked(counts, DETAIL_ACTION_RANK)


def output_action_summary(result: AggregateResult) -> List[Tuple[str, int]]:
    counts = {
        verb: count
        for verb, count in result.output_action_counts.items()
        if verb != ChangeAction.NOOP.value
    }
    return _ranked(counts, OUTPUT_ACTION_RANK)


def type_summary(result: AggregateResult) -> List[Tuple[str, int]]:
    return sorted(result.type_histogram.items())
