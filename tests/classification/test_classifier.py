from __future__ import annotations

import pytest

from tfplan_analyzer.classification import (
    REPLACE_REASON,
    classify,
    classify_output,
    classify_output_symbol,
    classify_symbol,
)
from tfplan_analyzer.models import (
    ChangeCategory,
    ChangeSymbol,
    OutputCategory,
    OutputChange,
    OutputSymbol,
    ResourceChange,
)


def change(*actions: str, importing: bool = False, reason: str | None = None) -> ResourceChange:
    return ResourceChange(
        address="null_resource.example",
        type="null_resource",
        actions=tuple(actions),
        importing=importing,
        action_reason=reason,
    )


CLASSIFICATION_CASES = [
    (change("create"), ChangeCategory.CREATE),
    (change("create", importing=True), ChangeCategory.CREATE),
    (change("update"), ChangeCategory.UPDATE),
    (change("update", importing=True), ChangeCategory.UPDATE_IMPORT),
    (change("delete"), ChangeCategory.DELETE),
    (change("delete", "create", reason=REPLACE_REASON), ChangeCategory.REPLACE),
    (change("create", "delete", reason=REPLACE_REASON), ChangeCategory.REPLACE),
    (
        change("delete", "create", importing=True, reason=REPLACE_REASON),
        ChangeCategory.REPLACE_IMPORT,
    ),
    (change("no-op", importing=True), ChangeCategory.IMPORT_NO_CHANGE),
    (change("forget"), ChangeCategory.REMOVE_FORGET),
    (change("no-op"), ChangeCategory.NOOP),
    (change("create", "delete"), ChangeCategory.UNCLASSIFIED),
    (change("delete", "create", reason="replace_by_request"), ChangeCategory.UNCLASSIFIED),
    (change("read"), ChangeCategory.UNCLASSIFIED),
    (change(), ChangeCategory.UNCLASSIFIED),
]


@pytest.mark.parametrize(("record", "expected"), CLASSIFICATION_CASES)
def test_classify_follows_rule_table(record: ResourceChange, expected: ChangeCategory) -> None:
    assert classify(record) is expected


def test_replace_reason_uses_terraform_spelling() -> None:
    assert REPLACE_REASON == "replace_because_cannot_update"


def test_replace_direction_follows_listed_order() -> None:
    delete_first = change("delete", "create", reason=REPLACE_REASON)
    create_first = change("create", "delete", reason=REPLACE_REASON)

    assert classify_symbol(delete_first) is ChangeSymbol.REPLACE_DELETE_CREATE
    assert classify_symbol(delete_first).value == "-/+"
    assert classify_symbol(create_first) is ChangeSymbol.REPLACE_CREATE_DELETE
    assert classify_symbol(create_first).value == "+/-"


@pytest.mark.parametrize(
    ("record", "expected"),
    [
        (change("create"), ChangeSymbol.CREATE),
        (change("update", importing=True), ChangeSymbol.UPDATE),
        (change("delete"), ChangeSymbol.DELETE),
        (change("forget"), ChangeSymbol.FORGET),
        (change("no-op", importing=True), ChangeSymbol.IMPORT_NO_CHANGE),
        (change("no-op"), ChangeSymbol.SUPPRESSED),
        (change("create", "delete"), ChangeSymbol.REPLACE_CREATE_DELETE),
    ],
)
def test_classify_symbol(record: ResourceChange, expected: ChangeSymbol) -> None:
    assert classify_symbol(record) is expected


# Detailed categories and diff symbols must agree on what a change does.
CONSISTENT_SYMBOLS = {
    ChangeCategory.CREATE: {ChangeSymbol.CREATE},
    ChangeCategory.UPDATE: {ChangeSymbol.UPDATE},
    ChangeCategory.UPDATE_IMPORT: {ChangeSymbol.UPDATE},
    ChangeCategory.DELETE: {ChangeSymbol.DELETE},
    ChangeCategory.REPLACE: {ChangeSymbol.REPLACE_DELETE_CREATE, ChangeSymbol.REPLACE_CREATE_DELETE},
    ChangeCategory.REPLACE_IMPORT: {
        ChangeSymbol.REPLACE_DELETE_CREATE,
        ChangeSymbol.REPLACE_CREATE_DELETE,
    },
    ChangeCategory.IMPORT_NO_CHANGE: {ChangeSymbol.IMPORT_NO_CHANGE},
    ChangeCategory.REMOVE_FORGET: {ChangeSymbol.FORGET},
    ChangeCategory.NOOP: {ChangeSymbol.SUPPRESSED},
}


@pytest.mark.parametrize(
    ("record", "category"),
    [case for case in CLASSIFICATION_CASES if case[1] is not ChangeCategory.UNCLASSIFIED],
)
def test_category_and_symbol_agree(record: ResourceChange, category: ChangeCategory) -> None:
    assert classify_symbol(record) in CONSISTENT_SYMBOLS[category]


@pytest.mark.parametrize(
    ("actions", "category", "symbol"),
    [
        (("create",), OutputCategory.CREATE, OutputSymbol.CREATE),
        (("update",), OutputCategory.UPDATE, OutputSymbol.UPDATE),
        (("delete",), OutputCategory.DELETE, OutputSymbol.DELETE),
        (("no-op",), OutputCategory.NOOP, OutputSymbol.SUPPRESSED),
        ((), OutputCategory.NOOP, OutputSymbol.SUPPRESSED),
    ],
)
def test_classify_output(
    actions: tuple[str, ...], category: OutputCategory, symbol: OutputSymbol
) -> None:
    output = OutputChange(name="bucket_arn", actions=actions)

    assert classify_output(output) is category
    assert classify_output_symbol(output) is symbol
