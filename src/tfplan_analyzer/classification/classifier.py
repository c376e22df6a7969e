"""Classification of resource and output changes.

Two independent rule tables operate on the same :class:`ResourceChange`:

* :func:`classify` assigns one of the detailed categories used for counting
  and for the grouped listings. The rules are evaluated in order and the first
  match wins. A change matching no rule is ``UNCLASSIFIED``.
* :func:`classify_symbol` picks the marker used by the compact diff listing.

A create/delete pair is only a ``REPLACE`` for the detailed table when Terraform
tagged it with :data:`REPLACE_REASON`; without the reason code it stays
``UNCLASSIFIED``, and unclassified changes are left out of every listing,
the compact one included. The diff table marks a create/delete pair as a
replace and uses the order of the verbs to choose the direction: ``delete``
listed first renders ``-/+`` (destroy then create, what Terraform emits for a
normal replacement) and ``create`` listed first renders ``+/-`` (create before
destroy).
"""

from __future__ import annotations

from typing import Callable, Tuple

from ..models import (
    ChangeAction,
    ChangeCategory,
    ChangeSymbol,
    OutputCategory,
    OutputChange,
    OutputSymbol,
    ResourceChange,
)

REPLACE_REASON = "replace_because_cannot_update"

_CREATE = ChangeAction.CREATE.value
_UPDATE = ChangeAction.UPDATE.value
_DELETE = ChangeAction.DELETE.value
_NOOP = ChangeAction.NOOP.value
_FORGET = ChangeAction.FORGET.value

Rule = Tuple[ChangeCategory, Callable[[ResourceChange], bool]]


def _only(verb: str) -> Callable[[ResourceChange], bool]:
    return lambda change: change.verbs == {verb}


def _is_replacement(change: ResourceChange) -> bool:
    return {_CREATE, _DELETE} <= change.verbs and change.action_reason == REPLACE_REASON


RESOURCE_RULES: Tuple[Rule, ...] = (
    (ChangeCategory.CREATE, _only(_CREATE)),
    (ChangeCategory.UPDATE, lambda change: _only(_UPDATE)(change) and not change.importing),
    (ChangeCategory.UPDATE_IMPORT, lambda change: _only(_UPDATE)(change) and change.importing),
    (ChangeCategory.DELETE, _only(_DELETE)),
    (ChangeCategory.REPLACE, lambda change: _is_replacement(change) and not change.importing),
    (ChangeCategory.REPLACE_IMPORT, lambda change: _is_replacement(change) and change.importing),
    (ChangeCategory.IMPORT_NO_CHANGE, lambda change: _only(_NOOP)(change) and change.importing),
    (ChangeCategory.REMOVE_FORGET, _only(_FORGET)),
    (ChangeCategory.NOOP, lambda change: _only(_NOOP)(change) and not change.importing),
)


def classify(change: ResourceChange) -> ChangeCategory:
    """Return the detailed category for ``change``."""

    for category, matches in RESOURCE_RULES:
        if matches(change):
            return category
    return ChangeCategory.UNCLASSIFIED


def classify_symbol(change: ResourceChange) -> ChangeSymbol:
    """Return the compact diff marker for ``change``."""

    verbs = change.verbs
    if _CREATE in verbs and _DELETE in verbs:
        if change.actions.index(_DELETE) < change.actions.index(_CREATE):
            return ChangeSymbol.REPLACE_DELETE_CREATE
        return ChangeSymbol.REPLACE_CREATE_DELETE
    if _CREATE in verbs:
        return ChangeSymbol.CREATE
    if _UPDATE in verbs:
        return ChangeSymbol.UPDATE
    if _DELETE in verbs:
        return ChangeSymbol.DELETE
    if _FORGET in verbs:
        return ChangeSymbol.FORGET
    if verbs == {_NOOP} and change.importing:
        return ChangeSymbol.IMPORT_NO_CHANGE
    return ChangeSymbol.SUPPRESSED


_OUTPUT_CATEGORIES = {category.value: category for category in OutputCategory}


def classify_output(change: OutputChange) -> OutputCategory:
    """Return the category for an output change.

    Outputs carry a single verb. Anything else is counted as ``NOOP``.
    """

    if len(change.verbs) == 1:
        (verb,) = change.verbs
        return _OUTPUT_CATEGORIES.get(verb, OutputCategory.NOOP)
    return OutputCategory.NOOP


def classify_output_symbol(change: OutputChange) -> OutputSymbol:
    verbs = change.verbs
    if _CREATE in verbs:
        return OutputSymbol.CREATE
    if _UPDATE in verbs:
        return OutputSymbol.UPDATE
    if _DELETE in verbs:
        return OutputSymbol.DELETE
    return OutputSymbol.SUPPRESSED
