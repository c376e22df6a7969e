"""Immutable representation of the parts of a plan document the analyzer reads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True, slots=True)
class ResourceChange:
    """One entry of the plan's ``resource_changes`` list.

    ``actions`` keeps the order found in the document; only the replace
    direction in the compact listing depends on it.
    """

    address: str
    type: str = ""
    actions: Tuple[str, ...] = ()
    importing: bool = False
    action_reason: Optional[str] = None

    @property
    def verbs(self) -> frozenset[str]:
        return frozenset(self.actions)


@dataclass(frozen=True, slots=True)
class OutputChange:
    """A planned change to a root module output."""

    name: str
    actions: Tuple[str, ...] = ()

    @property
    def verbs(self) -> frozenset[str]:
        return frozenset(self.actions)


@dataclass(frozen=True, slots=True)
class PlanDocument:
    """Top-level plan document, constructed once per run and never mutated."""

    terraform_version: str = "unknown"
    applyable: bool = False
    resource_changes: Tuple[ResourceChange, ...] = ()
    output_changes: Mapping[str, OutputChange] = field(default_factory=dict)
