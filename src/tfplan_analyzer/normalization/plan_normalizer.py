"""Conversion helpers that turn raw Terraform plan JSON into service models."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Tuple

from ..models import OutputChange, PlanDocument, ResourceChange

logger = logging.getLogger(__name__)


class PlanFormatError(ValueError):
    """Raised when a field the analyzer consults has an unexpected shape."""


class PlanNormalizer:
    """Normalize Terraform plan JSON into a :class:`PlanDocument`."""

    def normalize(self, plan: Mapping[str, Any]) -> PlanDocument:
        """Return the plan document described by the supplied plan structure."""

        raw_resources = plan.get("resource_changes") or []
        if not isinstance(raw_resources, list):
            raise PlanFormatError("'resource_changes' must be a list")

        raw_outputs = plan.get("output_changes") or {}
        if not isinstance(raw_outputs, Mapping):
            raise PlanFormatError("'output_changes' must be an object")

        resources = tuple(
            self._normalize_resource(index, change) for index, change in enumerate(raw_resources)
        )
        outputs: Dict[str, OutputChange] = {
            str(name): self._normalize_output(str(name), change)
            for name, change in raw_outputs.items()
        }

        version = plan.get("terraform_version")
        document = PlanDocument(
            terraform_version=str(version) if version is not None else "unknown",
            applyable=bool(plan.get("applyable", False)),
            resource_changes=resources,
            output_changes=outputs,
        )
        logger.debug(
            "Normalized plan with %d resource changes and %d output changes",
            len(resources),
            len(outputs),
        )
        return document

    # ------------------------------------------------------------------
    def _normalize_resource(self, index: int, change: Any) -> ResourceChange:
        if not isinstance(change, Mapping):
            raise PlanFormatError(f"resource_changes[{index}] must be an object")

        body = change.get("change") or {}
        if not isinstance(body, Mapping):
            raise PlanFormatError(f"resource_changes[{index}].change must be an object")

        reason = change.get("action_reason")
        return ResourceChange(
            address=str(change.get("address", "")),
            type=str(change.get("type", "")),
            actions=self._actions(body.get("actions"), f"resource_changes[{index}]"),
            importing=_is_importing(body.get("importing")),
            action_reason=str(reason) if reason is not None else None,
        )

    def _normalize_output(self, name: str, change: Any) -> OutputChange:
        if not isinstance(change, Mapping):
            raise PlanFormatError(f"output_changes.{name} must be an object")

        actions = self._actions(change.get("actions"), f"output_changes.{name}")
        return OutputChange(name=name, actions=actions)

    def _actions(self, actions: Any, location: str) -> Tuple[str, ...]:
        if actions is None:
            return ()
        if not isinstance(actions, list) or not all(isinstance(item, str) for item in actions):
            raise PlanFormatError(f"{location} actions must be a list of strings")
        return tuple(actions)


def _is_importing(value: Any) -> bool:
    # Terraform emits an object such as {"id": "..."}; any value other than false marks an import.
    return value is not None and value is not False
