from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


class PlanLoaderError(RuntimeError):
    """Exception raised when a terraform plan document cannot be read."""


class PlanLoader:
    """Load a Terraform plan exported with ``terraform show -json``."""

    def __init__(self, plan_json_path: str | os.PathLike[str]) -> None:
        self.plan_json_path = Path(plan_json_path)

    def load_plan(self) -> Dict[str, Any]:
        """Return the decoded plan document."""

        path = self.plan_json_path
        if not path.exists():
            raise PlanLoaderError(f"Terraform plan JSON file not found: {path}")
        if not path.is_file():
            raise PlanLoaderError(f"Terraform plan JSON path is not a file: {path}")

        logger.debug("Reading plan document from %s", path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise PlanLoaderError(f"Invalid JSON in plan file: {path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise PlanLoaderError(f"Failed to read plan file {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise PlanLoaderError(f"Plan document must be a JSON object: {path}")

        return data


__all__ = ["PlanLoader", "PlanLoaderError"]
