"""Runtime settings resolved from defaults, an optional file and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .budget import GITHUB_COMMENT_LIMIT
from .rendering import RenderMode

CONFIG_ENV = "TFPLAN_ANALYZER_CONFIG"
CHAR_LIMIT_ENV = "TFPLAN_ANALYZER_CHAR_LIMIT"
DEFAULT_MODE_ENV = "TFPLAN_ANALYZER_DEFAULT_MODE"
LOG_LEVEL_ENV = "TFPLAN_ANALYZER_LOG_LEVEL"

_MODES = tuple(mode.value for mode in RenderMode)
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsError(ValueError):
    """Raised when configuration values cannot be loaded or are invalid."""


@dataclass(frozen=True, slots=True)
class AnalyzerSettings:
    char_limit: int = GITHUB_COMMENT_LIMIT
    default_mode: str = "basic"
    log_level: str = "WARNING"


def load_settings(env: Mapping[str, str] | None = None) -> AnalyzerSettings:
    """Resolve settings; environment variables win over the config file."""

    environ = os.environ if env is None else env
    settings = AnalyzerSettings()

    config_path = environ.get(CONFIG_ENV)
    if config_path:
        settings = _apply(settings, _load_file(Path(config_path)), source=config_path)

    overrides: Dict[str, Any] = {}
    if environ.get(CHAR_LIMIT_ENV):
        overrides["char_limit"] = environ[CHAR_LIMIT_ENV]
    if environ.get(DEFAULT_MODE_ENV):
        overrides["default_mode"] = environ[DEFAULT_MODE_ENV]
    if environ.get(LOG_LEVEL_ENV):
        overrides["log_level"] = environ[LOG_LEVEL_ENV]
    return _apply(settings, overrides, source="environment")


def _load_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise SettingsError(f"Settings file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Failed to read settings file {path}") from exc

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in settings file {path}") from exc

    if not isinstance(data, Mapping):
        raise SettingsError(f"Settings file must be a mapping: {path}")

    return dict(data)


def _apply(settings: AnalyzerSettings, values: Mapping[str, Any], *, source: str) -> AnalyzerSettings:
    changes: Dict[str, Any] = {}

    if values.get("char_limit") is not None:
        raw = values["char_limit"]
        try:
            limit = int(str(raw).strip())
        except ValueError as exc:
            raise SettingsError(f"char_limit from {source} must be an integer: {raw!r}") from exc
        if limit <= 0:
            raise SettingsError(f"char_limit from {source} must be positive: {limit}")
        changes["char_limit"] = limit

    if values.get("default_mode") is not None:
        mode = str(values["default_mode"]).strip().lower()
        if mode not in _MODES:
            raise SettingsError(
                f"default_mode from {source} must be one of {', '.join(_MODES)}: {mode!r}"
            )
        changes["default_mode"] = mode

    if values.get("log_level") is not None:
        level = str(values["log_level"]).strip().upper()
        if level not in _LOG_LEVELS:
            raise SettingsError(f"log_level from {source} is not a logging level: {level!r}")
        changes["log_level"] = level

    return replace(settings, **changes) if changes else settings


__all__ = ["AnalyzerSettings", "SettingsError", "load_settings"]
