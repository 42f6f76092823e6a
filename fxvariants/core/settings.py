"""
Run settings and the optional settings file loader.

Settings file format (YAML or JSON), every key optional:
    extension: efb
    source_suffix: .fx
    descriptor_suffix: .xml
    script_prefix: compile_
    script_suffix: .bat

Environment variable:
    FXVARIANTS_CONFIG — path to the settings file (optional).
    Default search path: <scan_root>/fxvariants.yaml
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

_log = logging.getLogger("fxvariants.settings")

CONFIG_ENV_VAR = "FXVARIANTS_CONFIG"
DEFAULT_CONFIG_NAME = "fxvariants.yaml"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    # Compiled artifact extension, without the leading dot.
    extension: str = "efb"
    source_suffix: str = ".fx"
    descriptor_suffix: str = ".xml"
    script_prefix: str = "compile_"
    script_suffix: str = ".bat"
    aggregate_name: str = "all"
    bin_folder: str = "bin"

    @field_validator("extension")
    @classmethod
    def _strip_leading_dot(cls, v: str) -> str:
        return v.lstrip(".")

    @field_validator("source_suffix", "descriptor_suffix")
    @classmethod
    def _ensure_leading_dot(cls, v: str) -> str:
        return v if v.startswith(".") else f".{v}"

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Apply non-None overrides (CLI flags win over file values)."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**data)


def _parse_text(raw_text: str) -> Any:
    # JSON first; YAML is a superset for the flat mappings used here.
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError:
        return yaml.safe_load(raw_text)


def load_settings(path: Optional[Path] = None, *, scan_root: Optional[Path] = None) -> Settings:
    """
    Load settings from a YAML or JSON file.

    Returns defaults if the file is absent, unreadable, or malformed. A
    warning is logged unless the file is simply missing from the scan root.
    """
    resolved, explicit = _resolve_path(path, scan_root)
    if resolved is None:
        return Settings()
    if not resolved.exists():
        if explicit:
            _log.warning("Settings file %s not found, using defaults", resolved)
        return Settings()

    try:
        raw_text = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _log.warning("Cannot read settings file %s: %s", resolved, exc)
        return Settings()

    try:
        data = _parse_text(raw_text)
    except yaml.YAMLError as exc:
        _log.warning("Failed to parse settings file %s as JSON or YAML: %s", resolved, exc)
        return Settings()

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        _log.warning("Settings file %s must be a mapping, got %s", resolved, type(data).__name__)
        return Settings()

    try:
        settings = Settings(**_stringify(data))
    except ValidationError as exc:
        _log.warning("Ignoring invalid settings file %s: %s", resolved, exc)
        return Settings()

    _log.debug("Loaded settings from %s", resolved)
    return settings


def _stringify(data: Dict[Any, Any]) -> Dict[str, Any]:
    # YAML turns "extension: 1" into an int; every setting is a string.
    return {str(k): (str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v) for k, v in data.items()}


def _resolve_path(path: Optional[Path], scan_root: Optional[Path]) -> Tuple[Optional[Path], bool]:
    """Settings file path from argument or env var or scan root.

    The flag is True when the path was asked for explicitly (argument or env var).
    """
    if path is not None:
        return Path(path), True
    env_path = os.getenv(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path), True
    if scan_root is not None:
        return Path(scan_root) / DEFAULT_CONFIG_NAME, False
    return None, False
