"""Application settings with environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .bundler import parse_output_kind
from .component import DEFAULT_COMPONENT_NAME
from .errors import InvalidSettings
from .models import OutputKind

_DEFAULT_MAX_UPLOAD_BYTES = 50 * 1024 * 1024
_DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    output_kind: OutputKind = OutputKind.STANDALONE
    component_name: str = DEFAULT_COMPONENT_NAME
    max_upload_bytes: int = _DEFAULT_MAX_UPLOAD_BYTES
    log_level: str = _DEFAULT_LOG_LEVEL


def _read_json(path: Path) -> dict:
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise InvalidSettings(f"Invalid settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise InvalidSettings(f"Settings file {path} must contain a JSON object")
    return data


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a JSON file, with environment variable overrides.

    Priority order:
    1. Environment variables (``STACKPACK_*``)
    2. JSON config file
    3. Defaults

    Raises:
        InvalidOutputKind: if the configured output kind is unknown.
        InvalidSettings: if the file is not a JSON object, the upload limit is
            not an integer, or the log level is not a known level name.
    """
    json_settings = {}
    if path and path.exists():
        json_settings = _read_json(path)

    output_kind = os.getenv("STACKPACK_OUTPUT_KIND") or json_settings.get("output_kind", OutputKind.STANDALONE.value)
    component_name = os.getenv("STACKPACK_COMPONENT_NAME") or json_settings.get("component_name", DEFAULT_COMPONENT_NAME)
    max_upload_bytes = os.getenv("STACKPACK_MAX_UPLOAD_BYTES") or json_settings.get(
        "max_upload_bytes", _DEFAULT_MAX_UPLOAD_BYTES
    )
    log_level = str(os.getenv("STACKPACK_LOG_LEVEL") or json_settings.get("log_level", _DEFAULT_LOG_LEVEL)).upper()

    try:
        max_upload_bytes = int(max_upload_bytes)
    except (TypeError, ValueError) as e:
        raise InvalidSettings(f"max_upload_bytes must be an integer, got {max_upload_bytes!r}") from e

    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(log_level), int):
        raise InvalidSettings(f"Unknown log level: {log_level!r}")

    return Settings(
        output_kind=parse_output_kind(output_kind),
        component_name=component_name,
        max_upload_bytes=max_upload_bytes,
        log_level=log_level,
    )
