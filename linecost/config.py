"""
Settings loader: reads cost constants from YAML and builds a validated
Settings.

The default settings are a module-level singleton; call
get_default_settings() to obtain them. They are loaded and validated once at
import time and never written to afterwards.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from pathlib import Path
from typing import Any, Optional, Union, cast

import yaml

from .types import Alignment, Settings

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
DEFAULTS_FILE = _DATA_DIR / "defaults.yaml"

_FIELDS: tuple[str, ...] = tuple(f.name for f in dataclasses.fields(Settings))
_NUMERIC_FIELDS: tuple[str, ...] = tuple(
    name for name in _FIELDS if name not in ("alignment", "fitness_classes")
)


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Settings file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse settings file {path}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("settings"), dict):
        raise ValueError(f"Settings file {path} must contain a 'settings' mapping")
    return cast(dict[str, Any], data["settings"])


def _to_float(value: Any) -> float:
    """
    Coerce a YAML scalar to float.

    YAML 1.1 only spells infinity as .inf, and PyYAML reads plain "inf" or
    "1e3" as strings, so both spellings are accepted here.
    """
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    if isinstance(value, str):
        value = value.strip().lower().replace(".inf", "inf")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"expected a number, got {value!r}") from None
    if math.isnan(number):
        raise ValueError(f"expected a number, got {value!r}")
    return number


def settings_from_mapping(raw: dict[str, Any]) -> Settings:
    """
    Build Settings from a plain mapping of field name to value.

    Raises ValueError listing every missing, unknown or non-numeric field
    before Settings runs its own validation.
    """
    errors: list[str] = []

    for name in _FIELDS:
        if name not in raw and name != "alignment":
            errors.append(f"missing setting: {name}")
    for name in raw:
        if name not in _FIELDS:
            errors.append(f"unknown setting: {name}")

    values: dict[str, Any] = {}
    for name in _NUMERIC_FIELDS:
        if name in raw:
            try:
                values[name] = _to_float(raw[name])
            except ValueError as exc:
                errors.append(f"{name}: {exc}")

    if "fitness_classes" in raw:
        thresholds = raw["fitness_classes"]
        if not isinstance(thresholds, (list, tuple)):
            errors.append(f"fitness_classes: expected a list, got {thresholds!r}")
        else:
            try:
                values["fitness_classes"] = tuple(_to_float(v) for v in thresholds)
            except ValueError as exc:
                errors.append(f"fitness_classes: {exc}")

    if "alignment" in raw:
        values["alignment"] = raw["alignment"]

    if errors:
        raise ValueError(
            "Settings validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
        )
    return Settings(**values)


def load_settings(path: Optional[Union[str, Path]] = None, **overrides: Any) -> Settings:
    """
    Load Settings from a YAML file.

    Args:
        path: YAML file with a top-level 'settings' mapping. Defaults to the
            bundled defaults.yaml.
        **overrides: Field values that replace those read from the file.

    Returns:
        Validated, immutable Settings.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or a setting is invalid.
    """
    path = Path(path) if path is not None else DEFAULTS_FILE
    raw = _load_yaml(path)
    raw.update(overrides)
    settings = settings_from_mapping(raw)
    logger.debug("Loaded line-break settings from %s (alignment=%s)", path, settings.alignment.value)
    return settings


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Built eagerly at import time. Settings are frozen, so sharing the instance
# across threads is safe.

_default_settings: Settings = load_settings()


def get_default_settings(alignment: Optional[Alignment] = None) -> Settings:
    """
    Return the default settings singleton.

    With alignment, return a copy of the defaults using that alignment.
    """
    if alignment is None:
        return _default_settings
    return _default_settings.replace(alignment=alignment)
