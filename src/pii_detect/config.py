"""YAML/dict config loader for pii-detect.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    pii_detect:
      enabled: true
      categories:          # omit to scan for everything
        - email
        - phone
        - payment_card
      skip_categories:
        - person_name
      allow_list:
        - support@example.com
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .detector import Detector, DetectorConfig, NullDetector
from .types import PIICategory


class ConfigError(ValueError):
    """Raised for a malformed pii-detect configuration."""


def _categories(value: Any, key: str) -> list[PIICategory]:
    if not isinstance(value, (list, tuple, set)):
        raise ConfigError(f"{key} must be a list of category names")
    try:
        return [PIICategory.parse(v) for v in value]
    except ValueError as e:
        raise ConfigError(f"{key}: {e}") from e


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")
    # Support nested under "pii_detect" key or flat
    if "pii_detect" in data:
        data = data["pii_detect"] or {}
        if not isinstance(data, dict):
            raise ConfigError("pii_detect section must be a mapping")

    allow_list = data.get("allow_list", [])
    if not isinstance(allow_list, (list, tuple, set)):
        raise ConfigError("allow_list must be a list of values")

    categories = data.get("categories")
    return {
        "enabled": bool(data.get("enabled", True)),
        "categories": (
            tuple(PIICategory) if categories is None
            else tuple(_categories(categories, "categories"))
        ),
        "skip_categories": set(_categories(data.get("skip_categories", []), "skip_categories")),
        "allow_list": {str(v) for v in allow_list},
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    return load_config(data or {})


def create_detector(config: dict[str, Any]) -> Detector:
    """Create a configured detector from a config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        return NullDetector()

    return Detector(DetectorConfig(
        categories=cfg["categories"],
        skip_categories=cfg["skip_categories"],
        allow_list=cfg["allow_list"],
    ))
