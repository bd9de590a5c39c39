from __future__ import annotations

"""Configuration loading and validation for memtrainer.

This module loads YAML configuration, applies defaults, and repairs values
that would make a session misbehave (negative delays, empty paths).
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_INSTRUCTION_DELAY_MS = 2000
DEFAULT_INTER_ITEM_GAP_MS = 200


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path).expanduser())
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def _non_negative_int(section: Dict[str, Any], key: str, default: int) -> None:
    value = section.get(key, default)
    try:
        value = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid {key} {value!r}, using {default}.")
        value = default
    if value < 0:
        logger.warning(f"Negative {key} {value}, using {default}.")
        value = default
    section[key] = value


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    cfg.setdefault("session", {})
    cfg.setdefault("profile", {})
    cfg.setdefault("history", {})
    cfg.setdefault("explain", False)

    session = cfg["session"]
    profile = cfg["profile"]
    history = cfg["history"]

    _non_negative_int(session, "instruction_delay_ms", DEFAULT_INSTRUCTION_DELAY_MS)
    _non_negative_int(session, "inter_item_gap_ms", DEFAULT_INTER_ITEM_GAP_MS)

    profile.setdefault("path", "~/.memtrainer/user_data.json")
    profile.setdefault("default_username", "Default User")
    if not str(profile["path"]).strip():
        logger.warning("Empty profile.path, using ~/.memtrainer/user_data.json.")
        profile["path"] = "~/.memtrainer/user_data.json"
    if not str(profile["default_username"]).strip():
        profile["default_username"] = "Default User"

    history.setdefault("enabled", False)
    history.setdefault("data_dir", "~/.memtrainer/data")
    history["enabled"] = bool(history["enabled"])

    cfg["explain"] = bool(cfg["explain"])
    return cfg
