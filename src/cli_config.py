"""Configuration file loading and runtime overrides for audit tunables.

Overrides are applied with CLI > config file > built-in defaults and never
raise, so a bad value cannot break the CLI.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file.

    Args:
        config_path: Path to a .yml/.yaml/.json file, or None.

    Returns:
        Parsed configuration dict; empty when missing or unreadable.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.lower().endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to load config: %s", e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", config_path)
        return {}
    return data


def _positive_int(value: Any, name: str) -> Optional[int]:
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s: %r", name, value)
        return None
    if number <= 0:
        logger.warning("Ignoring non-positive %s: %r", name, value)
        return None
    return number


def apply_audit_overrides(args, config: Optional[Dict[str, Any]] = None) -> None:
    """Apply the ``audit`` config section and CLI flags to Constants."""
    audit_cfg = (config or {}).get("audit") or {}
    if not isinstance(audit_cfg, dict):
        logger.warning("Ignoring 'audit' config section: expected a mapping")
        audit_cfg = {}

    if audit_cfg.get("timeout") is not None:
        timeout = _positive_int(audit_cfg["timeout"], "audit.timeout")
        if timeout is not None:
            Constants.AUDIT_TIMEOUT_SEC = timeout
    if audit_cfg.get("yarn_fail_threshold") is not None:
        threshold = _positive_int(audit_cfg["yarn_fail_threshold"], "audit.yarn_fail_threshold")
        if threshold is not None:
            Constants.YARN_AUDIT_FAIL_THRESHOLD = threshold

    if getattr(args, "TIMEOUT", None) is not None:
        timeout = _positive_int(args.TIMEOUT, "--timeout")
        if timeout is not None:
            Constants.AUDIT_TIMEOUT_SEC = timeout
