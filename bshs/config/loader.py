"""YAML config loader, dotted-key lookup and secret resolution."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from bshs.config.defaults import DEFAULT_REMINDERS
from bshs.config.schema import SiteConfig


def load_config(path: str | Path) -> SiteConfig:
    """Load and validate config from a YAML file.

    If no reminders are specified in the YAML, injects DEFAULT_REMINDERS.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    page = raw.setdefault("page", {}) or {}
    raw["page"] = page
    if not page.get("reminders"):
        page["reminders"] = list(DEFAULT_REMINDERS)

    return SiteConfig(**raw)


def load_config_or_default(path: str | Path) -> SiteConfig:
    """Like load_config, but a missing file yields the built-in defaults."""
    if not Path(path).exists():
        return SiteConfig(page={"reminders": list(DEFAULT_REMINDERS)})
    return load_config(path)


def get_config_value(config: SiteConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'proxy.location'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def resolve_api_key(
    config: SiteConfig, environ: Mapping[str, str] | None = None
) -> str | None:
    """Read the upstream API key from the environment. Empty counts as unset."""
    if environ is None:
        environ = os.environ
    value = environ.get(config.proxy.api_key_env, "").strip()
    return value or None
