"""Lint configuration loading and resolution.

A configuration maps rule names (or ids) to ``true``/``false`` or to a
mapping of rule options, plus an optional ``default`` key deciding the
state of rules the configuration does not mention::

    default: true
    fenced-code-fence-length:
      fence_length: 4
    HM005: false
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from mdlint.errors import ConfigError
from mdlint.rules.registry import RuleRegistry

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".mdlint.yaml", ".mdlint.yml")

# Recommended settings: every rule on, with its house-style options
PRESET: dict[str, Any] = {
    "list-item-marker-space": True,
    "fenced-code-fence-length": {"fence_length": 4},
    "reference-link-section-placement": True,
    "setext-heading-blank-lines": {"lines_before_h2": 2},
    "heading-sentence-case": True,
}


@dataclass
class RuleSettings:
    """Resolved settings of one rule."""

    enabled: bool = True
    options: dict[str, Any] = field(default_factory=dict)


def load_config(path: Path | str) -> dict[str, Any]:
    """Load a configuration file.

    Args:
        path: Path to a YAML configuration file.

    Returns:
        The configuration mapping (empty for an empty file).

    Raises:
        ConfigError: If the file cannot be read or is not a YAML mapping.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping of rule names to settings")

    logger.debug("Loaded config from %s", path)
    return data


def find_config(start: Path | str) -> Path | None:
    """Find the nearest configuration file in ``start`` or its parents."""
    start = Path(start).resolve()
    for directory in (start, *start.parents):
        for filename in CONFIG_FILENAMES:
            candidate = directory / filename
            if candidate.is_file():
                return candidate
    return None


def merge_config(base: Mapping[str, Any], override: Mapping[str, Any], registry: RuleRegistry) -> dict[str, Any]:
    """Layer ``override`` over ``base``.

    Keys are canonicalized to rule names first, so ``HM003`` in one layer
    replaces ``reference-link-section-placement`` in the other. An override
    with ``default: false`` drops the base layer entirely.
    """
    override = canonicalize(override, registry)
    if override.get("default") is False:
        return override
    return {**canonicalize(base, registry), **override}


def canonicalize(config: Mapping[str, Any], registry: RuleRegistry) -> dict[str, Any]:
    """Rewrite rule ids in a configuration to rule names.

    Raises:
        ConfigError: If a key names no known rule.
    """
    result: dict[str, Any] = {}
    for key, value in config.items():
        if not isinstance(key, str):
            raise ConfigError(f"Config keys must be strings, got {key!r}")
        if key == "default":
            if not isinstance(value, bool):
                raise ConfigError("Config key 'default' must be true or false")
            result[key] = value
            continue
        result[registry.require(key).name] = value
    return result


def resolve_config(config: Mapping[str, Any] | None, registry: RuleRegistry) -> dict[str, RuleSettings]:
    """Resolve a configuration into settings for every registered rule.

    Args:
        config: User configuration, layered over :data:`PRESET`. None means
            the preset alone.
        registry: Rules to resolve settings for.

    Returns:
        Mapping of rule name to its settings.

    Raises:
        ConfigError: On unknown rules, unknown options or bad option values.
    """
    merged = merge_config(PRESET, config or {}, registry)
    default_enabled = merged.get("default", True)
    settings: dict[str, RuleSettings] = {}

    for rule in registry.get_all_rules():
        value = merged.get(rule.name, default_enabled)
        if isinstance(value, bool):
            settings[rule.name] = RuleSettings(enabled=value, options=rule.resolve_options())
        elif isinstance(value, dict):
            settings[rule.name] = RuleSettings(enabled=True, options=rule.resolve_options(value))
        else:
            raise ConfigError(f"Setting for rule {rule.name} must be a boolean or a mapping of options")

    return settings
