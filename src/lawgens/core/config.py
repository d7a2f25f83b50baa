# src/lawgens/core/config.py
"""Generator settings and their loading.

Settings are layered (highest precedence first):

1. overrides - explicit values passed by the caller
2. config_file - a user YAML file
3. preset - a named YAML preset shipped in ``lawgens/core/presets``
4. defaults - GeneratorSettings field defaults

The process-wide instance comes from ``get_settings()``, which reads the
``LAWGENS_PRESET`` and ``LAWGENS_CONFIG`` environment variables once.
"""

from __future__ import annotations

import os
from functools import cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from lawgens.core.logging import get_logger

logger = get_logger(__name__)

PRESETS_DIR = Path(__file__).parent / "presets"

PRESET_ENV_VAR = "LAWGENS_PRESET"
CONFIG_ENV_VAR = "LAWGENS_CONFIG"

# Set by load_settings itself from its preset argument
_DERIVED_FIELDS = frozenset({"preset_name"})


class GeneratorSettings(BaseModel):
    """Bounds applied by strategies when the caller does not pass their own."""

    model_config = {"frozen": True, "extra": "forbid"}

    max_tree_size: int = Field(
        default=8,
        ge=1,
        description="Largest number of leaves drawn for a ParSeq tree",
    )
    max_multiplicity: int = Field(
        default=100,
        ge=1,
        description="Largest multiplicity of a single NonEmptyMultiSet element",
    )
    max_collection_size: int | None = Field(
        default=None,
        ge=1,
        description="Largest non-empty container size (None uses Hypothesis' default)",
    )
    preset_name: str | None = Field(
        default=None,
        description="Preset these settings were layered on, if any. Derived from the preset argument; never read from YAML or overrides",
    )


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, with override taking precedence.

    Returns a new dict; neither input is mutated.
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def list_presets(presets_dir: Path = PRESETS_DIR) -> list[str]:
    """Sorted preset names (without .yaml extension) in ``presets_dir``."""
    if not presets_dir.exists():
        return []
    return sorted(p.stem for p in presets_dir.glob("*.yaml") if p.is_file())


def _load_yaml_mapping(path: Path, what: str) -> dict[str, Any]:
    with path.open() as f:
        loaded = yaml.safe_load(f)
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{what} must be a YAML mapping, got {type(loaded).__name__}")
    return loaded


def load_preset(preset_name: str, presets_dir: Path = PRESETS_DIR) -> dict[str, Any]:
    """Load a preset configuration by name.

    Raises:
        FileNotFoundError: If the preset does not exist.
        yaml.YAMLError: If the preset YAML is malformed.
        ValueError: If the preset is not a YAML mapping.
    """
    preset_path = presets_dir / f"{preset_name}.yaml"
    if not preset_path.exists():
        available = list_presets(presets_dir)
        raise FileNotFoundError(f"Preset '{preset_name}' not found. Available presets: {available}")
    return _load_yaml_mapping(preset_path, f"Preset '{preset_name}'")


def load_settings(
    *,
    preset: str | None = None,
    config_file: Path | None = None,
    overrides: dict[str, Any] | None = None,
    presets_dir: Path = PRESETS_DIR,
) -> GeneratorSettings:
    """Layer preset, config file and overrides into validated settings.

    Raises:
        FileNotFoundError: If the preset or config file is missing.
        yaml.YAMLError: If YAML is malformed.
        ValueError: If a YAML source is not a mapping, or any source sets
            a derived field such as preset_name.
        pydantic.ValidationError: If the merged values fail validation.
    """
    config_dict: dict[str, Any] = {}

    if preset is not None:
        config_dict = load_preset(preset, presets_dir)

    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        config_dict = deep_merge(config_dict, _load_yaml_mapping(config_file, f"Config file {config_file}"))

    if overrides is not None:
        config_dict = deep_merge(config_dict, overrides)

    derived = sorted(_DERIVED_FIELDS & config_dict.keys())
    if derived:
        raise ValueError(f"{derived} cannot be configured; preset_name comes from the preset argument")
    config_dict["preset_name"] = preset

    settings = GeneratorSettings(**config_dict)
    logger.debug(
        "generator settings loaded",
        preset=preset,
        config_file=str(config_file) if config_file is not None else None,
        **settings.model_dump(exclude={"preset_name"}),
    )
    return settings


@cache
def get_settings() -> GeneratorSettings:
    """Process-wide settings, read from the environment on first use."""
    preset = os.environ.get(PRESET_ENV_VAR) or None
    config_path = os.environ.get(CONFIG_ENV_VAR) or None
    logger.debug("reading generator settings from environment", preset_env=preset, config_env=config_path)
    return load_settings(
        preset=preset,
        config_file=Path(config_path) if config_path is not None else None,
    )


def reset_settings() -> None:
    """Forget the cached settings so the next get_settings() reloads them."""
    get_settings.cache_clear()
