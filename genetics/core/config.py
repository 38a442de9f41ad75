"""Run configuration.

Settings live in a JSON file (``$GENETICS_CONFIG`` or
``~/.config/genetics/config.json``). Missing files and missing keys fall back
to defaults, so an empty config is always valid.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .models import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GENETICS_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "genetics" / "config.json"


class GenerationConfig(BaseModel):
    """Random stream and selection settings."""

    seed: int = Field(default=42, ge=0, le=0xFFFFFFFF)
    use_morphs: bool = True
    beard_chance: int = Field(default=5, ge=0, le=100)


class MakeupConfig(BaseModel):
    """Concealer and lipstick settings for settler women."""

    apply_foundation: bool = True
    apply_makeup: bool = False
    # Any value parse_color accepts
    pale_lipstick_color: int | str = 139
    dark_lipstick_color: int | str = 4916319


class FactionConfig(BaseModel):
    """Faction identifiers that drive context-dependent tints."""

    settler: str = "WorkshopNPCFaction [FACT:000337F3]"
    raider: str = 'RaiderFaction "Raiders" [FACT:0001CBED]'
    children_of_atom: str = "ChildrenOfAtomFaction [FACT:0002FB84]"


class GeneticsConfig(BaseModel):
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    makeup: MakeupConfig = Field(default_factory=MakeupConfig)
    factions: FactionConfig = Field(default_factory=FactionConfig)

    def keys(self) -> list[str]:
        """All settable keys in ``section.field`` form."""
        result = []
        for section_name, section in self:
            for field_name in type(section).model_fields:
                result.append(f"{section_name}.{field_name}")
        return result


def get_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> GeneticsConfig:
    """Load configuration, falling back to defaults if the file is absent."""
    path = path or get_config_path()
    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return GeneticsConfig()

    try:
        with open(path) as f:
            data = json.load(f)
        return GeneticsConfig.model_validate(data)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Config file {path} is invalid: {e}") from e


def save_config(config: GeneticsConfig, path: Path | None = None) -> Path:
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.model_dump(mode="json"), f, indent=2)
    return path


def _coerce(raw: str, annotation: Any, key: str) -> Any:
    if annotation is bool:
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
        raise ConfigError(f"Invalid boolean for {key}: {raw}")
    if annotation is int:
        try:
            return int(raw, 0)
        except ValueError as e:
            raise ConfigError(f"Invalid integer for {key}: {raw}") from e
    if annotation == (int | str):
        try:
            return int(raw, 0)
        except ValueError:
            return raw
    return raw


def set_config_value(config: GeneticsConfig, key: str, raw: str) -> GeneticsConfig:
    """Return a copy of ``config`` with ``section.field`` set from a string.

    Raises:
        ConfigError: Unknown key or a value that does not validate.
    """
    section_name, _, field_name = key.partition(".")
    section = getattr(config, section_name, None)
    if not isinstance(section, BaseModel) or field_name not in type(section).model_fields:
        raise ConfigError(f"Unknown key: {key}")

    annotation = type(section).model_fields[field_name].annotation
    value = _coerce(raw, annotation, key)

    data = config.model_dump()
    data[section_name][field_name] = value
    try:
        return GeneticsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid value for {key}: {raw}") from e
