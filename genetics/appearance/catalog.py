"""Build the read-only trait catalog from raw catalog data.

Raw data describes head parts, hair colors, tint layer groups and morph
presets the way they are exported from the game data. Building the catalog
sorts all of it by gender and tint target; tint options that cannot be
classified, and template colors that cannot be parsed, are dropped with a
warning.

Raw YAML layout::

    default_head_parts:
      female: [FemaleHeadHuman, ...]
      male: [MaleHeadHuman, ...]
    head_parts:
      - {id: HairFemale01, type: Hair, gender: female}
      - {id: EyesBrown, type: Eyes, gender: neutral}
    hair_colors:
      - {id: HairColorBlonde, gender: neutral}
    tint_layers:
      female:
        - name: SkinTints
          options:
            - name: Skin tone
              slot: 1161
              colors:
                - {color: "#C8A082", alpha: 1.0, index: 1}
    presets:
      - gender: female
        regions: {"1": [0, 0, 0, 0, 0, 0, 1]}
        presets: {"Nose": 0.3}
        values: [0.1, 0.2, 0.0, 0.0, 0.0]
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..core.color import parse_color
from ..core.models import (
    FACIAL_HAIR,
    CharacterContext,
    GenderCatalog,
    MorphPreset,
    Severity,
    TemplateColor,
    TintTarget,
    TraitCatalog,
    TraitEntry,
    ValidationResult,
)
from .classifier import ATOM_FACE_PAINT_GLOBAL, classify_tint_option

logger = logging.getLogger(__name__)


class PartGender(str, Enum):
    FEMALE = "female"
    MALE = "male"
    NEUTRAL = "neutral"


class RawHeadPart(BaseModel):
    id: str
    type: str
    gender: PartGender = PartGender.NEUTRAL


class RawHairColor(BaseModel):
    id: str
    gender: PartGender = PartGender.NEUTRAL


class RawTemplateColor(BaseModel):
    # Anything parse_color does not recognise is skipped with a warning
    color: Any
    alpha: float = 1.0
    index: str

    @field_validator("index", mode="before")
    @classmethod
    def _index_as_str(cls, value):
        # YAML often gives integer indexes
        return str(value)


class RawTintOption(BaseModel):
    name: str
    slot: int | str
    colors: list[RawTemplateColor] | None = None
    conditions: list[str] = Field(default_factory=list)


class RawTintGroup(BaseModel):
    name: str
    options: list[RawTintOption] = Field(default_factory=list)


class RawPreset(BaseModel):
    gender: PartGender = PartGender.MALE
    regions: dict[str, list[float]] = Field(default_factory=dict)
    presets: dict[str, float] = Field(default_factory=dict)
    values: list[float] = Field(default_factory=list)

    @field_validator("regions", "presets", mode="before")
    @classmethod
    def _keys_as_str(cls, value):
        # Region indexes are usually unquoted numbers in YAML
        if isinstance(value, dict):
            return {str(k): v for k, v in value.items()}
        return value


class RawCatalog(BaseModel):
    default_head_parts: dict[str, list[str]] = Field(default_factory=dict)
    head_parts: list[RawHeadPart] = Field(default_factory=list)
    hair_colors: list[RawHairColor] = Field(default_factory=list)
    tint_layers: dict[str, list[RawTintGroup]] = Field(default_factory=dict)
    presets: list[RawPreset] = Field(default_factory=list)


def trait_index(slot: int | str, group_name: str, option_name: str) -> str:
    return f"{slot} {group_name} - {option_name}"


def build_tints(
    groups: list[RawTintGroup],
    result: ValidationResult,
    location: str = "tints",
) -> dict[TintTarget, tuple[TraitEntry, ...]]:
    """Classify tint options and parse their template colors."""
    tints: dict[TintTarget, list[TraitEntry]] = {}

    for group in groups:
        for option in group.options:
            has_atom = ATOM_FACE_PAINT_GLOBAL in option.conditions
            target = classify_tint_option(group.name, option.name, has_atom)

            if target == TintTarget.IGNORED:
                continue
            if target == TintTarget.UNCLASSIFIED:
                message = f"Not sure what to do with tint mask: {group.name}/{option.name}"
                logger.warning(message)
                result.add(Severity.WARNING, "unclassified_tint", location, message)
                continue

            colors = None
            if option.colors is not None:
                colors = []
                for raw in option.colors:
                    warnings: list[str] = []
                    color = parse_color(raw.color, warnings.append)
                    if color is None:
                        for message in warnings:
                            logger.warning(message)
                            result.add(
                                Severity.WARNING,
                                "unrecognized_color",
                                f"{location}/{group.name}/{option.name}",
                                message,
                            )
                        continue
                    colors.append(TemplateColor(color=color, alpha=raw.alpha, index=raw.index))
                colors = tuple(colors)

            entry = TraitEntry(
                index=trait_index(option.slot, group.name, option.name),
                colors=colors,
            )
            tints.setdefault(target, []).append(entry)

    return {target: tuple(entries) for target, entries in tints.items()}


def _sort_head_parts(raw: RawCatalog) -> dict[str, dict[str, list[str]]]:
    """Head parts by gender and type; neutral parts go to both genders.

    Facial hair is never given to women, even when neutral.
    """
    by_gender: dict[str, dict[str, list[str]]] = {"female": {}, "male": {}}
    neutral: dict[str, list[str]] = {}

    for part in raw.head_parts:
        if part.gender == PartGender.NEUTRAL:
            neutral.setdefault(part.type, []).append(part.id)
        else:
            by_gender[part.gender.value].setdefault(part.type, []).append(part.id)

    for part_type, ids in neutral.items():
        by_gender["male"].setdefault(part_type, []).extend(ids)
        if part_type == FACIAL_HAIR:
            continue
        by_gender["female"].setdefault(part_type, []).extend(ids)

    by_gender["female"].pop(FACIAL_HAIR, None)
    return by_gender


def _sort_hair_colors(raw: RawCatalog) -> dict[str, list[str]]:
    by_gender: dict[str, list[str]] = {"female": [], "male": []}
    neutral = []
    for color in raw.hair_colors:
        if color.gender == PartGender.NEUTRAL:
            neutral.append(color.id)
        else:
            by_gender[color.gender.value].append(color.id)
    for ids in by_gender.values():
        ids.extend(neutral)
    return by_gender


def build_catalog(raw: RawCatalog) -> tuple[TraitCatalog, ValidationResult]:
    """Build the trait catalog.

    Returns:
        Tuple of (catalog, result) where result holds the warnings raised
        while classifying options and parsing colors.
    """
    result = ValidationResult()
    head_parts = _sort_head_parts(raw)
    hair_colors = _sort_hair_colors(raw)

    genders = {}
    for gender in ("female", "male"):
        presets = []
        for i, preset in enumerate(raw.presets):
            # Presets without a female flag are male presets
            is_female = preset.gender == PartGender.FEMALE
            if is_female != (gender == "female"):
                continue
            try:
                presets.append(
                    MorphPreset(
                        regions={k: tuple(v) for k, v in preset.regions.items()},
                        presets=preset.presets,
                        values=tuple(preset.values),
                    )
                )
            except ValidationError as e:
                message = f"Skipping morph preset {i}: {e.errors()[0]['msg']}"
                logger.warning(message)
                result.add(Severity.WARNING, "invalid_preset", f"presets[{i}]", message)

        genders[gender] = GenderCatalog(
            default_head_parts=tuple(raw.default_head_parts.get(gender, [])),
            head_parts={k: tuple(v) for k, v in head_parts[gender].items()},
            hair_colors=tuple(hair_colors[gender]),
            tints=build_tints(raw.tint_layers.get(gender, []), result, f"{gender}/tints"),
            presets=tuple(presets),
        )

    female_presets = len(genders["female"].presets)
    male_presets = len(genders["male"].presets)
    logger.info(f"Found {female_presets} female presets and {male_presets} male presets.")

    return TraitCatalog(**genders), result


def load_catalog(path: Path) -> tuple[TraitCatalog, ValidationResult]:
    """Load raw catalog YAML and build the trait catalog."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    raw = RawCatalog.model_validate(data)
    logger.info(f"Loaded catalog from {path}")
    return build_catalog(raw)


def load_characters(path: Path) -> list[CharacterContext]:
    """Load a YAML list of character contexts."""
    with open(path) as f:
        data = yaml.safe_load(f) or []
    return [CharacterContext.model_validate(item) for item in data]
