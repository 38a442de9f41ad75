"""Trait catalog models.

The catalog is built once per run and shared read-only by every character
pass, so every model here is frozen.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LinearColor(BaseModel):
    """Color in linear light, the only representation used for arithmetic.

    Produced by ``genetics.core.color.parse_color`` or by blending two
    existing colors.
    """

    model_config = ConfigDict(frozen=True)

    red: float
    green: float
    blue: float
    alpha: float | None = None


class TemplateColor(BaseModel):
    """One selectable color swatch of a tint option."""

    model_config = ConfigDict(frozen=True)

    color: LinearColor
    alpha: float = 1.0
    index: str


class TraitEntry(BaseModel):
    """A single tint option a character can receive."""

    model_config = ConfigDict(frozen=True)

    index: str
    colors: tuple[TemplateColor, ...] | None = None


class TintTarget(str, Enum):
    """Semantic slot a tint option is used for."""

    SKIN = "Skin"
    EYEBROWS = "Eyebrows"
    MAKEUP = "Makeup"
    LIPSTICK = "Lipstick"
    LIPS = "Lips"
    BLEMISHES = "Blemishes"
    FRECKLES = "Freckles"
    MOLES = "Moles"
    DIRT = "Dirt"
    RAIDERS = "Raiders"
    CHILDREN_OF_ATOM = "ChildrenOfAtom"
    BRUISING = "Bruising"
    SCARS = "Scars"
    # Not targets: options that are dropped from tint consideration
    IGNORED = "Ignored"
    UNCLASSIFIED = "Unclassified"


# Head part types every character must receive one of
REQUIRED_HEAD_PART_TYPES = ("Eyes", "Hair")
FACIAL_HAIR = "Facial Hair"

# Names of the 7 floats stored per face region
REGION_FIELDS = (
    "Position - X",
    "Position - Y",
    "Position - Z",
    "Rotation - X",
    "Rotation - Y",
    "Rotation - Z",
    "Scale",
)

# Names of the body morph values
BODY_VALUE_FIELDS = (
    "Head",
    "Upper Torso",
    "Arms",
    "Lower Torso",
    "Legs",
)


class MorphPreset(BaseModel):
    """A face preset used as a parent for morph blending."""

    model_config = ConfigDict(frozen=True)

    regions: dict[str, tuple[float, ...]] = Field(default_factory=dict)
    presets: dict[str, float] = Field(default_factory=dict)
    values: tuple[float, ...] = ()

    @model_validator(mode="after")
    def _check_lengths(self) -> "MorphPreset":
        for region, vector in self.regions.items():
            if len(vector) != len(REGION_FIELDS):
                raise ValueError(
                    f"Region {region} has {len(vector)} values, "
                    f"expected {len(REGION_FIELDS)}"
                )
        if len(self.values) > len(BODY_VALUE_FIELDS):
            raise ValueError(
                f"Preset has {len(self.values)} body values, "
                f"at most {len(BODY_VALUE_FIELDS)} allowed"
            )
        return self

    def named_values(self) -> dict[str, float]:
        """Body values keyed by field name; missing trailing values are absent."""
        return dict(zip(BODY_VALUE_FIELDS, self.values))


class GenderCatalog(BaseModel):
    """Everything available to characters of one gender."""

    model_config = ConfigDict(frozen=True)

    default_head_parts: tuple[str, ...] = ()
    head_parts: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    hair_colors: tuple[str, ...] = ()
    tints: dict[TintTarget, tuple[TraitEntry, ...]] = Field(default_factory=dict)
    presets: tuple[MorphPreset, ...] = ()

    def traits(self, target: TintTarget) -> tuple[TraitEntry, ...]:
        """Tint options for a target, empty if the catalog has none."""
        return self.tints.get(target, ())

    def parts(self, part_type: str) -> tuple[str, ...]:
        return self.head_parts.get(part_type, ())


class TraitCatalog(BaseModel):
    """Read-only catalog shared across all character passes."""

    model_config = ConfigDict(frozen=True)

    female: GenderCatalog
    male: GenderCatalog

    def for_gender(self, is_female: bool) -> GenderCatalog:
        return self.female if is_female else self.male
