"""Generation output models: tint operations, morph blends, appearances."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .traits import REGION_FIELDS


# Template color index used for tints that carry a literal color
NO_TEMPLATE_COLOR = "-1"


class TintType(str, Enum):
    VALUE = "Value"
    VALUE_COLOR = "Value/Color"


class TintOperation(BaseModel):
    """One paint instruction. Later operations paint over earlier ones."""

    model_config = ConfigDict(frozen=True)

    type: TintType
    index: str
    value: float
    template_color: str | None = None
    red: int | None = Field(default=None, ge=0, le=255)
    green: int | None = Field(default=None, ge=0, le=255)
    blue: int | None = Field(default=None, ge=0, le=255)

    def to_layer(self) -> dict[str, Any]:
        """Storage form: intensity as a whole percentage.

        Rounds to the nearest percent instead of truncating, so a blended
        alpha of 0.99999 is stored as 100 rather than 99.
        """
        layer: dict[str, Any] = {
            "data_type": self.type.value,
            "index": self.index,
            "value": round(self.value * 100),
        }
        if self.type == TintType.VALUE_COLOR:
            layer["template_color_index"] = self.template_color
            layer["color"] = {"red": self.red, "green": self.green, "blue": self.blue}
        return layer


class MorphBlend(BaseModel):
    """Face morph data blended from two presets."""

    parents: tuple[int, int]
    weight: float
    regions: dict[str, list[float]] = Field(default_factory=dict)
    presets: dict[str, float] = Field(default_factory=dict)
    values: dict[str, float] = Field(default_factory=dict)

    def named_regions(self) -> dict[str, dict[str, float]]:
        return {
            region: dict(zip(REGION_FIELDS, vector))
            for region, vector in self.regions.items()
        }


class Appearance(BaseModel):
    """Everything generated for one character, handed to a sink."""

    identifier: str
    head_parts: list[str] = Field(default_factory=list)
    hair_color: str | None = None
    morphs: MorphBlend | None = None
    # None means tints are left untouched (unique characters)
    tints: list[TintOperation] | None = None

    def to_record(self) -> dict[str, Any]:
        record = {
            "identifier": self.identifier,
            "head_parts": list(self.head_parts),
            "hair_color": self.hair_color,
            "morphs": None,
            "tint_layers": None,
        }
        if self.morphs is not None:
            record["morphs"] = {
                "parents": list(self.morphs.parents),
                "weight": self.morphs.weight,
                "regions": self.morphs.named_regions(),
                "presets": dict(self.morphs.presets),
                "values": dict(self.morphs.values),
            }
        if self.tints is not None:
            record["tint_layers"] = [tint.to_layer() for tint in self.tints]
        return record
