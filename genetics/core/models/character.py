"""Per-character input context."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"


class CharacterContext(BaseModel):
    """What the generator needs to know about one character.

    The identifier seeds the character's random stream, so it must be
    stable across runs for results to be reproducible.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(min_length=1)
    name: str | None = None
    gender: Gender
    factions: frozenset[str] = frozenset()
    is_unique: bool = False

    @property
    def is_female(self) -> bool:
        return self.gender == Gender.FEMALE

    @property
    def display_name(self) -> str:
        return self.name or self.identifier
