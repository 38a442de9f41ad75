"""Global fixtures for Genetics tests."""

import pytest

from genetics.appearance.catalog import RawCatalog, build_catalog
from genetics.core.config import GeneticsConfig
from genetics.core.models import CharacterContext, Gender


SETTLER = "WorkshopNPCFaction [FACT:000337F3]"
RAIDER = 'RaiderFaction "Raiders" [FACT:0001CBED]'
ATOM = "ChildrenOfAtomFaction [FACT:0002FB84]"


class ScriptedStream:
    """Stream stand-in that returns scripted raw draws in order."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def next(self, modulus=None):
        value = self.draws[self.calls]
        self.calls += 1
        if modulus:
            return value % modulus
        return value


def raw_for_float(value: float) -> int:
    """Raw draw that uniform_float turns into (approximately) ``value``."""
    return round(value * 65535)


def _options(names, slot_start, **extra):
    return [
        {"name": name, "slot": slot_start + i, **extra}
        for i, name in enumerate(names)
    ]


def _tint_groups(female: bool) -> list[dict]:
    groups = [
        {
            "name": "SkinTints",
            "options": [
                {
                    "name": "Skin tone",
                    "slot": 1161,
                    "colors": [
                        {"color": "rgb(234, 192, 160)", "alpha": 1.0, "index": 1},
                        {"color": 0x3C5A8C, "alpha": 0.9, "index": 2},
                        {"color": "#6E4B32", "alpha": 0.8, "index": 3},
                    ],
                }
            ],
        },
        {"name": "FaceRegions", "options": _options(["Cheeks", "Forehead"], 1100)},
        {"name": "Brows", "options": _options(["Brows 01", "Brows 02", "Brows 03"], 1200)},
        {
            "name": "Blemishes",
            "options": _options(["Acne", "Rosacea", "Age Spots", "Lip Sores"], 1300),
        },
        {
            "name": "Markings",
            "options": _options(
                ["Freckles 01", "Freckles 02", "Moles 01", "Moles 02", "Birthmark"], 1400
            ),
        },
        {"name": "Grime", "options": _options(["Dirt 01", "Dirt 02", "Dirt 03", "Dirt 04"], 1500)},
        {
            "name": "Face Paint",
            "options": [
                {"name": "Raider Paint 01", "slot": 1600},
                {"name": "Raider Paint 02", "slot": 1601},
                {"name": "Atom Paint 01", "slot": 1602, "conditions": ["AtomFacePaints"]},
            ],
        },
        {"name": "Face Tattoos", "options": _options(["Tattoo 01"], 1700)},
        {
            "name": "Damage",
            "options": _options(
                ["Scar 01", "Scar 02", "Scar 03", "Scar 04", "Scar 05", "Scar 06", "Boxer Bruise"],
                1800,
            ),
        },
    ]
    if female:
        groups.append(
            {
                "name": "Makeup",
                "options": _options(
                    ["Lipstick", "Lip Liner", "Lip Gloss", "Lip Matte", "Eyeliner"], 1900
                ),
            }
        )
    return groups


def _preset(gender, offset):
    return {
        "gender": gender,
        "regions": {
            "1": [offset, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0],
            str(2 + int(offset * 10)): [0.0, offset, 0.0, 0.0, 0.0, 0.0, 1.0],
        },
        "presets": {"Nose": offset, "Jaw": 0.0},
        "values": [offset, 0.5, 0.0],
    }


@pytest.fixture
def raw_catalog_data():
    """Raw catalog in the YAML-compatible dict form."""
    return {
        "default_head_parts": {
            "female": ["FemaleHeadHuman", "FemaleEyesHumanLashes"],
            "male": ["MaleHeadHuman", "MaleEyesHumanLashes"],
        },
        "head_parts": [
            {"id": "EyesBrown", "type": "Eyes", "gender": "neutral"},
            {"id": "EyesBlue", "type": "Eyes", "gender": "neutral"},
            {"id": "HairFemaleBob", "type": "Hair", "gender": "female"},
            {"id": "HairFemaleBun", "type": "Hair", "gender": "female"},
            {"id": "HairMaleShort", "type": "Hair", "gender": "male"},
            {"id": "HairMaleBuzz", "type": "Hair", "gender": "male"},
            {"id": "BeardFull", "type": "Facial Hair", "gender": "neutral"},
            {"id": "BeardGoatee", "type": "Facial Hair", "gender": "neutral"},
        ],
        "hair_colors": [
            {"id": "HairColorRed", "gender": "female"},
            {"id": "HairColorGrey", "gender": "male"},
            {"id": "HairColorBrown", "gender": "neutral"},
        ],
        "tint_layers": {
            "female": _tint_groups(female=True),
            "male": _tint_groups(female=False),
        },
        "presets": [
            _preset("female", 0.1),
            _preset("female", 0.2),
            _preset("female", 0.3),
            _preset("male", 0.4),
            _preset("male", 0.5),
        ],
    }


@pytest.fixture
def built_catalog(raw_catalog_data):
    """(catalog, build result) built from the raw fixture."""
    return build_catalog(RawCatalog.model_validate(raw_catalog_data))


@pytest.fixture
def catalog(built_catalog):
    return built_catalog[0]


@pytest.fixture
def config():
    return GeneticsConfig()


@pytest.fixture
def settler_woman():
    return CharacterContext(
        identifier="WorkshopSettlerF01",
        name="Settler",
        gender=Gender.FEMALE,
        factions=frozenset({SETTLER}),
    )


@pytest.fixture
def raider_man():
    return CharacterContext(
        identifier="EncRaider01",
        name="Raider",
        gender=Gender.MALE,
        factions=frozenset({RAIDER}),
    )


@pytest.fixture
def sample_characters():
    """Mixed list of characters."""
    return [
        CharacterContext(identifier="EncRaider01", gender=Gender.MALE, factions=frozenset({RAIDER})),
        CharacterContext(identifier="EncRaider02", gender=Gender.FEMALE, factions=frozenset({RAIDER})),
        CharacterContext(identifier="WorkshopSettlerF01", gender=Gender.FEMALE, factions=frozenset({SETTLER})),
        CharacterContext(identifier="WorkshopSettlerM01", gender=Gender.MALE, factions=frozenset({SETTLER})),
        CharacterContext(identifier="AtomCultist01", gender=Gender.MALE, factions=frozenset({ATOM})),
        CharacterContext(identifier="UniqueNPC", gender=Gender.FEMALE, is_unique=True),
    ]


@pytest.fixture
def scripted_stream():
    """Factory for streams with scripted raw draws."""
    return ScriptedStream


@pytest.fixture
def float_draw():
    """Raw draw for a desired uniform_float value."""
    return raw_for_float


@pytest.fixture
def factions():
    return {"settler": SETTLER, "raider": RAIDER, "atom": ATOM}
