"""Per-character appearance generation.

Each character is processed in one synchronous pass with its own random
stream: head parts, hair color, morphs, then tints. The catalog is only
read, so passes are independent of each other and of processing order.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..core.config import GeneticsConfig
from ..core.models import Appearance, CharacterContext, TraitCatalog, ValidationResult
from ..core.rng import seed_stream
from .headparts import select_hair_color, select_head_parts
from .morphs import blend_morphs
from .sink import Sink
from .tints import TintSettings, compose_tints
from .validator import ensure_valid_catalog

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Summary of a generation run."""

    count: int = 0
    skipped_tints: list[str] = field(default_factory=list)
    validation: ValidationResult = field(default_factory=ValidationResult)


def generate_appearance(
    character: CharacterContext,
    catalog: TraitCatalog,
    config: GeneticsConfig,
    settings: TintSettings | None = None,
) -> Appearance:
    """Generate the appearance of one character.

    Args:
        character: The character to generate for
        catalog: Validated trait catalog
        config: Run configuration
        settings: Pre-parsed tint settings; parsed from config if omitted

    Returns:
        The character's appearance. ``tints`` is None for unique
        characters, whose face tints are left as authored.
    """
    settings = settings or TintSettings.from_config(config)
    stream = seed_stream(character.identifier, config.generation.seed)
    data = catalog.for_gender(character.is_female)

    head_parts = select_head_parts(
        data, stream, character.is_female, config.generation.beard_chance
    )
    hair_color = select_hair_color(data, stream)

    morphs = None
    if config.generation.use_morphs:
        morphs = blend_morphs(data.presets, stream)

    tints = None
    if not character.is_unique:
        tints = compose_tints(data, stream, character, settings)

    return Appearance(
        identifier=character.identifier,
        head_parts=head_parts,
        hair_color=hair_color,
        morphs=morphs,
        tints=tints,
    )


def generate_population(
    characters: Iterable[CharacterContext],
    catalog: TraitCatalog,
    sink: Sink,
    config: GeneticsConfig,
) -> GenerationResult:
    """Generate appearances for every character and hand them to the sink.

    The catalog is validated before the first character is touched.

    Raises:
        CatalogValidationError: A mandatory catalog category is empty.
    """
    result = GenerationResult(validation=ensure_valid_catalog(catalog, config))
    settings = TintSettings.from_config(config)

    for character in characters:
        logger.info(f"Changing appearance of {character.display_name}")
        appearance = generate_appearance(character, catalog, config, settings)
        if appearance.tints is None:
            result.skipped_tints.append(character.identifier)
        sink.write(appearance)
        result.count += 1

    return result
