"""Tint layer composition.

Builds the ordered list of face tint operations for one character. Later
operations paint over earlier ones, so the output is assembled from
separate layers in a fixed order:

    base (skin, eyebrows)
    blemishes (blemishes, freckles or moles)    not under concealer
    scars                                       quartered under concealer
    surface (lipstick, lips, dirt, faction paint)

The stream is consumed in a different order from the output order: base,
blemishes, lipstick and dirt, scars, faction paint. Both orders are part of
the reproducibility contract.
"""

import logging
from dataclasses import dataclass

from ..core.color import blend_colors, lightness, linear_to_srgb, parse_color, to_display
from ..core.config import GeneticsConfig
from ..core.models import (
    NO_TEMPLATE_COLOR,
    CharacterContext,
    GenderCatalog,
    LinearColor,
    TintOperation,
    TintTarget,
    TintType,
)
from ..core.rng import Stream, uniform_float
from ..core.selection import choose_n, choose_one

logger = logging.getLogger(__name__)

CONCEALER_SCAR_DIVISOR = 4


@dataclass(frozen=True)
class TintSettings:
    """Run-wide inputs to tint composition."""

    apply_foundation: bool = True
    apply_makeup: bool = False
    pale_lipstick: LinearColor | None = None
    dark_lipstick: LinearColor | None = None
    settler_faction: str = ""
    raider_faction: str = ""
    atom_faction: str = ""

    @classmethod
    def from_config(cls, config: GeneticsConfig) -> "TintSettings":
        """Parse lipstick colors once per run.

        Unparseable colors become None; catalog validation reports them.
        """
        return cls(
            apply_foundation=config.makeup.apply_foundation,
            apply_makeup=config.makeup.apply_makeup,
            pale_lipstick=parse_color(config.makeup.pale_lipstick_color, logger.debug),
            dark_lipstick=parse_color(config.makeup.dark_lipstick_color, logger.debug),
            settler_faction=config.factions.settler,
            raider_faction=config.factions.raider,
            atom_faction=config.factions.children_of_atom,
        )


def _low_intensity(stream: Stream) -> float:
    return 0.05 + uniform_float(stream) * 0.2


def skin_layer(data: GenderCatalog, stream: Stream) -> tuple[TintOperation, float]:
    """Blend two skin swatches into the base skin tint.

    The blend weight is folded into ``(0.5, 1]`` and the swatches swapped
    when folding, so whichever swatch ends up first always dominates.

    Returns:
        Tuple of (skin tint, lightness of the blended skin color)
    """
    skin = data.traits(TintTarget.SKIN)[0]
    swatches = choose_n(skin.colors or (), 2, stream)
    weight = uniform_float(stream)
    if weight <= 0.5:
        weight = 1 - weight
        swatches.reverse()

    first, second = swatches
    color = blend_colors(first.color, second.color, weight)
    red, green, blue = to_display(color)
    tint = TintOperation(
        type=TintType.VALUE_COLOR,
        index=skin.index,
        template_color=first.index,
        value=weight * first.alpha + (1 - weight) * second.alpha,
        red=red,
        green=green,
        blue=blue,
    )
    return tint, lightness(color)


def blemish_layer(data: GenderCatalog, stream: Stream, skin_lightness: float) -> list[TintOperation]:
    """Blemishes, then freckles on pale skin or occasionally moles."""
    tints = []
    count = stream.next(5)
    for trait in choose_n(data.traits(TintTarget.BLEMISHES), count, stream):
        tints.append(TintOperation(type=TintType.VALUE, index=trait.index, value=_low_intensity(stream)))

    # Paler skin gets stronger freckles
    if uniform_float(stream) * skin_lightness >= 0.25:
        for trait in data.traits(TintTarget.FRECKLES):
            tints.append(
                TintOperation(
                    type=TintType.VALUE,
                    index=trait.index,
                    value=uniform_float(stream) * (1 - skin_lightness),
                )
            )
    elif uniform_float(stream) <= 0.1:
        count = stream.next(2) + 1
        for trait in choose_n(data.traits(TintTarget.MOLES), count, stream):
            tints.append(TintOperation(type=TintType.VALUE, index=trait.index, value=_low_intensity(stream)))
    return tints


def makeup_layer(
    data: GenderCatalog,
    stream: Stream,
    skin_lightness: float,
    settings: TintSettings,
) -> list[TintOperation]:
    """Lipstick shaded to the skin, then a gloss or matte finish."""
    tints = []
    lipsticks = data.traits(TintTarget.LIPSTICK)
    if not lipsticks:
        logger.warning("No lipstick tint available, skipping lipstick")
    elif settings.pale_lipstick is None or settings.dark_lipstick is None:
        logger.debug("Lipstick colors could not be parsed, skipping lipstick")
    else:
        color = blend_colors(settings.pale_lipstick, settings.dark_lipstick, skin_lightness)
        red, green, blue = to_display(color)
        tints.append(
            TintOperation(
                type=TintType.VALUE_COLOR,
                index=lipsticks[0].index,
                template_color=NO_TEMPLATE_COLOR,
                value=1.0,
                red=red,
                green=green,
                blue=blue,
            )
        )

    lips = choose_one(data.traits(TintTarget.LIPS), stream)
    if lips is not None:
        tints.append(TintOperation(type=TintType.VALUE, index=lips.index, value=uniform_float(stream)))
    return tints


def dirt_layer(data: GenderCatalog, stream: Stream) -> list[TintOperation]:
    """One to three randomly colored grime tints."""
    tints = []
    count = stream.next(3) + 1
    for trait in choose_n(data.traits(TintTarget.DIRT), count, stream):
        value = _low_intensity(stream)
        red = linear_to_srgb(uniform_float(stream))
        green = linear_to_srgb(uniform_float(stream))
        blue = linear_to_srgb(uniform_float(stream))
        tints.append(
            TintOperation(
                type=TintType.VALUE_COLOR,
                index=trait.index,
                template_color=NO_TEMPLATE_COLOR,
                value=value,
                red=red,
                green=green,
                blue=blue,
            )
        )
    return tints


def scar_layer(data: GenderCatalog, stream: Stream, is_settler: bool) -> list[TintOperation]:
    """Settlers get one faint scar, everyone else one to five heavier ones."""
    scars = data.traits(TintTarget.SCARS)
    if is_settler:
        scar = choose_one(scars, stream)
        if scar is None:
            return []
        return [TintOperation(type=TintType.VALUE, index=scar.index, value=_low_intensity(stream))]

    tints = []
    count = stream.next(5) + 1
    for trait in choose_n(scars, count, stream):
        value = 0.2 + uniform_float(stream) * 0.5
        tints.append(TintOperation(type=TintType.VALUE, index=trait.index, value=value))
    return tints


def faction_paint_layer(
    data: GenderCatalog,
    stream: Stream,
    factions: frozenset[str],
    settings: TintSettings,
) -> list[TintOperation]:
    tints = []
    if settings.raider_faction in factions:
        paint = choose_one(data.traits(TintTarget.RAIDERS), stream)
        if paint is not None:
            tints.append(TintOperation(type=TintType.VALUE, index=paint.index, value=1.0))
    if settings.atom_faction in factions:
        paint = choose_one(data.traits(TintTarget.CHILDREN_OF_ATOM), stream)
        if paint is not None:
            value = 0.25 + uniform_float(stream) * 0.5
            tints.append(TintOperation(type=TintType.VALUE, index=paint.index, value=value))
    return tints


def compose_tints(
    data: GenderCatalog,
    stream: Stream,
    character: CharacterContext,
    settings: TintSettings,
) -> list[TintOperation]:
    """Compose the ordered tint operations for one character.

    Args:
        data: Catalog for the character's gender
        stream: The character's random stream
        character: Gender and faction memberships
        settings: Run-wide makeup and faction settings

    Returns:
        Tint operations in painting order
    """
    is_settler = settings.settler_faction in character.factions
    concealer = character.is_female and is_settler and settings.apply_foundation

    skin, skin_lightness = skin_layer(data, stream)
    base = [skin]
    eyebrows = choose_one(data.traits(TintTarget.EYEBROWS), stream)
    if eyebrows is not None:
        base.append(TintOperation(type=TintType.VALUE, index=eyebrows.index, value=1.0))

    blemishes = [] if concealer else blemish_layer(data, stream, skin_lightness)

    surface = []
    if concealer and settings.apply_makeup:
        surface.extend(makeup_layer(data, stream, skin_lightness, settings))
    if not is_settler:
        surface.extend(dirt_layer(data, stream))

    scars = scar_layer(data, stream, is_settler)
    if concealer:
        scars = [
            scar.model_copy(update={"value": scar.value / CONCEALER_SCAR_DIVISOR})
            for scar in scars
        ]

    surface.extend(faction_paint_layer(data, stream, character.factions, settings))

    logger.debug(
        f"{character.identifier}: {len(base)} base, {len(blemishes)} blemish, "
        f"{len(scars)} scar, {len(surface)} surface tints (concealer={concealer})"
    )
    return [*base, *blemishes, *scars, *surface]
