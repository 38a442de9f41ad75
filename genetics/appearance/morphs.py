"""Face morph blending.

Two distinct presets are chosen as parents and every region, named preset
slider and body value is blended with one bell-shaped weight, so children
look like a mix of two parents rather than an average of everyone.
"""

import logging
from typing import Sequence

from ..core.convolution import convolve, weighted_average, weighted_vector_average
from ..core.models import BODY_VALUE_FIELDS, REGION_FIELDS, MorphBlend, MorphPreset
from ..core.rng import Stream, approx_gaussian

logger = logging.getLogger(__name__)


def pick_parents(count: int, stream: Stream) -> tuple[int, int]:
    """Two distinct indices in ``[0, count)`` using exactly two draws."""
    first = stream.next(count)
    second = stream.next(count - 1)
    if second >= first:
        second += 1
    return first, second


def blend_morphs(presets: Sequence[MorphPreset], stream: Stream) -> MorphBlend | None:
    """Blend two randomly chosen presets.

    Returns None, without touching the stream, when fewer than two presets
    are available.
    """
    if len(presets) < 2:
        return None

    i1, i2 = pick_parents(len(presets), stream)
    parent1 = presets[i1]
    parent2 = presets[i2]
    weight = approx_gaussian(stream)
    logger.debug(f"Blending presets {i1} and {i2} with weight {weight:.3f}")

    scalar = weighted_average(weight)
    regions = convolve(
        parent1.regions,
        parent2.regions,
        (0.0,) * len(REGION_FIELDS),
        weighted_vector_average(weight),
    )
    sliders = convolve(parent1.presets, parent2.presets, 0.0, scalar)
    blended = convolve(parent1.named_values(), parent2.named_values(), 0.0, scalar)
    # Body values are always written in full
    values = {field: blended.get(field, 0.0) for field in BODY_VALUE_FIELDS}

    return MorphBlend(
        parents=(i1, i2),
        weight=weight,
        regions=regions,
        presets=sliders,
        values=values,
    )
