"""Head part and hair color selection."""

from ..core.models import FACIAL_HAIR, REQUIRED_HEAD_PART_TYPES, GenderCatalog
from ..core.rng import Stream
from ..core.selection import pick_one


def select_head_parts(
    data: GenderCatalog,
    stream: Stream,
    is_female: bool,
    beard_chance: int,
) -> list[str]:
    """Default head parts plus one part of each required type.

    Men get facial hair when a draw in ``[0, 100)`` is at most
    ``beard_chance``.
    """
    head_parts = list(data.default_head_parts)
    for part_type in REQUIRED_HEAD_PART_TYPES:
        pick_one(data.parts(part_type), stream, head_parts.append)
    if not is_female:
        if stream.next(100) <= beard_chance:
            pick_one(data.parts(FACIAL_HAIR), stream, head_parts.append)
    return head_parts


def select_hair_color(data: GenderCatalog, stream: Stream) -> str | None:
    colors: list[str] = []
    pick_one(data.hair_colors, stream, colors.append)
    return colors[0] if colors else None
