"""Map raw tint group/option names to semantic tint targets.

Classification is a total function: every ``(group, option, atom)`` triple
maps to a target, with ``IGNORED`` for options that are deliberately
unused and ``UNCLASSIFIED`` for anything the tables do not know.
"""

from ..core.models import TintTarget

# Global variable that marks a face paint option as Children of Atom
ATOM_FACE_PAINT_GLOBAL = "AtomFacePaints"

# Exact (group, option) matches, checked first
OPTION_TARGETS: dict[tuple[str, str], TintTarget] = {
    ("Makeup", "Lipstick"): TintTarget.LIPSTICK,
    ("Makeup", "Lip Liner"): TintTarget.IGNORED,
    ("Makeup", "Lip Gloss"): TintTarget.LIPS,
    ("Makeup", "Lip Matte"): TintTarget.LIPS,
}

# (group, option prefix) matches, checked in order
PREFIX_TARGETS: list[tuple[str, str, TintTarget]] = [
    ("Blemishes", "Lip", TintTarget.IGNORED),
    ("Markings", "Freckles", TintTarget.FRECKLES),
    ("Markings", "Moles", TintTarget.MOLES),
    ("Damage", "Boxer", TintTarget.BRUISING),
    ("Damage", "Scar", TintTarget.SCARS),
]

# Fallback per group
GROUP_TARGETS: dict[str, TintTarget] = {
    "FaceRegions": TintTarget.IGNORED,
    "SkinTints": TintTarget.SKIN,
    "Brows": TintTarget.EYEBROWS,
    "Makeup": TintTarget.MAKEUP,
    "Blemishes": TintTarget.BLEMISHES,
    "Grime": TintTarget.DIRT,
    "Face Paint": TintTarget.RAIDERS,
    "Face Tattoos": TintTarget.RAIDERS,
}


def classify_tint_option(
    group_name: str,
    option_name: str,
    has_atom_condition: bool = False,
) -> TintTarget:
    """Classify one tint option.

    Args:
        group_name: Tint group the option belongs to (e.g. "Markings").
        option_name: Option name within the group (e.g. "Freckles 02").
        has_atom_condition: Whether the option is gated on the Children of
            Atom face paint global.

    Returns:
        The option's target, ``UNCLASSIFIED`` if nothing matches.
    """
    exact = OPTION_TARGETS.get((group_name, option_name))
    if exact is not None:
        return exact

    for group, prefix, target in PREFIX_TARGETS:
        if group == group_name and option_name.startswith(prefix):
            return target

    if group_name == "Face Paint" and has_atom_condition:
        return TintTarget.CHILDREN_OF_ATOM

    return GROUP_TARGETS.get(group_name, TintTarget.UNCLASSIFIED)


def is_tint_target(target: TintTarget) -> bool:
    """Whether options with this target are kept in the catalog."""
    return target not in (TintTarget.IGNORED, TintTarget.UNCLASSIFIED)
