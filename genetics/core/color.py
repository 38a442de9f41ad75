"""Color parsing and sRGB <-> linear conversion.

All color arithmetic (blending, lightness) happens in linear light. Values
are converted back to display bytes only when a tint is emitted.

Accepted color inputs:
    int          packed as 0xBBGGRR (red in the low byte)
    "rgba(r,g,b,a)"  channels 0-255, alpha kept as given
    "rgb(r,g,b)"     channels 0-255
    "#xxxxxx"    six hex digits, decoded like the packed int
    "xxxx"       bare hex digits (at least one decimal digit)
"""

import logging
import math
import re
from typing import Callable

from .models import LinearColor

logger = logging.getLogger(__name__)

WarnCallback = Callable[[str], None]

# Linear-light luminance weights
LUMA_RED = 0.2126
LUMA_GREEN = 0.7152
LUMA_BLUE = 0.0722

_FUNCTIONAL_RE = re.compile(r"^\s*(rgba?)\s*\((.*)\)?\s*$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")
_HASH_HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")
_BARE_HEX_RE = re.compile(r"(?:0[xX])?[0-9A-Fa-f]*[0-9][0-9A-Fa-f]*")


def srgb_to_linear(byte: int) -> float:
    """Decode one sRGB channel byte (0-255) to linear light."""
    u = byte / 255.0
    if u <= 0.04045:
        return u / 12.92
    return ((u + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> int:
    """Encode a linear channel to an sRGB byte.

    Rounds down, not to nearest; existing catalogs depend on it.
    """
    if value <= 0.0031308:
        u = value * 12.92
    else:
        u = 1.055 * value ** (1 / 2.4) - 0.055
    return min(255, max(0, math.floor(u * 255.0)))


def lightness(color: LinearColor) -> float:
    """Relative luminance of a linear color."""
    return LUMA_RED * color.red + LUMA_GREEN * color.green + LUMA_BLUE * color.blue


def blend_colors(first: LinearColor, second: LinearColor, weight: float) -> LinearColor:
    """Per-channel ``weight * first + (1 - weight) * second``.

    Alpha is blended only when both colors carry one.
    """

    def mix(a: float, b: float) -> float:
        return weight * a + (1 - weight) * b

    alpha = None
    if first.alpha is not None and second.alpha is not None:
        alpha = mix(first.alpha, second.alpha)
    return LinearColor(
        red=mix(first.red, second.red),
        green=mix(first.green, second.green),
        blue=mix(first.blue, second.blue),
        alpha=alpha,
    )


def to_display(color: LinearColor) -> tuple[int, int, int]:
    """sRGB bytes for a linear color."""
    return (
        linear_to_srgb(color.red),
        linear_to_srgb(color.green),
        linear_to_srgb(color.blue),
    )


def _from_packed(value: int) -> LinearColor:
    return LinearColor(
        red=srgb_to_linear(value & 0xFF),
        green=srgb_to_linear((value >> 8) & 0xFF),
        blue=srgb_to_linear((value >> 16) & 0xFF),
    )


def _leading_number(text: str) -> float | None:
    match = _NUMBER_RE.match(text)
    if not match:
        return None
    return float(match.group(1))


def _parse_functional(kind: str, body: str) -> LinearColor | None:
    parts = body.rstrip(")").split(",")
    expected = 4 if kind == "rgba" else 3
    if len(parts) != expected:
        return None

    numbers = [_leading_number(part) for part in parts]
    if any(n is None for n in numbers):
        return None

    red, green, blue = (min(255, max(0, int(n))) for n in numbers[:3])
    return LinearColor(
        red=srgb_to_linear(red),
        green=srgb_to_linear(green),
        blue=srgb_to_linear(blue),
        alpha=numbers[3] if kind == "rgba" else None,
    )


def parse_color(value: object, on_warn: WarnCallback | None = None) -> LinearColor | None:
    """Parse any supported color representation into linear light.

    Args:
        value: Packed int or color string (see module docstring).
        on_warn: Called once with a message when the value is not
            recognised. Defaults to logging a warning.

    Returns:
        The parsed color, or None when the value is not recognised. A None
        color must not produce a tint.
    """
    color: LinearColor | None = None

    if isinstance(value, int) and not isinstance(value, bool):
        color = _from_packed(value)
    elif isinstance(value, str):
        functional = _FUNCTIONAL_RE.match(value)
        if functional:
            color = _parse_functional(functional.group(1).lower(), functional.group(2))
        elif _HASH_HEX_RE.fullmatch(value.strip()):
            color = _from_packed(int(value.strip()[1:], 16))
        elif _BARE_HEX_RE.fullmatch(value.strip()):
            color = _from_packed(int(value.strip(), 16))

    if color is None:
        message = f"Not sure how to parse the color {value!r}"
        if on_warn is None:
            logger.warning(message)
        else:
            on_warn(message)
    return color
