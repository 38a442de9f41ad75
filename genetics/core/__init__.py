"""Core primitives: random streams, selection, color, convolution, config."""

from .rng import Stream, seed_stream, uniform_float, approx_gaussian
from .selection import pick_one, pick_n, choose_one, choose_n
from .color import (
    srgb_to_linear,
    linear_to_srgb,
    lightness,
    blend_colors,
    to_display,
    parse_color,
)
from .convolution import convolve, weighted_average, weighted_vector_average

__all__ = [
    # Random
    "Stream",
    "seed_stream",
    "uniform_float",
    "approx_gaussian",
    # Selection
    "pick_one",
    "pick_n",
    "choose_one",
    "choose_n",
    # Color
    "srgb_to_linear",
    "linear_to_srgb",
    "lightness",
    "blend_colors",
    "to_display",
    "parse_color",
    # Convolution
    "convolve",
    "weighted_average",
    "weighted_vector_average",
]
