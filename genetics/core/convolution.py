"""Two-parent trait convolution.

"Convolution" here means merging two parent trait maps into a child map
key by key, not signal-processing convolution.
"""

from typing import Callable, Mapping, Sequence, TypeVar

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")


def convolve(
    parent_a: Mapping[K, V],
    parent_b: Mapping[K, V],
    default: V,
    combine: Callable[[K, V, V], R],
) -> dict[K, R]:
    """Merge two trait maps.

    Every key of either parent appears exactly once in the child. A key
    missing from one parent is passed to ``combine`` as ``default`` in that
    parent's position. Presence is a membership test, so a key mapped to
    0 still counts as present.

    Example:
        >>> convolve({"a": 1.0}, {"b": 3.0}, 0.0, lambda k, x, y: x + y)
        {'a': 1.0, 'b': 3.0}
    """
    child: dict[K, R] = {}
    for key, value in parent_a.items():
        if key in parent_b:
            child[key] = combine(key, value, parent_b[key])
        else:
            child[key] = combine(key, value, default)
    for key, value in parent_b.items():
        if key in child:
            continue
        child[key] = combine(key, default, value)
    return child


def weighted_average(weight: float) -> Callable[[object, float, float], float]:
    """Scalar combiner ``weight * v1 + (1 - weight) * v2``."""

    def combine(_key: object, value1: float, value2: float) -> float:
        return weight * value1 + (1 - weight) * value2

    return combine


def weighted_vector_average(
    weight: float,
) -> Callable[[object, Sequence[float], Sequence[float]], list[float]]:
    """Element-wise ``weighted_average`` for equal-length vectors."""

    def combine(key: object, value1: Sequence[float], value2: Sequence[float]) -> list[float]:
        if len(value1) != len(value2):
            raise ValueError(
                f"Cannot blend {key}: vector lengths differ ({len(value1)} != {len(value2)})"
            )
        return [weight * a + (1 - weight) * b for a, b in zip(value1, value2)]

    return combine
