"""Selection primitives driven by a character's random stream."""

from typing import Callable, Sequence, TypeVar

from .rng import Stream

T = TypeVar("T")


def pick_one(items: Sequence[T], stream: Stream, visit: Callable[[T], None]) -> None:
    """Visit one uniformly chosen item. Does nothing for an empty sequence."""
    if not items:
        return
    visit(items[stream.next(len(items))])


def pick_n(
    items: Sequence[T],
    count: int,
    stream: Stream,
    visit: Callable[[T], None],
) -> None:
    """Visit ``count`` distinct items, preserving their original order.

    Draws ``count`` offsets in ``[0, len(items) - count]``, sorts them and
    visits ``items[offset + i]``; adding ``i`` keeps indices strictly
    increasing even when offsets tie. All offsets are drawn before the
    first visit, so visitors may consume the stream freely.

    Asking for at least as many items as exist visits every item in order.
    """
    span = len(items) - count
    if span <= 0:
        for item in items:
            visit(item)
        return
    if count <= 0:
        return

    offsets = sorted(stream.next(span + 1) for _ in range(count))
    for i, offset in enumerate(offsets):
        visit(items[offset + i])


def choose_one(items: Sequence[T], stream: Stream) -> T | None:
    """Return the item ``pick_one`` would visit, or None if there are none."""
    chosen: list[T] = []
    pick_one(items, stream, chosen.append)
    return chosen[0] if chosen else None


def choose_n(items: Sequence[T], count: int, stream: Stream) -> list[T]:
    """Return the items ``pick_n`` would visit, in visiting order."""
    chosen: list[T] = []
    pick_n(items, count, stream, chosen.append)
    return chosen
