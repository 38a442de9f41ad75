"""Deterministic per-character random streams.

Each character gets its own xorshift32 stream seeded from an MD5 digest of
the global seed and the character identifier. Nothing is shared between
streams, so a character's appearance depends only on its identifier and
the global seed, never on processing order.
"""

import hashlib
import struct

MAX_IDENTIFIER_BYTES = 255
UINT32_MASK = 0xFFFFFFFF


class Stream:
    """xorshift32 generator.

    State is never zero: zero is a fixed point of the update.
    """

    __slots__ = ("_state",)

    def __init__(self, state: int) -> None:
        state &= UINT32_MASK
        self._state = state or 1

    @property
    def state(self) -> int:
        return self._state

    def next(self, modulus: int | None = None) -> int:
        """Advance the stream.

        Args:
            modulus: If truthy, return a value in ``[0, modulus)``.
                Otherwise return the raw 32-bit state.
        """
        x = self._state
        x ^= (x << 13) & UINT32_MASK
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MASK
        self._state = x
        if modulus:
            return x % modulus
        return x


def seed_stream(identifier: str, global_seed: int) -> Stream:
    """Create the stream for one character.

    Args:
        identifier: Stable unique identifier of the character. Only the
            first 255 UTF-8 bytes are used.
        global_seed: Run-wide seed, an unsigned 32-bit integer.
    """
    if not 0 <= global_seed <= UINT32_MASK:
        raise ValueError(f"Seed must be an unsigned 32-bit integer, got {global_seed}")

    data = struct.pack(">I", global_seed) + identifier.encode("utf-8")[:MAX_IDENTIFIER_BYTES]
    digest = hashlib.md5(data).digest()
    (state,) = struct.unpack(">I", digest[:4])
    return Stream(state)


def uniform_float(stream: Stream) -> float:
    """Uniform value in ``[0, 1]`` from the low 16 bits of one draw."""
    return (stream.next() & 0xFFFF) / 65535.0


def approx_gaussian(stream: Stream, samples: int = 10) -> float:
    """Bell-shaped value in ``[0, 1]`` centred on 0.5.

    Mean of several uniform draws (central limit theorem). Not a true
    Gaussian: the tails are bounded.
    """
    total = 0.0
    for _ in range(samples):
        total += uniform_float(stream)
    return total / samples
