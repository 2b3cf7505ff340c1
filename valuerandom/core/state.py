"""
valuerandom.core.state

Generator state and transition - no global state.

Design Principles:
- State is an immutable value (four 32-bit words)
- Every operation takes a state and returns the next one
- Thread-safe by construction: nothing is ever mutated
"""

import time
import warnings
from dataclasses import dataclass
from typing import Tuple

from .validation import validate_seed, validate_uint32


UINT32_MASK = 0xFFFFFFFF

# Fixed non-zero tail for seeded states. Changing these changes every sequence.
SEED_Y = 842502087
SEED_Z = 3579807591
SEED_W = 273326509


@dataclass(frozen=True)
class ValueRandom:
    """128-bit xorshift generator state.

    A ValueRandom never changes. Sampling functions consume one state
    and hand back the next alongside the value, so a lineage is
    threaded explicitly through the caller:

        rng = ValueRandom.from_seed(42)
        a, rng = next_u32(rng)
        b, rng = next_u32(rng)

    Keeping an old state around and sampling from it again replays the
    same values, which is how lineages are forked.

    Attributes:
        x, y, z, w: Unsigned 32-bit state words.
    """

    x: int
    y: int
    z: int
    w: int

    def __post_init__(self):
        validate_uint32(self.x, "x")
        validate_uint32(self.y, "y")
        validate_uint32(self.z, "z")
        validate_uint32(self.w, "w")

    @classmethod
    def from_seed(cls, seed: int) -> "ValueRandom":
        """Create a state from a signed 32-bit seed.

        The seed's bit pattern becomes x; y, z and w are fixed constants.
        """
        validate_seed(seed)
        return cls(seed & UINT32_MASK, SEED_Y, SEED_Z, SEED_W)

    @classmethod
    def default(cls) -> "ValueRandom":
        """Create a state seeded from the millisecond tick counter.

        Output from this state is not reproducible across runs.
        """
        warnings.warn(
            "ValueRandom.default() seeds from the tick counter; "
            "output will not be reproducible. Pass an explicit seed "
            "for replayable runs.",
            UserWarning,
            stacklevel=2,
        )
        return cls.from_seed(tick_seed())

    @property
    def words(self) -> Tuple[int, int, int, int]:
        """The (x, y, z, w) state words."""
        return (self.x, self.y, self.z, self.w)

    def next(self) -> "ValueRandom":
        """Return the successor state."""
        return advance(self)


def advance(state: ValueRandom) -> ValueRandom:
    """Advance a state by one xorshift128 step.

    Pure and total: the same state always yields the same successor.
    """
    x = state.x
    w = state.w
    t = x ^ ((x << 11) & UINT32_MASK)
    return ValueRandom(state.y, state.z, w, w ^ (w >> 19) ^ t ^ (t >> 8))


def seed(n: int) -> ValueRandom:
    """Create a state from a signed 32-bit seed."""
    return ValueRandom.from_seed(n)


def to_int32(word: int) -> int:
    """Reinterpret an unsigned 32-bit word as a signed 32-bit integer."""
    word &= UINT32_MASK
    return word - (1 << 32) if word >= (1 << 31) else word


def tick_seed() -> int:
    """Milliseconds on the monotonic clock, wrapped to signed 32-bit."""
    return to_int32(time.monotonic_ns() // 1_000_000)
