"""
valuerandom.sampling.primitives

Primitive samplers.

Each sampler consumes one state and returns (value, next_state).
Every value is derived from the w word of the successor state,
except next_i64 which draws eight bytes through the byte filler.
"""

from typing import Tuple

import numpy as np

from ..core.exceptions import NumericalError
from ..core.state import ValueRandom, advance
from ..core.validation import INT64_MIN
from .buffers import fill_bytes


INT32_MASK = 0x7FFFFFFF

# Scale a masked 31-bit sample into [0, 1).
REAL_UNIT_INT = 1.0 / (INT32_MASK + 1.0)
# Scale a full 32-bit sample into [0, 1).
REAL_UNIT_UINT = 1.0 / (0xFFFFFFFF + 1.0)


def next_u32(state: ValueRandom) -> Tuple[int, ValueRandom]:
    """Unsigned 32-bit integer in [0, 2**32 - 1]. Fastest sampler."""
    state = advance(state)
    return state.w, state


def next_i32(state: ValueRandom) -> Tuple[int, ValueRandom]:
    """Non-negative 32-bit integer in [0, 2**31 - 1]."""
    state = advance(state)
    return state.w & INT32_MASK, state


def next_f64(state: ValueRandom) -> Tuple[float, ValueRandom]:
    """Double in [0.0, 1.0).

    The largest masked sample is 2**31 - 1, so 1.0 is never reached.
    """
    state = advance(state)
    return REAL_UNIT_INT * (state.w & INT32_MASK), state


def next_f32(state: ValueRandom) -> Tuple[float, ValueRandom]:
    """Single-precision value in [0.0, 1.0], returned as a Python float.

    Narrowing the double to float32 rounds to nearest, so draws within
    2**-25 of 1.0 become exactly 1.0. Callers needing a strict upper
    bound should use next_f64.
    """
    value, state = next_f64(state)
    return float(np.float32(value)), state


def _next_raw_i64(state: ValueRandom) -> Tuple[int, ValueRandom]:
    """Signed 64-bit integer from eight little-endian random bytes."""
    buf = bytearray(8)
    state = fill_bytes(state, buf)
    return int.from_bytes(buf, "little", signed=True), state


def next_i64(state: ValueRandom) -> Tuple[int, ValueRandom]:
    """Non-negative 64-bit integer in [0, 2**63 - 1].

    Uses two transitions. The raw draw is negated when negative.

    Raises:
        NumericalError: If the raw draw is -2**63, whose absolute value
            does not fit a signed 64-bit integer.
    """
    raw, state = _next_raw_i64(state)
    if raw == INT64_MIN:
        raise NumericalError(
            "absolute value of -2**63 is not representable as a signed 64-bit integer"
        )
    return abs(raw), state
