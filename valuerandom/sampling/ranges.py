"""
valuerandom.sampling.ranges

Range mappers: bounded integer and real intervals [lower, upper).

Two-bound calls require lower_bound <= upper_bound; single-bound calls
sample [0, upper_bound) and require upper_bound >= 0. Both raise
InvalidRangeError otherwise.
"""

from typing import Tuple

import numpy as np

from ..core.state import ValueRandom, advance
from ..core.validation import (
    INT32_MAX,
    as_int,
    validate_bounds,
    validate_int32,
    validate_int64,
    validate_upper_bound,
)
from .primitives import (
    INT32_MASK,
    REAL_UNIT_INT,
    REAL_UNIT_UINT,
    _next_raw_i64,
    next_f32,
    next_f64,
)


def next_int_range(
    state: ValueRandom,
    lower_bound: int,
    upper_bound: int,
) -> Tuple[int, ValueRandom]:
    """Signed 32-bit integer in [lower_bound, upper_bound).

    Uses one transition. lower_bound == upper_bound returns lower_bound.
    """
    lower_bound = as_int(lower_bound, "lower_bound")
    upper_bound = as_int(upper_bound, "upper_bound")
    validate_int32(lower_bound, "lower_bound")
    validate_int32(upper_bound, "upper_bound")
    validate_bounds(lower_bound, upper_bound)

    state = advance(state)
    span = upper_bound - lower_bound

    if span > INT32_MAX:
        # 32-bit subtraction would overflow; scale the full word by the wide span
        return lower_bound + int(REAL_UNIT_UINT * state.w * span), state

    return lower_bound + int(REAL_UNIT_INT * (state.w & INT32_MASK) * span), state


def next_int_below(state: ValueRandom, upper_bound: int) -> Tuple[int, ValueRandom]:
    """Signed 32-bit integer in [0, upper_bound)."""
    validate_upper_bound(upper_bound)
    return next_int_range(state, 0, upper_bound)


def next_i64_range(
    state: ValueRandom,
    lower_bound: int,
    upper_bound: int,
) -> Tuple[int, ValueRandom]:
    """Signed 64-bit integer in [lower_bound, upper_bound).

    Reduces a raw 64-bit draw modulo the span, so spans that do not
    divide 2**64 are slightly biased toward small offsets. Not suitable
    where exact uniformity matters.

    Uses two transitions, also when lower_bound == upper_bound (which
    returns lower_bound).
    """
    lower_bound = as_int(lower_bound, "lower_bound")
    upper_bound = as_int(upper_bound, "upper_bound")
    validate_int64(lower_bound, "lower_bound")
    validate_int64(upper_bound, "upper_bound")
    validate_bounds(lower_bound, upper_bound)

    raw, state = _next_raw_i64(state)
    span = upper_bound - lower_bound
    if span == 0:
        return lower_bound, state

    # |raw rem span| with truncated remainder equals |raw| mod span
    return abs(raw) % span + lower_bound, state


def next_i64_below(state: ValueRandom, upper_bound: int) -> Tuple[int, ValueRandom]:
    """Signed 64-bit integer in [0, upper_bound)."""
    validate_upper_bound(upper_bound)
    return next_i64_range(state, 0, upper_bound)


def next_f64_range(
    state: ValueRandom,
    lower_bound: float,
    upper_bound: float,
) -> Tuple[float, ValueRandom]:
    """Double in [lower_bound, upper_bound)."""
    validate_bounds(lower_bound, upper_bound)
    value, state = next_f64(state)
    return value * (upper_bound - lower_bound) + lower_bound, state


def next_f64_below(state: ValueRandom, upper_bound: float) -> Tuple[float, ValueRandom]:
    """Double in [0.0, upper_bound)."""
    validate_upper_bound(upper_bound)
    return next_f64_range(state, 0.0, upper_bound)


def next_f32_range(
    state: ValueRandom,
    lower_bound: float,
    upper_bound: float,
) -> Tuple[float, ValueRandom]:
    """Single-precision value in [lower_bound, upper_bound).

    Arithmetic is done in float32. The upper bound is only as exclusive
    as next_f32, which can round up to 1.0.
    """
    validate_bounds(lower_bound, upper_bound)
    value, state = next_f32(state)
    low = np.float32(lower_bound)
    high = np.float32(upper_bound)
    return float(np.float32(value) * (high - low) + low), state


def next_f32_below(state: ValueRandom, upper_bound: float) -> Tuple[float, ValueRandom]:
    """Single-precision value in [0.0, upper_bound)."""
    validate_upper_bound(upper_bound)
    return next_f32_range(state, 0.0, upper_bound)
