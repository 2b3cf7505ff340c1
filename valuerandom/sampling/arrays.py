"""
valuerandom.sampling.arrays

Bulk draws into numpy arrays.

Each array holds exactly the values the scalar sampler would return
when called size times in a row, and the returned state is the state
after the last of those calls.
"""

from typing import Tuple

import numpy as np

from ..core.state import ValueRandom
from ..core.validation import validate_non_negative
from .primitives import next_f64, next_u32


def next_u32_array(state: ValueRandom, size: int) -> Tuple[np.ndarray, ValueRandom]:
    """[size] uint32 array of consecutive next_u32 draws."""
    validate_non_negative(size, "size")
    out = np.empty(size, dtype=np.uint32)
    for i in range(size):
        out[i], state = next_u32(state)
    return out, state


def next_f64_array(state: ValueRandom, size: int) -> Tuple[np.ndarray, ValueRandom]:
    """[size] float64 array of consecutive next_f64 draws in [0, 1)."""
    validate_non_negative(size, "size")
    out = np.empty(size, dtype=np.float64)
    for i in range(size):
        out[i], state = next_f64(state)
    return out, state
