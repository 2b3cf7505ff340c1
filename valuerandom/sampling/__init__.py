"""
valuerandom.sampling

Sampling functions layered on the generator state.

Every function takes a ValueRandom and returns (value, next_state).
fill_bytes is the exception: it writes into the caller's buffer and
returns only the next state.

Exports:
- Primitive samplers
- Range mappers
- Byte filling
- Booleans, element selection, sign choice
- numpy bulk draws
- Lineage spawning
"""

from .primitives import (
    next_u32,
    next_i32,
    next_i64,
    next_f64,
    next_f32,
    REAL_UNIT_INT,
    REAL_UNIT_UINT,
)

from .ranges import (
    next_int_range,
    next_int_below,
    next_i64_range,
    next_i64_below,
    next_f64_range,
    next_f64_below,
    next_f32_range,
    next_f32_below,
)

from .buffers import fill_bytes, next_bytes

from .choice import (
    next_bool,
    next_bool_one_in,
    next_bool_chance,
    next_sign,
    next_element,
    next_indexed_element,
    next_streamed_element,
)

from .arrays import next_u32_array, next_f64_array

from .lineage import spawn

__all__ = [
    # Primitives
    "next_u32",
    "next_i32",
    "next_i64",
    "next_f64",
    "next_f32",
    "REAL_UNIT_INT",
    "REAL_UNIT_UINT",
    # Ranges
    "next_int_range",
    "next_int_below",
    "next_i64_range",
    "next_i64_below",
    "next_f64_range",
    "next_f64_below",
    "next_f32_range",
    "next_f32_below",
    # Buffers
    "fill_bytes",
    "next_bytes",
    # Choice
    "next_bool",
    "next_bool_one_in",
    "next_bool_chance",
    "next_sign",
    "next_element",
    "next_indexed_element",
    "next_streamed_element",
    # Arrays
    "next_u32_array",
    "next_f64_array",
    # Lineage
    "spawn",
]
