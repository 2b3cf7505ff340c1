"""
valuerandom

Deterministic, explicit-state xorshift128 random number generator.

Every sampler takes an immutable ValueRandom and returns the value
together with the next state:

    from valuerandom import ValueRandom, next_u32, next_int_range

    rng = ValueRandom.from_seed(42)
    a, rng = next_u32(rng)
    b, rng = next_int_range(rng, -10, 10)

Not suitable for cryptographic use.
"""

from .core import (
    ValueRandomError,
    ValidationError,
    InvalidRangeError,
    InvalidArgumentError,
    ConfigError,
    NumericalError,
    ValueRandom,
    advance,
    seed,
)

from .sampling import (
    next_u32,
    next_i32,
    next_i64,
    next_f64,
    next_f32,
    next_int_range,
    next_int_below,
    next_i64_range,
    next_i64_below,
    next_f64_range,
    next_f64_below,
    next_f32_range,
    next_f32_below,
    fill_bytes,
    next_bytes,
    next_bool,
    next_bool_one_in,
    next_bool_chance,
    next_sign,
    next_element,
    next_indexed_element,
    next_streamed_element,
    next_u32_array,
    next_f64_array,
    spawn,
)

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "ValueRandomError",
    "ValidationError",
    "InvalidRangeError",
    "InvalidArgumentError",
    "ConfigError",
    "NumericalError",
    # State
    "ValueRandom",
    "advance",
    "seed",
    # Sampling
    "next_u32",
    "next_i32",
    "next_i64",
    "next_f64",
    "next_f32",
    "next_int_range",
    "next_int_below",
    "next_i64_range",
    "next_i64_below",
    "next_f64_range",
    "next_f64_below",
    "next_f32_range",
    "next_f32_below",
    "fill_bytes",
    "next_bytes",
    "next_bool",
    "next_bool_one_in",
    "next_bool_chance",
    "next_sign",
    "next_element",
    "next_indexed_element",
    "next_streamed_element",
    "next_u32_array",
    "next_f64_array",
    "spawn",
]
