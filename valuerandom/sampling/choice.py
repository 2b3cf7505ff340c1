"""
valuerandom.sampling.choice

Booleans, element selection and sign choice.
"""

from collections.abc import Sequence
from typing import Any, Iterable, Optional, Tuple, TypeVar

import numpy as np

from ..core.state import ValueRandom
from ..core.validation import validate_not_none
from .primitives import next_f64, next_u32
from .ranges import next_int_below


T = TypeVar("T")

# uint.MaxValue / 2 with integer division
HALF_UINT32 = 0x7FFFFFFF


def next_bool(state: ValueRandom) -> Tuple[bool, ValueRandom]:
    """Fair coin: True iff a raw 32-bit draw exceeds 2**31 - 1."""
    value, state = next_u32(state)
    return value > HALF_UINT32, state


def next_bool_one_in(state: ValueRandom, denominator: int) -> Tuple[bool, ValueRandom]:
    """True with chance 1/denominator. A denominator of 2 is a 50% chance.

    A denominator <= 0 always returns False and does not advance the state.
    """
    if denominator > 0:
        value, state = next_f64(state)
        return value < 1 / denominator, state

    return False, state


def next_bool_chance(state: ValueRandom, chance: float) -> Tuple[bool, ValueRandom]:
    """True with probability chance, from 0.0 (never) to 1.0 (always)."""
    value, state = next_f64(state)
    return value < chance, state


def next_sign(state: ValueRandom) -> Tuple[int, ValueRandom]:
    """-1 or +1 with equal chance."""
    heads, state = next_bool(state)
    return (-1 if heads else 1), state


def _is_indexable(source: Any) -> bool:
    return isinstance(source, (Sequence, np.ndarray))


def next_indexed_element(
    state: ValueRandom,
    source: Sequence,
    default: Optional[T] = None,
) -> Tuple[Any, ValueRandom]:
    """Pick one element of a sized, indexable collection.

    Empty collections return default and single-element collections
    return their element; neither consumes a draw.

    Raises:
        InvalidArgumentError: If source is None.
    """
    validate_not_none(source, "source")

    length = len(source)
    if length == 0:
        return default, state
    if length == 1:
        return source[0], state

    index, state = next_int_below(state, length)
    return source[index], state


def next_streamed_element(
    state: ValueRandom,
    source: Iterable[T],
    default: Optional[T] = None,
) -> Tuple[Optional[T], ValueRandom]:
    """Pick one element of a single-pass iterable (reservoir sampling, k=1).

    Visits every element once. The n-th element replaces the held
    candidate with probability 1/n, so every element ends up chosen
    with probability 1/total without knowing the length upfront.
    Every element consumes one draw, the first included. An empty
    iterable returns default without consuming a draw.

    Raises:
        InvalidArgumentError: If source is None.
    """
    validate_not_none(source, "source")

    current = default
    count = 0
    for element in source:
        count += 1
        index, state = next_int_below(state, count)
        if index == 0:
            current = element

    return current, state


def next_element(
    state: ValueRandom,
    source: Iterable[T],
    default: Optional[T] = None,
) -> Tuple[Optional[T], ValueRandom]:
    """Pick one element of source.

    Sequences and numpy arrays are indexed directly; any other iterable
    is reservoir sampled in a single pass.
    """
    validate_not_none(source, "source")
    if _is_indexable(source):
        return next_indexed_element(state, source, default)
    return next_streamed_element(state, source, default)
