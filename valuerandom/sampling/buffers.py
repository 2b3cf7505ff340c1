"""
valuerandom.sampling.buffers

Byte filling.

Design: one algorithm over a writable memoryview. Anything exposing the
buffer protocol (bytearray, memoryview, numpy arrays) can be filled in
place; next_bytes is the owning convenience wrapper.
"""

from typing import Any, Tuple

from ..core.exceptions import InvalidArgumentError
from ..core.state import ValueRandom, advance
from ..core.validation import validate_non_negative, validate_not_none


def _byte_view(buffer: Any) -> memoryview:
    """Flat writable byte view over buffer."""
    try:
        view = memoryview(buffer)
    except TypeError as e:
        raise InvalidArgumentError(
            f"buffer must support the buffer protocol, got {type(buffer).__name__}"
        ) from e

    if view.readonly:
        raise InvalidArgumentError("buffer must be writable")
    if not view.c_contiguous:
        raise InvalidArgumentError("buffer must be C-contiguous")

    return view.cast("B")


def fill_bytes(state: ValueRandom, buffer: Any) -> ValueRandom:
    """Fill buffer with random bytes in place.

    Each transition emits the new w word as four little-endian bytes.
    A trailing partial group takes only as many low-order bytes as
    remain. An empty buffer returns the input state untouched.

    Args:
        state: Current state.
        buffer: Writable, contiguous buffer.

    Returns:
        State after the last transition used.

    Raises:
        InvalidArgumentError: If buffer is None, read-only or not contiguous.
    """
    validate_not_none(buffer, "buffer")
    view = _byte_view(buffer)

    length = len(view)
    if length == 0:
        return state

    i = 0
    # Whole 4-byte groups
    while length - i >= 4:
        state = advance(state)
        view[i:i + 4] = state.w.to_bytes(4, "little")
        i += 4

    if i < length:
        state = advance(state)
        view[i:] = state.w.to_bytes(4, "little")[:length - i]

    return state


def next_bytes(state: ValueRandom, count: int) -> Tuple[bytes, ValueRandom]:
    """Draw count random bytes into a new bytes object."""
    validate_non_negative(count, "count")
    buf = bytearray(count)
    state = fill_bytes(state, buf)
    return bytes(buf), state
