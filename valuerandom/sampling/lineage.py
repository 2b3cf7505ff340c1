"""
valuerandom.sampling.lineage

Forking independent lineages for parallel workers.

Two lineages that start from equal states produce identical streams.
spawn() hands out children seeded from successive parent draws so each
worker starts somewhere different, while the whole tree stays
reproducible from the root seed.
"""

from typing import List, Tuple

from ..core.state import ValueRandom, to_int32
from ..core.validation import validate_non_negative
from .primitives import next_u32


def spawn(state: ValueRandom, n: int) -> Tuple[List[ValueRandom], ValueRandom]:
    """Create n child states from the parent lineage.

    Each child is seeded with one raw 32-bit draw reinterpreted as a
    signed seed. The parent advances once per child.

    Returns:
        (children, parent state after the draws)
    """
    validate_non_negative(n, "n")
    children = []
    for _ in range(n):
        word, state = next_u32(state)
        children.append(ValueRandom.from_seed(to_int32(word)))
    return children, state
