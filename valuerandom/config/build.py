"""
valuerandom.config.build

Build generator states from configuration.
"""

from typing import List

from .schema import ValueRandomConfig
from ..core.state import ValueRandom
from ..sampling.lineage import spawn


def generator_from_config(config: ValueRandomConfig) -> ValueRandom:
    """Root state for a config.

    seed_mode "fixed" seeds from config.generator.seed; "tick" seeds
    from the clock and warns that the run is not reproducible.
    """
    if config.generator.seed_mode == "tick":
        return ValueRandom.default()
    return ValueRandom.from_seed(config.generator.seed)


def lineages_from_config(config: ValueRandomConfig) -> List[ValueRandom]:
    """One starting state per lineage.

    A single lineage is the root state itself; more are spawned from it.
    """
    root = generator_from_config(config)
    if config.generator.n_lineages == 1:
        return [root]
    children, _ = spawn(root, config.generator.n_lineages)
    return children
