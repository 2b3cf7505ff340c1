"""
valuerandom.config

Configuration management for valuerandom.

Exports:
- Config schemas
- Loading/saving utilities
- Hashing for reproducibility
- Generator construction from config
"""

from .schema import (
    ValueRandomConfig,
    GeneratorConfig,
    SamplingConfig,
)

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
    apply_overrides,
)

from .hashing import (
    hash_config,
    hash_dict,
    hash_state,
    config_signature,
)

from .build import (
    generator_from_config,
    lineages_from_config,
)

__all__ = [
    # Schemas
    "ValueRandomConfig",
    "GeneratorConfig",
    "SamplingConfig",
    # Load/save
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
    "apply_overrides",
    # Hashing
    "hash_config",
    "hash_dict",
    "hash_state",
    "config_signature",
    # Build
    "generator_from_config",
    "lineages_from_config",
]
