"""
valuerandom.config.hashing

Deterministic hashing for reproducibility tracking.
"""

import hashlib
import json
from typing import Any, Dict

from .schema import ValueRandomConfig
from .load import config_to_dict
from ..core.state import ValueRandom


def hash_config(config: ValueRandomConfig) -> str:
    """Compute deterministic hash of configuration.

    Returns:
        16-character hex string.
    """
    d = config_to_dict(config)
    return hash_dict(d)


def hash_dict(d: Dict[str, Any]) -> str:
    """Compute deterministic hash of dictionary.

    Keys are sorted for determinism.
    """
    json_str = json.dumps(d, sort_keys=True, separators=(",", ":"))

    # SHA256 hash, truncated to 16 chars
    h = hashlib.sha256(json_str.encode()).hexdigest()[:16]
    return h


def hash_state(state: ValueRandom) -> str:
    """16-character fingerprint of a generator state.

    Equal states always share a fingerprint, so logs can show where
    two lineages converged without dumping raw words.
    """
    packed = b"".join(word.to_bytes(4, "little") for word in state.words)
    return hashlib.sha256(packed).hexdigest()[:16]


def config_signature(config: ValueRandomConfig) -> str:
    """Generate human-readable signature for config.

    Format: s{seed}_{seed_mode}_{n_lineages}L_{hash}

    Example: "s42_fixed_1L_a1b2c3d4e5f6a7b8"
    """
    h = hash_config(config)
    return (
        f"s{config.generator.seed}_"
        f"{config.generator.seed_mode}_"
        f"{config.generator.n_lineages}L_"
        f"{h}"
    )
