"""
valuerandom.config.schema

Configuration schemas using dataclasses.

Design: All config fields have explicit types. Defaults only at top level.
"""

from dataclasses import dataclass, field

from ..core.validation import INT32_MAX, INT32_MIN


SEED_MODES = ("fixed", "tick")


@dataclass
class GeneratorConfig:
    """Root generator configuration."""
    seed: int = 42
    seed_mode: str = "fixed"  # "fixed" | "tick"
    n_lineages: int = 1

    def __post_init__(self):
        if self.seed_mode not in SEED_MODES:
            raise ValueError(f"Invalid seed_mode: {self.seed_mode}")
        if not (INT32_MIN <= self.seed <= INT32_MAX):
            raise ValueError(f"seed must fit a signed 32-bit integer, got {self.seed}")
        if self.n_lineages < 1:
            raise ValueError("n_lineages must be >= 1")


@dataclass
class SamplingConfig:
    """Sampling run configuration."""
    draws: int = 1000
    log_every: int = 100
    output_dir: str = "runs"

    def __post_init__(self):
        if self.draws < 0:
            raise ValueError("draws must be non-negative")
        if self.log_every <= 0:
            raise ValueError("log_every must be positive")


@dataclass
class ValueRandomConfig:
    """Top-level configuration.

    This is the ONLY place defaults are specified.
    All sub-configs receive explicit values.
    """
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)

    @classmethod
    def minimal(cls) -> "ValueRandomConfig":
        """Factory for minimal testing configuration."""
        return cls(
            generator=GeneratorConfig(seed=7, n_lineages=2),
            sampling=SamplingConfig(draws=16, log_every=4),
        )
