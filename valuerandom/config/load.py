"""
valuerandom.config.load

Config loading and validation.
"""

import yaml
from pathlib import Path
from typing import Union, Dict, Any

from .schema import ValueRandomConfig, GeneratorConfig, SamplingConfig
from ..core.exceptions import ConfigError


def load_config(path: Union[str, Path]) -> ValueRandomConfig:
    """Load configuration from YAML file."""
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root in {path} must be a mapping")

    return config_from_dict(raw)


def config_from_dict(d: Dict[str, Any]) -> ValueRandomConfig:
    """Create ValueRandomConfig from dictionary."""
    try:
        generator = GeneratorConfig(**d.get("generator", {}))
        sampling = SamplingConfig(**d.get("sampling", {}))

        return ValueRandomConfig(
            generator=generator,
            sampling=sampling,
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config: {e}")


def save_config(config: ValueRandomConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    d = config_to_dict(config)

    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: ValueRandomConfig) -> Dict[str, Any]:
    """Convert ValueRandomConfig to dictionary."""
    return {
        "generator": {
            "seed": config.generator.seed,
            "seed_mode": config.generator.seed_mode,
            "n_lineages": config.generator.n_lineages,
        },
        "sampling": {
            "draws": config.sampling.draws,
            "log_every": config.sampling.log_every,
            "output_dir": config.sampling.output_dir,
        },
    }


def apply_overrides(
    config: ValueRandomConfig,
    overrides: Dict[str, Dict[str, Any]],
) -> ValueRandomConfig:
    """Return a new config with section values replaced, validated as on load.

    Args:
        config: Base configuration (not modified)
        overrides: {"generator": {...}, "sampling": {...}}; None values skipped

    Raises:
        ConfigError: Unknown section, unknown field or invalid value.
    """
    d = config_to_dict(config)
    for section, values in overrides.items():
        if section not in d:
            raise ConfigError(f"Unknown config section: {section}")
        d[section].update({k: v for k, v in values.items() if v is not None})
    return config_from_dict(d)
