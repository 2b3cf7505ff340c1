#!/usr/bin/env python3
"""
valuerandom Sampling Script

Draws doubles from each configured lineage and logs the stream.

Usage:
    python scripts/sample.py --config configs/minimal.yaml
    python scripts/sample.py --config configs/default.yaml --seed 1234
    python scripts/sample.py --config configs/default.yaml --dry-run
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

import numpy as np

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from valuerandom.config.schema import ValueRandomConfig
from valuerandom.config.load import apply_overrides, load_config, save_config
from valuerandom.config.build import lineages_from_config
from valuerandom.config.hashing import config_signature, hash_state
from valuerandom.reporting import create_logger
from valuerandom.sampling import next_f64


def parse_args():
    parser = argparse.ArgumentParser(description="Draw reproducible samples from valuerandom")
    parser.add_argument("--config", type=str, required=True, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=None, help="Override random seed")
    parser.add_argument("--draws", type=int, default=None, help="Override draws per lineage")
    parser.add_argument("--output-dir", type=str, default=None, help="Override output directory")
    parser.add_argument("--dry-run", action="store_true", help="Validate config without sampling")
    parser.add_argument("--name", type=str, default=None, help="Run name")
    return parser.parse_args()


def setup_run(config: ValueRandomConfig, name: str = None) -> Path:
    """Create run directory with timestamp."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_name = name or f"{config_signature(config)}_{timestamp}"

    output_dir = Path(config.sampling.output_dir) / run_name
    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / "logs").mkdir(exist_ok=True)

    return output_dir


def main():
    args = parse_args()

    print("=" * 60)
    print("VALUERANDOM SAMPLING")
    print("=" * 60)

    print(f"\nLoading config: {args.config}")
    config = load_config(args.config)

    # Apply overrides; an explicit seed pins the generator to fixed mode
    config = apply_overrides(config, {
        "generator": {
            "seed": args.seed,
            "seed_mode": "fixed" if args.seed is not None else None,
        },
        "sampling": {
            "draws": args.draws,
            "output_dir": args.output_dir or None,
        },
    })

    print(f"\nConfiguration:")
    print(f"  Seed: {config.generator.seed} ({config.generator.seed_mode})")
    print(f"  Lineages: {config.generator.n_lineages}")
    print(f"  Draws per lineage: {config.sampling.draws}")
    print(f"  Signature: {config_signature(config)}")

    if args.dry_run:
        print("\n[DRY RUN] Config validated. Exiting.")
        return

    run_dir = setup_run(config, args.name)
    print(f"Run directory: {run_dir}")
    save_config(config, run_dir / "config.yaml")

    log = create_logger(run_dir)

    for lineage_id, rng in enumerate(lineages_from_config(config)):
        print(f"\nLineage {lineage_id}: start {hash_state(rng)}")
        values = np.empty(config.sampling.draws, dtype=np.float64)

        for i in range(config.sampling.draws):
            values[i], rng = next_f64(rng)
            log({
                "lineage": lineage_id,
                "draw": i + 1,
                "value": round(float(values[i]), 6),
                "state": hash_state(rng),
                "log_every": config.sampling.log_every,
            })

        log({
            "summary": True,
            "lineage": lineage_id,
            "draws": config.sampling.draws,
            "mean": float(values.mean()) if len(values) else 0.0,
            "state": hash_state(rng),
        })

    print(f"\nLog written to {run_dir / 'logs' / 'sampling.log'}")


if __name__ == "__main__":
    main()
