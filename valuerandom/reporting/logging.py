"""
valuerandom.reporting.logging

Logging utilities for sampling runs.
"""

from pathlib import Path
from typing import Callable


def create_logger(output_dir: Path) -> Callable[[dict], None]:
    """Create logging function for sampling records.

    Args:
        output_dir: Run output directory. Records go to logs/sampling.log.

    Returns:
        Logging callback function that accepts a record dict.
    """
    log_file = Path(output_dir) / "logs" / "sampling.log"

    def log(record: dict):
        if "summary" in record:
            # End of run
            print(f"  Lineage {record.get('lineage', '?')} | "
                  f"draws: {record.get('draws', 0)} | "
                  f"mean: {record.get('mean', 0.0):.4f} | "
                  f"state: {record.get('state', '?')}")
        elif "draw" in record:
            # Periodic progress
            every = record.get("log_every", 1)
            if record["draw"] % every == 0:
                print(f"  Draw {record['draw']:6d} | "
                      f"value: {record.get('value', 0)} | "
                      f"state: {record.get('state', '?')}")

        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a") as f:
            f.write(f"{record}\n")

    return log
