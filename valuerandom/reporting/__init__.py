"""
valuerandom.reporting

Run-level logging.
"""

from .logging import create_logger

__all__ = ["create_logger"]
