"""Shared utilities for Song Association.

- logging: log file setup for CLI runs
"""

from .logging import setup_logging

__all__ = ["setup_logging"]
