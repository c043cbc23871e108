"""Configuration management."""

from forwardchain.config.loader import load_run_options
from forwardchain.config.settings import RunOptions

__all__ = ["RunOptions", "load_run_options"]
