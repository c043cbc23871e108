"""Configuration file loading."""

import os
from pathlib import Path

import yaml

from forwardchain.config.settings import RunOptions

CONFIG_FILENAMES = [
  ".forwardchain.yaml",
  ".forwardchain.yml",
  "forwardchain.yaml",
  "forwardchain.yml",
]

DEBUG_ENV_VAR = "FORWARDCHAIN_DEBUG"


def _is_debug() -> bool:
  return os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    if not config_path.exists():
      raise FileNotFoundError(f"Config file not found: {config_path}")
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_run_options(config_path: Path | None = None) -> RunOptions:
  """Load default run options from a config file and the environment.

  Hooks cannot be configured from a file; pass them to run() instead.
  """
  path = _find_config_file(config_path)
  data: dict = {}
  if path:
    with open(path) as f:
      data = yaml.safe_load(f) or {}

  return _parse_config(data)


def _parse_config(data: dict) -> RunOptions:
  """Parse config dict into RunOptions."""
  if _is_debug():
    data = {**data, "debug": True}

  return RunOptions(**data)
