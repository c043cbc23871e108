"""Output formatting."""

from forwardchain.output.formatter import (
  JsonFormatter,
  StatisticsFormatter,
  TerminalFormatter,
  get_formatter,
)

__all__ = [
  "StatisticsFormatter",
  "TerminalFormatter",
  "JsonFormatter",
  "get_formatter",
]
