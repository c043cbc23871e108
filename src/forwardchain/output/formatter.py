"""Output formatting for execution statistics."""

import json
from abc import ABC, abstractmethod
from dataclasses import asdict

from rich.console import Console
from rich.table import Table

from forwardchain.models import ExecutionStatistics


class StatisticsFormatter(ABC):
  """Base statistics formatter."""

  @abstractmethod
  def format(self, stats: ExecutionStatistics) -> str:
    """Format statistics for output."""
    ...


class TerminalFormatter(StatisticsFormatter):
  """Rich terminal table, printed directly to the console."""

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, stats: ExecutionStatistics) -> str:
    table = Table(
      show_header=True,
      header_style="bold",
      title=f"{stats.total_iterations} iterations in {stats.total_time * 1000:.2f}ms",
    )
    table.add_column("Rule", min_width=20)
    table.add_column("Evaluations", justify="right")
    table.add_column("Executions", justify="right")
    table.add_column("Eval time (ms)", justify="right")
    table.add_column("Exec time (ms)", justify="right")

    for name, rule_stats in stats.rules.items():
      table.add_row(
        name,
        str(rule_stats.evaluations),
        str(rule_stats.executions),
        f"{rule_stats.evaluation_time * 1000:.3f}",
        f"{rule_stats.execution_time * 1000:.3f}",
      )

    self.console.print(table)
    return ""


class JsonFormatter(StatisticsFormatter):
  """JSON output formatter."""

  def format(self, stats: ExecutionStatistics) -> str:
    return json.dumps(asdict(stats), indent=2)


def get_formatter(format_type: str) -> StatisticsFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
