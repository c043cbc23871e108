"""Core domain models for rule evaluation."""

from dataclasses import dataclass, field
from enum import Enum


class Phase(str, Enum):
  """Stage of a selection cycle in which a rule failed."""

  EVALUATE = "evaluate"
  ACTION = "action"


@dataclass
class RuleStatistics:
  """Counters and cumulative timings for a single rule."""

  evaluations: int = 0
  executions: int = 0
  evaluation_time: float = 0.0
  execution_time: float = 0.0


@dataclass
class ExecutionStatistics:
  """Aggregate statistics for one run.

  Timings are in seconds. Rules are keyed by display name, so rules
  sharing a name share a record.
  """

  total_iterations: int = 0
  total_time: float = 0.0
  rules: dict[str, RuleStatistics] = field(default_factory=dict)

  def for_rule(self, name: str) -> RuleStatistics:
    """Get the record for a rule, creating it on first use."""
    return self.rules.setdefault(name, RuleStatistics())

  def record_evaluation(self, name: str, elapsed: float) -> None:
    stats = self.for_rule(name)
    stats.evaluations += 1
    stats.evaluation_time += elapsed

  def record_execution(self, name: str, elapsed: float) -> None:
    stats = self.for_rule(name)
    stats.executions += 1
    stats.execution_time += elapsed
