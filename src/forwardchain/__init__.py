"""Small forward-chaining rule evaluation engine."""

from forwardchain.config import RunOptions, load_run_options
from forwardchain.freeze import deep_freeze
from forwardchain.models import ExecutionStatistics, Phase, RuleStatistics
from forwardchain.rules import (
  Engine,
  FunctionRule,
  MaxIterationsExceededError,
  Rule,
  RuleActionError,
  RuleEngineError,
  RuleEvaluationError,
  RuleExecutionError,
)

__version__ = "2.0.1"

__all__ = [
  "Engine",
  "ExecutionStatistics",
  "FunctionRule",
  "MaxIterationsExceededError",
  "Phase",
  "Rule",
  "RuleActionError",
  "RuleEngineError",
  "RuleEvaluationError",
  "RuleExecutionError",
  "RuleStatistics",
  "RunOptions",
  "deep_freeze",
  "load_run_options",
]
