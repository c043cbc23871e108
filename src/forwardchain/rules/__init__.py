"""Rule protocol and the forward-chaining engine."""

from forwardchain.rules.base import FunctionRule, Rule
from forwardchain.rules.engine import (
  Engine,
  MaxIterationsExceededError,
  RuleActionError,
  RuleEngineError,
  RuleEvaluationError,
  RuleExecutionError,
)

__all__ = [
  "Engine",
  "FunctionRule",
  "MaxIterationsExceededError",
  "Rule",
  "RuleActionError",
  "RuleEngineError",
  "RuleEvaluationError",
  "RuleExecutionError",
]
