"""Run options."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

BeforeRuleHook = Callable[[Any, Any, dict], Any]
AfterRuleHook = Callable[[Any, Any, dict, Any], Any]
ErrorHook = Callable[[Exception, Any, Any], Any]


class RunOptions(BaseModel):
  """Configuration for a single engine run.

  Hooks may be plain functions or coroutine functions:
    before_rule(rule, context, result)
    after_rule(rule, context, result, updates)
    on_error(error, rule, phase)
  """

  model_config = ConfigDict(extra="forbid")

  max_iterations: int = Field(default=1000, ge=0)
  debug: bool = False
  collect_stats: bool = False
  continue_on_error: bool = False
  before_rule: BeforeRuleHook | None = None
  after_rule: AfterRuleHook | None = None
  on_error: ErrorHook | None = None
