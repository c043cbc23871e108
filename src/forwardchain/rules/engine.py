"""Forward-chaining engine that selects and executes rules."""

import asyncio
import json
import time
from collections.abc import Mapping, Sequence
from typing import Any

from rich.console import Console

from forwardchain.config.settings import RunOptions
from forwardchain.freeze import deep_freeze
from forwardchain.models import ExecutionStatistics, Phase
from forwardchain.rules.base import Rule, resolve

_console = Console(stderr=True)

LOG_PREFIX = "[RuleEngine]"


class RuleEngineError(Exception):
  """Base class for engine failures."""


class RuleExecutionError(RuleEngineError):
  """A rule's predicate or action raised."""

  def __init__(self, message: str, rule_name: str, phase: Phase, original: Exception):
    super().__init__(message)
    self.rule_name = rule_name
    self.phase = phase
    self.original = original


class RuleEvaluationError(RuleExecutionError):
  """A rule's predicate raised."""

  def __init__(self, rule_name: str, original: Exception):
    super().__init__(
      f'Error evaluating rule "{rule_name}": {original}',
      rule_name,
      Phase.EVALUATE,
      original,
    )


class RuleActionError(RuleExecutionError):
  """A rule's action raised."""

  def __init__(self, rule_name: str, original: Exception):
    super().__init__(
      f'Error executing action for rule "{rule_name}": {original}',
      rule_name,
      Phase.ACTION,
      original,
    )


class MaxIterationsExceededError(RuleEngineError):
  """The run selected more rules than allowed."""

  def __init__(self, max_iterations: int):
    super().__init__(
      f"Rule engine exceeded maximum number of iterations ({max_iterations})"
    )
    self.max_iterations = max_iterations


def _log(message: str) -> None:
  _console.print(
    f"{LOG_PREFIX} {message}",
    markup=False,
    emoji=False,
    highlight=False,
    soft_wrap=True,
  )


def _dump(updates: Any) -> str:
  try:
    return json.dumps(updates, default=str)
  except (TypeError, ValueError):
    return repr(updates)


def _rule_name(rule: Rule, index: int) -> str:
  """Display name for a rule, falling back to its 1-based position."""
  return getattr(rule, "name", None) or f"Rule #{index}"


class Engine:
  """Runs rules against a frozen context until none applies.

  Every iteration scans the rules in list order, executes the first
  one whose predicate holds and shallow-merges the mapping returned by
  its action into the result. The scan always restarts from the first
  rule, so list order is the only priority.

  Example:
    engine = Engine({"limit": 3}, rules)
    result = await engine.run(max_iterations=50)
  """

  def __init__(
    self,
    context: Any = None,
    rules: Sequence[Rule] | None = None,
    initial_result: Mapping[str, Any] | None = None,
  ):
    """Initialize the engine.

    Args:
      context: Input data shared by all rules. Mappings, sequences, sets
               and bytearrays are frozen on the way in. Other objects,
               such as class instances or mutable dataclasses, are kept
               as is and stay mutable; pass frozen dataclasses instead.
      rules: Rules in priority order.
      initial_result: Seed for the result.
    """
    self._context = deep_freeze({} if context is None else context)
    self._rules: list[Rule] = list(rules or [])
    self._result: dict[str, Any] = dict(initial_result or {})
    self._statistics: ExecutionStatistics | None = None
    self._iterations = 0

  @property
  def context(self) -> Any:
    return self._context

  @property
  def rules(self) -> list[Rule]:
    return list(self._rules)

  def set_context(self, context: Any) -> "Engine":
    """Rebind the context, freezing the new value."""
    self._context = deep_freeze({} if context is None else context)
    return self

  def set_rules(self, rules: Sequence[Rule]) -> "Engine":
    self._rules = list(rules)
    return self

  def set_initial_result(self, result: Mapping[str, Any]) -> "Engine":
    self._result = dict(result)
    return self

  def get_result(self) -> dict[str, Any]:
    return self._result

  def get_statistics(self) -> ExecutionStatistics | None:
    """Statistics from the last completed run that collected them."""
    return self._statistics

  async def run(self, options: RunOptions | None = None, **overrides: Any) -> dict[str, Any]:
    """Apply rules until none matches.

    Args:
      options: Run configuration. Defaults to RunOptions().
      **overrides: RunOptions fields, applied on top of options.

    Returns:
      The final result.

    Raises:
      RuleEvaluationError: A predicate raised and continue_on_error is off.
      RuleActionError: An action raised and continue_on_error is off.
      MaxIterationsExceededError: More than max_iterations rules were selected.
    """
    if options is None:
      options = RunOptions(**overrides)
    elif overrides:
      options = RunOptions(**{**dict(options), **overrides})

    started = time.perf_counter()
    stats = ExecutionStatistics() if options.collect_stats else None
    self._iterations = 0

    if options.debug:
      _log(f"Starting with {len(self._rules)} rules")

    selected = await self._select_rule(options, stats)

    while selected is not None:
      index, rule = selected
      name = _rule_name(rule, index)

      self._iterations += 1
      if self._iterations > options.max_iterations:
        raise MaxIterationsExceededError(options.max_iterations)

      if options.before_rule:
        await resolve(options.before_rule(rule, self._context, self._result))

      if options.debug:
        _log(f'Executing rule "{name}" (iteration {self._iterations})')

      try:
        updates = await self._execute(rule, name, stats)
      except RuleActionError as e:
        await self._handle_failure(e, rule, options)
        selected = await self._select_rule(options, stats)
        continue

      if updates:
        self._result = {**self._result, **updates}

      if options.debug:
        _log(f"Result updates: {_dump(updates)}")

      if options.after_rule:
        await resolve(options.after_rule(rule, self._context, self._result, updates))

      selected = await self._select_rule(options, stats)

    elapsed = time.perf_counter() - started
    if stats is not None:
      stats.total_iterations = self._iterations
      stats.total_time = elapsed
      self._statistics = stats

    if options.debug:
      _log(f"Completed in {self._iterations} iterations ({elapsed * 1000:.2f}ms)")

    return self._result

  def run_sync(self, options: RunOptions | None = None, **overrides: Any) -> dict[str, Any]:
    """Run on a fresh event loop. Not usable from inside a running loop."""
    return asyncio.run(self.run(options, **overrides))

  async def _select_rule(
    self,
    options: RunOptions,
    stats: ExecutionStatistics | None,
  ) -> tuple[int, Rule] | None:
    """Find the first rule, in list order, whose predicate holds.

    Predicates are awaited one at a time. A failing predicate counts as
    a non-match when continue_on_error is set.
    """
    for index, rule in enumerate(self._rules, start=1):
      name = _rule_name(rule, index)

      try:
        matched = await self._evaluate(rule, name, stats)
      except RuleEvaluationError as e:
        await self._handle_failure(e, rule, options)
        continue

      if options.debug:
        _log(f'Rule "{name}" evaluated to {"true" if matched else "false"}')

      if matched:
        return index, rule

    return None

  async def _evaluate(self, rule: Rule, name: str, stats: ExecutionStatistics | None) -> bool:
    started = time.perf_counter()
    try:
      return bool(await resolve(rule.evaluate(self._context, self._result)))
    except Exception as e:
      raise RuleEvaluationError(name, e) from e
    finally:
      if stats is not None:
        stats.record_evaluation(name, time.perf_counter() - started)

  async def _execute(
    self,
    rule: Rule,
    name: str,
    stats: ExecutionStatistics | None,
  ) -> Mapping[str, Any] | None:
    started = time.perf_counter()
    try:
      updates = await resolve(rule.action(self._context, self._result))
      if updates is not None and not isinstance(updates, Mapping):
        raise TypeError(
          f"action must return a mapping or None, got {type(updates).__name__}"
        )
      return updates
    except Exception as e:
      raise RuleActionError(name, e) from e
    finally:
      if stats is not None:
        stats.record_execution(name, time.perf_counter() - started)

  async def _handle_failure(
    self,
    error: RuleExecutionError,
    rule: Rule,
    options: RunOptions,
  ) -> None:
    """Report a rule failure, then re-raise it unless errors are tolerated."""
    if options.on_error:
      await resolve(options.on_error(error, rule, error.phase))

    if not options.continue_on_error:
      raise error

    if options.debug:
      _log(f'Continuing despite error in rule "{error.rule_name}": {error.original}')
