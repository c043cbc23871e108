"""Pytest fixtures."""

import pytest
from forwardchain.rules.base import FunctionRule


@pytest.fixture
def counter_context() -> dict:
  return {"startValue": 0, "endValue": 3}


@pytest.fixture
def counter_rules() -> list[FunctionRule]:
  return [
    FunctionRule(
      name="Init result",
      predicate=lambda context, result: result.get("count") is None,
      effect=lambda context, result: {"count": context["startValue"], "flag": False},
    ),
    FunctionRule(
      name="Increment count when less than end value",
      predicate=lambda context, result: (
        result.get("flag") is not True and result.get("count", 0) < context["endValue"]
      ),
      effect=lambda context, result: {"count": result.get("count", 0) + 1},
    ),
    FunctionRule(
      name="Set flag when count equals end value",
      predicate=lambda context, result: (
        result.get("count") == context["endValue"] and not result.get("flag")
      ),
      effect=lambda context, result: {"flag": True},
    ),
  ]


@pytest.fixture
def always_true_rule() -> FunctionRule:
  return FunctionRule(
    name="Always",
    predicate=lambda context, result: True,
    effect=lambda context, result: {"ticks": result.get("ticks", 0) + 1},
  )
