"""Rule abstractions for forward-chaining evaluation."""

import inspect
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

Updates = Mapping[str, Any]
Predicate = Callable[..., "bool | Awaitable[bool]"]
Effect = Callable[..., "Updates | None | Awaitable[Updates | None]"]


class Rule(Protocol):
  """Protocol for engine rules.

  A rule pairs a predicate with an effect. Neither may mutate the
  context or the result in place: the effect returns only the keys it
  wants merged into the result. Both methods may be coroutines.

  Example:
    class Increment:
      name = "increment"

      def evaluate(self, context, result) -> bool:
        return result.get("count", 0) < context["limit"]

      def action(self, context, result) -> dict:
        return {"count": result.get("count", 0) + 1}
  """

  def evaluate(self, context: Any, result: Mapping[str, Any]) -> bool | Awaitable[bool]:
    """Check whether the rule applies to the current result."""
    ...

  def action(
    self,
    context: Any,
    result: Mapping[str, Any],
  ) -> Updates | None | Awaitable[Updates | None]:
    """Compute the updates to merge into the result."""
    ...


async def resolve(value: Any) -> Any:
  """Await value if it is awaitable, otherwise return it unchanged."""
  if inspect.isawaitable(value):
    return await value
  return value


@dataclass
class FunctionRule:
  """Rule built from a predicate and an effect callable.

  When swap_buffer is set, both callables receive it as a third
  argument so the predicate can stash intermediate values for the
  effect. The buffer is cleared before every evaluation and after the
  effect completes, so stashed values never outlive the cycle that
  produced them.
  """

  predicate: Predicate
  effect: Effect
  name: str | None = None
  swap_buffer: dict[str, Any] | None = None

  async def evaluate(self, context: Any, result: Mapping[str, Any]) -> bool:
    if self.swap_buffer is None:
      return bool(await resolve(self.predicate(context, result)))

    self.swap_buffer.clear()
    return bool(await resolve(self.predicate(context, result, self.swap_buffer)))

  async def action(self, context: Any, result: Mapping[str, Any]) -> Updates | None:
    if self.swap_buffer is None:
      return await resolve(self.effect(context, result))

    try:
      return await resolve(self.effect(context, result, self.swap_buffer))
    finally:
      self.swap_buffer.clear()
