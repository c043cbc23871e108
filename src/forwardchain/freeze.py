"""Deep freezing of rule contexts."""

from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any


def deep_freeze(value: Any) -> Any:
  """Return a read-only copy of value.

  Mappings become MappingProxyType views over frozen copies, lists and
  tuples become tuples (named tuples keep their type), sets become
  frozensets and bytearrays become bytes. Any other object, including
  class instances and mutable dataclasses, is returned as is.

  Args:
    value: Arbitrary structured data.

  Returns:
    The frozen equivalent. Attempts to mutate it raise TypeError or
    AttributeError.
  """
  if isinstance(value, Mapping):
    return MappingProxyType({key: deep_freeze(item) for key, item in value.items()})

  if isinstance(value, tuple) and hasattr(value, "_fields"):
    return type(value)(*(deep_freeze(item) for item in value))

  if isinstance(value, (list, tuple)):
    return tuple(deep_freeze(item) for item in value)

  if isinstance(value, Set):
    return frozenset(deep_freeze(item) for item in value)

  if isinstance(value, bytearray):
    return bytes(value)

  return value
