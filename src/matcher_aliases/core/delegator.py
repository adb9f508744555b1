"""
Generic Matcher Delegation.

Provides `MatcherDelegator`, a thin wrapper that owns a single matcher and
forwards every attribute it does not define itself to that matcher.

Capabilities are duck-typed: nothing is checked at construction time, and a
missing capability surfaces as the plain `AttributeError` raised by the
wrapped object.
"""

import copy
from typing import Any, List


class MatcherDelegator:
  """
  Forwards attribute access to a wrapped matcher.

  Subclasses intercept specific operations by defining them as regular
  methods; anything else falls through `__getattr__` to `base_matcher`.

  Attributes:
      base_matcher (Any): The wrapped matcher. Fixed at construction.
  """

  # Slots owned by the wrapper itself. Everything else belongs to the matcher.
  _own_attributes = ("_base_matcher",)

  def __init__(self, base_matcher: Any) -> None:
    """
    Initializes the delegator.

    Args:
        base_matcher (Any): Any object exposing (part of) the matcher protocol.
    """
    object.__setattr__(self, "_base_matcher", base_matcher)

  @property
  def base_matcher(self) -> Any:
    """The wrapped matcher."""
    return self._base_matcher

  def __getattr__(self, name: str) -> Any:
    # Only reached when normal lookup fails. Guard against lookups made before
    # __init__ ran (copy/pickle reconstruction) to avoid infinite recursion.
    try:
      base_matcher = object.__getattribute__(self, "_base_matcher")
    except AttributeError:
      raise AttributeError(name) from None
    return getattr(base_matcher, name)

  def __setattr__(self, name: str, value: Any) -> None:
    if name in self._own_attributes:
      raise AttributeError(f"'{type(self).__name__}' attribute '{name}' is read-only")
    # Names defined by the wrapper class (e.g. read-only properties) keep the usual semantics.
    if hasattr(type(self), name):
      object.__setattr__(self, name, value)
    else:
      setattr(self._base_matcher, name, value)

  def __delattr__(self, name: str) -> None:
    if name in self._own_attributes:
      raise AttributeError(f"'{type(self).__name__}' attribute '{name}' is read-only")
    if hasattr(type(self), name):
      object.__delattr__(self, name)
    else:
      delattr(self._base_matcher, name)

  def __dir__(self) -> List[str]:
    return sorted(set(super().__dir__()) | set(dir(self._base_matcher)))

  def __copy__(self) -> "MatcherDelegator":
    """
    Copies the wrapper together with a shallow copy of the wrapped matcher.

    All other wrapper slots are shared with the original.
    """
    clone = type(self).__new__(type(self))
    for name in self._own_attributes:
      object.__setattr__(clone, name, object.__getattribute__(self, name))
    object.__setattr__(clone, "_base_matcher", copy.copy(self._base_matcher))
    return clone

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self._base_matcher!r})"
