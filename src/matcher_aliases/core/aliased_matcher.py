"""
Aliased Matchers.

Decorators that present an existing matcher under a different name. The
aliased matcher behaves identically to the wrapped one except for its
description and failure messages, which are passed through a transformation
callable.

This lets composed expressions read naturally, e.g.
`includes(a_value_within(0.1).of(3))` rather than
`includes(be_within(0.1).of(3))`, while reusing the `be_within` logic.

Variants:
    - `AliasedMatcher`: rewrites description-bearing messages.
    - `AliasedMatcherWithOperatorSupport`: also forwards comparison operators.
    - `AliasedNegatedMatcher`: swaps positive and negative matching.
"""

import functools
import operator
from typing import Any, Callable, Tuple

from matcher_aliases.core.delegator import MatcherDelegator

DescriptionBlock = Callable[[str], str]


class AliasedMatcher(MatcherDelegator):
  """
  Wraps a matcher and rewrites its description and failure messages.

  Many matchers expose a fluent interface (`a_value_within(0.1).of(3)`), so
  any forwarded result that itself exposes `description` is wrapped in a new
  alias sharing the same description block. The alias therefore survives
  arbitrarily long configuration chains.

  Only attribute access is forwarded. Protocols Python resolves on the type,
  such as operators and calling the alias itself, are not; use
  `AliasedMatcherWithOperatorSupport` for matchers that rely on them.
  """

  _own_attributes: Tuple[str, ...] = ("_base_matcher", "_description_block")

  def __init__(self, base_matcher: Any, description_block: DescriptionBlock) -> None:
    """
    Initializes the alias.

    Args:
        base_matcher (Any): The matcher to present under the alias.
        description_block (Callable[[str], str]): Maps an original message
            to its aliased form. Shared by reference with chained aliases.
    """
    object.__setattr__(self, "_description_block", description_block)
    super().__init__(base_matcher)

  def __getattr__(self, name: str) -> Any:
    attr = super().__getattr__(name)

    if hasattr(attr, "description") or not callable(attr):
      return self._alias_result(attr)

    @functools.wraps(attr, updated=())
    def forward(*args: Any, **kwargs: Any) -> Any:
      return self._alias_result(attr(*args, **kwargs))

    return forward

  def _alias_result(self, result: Any) -> Any:
    """
    Re-wraps a forwarded result if it looks like a matcher.

    Args:
        result (Any): Value returned by the wrapped matcher.

    Returns:
        Any: A new alias around `result`, or `result` itself.
    """
    if not hasattr(result, "description"):
      return result
    return type(self)(result, self._description_block)

  def description(self) -> str:
    """
    Returns the wrapped matcher's description, transformed to reflect the alias.
    """
    return self._description_block(self._base_matcher.description())

  def failure_message(self) -> str:
    """
    Returns the wrapped matcher's failure message, transformed to reflect the alias.
    """
    return self._description_block(self._base_matcher.failure_message())

  def failure_message_when_negated(self) -> str:
    """
    Returns the wrapped matcher's negated failure message, transformed to
    reflect the alias.
    """
    return self._description_block(self._base_matcher.failure_message_when_negated())


def _forward_operator(op: Callable[[Any, Any], Any]) -> Callable[[AliasedMatcher, Any], Any]:
  def method(self: AliasedMatcher, other: Any) -> Any:
    return self._alias_result(op(self._base_matcher, other))

  method.__name__ = f"__{op.__name__}__"
  return method


class AliasedMatcherWithOperatorSupport(AliasedMatcher):
  """
  Alias for matchers that implement matching through comparison operators.

  Operator dunders are resolved on the type, so the default identity-based
  comparison inherited from `object` would otherwise answer `alias == x`.
  Each operator here evaluates against the wrapped matcher instead, and
  calling the alias calls the wrapped matcher.
  """

  __eq__ = _forward_operator(operator.eq)
  __ne__ = _forward_operator(operator.ne)
  __lt__ = _forward_operator(operator.lt)
  __le__ = _forward_operator(operator.le)
  __gt__ = _forward_operator(operator.gt)
  __ge__ = _forward_operator(operator.ge)

  def __hash__(self) -> int:
    return hash(self._base_matcher)

  def __call__(self, *args: Any, **kwargs: Any) -> Any:
    return self._alias_result(self._base_matcher(*args, **kwargs))


class AliasedNegatedMatcher(AliasedMatcher):
  """
  Alias whose positive and negative match checks are swapped.

  A matcher-supplied `does_not_match` is preferred over inverting `matches`,
  since some matchers negate asymmetrically.
  """

  def matches(self, *args: Any, **kwargs: Any) -> Any:
    if hasattr(self._base_matcher, "does_not_match"):
      return self._base_matcher.does_not_match(*args, **kwargs)
    return not super().__getattr__("matches")(*args, **kwargs)

  def does_not_match(self, *args: Any, **kwargs: Any) -> Any:
    return self._base_matcher.matches(*args, **kwargs)
