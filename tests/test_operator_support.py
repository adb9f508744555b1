"""
Tests for AliasedMatcherWithOperatorSupport.
Verifies comparison operators reach the wrapped matcher rather than resolving
to identity comparison on the wrapper.
"""

import pytest

from matcher_aliases.core.aliased_matcher import AliasedMatcher, AliasedMatcherWithOperatorSupport

from fakes import Be, BeComparedTo, Include


def a_value(text):
  return text.replace("be", "a value", 1)


def test_equality_is_forwarded():
  alias = AliasedMatcherWithOperatorSupport(Be(5), a_value)

  assert alias == 5
  assert not (alias == 6)
  assert alias != 6
  assert not (alias != 5)


def test_reflected_equality_is_forwarded():
  alias = AliasedMatcherWithOperatorSupport(Be(5), a_value)
  assert 5 == alias


def test_plain_alias_shadows_operator():
  """Without operator support the wrapper falls back to identity comparison."""
  alias = AliasedMatcher(Be(5), a_value)
  assert not (alias == 5)


def test_ordering_operators_return_aliased_matchers():
  alias = AliasedMatcherWithOperatorSupport(Be(), a_value)

  for result, symbol in ((alias < 3, "<"), (alias <= 3, "<="), (alias > 3, ">"), (alias >= 3, ">=")):
    assert isinstance(result, AliasedMatcherWithOperatorSupport)
    assert isinstance(result.base_matcher, BeComparedTo)
    assert result.description() == f"a value {symbol} 3"


def test_operator_without_implementation_behaves_like_wrapped():
  matcher = Include(1)
  alias = AliasedMatcherWithOperatorSupport(matcher, str)

  assert alias == matcher
  assert not (alias == Include(1))
  with pytest.raises(TypeError):
    alias < 3


def test_hash_matches_wrapped():
  alias = AliasedMatcherWithOperatorSupport(Be(5), a_value)
  assert hash(alias) == hash(Be(5))


def test_other_behaviour_matches_plain_alias():
  alias = AliasedMatcherWithOperatorSupport(Be(5), a_value)

  assert alias.matches(5) is True
  assert alias.description() == "a value 5"


def test_calling_alias_calls_wrapped_matcher():
  class Predicate:
    def __call__(self, actual):
      return actual > 0

    def description(self):
      return "be positive"

  alias = AliasedMatcherWithOperatorSupport(Predicate(), a_value)

  assert alias(1) is True
  assert alias(-1) is False


def test_plain_alias_is_not_callable():
  alias = AliasedMatcher(Be(5), a_value)

  with pytest.raises(TypeError):
    alias(5)
