"""
Tests for MatcherDelegator.
Verifies transparent forwarding, the fixed wrapped reference, capability
discovery, and copy semantics.
"""

import copy

import pytest

from matcher_aliases.core.delegator import MatcherDelegator

from fakes import BeWithin


def test_forwards_calls_unchanged():
  matcher = BeWithin(0.5).of(3)
  delegator = MatcherDelegator(matcher)

  assert delegator.matches(3.2) is True
  assert delegator.matches(4) is False
  assert delegator.description() == "be within 0.5 of 3"


def test_forwarded_result_is_not_wrapped():
  """The plain delegator returns chained results verbatim."""
  matcher = BeWithin(0.5)
  delegator = MatcherDelegator(matcher)

  assert delegator.of(3) is matcher


def test_forwards_plain_attributes():
  delegator = MatcherDelegator(BeWithin(0.5))
  assert delegator.delta == 0.5


def test_missing_capability_raises_plain_attribute_error():
  """
  Verify the error matches the one raised by the wrapped object itself.
  """
  matcher = BeWithin(0.5)
  delegator = MatcherDelegator(matcher)

  with pytest.raises(AttributeError) as raw:
    matcher.does_not_match(1)
  with pytest.raises(AttributeError) as forwarded:
    delegator.does_not_match(1)

  assert str(forwarded.value) == str(raw.value)
  assert not hasattr(delegator, "does_not_match")


def test_no_validation_at_construction():
  delegator = MatcherDelegator(object())
  assert not hasattr(delegator, "matches")


def test_base_matcher_is_read_only():
  matcher = BeWithin(0.5)
  delegator = MatcherDelegator(matcher)

  assert delegator.base_matcher is matcher
  with pytest.raises(AttributeError):
    delegator._base_matcher = BeWithin(1)
  with pytest.raises(AttributeError):
    delegator.base_matcher = BeWithin(1)
  with pytest.raises(AttributeError):
    del delegator._base_matcher

  assert delegator.base_matcher is matcher


def test_attribute_assignment_is_forwarded():
  matcher = BeWithin(0.5)
  delegator = MatcherDelegator(matcher)

  delegator.expected = 10
  assert matcher.expected == 10

  del delegator.expected
  assert not hasattr(matcher, "expected")


def test_dir_includes_wrapped_capabilities():
  delegator = MatcherDelegator(BeWithin(0.5))
  names = dir(delegator)

  assert "of" in names
  assert "failure_message" in names
  assert "base_matcher" in names


def test_copy_duplicates_wrapped_matcher():
  matcher = BeWithin(0.5).of(3)
  delegator = MatcherDelegator(matcher)

  clone = copy.copy(delegator)

  assert type(clone) is MatcherDelegator
  assert clone.base_matcher is not matcher
  assert clone.description() == "be within 0.5 of 3"

  clone.of(7)
  assert matcher.expected == 3


def test_repr_names_wrapped_matcher():
  delegator = MatcherDelegator(42)
  assert repr(delegator) == "MatcherDelegator(42)"
