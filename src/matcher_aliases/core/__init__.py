"""
Core wrapper classes.

Contains the delegation base and the aliased matcher decorators. These
modules have no dependency on the registry or configuration layers.
"""

from matcher_aliases.core.aliased_matcher import (
  AliasedMatcher,
  AliasedMatcherWithOperatorSupport,
  AliasedNegatedMatcher,
)
from matcher_aliases.core.delegator import MatcherDelegator

__all__ = [
  "AliasedMatcher",
  "AliasedMatcherWithOperatorSupport",
  "AliasedNegatedMatcher",
  "MatcherDelegator",
]
