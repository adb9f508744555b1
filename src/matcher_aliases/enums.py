"""
Enumerations for matcher-aliases.
"""

from enum import Enum


class AliasKind(str, Enum):
  """
  Selects the wrapper class used when registering an alias.
  """

  ALIAS = "alias"  # AliasedMatcher
  NEGATED = "negated"  # AliasedNegatedMatcher
  OPERATOR = "operator"  # AliasedMatcherWithOperatorSupport
