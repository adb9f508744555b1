"""
matcher-aliases Package.

Presents existing assertion matchers under alternate names without
duplicating their matching logic. An alias behaves exactly like the matcher
it wraps, including through fluent configuration chains, but reports its own
name in descriptions and failure messages.

Usage
-----

Wrapping a Matcher Directly
^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from matcher_aliases import AliasedMatcher

    alias = AliasedMatcher(be_within(0.1), lambda s: s.replace("be within", "a value within"))
    alias.of(3).description()
    # 'a value within 0.1 of 3'

Registering Aliases
^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from matcher_aliases import register_matcher, alias_matcher, define_negated_matcher

    register_matcher("include")(Include)
    a_collection_including = alias_matcher("a_collection_including", "include")
    excluding = define_negated_matcher("excluding", "include")
"""

from matcher_aliases.config import AliasConfig, AliasDefinition
from matcher_aliases.core.aliased_matcher import (
  AliasedMatcher,
  AliasedMatcherWithOperatorSupport,
  AliasedNegatedMatcher,
)
from matcher_aliases.core.delegator import MatcherDelegator
from matcher_aliases.enums import AliasKind
from matcher_aliases.registry import (
  alias_matcher,
  available_matchers,
  define_negated_matcher,
  get_matcher,
  register_matcher,
)

__version__ = "0.0.1"

__all__ = [
  "AliasConfig",
  "AliasDefinition",
  "AliasKind",
  "AliasedMatcher",
  "AliasedMatcherWithOperatorSupport",
  "AliasedNegatedMatcher",
  "MatcherDelegator",
  "alias_matcher",
  "available_matchers",
  "define_negated_matcher",
  "get_matcher",
  "register_matcher",
  "__version__",
]
