"""
Matcher Registry and Alias Definitions.

Keeps a name -> factory mapping of matcher constructors and provides the two
declarative entry points used to create aliases:

- `alias_matcher("a_value_within", "be_within")`
- `define_negated_matcher("excluding", "include")`

Each call registers a new factory that builds the original matcher and wraps
it in the decorator selected by `AliasKind`. Unless a description override is
given, the alias rewrites the original matcher's phrase ("be within") to its
own ("a value within") in descriptions and failure messages.

Usage
-----

.. code-block:: python

    @register_matcher("be_within")
    def be_within(delta):
      return BeWithin(delta)

    a_value_within = alias_matcher("a_value_within", "be_within")
    a_value_within(0.1).of(3).description()
    # 'a value within 0.1 of 3'
"""

import functools
import logging
from typing import Any, Callable, Dict, List, Optional, Type

from matcher_aliases.core.aliased_matcher import (
  AliasedMatcher,
  AliasedMatcherWithOperatorSupport,
  AliasedNegatedMatcher,
  DescriptionBlock,
)
from matcher_aliases.enums import AliasKind
from matcher_aliases.utils.console import log_warning
from matcher_aliases.utils.phrasing import replace_phrase

logger = logging.getLogger(__name__)

MatcherFactory = Callable[..., Any]

_MATCHER_REGISTRY: Dict[str, MatcherFactory] = {}

_ALIAS_CLASSES: Dict[AliasKind, Type[AliasedMatcher]] = {
  AliasKind.ALIAS: AliasedMatcher,
  AliasKind.NEGATED: AliasedNegatedMatcher,
  AliasKind.OPERATOR: AliasedMatcherWithOperatorSupport,
}


def alias_class_for(kind: AliasKind) -> Type[AliasedMatcher]:
  """
  Resolves the wrapper class for an alias kind.

  Args:
      kind (AliasKind): The requested kind (or its string value).

  Returns:
      Type[AliasedMatcher]: The decorator class.
  """
  return _ALIAS_CLASSES[AliasKind(kind)]


def register_matcher(name: str) -> Callable[[MatcherFactory], MatcherFactory]:
  """
  Decorator registering a matcher factory under `name`.

  Re-registering a name replaces the previous factory.
  """

  def wrapper(factory: MatcherFactory) -> MatcherFactory:
    if name in _MATCHER_REGISTRY:
      log_warning(f"Overriding registered matcher [code]{name}[/code].")
    _MATCHER_REGISTRY[name] = factory
    logger.debug("Registered matcher '%s'", name)
    return factory

  return wrapper


def get_matcher(name: str) -> Optional[MatcherFactory]:
  """
  Retrieves a registered matcher factory.

  Args:
      name (str): The registered name.

  Returns:
      Optional[MatcherFactory]: The factory, or None if unknown.
  """
  return _MATCHER_REGISTRY.get(name)


def available_matchers() -> List[str]:
  """
  Returns the names of all registered matchers, aliases included.
  """
  return list(_MATCHER_REGISTRY.keys())


def clear_matchers() -> None:
  """Resets the registry. Primarily for testing."""
  _MATCHER_REGISTRY.clear()


def alias_matcher(
  new_name: str,
  old_name: str,
  kind: AliasKind = AliasKind.ALIAS,
  description_override: Optional[DescriptionBlock] = None,
) -> MatcherFactory:
  """
  Registers `new_name` as an alias of the matcher registered as `old_name`.

  Args:
      new_name (str): Name of the alias.
      old_name (str): Name of an already registered matcher.
      kind (AliasKind): Which decorator wraps the built matcher.
      description_override (Callable[[str], str], optional): Custom message
          transformation. Defaults to replacing the phrase of `old_name` with
          the phrase of `new_name`.

  Returns:
      MatcherFactory: The registered alias factory.

  Raises:
      ValueError: If `old_name` is not registered.
  """
  base_factory = get_matcher(old_name)
  if base_factory is None:
    raise ValueError(f"Unknown matcher: '{old_name}'. Registered matchers: {available_matchers()}")

  alias_cls = alias_class_for(kind)
  description_block = description_override or replace_phrase(old_name, new_name)

  def factory(*args: Any, **kwargs: Any) -> AliasedMatcher:
    return alias_cls(base_factory(*args, **kwargs), description_block)

  # Factories are often classes; copying their namespace would make the
  # factory itself look like a matcher.
  functools.update_wrapper(factory, base_factory, updated=())
  factory.__name__ = new_name
  factory.__qualname__ = new_name
  factory.__doc__ = f"Alias of `{old_name}` ({alias_cls.__name__})."

  logger.debug("Aliasing '%s' -> '%s' via %s", new_name, old_name, alias_cls.__name__)
  return register_matcher(new_name)(factory)


def define_negated_matcher(
  negated_name: str,
  base_name: str,
  description_override: Optional[DescriptionBlock] = None,
) -> MatcherFactory:
  """
  Registers `negated_name` as the negation of the matcher `base_name`.

  The resulting matcher passes where the base matcher fails and vice versa,
  e.g. `define_negated_matcher("excluding", "include")`.

  Args:
      negated_name (str): Name of the negated matcher.
      base_name (str): Name of an already registered matcher.
      description_override (Callable[[str], str], optional): Custom message
          transformation.

  Returns:
      MatcherFactory: The registered negated factory.
  """
  return alias_matcher(negated_name, base_name, AliasKind.NEGATED, description_override)
