"""
Alias Configuration Store.

Declarative alias definitions, validated with pydantic. Definitions can be
built in code or loaded from the `[tool.matcher_aliases]` table of the
nearest `pyproject.toml`:

.. code-block:: toml

    [tool.matcher_aliases.aliases]
    a_value_within = "be_within"

    [tool.matcher_aliases.negated]
    excluding = "include"

    [tool.matcher_aliases.operator]
    a_value = "be"
"""

import tomllib
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from matcher_aliases.enums import AliasKind
from matcher_aliases.registry import MatcherFactory, alias_matcher
from matcher_aliases.utils.console import log_error, log_info

# Maps sub-tables of [tool.matcher_aliases] to the alias kind they declare.
_TABLE_KINDS: Dict[str, AliasKind] = {
  "aliases": AliasKind.ALIAS,
  "negated": AliasKind.NEGATED,
  "operator": AliasKind.OPERATOR,
}


class AliasDefinition(BaseModel):
  """
  A single alias: `name` presents the matcher registered as `base_name`.
  """

  name: str = Field(description="Name the alias is registered under (e.g. 'a_value_within').")
  base_name: str = Field(description="Registered matcher being aliased (e.g. 'be_within').")
  kind: AliasKind = Field(AliasKind.ALIAS, description="Wrapper used for the alias.")
  description_override: Optional[Callable[[str], str]] = Field(
    None,
    description="Custom message transformation. Defaults to phrase replacement.",
  )

  @field_validator("name", "base_name")
  @classmethod
  def validate_identifier(cls, v: str) -> str:
    """
    Ensures matcher names are usable as Python identifiers.

    Args:
        v (str): The raw name.

    Returns:
        str: The stripped name.

    Raises:
        ValueError: If the name is not a valid identifier.
    """
    v_clean = v.strip()
    if not v_clean.isidentifier():
      raise ValueError(f"Invalid matcher name: '{v}'. Names must be valid Python identifiers.")
    return v_clean

  def define(self) -> MatcherFactory:
    """Registers this alias and returns its factory."""
    return alias_matcher(self.name, self.base_name, self.kind, self.description_override)


class AliasConfig(BaseModel):
  """
  Collection of alias definitions.
  """

  definitions: List[AliasDefinition] = Field(default_factory=list, description="Aliases to register.")

  def apply(self) -> Dict[str, MatcherFactory]:
    """
    Registers every definition in order.

    Returns:
        Dict[str, MatcherFactory]: The created factories keyed by alias name.
    """
    factories = {definition.name: definition.define() for definition in self.definitions}
    if factories:
      log_info(f"Registered {len(factories)} matcher aliases.")
    return factories

  @classmethod
  def load(cls, search_path: Optional[Path] = None) -> "AliasConfig":
    """
    Loads definitions from the nearest pyproject.toml.

    Args:
        search_path (Optional[Path]): Directory to start searching from.
            Defaults to the current working directory.

    Returns:
        AliasConfig: The parsed configuration (empty if nothing is declared).

    Raises:
        ValueError: If the TOML file is malformed or a definition is invalid.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    if not isinstance(toml_config, dict):
      raise ValueError("[tool.matcher_aliases] must be a table.")

    definitions = []
    for table, kind in _TABLE_KINDS.items():
      entries = toml_config.get(table, {})
      if not isinstance(entries, dict):
        raise ValueError(f"[tool.matcher_aliases.{table}] must be a table of alias = base_name entries.")
      for name, base_name in entries.items():
        definitions.append(AliasDefinition(name=name, base_name=base_name, kind=kind))

    return cls(definitions=definitions)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        log_error(f"Could not parse [code]{toml_path}[/code]: {e}")
        raise ValueError(f"Invalid TOML in {toml_path}: {e}") from e

      tool_section = data.get("tool", {})
      return tool_section.get("matcher_aliases", {}), parent

  return {}, None
