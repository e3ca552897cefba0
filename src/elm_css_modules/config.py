"""
Runtime Configuration Store.

Holds the options of a transform session. Values may be supplied directly or
resolved from the ``[tool.elm_css_modules]`` table of the nearest ``pyproject.toml``.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

# Compiled name of `CssModules.css` from the `cultureamp/elm-css-modules-loader` Elm package.
DEFAULT_TAGGER_NAME = "cultureamp$elm_css_modules_loader$CssModules$css"
DEFAULT_LOADER_NAME = "require"

TOML_SECTION = "elm_css_modules"


class TransformConfig(BaseModel):
  """
  Immutable configuration for a CSS modules transform.
  """

  model_config = ConfigDict(frozen=True)

  tagger_name: str = Field(
    DEFAULT_TAGGER_NAME,
    description="Identifier the first argument of A2(...) must reference.",
  )
  loader_name: str = Field(
    DEFAULT_LOADER_NAME,
    description="Module loader function used in rewritten class map values.",
  )

  @field_validator("tagger_name", "loader_name")
  @classmethod
  def validate_name(cls, v: str) -> str:
    """
    Rejects empty names. The value is kept verbatim.

    Args:
        v (str): The configured identifier.

    Returns:
        str: The unchanged identifier.

    Raises:
        ValueError: If the identifier is empty or only whitespace.
    """
    if not v.strip():
      raise ValueError("identifier names must not be empty")
    return v

  @classmethod
  def load(
    cls,
    tagger_name: Optional[str] = None,
    loader_name: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "TransformConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Args:
        tagger_name (Optional[str]): Override for the tagger identifier.
        loader_name (Optional[str]): Override for the module loader name.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        TransformConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    return cls(
      tagger_name=tagger_name or toml_config.get("tagger_name", DEFAULT_TAGGER_NAME),
      loader_name=loader_name or toml_config.get("loader_name", DEFAULT_LOADER_NAME),
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches parents for 'pyproject.toml' and extracts the tool section.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)

      tool_section = data.get("tool", {})
      return tool_section.get(TOML_SECTION, {}), parent

  return {}, None
