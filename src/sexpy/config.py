"""
Runtime Configuration Store.

Settings are resolved in order of increasing priority:

1.  Field defaults.
2.  The ``[tool.sexpy]`` table of the nearest ``pyproject.toml``.
3.  Explicit overrides (typically CLI flags).
"""

import sys
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Configuration for a compile run.
  """

  all_forms: bool = Field(False, description="Compile every top-level form instead of only the first.")
  recursive: bool = Field(True, description="Expand macro results until a fixed point is reached.")
  emit: Literal["code", "tree"] = Field(
    "code", description="Output compiled Python ('code') or the read tree as JSON ('tree')."
  )

  @classmethod
  def load(
    cls,
    all_forms: Optional[bool] = None,
    recursive: Optional[bool] = None,
    emit: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and applies overrides.

    Args:
        all_forms (Optional[bool]): Override for `all_forms`.
        recursive (Optional[bool]): Override for `recursive`.
        emit (Optional[str]): Override for `emit`.
        search_path (Optional[Path]): Directory to start searching for TOML config.
            Defaults to the current working directory.

    Returns:
        RuntimeConfig: The resolved configuration.

    Raises:
        ValueError: If the merged settings fail validation.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    overrides = {"all_forms": all_forms, "recursive": recursive, "emit": emit}
    merged: Dict[str, Any] = {k: v for k, v in toml_config.items() if k in cls.model_fields}
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
      return cls.model_validate(merged)
    except ValidationError as e:
      raise ValueError(f"Invalid configuration: {e}") from e


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start the search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.sexpy]`` table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return data.get("tool", {}).get("sexpy", {}), parent

  return {}, None
