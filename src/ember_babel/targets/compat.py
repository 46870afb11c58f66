"""
Target Compatibility Table.

Maps each optional compatibility plugin to the minimum engine versions that
support the corresponding language feature natively. The table is package
data (``data/plugins.json``); it can be replaced or extended without touching
the decision logic in ``ember_babel.targets.decider``.

Row format::

    "transform-es2015-classes": {
      "support": {"chrome": "46", "firefox": "45", ...},
      "accepts": ["loose"]
    }

An engine missing from ``support`` never supports the feature.
"""

import json
from functools import lru_cache
from pathlib import Path
from importlib.resources import files
from typing import Any, Dict, Iterator, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ember_babel.versioning import parse_version

PLUGINS_FILENAME = "plugins.json"


def resolve_data_dir() -> Path:
  """
  Locates the directory holding the bundled JSON data.

  Returns:
      Path: The 'data' directory of the package.
  """
  local_path = Path(__file__).parent.parent / "data"
  if (local_path / PLUGINS_FILENAME).exists():
    return local_path

  try:
    return Path(str(files("ember_babel") / "data"))
  except (ModuleNotFoundError, TypeError):
    pass
  return local_path


class FeatureSupport(BaseModel):
  """One row of the table."""

  support: Dict[str, str] = Field(default_factory=dict, description="Engine -> first version with native support.")
  accepts: List[str] = Field(default_factory=list, description="Preset options this plugin honours.")

  @field_validator("support", mode="before")
  @classmethod
  def validate_versions(cls, v: Any) -> Dict[str, str]:
    """Normalizes engine names and rejects unparsable versions."""
    if not isinstance(v, dict):
      raise ValueError("support must be a mapping of engine to version")
    cleaned = {}
    for engine, version in v.items():
      version = str(version)
      parse_version(version)
      cleaned[engine.strip().lower()] = version
    return cleaned

  def min_version(self, engine: str) -> Optional[str]:
    return self.support.get(engine.lower())


class CompatibilityTable:
  """
  Ordered collection of ``FeatureSupport`` rows keyed by plugin identifier.

  Row order is the order in which selected plugins are emitted.
  """

  def __init__(self, rows: Mapping[str, FeatureSupport]):
    self._rows: Dict[str, FeatureSupport] = dict(rows)

  @classmethod
  def from_mapping(cls, data: Mapping[str, Any]) -> "CompatibilityTable":
    """
    Builds a table from raw JSON-like data.

    Raises:
        ValueError: If a row fails validation.
    """
    rows = {}
    for plugin_id, raw in data.items():
      try:
        rows[plugin_id] = FeatureSupport.model_validate(raw)
      except ValidationError as e:
        raise ValueError(f"Invalid compatibility row '{plugin_id}': {e}") from e
    return cls(rows)

  @classmethod
  def load(cls, path: Optional[Path] = None) -> "CompatibilityTable":
    """
    Loads a table from disk.

    Args:
        path: JSON file to read. Defaults to the bundled table.
    """
    target = path or resolve_data_dir() / PLUGINS_FILENAME
    with open(target, "rt", encoding="utf-8") as f:
      return cls.from_mapping(json.load(f))

  def extend(self, data: Mapping[str, Any]) -> "CompatibilityTable":
    """
    Returns a new table with ``data`` rows added (or replacing existing rows).
    """
    merged = dict(self._rows)
    merged.update(CompatibilityTable.from_mapping(data)._rows)
    return CompatibilityTable(merged)

  def get(self, plugin_id: str) -> Optional[FeatureSupport]:
    return self._rows.get(plugin_id)

  def __contains__(self, plugin_id: object) -> bool:
    return plugin_id in self._rows

  def __iter__(self) -> Iterator[str]:
    return iter(self._rows)

  def __len__(self) -> int:
    return len(self._rows)

  def engines(self) -> List[str]:
    """All engines mentioned by any row, sorted."""
    seen = set()
    for row in self._rows.values():
      seen.update(row.support.keys())
    return sorted(seen)


@lru_cache(maxsize=1)
def default_table() -> CompatibilityTable:
  """The bundled table, loaded once."""
  return CompatibilityTable.load()
