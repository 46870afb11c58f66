"""
Target Descriptor Resolution.

Turns the targets declared by a host project into the descriptor the
requirement decider works on: a mapping of engine name to the lowest version
that must be supported, or ``None`` when no targets were declared.

Accepted inputs:

- ``None`` (unspecified: every optional plugin is required).
- A mapping of engine to version, e.g. ``{"chrome": "60", "node": "6.5"}``,
  optionally with a ``browsers`` entry holding queries.
- A query string or list of query strings (browserslist style):
  ``"ie 9"``, ``"chrome >= 60"``, ``"last 2 chrome versions"``,
  ``"last 1 version"``, ``"node current"``.
"""

import json
import re
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional

from ember_babel.targets.compat import resolve_data_dir
from ember_babel.versioning import compare_versions, parse_version

TargetDescriptor = Dict[str, str]

BROWSERS_FILENAME = "browsers.json"

# Not browsers: only reachable through an explicit engine name.
SERVER_ENGINES = ("node",)

ENGINE_ALIASES = {
  "and_chr": "chrome",
  "chromeandroid": "chrome",
  "explorer": "ie",
  "ff": "firefox",
  "ios_saf": "ios",
}

_LAST_N = re.compile(r"^last\s+(\d+)\s+(?:(\w+)\s+)?versions?$", re.IGNORECASE)
_ENGINE_VERSION = re.compile(r"^(\w+)\s*(>=|>)?\s*([\d.]+|current)$", re.IGNORECASE)


@lru_cache(maxsize=1)
def latest_releases() -> Dict[str, str]:
  """
  Latest known release per engine, used by ``last N versions`` queries.

  Returns:
      Dict[str, str]: Engine -> version.
  """
  with open(resolve_data_dir() / BROWSERS_FILENAME, "rt", encoding="utf-8") as f:
    return {k.lower(): str(v) for k, v in json.load(f).items()}


def normalize_engine(name: str) -> str:
  cleaned = name.strip().lower()
  return ENGINE_ALIASES.get(cleaned, cleaned)


def _last_versions(count: int, engine: Optional[str]) -> TargetDescriptor:
  """
  Resolves ``last N [engine] versions``.

  ``last 1`` keeps the full latest release (safari 17.2). Larger counts step
  back by major version only, so e.g. ``last 2 safari versions`` gives 16
  rather than 17.1; the lower bound can only add plugins. Without an engine,
  every browser in ``browsers.json`` is included and ``node`` is not.
  """
  releases = latest_releases()
  engines = [normalize_engine(engine)] if engine else [e for e in releases if e not in SERVER_ENGINES]

  resolved = {}
  for name in engines:
    if name not in releases:
      raise ValueError(f"Unknown engine in target query: '{name}'")
    if count == 1:
      resolved[name] = releases[name]
      continue
    major = parse_version(releases[name])[0][0]
    resolved[name] = str(max(major - (count - 1), 0))
  return resolved


def parse_query(query: str) -> TargetDescriptor:
  """
  Resolves one query string.

  ``>`` is treated like ``>=``: including a plugin one version too long only
  costs output size.

  Args:
      query: e.g. "ie 9" or "last 2 chrome versions".

  Returns:
      TargetDescriptor: Engines named by the query with their minimum version.

  Raises:
      ValueError: If the query is not understood.
  """
  text = " ".join(query.split())

  match = _LAST_N.match(text)
  if match:
    count = int(match.group(1))
    if count < 1:
      raise ValueError(f"Invalid target query: '{query}'")
    return _last_versions(count, match.group(2))

  match = _ENGINE_VERSION.match(text)
  if match:
    engine = normalize_engine(match.group(1))
    version = match.group(3)
    if version.lower() == "current":
      releases = latest_releases()
      if engine not in releases:
        raise ValueError(f"Unknown engine in target query: '{engine}'")
      version = releases[engine]
    parse_version(version)
    return {engine: version}

  raise ValueError(f"Invalid target query: '{query}'")


def _split_queries(raw: Any) -> List[str]:
  if isinstance(raw, str):
    return [q.strip() for q in raw.split(",") if q.strip()]
  queries: List[str] = []
  for item in raw:
    queries.extend(_split_queries(item))
  return queries


def _merge_lowest(into: TargetDescriptor, found: Dict[str, str]) -> None:
  for engine, version in found.items():
    if engine not in into or compare_versions(version, into[engine]) < 0:
      into[engine] = version


def resolve_targets(raw: Any) -> Optional[TargetDescriptor]:
  """
  Resolves host targets into a descriptor.

  When an engine is named more than once the lowest version wins.

  Args:
      raw: The host's declared targets (see module docstring).

  Returns:
      Optional[TargetDescriptor]: The descriptor, or None when unspecified.

  Raises:
      ValueError: If a query or version is invalid.
  """
  if raw is None:
    return None

  resolved: TargetDescriptor = {}
  queries: Iterable[Any]

  if isinstance(raw, dict):
    for key, value in raw.items():
      if key == "browsers":
        continue
      _merge_lowest(resolved, parse_query(f"{key} {value}"))
    queries = _split_queries(raw.get("browsers") or [])
  else:
    queries = _split_queries(raw)

  for query in queries:
    _merge_lowest(resolved, parse_query(query))

  return resolved
