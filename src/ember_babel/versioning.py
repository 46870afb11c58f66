"""
Version Comparison and the Module Compilation Gate.

Handles parsing of dotted version strings (host toolchain versions, engine
versions from the compatibility table) and decides whether module syntax is
compiled by this addon or left to the host toolchain.
"""

import re
from typing import Optional, Protocol, Tuple, Union

# Host toolchains at or below this version compile modules themselves.
MODULES_THRESHOLD = "2.12.0-alpha.1"

_Identifier = Union[int, str]


class VersionComparator(Protocol):
  """Anything able to compare the host version against a given version."""

  def gt(self, version: str) -> bool:
    """Returns True if the host version is strictly greater than ``version``."""
    ...


def parse_version(v_str: str) -> Tuple[Tuple[int, ...], Tuple[_Identifier, ...]]:
  """
  Parses a version string into release and prerelease parts.

  Handles '9', '6.5', '2.12.0-alpha.1' and '2.13.0+build.7' (build metadata is
  ignored). A leading 'v' is tolerated.

  Args:
      v_str: The raw version string.

  Returns:
      Tuple: (release numbers, prerelease identifiers).

  Raises:
      ValueError: If no release number can be found.
  """
  cleaned = v_str.strip().lstrip("vV").split("+", 1)[0]
  release_str, _, pre_str = cleaned.partition("-")

  release = tuple(int(t) for t in re.split(r"[^\d]+", release_str) if t)
  if not release:
    raise ValueError(f"Invalid version: '{v_str}'")

  prerelease = tuple(int(p) if p.isdigit() else p for p in pre_str.split(".") if p)
  return release, prerelease


def _cmp(a, b) -> int:
  return (a > b) - (a < b)


def compare_versions(left: str, right: str) -> int:
  """
  Three-way comparison of two version strings.

  Release parts are zero-padded ('6' == '6.0.0'). A release ranks above any of
  its prereleases; numeric prerelease identifiers rank below alphanumeric ones.

  Returns:
      int: -1, 0 or 1.
  """
  l_rel, l_pre = parse_version(left)
  r_rel, r_pre = parse_version(right)

  width = max(len(l_rel), len(r_rel))
  l_rel = l_rel + (0,) * (width - len(l_rel))
  r_rel = r_rel + (0,) * (width - len(r_rel))
  if l_rel != r_rel:
    return _cmp(l_rel, r_rel)

  if not l_pre or not r_pre:
    # No prerelease beats a prerelease.
    return _cmp(not l_pre, not r_pre)

  for l_id, r_id in zip(l_pre, r_pre):
    if l_id == r_id:
      continue
    if isinstance(l_id, int) and isinstance(r_id, int):
      return _cmp(l_id, r_id)
    if isinstance(l_id, int):
      return -1
    if isinstance(r_id, int):
      return 1
    return _cmp(l_id, r_id)
  return _cmp(len(l_pre), len(r_pre))


class VersionChecker:
  """
  Compares a fixed host version against other versions.

  Satisfies ``VersionComparator``.
  """

  def __init__(self, version: str):
    parse_version(version)
    self.version = version

  def gt(self, version: str) -> bool:
    return compare_versions(self.version, version) > 0

  def gte(self, version: str) -> bool:
    return compare_versions(self.version, version) >= 0

  def lt(self, version: str) -> bool:
    return compare_versions(self.version, version) < 0

  def __repr__(self) -> str:
    return f"VersionChecker({self.version!r})"


def should_compile_modules(explicit: Optional[bool], checker: Optional[VersionComparator]) -> bool:
  """
  Decides whether the module-syntax plugin runs.

  An explicit flag always wins. Otherwise modules are compiled unless the host
  toolchain is known to be too old. Errors raised by ``checker`` propagate:
  guessing the host version could emit the wrong module format.

  Args:
      explicit: The resolved ``compileModules`` flag, or None.
      checker: Comparator over the host toolchain version, or None if unknown.

  Returns:
      bool: True if modules should be compiled.
  """
  if explicit is not None:
    return explicit
  if checker is None:
    return True
  return bool(checker.gt(MODULES_THRESHOLD))
