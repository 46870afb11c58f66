"""
Runtime Configuration Store.

Collects the host-side state of a build from ``[tool.ember_babel]`` in the
nearest ``pyproject.toml``, the process environment and CLI overrides.

Example ``pyproject.toml``::

    [tool.ember_babel]
    parent_name = "my-app"
    host_version = "3.4.0"
    targets = ["last 2 chrome versions", "ie 11"]

    [tool.ember_babel.options.ember-cli-babel]
    includePolyfill = true

    [tool.ember_babel.options.babel]
    plugins = ["transform-object-rest-spread"]
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ember_babel.enums import ENV_VAR, BuildEnvironment
from ember_babel.utils.console import log_warning
from ember_babel.versioning import VersionChecker, parse_version

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "ember_babel"


class RuntimeConfig(BaseModel):
  """
  Host configuration for one build invocation.
  """

  environment: BuildEnvironment = Field(BuildEnvironment.DEVELOPMENT, description="Build environment.")
  targets: Optional[Any] = Field(None, description="Declared targets (mapping, query or list of queries).")
  host_version: Optional[str] = Field(None, description="Version of the host toolchain, if known.")
  parent_name: Optional[str] = Field(None, description="Name of the consuming project.")
  options: Dict[str, Any] = Field(default_factory=dict, description="The host options layer.")
  node_binary: str = Field("node", description="Node.js executable used by the default engine.")

  @field_validator("environment", mode="before")
  @classmethod
  def validate_environment(cls, v: Any) -> BuildEnvironment:
    """Accepts any environment name; unknown names classify as OTHER."""
    if isinstance(v, BuildEnvironment):
      return v
    return BuildEnvironment.classify(str(v))

  @field_validator("host_version")
  @classmethod
  def validate_host_version(cls, v: Optional[str]) -> Optional[str]:
    """
    Rejects unparsable versions.

    Raises:
        ValueError: If the version cannot be parsed.
    """
    if v is not None:
      parse_version(v)
    return v

  def version_checker(self) -> Optional[VersionChecker]:
    """
    Returns:
        Optional[VersionChecker]: Comparator over ``host_version``, None if unknown.
    """
    if self.host_version is None:
      return None
    return VersionChecker(self.host_version)

  def create_addon(self, **overrides: Any):
    """
    Builds a ``BabelAddon`` from this configuration.

    Args:
        **overrides: Extra keyword arguments for ``BabelAddon``.
    """
    from ember_babel.addon import BabelAddon

    kwargs = dict(
      parent_options=self.options,
      parent_name=self.parent_name,
      targets=self.targets,
      cli_checker=self.version_checker(),
      environment=self.environment,
    )
    kwargs.update(overrides)
    return BabelAddon(**kwargs)

  @classmethod
  def load(
    cls,
    environment: Optional[str] = None,
    targets: Optional[List[str]] = None,
    host_version: Optional[str] = None,
    parent_name: Optional[str] = None,
    options: Optional[Dict[str, Any]] = None,
    node_binary: Optional[str] = None,
    search_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides it with arguments.

    Environment precedence: argument, ``EMBER_ENV``, TOML, development.

    Args:
        environment: Override for the build environment.
        targets: Override for the declared targets.
        host_version: Override for the host toolchain version.
        parent_name: Override for the consumer name.
        options: Options deep-merged over the TOML options layer.
        node_binary: Override for the Node.js executable.
        search_path: Directory to start searching for TOML config.
        environ: Environment mapping (defaults to ``os.environ``).

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the merged configuration is invalid.
    """
    env = os.environ if environ is None else environ
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    final_env = environment or env.get(ENV_VAR) or toml_config.get("environment") or BuildEnvironment.DEVELOPMENT.value
    final_targets = targets if targets else toml_config.get("targets")
    final_options = deep_merge(toml_config.get("options", {}), options or {})

    return cls(
      environment=final_env,
      targets=final_targets,
      host_version=host_version or toml_config.get("host_version"),
      parent_name=parent_name or toml_config.get("parent_name"),
      options=final_options,
      node_binary=node_binary or toml_config.get("node_binary", "node"),
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml'.

  Args:
      start_path: Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The tool section and the directory it was found in.

  Raises:
      ValueError: If the nearest pyproject.toml is not valid TOML.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {toml_path}: {e}")
      return data.get("tool", {}).get(TOOL_SECTION, {}), parent

  return {}, None


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
  """
  Recursively merges ``override`` into a copy of ``base``.

  Returns:
      Dict[str, Any]: A new dictionary; neither input is modified.
  """
  merged: Dict[str, Any] = dict(base)
  for key, value in override.items():
    if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
      merged[key] = deep_merge(merged[key], value)
    else:
      merged[key] = value
  return merged


def _infer_value(val_str: str) -> Any:
  lowered = val_str.lower()
  if lowered == "true":
    return True
  if lowered == "false":
    return False
  try:
    if "." in val_str or "e" in lowered:
      return float(val_str)
    return int(val_str)
  except ValueError:
    return val_str


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses 'key=value' strings into a nested dictionary.

  Dots in keys nest: ``ember-cli-babel.includePolyfill=true`` gives
  ``{"ember-cli-babel": {"includePolyfill": True}}``. Values are inferred
  (bool, int, float, or string).

  Args:
      items: Raw CLI strings.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      log_warning(f"Ignoring invalid config format: '{item}'. Expected 'key=value'.")
      continue

    key, val_str = item.split("=", 1)
    path = [part.strip() for part in key.strip().split(".") if part.strip()]
    if not path:
      log_warning(f"Ignoring config entry with empty key: '{item}'.")
      continue

    node = config
    for part in path[:-1]:
      child = node.get(part)
      if not isinstance(child, dict):
        child = {}
        node[part] = child
      node = child
    node[path[-1]] = _infer_value(val_str.strip())

  return config
