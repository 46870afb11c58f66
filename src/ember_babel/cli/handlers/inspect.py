"""CLI handlers for inspecting configuration without transforming files."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ember_babel.cli.matrix import CompatibilityMatrix
from ember_babel.config import RuntimeConfig
from ember_babel.schema import BabelOptions
from ember_babel.targets.query import resolve_targets
from ember_babel.utils.console import log_error


def options_to_json(options: BabelOptions) -> str:
  """
  Renders options for display. Opaque plugins and resolvers show by name.
  """
  rendered = options.to_babel()
  resolver = rendered.get("resolveModuleSource")
  if resolver is not None:
    rendered["resolveModuleSource"] = getattr(resolver, "resolver_name", repr(resolver))
  return json.dumps(rendered, indent=2, default=repr)


def handle_matrix(targets: Optional[List[str]] = None) -> int:
  """Handles 'matrix' command."""
  try:
    resolved = resolve_targets(targets) if targets else None
  except ValueError as e:
    log_error(str(e))
    return 1
  CompatibilityMatrix(targets=resolved).render()
  return 0


def handle_options(
  environment: Optional[str],
  targets: Optional[List[str]],
  host_version: Optional[str],
  settings: Dict[str, Any],
  search_path: Optional[Path] = None,
) -> int:
  """Handles 'options' command: prints the final options as JSON."""
  try:
    config = RuntimeConfig.load(
      environment=environment,
      targets=targets,
      host_version=host_version,
      options=settings,
      search_path=search_path,
    )
    options = config.create_addon().build_babel_options()
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  print(options_to_json(options))
  return 0
