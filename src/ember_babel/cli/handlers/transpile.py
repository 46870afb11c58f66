"""
Transpile Command Handler.

Implements ``ember-babel transpile``:
1. Configuration loading (TOML + environment + CLI overrides).
2. Option building through ``BabelAddon``.
3. Tree transformation through the Node.js engine.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ember_babel.config import RuntimeConfig, deep_merge
from ember_babel.driver import TranspileError
from ember_babel.engine.node import NodeBabelEngine
from ember_babel.utils.console import log_error, log_info, log_success


def handle_transpile(
  input_path: Path,
  output_path: Path,
  environment: Optional[str],
  targets: Optional[List[str]],
  host_version: Optional[str],
  disable_debug_tooling: bool,
  settings: Dict[str, Any],
  node_binary: Optional[str] = None,
) -> int:
  """
  Handles the 'transpile' command.

  Args:
      input_path: Source directory.
      output_path: Destination directory.
      environment: Override for the build environment.
      targets: Override for the declared target queries.
      host_version: Override for the host toolchain version.
      disable_debug_tooling: Turns the debug macro plugin off.
      settings: Options layer overrides parsed from ``--config``.
      node_binary: Override for the Node.js executable.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_dir():
    log_error(f"Input directory not found: {input_path}")
    return 1

  overrides = settings
  if disable_debug_tooling:
    overrides = deep_merge(overrides, {"ember-cli-babel": {"disableDebugTooling": True}})

  try:
    config = RuntimeConfig.load(
      environment=environment,
      targets=targets,
      host_version=host_version,
      options=overrides,
      node_binary=node_binary,
      search_path=input_path,
    )
    addon = config.create_addon()
    options = addon.build_babel_options()
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  engine = NodeBabelEngine(node_binary=config.node_binary)
  if not engine.is_available():
    log_error(f"'{config.node_binary}' cannot load babel-core. Install it in the project's node_modules.")
    return 1

  log_info(f"Environment: [info]{config.environment.value}[/info], {len(options.plugins)} plugins")

  try:
    written = addon.transpile_tree(input_path, output_path, engine=engine)
  except TranspileError as e:
    log_error(str(e))
    return 1

  log_success(f"Transpiled {len(written)} files into [path]{output_path}[/path]")
  return 0
