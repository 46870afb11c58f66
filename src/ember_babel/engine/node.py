"""
Node.js Babel Engine.

Runs ``bridge.js`` with the system ``node`` binary once per file. The request
travels as JSON on stdin::

    {"source": ..., "filename": ..., "moduleId": ..., "options": {...}}

and the bridge answers ``{"code": ...}`` on stdout. Plugins are looked up by
name (``babel-plugin-<name>`` first, then ``<name>``) from the working
directory's ``node_modules``. Callables cannot cross the process boundary:
``resolveModuleSource`` is sent as the name of the strategy it implements.
"""

import json
import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

from ember_babel.engine.base import TransformError
from ember_babel.schema import BabelOptions, PluginSpec

BRIDGE_PATH = Path(__file__).parent / "bridge.js"


def _serialize_plugin(plugin: Any, filename: str) -> Any:
  if isinstance(plugin, PluginSpec):
    return plugin.as_babel()
  if isinstance(plugin, str):
    return plugin
  if isinstance(plugin, (list, tuple)) and plugin and isinstance(plugin[0], str):
    return list(plugin)
  raise TransformError(filename, f"Plugin {plugin!r} cannot be passed to a Node.js engine; use its package name")


def serialize_options(options: BabelOptions, filename: str) -> Dict[str, Any]:
  """
  Renders ``options`` as JSON-safe data for the bridge.

  Args:
      options: The configuration.
      filename: File being transformed, for error messages.

  Returns:
      Dict[str, Any]: Babel options.

  Raises:
      TransformError: If a plugin or resolver has no JSON representation.
  """
  rendered = options.to_babel()
  rendered["plugins"] = [_serialize_plugin(p, filename) for p in options.plugins]

  resolver = rendered.get("resolveModuleSource")
  if resolver is not None:
    name = getattr(resolver, "resolver_name", None)
    if not name:
      raise TransformError(filename, f"Module source resolver {resolver!r} has no registered name")
    rendered["resolveModuleSource"] = name
  return rendered


class NodeBabelEngine:
  """
  ``TransformEngine`` backed by ``babel-core`` in a Node.js subprocess.
  """

  def __init__(self, node_binary: str = "node", cwd: Optional[Path] = None, bridge_path: Optional[Path] = None):
    """
    Args:
        node_binary: Name or path of the Node.js executable.
        cwd: Directory whose node_modules provide Babel and its plugins.
        bridge_path: Override for the bundled bridge script.
    """
    self.node_binary = node_binary
    self.cwd = cwd
    self.bridge_path = bridge_path or BRIDGE_PATH

  def _command(self, *extra: str) -> List[str]:
    return [self.node_binary, str(self.bridge_path), *extra]

  def is_available(self) -> bool:
    """
    Checks that Node.js runs and can load ``babel-core``.

    Returns:
        bool: True if transforms can be attempted.
    """
    if not shutil.which(self.node_binary):
      return False
    try:
      proc = subprocess.run(self._command("--check"), capture_output=True, text=True, cwd=self.cwd)
    except OSError:
      return False
    return proc.returncode == 0

  def transform(
    self,
    source: str,
    options: BabelOptions,
    filename: str,
    module_id: Optional[str] = None,
  ) -> str:
    payload = {
      "source": source,
      "filename": filename,
      "moduleId": module_id,
      "options": serialize_options(options, filename),
    }
    try:
      request = json.dumps(payload)
    except (TypeError, ValueError) as e:
      raise TransformError(filename, f"Options are not serializable: {e}") from e

    try:
      proc = subprocess.run(
        self._command(),
        input=request,
        capture_output=True,
        text=True,
        cwd=self.cwd,
      )
    except OSError as e:
      raise TransformError(filename, f"Could not start '{self.node_binary}': {e}") from e

    if proc.returncode != 0:
      raise TransformError(filename, proc.stderr.strip() or f"Babel exited with status {proc.returncode}")

    try:
      return json.loads(proc.stdout)["code"]
    except (ValueError, KeyError) as e:
      raise TransformError(filename, f"Malformed engine response: {e}") from e
