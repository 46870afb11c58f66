"""
Plugin Requirement Decision.

Decides, per optional compatibility plugin, whether the declared targets need
it. Omitting a plugin is an output-size optimization only, so every doubt
(no targets, empty targets, unknown plugin, engine without native support)
resolves to "required".
"""

from typing import Any, Dict, List, Mapping, Optional

from ember_babel.schema import PluginSpec
from ember_babel.targets.compat import CompatibilityTable, default_table
from ember_babel.targets.query import TargetDescriptor
from ember_babel.versioning import compare_versions


def is_plugin_required(
  plugin_id: str,
  targets: Optional[TargetDescriptor],
  table: Optional[CompatibilityTable] = None,
) -> bool:
  """
  Checks whether any target lacks native support for a plugin's feature.

  Args:
      plugin_id: Identifier of the plugin, e.g. "transform-regenerator".
      targets: Engine -> minimum version, or None if unspecified.
      table: Compatibility table. Defaults to the bundled one.

  Returns:
      bool: True if the plugin must run.
  """
  if not targets:
    return True

  row = (table or default_table()).get(plugin_id)
  if row is None:
    return True

  for engine, version in targets.items():
    native_since = row.min_version(engine)
    if native_since is None:
      return True
    if compare_versions(version, native_since) < 0:
      return True
  return False


def _plugin_options(accepts: List[str], preset_options: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
  chosen = {k: preset_options[k] for k in accepts if preset_options.get(k) is not None}
  return chosen or None


def select_compat_plugins(
  preset_options: Mapping[str, Any],
  table: Optional[CompatibilityTable] = None,
) -> List[PluginSpec]:
  """
  Selects the compatibility plugins for the targets in ``preset_options``.

  Plugins are returned in table order. A plugin only gets options when the
  user set one of the keys its row accepts (``loose``, ``spec``); this
  forwards them the way preset-env does, instead of emitting bare plugins.

  Args:
      preset_options: Merged transform options plus ``targets``.
      table: Compatibility table. Defaults to the bundled one.

  Returns:
      List[PluginSpec]: The required plugins.
  """
  table = table or default_table()
  targets = preset_options.get("targets")

  selected = []
  for plugin_id in table:
    if is_plugin_required(plugin_id, targets, table):
      row = table.get(plugin_id)
      selected.append(PluginSpec(name=plugin_id, options=_plugin_options(row.accepts, preset_options)))
  return selected
