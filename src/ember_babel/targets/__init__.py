"""
Target runtimes: the compatibility table, target queries and the plugin
requirement decision.
"""

from ember_babel.targets.compat import CompatibilityTable, FeatureSupport, default_table
from ember_babel.targets.decider import is_plugin_required, select_compat_plugins
from ember_babel.targets.query import TargetDescriptor, parse_query, resolve_targets

__all__ = [
  "CompatibilityTable",
  "FeatureSupport",
  "TargetDescriptor",
  "default_table",
  "is_plugin_required",
  "parse_query",
  "resolve_targets",
  "select_compat_plugins",
]
