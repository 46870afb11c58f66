"""
Option resolution: choosing the authoritative options layer and merging its
transform namespaces.
"""

from ember_babel.options.deprecations import DeprecationLog, default_deprecations
from ember_babel.options.merger import (
  get_addon_provided_config,
  resolve_compile_modules_flag,
  should_include_polyfill,
)
from ember_babel.options.sources import resolve_addon_options

__all__ = [
  "DeprecationLog",
  "default_deprecations",
  "get_addon_provided_config",
  "resolve_addon_options",
  "resolve_compile_modules_flag",
  "should_include_polyfill",
]
