"""
Merging Logic for Addon Options.

An options layer can carry three namespaces:

- ``ember-cli-babel``: flags owned by this addon (``includePolyfill``,
  ``compileModules``, ``disableDebugTooling``, ``annotation``).
- ``babel``: the current transform options namespace.
- ``babel6``: the legacy transform options namespace.

Handles:
- Folding ``babel6`` into ``babel`` (current wins on conflicting keys,
  legacy plugin lists are appended after current ones).
- Reading flags that moved from ``babel`` into ``ember-cli-babel``, with a
  one-time deprecation notice for the old location.

Nothing here mutates the caller's structures; every returned container is a
fresh copy.
"""

from typing import Any, Dict, List, Optional

from ember_babel.options.deprecations import (
  DeprecationLog,
  default_deprecations,
  deprecated_namespace_message,
)
from ember_babel.schema import AddonProvidedConfig

ADDON_NAMESPACE = "ember-cli-babel"
CURRENT_NAMESPACE = "babel"
LEGACY_NAMESPACE = "babel6"


def _namespace(addon_options: Dict[str, Any], name: str) -> Dict[str, Any]:
  value = addon_options.get(name)
  return dict(value) if value else {}


def _as_list(value: Any) -> List[Any]:
  if value is None:
    return []
  if isinstance(value, (list, tuple)):
    return list(value)
  return [value]


def get_addon_provided_config(addon_options: Dict[str, Any]) -> AddonProvidedConfig:
  """
  Merges the current and legacy transform namespaces.

  Args:
      addon_options: The authoritative options layer.

  Returns:
      AddonProvidedConfig: Merged options plus the lifted plugin lists.
  """
  current = _namespace(addon_options, CURRENT_NAMESPACE)
  legacy = _namespace(addon_options, LEGACY_NAMESPACE)

  plugins = _as_list(current.pop("plugins", None)) + _as_list(legacy.pop("plugins", None))
  post_transform = _as_list(current.pop("postTransformPlugins", None)) + _as_list(
    legacy.pop("postTransformPlugins", None)
  )

  merged = dict(legacy)
  merged.update(current)

  return AddonProvidedConfig(
    options=merged,
    plugins=plugins,
    post_transform_plugins=post_transform,
  )


def _resolve_moved_flag(
  addon_options: Dict[str, Any],
  key: str,
  deprecations: Optional[DeprecationLog],
) -> Optional[Any]:
  """
  Reads a flag that moved from ``babel`` to ``ember-cli-babel``.

  Args:
      addon_options: The authoritative options layer.
      key: Flag name.
      deprecations: Log receiving the notice for the old location.

  Returns:
      The declared value, or None when declared nowhere.
  """
  log = deprecations if deprecations is not None else default_deprecations
  custom = addon_options.get(ADDON_NAMESPACE) or {}
  babel = addon_options.get(CURRENT_NAMESPACE) or {}

  if key in babel:
    log.warn_once(f"{CURRENT_NAMESPACE}.{key}", deprecated_namespace_message(key))

  if key in custom:
    return custom[key]
  if key in babel:
    return babel[key]
  return None


def should_include_polyfill(
  addon_options: Dict[str, Any],
  deprecations: Optional[DeprecationLog] = None,
) -> bool:
  """
  Decides whether the runtime polyfill is bundled.

  Args:
      addon_options: The authoritative options layer.
      deprecations: Deprecation log (defaults to the process-wide one).

  Returns:
      bool: True only if the flag is declared as ``True``.
  """
  return _resolve_moved_flag(addon_options, "includePolyfill", deprecations) is True


def resolve_compile_modules_flag(
  addon_options: Dict[str, Any],
  deprecations: Optional[DeprecationLog] = None,
) -> Optional[bool]:
  """
  Reads the explicit ``compileModules`` flag.

  Args:
      addon_options: The authoritative options layer.
      deprecations: Deprecation log (defaults to the process-wide one).

  Returns:
      Optional[bool]: The declared value, or None to fall back to the
      version-gated default.
  """
  value = _resolve_moved_flag(addon_options, "compileModules", deprecations)
  if value is None:
    return None
  return value is True


def get_addon_flag(addon_options: Dict[str, Any], key: str, default: Any = None) -> Any:
  """
  Reads a flag that only lives in the ``ember-cli-babel`` namespace.

  Args:
      addon_options: The authoritative options layer.
      key: Flag name, e.g. "disableDebugTooling".
      default: Returned when the flag is not declared.

  Returns:
      The declared value or ``default``.
  """
  custom = addon_options.get(ADDON_NAMESPACE) or {}
  return custom.get(key, default)
