"""
Babel Options Builder.

Composes option resolution, debug macros, target-driven plugin selection and
module compilation into one self-contained ``BabelOptions`` object.

The plugin sequence is always::

    user plugins
    ++ debug macro plugin        (unless disableDebugTooling)
    ++ compatibility plugins     (per targets)
    ++ module-syntax plugin      (if modules are compiled)
    ++ post-transform plugins

Only an allow-list of options reaches the result (``sourceMaps``,
``annotation``); any other key a user puts into ``babel``/``babel6`` only
influences compatibility plugin selection (``loose``, ``spec``).
"""

from typing import Any, Callable, Dict, List, Optional

from ember_babel.debug_macros import get_debug_macro_plugins
from ember_babel.enums import BuildEnvironment
from ember_babel.modules import get_modules_plugin, module_resolve
from ember_babel.options.deprecations import DeprecationLog
from ember_babel.options.merger import (
  get_addon_flag,
  get_addon_provided_config,
  resolve_compile_modules_flag,
)
from ember_babel.schema import AddonProvidedConfig, BabelOptions
from ember_babel.targets.compat import CompatibilityTable
from ember_babel.targets.decider import select_compat_plugins
from ember_babel.targets.query import TargetDescriptor
from ember_babel.versioning import VersionComparator, should_compile_modules

# Receives the merged transform options plus "targets"/"modules"; returns plugins.
PresetEnv = Callable[[Dict[str, Any]], List[Any]]


def build_preset_options(provided: AddonProvidedConfig, targets: Optional[TargetDescriptor]) -> Dict[str, Any]:
  """
  Options handed to the compatibility plugin selection.

  Module transformation is disabled there; it is handled by its own plugin.
  """
  preset_options = dict(provided.options)
  preset_options["modules"] = False
  preset_options["targets"] = targets
  return preset_options


def build_babel_options(
  addon_options: Dict[str, Any],
  targets: Optional[TargetDescriptor] = None,
  environment: BuildEnvironment = BuildEnvironment.DEVELOPMENT,
  cli_checker: Optional[VersionComparator] = None,
  parent_name: Optional[str] = None,
  deprecations: Optional[DeprecationLog] = None,
  preset_env: Optional[PresetEnv] = None,
  table: Optional[CompatibilityTable] = None,
  compile_modules: Optional[bool] = None,
) -> BabelOptions:
  """
  Builds the final transform configuration.

  Args:
      addon_options: The authoritative options layer.
      targets: Resolved target descriptor; None means unspecified.
      environment: Build environment for debug macros.
      cli_checker: Comparator over the host toolchain version, if known.
      parent_name: Name of the consuming project, used in the annotation.
      deprecations: Deprecation log (defaults to the process-wide one).
      preset_env: Replacement for the compatibility plugin selection.
      table: Compatibility table for the default selection.
      compile_modules: Pre-computed module decision. Computed when None.

  Returns:
      BabelOptions: The complete configuration.
  """
  provided = get_addon_provided_config(addon_options)

  if compile_modules is None:
    explicit = resolve_compile_modules_flag(addon_options, deprecations)
    compile_modules = should_compile_modules(explicit, cli_checker)

  disable_debug_tooling = get_addon_flag(addon_options, "disableDebugTooling", False) is True

  preset_options = build_preset_options(provided, targets)
  if preset_env is not None:
    compat_plugins = list(preset_env(preset_options))
  else:
    compat_plugins = select_compat_plugins(preset_options, table)

  plugins: List[Any] = []
  plugins.extend(provided.plugins)
  plugins.extend(get_debug_macro_plugins(environment, disable_debug_tooling))
  plugins.extend(compat_plugins)
  if compile_modules:
    plugins.append(get_modules_plugin())
  plugins.extend(provided.post_transform_plugins)

  annotation = get_addon_flag(addon_options, "annotation")
  if not annotation and parent_name:
    annotation = f"Babel: {parent_name}"

  return BabelOptions(
    babelrc=False,
    plugins=plugins,
    module_ids=True if compile_modules else None,
    resolve_module_source=module_resolve if compile_modules else None,
    source_maps=provided.options.get("sourceMaps"),
    annotation=annotation,
  )
