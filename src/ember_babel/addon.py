"""
Addon Facade.

``BabelAddon`` is the object a host toolchain talks to. It holds the host
state (who consumes the addon, declared targets, the host toolchain version,
the build environment) and exposes the pipeline operations on top of it.

Usage
-----

.. code-block:: python

    from ember_babel import BabelAddon, BuildEnvironment

    addon = BabelAddon(
      parent_options={"babel": {"plugins": ["transform-object-rest-spread"]}},
      targets={"browsers": ["ie 11"]},
      environment=BuildEnvironment.PRODUCTION,
    )
    options = addon.build_babel_options()
    addon.transpile_tree("app", "dist/app")
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ember_babel.builder import PresetEnv, build_babel_options
from ember_babel.debug_macros import get_debug_macro_plugins
from ember_babel.driver import transpile_tree
from ember_babel.engine.base import TransformEngine
from ember_babel.engine.node import NodeBabelEngine
from ember_babel.enums import BuildEnvironment
from ember_babel.options.deprecations import DeprecationLog, default_deprecations
from ember_babel.options.merger import (
  get_addon_flag,
  get_addon_provided_config,
  resolve_compile_modules_flag,
  should_include_polyfill,
)
from ember_babel.options.sources import resolve_addon_options
from ember_babel.schema import AddonProvidedConfig, BabelOptions, PluginSpec
from ember_babel.targets.compat import CompatibilityTable
from ember_babel.targets.decider import is_plugin_required
from ember_babel.targets.query import TargetDescriptor, resolve_targets
from ember_babel.versioning import VersionComparator, should_compile_modules


class BabelAddon:
  """
  Host-facing entry point of the pipeline.

  Attributes are plain and may be reassigned between calls; every operation
  recomputes its result from the current state.

  Attributes:
      parent_options: Options declared by the consuming project or addon.
      app_options: Options declared by the hosting application.
      parent_name: Name of the consumer, used in the build annotation.
      targets: Raw declared targets (see ``ember_babel.targets.query``).
      cli_checker: Comparator over the host toolchain version, if known.
      environment: The build environment.
      deprecations: Log receiving deprecation notices.
      preset_env: Optional replacement for compatibility plugin selection.
      table: Compatibility table (None for the bundled one).
  """

  def __init__(
    self,
    parent_options: Optional[Dict[str, Any]] = None,
    app_options: Optional[Dict[str, Any]] = None,
    parent_name: Optional[str] = None,
    targets: Any = None,
    cli_checker: Optional[VersionComparator] = None,
    environment: Optional[BuildEnvironment] = None,
    deprecations: Optional[DeprecationLog] = None,
    preset_env: Optional[PresetEnv] = None,
    table: Optional[CompatibilityTable] = None,
  ):
    self.parent_options = parent_options
    self.app_options = app_options
    self.parent_name = parent_name
    self.targets = targets
    self.cli_checker = cli_checker
    self.environment = environment if environment is not None else BuildEnvironment.from_env()
    self.deprecations = deprecations if deprecations is not None else default_deprecations
    self.preset_env = preset_env
    self.table = table

  def get_addon_options(self) -> Dict[str, Any]:
    return resolve_addon_options(self.parent_options, self.app_options)

  def get_addon_provided_config(self, addon_options: Optional[Dict[str, Any]] = None) -> AddonProvidedConfig:
    config = addon_options if addon_options is not None else self.get_addon_options()
    return get_addon_provided_config(config)

  def should_include_polyfill(self) -> bool:
    return should_include_polyfill(self.get_addon_options(), self.deprecations)

  def should_compile_modules(self, config: Optional[Dict[str, Any]] = None) -> bool:
    """
    Decides whether the module-syntax plugin runs for ``config``.

    Args:
        config: Options layer to inspect. Defaults to ``get_addon_options()``.
    """
    addon_options = config if config is not None else self.get_addon_options()
    explicit = resolve_compile_modules_flag(addon_options, self.deprecations)
    return should_compile_modules(explicit, self.cli_checker)

  def get_targets(self) -> Optional[TargetDescriptor]:
    return resolve_targets(self.targets)

  def is_plugin_required(self, plugin_name: str) -> bool:
    """
    Checks whether the declared targets need ``plugin_name``.

    Other addons use this to skip their own transforms.
    """
    return is_plugin_required(plugin_name, self.get_targets(), self.table)

  def get_debug_macro_plugins(self, config: Optional[Dict[str, Any]] = None) -> List[PluginSpec]:
    addon_options = config if config is not None else self.get_addon_options()
    disabled = get_addon_flag(addon_options, "disableDebugTooling", False) is True
    return get_debug_macro_plugins(self.environment, disabled)

  def build_babel_options(self, config: Optional[Dict[str, Any]] = None) -> BabelOptions:
    """
    Builds the final configuration.

    Args:
        config: Options layer to use instead of ``get_addon_options()``.

    Returns:
        BabelOptions: The complete configuration.
    """
    addon_options = config if config is not None else self.get_addon_options()
    return build_babel_options(
      addon_options,
      targets=self.get_targets(),
      environment=self.environment,
      cli_checker=self.cli_checker,
      parent_name=self.parent_name,
      deprecations=self.deprecations,
      preset_env=self.preset_env,
      table=self.table,
      compile_modules=self.should_compile_modules(addon_options),
    )

  def transpile_tree(
    self,
    input_dir: Union[str, Path],
    output_dir: Union[str, Path],
    config: Optional[Dict[str, Any]] = None,
    engine: Optional[TransformEngine] = None,
  ) -> List[Path]:
    """
    Builds the configuration and applies it to a directory tree.

    Args:
        input_dir: Source tree.
        output_dir: Destination tree.
        config: Options layer to use instead of ``get_addon_options()``.
        engine: Transform engine. Defaults to ``NodeBabelEngine()``.

    Returns:
        List[Path]: Relative paths written.
    """
    options = self.build_babel_options(config)
    return transpile_tree(Path(input_dir), Path(output_dir), options, engine or NodeBabelEngine())
