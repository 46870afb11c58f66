"""
ember-babel Package.

Resolves the Babel transform configuration for an Ember build from layered
user options, the declared target runtimes and the build environment, and
applies it to a source tree.

Usage
-----

Building Options
^^^^^^^^^^^^^^^^

.. code-block:: python

    import ember_babel as eb

    options = eb.build_options(
      {"babel": {"sourceMaps": "inline"}},
      targets=["last 2 chrome versions"],
      environment="production",
    )
    print(options.to_babel()["plugins"])

Transpiling a Tree
^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from ember_babel import BabelAddon

    addon = BabelAddon(parent_options={}, targets={"browsers": ["ie 11"]})
    addon.transpile_tree("app", "dist/app")
"""

from typing import Any, Dict, Optional

from ember_babel.addon import BabelAddon
from ember_babel.builder import build_babel_options
from ember_babel.config import RuntimeConfig
from ember_babel.driver import TranspileError, transpile_tree
from ember_babel.engine import NodeBabelEngine, TransformEngine, TransformError
from ember_babel.enums import BuildEnvironment
from ember_babel.schema import BabelOptions, PluginSpec
from ember_babel.targets.query import resolve_targets
from ember_babel.versioning import VersionChecker

__version__ = "0.0.1"


def build_options(
  options: Optional[Dict[str, Any]] = None,
  targets: Any = None,
  environment: str = "development",
  host_version: Optional[str] = None,
) -> BabelOptions:
  """
  Builds a transform configuration from plain values.

  A convenience wrapper around ``build_babel_options`` for callers that do not
  need a ``BabelAddon``.

  Args:
      options: The options layer (``ember-cli-babel``, ``babel``, ``babel6``).
      targets: Declared targets; None requires every compatibility plugin.
      environment: Build environment name.
      host_version: Host toolchain version, if known.

  Returns:
      BabelOptions: The complete configuration.

  Raises:
      ValueError: If targets or the host version are invalid.
  """
  checker = VersionChecker(host_version) if host_version else None
  return build_babel_options(
    options or {},
    targets=resolve_targets(targets),
    environment=BuildEnvironment.classify(environment),
    cli_checker=checker,
  )


__all__ = [
  "BabelAddon",
  "BabelOptions",
  "BuildEnvironment",
  "NodeBabelEngine",
  "PluginSpec",
  "RuntimeConfig",
  "TransformEngine",
  "TransformError",
  "TranspileError",
  "VersionChecker",
  "build_babel_options",
  "build_options",
  "transpile_tree",
  "__version__",
]
