"""
Debug Macro Configuration.

Chooses how the ``debug-macros`` plugin rewrites two kinds of source
constructs, based on the build environment:

1.  **Flag inlining**: references to ``DEBUG`` imported from ``@glimmer/env``
    become the literal ``true`` (development) or ``false`` (production). In
    any other environment the reference is left in place.
2.  **Assertion lowering**: ``assert(msg, cond)`` imported from
    ``@ember/debug`` becomes ``(<flag> && Ember.assert(msg, cond))``, keeping
    argument order and count.

The plugin runs right after user plugins so compatibility plugins still see
its output.
"""

from typing import Dict, List, Optional

from ember_babel.enums import BuildEnvironment
from ember_babel.schema import PluginSpec

DEBUG_MACROS_PLUGIN = "debug-macros"

ENV_FLAGS_SOURCE = "@glimmer/env"
DEBUG_FLAG = "DEBUG"
DEBUG_TOOLS_SOURCE = "@ember/debug"
RUNTIME_GLOBAL = "Ember"

# The predicate of ``assert(message, predicate)``.
ASSERT_PREDICATE_INDEX = 1


def debug_flag_value(environment: BuildEnvironment) -> Optional[bool]:
  """
  Literal that replaces ``DEBUG`` for an environment.

  Returns:
      Optional[bool]: True, False, or None to leave the reference untouched.
  """
  if environment == BuildEnvironment.DEVELOPMENT:
    return True
  if environment == BuildEnvironment.PRODUCTION:
    return False
  return None


def get_debug_macro_plugins(environment: BuildEnvironment, disable_debug_tooling: bool = False) -> List[PluginSpec]:
  """
  Builds the debug macro plugins for a build.

  Args:
      environment: The build environment classification.
      disable_debug_tooling: Opt-out; source then passes through unchanged.

  Returns:
      List[PluginSpec]: Zero or one plugin.
  """
  if disable_debug_tooling:
    return []

  flags: Dict[str, Optional[bool]] = {DEBUG_FLAG: debug_flag_value(environment)}

  return [
    PluginSpec(
      name=DEBUG_MACROS_PLUGIN,
      options={
        "flags": [{"source": ENV_FLAGS_SOURCE, "flags": flags}],
        "externalizeHelpers": {"global": RUNTIME_GLOBAL},
        "debugTools": {
          "source": DEBUG_TOOLS_SOURCE,
          "assertPredicateIndex": ASSERT_PREDICATE_INDEX,
        },
      },
    )
  ]
