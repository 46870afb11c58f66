"""
Module Syntax Configuration.

The module-syntax plugin rewrites ``import``/``export`` into AMD ``define``
calls. Module specifiers are resolved against the importing module's name so
that the runtime loader sees absolute module names.
"""

from ember_babel.schema import PluginSpec

MODULES_PLUGIN = "transform-es2015-modules-amd"

# Name under which engines running out of process look the resolver up.
MODULE_RESOLVER_NAME = "amd-name-resolver"


def module_resolve(child: str, name: str) -> str:
  """
  Resolves an import specifier relative to the importing module.

  ``module_resolve("./b", "app/a")`` gives ``"app/b"``; non-relative
  specifiers are returned untouched.

  Args:
      child: The specifier as written in the source.
      name: Module name of the importing file.

  Returns:
      str: The absolute module name.

  Raises:
      ValueError: If the specifier climbs above the root.
  """
  if not child.startswith("."):
    return child

  base = name.split("/")[:-1]
  for part in child.split("/"):
    if part == "..":
      if not base:
        raise ValueError(f"Cannot access parent module of root: '{child}' from '{name}'")
      base.pop()
    elif part == ".":
      continue
    else:
      base.append(part)
  return "/".join(base)


module_resolve.resolver_name = MODULE_RESOLVER_NAME


def get_modules_plugin() -> PluginSpec:
  return PluginSpec(name=MODULES_PLUGIN, options={"noInterop": True})
