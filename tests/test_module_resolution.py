"""
Tests for module specifier resolution and the module-syntax plugin.
"""

import pytest

from ember_babel.modules import MODULES_PLUGIN, get_modules_plugin, module_resolve


@pytest.mark.parametrize(
  "child, name, expected",
  [
    ("./b", "app/a", "app/b"),
    ("../utils/c", "app/routes/a", "app/utils/c"),
    ("./nested/./d", "app/a", "app/nested/d"),
    ("ember", "app/a", "ember"),
    ("@ember/debug", "app/a", "@ember/debug"),
  ],
)
def test_module_resolve(child, name, expected):
  assert module_resolve(child, name) == expected


def test_climbing_above_root_fails():
  with pytest.raises(ValueError):
    module_resolve("../../x", "a")


def test_resolver_has_a_name():
  assert module_resolve.resolver_name == "amd-name-resolver"


def test_modules_plugin():
  plugin = get_modules_plugin()
  assert plugin.name == MODULES_PLUGIN
  assert plugin.as_babel() == ["transform-es2015-modules-amd", {"noInterop": True}]
