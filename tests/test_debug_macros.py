"""
Tests for debug macro plugin configuration.
"""

import pytest

from ember_babel.debug_macros import DEBUG_MACROS_PLUGIN, debug_flag_value, get_debug_macro_plugins
from ember_babel.enums import BuildEnvironment


@pytest.mark.parametrize(
  "environment, expected",
  [
    (BuildEnvironment.DEVELOPMENT, True),
    (BuildEnvironment.PRODUCTION, False),
    (BuildEnvironment.OTHER, None),
  ],
)
def test_debug_flag_value(environment, expected):
  assert debug_flag_value(environment) is expected


def test_disabled_gives_no_plugins():
  assert get_debug_macro_plugins(BuildEnvironment.DEVELOPMENT, disable_debug_tooling=True) == []


def test_plugin_configuration_in_development():
  (plugin,) = get_debug_macro_plugins(BuildEnvironment.DEVELOPMENT)
  assert plugin.name == DEBUG_MACROS_PLUGIN
  assert plugin.options["flags"] == [{"source": "@glimmer/env", "flags": {"DEBUG": True}}]
  assert plugin.options["externalizeHelpers"] == {"global": "Ember"}
  assert plugin.options["debugTools"] == {"source": "@ember/debug", "assertPredicateIndex": 1}


def test_production_inlines_false():
  (plugin,) = get_debug_macro_plugins(BuildEnvironment.PRODUCTION)
  assert plugin.options["flags"][0]["flags"]["DEBUG"] is False


def test_other_environment_leaves_flag_untouched():
  (plugin,) = get_debug_macro_plugins(BuildEnvironment.OTHER)
  assert plugin.options["flags"][0]["flags"]["DEBUG"] is None


def test_as_babel_notation():
  (plugin,) = get_debug_macro_plugins(BuildEnvironment.DEVELOPMENT)
  rendered = plugin.as_babel()
  assert rendered[0] == "debug-macros"
  assert rendered[1]["debugTools"]["source"] == "@ember/debug"
