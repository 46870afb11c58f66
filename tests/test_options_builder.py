"""
Tests for the Babel-Options Builder.

Verifies:
1. Plugin sequence: user, debug macros, compatibility, modules, post-transform.
2. Only allow-listed options reach the result.
3. Module compilation switches on the named-module settings.
4. The annotation comes from the addon flag or the consumer name.
"""

import pytest
from pydantic import ValidationError

from ember_babel.builder import build_babel_options, build_preset_options
from ember_babel.enums import BuildEnvironment
from ember_babel.modules import module_resolve
from ember_babel.schema import AddonProvidedConfig, BabelOptions, PluginSpec
from ember_babel.targets.compat import CompatibilityTable
from ember_babel.versioning import VersionChecker


@pytest.fixture
def tiny_table():
  return CompatibilityTable.from_mapping(
    {
      "transform-es2015-classes": {"support": {"chrome": "46"}, "accepts": ["loose"]},
      "transform-regenerator": {"support": {"chrome": "50"}},
    }
  )


def test_full_plugin_sequence(tiny_table, deprecations):
  user, late = object(), object()
  options = {"babel": {"plugins": [user], "postTransformPlugins": [late]}}

  result = build_babel_options(options, table=tiny_table, deprecations=deprecations)

  assert result.plugins[0] is user
  assert [p.name for p in result.plugins[1:-1]] == [
    "debug-macros",
    "transform-es2015-classes",
    "transform-regenerator",
    "transform-es2015-modules-amd",
  ]
  assert result.plugins[-1] is late


def test_targets_drop_unneeded_plugins(tiny_table, deprecations):
  result = build_babel_options({}, targets={"chrome": "48"}, table=tiny_table, deprecations=deprecations)
  assert [p.name for p in result.plugins] == [
    "debug-macros",
    "transform-regenerator",
    "transform-es2015-modules-amd",
  ]


def test_loose_reaches_compat_plugins(tiny_table, deprecations):
  result = build_babel_options({"babel6": {"loose": True}}, table=tiny_table, deprecations=deprecations)
  classes = next(p for p in result.plugins if p.name == "transform-es2015-classes")
  assert classes.options == {"loose": True}
  assert "loose" not in result.to_babel()


def test_old_host_skips_modules(tiny_table, deprecations):
  result = build_babel_options({}, cli_checker=VersionChecker("2.11.0"), table=tiny_table, deprecations=deprecations)
  assert result.module_ids is None
  assert result.resolve_module_source is None
  assert "transform-es2015-modules-amd" not in [p.name for p in result.plugins]


def test_compiling_modules_sets_named_modules(tiny_table, deprecations):
  result = build_babel_options({}, table=tiny_table, deprecations=deprecations)
  assert result.module_ids is True
  assert result.resolve_module_source is module_resolve


def test_explicit_module_decision_is_used(tiny_table, deprecations):
  options = {"ember-cli-babel": {"compileModules": True}}
  result = build_babel_options(options, compile_modules=False, table=tiny_table, deprecations=deprecations)
  assert result.module_ids is None
  assert deprecations.sink_messages == []


def test_deprecated_compile_modules_location(tiny_table, deprecations):
  result = build_babel_options({"babel": {"compileModules": False}}, table=tiny_table, deprecations=deprecations)
  assert result.module_ids is None
  assert len(deprecations.records) == 1


def test_source_maps_forwarded(tiny_table, deprecations):
  result = build_babel_options({"babel": {"sourceMaps": "inline"}}, table=tiny_table, deprecations=deprecations)
  assert result.source_maps == "inline"
  assert result.to_babel()["sourceMaps"] == "inline"


def test_annotation_flag_beats_parent_name(tiny_table, deprecations):
  options = {"ember-cli-babel": {"annotation": "Custom"}}
  result = build_babel_options(options, parent_name="my-app", table=tiny_table, deprecations=deprecations)
  assert result.annotation == "Custom"


def test_no_annotation_without_name(tiny_table, deprecations):
  result = build_babel_options({}, table=tiny_table, deprecations=deprecations)
  assert result.annotation is None
  assert "annotation" not in result.to_babel()


def test_production_environment(tiny_table, deprecations):
  result = build_babel_options(
    {}, environment=BuildEnvironment.PRODUCTION, table=tiny_table, deprecations=deprecations
  )
  assert result.plugins[0].options["flags"][0]["flags"]["DEBUG"] is False


def test_preset_env_replacement_receives_targets(deprecations):
  seen = []

  def preset_env(options):
    seen.append(options)
    return ["custom-compat"]

  result = build_babel_options(
    {"babel": {"spec": True}}, targets={"ie": "9"}, preset_env=preset_env, deprecations=deprecations
  )

  assert seen[0]["targets"] == {"ie": "9"}
  assert seen[0]["spec"] is True
  assert seen[0]["modules"] is False
  assert "custom-compat" in result.plugins


def test_build_preset_options_copies():
  provided = AddonProvidedConfig(options={"loose": True})
  preset = build_preset_options(provided, None)
  preset["loose"] = False
  assert provided.options == {"loose": True}
  assert preset["targets"] is None


def test_babel_options_reject_unknown_fields():
  with pytest.raises(ValidationError):
    BabelOptions(blah=True)


def test_to_babel_renders_camel_case():
  options = BabelOptions(
    plugins=["user", PluginSpec(name="x"), PluginSpec(name="y", options={"loose": True})],
    module_ids=True,
    resolve_module_source=module_resolve,
  )
  rendered = options.to_babel()
  assert rendered["babelrc"] is False
  assert rendered["plugins"] == ["user", "x", ["y", {"loose": True}]]
  assert rendered["moduleIds"] is True
  assert rendered["resolveModuleSource"] is module_resolve


def test_post_transform_plugins_stay_out_of_preset_env(deprecations):
  seen = []

  def preset_env(options):
    seen.append(options)
    return ["compat"]

  options = {
    "babel": {"plugins": ["babel-user"], "postTransformPlugins": ["babel-post"], "loose": True},
    "babel6": {"plugins": ["babel6-user"], "postTransformPlugins": ["babel6-post"]},
  }
  result = build_babel_options(options, preset_env=preset_env, compile_modules=False, deprecations=deprecations)

  assert "plugins" not in seen[0]
  assert "postTransformPlugins" not in seen[0]
  assert seen[0]["loose"] is True
  assert result.plugins[:2] == ["babel-user", "babel6-user"]
  assert result.plugins[2].name == "debug-macros"
  assert result.plugins[3:] == ["compat", "babel-post", "babel6-post"]
