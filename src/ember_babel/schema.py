"""
Data structures shared across the option pipeline.

Defines:
- ``PluginSpec``: a transform plugin selected by the pipeline itself.
- ``DeprecationRecord``: a one-time advisory about a superseded option key.
- ``AddonProvidedConfig``: the merged view of the ``babel``/``babel6`` namespaces.
- ``BabelOptions``: the final, self-contained configuration handed to the engine.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ModuleSourceResolver = Callable[[str, str], str]


class PluginSpec(BaseModel):
  """
  A plugin chosen by the pipeline (debug macros, compatibility, modules).

  User supplied plugins are opaque and never converted into this model.
  """

  model_config = ConfigDict(frozen=True)

  name: str = Field(..., description="Plugin identifier, e.g. 'transform-es2015-classes'.")
  options: Optional[Dict[str, Any]] = Field(None, description="Per-plugin options, if any.")

  def as_babel(self) -> Union[str, List[Any]]:
    """
    Renders the plugin in Babel's ``plugins`` array notation.

    Returns:
        Union[str, List]: ``name`` or ``[name, options]``.
    """
    if self.options is None:
      return self.name
    return [self.name, dict(self.options)]


class DeprecationRecord(BaseModel):
  """A deprecation notice emitted for an option key."""

  model_config = ConfigDict(frozen=True)

  key: str
  message: str


class AddonProvidedConfig(BaseModel):
  """
  Transform options provided by the consuming project.

  ``options`` never contains ``plugins`` or ``postTransformPlugins``; those are
  lifted into their own lists.
  """

  options: Dict[str, Any] = Field(default_factory=dict, description="Merged transform options.")
  plugins: List[Any] = Field(default_factory=list, description="User plugins, run first.")
  post_transform_plugins: List[Any] = Field(default_factory=list, description="User plugins, run last.")


class BabelOptions(BaseModel):
  """
  The final configuration handed to the transform engine.

  Only the fields declared here can ever be set. Unknown keys coming from user
  input are rejected at construction time rather than forwarded.
  """

  model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

  babelrc: bool = Field(False, description="Implicit .babelrc discovery. Always disabled.")
  plugins: List[Any] = Field(default_factory=list, description="Ordered plugin sequence.")
  module_ids: Optional[bool] = Field(None, description="Emit named modules (set when compiling modules).")
  resolve_module_source: Optional[ModuleSourceResolver] = Field(
    None, description="Rewrites module specifiers when compiling modules."
  )
  source_maps: Optional[Any] = Field(None, description="Forwarded 'sourceMaps' option.")
  annotation: Optional[str] = Field(None, description="Label for this transform in build output.")

  def to_babel(self) -> Dict[str, Any]:
    """
    Renders the options with Babel's key names.

    ``resolveModuleSource`` is included as the callable itself; engines that
    cross a process boundary must translate it.

    Returns:
        Dict[str, Any]: camelCase options with unset entries omitted.
    """
    rendered: Dict[str, Any] = {
      "babelrc": self.babelrc,
      "plugins": [p.as_babel() if isinstance(p, PluginSpec) else p for p in self.plugins],
    }
    if self.module_ids is not None:
      rendered["moduleIds"] = self.module_ids
    if self.resolve_module_source is not None:
      rendered["resolveModuleSource"] = self.resolve_module_source
    if self.source_maps is not None:
      rendered["sourceMaps"] = self.source_maps
    if self.annotation is not None:
      rendered["annotation"] = self.annotation
    return rendered
