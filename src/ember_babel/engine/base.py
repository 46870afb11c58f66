"""
Transform Engine Protocol.

The transform engine is the component that actually applies a plugin
configuration to source text. ember-babel only decides the configuration;
engines implement ``TransformEngine``.
"""

from typing import Optional, Protocol

from ember_babel.schema import BabelOptions


class TransformError(Exception):
  """Raised by an engine when a source file cannot be transformed."""

  def __init__(self, filename: str, reason: str):
    self.filename = filename
    self.reason = reason
    super().__init__(f"{filename}: {reason}")


class TransformEngine(Protocol):
  """Applies a configuration to one file's source text."""

  def transform(
    self,
    source: str,
    options: BabelOptions,
    filename: str,
    module_id: Optional[str] = None,
  ) -> str:
    """
    Transforms ``source``.

    Args:
        source: File contents.
        options: The configuration to apply.
        filename: Path of the file relative to the tree root (POSIX style).
        module_id: Module name when ``options.module_ids`` is set.

    Returns:
        str: Transformed source.

    Raises:
        TransformError: If the source cannot be transformed.
    """
    ...
