"""
Option Source Resolution.

Options may be declared by the consuming module (the addon's parent) or by the
hosting application. Exactly one of them is authoritative; they are never merged.
"""

from typing import Any, Dict, Optional

OptionsLayer = Dict[str, Any]


def resolve_addon_options(
  consumer_options: Optional[OptionsLayer],
  host_options: Optional[OptionsLayer],
) -> OptionsLayer:
  """
  Picks the options layer that configures this build.

  The consumer's own options win whenever they exist, even when empty. The
  chosen object is returned as-is (not copied) so callers can recognise it.

  Args:
      consumer_options: Options declared by the consuming module, if any.
      host_options: Options declared by the hosting application, if any.

  Returns:
      OptionsLayer: The authoritative layer, or a fresh empty dict.
  """
  if consumer_options is not None:
    return consumer_options
  if host_options is not None:
    return host_options
  return {}
