"""
Enumerations for ember-babel.

This module defines the build environment classification used to decide how
debug macros are rewritten.
"""

import os
from enum import Enum
from typing import Mapping, Optional

ENV_VAR = "EMBER_ENV"


class BuildEnvironment(str, Enum):
  """
  Classification of the build being produced.

  Only ``DEVELOPMENT`` and ``PRODUCTION`` change the output of the debug
  macro plugin. Everything else (``test``, custom names) is ``OTHER``.
  """

  DEVELOPMENT = "development"
  PRODUCTION = "production"
  OTHER = "other"

  @classmethod
  def classify(cls, value: Optional[str]) -> "BuildEnvironment":
    """
    Maps a raw environment name onto the enumeration.

    Args:
        value (Optional[str]): Raw name, e.g. "production" or "test".

    Returns:
        BuildEnvironment: The matching member, ``OTHER`` for unknown names.
    """
    if value is None:
      return cls.OTHER
    cleaned = value.strip().lower()
    for member in cls:
      if member.value == cleaned:
        return member
    return cls.OTHER

  @classmethod
  def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BuildEnvironment":
    """
    Samples the process environment (``EMBER_ENV``).

    ember-cli treats a missing ``EMBER_ENV`` as a development build.

    Args:
        environ (Optional[Mapping]): Environment to read. Defaults to ``os.environ``.

    Returns:
        BuildEnvironment: The classified environment.
    """
    env = os.environ if environ is None else environ
    return cls.classify(env.get(ENV_VAR, cls.DEVELOPMENT.value))
