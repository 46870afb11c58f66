"""
Deprecation notices for superseded option keys.

Notices are advisory: they never block a build. Each distinct message is
emitted at most once per ``DeprecationLog`` no matter how often the options
are resolved. The module keeps one process-wide default log; tests and
embedding hosts inject their own.
"""

from typing import Callable, List, Optional, Set

from ember_babel.schema import DeprecationRecord
from ember_babel.utils.console import log_warning

DeprecationSink = Callable[[str], None]


def deprecated_namespace_message(key: str) -> str:
  """
  Builds the notice for a flag declared in the ``babel`` namespace.

  Args:
      key (str): The flag name, e.g. "includePolyfill".

  Returns:
      str: The user-facing deprecation message.
  """
  return f'Putting the "{key}" option in "babel" is deprecated, please put it in "ember-cli-babel" instead.'


class DeprecationLog:
  """
  Append-only record of emitted deprecation notices.

  Attributes:
      records (List[DeprecationRecord]): Notices in emission order.
  """

  def __init__(self, sink: Optional[DeprecationSink] = None):
    """
    Args:
        sink: Receives each message once. Defaults to ``log_warning``.
    """
    self._sink = sink or log_warning
    self._seen: Set[str] = set()
    self.records: List[DeprecationRecord] = []

  def warn_once(self, key: str, message: str) -> bool:
    """
    Emits ``message`` unless an identical one was emitted before.

    Args:
        key: The deprecated option key.
        message: The notice text. Used as the de-duplication key.

    Returns:
        bool: True if the notice was emitted by this call.
    """
    if message in self._seen:
      return False
    self._seen.add(message)
    self.records.append(DeprecationRecord(key=key, message=message))
    self._sink(message)
    return True

  @property
  def messages(self) -> List[str]:
    return [r.message for r in self.records]

  def reset(self) -> None:
    """Forgets all emitted notices."""
    self._seen.clear()
    self.records.clear()


default_deprecations = DeprecationLog()
