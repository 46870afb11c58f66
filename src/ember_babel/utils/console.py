"""
Central Logging and Console Utilities.

All user-facing output of ember-babel goes through the standard ``logging``
library, rendered by ``rich``.

The module exposes:
1.  A ``console`` proxy whose backend (stdout, a file, an in-memory buffer)
    can be swapped at runtime via ``set_console``. Host toolchains embedding
    the pipeline use this to route output into their own UI.
2.  Helper functions (``log_info``, ``log_success``, ``log_warning``,
    ``log_error``) writing to the ``ember_babel`` logger.

Attributes:
    console (_ConsoleProxy): Stable reference to the active Rich Console.
    logger (logging.Logger): The package logger.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "ember_babel"

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "path": "bold blue",
    "plugin": "bold magenta",
  }
)

logger = logging.getLogger(LOGGER_NAME)


class _ConsoleProxy:
  """
  Proxy around ``rich.console.Console``.

  Swapping the backend also re-attaches the ``RichHandler`` of the package
  logger so log records follow the console.

  Attributes:
      _backend (Console): The active Rich Console instance.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Resets the proxy to a fresh standard output console."""
    self._backend = Console(theme=_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """The currently active Console."""
    return self._backend

  def _configure_logging(self) -> None:
    for handler in list(logger.handlers):
      if isinstance(handler, RichHandler):
        logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    logger.setLevel(logging.INFO)
    logger.addHandler(rich_handler)
    # Host applications configure the root logger themselves.
    logger.propagate = False

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards ``print`` calls to the active backend."""
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """Forwards ``export_text`` (requires a recording console)."""
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Injects a specific console instance for all output.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Resets logging and console to standard output."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def log_info(msg: str) -> None:
  """
  Logs an informational message.

  Args:
      msg (str): The message content. Can include rich markup like [path].
  """
  logger.info(msg, extra={"markup": True})


def log_success(msg: str) -> None:
  """
  Logs a success message.

  Args:
      msg (str): The message content.
  """
  logger.log(SUCCESS_LEVEL_NUM, msg, extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message.

  Markup is disabled: warnings usually quote user configuration verbatim.

  Args:
      msg (str): The message content.
  """
  logger.warning(msg, extra={"markup": False})


def log_error(msg: str) -> None:
  """
  Logs an error message.

  Args:
      msg (str): The message content.
  """
  logger.error(msg, extra={"markup": False})
