"""
Tests for the DeprecationLog.
"""

import logging

from rich.console import Console

from ember_babel.options.deprecations import DeprecationLog, deprecated_namespace_message
from ember_babel.utils.console import set_console


def test_warn_once_is_idempotent_per_message():
  sink = []
  log = DeprecationLog(sink=sink.append)

  assert log.warn_once("a", "message one") is True
  assert log.warn_once("a", "message one") is False
  assert log.warn_once("b", "message two") is True

  assert sink == ["message one", "message two"]
  assert [r.key for r in log.records] == ["a", "b"]
  assert log.messages == ["message one", "message two"]


def test_reset_allows_emitting_again():
  sink = []
  log = DeprecationLog(sink=sink.append)
  log.warn_once("a", "m")
  log.reset()
  log.warn_once("a", "m")
  assert sink == ["m", "m"]


def test_separate_logs_do_not_share_state():
  first, second = [], []
  DeprecationLog(sink=first.append).warn_once("k", "m")
  DeprecationLog(sink=second.append).warn_once("k", "m")
  assert first == ["m"]
  assert second == ["m"]


def test_default_sink_writes_through_logging():
  capture = Console(record=True, width=200)
  set_console(capture)

  DeprecationLog().warn_once("babel.includePolyfill", deprecated_namespace_message("includePolyfill"))

  text = capture.export_text()
  assert "includePolyfill" in text
  assert "deprecated" in text


def test_message_format():
  msg = deprecated_namespace_message("compileModules")
  assert msg == (
    'Putting the "compileModules" option in "babel" is deprecated, please put it in "ember-cli-babel" instead.'
  )


def test_logger_level_is_warning(caplog):
  log = DeprecationLog()
  logger = logging.getLogger("ember_babel")
  logger.propagate = True
  try:
    with caplog.at_level(logging.WARNING, logger="ember_babel"):
      log.warn_once("k", "a notice")
  finally:
    logger.propagate = False
  assert any(r.levelno == logging.WARNING and r.getMessage() == "a notice" for r in caplog.records)
