"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Isolation of the process-wide deprecation log and console between tests.
- Helpers for building temporary source trees.
"""

import sys
from pathlib import Path
from typing import Dict, List

import pytest

# Add src to path so we can import 'ember_babel' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ember_babel.options.deprecations import DeprecationLog, default_deprecations  # noqa: E402
from ember_babel.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_global_state():
  """
  Ensures deprecation notices and console swaps do not leak between tests.
  """
  default_deprecations.reset()
  yield
  default_deprecations.reset()
  reset_console()


@pytest.fixture
def deprecations():
  """A fresh deprecation log collecting messages in a list."""
  sink: List[str] = []
  log = DeprecationLog(sink=sink.append)
  log.sink_messages = sink
  return log


class TreeHelper:
  """Writes and reads small file trees (mirrors broccoli-test-helper)."""

  def __init__(self, root: Path):
    self.root = root
    self.root.mkdir(parents=True, exist_ok=True)

  def write(self, files: Dict[str, str]) -> None:
    for rel, content in files.items():
      path = self.root / rel
      path.parent.mkdir(parents=True, exist_ok=True)
      path.write_text(content, encoding="utf-8")

  def read(self) -> Dict[str, str]:
    return {
      p.relative_to(self.root).as_posix(): p.read_text(encoding="utf-8")
      for p in sorted(self.root.rglob("*"))
      if p.is_file()
    }

  def path(self) -> Path:
    return self.root


@pytest.fixture
def input_tree(tmp_path):
  return TreeHelper(tmp_path / "input")


@pytest.fixture
def output_tree(tmp_path):
  return TreeHelper(tmp_path / "output")


class RecordingEngine:
  """
  In-process stand-in for a transform engine.

  Records every call and returns the source with an optional marker prepended.
  """

  def __init__(self, marker: str = "", fail_on: str = ""):
    self.marker = marker
    self.fail_on = fail_on
    self.calls: List[Dict] = []

  def transform(self, source, options, filename, module_id=None):
    self.calls.append({"source": source, "options": options, "filename": filename, "module_id": module_id})
    if self.fail_on and self.fail_on == filename:
      raise RuntimeError(f"cannot parse {filename}")
    return self.marker + source


@pytest.fixture
def recording_engine():
  return RecordingEngine(marker="/* transpiled */\n")
