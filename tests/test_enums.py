"""
Tests for build environment classification.
"""

import pytest

from ember_babel.enums import BuildEnvironment


@pytest.mark.parametrize(
  "raw, expected",
  [
    ("development", BuildEnvironment.DEVELOPMENT),
    ("Production", BuildEnvironment.PRODUCTION),
    (" production ", BuildEnvironment.PRODUCTION),
    ("test", BuildEnvironment.OTHER),
    ("staging", BuildEnvironment.OTHER),
    (None, BuildEnvironment.OTHER),
  ],
)
def test_classify(raw, expected):
  assert BuildEnvironment.classify(raw) is expected


def test_from_env_defaults_to_development():
  assert BuildEnvironment.from_env({}) is BuildEnvironment.DEVELOPMENT


def test_from_env_reads_ember_env():
  assert BuildEnvironment.from_env({"EMBER_ENV": "production"}) is BuildEnvironment.PRODUCTION
  assert BuildEnvironment.from_env({"EMBER_ENV": "test"}) is BuildEnvironment.OTHER


def test_from_process_environment(monkeypatch):
  monkeypatch.setenv("EMBER_ENV", "production")
  assert BuildEnvironment.from_env() is BuildEnvironment.PRODUCTION
