"""
CLI Command Handlers Facade.

Re-exports handlers from ``ember_babel.cli.handlers`` so the dispatcher (and
tests patching it) have a single import location.
"""

from ember_babel.cli.handlers.inspect import handle_matrix, handle_options
from ember_babel.cli.handlers.transpile import handle_transpile

__all__ = [
  "handle_matrix",
  "handle_options",
  "handle_transpile",
]
