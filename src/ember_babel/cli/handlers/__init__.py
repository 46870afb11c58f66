from .inspect import handle_matrix, handle_options
from .transpile import handle_transpile

__all__ = [
  "handle_matrix",
  "handle_options",
  "handle_transpile",
]
