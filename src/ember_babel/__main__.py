"""
Entry point for module execution (``python -m ember_babel``).

Delegates to the CLI handler in ``ember_babel.cli.__main__``.
"""

import sys
from ember_babel.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
