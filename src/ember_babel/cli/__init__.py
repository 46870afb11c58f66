"""
CLI Subpackage.

Modules:
    - ``__main__``: The argparse definition and dispatcher.
    - ``commands``: Top-level facade for command handlers.
    - ``handlers/*``: Implementation modules for specific CLI actions.
    - ``matrix``: Rendering of the compatibility table.
"""
