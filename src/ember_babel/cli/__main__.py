"""
Main Entry Point for the ember-babel CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in ``ember_babel.cli.commands``.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ember_babel import __version__
from ember_babel.cli import commands
from ember_babel.config import parse_cli_key_values


def _add_build_arguments(cmd: argparse.ArgumentParser) -> None:
  cmd.add_argument("--env", default=None, help="Build environment (default: EMBER_ENV, toml, development)")
  cmd.add_argument(
    "--targets",
    nargs="+",
    default=None,
    help="Target queries, e.g. 'ie 11' 'last 2 chrome versions' (default: from toml, else all plugins)",
  )
  cmd.add_argument("--host-version", default=None, help="Version of the host toolchain (default: from toml)")
  cmd.add_argument(
    "--config",
    nargs="*",
    help="Option overrides in key=value format (e.g. ember-cli-babel.compileModules=false babel.loose=true)",
  )


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="ember-babel: Babel options for Ember builds")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: TRANSPILE ---
  cmd_trans = subparsers.add_parser("transpile", help="Transpile a directory of JavaScript files")
  cmd_trans.add_argument("path", type=Path, help="Input directory")
  cmd_trans.add_argument("--out", type=Path, required=True, help="Output directory")
  _add_build_arguments(cmd_trans)
  cmd_trans.add_argument(
    "--disable-debug-tooling",
    action="store_true",
    help="Leave DEBUG flags and debug macros untouched",
  )
  cmd_trans.add_argument("--node", default=None, help="Node.js executable (default: node)")

  # --- Command: OPTIONS ---
  cmd_opts = subparsers.add_parser("options", help="Print the resolved Babel options as JSON")
  _add_build_arguments(cmd_opts)

  # --- Command: MATRIX ---
  cmd_matrix = subparsers.add_parser("matrix", help="Show the compatibility plugin table")
  cmd_matrix.add_argument("--targets", nargs="+", default=None, help="Mark plugins required for these targets")

  args = parser.parse_args(argv)

  if args.command == "transpile":
    settings = parse_cli_key_values(args.config)
    return commands.handle_transpile(
      args.path,
      args.out,
      args.env,
      args.targets,
      args.host_version,
      args.disable_debug_tooling,
      settings,
      args.node,
    )

  elif args.command == "options":
    settings = parse_cli_key_values(args.config)
    return commands.handle_options(args.env, args.targets, args.host_version, settings)

  elif args.command == "matrix":
    return commands.handle_matrix(args.targets)

  return 0


if __name__ == "__main__":
  sys.exit(main())
