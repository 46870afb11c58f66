"""
Compatibility Matrix rendering logic.

Presents the target compatibility table either as a Rich table (CLI) or as
structured rows. Columns are the engines known to the table; each cell holds
the first version with native support. When targets are given, a final
column tells whether the plugin is required for them.
"""

from typing import Any, Dict, List, Optional

from rich.table import Table

from ember_babel.targets.compat import CompatibilityTable, default_table
from ember_babel.targets.decider import is_plugin_required
from ember_babel.targets.query import TargetDescriptor
from ember_babel.utils.console import console

UNSUPPORTED = "-"


class CompatibilityMatrix:
  """
  Renders a ``CompatibilityTable`` against optional targets.
  """

  def __init__(self, table: Optional[CompatibilityTable] = None, targets: Optional[TargetDescriptor] = None):
    """
    Args:
        table: The table to show. Defaults to the bundled one.
        targets: Resolved targets for the 'Required' column, if any.
    """
    self.table = table or default_table()
    self.targets = targets

  def get_json(self) -> List[Dict[str, Any]]:
    """
    Returns the matrix as structured data.

    Returns:
        List[Dict[str, Any]]: One row per plugin with keys 'plugin', one key
        per engine (version string or '-'), and 'required' (bool).
    """
    engines = self.table.engines()
    rows = []
    for plugin_id in self.table:
      support = self.table.get(plugin_id)
      row: Dict[str, Any] = {"plugin": plugin_id}
      for engine in engines:
        row[engine] = support.min_version(engine) or UNSUPPORTED
      row["required"] = is_plugin_required(plugin_id, self.targets, self.table)
      rows.append(row)
    return rows

  def render(self) -> None:
    """Prints the matrix to the console."""
    title = "Compatibility Plugins"
    if self.targets:
      title += " for " + ", ".join(f"{k} {v}" for k, v in sorted(self.targets.items()))

    table = Table(title=title)
    table.add_column("Plugin", style="bold magenta", no_wrap=True)
    engines = self.table.engines()
    for engine in engines:
      table.add_column(engine, justify="center")
    table.add_column("Required", justify="center")

    for row in self.get_json():
      values = [row["plugin"]] + [row[e] for e in engines]
      values.append("[yellow]yes[/yellow]" if row["required"] else "[green]no[/green]")
      table.add_row(*values)

    console.print(table)
