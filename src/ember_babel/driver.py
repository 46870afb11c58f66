"""
Tree Transform Driver.

Applies one ``BabelOptions`` configuration to every file under an input
directory, writing an output directory with the same relative layout.
JavaScript files go through the transform engine; everything else is copied
byte-for-byte. The input tree is never written to.

Files are independent of each other. The first failure aborts the run; output
already written for earlier files is left in place.
"""

import shutil
from pathlib import Path
from typing import List, Optional, Sequence

from ember_babel.engine.base import TransformEngine
from ember_babel.schema import BabelOptions
from ember_babel.utils.console import log_info

TRANSFORMABLE_EXTENSIONS = (".js",)


class TranspileError(Exception):
  """A file of the input tree failed to transform."""

  def __init__(self, path: Path, cause: BaseException):
    self.path = path
    self.cause = cause
    super().__init__(f"Failed to transpile {path}: {cause}")


def module_id_for(relative_path: Path) -> str:
  """
  Module name of a file: its relative POSIX path without extension.

  Args:
      relative_path: Path relative to the tree root.

  Returns:
      str: e.g. ``"app/routes/index"``.
  """
  return relative_path.with_suffix("").as_posix()


def iter_tree(root: Path) -> List[Path]:
  """
  Lists all files under ``root`` as relative paths, in sorted order.
  """
  return sorted(p.relative_to(root) for p in root.rglob("*") if p.is_file())


def transpile_file(
  source_path: Path,
  dest_path: Path,
  relative_path: Path,
  options: BabelOptions,
  engine: TransformEngine,
) -> None:
  """
  Transforms one file and writes the result.

  Raises:
      TranspileError: Wrapping any read, transform or write failure.
  """
  try:
    with open(source_path, "rt", encoding="utf-8") as f:
      code = f.read()

    module_id = module_id_for(relative_path) if options.module_ids else None
    result = engine.transform(code, options, relative_path.as_posix(), module_id)

    dest_path.parent.mkdir(parents=True, exist_ok=True)
    with open(dest_path, "wt", encoding="utf-8") as f:
      f.write(result)
  except Exception as e:
    raise TranspileError(source_path, e) from e


def transpile_tree(
  input_dir: Path,
  output_dir: Path,
  options: BabelOptions,
  engine: TransformEngine,
  extensions: Optional[Sequence[str]] = None,
) -> List[Path]:
  """
  Transforms every file of ``input_dir`` into ``output_dir``.

  Args:
      input_dir: Root of the source tree.
      output_dir: Root of the output tree. Created if missing.
      options: The configuration to apply.
      engine: The transform engine.
      extensions: Suffixes routed through the engine. Defaults to ``.js``.

  Returns:
      List[Path]: Relative paths written, in processing order.

  Raises:
      FileNotFoundError: If ``input_dir`` is not a directory.
      TranspileError: On the first file that fails.
  """
  input_dir = Path(input_dir)
  output_dir = Path(output_dir)
  if not input_dir.is_dir():
    raise FileNotFoundError(f"Input directory not found: {input_dir}")

  suffixes = tuple(extensions or TRANSFORMABLE_EXTENSIONS)
  output_dir.mkdir(parents=True, exist_ok=True)

  written: List[Path] = []
  files = iter_tree(input_dir)
  log_info(f"Transpiling {len(files)} files from [path]{input_dir}[/path]")

  for rel_path in files:
    src = input_dir / rel_path
    dest = output_dir / rel_path
    if rel_path.suffix in suffixes:
      transpile_file(src, dest, rel_path, options, engine)
    else:
      dest.parent.mkdir(parents=True, exist_ok=True)
      try:
        shutil.copyfile(src, dest)
      except OSError as e:
        raise TranspileError(src, e) from e
    written.append(rel_path)

  return written
