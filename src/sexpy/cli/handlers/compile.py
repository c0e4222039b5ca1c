"""
Compile Command Handler.

Reads a source file, compiles its first form (or every form), and prints the
generated Python or writes it to a file. Reader and generator failures are
reported through the logging console and mapped to a non-zero exit code.
"""

import json
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from sexpy.compiler import ExpandingGenerator
from sexpy.config import RuntimeConfig
from sexpy.nodes import Node
from sexpy.reader import read, read_all
from sexpy.utils.console import log_error, log_success, log_warning


def handle_compile(input_path: Path, output_path: Optional[Path], config: RuntimeConfig) -> int:
  """
  Handles the compile command.

  Args:
      input_path: Source file to read.
      output_path: Destination file; stdout when None.
      config: Resolved runtime configuration.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: [path]{escape(str(input_path))}[/path]")
    return 1

  try:
    with open(input_path, "rt", encoding="utf-8") as f:
      text = f.read()
    forms = _read_forms(text, config.all_forms)
    if not forms:
      log_warning(f"No forms found in [path]{escape(str(input_path))}[/path]")
      return 0
    output = _render(forms, config)
  except (SyntaxError, TypeError, ValueError, OSError, RecursionError) as e:
    log_error(f"Failed to compile {escape(str(input_path))}: {escape(str(e))}")
    return 1

  if output_path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wt", encoding="utf-8") as f:
      f.write(output + "\n")
    log_success(f"Compiled: [path]{escape(str(input_path))}[/path] -> [path]{escape(str(output_path))}[/path]")
  else:
    print(output)

  return 0


def _read_forms(text: str, all_forms: bool) -> List[Node]:
  if all_forms:
    return read_all(text)
  form = read(text)
  return [form] if form is not None else []


def _render(forms: List[Node], config: RuntimeConfig) -> str:
  if config.emit == "tree":
    trees = [form.to_dict() for form in forms]
    return json.dumps(trees if config.all_forms else trees[0], indent=2, ensure_ascii=False)

  generator = ExpandingGenerator(recursive=config.recursive)
  return "\n".join(generator.to_source(form) for form in forms)
