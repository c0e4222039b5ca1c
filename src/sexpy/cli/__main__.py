"""
Main Entry Point for the sexpy CLI.

Parses arguments, resolves configuration, and dispatches to the compile handler.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from sexpy import __version__
from sexpy.cli import handlers
from sexpy.config import RuntimeConfig
from sexpy.utils.console import log_error


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(prog="sexpy", description="sexpy: S-expression to Python compiler")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("path", type=Path, help="Source file to compile")
  parser.add_argument("--out", type=Path, default=None, help="Write output to this file instead of stdout")
  parser.add_argument(
    "--all",
    dest="all_forms",
    action="store_true",
    default=None,
    help="Compile every top-level form, one per line (default: first form only)",
  )
  parser.add_argument(
    "--no-recursive",
    dest="recursive",
    action="store_false",
    default=None,
    help="Expand each list form once instead of to a fixed point",
  )
  parser.add_argument(
    "--emit",
    choices=["code", "tree"],
    default=None,
    help="Emit compiled Python (code) or the read tree as JSON (tree)",
  )

  args = parser.parse_args(argv)

  try:
    config = RuntimeConfig.load(
      all_forms=args.all_forms,
      recursive=args.recursive,
      emit=args.emit,
      search_path=args.path.parent,
    )
  except ValueError as e:
    log_error(escape(str(e)))
    return 1

  return handlers.handle_compile(args.path, args.out, config)


if __name__ == "__main__":
  sys.exit(main())
