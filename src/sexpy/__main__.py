"""
Entry point for module execution (``python -m sexpy``).

Delegates to the CLI handler in ``sexpy.cli.__main__``.
"""

import sys
from sexpy.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
