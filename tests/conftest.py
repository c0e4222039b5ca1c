"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so tests redirecting output do not leak into each other.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'sexpy' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from sexpy.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture
def captured_console():
  """Redirects console and logging output to an in-memory buffer."""
  buffer = io.StringIO()
  set_console(Console(file=buffer, width=500, force_terminal=False, color_system=None))
  return buffer


@pytest.fixture(autouse=True)
def isolate_console():
  """Restores the default console after each test."""
  yield
  reset_console()
