# src/sexpy/macros.py

"""
Macro Registry.

A registry is a read-only mapping from identifier name to a macro function.
A macro receives the argument nodes of a list form (everything after the head)
and returns either a replacement node or a ``(node, ExpansionOptions)`` pair.

The built-in registry holds a single entry, ``quote``, which returns its
argument untouched and stops further expansion of it.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple, Union

from sexpy.nodes import Node


@dataclass(frozen=True)
class ExpansionOptions:
  """
  Controls applied to the node a macro returns.

  Attributes:
      prevent_expansion: If True, the result is not expanded again even if it
          is itself a macro call.
  """

  prevent_expansion: bool = False


MacroResult = Union[Node, Tuple[Node, ExpansionOptions]]
Macro = Callable[..., MacroResult]
MacroRegistry = Mapping[str, Macro]


def quote(value: Node) -> MacroResult:
  """Returns `value` unchanged and suppresses its expansion."""
  return value, ExpansionOptions(prevent_expansion=True)


builtins: MacroRegistry = MappingProxyType({"quote": quote})


def extend_macros(
  base: Optional[MacroRegistry] = None,
  extra: Optional[MacroRegistry] = None,
  **macros: Macro,
) -> MacroRegistry:
  """
  Layers additional macros over a registry.

  Entries in `extra` and keyword arguments shadow entries of the same name in
  `base`. Neither input is modified.

  Args:
      base (Optional[MacroRegistry]): Registry to extend. Defaults to `builtins`.
      extra (Optional[MacroRegistry]): Mapping of additional macros.
      **macros: Additional macros by name.

  Returns:
      MacroRegistry: A new read-only registry.
  """
  merged = dict(builtins if base is None else base)
  merged.update(extra or {})
  merged.update(macros)
  return MappingProxyType(merged)
