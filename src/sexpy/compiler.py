# src/sexpy/compiler.py

"""
Compiler Driver.

Extends the generic `CstGenerator` with the one custom case: ListExpression.
When the generator reaches a list form it expands it first, then renders the
result with whichever handler matches the expanded node's type. A list that is
not a macro invocation (empty, or with a non-identifier head) is rendered as an
array literal.

Expansion is lazy: nested list forms are only expanded when generation reaches
them.
"""

from typing import List, Optional

import libcst as cst

from sexpy.expander import expand
from sexpy.generator import CstGenerator
from sexpy.macros import MacroRegistry
from sexpy.nodes import ArrayExpression, ListExpression, Node
from sexpy.reader import read_all


class ExpandingGenerator(CstGenerator):
  """
  Generator that expands list forms on demand.

  Attributes:
      macros (Optional[MacroRegistry]): Registry passed to the expander (None = builtins).
      recursive (bool): Whether expansion runs to a fixed point.
  """

  def __init__(self, macros: Optional[MacroRegistry] = None, recursive: bool = True) -> None:
    self.macros = macros
    self.recursive = recursive

  def gen_ListExpression(self, node: ListExpression) -> cst.BaseExpression:
    expanded = expand(node, macros=self.macros, recursive=self.recursive)
    if isinstance(expanded, ListExpression):
      return self.gen_ArrayExpression(ArrayExpression(expanded.elements))
    return self.generate(expanded)


def compile(root: Node, macros: Optional[MacroRegistry] = None, recursive: bool = True) -> str:
  """
  Compiles a tree into Python source text.

  Args:
      root (Node): The tree produced by the reader.
      macros (Optional[MacroRegistry]): Macro registry. Defaults to builtins.
      recursive (bool): Expand macro results to a fixed point.

  Returns:
      str: The generated Python expression.
  """
  return ExpandingGenerator(macros=macros, recursive=recursive).to_source(root)


def compile_all(text: str, macros: Optional[MacroRegistry] = None, recursive: bool = True) -> List[str]:
  """
  Reads every top-level form in `text` and compiles each one.

  Args:
      text (str): Source text.
      macros (Optional[MacroRegistry]): Macro registry. Defaults to builtins.
      recursive (bool): Expand macro results to a fixed point.

  Returns:
      List[str]: One compiled expression per form, in source order.

  Raises:
      SyntaxError: On malformed input.
  """
  generator = ExpandingGenerator(macros=macros, recursive=recursive)
  return [generator.to_source(form) for form in read_all(text)]
