"""
sexpy Package.

A small Lisp-like notation that reads into an expression tree, macro-expands
list forms, and renders the result as Python source via LibCST.

Usage
-----

.. code-block:: python

    import sexpy
    print(sexpy.convert('(print "hello" [1 2] {:name "x"})'))
    # print("hello", [1, 2], {"name": "x"})

Pipeline Stages
^^^^^^^^^^^^^^^

.. code-block:: python

    from sexpy import read, expand, compile

    tree = read("(quote (f 1))")
    expand(tree)   # ListExpression for (f 1), left unexpanded
    compile(tree)  # '[f, 1]'
"""

from typing import Optional

from sexpy.compiler import ExpandingGenerator, compile, compile_all
from sexpy.expander import expand
from sexpy.generator import CstGenerator, generate
from sexpy.macros import ExpansionOptions, Macro, MacroRegistry, builtins, extend_macros, quote
from sexpy.reader import Reader, read, read_all

__version__ = "0.1.0"


def convert(text: str, all_forms: bool = False, macros: Optional[MacroRegistry] = None) -> str:
  """
  Compiles source text to Python in one call.

  Args:
      text (str): Source text.
      all_forms (bool): Compile every top-level form (joined by newlines)
          instead of only the first.
      macros (MacroRegistry, optional): Macro registry. Defaults to builtins.

  Returns:
      str: The generated Python code.

  Raises:
      SyntaxError: On malformed input.
      ValueError: If the text contains no form.
  """
  if all_forms:
    compiled = compile_all(text, macros=macros)
  else:
    form = read(text)
    compiled = [compile(form, macros=macros)] if form is not None else []

  if not compiled:
    raise ValueError("Input contains no forms")
  return "\n".join(compiled)


__all__ = [
  "CstGenerator",
  "ExpandingGenerator",
  "ExpansionOptions",
  "Macro",
  "MacroRegistry",
  "Reader",
  "__version__",
  "builtins",
  "compile",
  "compile_all",
  "convert",
  "expand",
  "extend_macros",
  "generate",
  "quote",
  "read",
  "read_all",
]
