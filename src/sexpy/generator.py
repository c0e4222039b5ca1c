# src/sexpy/generator.py

"""
Expression Tree to Python Generator.

This module provides `CstGenerator`, which converts the standard node variants
into LibCST expression nodes and renders them as Python source text.

Dispatch is keyed on the node's `type` tag: a node of type ``Foo`` is handled by
``gen_Foo``. Subclasses extend the generator by defining additional ``gen_*``
methods (see `sexpy.compiler`), without touching the handlers below.

Mapping:
    Identifier       -> Name          ``foo``
    Literal          -> SimpleString  ``"foo"`` / Integer ``12``
    ArrayExpression  -> List          ``[a, b]``
    ObjectExpression -> Dict          ``{"key": value, expr: value}``
    CallExpression   -> Call          ``f(a, b)``
"""

import json
import keyword
from typing import Callable, Optional

import libcst as cst

from sexpy.nodes import (
  ArrayExpression,
  CallExpression,
  Identifier,
  Literal,
  Node,
  ObjectExpression,
  Property,
)

# Rendering context; only supplies default newline/indent settings.
_MODULE = cst.Module(body=[])

# Keywords that are also complete expressions.
_CONSTANT_KEYWORDS = frozenset({"None", "True", "False"})


class CstGenerator:
  """
  Generic node -> LibCST expression generator.
  """

  def generate(self, node: Node) -> cst.BaseExpression:
    """
    Converts a node to its LibCST expression.

    Args:
        node (Node): The node to convert.

    Returns:
        cst.BaseExpression: The equivalent LibCST expression.

    Raises:
        TypeError: If no handler exists for the node's type.
        SyntaxError: If LibCST rejects the produced node (e.g. an identifier
            that is not a valid Python name or is a reserved word).
    """
    handler: Optional[Callable[[Node], cst.BaseExpression]] = getattr(self, f"gen_{node.type}", None)
    if handler is None:
      raise TypeError(f"Cannot generate code for node type '{node.type}'")
    return handler(node)

  def to_source(self, node: Node) -> str:
    """
    Renders a node as Python source text.

    Args:
        node (Node): The root node.

    Returns:
        str: Generated Python expression code.
    """
    return _MODULE.code_for_node(self.generate(node))

  def gen_Identifier(self, node: Identifier) -> cst.Name:
    if keyword.iskeyword(node.name) and node.name not in _CONSTANT_KEYWORDS:
      raise SyntaxError(f"'{node.name}' is a reserved word in Python and cannot be used as a name")
    return cst.Name(node.name)

  def gen_Literal(self, node: Literal) -> cst.BaseExpression:
    """Strings are emitted double-quoted with JSON escaping, integers in canonical form."""
    if isinstance(node.value, bool):
      raise TypeError("Boolean literals are not supported")
    if isinstance(node.value, int):
      return cst.Integer(str(node.value))
    if isinstance(node.value, str):
      return cst.SimpleString(json.dumps(node.value, ensure_ascii=False))
    raise TypeError(f"Unsupported literal value of type '{type(node.value).__name__}'")

  def gen_ArrayExpression(self, node: ArrayExpression) -> cst.List:
    return cst.List(elements=[cst.Element(value=self.generate(e)) for e in node.elements])

  def gen_ObjectExpression(self, node: ObjectExpression) -> cst.Dict:
    return cst.Dict(elements=[self.gen_Property(p) for p in node.properties])

  def gen_Property(self, node: Property) -> cst.DictElement:
    """
    Builds one dict entry.

    A non-computed key is an Identifier naming the entry; it is emitted as the
    equivalent string key. A computed key is emitted as an expression.
    """
    if not node.computed and isinstance(node.key, Identifier):
      key = self.gen_Literal(Literal(node.key.name))
    else:
      key = self.generate(node.key)
    return cst.DictElement(key=key, value=self.generate(node.value))

  def gen_CallExpression(self, node: CallExpression) -> cst.Call:
    return cst.Call(
      func=self.generate(node.callee),
      args=[cst.Arg(value=self.generate(a)) for a in node.arguments],
    )


def generate(node: Node) -> str:
  """
  Renders a tree containing only standard node types.

  Args:
      node (Node): The root node.

  Returns:
      str: Python source text.
  """
  return CstGenerator().to_source(node)
