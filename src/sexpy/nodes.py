# src/sexpy/nodes.py

"""
Expression Tree Nodes.

This module defines the node family exchanged by the reader, the expander and
the generator. The shapes mirror ESTree conventions so that each variant has a
direct counterpart in the rendered output:

    - Identifier       -> a bare symbol (``foo``)
    - Literal          -> a string or integer constant
    - ArrayExpression  -> positional collection (``[...]``)
    - ObjectExpression -> key/value collection (``{...}``)
    - Property         -> one entry of an ObjectExpression
    - CallExpression   -> invocation (``f(a, b)``)
    - ListExpression   -> a parenthesised form awaiting macro expansion

Nodes are frozen; expansion always builds new nodes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class Node:
  """
  Base class for all expression tree nodes.
  """

  @property
  def type(self) -> str:
    """
    The variant tag used for generator dispatch.

    Returns:
        str: The class name (e.g. 'Identifier').
    """
    return self.__class__.__name__

  def to_dict(self) -> Dict[str, Any]:
    """
    Serializes the node into an ESTree-shaped dictionary.

    Returns:
        Dict[str, Any]: JSON-compatible representation including the `type` tag.
    """
    data: Dict[str, Any] = {"type": self.type}
    for name in self.__dataclass_fields__:
      data[name] = _to_plain(getattr(self, name))
    return data


def _to_plain(value: Any) -> Any:
  if isinstance(value, Node):
    return value.to_dict()
  if isinstance(value, tuple):
    return [_to_plain(v) for v in value]
  return value


@dataclass(frozen=True)
class Identifier(Node):
  """A bare symbolic token."""

  name: str


@dataclass(frozen=True)
class Literal(Node):
  """
  A constant value.

  Strings come from quoted text or ``:keyword`` shorthand; integers come
  from runs of decimal digits.
  """

  value: Union[str, int]


@dataclass(frozen=True)
class ArrayExpression(Node):
  elements: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class Property(Node):
  """
  One key/value entry of an ObjectExpression.

  Attributes:
      key: Identifier when `computed` is False, any expression otherwise.
      value: The entry value.
      computed: False iff the key was written as an identifier-shaped string.
      kind: ESTree property kind, always 'init'.
  """

  key: Node
  value: Node
  computed: bool = False
  kind: str = "init"


@dataclass(frozen=True)
class ObjectExpression(Node):
  properties: Tuple[Property, ...] = ()


@dataclass(frozen=True)
class CallExpression(Node):
  callee: Node
  arguments: Tuple[Node, ...] = ()
  optional: bool = False


@dataclass(frozen=True)
class ListExpression(Node):
  """
  A parenthesised form prior to macro resolution.

  Not renderable by itself: the compiler expands it first, and a list that
  is not a macro call falls back to an array literal.
  """

  elements: Tuple[Node, ...] = field(default_factory=tuple)

  @property
  def head(self) -> Optional[Identifier]:
    """
    The macro/callee position, if it holds an Identifier.

    Returns:
        Optional[Identifier]: The first element when it is an Identifier, else None.
    """
    if self.elements and isinstance(self.elements[0], Identifier):
      return self.elements[0]
    return None
