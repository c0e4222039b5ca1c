# src/sexpy/reader.py

"""
S-Expression Recursive Descent Reader.

Parses source text into the expression tree model defined in `nodes.py`.
Dispatch happens on a single lookahead character after skipping whitespace
(commas count as whitespace):

    ( ... )     -> ListExpression
    [ ... ]     -> ArrayExpression
    { k v ... } -> ObjectExpression
    "text"      -> Literal(str), no escape processing
    :name       -> Literal(str), keyword shorthand
    123         -> Literal(int)
    name        -> Identifier

The reader never backtracks. Malformed input raises `SyntaxError` carrying the
line and column where reading stopped.
"""

import re
from typing import Any, Callable, Generator, List, Optional, Tuple

from sexpy.nodes import (
  ArrayExpression,
  Identifier,
  ListExpression,
  Literal,
  Node,
  ObjectExpression,
  Property,
)

_SPACE = re.compile(r"[\s,]")
_DIGIT = re.compile(r"[0-9]")
_IDENT_EXTRA = re.compile(r"[0-9_$]")
_NOT_QUOTE = re.compile(r'[^"]')


def _is_ident_char(char: str) -> bool:
  # Letters of any script, plus ASCII digits, "_" and "$".
  return char.isalpha() or bool(_IDENT_EXTRA.match(char))


class Reader:
  """
  Single-use parser owning one cursor over an input buffer.

  Attributes:
      text (str): The source being read.
      pos (int): Offset of the next unread character.
  """

  def __init__(self, text: str) -> None:
    self.text = text
    self.pos = 0

  def peek(self) -> Optional[str]:
    if self.pos >= len(self.text):
      return None
    return self.text[self.pos]

  def at_end(self) -> bool:
    return self.pos >= len(self.text)

  def skip_while(self, accept: Callable[[str], Any]) -> None:
    while self.pos < len(self.text) and accept(self.text[self.pos]):
      self.pos += 1

  def error(self, message: str) -> SyntaxError:
    """
    Builds a SyntaxError positioned at the cursor.

    Args:
        message (str): Human readable description.

    Returns:
        SyntaxError: Exception with `lineno`, `offset` and `text` populated.
    """
    line_start = self.text.rfind("\n", 0, self.pos) + 1
    line_end = self.text.find("\n", self.pos)
    if line_end == -1:
      line_end = len(self.text)
    lineno = self.text.count("\n", 0, self.pos) + 1
    column = self.pos - line_start + 1
    return SyntaxError(message, ("<input>", lineno, column, self.text[line_start:line_end]))

  def forms(self) -> Generator[Node, None, None]:
    """
    Yields every remaining top-level form in source order.

    Yields:
        Node: The next parsed form.
    """
    while True:
      form = self.read_form()
      if form is None:
        return
      yield form

  def read_form(self) -> Optional[Node]:
    """
    Reads one form at the cursor.

    Returns:
        Optional[Node]: The parsed node, or None if only whitespace remains.

    Raises:
        SyntaxError: If the lookahead character cannot start a form.
    """
    self.skip_while(_SPACE.match)
    char = self.peek()
    if char is None:
      return None
    if char == "(":
      return ListExpression(self._read_sequence(")"))
    if char == "[":
      return ArrayExpression(self._read_sequence("]"))
    if char == "{":
      return self._read_object()
    if char == '"':
      return self._read_string()
    if char == ":":
      return self._read_keyword()
    if _DIGIT.match(char):
      return self._read_number()
    if _is_ident_char(char):
      return self._read_identifier()
    raise self.error(f"Unexpected character: {char!r}")

  def _read_sequence(self, close: str) -> Tuple[Node, ...]:
    # Shared by lists and arrays; the opening bracket is at the cursor.
    self.pos += 1
    elements: List[Node] = []
    while True:
      self.skip_while(_SPACE.match)
      if self.at_end():
        raise self.error("Unexpected end of expression")
      if self.peek() == close:
        self.pos += 1
        return tuple(elements)
      elements.append(self.read_form())

  def _read_object(self) -> ObjectExpression:
    self.pos += 1
    properties: List[Property] = []
    while True:
      self.skip_while(_SPACE.match)
      if self.at_end():
        raise self.error("Unexpected end of object")
      if self.peek() == "}":
        self.pos += 1
        return ObjectExpression(tuple(properties))

      key = self.read_form()
      value = self.read_form()
      if value is None:
        raise self.error("Expected property value")
      properties.append(_make_property(key, value))

  def _read_string(self) -> Literal:
    start = self.pos + 1
    self.pos = start
    self.skip_while(_NOT_QUOTE.match)
    if self.at_end():
      raise self.error("Unexpected end of string")
    end = self.pos
    self.pos += 1
    return Literal(self.text[start:end])

  def _read_keyword(self) -> Literal:
    self.pos += 1
    char = self.peek()
    if char is None or not _is_ident_char(char):
      raise self.error("Expected keyword name after ':'")
    return Literal(self._read_identifier().name)

  def _read_number(self) -> Literal:
    start = self.pos
    self.skip_while(_DIGIT.match)
    try:
      return Literal(int(self.text[start : self.pos]))
    except ValueError as e:
      self.pos = start
      raise self.error(f"Integer literal too large: {e}") from e

  def _read_identifier(self) -> Identifier:
    start = self.pos
    self.skip_while(_is_ident_char)
    return Identifier(self.text[start : self.pos])


def _make_property(key: Node, value: Node) -> Property:
  """
  Builds an object entry, promoting identifier-shaped string keys.

  `{:name 1}` and `{"name" 1}` yield a plain `name` key. Any other key form,
  including a bare identifier such as `{name 1}`, is kept as a computed key.
  """
  if isinstance(key, Literal) and isinstance(key.value, str) and key.value.isidentifier():
    return Property(key=Identifier(key.value), value=value, computed=False)
  return Property(key=key, value=value, computed=True)


def read(text: str) -> Optional[Node]:
  """
  Reads the first top-level form of `text`.

  Args:
      text (str): Source text.

  Returns:
      Optional[Node]: The form, or None if the text holds only whitespace/commas.

  Raises:
      SyntaxError: On malformed input.
  """
  return Reader(text).read_form()


def read_all(text: str) -> List[Node]:
  """
  Reads every top-level form of `text`.

  Args:
      text (str): Source text.

  Returns:
      List[Node]: All forms in source order.

  Raises:
      SyntaxError: On malformed input.
  """
  return list(Reader(text).forms())
