"""
Tests for the Macro Registry.
"""

import pytest

from sexpy.macros import ExpansionOptions, builtins, extend_macros, quote
from sexpy.nodes import Identifier, ListExpression, Literal


def test_builtins_contains_only_quote():
  assert dict(builtins) == {"quote": quote}


def test_builtins_is_read_only():
  with pytest.raises(TypeError):
    builtins["extra"] = quote  # type: ignore[index]


def test_quote_returns_argument_and_prevents_expansion():
  arg = ListExpression((Identifier("quote"), Literal(1)))
  node, options = quote(arg)

  assert node is arg
  assert options == ExpansionOptions(prevent_expansion=True)


def test_quote_requires_exactly_one_argument():
  with pytest.raises(TypeError):
    quote()  # type: ignore[call-arg]
  with pytest.raises(TypeError):
    quote(Literal(1), Literal(2))  # type: ignore[call-arg]


def test_extend_macros_layers_over_builtins():
  def double(x):
    return x

  registry = extend_macros(double=double)

  assert registry["double"] is double
  assert registry["quote"] is quote
  assert "double" not in builtins


def test_extend_macros_shadows_by_name():
  def my_quote(x):
    return x

  registry = extend_macros(extra={"quote": my_quote})
  assert registry["quote"] is my_quote
  assert builtins["quote"] is quote


def test_extend_macros_custom_base():
  def first(x):
    return x

  def second(x):
    return x

  base = extend_macros(base={}, first=first)
  registry = extend_macros(base, second=second)

  assert set(registry) == {"first", "second"}
