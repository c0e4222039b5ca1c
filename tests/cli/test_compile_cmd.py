"""
Tests for the CLI compile command.

Verifies:
1. Default behaviour: first form compiled and printed to stdout.
2. `--all`, `--no-recursive`, `--emit tree` and `--out` options.
3. Failures are logged and mapped to exit code 1.
"""

import json
from unittest.mock import patch

from sexpy.cli.__main__ import main
from sexpy.compiler import ExpandingGenerator
from sexpy.macros import extend_macros
from sexpy.nodes import Identifier, ListExpression


def _write(tmp_path, text, name="prog.lisp"):
  path = tmp_path / name
  path.write_text(text, encoding="utf-8")
  return path


def test_compile_first_form(tmp_path, capsys, captured_console):
  src = _write(tmp_path, '(print "hi" [1 2]) (ignored)')

  assert main([str(src)]) == 0
  assert capsys.readouterr().out == 'print("hi", [1, 2])\n'


def test_compile_all_forms(tmp_path, capsys, captured_console):
  src = _write(tmp_path, "(a)\n(b 1)\n")

  assert main([str(src), "--all"]) == 0
  assert capsys.readouterr().out == "a()\nb(1)\n"


def test_emit_tree(tmp_path, capsys, captured_console):
  src = _write(tmp_path, "(f :x)")

  assert main([str(src), "--emit", "tree"]) == 0
  tree = json.loads(capsys.readouterr().out)
  assert tree == {
    "type": "ListExpression",
    "elements": [
      {"type": "Identifier", "name": "f"},
      {"type": "Literal", "value": "x"},
    ],
  }


def test_emit_tree_all_forms_is_a_list(tmp_path, capsys, captured_console):
  src = _write(tmp_path, "a 1")

  assert main([str(src), "--emit", "tree", "--all"]) == 0
  assert json.loads(capsys.readouterr().out) == [
    {"type": "Identifier", "name": "a"},
    {"type": "Literal", "value": 1},
  ]


def test_write_output_file(tmp_path, capsys, captured_console):
  src = _write(tmp_path, "(f 1)")
  out = tmp_path / "build" / "out.py"

  assert main([str(src), "--out", str(out)]) == 0
  assert out.read_text(encoding="utf-8") == "f(1)\n"
  assert capsys.readouterr().out == ""
  assert "Compiled" in captured_console.getvalue()


def test_config_from_pyproject(tmp_path, capsys, captured_console):
  (tmp_path / "pyproject.toml").write_text("[tool.sexpy]\nall_forms = true\n", encoding="utf-8")
  src = _write(tmp_path, "(a) (b)")

  assert main([str(src)]) == 0
  assert capsys.readouterr().out == "a()\nb()\n"


@patch("sexpy.cli.handlers.handle_compile")
def test_no_recursive_flag_reaches_config(mock_handle, tmp_path):
  mock_handle.return_value = 0
  src = _write(tmp_path, "(f)")

  assert main([str(src), "--no-recursive"]) == 0

  config = mock_handle.call_args[0][2]
  assert config.recursive is False
  assert config.all_forms is False


def test_missing_file(tmp_path, captured_console):
  assert main([str(tmp_path / "missing.lisp")]) == 1
  assert "Input not found" in captured_console.getvalue()


def test_syntax_error_is_reported(tmp_path, capsys, captured_console):
  src = _write(tmp_path, "(1 2")

  assert main([str(src)]) == 1
  assert capsys.readouterr().out == ""
  assert "Unexpected end of expression" in captured_console.getvalue()


def test_invalid_identifier_is_reported(tmp_path, capsys, captured_console):
  src = _write(tmp_path, "(a$b 1)")

  assert main([str(src)]) == 1
  assert "not a valid identifier" in captured_console.getvalue()


def test_empty_input_warns(tmp_path, capsys, captured_console):
  src = _write(tmp_path, "  ,\n")

  assert main([str(src)]) == 0
  assert capsys.readouterr().out == ""
  assert "No forms found" in captured_console.getvalue()


def test_deep_nesting_is_reported(tmp_path, capsys, captured_console):
  src = _write(tmp_path, "(" * 5000 + ")" * 5000)

  assert main([str(src)]) == 1
  assert capsys.readouterr().out == ""
  assert "Failed to compile" in captured_console.getvalue()


def test_unsettled_macro_expansion_is_reported(tmp_path, capsys, captured_console):
  src = _write(tmp_path, "(loop)")
  looping = extend_macros(loop=lambda: ListExpression((Identifier("loop"),)))

  def _generator(recursive):
    return ExpandingGenerator(macros=looping, recursive=recursive)

  with patch("sexpy.cli.handlers.compile.ExpandingGenerator", side_effect=_generator):
    assert main([str(src)]) == 1
  assert "did not settle" in captured_console.getvalue()
