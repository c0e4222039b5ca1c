# src/sexpy/expander.py

"""
Macro Expander.

Rewrites a ListExpression until it reaches a fixed point:

1.  Nodes other than ListExpression, empty lists, and lists whose head is not an
    Identifier are returned as-is.
2.  A head with no registry entry becomes a plain call: ``(f a b)`` -> ``f(a, b)``.
3.  A head naming a macro invokes it with the remaining elements.
4.  If the macro produced another ListExpression, expansion repeats unless the
    macro asked to stop or `recursive` is False.

A macro chain that never settles stops after `MAX_EXPANSIONS` steps.

Only the top node is rewritten. Nested list forms are expanded later, when the
generator reaches them.
"""

from typing import Optional, Tuple

from sexpy.macros import ExpansionOptions, MacroRegistry, builtins
from sexpy.nodes import CallExpression, ListExpression, Node

MAX_EXPANSIONS = 1000


def expand(
  node: Node,
  macros: Optional[MacroRegistry] = None,
  recursive: bool = True,
) -> Node:
  """
  Expands a list form using the given macro registry.

  Args:
      node (Node): The form to rewrite.
      macros (Optional[MacroRegistry]): Name -> macro mapping. Defaults to `builtins`.
      recursive (bool): Keep expanding while macros return list forms.

  Returns:
      Node: The expanded node, or `node` itself if it is not a macro invocation.
            Any node that is not a ListExpression is returned unchanged.
  Raises:
      TypeError: If a macro returns something other than a node or a
          ``(node, ExpansionOptions)`` pair.
      RecursionError: If macros keep producing list forms past `MAX_EXPANSIONS`.
  """
  registry = builtins if macros is None else macros

  for _ in range(MAX_EXPANSIONS):
    if not isinstance(node, ListExpression):
      return node
    head = node.head
    if head is None:
      return node

    macro = registry.get(head.name)
    if macro is None:
      return CallExpression(callee=head, arguments=node.elements[1:], optional=False)

    expanded, options = _unpack(head.name, macro(*node.elements[1:]))
    if recursive and not options.prevent_expansion and isinstance(expanded, ListExpression):
      node = expanded
      continue
    return expanded

  raise RecursionError(f"Macro expansion did not settle after {MAX_EXPANSIONS} steps (last macro: {head.name!r})")


def _unpack(name: str, output: object) -> Tuple[Node, ExpansionOptions]:
  if isinstance(output, Node):
    return output, ExpansionOptions()
  if isinstance(output, tuple) and len(output) == 2:
    expanded, options = output
    if isinstance(expanded, Node) and isinstance(options, ExpansionOptions):
      return expanded, options
  raise TypeError(f"Macro '{name}' must return a Node or (Node, ExpansionOptions), got {type(output).__name__}")
