"""
Shape matching for CSS module expressions.

The Elm compiler emits every `CssModules.css` declaration as a two-argument
application helper call::

    A2(cultureamp$elm_css_modules_loader$CssModules$css, "./Main.css", {xx: "someClass"})

Matching on this generated shape stands in for "this subtree declares a CSS module"
without needing type information from the source program.
"""

import libcst as cst

APPLY_HELPER_NAME = "A2"


def is_positional(arg: cst.Arg) -> bool:
  """
  Returns True if the argument is passed positionally (no keyword, no unpacking).
  """
  return arg.keyword is None and arg.star == ""


def is_css_module_expression(node: cst.CSTNode, tagger_name: str) -> bool:
  """
  Decides whether a node is a CSS module expression generated for `tagger_name`.

  Only the callee and the first argument are inspected. The remaining arguments
  are validated by the transformer when the node is rewritten.

  Args:
      node: Any CST node.
      tagger_name: The exact identifier the first argument must reference.

  Returns:
      bool: True for ``A2(<tagger_name>, ...)``, False for everything else.
  """
  if not isinstance(node, cst.Call):
    return False

  if not (isinstance(node.func, cst.Name) and node.func.value == APPLY_HELPER_NAME):
    return False

  if not node.args:
    return False

  first = node.args[0]
  return is_positional(first) and isinstance(first.value, cst.Name) and first.value.value == tagger_name
