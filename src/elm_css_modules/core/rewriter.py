"""
Class Map Property Rewriting.

Transforms one entry of the class map emitted by the Elm compiler into a
member lookup on the CSS module loaded at runtime::

    xx: "someClass"  ->  xx: require("./Main.css")["someClass"]

The rewriter is pure: defects are returned as `Diagnostic` values so the caller
decides when to surface them.
"""

import json
from typing import Optional, Tuple

import libcst as cst
import libcst.matchers as m
from libcst.metadata import CodePosition

from elm_css_modules.config import DEFAULT_LOADER_NAME
from elm_css_modules.core.diagnostics import Diagnostic
from elm_css_modules.enums import DiagnosticKind

_EMPTY_MODULE = cst.Module(body=[])


def string_value(node: cst.BaseExpression) -> Optional[str]:
  """
  Evaluates a string literal node to its text content.

  Args:
      node: Any expression node.

  Returns:
      Optional[str]: The decoded content, or None if the node is not a plain
      (non-bytes, non-formatted) string literal.
  """
  if isinstance(node, (cst.SimpleString, cst.ConcatenatedString)):
    value = node.evaluated_value
    if isinstance(value, str):
      return value
  return None


def make_string_literal(value: str) -> cst.SimpleString:
  """
  Builds a double-quoted string literal node for `value`.
  """
  # JSON escapes are a subset of Python's string escapes. Non-ASCII text is kept
  # verbatim: JSON would split astral characters into surrogate pairs.
  return cst.SimpleString(json.dumps(value, ensure_ascii=False))


def make_module_lookup(file_path: str, classname: str, loader_name: str = DEFAULT_LOADER_NAME) -> cst.Subscript:
  """
  Builds ``<loader_name>("<file_path>")["<classname>"]``.

  Args:
      file_path: Path of the CSS module, as written in the source expression.
      classname: Real class name used as the computed key (may be empty).
      loader_name: Module loader function name.

  Returns:
      cst.Subscript: The computed member lookup expression.
  """
  return cst.Subscript(
    value=cst.Call(
      func=cst.Name(loader_name),
      args=[cst.Arg(value=make_string_literal(file_path))],
    ),
    slice=[cst.SubscriptElement(slice=cst.Index(value=make_string_literal(classname)))],
  )


def is_module_lookup(
  node: cst.BaseExpression,
  loader_name: str = DEFAULT_LOADER_NAME,
  file_path: Optional[str] = None,
) -> bool:
  """
  Returns True if `node` already has the shape produced by `make_module_lookup`.

  Args:
      node: Any expression node.
      loader_name: Module loader function name.
      file_path: If given, the loaded path must equal it.
  """
  if not m.matches(
    node,
    m.Subscript(
      value=m.Call(func=m.Name(loader_name), args=[m.Arg(value=m.SimpleString())]),
      slice=[m.SubscriptElement(slice=m.Index(value=m.SimpleString()))],
    ),
  ):
    return False

  return file_path is None or string_value(node.value.args[0].value) == file_path


def _key_text(element: cst.BaseDictElement) -> str:
  if isinstance(element, cst.StarredDictElement):
    return "**" + _EMPTY_MODULE.code_for_node(element.value)
  return _EMPTY_MODULE.code_for_node(element.key)


def rewrite_class_map_entry(
  file_path: str,
  element: cst.BaseDictElement,
  position: CodePosition,
  loader_name: str = DEFAULT_LOADER_NAME,
) -> Tuple[cst.BaseDictElement, Optional[Diagnostic]]:
  """
  Rewrites a single class map entry into a module lookup.

  Well-formed entries (``name: "string"``) are always rewritten, even when the
  string is empty; an empty class name additionally yields a diagnostic.
  Entries that are already module lookups of `file_path` are returned unchanged. Any other
  element shape is returned unchanged with a malformed entry diagnostic.

  Args:
      file_path: CSS module path from the enclosing expression.
      element: The dictionary element to rewrite.
      position: Source position of the element's value.
      loader_name: Module loader function name.

  Returns:
      Tuple[BaseDictElement, Optional[Diagnostic]]: The replacement element and
      the diagnostic, if any.
  """
  if isinstance(element, cst.DictElement) and is_module_lookup(element.value, loader_name, file_path):
    return element, None

  classname = string_value(element.value) if isinstance(element, cst.DictElement) else None

  if classname is None or not isinstance(element.key, cst.Name):
    diagnostic = Diagnostic(
      kind=DiagnosticKind.MALFORMED_ENTRY,
      file_path=file_path,
      key=_key_text(element),
      line=position.line,
      column=position.column,
    )
    return element, diagnostic

  diagnostic = None
  if classname == "":
    diagnostic = Diagnostic(
      kind=DiagnosticKind.EMPTY_CLASSNAME,
      file_path=file_path,
      key=element.key.value,
      line=position.line,
      column=position.column,
    )

  return element.with_changes(value=make_module_lookup(file_path, classname, loader_name)), diagnostic
