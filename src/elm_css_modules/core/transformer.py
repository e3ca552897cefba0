"""
CSS Modules Transformer.

Provides `CssModulesTransformer`, the LibCST transformer that rewrites every class
map of a CSS module expression into module lookups during a single walk.

Defects never interrupt the walk. They are appended to `diagnostics` in pre-order
document order (then property order within each expression) and surfaced once by
`finalize()` after the walk has completed. Mutations are kept either way.

The transformer requires source positions and must be run through a
`libcst.MetadataWrapper`::

    wrapper = cst.MetadataWrapper(module)
    transformer = CssModulesTransformer(config)
    new_module = wrapper.visit(transformer)
    transformer.finalize()
"""

import logging
from typing import List, Optional, Tuple

import libcst as cst
from libcst.metadata import CodePosition, PositionProvider

from elm_css_modules.config import TransformConfig
from elm_css_modules.core.diagnostics import CssModulesError, Diagnostic, format_report
from elm_css_modules.core.matcher import is_css_module_expression, is_positional
from elm_css_modules.core.rewriter import rewrite_class_map_entry, string_value
from elm_css_modules.enums import DiagnosticKind

logger = logging.getLogger(__name__)

# A2(tagger, path, class_map)
_EXPECTED_ARG_COUNT = 3


class CssModulesTransformer(cst.CSTTransformer):
  """
  Rewrites class maps of ``A2(<tagger>, "<path>", {...})`` expressions.

  One instance serves exactly one walk: the diagnostic accumulator lives on the
  instance and is never shared.

  Attributes:
      config (TransformConfig): The tagger and loader names.
      diagnostics (List[Diagnostic]): Append-only record of defects, in walk order.
      rewritten_count (int): Number of expressions whose class map was rewritten.
  """

  METADATA_DEPENDENCIES = (PositionProvider,)

  def __init__(self, config: Optional[TransformConfig] = None) -> None:
    """
    Initializes the transformer.

    Args:
        config: Transform options. Defaults to `TransformConfig()`.
    """
    super().__init__()
    self.config = config or TransformConfig()
    self.diagnostics: List[Diagnostic] = []
    self.rewritten_count = 0
    self._path_stack: List[Optional[str]] = []

  def _start(self, node: cst.CSTNode) -> CodePosition:
    return self.get_metadata(PositionProvider, node).start

  def _report_malformed(self, node: cst.CSTNode, reason: str) -> None:
    position = self._start(node)
    self.diagnostics.append(
      Diagnostic(
        kind=DiagnosticKind.MALFORMED_EXPRESSION,
        file_path=None,
        key=self.config.tagger_name,
        line=position.line,
        column=position.column,
        detail=reason,
      )
    )

  def _unpack_arguments(self, node: cst.Call) -> Optional[Tuple[str, cst.Dict]]:
    """
    Extracts the CSS path and class map of a matched expression.

    Returns:
        Optional[Tuple[str, cst.Dict]]: The path and class map, or None if the
        expression is malformed (a diagnostic has then been recorded).
    """
    args = node.args
    if len(args) != _EXPECTED_ARG_COUNT:
      self._report_malformed(node, f"expected {_EXPECTED_ARG_COUNT} arguments, found {len(args)}")
      return None

    if not all(is_positional(a) for a in args):
      self._report_malformed(node, "arguments must be positional")
      return None

    _, path_arg, map_arg = args

    file_path = string_value(path_arg.value)
    if file_path is None:
      self._report_malformed(path_arg.value, "second argument is not a string literal")
      return None

    if not isinstance(map_arg.value, cst.Dict):
      self._report_malformed(map_arg.value, "third argument is not a dict literal")
      return None

    return file_path, map_arg.value

  def visit_Call(self, node: cst.Call) -> Optional[bool]:
    """
    Validates a CSS module expression before its children are visited.

    Diagnostics are recorded on the way down, so nested expressions report in
    pre-order. The CSS path (None for calls left alone) is pushed for `leave_Call`.
    """
    file_path = None
    if is_css_module_expression(node, self.config.tagger_name):
      unpacked = self._unpack_arguments(node)
      if unpacked is not None:
        file_path, class_map = unpacked
        for element in class_map.elements:
          _, diagnostic = rewrite_class_map_entry(
            file_path,
            element,
            self._start(element.value),
            self.config.loader_name,
          )
          if diagnostic is not None:
            self.diagnostics.append(diagnostic)

    self._path_stack.append(file_path)
    return True

  def leave_Call(self, original_node: cst.Call, updated_node: cst.Call) -> cst.Call:
    """
    Rewrites the class map of a CSS module expression validated in `visit_Call`.

    Non-matching and malformed calls are returned untouched. Positions are read
    from the original node, replacements are built on the updated node.
    """
    file_path = self._path_stack.pop()
    if file_path is None:
      return updated_node

    original_map = original_node.args[2].value
    updated_map = updated_node.args[2].value

    # Diagnostics were already taken in visit_Call.
    new_elements = [
      rewrite_class_map_entry(file_path, element, self._start(original.value), self.config.loader_name)[0]
      for original, element in zip(original_map.elements, updated_map.elements)
    ]

    self.rewritten_count += 1
    logger.debug("Rewrote class map for '%s' (%d entries)", file_path, len(new_elements))

    new_map = updated_map.with_changes(elements=new_elements)
    new_args = [*updated_node.args[:2], updated_node.args[2].with_changes(value=new_map)]
    return updated_node.with_changes(args=new_args)

  def finalize(self) -> None:
    """
    Surfaces all diagnostics recorded during the walk.

    Raises:
        CssModulesError: If at least one diagnostic was recorded.
    """
    if self.diagnostics:
      raise CssModulesError(format_report(self.diagnostics))
