"""
Orchestration Engine for the CSS modules transform.

`CssModulesEngine` runs one `CssModulesTransformer` per session over a LibCST
module and returns a `TransformResult` holding both the rewritten tree and the
diagnostics recorded during the walk. Reporting is left to the caller: the tree
is always fully rewritten, and `TransformResult.raise_for_diagnostics()` turns
the diagnostics into the single terminal failure.
"""

import logging
from typing import List, Optional

import libcst as cst
from pydantic import BaseModel, ConfigDict, Field
from rich.markup import escape

from elm_css_modules.config import TransformConfig
from elm_css_modules.core.diagnostics import CssModulesError, Diagnostic, format_report
from elm_css_modules.core.transformer import CssModulesTransformer
from elm_css_modules.utils.console import log_debug

logger = logging.getLogger(__name__)


class TransformResult(BaseModel):
  """
  Structured outcome of a single transform session.
  """

  model_config = ConfigDict(arbitrary_types_allowed=True)

  module: cst.Module = Field(description="The rewritten syntax tree.")
  diagnostics: List[Diagnostic] = Field(default_factory=list, description="Defects in walk order.")
  rewritten_count: int = Field(default=0, description="Number of CSS module expressions rewritten.")

  @property
  def success(self) -> bool:
    """
    True if no diagnostics were recorded.
    """
    return not self.diagnostics

  @property
  def code(self) -> str:
    """
    The rewritten tree rendered back to source.
    """
    return self.module.code

  @property
  def report(self) -> str:
    """
    The aggregated failure report, or an empty string on success.
    """
    return format_report(self.diagnostics) if self.diagnostics else ""

  def raise_for_diagnostics(self) -> None:
    """
    Raises:
        CssModulesError: If at least one diagnostic was recorded.
    """
    if self.diagnostics:
      raise CssModulesError(self.report)


class CssModulesEngine:
  """
  Runs CSS module rewriting sessions.

  Each call to `run_tree` uses a fresh transformer, so sessions never share
  diagnostics.
  """

  def __init__(self, config: Optional[TransformConfig] = None) -> None:
    """
    Initializes the Engine.

    Args:
        config (TransformConfig, optional): Transform options. Defaults to `TransformConfig()`.
    """
    self.config = config or TransformConfig()

  def parse(self, code: str) -> cst.Module:
    """
    Parses source string into a LibCST Module.

    Raises:
        libcst.ParserSyntaxError: If the input code cannot be parsed.
    """
    return cst.parse_module(code)

  def run_tree(self, module: cst.Module) -> TransformResult:
    """
    Rewrites every CSS module expression in `module`.

    Args:
        module (cst.Module): The tree to transform.

    Returns:
        TransformResult: The rewritten tree and all diagnostics.
    """
    wrapper = cst.MetadataWrapper(module)
    transformer = CssModulesTransformer(self.config)
    new_module = wrapper.visit(transformer)

    logger.debug(
      "Rewrote %d CSS module expression(s), %d diagnostic(s)",
      transformer.rewritten_count,
      len(transformer.diagnostics),
    )
    for diagnostic in transformer.diagnostics:
      log_debug(escape(diagnostic.message))

    return TransformResult(
      module=new_module,
      diagnostics=list(transformer.diagnostics),
      rewritten_count=transformer.rewritten_count,
    )

  def run(self, code: str) -> TransformResult:
    """
    Parses `code` and rewrites it.

    Args:
        code (str): Source text.

    Returns:
        TransformResult: The rewritten tree and all diagnostics.
    """
    return self.run_tree(self.parse(code))
