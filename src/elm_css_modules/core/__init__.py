"""
Core transform components: shape matching, class map rewriting, the transformer
and the session engine.
"""

from elm_css_modules.core.diagnostics import CssModulesError, Diagnostic, format_report
from elm_css_modules.core.engine import CssModulesEngine, TransformResult
from elm_css_modules.core.matcher import is_css_module_expression
from elm_css_modules.core.rewriter import rewrite_class_map_entry
from elm_css_modules.core.transformer import CssModulesTransformer

__all__ = [
  "CssModulesEngine",
  "CssModulesError",
  "CssModulesTransformer",
  "Diagnostic",
  "TransformResult",
  "format_report",
  "is_css_module_expression",
  "rewrite_class_map_entry",
]
