"""
Diagnostic records and the aggregated failure report.

Defects found while rewriting are recorded as immutable `Diagnostic` values instead
of being raised. Once a walk has finished, the collected diagnostics are joined into
a single report and surfaced through `CssModulesError`.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from elm_css_modules.enums import DiagnosticKind

REPORT_HEADER = "elm-css-modules-plugin:"


@dataclass(frozen=True)
class Diagnostic:
  """
  A single defect found in a CSS module expression.

  Attributes:
      kind: Category of the defect.
      file_path: CSS path of the enclosing expression, if it could be read.
      key: Source text of the class map key, or the tagger name for expression-level defects.
      line: 1-based line of the offending node.
      column: 0-based column of the offending node.
      detail: Free-form reason, used by malformed expression defects.
  """

  kind: DiagnosticKind
  file_path: Optional[str]
  key: str
  line: int
  column: int
  detail: Optional[str] = None

  @property
  def message(self) -> str:
    """
    Human-readable description, suffixed with the ``(line,column)`` location.
    """
    location = f"({self.line},{self.column})"

    if self.kind == DiagnosticKind.EMPTY_CLASSNAME:
      return f"classname for module '{self.file_path}' with key '{self.key}' contained an empty string {location}"

    if self.kind == DiagnosticKind.MALFORMED_ENTRY:
      return f"classname for module '{self.file_path}' with key '{self.key}' is not a string literal {location}"

    return f"CSS module expression for tagger '{self.key}' is malformed: {self.detail} {location}"

  def __str__(self) -> str:
    return self.message


def format_report(diagnostics: Iterable[Diagnostic]) -> str:
  """
  Joins diagnostics into the multi-line failure report.

  Args:
      diagnostics: Diagnostics in the order they were recorded.

  Returns:
      str: Header line followed by one tab-indented line per diagnostic.
  """
  return f"{REPORT_HEADER}\n\t" + "\n\t".join(d.message for d in diagnostics)


class CssModulesError(ValueError):
  """
  Raised once, after a full walk, when any diagnostic was recorded.
  """
