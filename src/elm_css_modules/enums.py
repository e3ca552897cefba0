"""
Enumerations for elm-css-modules.
"""

from enum import Enum


class DiagnosticKind(str, Enum):
  """
  Categories of defects recorded while rewriting CSS module expressions.
  """

  EMPTY_CLASSNAME = "empty_classname"
  MALFORMED_ENTRY = "malformed_entry"  # Class map entry is not `name: "string"`
  MALFORMED_EXPRESSION = "malformed_expression"  # A2(tagger, ...) with wrong argument shapes
