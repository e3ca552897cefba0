"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Shared helpers for running the transform over code strings.
"""

import sys
from pathlib import Path

import libcst as cst
import pytest

# Add src to path so we can import 'elm_css_modules' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from elm_css_modules.config import TransformConfig  # noqa: E402
from elm_css_modules.core.transformer import CssModulesTransformer  # noqa: E402

TAGGER = "tag"


@pytest.fixture
def config() -> TransformConfig:
  """Configuration matching the short tagger name used throughout the tests."""
  return TransformConfig(tagger_name=TAGGER)


@pytest.fixture
def run_transformer(config):
  """
  Returns a helper that visits code with a fresh transformer.

  The helper returns ``(new_code, transformer)`` so tests can inspect the
  recorded diagnostics.
  """

  def _run(code: str):
    wrapper = cst.MetadataWrapper(cst.parse_module(code))
    transformer = CssModulesTransformer(config)
    new_module = wrapper.visit(transformer)
    return new_module.code, transformer

  return _run
