"""
Tests for the CSS modules Engine and its structured result.
"""

import logging

import libcst as cst
import pytest

from elm_css_modules.config import DEFAULT_TAGGER_NAME
from elm_css_modules.core.diagnostics import CssModulesError
from elm_css_modules.core.engine import CssModulesEngine, TransformResult

SOURCE = 'A2(tag, "./Main.css", {xx: "someClass", yy: ""})\n'


@pytest.fixture
def engine(config):
  return CssModulesEngine(config)


def test_run_returns_rewritten_tree_and_diagnostics(engine):
  result = engine.run(SOURCE)

  assert isinstance(result, TransformResult)
  assert result.code == 'A2(tag, "./Main.css", {xx: require("./Main.css")["someClass"], yy: require("./Main.css")[""]})\n'
  assert not result.success
  assert result.rewritten_count == 1
  assert [d.key for d in result.diagnostics] == ["yy"]


def test_report_format(engine):
  result = engine.run(SOURCE)

  assert result.report == (
    "elm-css-modules-plugin:\n\tclassname for module './Main.css' with key 'yy' contained an empty string (1,44)"
  )


def test_raise_for_diagnostics(engine):
  result = engine.run(SOURCE)

  with pytest.raises(CssModulesError, match="key 'yy' contained an empty string"):
    result.raise_for_diagnostics()


def test_successful_run(engine):
  result = engine.run('A2(tag, "./Main.css", {xx: "a"})\n')

  assert result.success
  assert result.report == ""
  result.raise_for_diagnostics()


def test_sessions_do_not_share_diagnostics(engine):
  failed = engine.run(SOURCE)
  clean = engine.run('A2(tag, "./Main.css", {xx: "a"})\n')

  assert len(failed.diagnostics) == 1
  assert clean.diagnostics == []


def test_run_tree_does_not_modify_input_module(engine):
  module = cst.parse_module(SOURCE)
  result = engine.run_tree(module)

  assert module.code == SOURCE
  assert result.module is not module


def test_default_config_targets_compiled_elm_name():
  engine = CssModulesEngine()
  result = engine.run('A2(tag, "./Main.css", {xx: ""})\n')

  assert engine.config.tagger_name == DEFAULT_TAGGER_NAME
  assert result.rewritten_count == 0
  assert result.success


def test_parse_errors_propagate(engine):
  with pytest.raises(cst.ParserSyntaxError):
    engine.run("A2(tag, ")


def test_diagnostics_are_logged_at_debug_only(engine, caplog):
  with caplog.at_level("DEBUG"):
    engine.run(SOURCE)

  assert "key 'yy' contained an empty string" in caplog.text
  assert all(r.levelno == logging.DEBUG for r in caplog.records)
