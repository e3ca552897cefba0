"""
Tests for Centralized Logging Utility and Injection Mechanics.
"""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from elm_css_modules.config import TransformConfig
from elm_css_modules.core.engine import CssModulesEngine
from elm_css_modules.utils.console import (
  SUCCESS_LEVEL_NUM,
  get_console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
)


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console is reset to stdout after every test."""
  reset_console()
  yield
  reset_console()


def test_custom_console_injection():
  capture_console = Console(record=True, width=200)
  set_console(capture_console)

  log_info("Captured Log")
  log_warning("Warned")

  output = capture_console.export_text()
  assert "Captured Log" in output
  assert "Warned" in output


def test_single_rich_handler_after_reinjection():
  set_console(Console())
  set_console(Console())

  handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1
  assert handlers[0].console is get_console()


def test_reset_creates_fresh_console():
  temp = Console()
  set_console(temp)
  assert get_console() is temp

  reset_console()
  assert get_console() is not temp


def test_success_level_registered():
  assert logging.getLevelName(SUCCESS_LEVEL_NUM) == "SUCCESS"


def test_level_helpers(caplog):
  with caplog.at_level(logging.INFO):
    log_info("info-msg")
    log_success("success-msg")
    log_error("error-msg")

  levels = {r.getMessage(): r.levelno for r in caplog.records}
  assert levels["info-msg"] == logging.INFO
  assert levels["success-msg"] == SUCCESS_LEVEL_NUM
  assert levels["error-msg"] == logging.ERROR


def test_engine_is_silent_at_default_level():
  capture_console = Console(record=True, width=200)
  set_console(capture_console)

  engine = CssModulesEngine(TransformConfig(tagger_name="tag"))
  engine.run('A2(tag, "./Main.css", {btn: "ok"})\n')
  engine.run('A2(tag, "./Main.css", {btn: ""})\n')

  assert capture_console.export_text() == ""
