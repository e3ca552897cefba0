"""
Central Logging and Console Utilities.

Routes the standard `logging` library through a `rich` handler. The handler is
bound to a swappable Console, so a host build can redirect transform output
(e.g. into an in-memory buffer) via `set_console`.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom logging level for Success (between INFO and WARNING)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
  }
)

_active_console: Console = Console(theme=_THEME)


def _configure_logging(target: Console) -> None:
  """
  Binds a RichHandler writing to `target` on the root logger, replacing any
  RichHandler installed previously.
  """
  root_logger = logging.getLogger()
  for handler in list(root_logger.handlers):
    if isinstance(handler, RichHandler):
      root_logger.removeHandler(handler)

  root_logger.setLevel(logging.INFO)
  root_logger.addHandler(
    RichHandler(
      console=target,
      show_time=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
  )


def set_console(new_console: Console) -> None:
  """
  Redirects console output and logging handlers to `new_console`.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  global _active_console
  _active_console = new_console
  _configure_logging(new_console)


def reset_console() -> None:
  """
  Resets logging and console to standard output.
  """
  set_console(Console(theme=_THEME))


def get_console() -> Console:
  """
  Returns the active Rich Console.
  """
  return _active_console


def log_debug(msg: str) -> None:
  """Logs a debug message."""
  logging.debug(msg, extra={"markup": True})


def log_info(msg: str) -> None:
  """Logs an informational message."""
  logging.info(msg, extra={"markup": True})


def log_success(msg: str) -> None:
  """Logs a message at the SUCCESS level."""
  logging.log(SUCCESS_LEVEL_NUM, msg, extra={"markup": True})


def log_warning(msg: str) -> None:
  """Logs a warning message."""
  logging.warning(msg, extra={"markup": True})


def log_error(msg: str) -> None:
  """Logs an error message."""
  logging.error(msg, extra={"markup": True})


_configure_logging(_active_console)
