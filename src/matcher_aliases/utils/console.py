"""
Logging and Console Utilities.

Diagnostics go through the `matcher_aliases` logger of the standard `logging`
library. Being a library, the package only installs a `NullHandler` on import;
applications decide where records end up.

`set_console` opts in to `rich` rendering: it binds a `RichHandler` on the
package logger to the given console (e.g. an in-memory buffer in tests).
`reset_console` removes it again.

Attributes:
    logger (logging.Logger): The package logger.
    console (_ConsoleProxy): A stable reference to the active Rich Console.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "matcher_aliases"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_THEME = Theme(
  {
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "code": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Proxy around `rich.console.Console`.

  Keeps the module-level `console` reference stable while the backend is
  replaced. Only an explicitly injected backend is attached to the package
  logger; the default backend is used for direct printing alone.

  Attributes:
      _backend (Console): The active Rich Console instance.
      _handler (Optional[RichHandler]): Handler currently bound to the package logger.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._handler: Optional[RichHandler] = None

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and routes package logs to it.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._detach_handler()
    self._handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    logger.addHandler(self._handler)
    logger.setLevel(logging.INFO)

  def reset(self) -> None:
    """Restores a fresh standard output console and detaches package logging from it."""
    self._backend = Console(theme=_THEME)
    self._detach_handler()
    logger.setLevel(logging.NOTSET)

  @property
  def backend(self) -> Console:
    return self._backend

  @property
  def handler(self) -> Optional[RichHandler]:
    return self._handler

  def _detach_handler(self) -> None:
    if self._handler is not None:
      logger.removeHandler(self._handler)
      self._handler = None

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Renders package log records on a specific Rich console.

  Args:
      new_console (Console): The configured Rich console to use.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Stops rendering package logs with rich and restores the default console."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def log_info(msg: str) -> None:
  """
  Logs an informational message on the package logger.

  Args:
      msg (str): The message content. Can include rich markup like [code].
  """
  logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message on the package logger.

  Args:
      msg (str): The message content.
  """
  logger.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  """
  Logs an error message on the package logger.

  Args:
      msg (str): The message content.
  """
  logger.error(f"❌ {msg}", extra={"markup": True})
