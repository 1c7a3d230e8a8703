"""Console logging setup for the desired CLI."""

import logging
import os

from rich.logging import RichHandler

LOG_LEVEL_ENV = "DESIRED_LOG_LEVEL"


def setup_logging(level: str | None = None) -> None:
    """Configure console logging through RichHandler.

    Level resolution (first match wins):
      1) argument `level`
      2) env var `DESIRED_LOG_LEVEL`
      3) default = "WARNING"

    Safe to call multiple times.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    level = str(level).upper().strip()
    if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
        level = "WARNING"

    # Avoid duplicated handlers on re-init
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%H:%M:%S]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
