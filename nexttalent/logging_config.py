import logging
import sys
from typing import TextIO

NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx")


def setup_logging(level: int | str | None = None, stream: TextIO | None = None) -> None:
    """
    Configure the root logger. Replaces any existing root handlers.

    The API logs to stdout; command-line tools that print their own output to
    stdout pass ``stream=sys.stderr``.
    """
    if level is None:
        try:
            from nexttalent.config import settings
            level = settings.log_level
        except Exception:
            level = logging.INFO
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
