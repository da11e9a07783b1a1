"""
Logging configuration — one setup call for the dufflectl process.

Called once at startup by ``dufflectl.main``. Every module that does
``logger = logging.getLogger(__name__)`` inherits this config.

Two streams exist:
    - diagnostics: the regular ``dufflectl.*`` module loggers
    - transcript:  ``dufflectl.transcript``, which receives every duffle
      command line (``$ duffle install ...``) and its raw stdout

Levels are resolved in precedence order:
    CLI flag  >  DUFFLECTL_LOG_LEVEL  >  dufflectl.yml  >  WARNING

The transcript is written at INFO, so ``--verbose`` shows commands on
stderr. A log file (DUFFLECTL_LOG_FILE) always gets full detail unless
DUFFLECTL_LOG_FILE_LEVEL says otherwise.
"""

from __future__ import annotations

import logging
import sys

TRANSCRIPT_LOGGER = "dufflectl.transcript"

# ── Format strings ──────────────────────────────────────────────

# WARNING level: the message only
_FMT_MINIMAL = "%(message)s"

# INFO level: commands and output, timestamped
_FMT_VERBOSE = "%(asctime)s %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# DEBUG level and file output: with origin
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def _console_formatter(numeric_level: int) -> logging.Formatter:
    if numeric_level <= logging.DEBUG:
        return logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_DEBUG)
    if numeric_level <= logging.INFO:
        return logging.Formatter(_FMT_VERBOSE, datefmt=_DATEFMT_VERBOSE)
    return logging.Formatter(_FMT_MINIMAL)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure Python logging for the dufflectl process.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file (diagnostics + transcript).
        log_file_level: Level for the log file. Defaults to DEBUG.
    """
    console_level = parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    effective_level = console_level

    if log_file:
        file_level = parse_level(log_file_level, default=logging.DEBUG)
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)

    # The transcript propagates to root; its own level must not filter
    # out records a file handler still wants.
    logging.getLogger(TRANSCRIPT_LOGGER).setLevel(logging.NOTSET)

    logging.raiseExceptions = False


def parse_level(level: str | None, default: int = logging.WARNING) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return default
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return default
    return numeric
