"""Loguru sinks for diagnostics and user-facing report lines."""

import sys
from typing import Any, TextIO

from loguru import logger

REPORT_CHANNEL = "report"

_ERROR_LEVEL = 40


def _is_report(record: dict[str, Any]) -> bool:
    return bool(record["extra"].get("channel") == REPORT_CHANNEL)


def configure_logging(level: str = "WARNING", stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
    """Replace the default loguru handler with the installer's sinks.

    Diagnostics go to stderr at ``level``. Records bound to the report channel
    are printed bare: failures to stderr in red, success to stdout in green,
    anything else (usage) plain on stdout. Colors only appear on a TTY.
    """
    out = stdout or sys.stdout
    err = stderr or sys.stderr

    logger.remove()  # Remove default handler
    logger.add(err, level=level, filter=lambda r: not _is_report(r))
    logger.add(
        err,
        format="<red>{message}</red>",
        filter=lambda r: _is_report(r) and r["level"].no >= _ERROR_LEVEL,
    )
    logger.add(
        out,
        format="<green><bold>{message}</bold></green>",
        filter=lambda r: _is_report(r) and r["level"].name == "SUCCESS",
    )
    logger.add(
        out,
        format="{message}",
        filter=lambda r: _is_report(r) and r["level"].no < _ERROR_LEVEL and r["level"].name != "SUCCESS",
    )
