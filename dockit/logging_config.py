"""Logging configuration for dockit."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


class JSONFormatter:
    """JSON formatter for structured logging."""

    def __call__(self, record: dict[str, Any]) -> str:
        log_data = {
            "timestamp": record["time"].isoformat(),
            "level": record["level"].name,
            "message": record["message"],
            "module": record.get("module", ""),
            "function": record.get("function", ""),
            "line": record.get("line", 0),
        }

        if record.get("exception"):
            log_data["exception"] = {
                "type": record["exception"].type.__name__ if record["exception"].type else None,
                "value": str(record["exception"].value) if record["exception"].value else None,
            }

        if record.get("extra"):
            log_data.update(record["extra"])

        # loguru treats the returned string as a format template
        return json.dumps(log_data, ensure_ascii=False, default=str).replace("{", "{{").replace("}", "}}") + "\n"


def setup_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: Path | None = None,
) -> None:
    """Configure logging for the command line tool.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Emit one JSON object per line instead of colored text.
        log_file: Optional path to a log file. If None, logs only to stderr.
    """
    logger.remove()
    level = level.upper()

    console_format: Any = JSONFormatter() if json_format else CONSOLE_FORMAT
    file_format: Any = console_format if json_format else FILE_FORMAT

    logger.add(sys.stderr, format=console_format, level=level, colorize=not json_format)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=file_format,
            level=level,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )
