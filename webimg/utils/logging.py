"""Logging setup."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from webimg.models.plan import ConversionResult

# Attribute set on records that describe one conversion step
STEP_ATTR = "step"


class JsonFormatter(logging.Formatter):
    """
    JSON Lines log formatter.

    Records logged with ``extra=step_extra(result)`` carry a "step" object
    with the target, encoder, exit status and outcome of that step.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        step = getattr(record, STEP_ATTR, None)
        if step:
            log_entry[STEP_ATTR] = step

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def step_extra(result: ConversionResult) -> dict[str, Any]:
    """Build the ``extra`` mapping for a log call about a conversion step."""
    return {
        STEP_ATTR: {
            "target": result.target.value,
            "status": result.status.value,
            "encoder": result.encoder,
            "returncode": result.returncode,
            "error_code": result.error_code,
            "output_path": str(result.output_path) if result.output_path else None,
            "output_size_bytes": result.output_size_bytes,
        }
    }


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    jsonl: bool = False,
) -> logging.Logger:
    """
    Set up logging for webimg.

    Progress and warnings are printed by the CLI with rich, so the stderr
    handler only passes errors. The optional file handler gets everything
    down to DEBUG, as plain text or as JSON Lines with per-step records.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for log output
        jsonl: If True, use JSONL format for file output

    Returns:
        Package logger
    """
    logger = logging.getLogger("webimg")
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)

        if jsonl:
            file_handler.setFormatter(JsonFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
            ))

        logger.addHandler(file_handler)

    return logger
