"""
Logging configuration for ClaimDesk.

Sets up console and rotating file handlers based on settings. INFO/DEBUG
records go to stdout, WARNING and above go to stderr, and every record is
written to a per-context log file under the configured log directory.
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from typing import Optional

from claimdesk.config import Settings, settings as default_settings

STANDARD_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes present on every LogRecord; anything else came from `extra=`
_RESERVED_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class _MaxLevelFilter(logging.Filter):
    """Pass only records strictly below a level."""

    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.max_level


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JSONFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    context: str = "api",
    config: Optional[Settings] = None,
) -> None:
    """
    Configure the root logger for a ClaimDesk process.

    Args:
        context: Process context ("api", "cli"); names the log file
        config: Settings to use (defaults to the global settings)

    Raises:
        PermissionError: If the log directory cannot be created
    """
    config = config or default_settings
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    formatter = _build_formatter(config.log_format)

    root = logging.getLogger()
    root.setLevel(level)

    # Replace handlers from earlier calls (uvicorn reload, repeated CLI runs)
    for handler in list(root.handlers):
        if getattr(handler, "_claimdesk_handler", False):
            root.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []

    if config.log_console_enabled:
        if config.log_to_stdout:
            stdout_handler = logging.StreamHandler(sys.stdout)
            stdout_handler.addFilter(_MaxLevelFilter(logging.WARNING))
            handlers.append(stdout_handler)
        if config.log_to_stderr:
            stderr_handler = logging.StreamHandler(sys.stderr)
            stderr_handler.setLevel(logging.WARNING)
            handlers.append(stderr_handler)

    if config.log_file_enabled:
        log_dir = config.log_directory
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / f"{context}.log",
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._claimdesk_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    # Third-party clients are chatty at DEBUG
    for noisy in ("httpx", "httpcore", "openai", "anthropic"):
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).debug(
        "Logging configured (context=%s, level=%s, format=%s)",
        context,
        config.log_level,
        config.log_format,
    )
