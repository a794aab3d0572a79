# iad/utils/logging_config.py
"""iad.utils.logging_config
==========================

Logging configuration for the IAD submission tools. It defines the global
logger objects and a single setup function, `setup_logging`, which configures
application-wide handlers and log levels from the configuration dictionary.

Features:
    - Rotating file logging for general events (iad.log).
    - Optional console logging to stderr with configurable log level.
    - Optional separate error log file (error.log) for ERROR and CRITICAL events.
    - Optional command tracing (commands.log) enabled via the IAD_COMMAND_TRACE
      environment variable.
    - Fallback to the system temp directory when the log directory cannot be created.
    - Safe reconfiguration: existing handlers are replaced, not duplicated.
    - Never raises; problems are reported to stderr.

Globals:
    logger: Main application logger ("iad").
    COMMAND_LOGGER: Logger for editor command invocations ("iad.commands").
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from typing import Any, Optional


# ======================== Global loggers ========================
# Created at import time; unconfigured until ``setup_logging()`` runs.
logger = logging.getLogger("iad")
COMMAND_LOGGER = logging.getLogger("iad.commands")

COMMAND_TRACE_ENV = "IAD_COMMAND_TRACE"


def _ensure_log_dir(log_filename: str, fallback_name: str) -> str:
    """Creates the directory of `log_filename`, or falls back to the temp directory."""
    log_dir = os.path.dirname(log_filename)
    if log_dir and not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir)
        except OSError as e_mkdir:
            print(f"Error creating log directory '{log_dir}': {e_mkdir}", file=sys.stderr)
            log_filename = os.path.join(tempfile.gettempdir(), fallback_name)
            print(f"Logging to temporary file: '{log_filename}'", file=sys.stderr)
    return log_filename


def setup_logging(config: Optional[dict[str, Any]] = None) -> None:
    """Configures application-wide logging handlers and log levels.

    Up to four independent handlers are installed:

    1. File handler – rotating log file (``log_file``, default ``iad.log``)
       capturing everything from ``file_level`` (default DEBUG) upward.
    2. Console handler – optional ``stderr`` output whose threshold is
       ``console_level`` (default WARNING).
    3. Error-file handler – optional rotating error.log that stores
       only ERROR and CRITICAL events.
    4. Command trace handler – rotating commands.log attached to the
       ``iad.commands`` logger when ``IAD_COMMAND_TRACE`` is ``1/true/yes``.

    Args:
        config (dict | None): Application configuration. Only the
            ``["logging"]`` sub-section is consulted; recognised keys are
            ``log_file``, ``file_level``, ``console_level``, ``log_to_console``
            and ``separate_error_log``.

    Example:
        >>> setup_logging({"logging": {"file_level": "INFO", "log_to_console": False}})
    """
    if config is None:
        config = {}
    logging_config = config.get("logging", {})

    log_filename = _ensure_log_dir(logging_config.get("log_file", "iad.log"), "iad.log")
    log_file_level_str = str(logging_config.get("file_level", "DEBUG")).upper()
    log_file_level = getattr(logging, log_file_level_str, logging.DEBUG)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-12s - %(message)s (%(filename)s:%(lineno)d)"
    )
    file_handler = None
    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(log_file_level)
    except Exception as e_fh:
        print(
            f"Error setting up file logger for '{log_filename}': {e_fh}. File logging may be impaired.",
            file=sys.stderr,
        )

    # Console Handler
    console_handler = None
    if logging_config.get("log_to_console", True):
        console_level_str = str(logging_config.get("console_level", "WARNING")).upper()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s"))
        console_handler.setLevel(getattr(logging, console_level_str, logging.WARNING))

    # Optional Separate Error Log File
    error_file_handler = None
    if logging_config.get("separate_error_log", False):
        error_log_filename = _ensure_log_dir("error.log", "iad-error.log")
        try:
            error_file_handler = logging.handlers.RotatingFileHandler(
                error_log_filename, maxBytes=1 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            error_file_handler.setFormatter(file_formatter)
            error_file_handler.setLevel(logging.ERROR)
        except Exception as e_efh:
            print(f"Error setting up separate error log '{error_log_filename}': {e_efh}.", file=sys.stderr)

    root_logger = logging.getLogger()
    root_logger.handlers = []  # Replace, never duplicate
    for handler in (file_handler, console_handler, error_file_handler):
        if handler:
            root_logger.addHandler(handler)
    root_logger.setLevel(log_file_level)

    # Command trace logger
    COMMAND_LOGGER.propagate = False
    COMMAND_LOGGER.setLevel(logging.DEBUG)
    COMMAND_LOGGER.handlers = []
    COMMAND_LOGGER.disabled = False

    if os.environ.get(COMMAND_TRACE_ENV, "").lower() in {"1", "true", "yes"}:
        try:
            trace_handler = logging.handlers.RotatingFileHandler(
                "commands.log", maxBytes=1 * 1024 * 1024, backupCount=3, encoding="utf-8"
            )
            trace_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
            COMMAND_LOGGER.addHandler(trace_handler)
            logging.info("Command tracing enabled, logging to 'commands.log'.")
        except Exception as e_trace:
            logging.error(f"Failed to set up command trace logging: {e_trace}", exc_info=True)
            COMMAND_LOGGER.disabled = True
    else:
        COMMAND_LOGGER.addHandler(logging.NullHandler())
        COMMAND_LOGGER.disabled = True
        logging.debug("Command tracing is disabled.")

    logging.info("Logging setup complete. Root logger level: %s.", logging.getLevelName(root_logger.level))
    if file_handler:
        logging.info(f"File logging to '{log_filename}' at level: {logging.getLevelName(file_handler.level)}.")
