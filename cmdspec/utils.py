# Cmdspec CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(
    mode: str = "cli",
    console_log_level: int = logging.WARNING,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging for applications built on cmdspec.

    The library itself only logs through the `cmdspec` logger and never adds
    handlers; call this from an entry point.

    Args:
        mode (str):
            Console output mode:
                - "cli": human-readable Rich console logs
                - "json": machine-readable JSON logs
        console_log_level (int): Logging level for console output.
        log_filename (str | None): Optional log file. No file handler when None.
        json_log_to_file (bool): Format file logs as JSON instead of plain text.
        file_log_level (int): Logging level for file output.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("cmdspec")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
