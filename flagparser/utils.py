# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py

Logging setup for programs built on flagparser.

The engine emits one DEBUG record per token it consumes, per option lookup and
per value it produces, all on the `flagparser` logger. That trace is useful
when a command line parses differently than expected and noise otherwise, so
its level is controlled separately from the handlers:

    setup_logging(mode="cli", trace_level=logging.DEBUG, console_log_level=logging.DEBUG)

or, without touching the code, `FLAGPARSER_TRACE=1 FLAGPARSER_LOG_MODE=cli`.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from flagparser.logger import logger

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
TRACE_ENABLED = frozenset({"1", "true", "yes", "on", "debug"})


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            cgroup = f.read()
    except OSError:
        return False
    return any(marker in cgroup for marker in CONTAINER_MARKERS)


def trace_level_from_env() -> int:
    """Return DEBUG when `FLAGPARSER_TRACE` is set to a truthy value, INFO otherwise."""
    value = os.getenv("FLAGPARSER_TRACE", "").strip().lower()
    return logging.DEBUG if value in TRACE_ENABLED else logging.INFO


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_filename: str, json_format: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if json_format:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
    trace_level: int | None = None,
) -> None:
    """
    Configure logging for applications built on flagparser.

    Installs a console handler and, optionally, a file handler on the root
    logger, then sets the level of the `flagparser` logger on its own.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `FLAGPARSER_LOG_MODE` environment
            variable or fallback based on container detection.
        log_filename (str | None):
            Path to the log file. No file handler is installed when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.
        trace_level (int | None):
            Level of the `flagparser` logger. `logging.DEBUG` records the
            per-token parse trace. Defaults to `trace_level_from_env()`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("FLAGPARSER_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    if trace_level is None:
        trace_level = trace_level_from_env()
    logger.setLevel(trace_level)
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
