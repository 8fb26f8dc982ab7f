# Igor Org Tooling — (c) 2025 — MIT Licensed
"""
Logging setup for the igor CLI.

Console output and logs are kept apart: commands print to stdout through
`igor.console`, while log records go to stderr and to a JSON-lines file.

- `setup_logging()`: installs the stderr and file handlers on the root logger.
- `set_console_level()`: raises or lowers stderr verbosity after start-up, e.g.
  from the `logLevel` config option.

Environment:
    IGOR_LOG_MODE: "cli" (rich, default) or "json" (default inside containers).
    IGOR_LOG_LEVEL: initial stderr level name, WARNING by default.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pythonjsonlogger.json
from rich.console import Console
from rich.logging import RichHandler

from igor.logger import logger

DEFAULT_LOG_FILENAME = str(Path.home() / ".igorlog")
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
CONSOLE_HANDLER_NAME = "igor-console"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
NOISY_LOGGERS = ("asyncio", "aiohttp")


def running_in_container() -> bool:
    if Path("/.dockerenv").exists():
        return True
    try:
        cgroup = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroup for marker in CONTAINER_MARKERS)


def resolve_level(level: str | int) -> int:
    """Turn a level name ("debug", "INFO") or number into a logging level."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid log level: {level}")
    return resolved


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str = DEFAULT_LOG_FILENAME,
    console_level: str | int | None = None,
) -> logging.Handler:
    """
    Route log records to stderr and to a JSON-lines log file.

    Args:
        mode (str | None): "cli" or "json". Defaults to `IGOR_LOG_MODE`, then to
            "json" inside a container and "cli" elsewhere.
        log_filename (str): File receiving every record at DEBUG and above.
        console_level (str | int | None): Stderr level. Defaults to
            `IGOR_LOG_LEVEL`, then WARNING.

    Returns:
        logging.Handler: The stderr handler.

    Raises:
        ValueError: If the mode or level is not recognised.
    """
    mode = (mode or os.getenv("IGOR_LOG_MODE") or "").lower() or (
        "json" if running_in_container() else "cli"
    )
    console_handler = _console_handler(mode)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(
        resolve_level(console_level or os.getenv("IGOR_LOG_LEVEL") or logging.WARNING)
    )

    file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)
    root.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging to stderr (%s) and %s.", mode, log_filename)
    return console_handler


def set_console_level(level: str | int) -> None:
    """Change the stderr level; an unknown level name is logged and ignored."""
    try:
        resolved = resolve_level(level)
    except ValueError as error:
        logger.warning("Ignoring config.logLevel: %s", error)
        return
    for handler in logging.getLogger().handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            handler.setLevel(resolved)
