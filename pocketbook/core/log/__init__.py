"""Logging for the API process: rich console output, optional daily files.

:func:`init_logging` runs once from :func:`pocketbook.main.create_app` with a
:class:`LoggingConfig` derived from settings. Handlers sit behind a queue so
request tasks never block on console or disk writes. Everything else only
calls :func:`get_logger`.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import date, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import SimpleQueue
from threading import RLock
from typing import Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from .context import ContextFilter, log_context
from .timing import timeit

__all__ = [
    "LoggingConfig",
    "get_logger",
    "init_logging",
    "log_context",
    "shutdown_logging",
    "timeit",
]

ROOT_LOGGER = "pocketbook"

# Driver and client loggers that flood DEBUG output with per-statement noise
QUIET_LIBRARIES: Mapping[str, str] = {
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiomysql": "WARNING",
    "redis": "WARNING",
    "uvicorn.access": "WARNING",
}

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    level: str | int = "INFO"
    log_dir: Optional[Path] = None
    console: bool = True
    rich_tracebacks: bool = True
    queue: bool = True
    library_levels: Mapping[str, str] = field(default_factory=lambda: dict(QUIET_LIBRARIES))


_lock = RLock()
_active: LoggingConfig | None = None
_listener: QueueListener | None = None
_context_filter = ContextFilter()


def _level(value: str | int) -> int:
    if isinstance(value, int):
        return value
    return getattr(logging, str(value).upper(), logging.INFO)


class DailyFileHandler(logging.FileHandler):
    """Append to ``pocketbook-YYYY-MM-DD.log``, switching files at midnight."""

    def __init__(self, directory: Path, *, prefix: str = ROOT_LOGGER) -> None:
        self.directory = directory
        self.prefix = prefix
        self.directory.mkdir(parents=True, exist_ok=True)
        self._day: date = datetime.now().date()
        super().__init__(self._path(self._day), mode="a", encoding="utf-8")

    def _path(self, day: date) -> Path:
        return self.directory / f"{self.prefix}-{day.isoformat()}.log"

    def emit(self, record: logging.LogRecord) -> None:
        day = datetime.fromtimestamp(record.created).date()
        if day != self._day:
            self._day = day
            if self.stream:
                self.stream.close()
            self.baseFilename = os.fspath(self._path(day))
            self.stream = self._open()
        super().emit(record)


def _console_handler(cfg: LoggingConfig) -> logging.Handler:
    if cfg.rich_tracebacks:
        install_rich_traceback(show_locals=False)
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=cfg.rich_tracebacks,
        show_path=False,
        markup=False,
        log_time_format="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(context)s%(message)s"))
    return handler


def _file_handler(directory: Path) -> logging.Handler:
    handler = DailyFileHandler(directory)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _handlers(cfg: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if cfg.console:
        handlers.append(_console_handler(cfg))
    if cfg.log_dir:
        handlers.append(_file_handler(Path(cfg.log_dir)))
    level = _level(cfg.level)
    for handler in handlers:
        handler.setLevel(level)
        handler.addFilter(_context_filter)
    return handlers


def init_logging(config: LoggingConfig | None = None) -> LoggingConfig:
    """Install the handlers described by ``config`` on the root logger.

    Re-initialising with an equal configuration keeps the running handlers;
    a different one replaces them.
    """

    global _active, _listener

    cfg = config or LoggingConfig()
    with _lock:
        if _active == cfg:
            return cfg
        _teardown()

        root = logging.getLogger()
        root.setLevel(logging.NOTSET)
        for name, level in cfg.library_levels.items():
            logging.getLogger(name).setLevel(_level(level))

        handlers = _handlers(cfg)
        if cfg.queue and handlers:
            log_queue: SimpleQueue = SimpleQueue()
            queue_handler = QueueHandler(log_queue)
            queue_handler.addFilter(_context_filter)
            root.addHandler(queue_handler)
            _listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
            _listener.start()
        else:
            for handler in handlers:
                root.addHandler(handler)

        _active = cfg
    return cfg


def _teardown() -> None:
    global _active, _listener

    if _listener is not None:
        _listener.stop()
        _listener = None
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    _active = None


def shutdown_logging() -> None:
    """Flush queued records and detach every handler."""

    with _lock:
        _teardown()


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or ROOT_LOGGER)
