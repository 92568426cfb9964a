"""Named log categories backed by console and per-category file handlers."""

from __future__ import annotations

import enum
import logging
import logging.handlers
import queue
import sys
import threading
from pathlib import Path
from typing import ClassVar

__all__ = ["LoggerType", "LoggerCategoryError", "LoggerCategory", "Logger", "TRACE"]

TRACE = 5
_QUEUE_SIZE = 8192
_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"


class LoggerType(enum.Enum):
    SYNC = "sync"
    ASYNC = "async"


class LoggerCategoryError(ValueError):
    """Raised when a category name does not carry the prefix its type requires."""


_PREFIXES = {LoggerType.SYNC: "Log", LoggerType.ASYNC: "ALog"}


class LoggerCategory:
    """A named logging channel; it registers itself when created.

    Synchronous category names must start with ``Log``, asynchronous ones
    with ``ALog``.
    """

    def __init__(
        self,
        name: str,
        logger_type: LoggerType = LoggerType.SYNC,
        registry: "Logger | None" = None,
    ) -> None:
        prefix = _PREFIXES[logger_type]
        if not name.startswith(prefix):
            kind = "Sync" if logger_type is LoggerType.SYNC else "Async"
            raise LoggerCategoryError(f"{kind} Logger Name prefix must be '{prefix}'!")
        self._name = name
        self._type = logger_type
        (registry if registry is not None else Logger.get_instance()).register_category(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def logger_type(self) -> LoggerType:
        return self._type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoggerCategory):
            return NotImplemented
        return self._name == other._name and self._type == other._type

    def __hash__(self) -> int:
        return hash((self._name, self._type))

    def __repr__(self) -> str:
        return f"LoggerCategory({self._name!r}, {self._type})"


class _BlockingQueueHandler(logging.handlers.QueueHandler):
    """Queue handler that waits for room instead of dropping records."""

    def enqueue(self, record: logging.LogRecord) -> None:
        self.queue.put(record)


class Logger:
    """Registry of category loggers.

    Each category gets a console handler on stdout at WARNING and a file
    handler, truncated on creation, that receives every level.
    """

    _instance: ClassVar["Logger | None"] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, log_dir: str | Path = ".") -> None:
        self._log_dir = Path(log_dir)
        self._loggers: dict[str, logging.Logger] = {}
        self._handlers: dict[str, list[logging.Handler]] = {}
        self._listeners: dict[str, logging.handlers.QueueListener] = {}
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "Logger":
        """Return the process-wide registry, writing into the working directory."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def register_category(self, category: LoggerCategory) -> None:
        """Create the logger for ``category``; report a duplicate on stderr."""
        with self._lock:
            if category.name in self._loggers:
                kind = "sync" if category.logger_type is LoggerType.SYNC else "async"
                print(
                    f"{kind} category already exist this category:  {category.name}"
                    ", duplication register!",
                    file=sys.stderr,
                )
                return
            if category.logger_type is LoggerType.SYNC:
                self._create_sync(category.name)
            else:
                self._create_async(category.name)

    def get(self, category: LoggerCategory) -> logging.Logger | None:
        """Return the logger registered for ``category``, or None."""
        with self._lock:
            return self._loggers.get(category.name)

    def close(self) -> None:
        """Flush and close every handler and forget all categories."""
        with self._lock:
            for listener in self._listeners.values():
                listener.stop()
            for handlers in self._handlers.values():
                for handler in handlers:
                    handler.close()
            self._listeners.clear()
            self._handlers.clear()
            self._loggers.clear()

    def _sinks(self, name: str, suffix: str) -> list[logging.Handler]:
        formatter = logging.Formatter(_FORMAT)
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(logging.WARNING)
        console.setFormatter(formatter)
        self._log_dir.mkdir(parents=True, exist_ok=True)
        file_sink = logging.FileHandler(self._log_dir / f"{name}{suffix}", mode="w", encoding="utf-8")
        file_sink.setLevel(TRACE)
        file_sink.setFormatter(formatter)
        return [console, file_sink]

    @staticmethod
    def _new_logger(name: str) -> logging.Logger:
        logger = logging.Logger(name, TRACE)
        logger.propagate = False
        return logger

    def _create_sync(self, name: str) -> logging.Logger:
        sinks = self._sinks(name, ".log")
        logger = self._new_logger(name)
        for sink in sinks:
            logger.addHandler(sink)
        self._loggers[name] = logger
        self._handlers[name] = sinks
        return logger

    def _create_async(self, name: str) -> logging.Logger:
        sinks = self._sinks(name, ".alog")
        records: queue.Queue[logging.LogRecord] = queue.Queue(maxsize=_QUEUE_SIZE)
        listener = logging.handlers.QueueListener(records, *sinks, respect_handler_level=True)
        listener.start()
        front = _BlockingQueueHandler(records)
        logger = self._new_logger(name)
        logger.addHandler(front)
        self._loggers[name] = logger
        self._handlers[name] = [front, *sinks]
        self._listeners[name] = listener
        return logger