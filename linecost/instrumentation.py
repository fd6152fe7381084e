"""
Debug logging and performance timing for the breakpoint search.

DebugLog is an explicit handle created once by the caller and passed to
whatever needs it. Timing is recorded only in debug mode, and nothing here
feeds back into the cost model.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

LOGGER_NAME = "linecost"


def setup_logger(debug: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """Set up the package logger with console and optional file output."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    # Handlers below replace the root handlers
    logger.propagate = False

    # Clear existing handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console_handler)

    # File handler (if requested)
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    return logger


@dataclass
class PerformanceEntry:
    """Start and end timestamps (seconds) recorded under one key."""

    start: list[float] = field(default_factory=list)
    end: list[float] = field(default_factory=list)


def _fmt(message: Any) -> str:
    return message if isinstance(message, str) else repr(message)


class DebugLog:
    """
    Debug messages and keyed performance timers.

    log() and warn() are silent unless debug is on; error() always logs.
    start()/end() record timestamps only in debug mode.
    """

    def __init__(
        self,
        debug: bool = False,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.debug = debug
        self._logger = logger or logging.getLogger(LOGGER_NAME)
        if debug and not self._logger.isEnabledFor(logging.DEBUG):
            self._logger.setLevel(logging.DEBUG)
        self._clock = clock
        self._performance: dict[str, PerformanceEntry] = {}

    def log(self, message: Any) -> None:
        if self.debug:
            self._logger.info(_fmt(message))

    def warn(self, message: Any) -> None:
        if self.debug:
            self._logger.warning(_fmt(message))

    def error(self, message: Any) -> None:
        self._logger.error(_fmt(message))

    def start(self, key: str) -> None:
        """Start a performance capture on key."""
        if not self.debug:
            return
        self._performance.setdefault(key, PerformanceEntry()).start.append(self._clock())

    def end(self, key: str) -> None:
        """End a performance capture on key."""
        if not self.debug:
            return
        self._performance.setdefault(key, PerformanceEntry()).end.append(self._clock())

    @contextmanager
    def timed(self, key: str) -> Iterator[None]:
        """Capture the duration of a with-block under key."""
        self.start(key)
        try:
            yield
        finally:
            self.end(key)

    def calls(self, key: str) -> int:
        entry = self._performance.get(key)
        return len(entry.start) if entry else 0

    def diff(self, key: str) -> str:
        """
        Total time spent under key, e.g. "12.34ms --- (calls: 3)".

        Only paired start/end captures count towards the time; a key that
        was never captured reports zero.
        """
        entry = self._performance.get(key)
        if entry is None:
            return "0.00ms --- (calls: 0)"

        start_total = 0.0
        end_total = 0.0
        for started, ended in zip(entry.start, entry.end):
            start_total += started
            end_total += ended
        elapsed_ms = (end_total - start_total) * 1000.0
        return f"{elapsed_ms:.2f}ms --- (calls: {len(entry.start)})"

    def reset(self) -> None:
        self._performance.clear()
