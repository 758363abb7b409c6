"""Observers that are told when one NPC kills another."""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, TextIO

_print_lock = threading.Lock()


def _kill_line(attacker: Any, defender: Any) -> str:
    return f"{defender} | killed by | {attacker}\n"


class Observer(ABC):
    """Receives reports about kills."""

    @abstractmethod
    def report_killed(self, attacker: Any, defender: Any) -> None:
        """Handle the news that ``attacker`` killed ``defender``."""


class ConsoleObserver(Observer):
    """Writes kill reports to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def report_killed(self, attacker: Any, defender: Any) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        with _print_lock:
            stream.write(_kill_line(attacker, defender))
            stream.flush()


class LogObserver(Observer):
    """Writes kill reports to a log file, truncating it when opened."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._file = self.path.open("w", encoding="utf-8")

    def report_killed(self, attacker: Any, defender: Any) -> None:
        with self._lock:
            self._file.write(_kill_line(attacker, defender))
            self._file.flush()

    def close(self) -> None:
        """Close the log file."""
        with self._lock:
            self._file.close()

    def __enter__(self) -> LogObserver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()