"""Output sink implementations."""

import sys
import threading
from typing import List, Optional, TextIO

from mediacache.domain.base.ports import OutputPort
from mediacache.infrastructure.logging.logger import get_logger


class ConsoleOutputSink(OutputPort):
    """Writes each line to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, line: str) -> None:
        stream = self._stream or sys.stdout
        with self._lock:
            stream.write(f"{line}\n")
            stream.flush()


class MemoryOutputSink(OutputPort):
    """Collects lines in memory so callers can inspect them."""

    def __init__(self):
        self._lines: List[str] = []
        self._lock = threading.Lock()

    def write(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        """Snapshot of the lines written so far."""
        with self._lock:
            return list(self._lines)

    def matching(self, fragment: str) -> List[str]:
        """Lines containing ``fragment``."""
        return [line for line in self.lines if fragment in line]

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()


class LoggingOutputSink(OutputPort):
    """Forwards every line to the structured logger at INFO level."""

    def __init__(self, logger_name: str = "mediacache.output"):
        self._logger = get_logger(logger_name)

    def write(self, line: str) -> None:
        self._logger.info(line)
