"""Tests for output sinks."""

import io
import threading
from unittest.mock import patch

from mediacache.infrastructure.output.sinks import (
    ConsoleOutputSink,
    LoggingOutputSink,
    MemoryOutputSink,
)


class TestConsoleOutputSink:
    def test_writes_lines_to_stream(self):
        stream = io.StringIO()
        sink = ConsoleOutputSink(stream)

        sink.write("first")
        sink.write("second")

        assert stream.getvalue() == "first\nsecond\n"

    def test_defaults_to_stdout(self, capsys):
        ConsoleOutputSink().write("hello")
        assert capsys.readouterr().out == "hello\n"


class TestMemoryOutputSink:
    def test_collects_lines(self):
        sink = MemoryOutputSink()
        sink.write("a one")
        sink.write("b two")

        assert sink.lines == ["a one", "b two"]
        assert sink.matching("two") == ["b two"]

        sink.clear()
        assert sink.lines == []

    def test_lines_is_a_snapshot(self):
        sink = MemoryOutputSink()
        sink.write("a")
        lines = sink.lines
        sink.write("b")
        assert lines == ["a"]

    def test_thread_safe_writes(self):
        sink = MemoryOutputSink()

        def writer(n):
            for i in range(100):
                sink.write(f"{n}-{i}")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(sink.lines) == 400


class TestLoggingOutputSink:
    def test_forwards_to_logger(self):
        with patch("mediacache.infrastructure.output.sinks.get_logger") as get_logger:
            sink = LoggingOutputSink("test.output")
            sink.write("line")

        get_logger.assert_called_once_with("test.output")
        get_logger.return_value.info.assert_called_once_with("line")
