"""Output sinks implementing the output port."""

from .sinks import ConsoleOutputSink, LoggingOutputSink, MemoryOutputSink

__all__ = ["ConsoleOutputSink", "LoggingOutputSink", "MemoryOutputSink"]
