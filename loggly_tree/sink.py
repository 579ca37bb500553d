"""The log-sink plug-in point and the forest that dispatches to planted sinks."""

import threading
from abc import ABC, abstractmethod


def split_call(message, args: tuple) -> tuple[BaseException | None, str, tuple]:
    """Separate an optional leading exception from the message and its arguments.

    Sinks accept both ``info(message, *args)`` and ``info(exc, message, *args)``.
    """
    if isinstance(message, BaseException):
        if not args:
            raise TypeError("a message is required after the exception")
        return message, args[0], args[1:]
    return None, message, args


class LogSink(ABC):
    """A destination for log calls, one method per severity.

    Each method takes ``(message, *args)`` or ``(exc, message, *args)``.
    """

    @abstractmethod
    def debug(self, message, *args):
        ...

    @abstractmethod
    def info(self, message, *args):
        ...

    @abstractmethod
    def warn(self, message, *args):
        ...

    @abstractmethod
    def error(self, message, *args):
        ...

    @abstractmethod
    def tag(self, tag: str):
        """Set a tag that applies to every subsequent log call."""


class Forest(LogSink):
    """Holds planted sinks and forwards every call to each of them in planting order."""

    def __init__(self):
        self._lock = threading.Lock()
        self._sinks: tuple[LogSink, ...] = ()

    @property
    def sinks(self) -> list[LogSink]:
        return list(self._sinks)

    @property
    def tree_count(self) -> int:
        return len(self._sinks)

    def plant(self, sink: LogSink):
        if sink is self:
            raise TypeError("Cannot plant a Forest into itself")
        if not isinstance(sink, LogSink):
            raise TypeError(f"Expected a LogSink, got {type(sink).__name__}")
        with self._lock:
            self._sinks = self._sinks + (sink,)

    def uproot(self, sink: LogSink):
        with self._lock:
            if sink not in self._sinks:
                raise ValueError(f"Cannot uproot sink which is not planted: {sink!r}")
            sinks = list(self._sinks)
            sinks.remove(sink)
            self._sinks = tuple(sinks)

    def uproot_all(self):
        with self._lock:
            self._sinks = ()

    def debug(self, message, *args):
        for sink in self._sinks:
            sink.debug(message, *args)

    def info(self, message, *args):
        for sink in self._sinks:
            sink.info(message, *args)

    def warn(self, message, *args):
        for sink in self._sinks:
            sink.warn(message, *args)

    def error(self, message, *args):
        for sink in self._sinks:
            sink.error(message, *args)

    def tag(self, tag: str):
        for sink in self._sinks:
            sink.tag(tag)
