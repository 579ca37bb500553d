"""Bridge from the standard logging module to any LogSink."""

import copy
import logging

from loggly_tree.sink import LogSink

# Records from this package are not forwarded, so a failing transport
# cannot feed its own diagnostics back into itself.
_OWN_LOGGER_PREFIX = "loggly_tree"


def _method_for(sink: LogSink, levelno: int):
    if levelno >= logging.ERROR:
        return sink.error
    if levelno >= logging.WARNING:
        return sink.warn
    if levelno >= logging.INFO:
        return sink.info
    return sink.debug


class SinkHandler(logging.Handler):
    """A logging.Handler that forwards records to a LogSink such as LogglyTree.

    CRITICAL maps to ERROR and WARNING to WARN. When the record carries an
    exception it is passed to the sink as the cause.
    """

    def __init__(self, sink: LogSink, level: int = logging.NOTSET):
        super().__init__(level)
        self._sink = sink

    @property
    def sink(self) -> LogSink:
        return self._sink

    def emit(self, record: logging.LogRecord):
        if record.name == _OWN_LOGGER_PREFIX or record.name.startswith(_OWN_LOGGER_PREFIX + "."):
            return
        try:
            if self.formatter is None:
                message = record.getMessage()
            elif record.exc_info:
                # The traceback goes out as the cause, not inside the message.
                plain = copy.copy(record)
                plain.exc_info = None
                plain.exc_text = None
                message = self.format(plain)
            else:
                message = self.format(record)
            # The sink formats its template again, so literal % must survive.
            message = message.replace("%", "%%")

            log = _method_for(self._sink, record.levelno)
            cause = record.exc_info[1] if record.exc_info else None
            if cause is not None:
                log(cause, message)
            else:
                log(message)
        except Exception:
            self.handleError(record)
