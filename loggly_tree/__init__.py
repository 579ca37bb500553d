"""Post log calls to Loggly as JSON events."""

from loggly_tree.client import ConfigurationError, LogglyClient
from loggly_tree.config import Config, load_config
from loggly_tree.handler import SinkHandler
from loggly_tree.payload import FormattingError, Severity, build_payload
from loggly_tree.result import Failure, Success
from loggly_tree.sink import Forest, LogSink
from loggly_tree.tree import LogglyTree

__all__ = [
    "Config",
    "ConfigurationError",
    "Failure",
    "Forest",
    "FormattingError",
    "LogSink",
    "LogglyClient",
    "LogglyTree",
    "Severity",
    "SinkHandler",
    "Success",
    "build_payload",
    "load_config",
]
