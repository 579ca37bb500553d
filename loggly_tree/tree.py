"""A log sink that posts each call to Loggly as a JSON event."""

import sys
from typing import Callable

from loggly_tree.client import LogglyClient
from loggly_tree.config import Config
from loggly_tree.payload import Severity, build_payload
from loggly_tree.result import Failure, Result
from loggly_tree.sink import LogSink, split_call


def _print_to_stderr(line: str):
    print(line, file=sys.stderr, flush=True)


class LogglyTree(LogSink):
    """Formats log calls into JSON and hands them to a LogglyClient.

    Calls return as soon as the event is queued on the client. A failed
    delivery is reported once to *diagnostic* (standard error by default)
    and is not retried.
    """

    def __init__(
        self,
        token: str | None = None,
        client: LogglyClient | None = None,
        diagnostic: Callable[[str], None] | None = None,
    ):
        self._client = client if client is not None else LogglyClient(token)
        self._diagnostic = diagnostic if diagnostic is not None else _print_to_stderr
        self._handler = self._on_result

    @classmethod
    def from_config(cls, config: Config, diagnostic: Callable[[str], None] | None = None):
        client = LogglyClient(
            config.token,
            endpoint=config.endpoint,
            timeout=config.timeout,
            max_workers=config.max_workers,
        )
        tree = cls(client=client, diagnostic=diagnostic)
        if config.tags:
            tree.tag(config.tags)
        return tree

    @property
    def client(self) -> LogglyClient:
        return self._client

    def debug(self, message, *args):
        self._log(Severity.DEBUG, message, args)

    def info(self, message, *args):
        self._log(Severity.INFO, message, args)

    def warn(self, message, *args):
        self._log(Severity.WARN, message, args)

    def error(self, message, *args):
        self._log(Severity.ERROR, message, args)

    def tag(self, tag: str):
        """Set the Loggly tag (or CSV of tags) for all logs going forward.

        Unlike a one-shot tag this persists until changed; an empty string
        clears it.
        """
        self._client.set_tags(tag)

    def dispatch(self, payload: str):
        self._client.log(payload, self._handler)

    def close(self):
        self._client.close()

    def _log(self, severity: Severity, message, args: tuple):
        cause, template, fmt_args = split_call(message, args)
        self.dispatch(build_payload(severity, template, fmt_args, cause))

    def _on_result(self, result: Result):
        if isinstance(result, Failure):
            self._diagnostic(f"LogglyTree failed: {result.detail}")
