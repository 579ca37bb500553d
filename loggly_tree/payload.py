"""Build the JSON text posted to Loggly for a single log call."""

import traceback
from collections.abc import Mapping
from enum import Enum


class FormattingError(ValueError):
    """Raised when a message template does not match its arguments."""


class Severity(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


def format_message(message: str, args: tuple = ()) -> str:
    """Apply printf-style substitution of *args* into *message*.

    The template is always formatted, even with no arguments, so a stray
    ``%`` is reported instead of being sent through. A single mapping
    argument is used for ``%(name)s`` placeholders, as the logging module
    does.
    """
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return str(message) % args
    except (TypeError, ValueError, KeyError) as e:
        raise FormattingError(f"Cannot format {message!r} with {args!r}: {e}") from e


def format_throwable(cause: BaseException) -> str:
    """Render an exception and its chained causes as traceback text."""
    return "".join(traceback.format_exception(type(cause), cause, cause.__traceback__))


def _escape_quotes(text: str) -> str:
    # Only double quotes are escaped; backslashes and control characters pass through.
    return text.replace('"', '\\"')


def build_payload(
    severity: Severity,
    message: str,
    args: tuple = (),
    cause: BaseException | None = None,
) -> str:
    """Return the event JSON for one log call.

    The traceback under ``exception`` is embedded without any escaping, so
    a cause whose text holds quotes yields a body Loggly stores as plain
    text rather than JSON.
    """
    text = _escape_quotes(format_message(message, args))
    if cause is None:
        return f'{{"level": "{severity.name}", "message": "{text}"}}'
    return (
        f'{{"level": "{severity.name}", "message": "{text}", '
        f'"exception": "{format_throwable(cause)}"}}'
    )
