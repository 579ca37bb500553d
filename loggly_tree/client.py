"""HTTP client for the Loggly inputs API with asynchronous submission."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor

import requests

from loggly_tree.result import Callback, Failure, Result, Success

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://logs-01.loggly.com/"
TAG_HEADER = "X-LOGGLY-TAG"


class ConfigurationError(ValueError):
    """Raised when the client cannot be built from the given settings."""


def normalize_tags(tags: str) -> str:
    """Turn a CSV of tags into a clean CSV: trimmed, no empty entries."""
    return ",".join(t.strip() for t in tags.split(",") if t.strip())


class LogglyClient:
    """Posts log events to Loggly on a small worker pool.

    Tags set with :meth:`set_tags` apply to every event logged afterwards
    and travel in the ``X-LOGGLY-TAG`` header, never in the event body.
    """

    def __init__(
        self,
        token: str,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 10.0,
        max_workers: int = 2,
        session: requests.Session | None = None,
    ):
        if not isinstance(token, str) or not token.strip():
            raise ConfigurationError("token cannot be empty")
        if not endpoint:
            raise ConfigurationError("endpoint cannot be empty")
        if timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout}")
        if max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {max_workers}")

        self._token = token.strip()
        self._endpoint = endpoint if endpoint.endswith("/") else endpoint + "/"
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="loggly-client",
        )
        self._tags = ""
        self._closed = False
        self._lock = threading.Lock()

    @property
    def url(self) -> str:
        return f"{self._endpoint}inputs/{self._token}"

    @property
    def tags(self) -> str:
        with self._lock:
            return self._tags

    def set_tags(self, tags: str):
        """Replace the tags for all subsequent events; empty string clears them."""
        if not isinstance(tags, str):
            raise TypeError(f"tags must be a string, got {type(tags).__name__}")
        normalized = normalize_tags(tags)
        with self._lock:
            self._tags = normalized
        logger.debug("Loggly tags set to %r", normalized)

    def log(self, message: str, callback: Callback | None = None) -> Future:
        """Submit *message* without blocking and report the outcome to *callback*.

        The returned future resolves to the same Result the callback receives.
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("LogglyClient is closed")
            return self._executor.submit(self._deliver, message, self._tags, callback)

    def log_sync(self, message: str) -> Result:
        """Post *message* on the calling thread and return the outcome."""
        return self._post(message, self.tags)

    def close(self, wait: bool = True):
        """Stop accepting events, optionally wait for pending ones, and release the session."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=wait)
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _deliver(self, message: str, tags: str, callback: Callback | None) -> Result:
        result = self._post(message, tags)
        if callback is not None:
            try:
                callback(result)
            except Exception:
                logger.exception("Loggly completion callback raised")
        return result

    def _post(self, message: str, tags: str) -> Result:
        headers = {"Content-Type": "text/plain"}
        if tags:
            headers[TAG_HEADER] = tags
        try:
            resp = self._session.post(
                self.url,
                data=message.encode("utf-8"),
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.debug("Loggly request failed: %s", e)
            return Failure(str(e))
        except Exception as e:
            logger.exception("Unexpected error posting to Loggly")
            return Failure(str(e))

        if not 200 <= resp.status_code < 300:
            logger.debug("Loggly rejected event with HTTP %d", resp.status_code)
            return Failure(f"HTTP {resp.status_code}: {resp.text[:200]}")
        return Success()
