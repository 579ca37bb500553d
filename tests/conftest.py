import threading

import pytest
from werkzeug.serving import make_server

from loggly_tree.receiver import create_app
from loggly_tree.result import Success


class FakeTransport:
    """Records submissions and completes them immediately, or once *gate* is set."""

    def __init__(self, result=None, gate: threading.Event | None = None):
        self.result = result if result is not None else Success()
        self.gate = gate
        self.logged: list[str] = []
        self.tag_calls: list[str] = []
        self.completed = threading.Event()
        self.closed = False
        self._threads: list[threading.Thread] = []

    def log(self, message, callback=None):
        self.logged.append(message)
        if self.gate is None:
            self._complete(callback)
            return
        t = threading.Thread(target=self._wait_then_complete, args=(callback,), daemon=True)
        t.start()
        self._threads.append(t)

    def set_tags(self, tags):
        self.tag_calls.append(tags)

    def close(self):
        self.closed = True

    def join(self, timeout=2.0):
        for t in self._threads:
            t.join(timeout=timeout)

    def _wait_then_complete(self, callback):
        self.gate.wait(timeout=5)
        self._complete(callback)

    def _complete(self, callback):
        if callback is not None:
            callback(self.result)
        self.completed.set()


class FakeResponse:
    def __init__(self, status_code=200, text='{"response" : "ok"}'):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for requests.Session, recording every post."""

    def __init__(self, response=None, exc=None):
        self.response = response if response is not None else FakeResponse()
        self.exc = exc
        self.calls: list[dict] = []
        self.closed = False
        self._lock = threading.Lock()

    def post(self, url, data=None, headers=None, timeout=None):
        with self._lock:
            self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def diagnostics():
    return []


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def app():
    application = create_app(token="test-token")
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def live_receiver():
    """Run the receiver on a random port. Yields (endpoint, store)."""
    application = create_app(token="test-token")
    server = make_server("127.0.0.1", 0, application, threaded=True)
    t = threading.Thread(target=server.serve_forever, daemon=True)
    t.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}/", application.config["store"]
    finally:
        server.shutdown()
        t.join(timeout=5)
