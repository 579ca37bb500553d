"""Local stand-in for the Loggly inputs endpoint, for development and tests."""

import logging
import threading

from flask import Flask, jsonify, request

from loggly_tree.client import TAG_HEADER

logger = logging.getLogger(__name__)


class EventStore:
    """Thread-safe list of received events."""

    def __init__(self):
        self._events: list[dict] = []
        self._lock = threading.Lock()

    def add(self, event: dict):
        with self._lock:
            self._events.append(event)

    def all(self) -> list[dict]:
        with self._lock:
            return list(self._events)

    def clear(self):
        with self._lock:
            self._events.clear()

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._events)


def create_app(token: str | None = None):
    """Flask application factory.

    When *token* is given, posts to any other token are rejected with 403.
    """
    app = Flask(__name__)
    store = EventStore()
    app.config["store"] = store

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy", "received": store.count})

    @app.route("/inputs/<path_token>", methods=["POST"])
    def ingest(path_token):
        if token is not None and path_token != token:
            logger.warning("Rejected event for unknown token %s", path_token)
            return jsonify({"response": "invalid token"}), 403

        event = {
            "token": path_token,
            "tags": request.headers.get(TAG_HEADER, ""),
            "body": request.get_data(as_text=True),
        }
        store.add(event)
        logger.info("Received event (tags=%r, %d bytes)", event["tags"], len(event["body"]))
        return jsonify({"response": "ok"})

    @app.route("/api/events", methods=["GET"])
    def list_events():
        return jsonify(store.all())

    @app.route("/api/events", methods=["DELETE"])
    def clear_events():
        store.clear()
        return jsonify({"status": "cleared"})

    return app
