import os
import threading
from flask import Flask, request, jsonify

from queues import QUEUE_KINDS, QueueError, QueueSession

# Configuration
DEFAULT_QUEUE_CAPACITY = 10
DEFAULT_QUEUE_KIND = "linear"
MAX_QUEUE_CAPACITY = 100

app = Flask(__name__)


def load_queue_config(environ=os.environ):
    """Read QUEUE_KIND / QUEUE_CAPACITY, falling back to defaults on bad values."""
    kind = environ.get("QUEUE_KIND", DEFAULT_QUEUE_KIND)
    if kind not in QUEUE_KINDS:
        app.logger.warning("Ignoring QUEUE_KIND=%r, using %r", kind, DEFAULT_QUEUE_KIND)
        kind = DEFAULT_QUEUE_KIND

    raw = environ.get("QUEUE_CAPACITY", str(DEFAULT_QUEUE_CAPACITY))
    try:
        capacity = int(raw)
    except ValueError:
        capacity = None
    if capacity is None or not 1 <= capacity <= MAX_QUEUE_CAPACITY:
        app.logger.warning("Ignoring QUEUE_CAPACITY=%r, using %d", raw, DEFAULT_QUEUE_CAPACITY)
        capacity = DEFAULT_QUEUE_CAPACITY
    return kind, capacity


QUEUE_KIND, QUEUE_CAPACITY = load_queue_config()
app.config["QUEUE_CAPACITY"] = QUEUE_CAPACITY
app.config["QUEUE_KIND"] = QUEUE_KIND
app.config["MAX_QUEUE_CAPACITY"] = MAX_QUEUE_CAPACITY

# the dev server is threaded; every session access goes through this
session_lock = threading.RLock()


# Session Helpers
def get_session():
    with session_lock:
        if "queue_session" not in app.extensions:
            app.extensions["queue_session"] = QueueSession(
                kind=app.config["QUEUE_KIND"],
                capacity=app.config["QUEUE_CAPACITY"],
            )
        return app.extensions["queue_session"]

def reset_session(kind=None, capacity=None):
    if isinstance(capacity, int) and capacity > app.config["MAX_QUEUE_CAPACITY"]:
        raise ValueError(
            f"capacity must be at most {app.config['MAX_QUEUE_CAPACITY']}, got {capacity}"
        )
    session = QueueSession(
        kind=app.config["QUEUE_KIND"] if kind is None else kind,
        capacity=app.config["QUEUE_CAPACITY"] if capacity is None else capacity,
    )
    with session_lock:
        app.extensions["queue_session"] = session
    return session

def respond(message, status=200, **extra):
    body = {"message": message}
    body.update(extra)
    with session_lock:
        body["queue"] = get_session().snapshot()
    return jsonify(body), status


# CORS (for easy local testing)
@app.after_request
def add_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


# Error Handlers
@app.errorhandler(QueueError)
def handle_queue_error(error):
    with session_lock:
        session = get_session()
        snapshot = session.snapshot()
    app.logger.warning("%s on %s (%s): %s",
                       error.kind, session.kind, session.mode_label, error.message)
    return jsonify({
        "error": error.message,
        "kind": error.kind,
        "queue": snapshot,
    }), 409


# API Endpoints

# --- State ---

@app.route("/")
@app.route("/api/queue", methods=["GET"])
def get_queue():
    with session_lock:
        session = get_session()
        return respond(f"{session.kind_label} active - {session.mode_label} mode")


@app.route("/api/queue/reset", methods=["POST"])
def reset_queue():
    data = request.get_json(silent=True) or {}
    kind = data.get("kind")
    capacity = data.get("capacity")

    if kind is not None and kind not in QUEUE_KINDS:
        return jsonify({"error": f"Invalid queue kind, expected one of {list(QUEUE_KINDS)}"}), 400
    try:
        session = reset_session(kind, capacity)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    app.logger.info("Queue reset: %s, capacity %d", session.kind, session.capacity)
    return respond(f"{session.kind_label} active - {session.mode_label} mode")


# --- Operations ---

@app.route("/api/queue/enqueue", methods=["POST"])
def enqueue():
    data = request.get_json(silent=True) or {}
    value = data.get("value", request.form.get("value"))
    if isinstance(value, str):
        value = value.strip()

    if value is None or value == "":
        return jsonify({"error": "Enter a value before adding"}), 400

    with session_lock:
        get_session().queue.enqueue(value)
        return respond(f'Element "{value}" added to the queue', 201)


@app.route("/api/queue/dequeue", methods=["POST"])
def dequeue():
    with session_lock:
        value = get_session().queue.dequeue()
        return respond(f'Element "{value}" removed from the queue', value=value)


@app.route("/api/queue/front", methods=["GET"])
def front():
    with session_lock:
        value = get_session().queue.front()
        return respond(f'Element at the front: "{value}"', value=value)


@app.route("/api/queue/rear", methods=["GET"])
def rear():
    with session_lock:
        value = get_session().queue.rear()
        return respond(f'Element at the rear: "{value}"', value=value)


@app.route("/api/queue/size", methods=["GET"])
def size():
    with session_lock:
        count = get_session().queue.size()
        return respond(f"Current queue size: {count} element(s)", size=count)


@app.route("/api/queue/clear", methods=["POST"])
def clear():
    with session_lock:
        get_session().queue.clear()
        return respond("Queue cleared")


# --- Modes ---

@app.route("/api/queue/toggle-mode", methods=["POST"])
def toggle_mode():
    with session_lock:
        mode = get_session().toggle_mode()
        app.logger.info("Discharge mode switched to %s", mode)
        if mode == "FIFO":
            return respond("Mode changed to FIFO (First-In-First-Out)")
        return respond("Mode changed to LIFO (Last-In-First-Out)")


@app.route("/api/queue/toggle-kind", methods=["POST"])
def toggle_kind():
    with session_lock:
        session = get_session()
        session.toggle_kind()
        app.logger.info("Switched to %s queue", session.kind)
        return respond(f"{session.kind_label} active - {session.mode_label} mode")


# Run Server
if __name__ == "__main__":
    app.run(debug=True)
