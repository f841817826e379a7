"""
main.py — Algorithm Visualizer Flask App
=========================================
JSON API over the registry and the playback controller.

Routes:
  GET  /api/algorithms          – categories with algorithm summaries
  GET  /api/algorithms/<id>     – full descriptor (code, description)
  POST /api/select              – {id, locale}: load an algorithm's trace
  POST /api/step/next           – advance one step
  POST /api/step/prev           – go back one step
  POST /api/step/goto           – {index}: jump to step N (clamped)
  POST /api/step/play           – toggle play/pause
  POST /api/speed               – {level}: speed 1-5
  GET  /api/state               – playback state + current step
  GET  /api/compare             – ?left=&right=&locale=: comparison metrics
  GET  /api/palette             – highlight colours

State management:
  The Flask session cookie only carries an opaque session id.  Each id
  maps to one Stepper held in memory; all Steppers share one
  PollingScheduler, which is polled at the start of every request so a
  playing session advances by however many ticks fell due since the
  last request.  Polling and every Stepper-touching route run under one
  lock, and sessions idle for SESSION_IDLE_SECONDS are dropped.
"""

import functools
import logging
import secrets
import threading
from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request, session

from algorithms import get_algorithm, list_by_category
from config import DefaultConfig
from engine import PollingScheduler, Recorder, Stepper, compare
from ui import palette_dict


log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level="INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


# ---------------------------------------------------------------------------
# Per-session playback
# ---------------------------------------------------------------------------
class SessionPlayback:
    """
    One Stepper per session id, all ticking on one shared scheduler.

    The dev server handles requests on several threads, while the scheduler
    and the Steppers assume a single caller.  `lock` serializes polling and
    every route that touches a Stepper.  Sessions with no request for
    `idle_timeout` seconds are closed and dropped.
    """

    def __init__(
        self,
        default_speed: int,
        scheduler: Optional[PollingScheduler] = None,
        idle_timeout: float = 1800.0,
    ):
        self.scheduler     = scheduler or PollingScheduler()
        self.default_speed = default_speed
        self.idle_timeout  = idle_timeout
        self.lock          = threading.Lock()
        self._steppers:  Dict[str, Stepper] = {}
        self._last_seen: Dict[str, float]   = {}

    def __len__(self) -> int:
        return len(self._steppers)

    def __contains__(self, sid: str) -> bool:
        return sid in self._steppers

    def stepper(self, sid: str) -> Stepper:
        now = self.scheduler.now()
        self.evict_idle(now)
        if sid not in self._steppers:
            self._steppers[sid] = Stepper(self.scheduler, speed=self.default_speed)
            log.debug("New stepper for session %s", sid)
        self._last_seen[sid] = now
        return self._steppers[sid]

    def evict_idle(self, now: float) -> int:
        stale = [sid for sid, seen in self._last_seen.items() if now - seen > self.idle_timeout]
        for sid in stale:
            self._steppers.pop(sid).close()
            del self._last_seen[sid]
        if stale:
            log.info("Evicted %d idle session(s)", len(stale))
        return len(stale)

    def poll(self) -> int:
        with self.lock:
            return self.scheduler.poll()

    def close(self) -> None:
        for stepper in self._steppers.values():
            stepper.close()
        self._steppers.clear()
        self._last_seen.clear()


def _playback() -> SessionPlayback:
    return current_app.extensions["algoviz"]


def _serialized(view):
    """Run a view while holding the playback lock."""

    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        with _playback().lock:
            return view(*args, **kwargs)

    return wrapper


def _session_stepper() -> Stepper:
    if "sid" not in session:
        session["sid"] = secrets.token_hex(16)
    return _playback().stepper(session["sid"])


def _int_field(payload: Dict[str, Any], key: str) -> Optional[int]:
    """Integer value of payload[key], or None when missing or not an integer."""
    value = payload.get(key)
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _locale(value: Optional[str]) -> str:
    return value or current_app.config["DEFAULT_LOCALE"]


def _state_response(**extra):
    body = _session_stepper().snapshot().to_dict()
    body.update(extra)
    return jsonify(body)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(
    overrides: Optional[Dict[str, Any]] = None,
    scheduler: Optional[PollingScheduler] = None,
) -> Flask:
    """
    Build the app.  `scheduler` replaces the wall-clock PollingScheduler
    that drives autoplay for every session.
    """
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env("ALGOVIZ")
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config["LOG_LEVEL"])
    app.extensions["algoviz"] = SessionPlayback(
        app.config["DEFAULT_SPEED"],
        scheduler=scheduler,
        idle_timeout=app.config["SESSION_IDLE_SECONDS"],
    )

    @app.before_request
    def advance_timers():
        fired = _playback().poll()
        if fired:
            log.debug("Fired %d pending tick(s)", fired)

    # -----------------------------------------------------------------------
    # API: Catalogue
    # -----------------------------------------------------------------------
    @app.route("/api/algorithms")
    def api_algorithms():
        grouped = list_by_category()
        return jsonify({
            "categories": [
                {"category": category, "algorithms": [a.summary() for a in algos]}
                for category, algos in grouped.items()
            ]
        })

    @app.route("/api/algorithms/<algorithm_id>")
    def api_algorithm_detail(algorithm_id):
        info = get_algorithm(algorithm_id)
        if info is None:
            return jsonify({"error": f"Unknown algorithm: {algorithm_id}"}), 404
        return jsonify(info.to_dict())

    # -----------------------------------------------------------------------
    # API: Selection
    # -----------------------------------------------------------------------
    @app.route("/api/select", methods=["POST"])
    @_serialized
    def api_select():
        payload = request.get_json(silent=True) or {}
        algorithm_id = payload.get("id")
        if not algorithm_id:
            return jsonify({"error": "Missing algorithm id"}), 400

        info = get_algorithm(algorithm_id)
        if info is None:
            return jsonify({"error": f"Unknown algorithm: {algorithm_id}"}), 404

        _session_stepper().select_algorithm(info, _locale(payload.get("locale")))
        return _state_response(code=info.code)

    # -----------------------------------------------------------------------
    # API: Step Navigation
    # -----------------------------------------------------------------------
    @app.route("/api/step/next", methods=["POST"])
    @_serialized
    def api_step_next():
        moved = _session_stepper().step_forward()
        return _state_response(moved=moved)

    @app.route("/api/step/prev", methods=["POST"])
    @_serialized
    def api_step_prev():
        moved = _session_stepper().step_backward()
        return _state_response(moved=moved)

    @app.route("/api/step/goto", methods=["POST"])
    @_serialized
    def api_step_goto():
        index = _int_field(request.get_json(silent=True) or {}, "index")
        if index is None:
            return jsonify({"error": "Invalid step index"}), 400
        moved = _session_stepper().set_current_step(index)
        return _state_response(moved=moved)

    @app.route("/api/step/play", methods=["POST"])
    @_serialized
    def api_step_play():
        _session_stepper().toggle_play()
        return _state_response()

    @app.route("/api/speed", methods=["POST"])
    @_serialized
    def api_speed():
        level = _int_field(request.get_json(silent=True) or {}, "level")
        if level is None:
            return jsonify({"error": "Invalid speed level"}), 400
        _session_stepper().set_speed(level)
        return _state_response()

    @app.route("/api/state")
    @_serialized
    def api_state():
        return _state_response()

    # -----------------------------------------------------------------------
    # API: Comparison & palette
    # -----------------------------------------------------------------------
    @app.route("/api/compare")
    def api_compare():
        left_id  = request.args.get("left", "")
        right_id = request.args.get("right", "")
        for algorithm_id in (left_id, right_id):
            if get_algorithm(algorithm_id) is None:
                return jsonify({"error": f"Unknown algorithm: {algorithm_id}"}), 404

        locale = _locale(request.args.get("locale"))
        left, right = Recorder(), Recorder()
        left.record(left_id, locale)
        right.record(right_id, locale)
        return jsonify(compare(left, right).to_dict())

    @app.route("/api/palette")
    def api_palette():
        return jsonify(palette_dict())

    return app


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    create_app().run(debug=True, host="0.0.0.0", port=5000)
