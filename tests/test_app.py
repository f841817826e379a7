import threading

import pytest

from algorithms import get_algorithm
from main import SessionPlayback, create_app


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "SECRET_KEY": "testing", "LOG_LEVEL": "WARNING"})
    yield app
    app.extensions["algoviz"].close()


@pytest.fixture
def client(app):
    return app.test_client()


def test_list_algorithms_grouped_by_category(client):
    res = client.get("/api/algorithms")
    assert res.status_code == 200
    categories = res.get_json()["categories"]
    assert categories[0]["category"] == "Concepts"
    assert sum(len(c["algorithms"]) for c in categories) == 28


def test_algorithm_detail_and_404(client):
    res = client.get("/api/algorithms/lcs")
    assert res.status_code == 200
    assert "def lcs" in res.get_json()["code"]
    res = client.get("/api/algorithms/nope")
    assert res.status_code == 404
    assert "error" in res.get_json()


def test_state_before_selection_has_no_step(client):
    body = client.get("/api/state").get_json()
    assert body["step"] is None
    assert body["total_steps"] == 0


def test_select_then_navigate(client):
    res = client.post("/api/select", json={"id": "binary-search", "locale": "es"})
    assert res.status_code == 200
    body = res.get_json()
    assert body["total_steps"] == 7
    assert body["step"]["kind"] == "array"
    assert body["step"]["description"].startswith("Arreglo ordenado")

    body = client.post("/api/step/next").get_json()
    assert body["position"] == 1 and body["moved"] is True

    body = client.post("/api/step/prev").get_json()
    assert body["position"] == 0

    body = client.post("/api/step/prev").get_json()
    assert body["position"] == 0 and body["moved"] is False

    body = client.post("/api/step/goto", json={"index": 100}).get_json()
    assert body["position"] == 6
    assert body["step"]["is_final"] is True


def test_select_unknown_and_missing_id(client):
    assert client.post("/api/select", json={"id": "nope"}).status_code == 404
    assert client.post("/api/select", json={}).status_code == 400


def test_bad_payloads_are_400(client):
    client.post("/api/select", json={"id": "bubble-sort"})
    assert client.post("/api/step/goto", json={"index": "abc"}).status_code == 400
    assert client.post("/api/step/goto", json={}).status_code == 400
    assert client.post("/api/speed", json={"level": None}).status_code == 400
    assert client.post("/api/speed", json={"level": True}).status_code == 400


def test_speed_is_clamped(client):
    client.post("/api/select", json={"id": "bubble-sort"})
    body = client.post("/api/speed", json={"level": 9}).get_json()
    assert body["speed"] == 5 and body["delay_ms"] == 1500


def test_play_toggles(client):
    client.post("/api/select", json={"id": "bubble-sort"})
    assert client.post("/api/step/play").get_json()["is_playing"] is True
    assert client.post("/api/step/play").get_json()["is_playing"] is False


def test_sessions_are_independent(app):
    a, b = app.test_client(), app.test_client()
    a.post("/api/select", json={"id": "bubble-sort"})
    b.post("/api/select", json={"id": "lcs"})
    a.post("/api/step/next")
    assert a.get("/api/state").get_json()["algorithm_id"] == "bubble-sort"
    assert a.get("/api/state").get_json()["position"] == 1
    assert b.get("/api/state").get_json()["algorithm_id"] == "lcs"
    assert b.get("/api/state").get_json()["position"] == 0


def test_compare_endpoint(client):
    res = client.get("/api/compare?left=binary-search&right=linear-search")
    assert res.status_code == 200
    assert res.get_json()["winner_steps"] == "Binary Search"
    assert client.get("/api/compare?left=binary-search&right=nope").status_code == 404


def test_palette_endpoint(client):
    body = client.get("/api/palette").get_json()
    assert body["array"]["found"] == "#4ade80"


def test_default_locale_comes_from_config():
    app = create_app({"TESTING": True, "DEFAULT_LOCALE": "es", "LOG_LEVEL": "WARNING"})
    body = app.test_client().post("/api/select", json={"id": "fibonacci-dp"}).get_json()
    assert body["step"]["description"].startswith("Casos base")


def test_env_overrides_config(monkeypatch):
    monkeypatch.setenv("ALGOVIZ_DEFAULT_SPEED", "5")
    app = create_app({"TESTING": True, "LOG_LEVEL": "WARNING"})
    assert app.config["DEFAULT_SPEED"] == 5
    assert app.test_client().get("/api/state").get_json()["speed"] == 5


# ---------------------------------------------------------------------------
# Autoplay over HTTP
# ---------------------------------------------------------------------------
def test_autoplay_advances_on_request_polling(clock, scheduler):
    app = create_app({"TESTING": True, "LOG_LEVEL": "WARNING", "DEFAULT_SPEED": 3}, scheduler=scheduler)
    client = app.test_client()
    client.post("/api/select", json={"id": "binary-search"})
    assert client.post("/api/step/play").get_json()["is_playing"] is True

    clock.advance(0.9)  # ticks due at 0.4 and 0.8
    body = client.get("/api/state").get_json()
    assert body["position"] == 2 and body["is_playing"] is True

    clock.advance(60)
    body = client.get("/api/state").get_json()
    assert body["position"] == 6 and body["is_playing"] is False

    clock.advance(60)
    assert client.get("/api/state").get_json()["position"] == 6


# ---------------------------------------------------------------------------
# Session bookkeeping
# ---------------------------------------------------------------------------
def test_idle_sessions_are_dropped(clock, scheduler):
    app = create_app(
        {"TESTING": True, "LOG_LEVEL": "WARNING", "SESSION_IDLE_SECONDS": 10},
        scheduler=scheduler,
    )
    playback = app.extensions["algoviz"]
    a, b = app.test_client(), app.test_client()
    a.post("/api/select", json={"id": "bubble-sort"})
    with a.session_transaction() as sess:
        sid_a = sess["sid"]
    assert sid_a in playback

    clock.advance(11)
    b.get("/api/state")
    assert sid_a not in playback
    assert len(playback) == 1

    # the evicted session starts over with an empty stepper
    assert a.get("/api/state").get_json()["step"] is None


def test_evicting_a_playing_session_cancels_its_timer(clock, scheduler):
    playback = SessionPlayback(3, scheduler=scheduler, idle_timeout=10)
    stepper = playback.stepper("a")
    stepper.select_algorithm(get_algorithm("bubble-sort"))
    stepper.play()
    assert scheduler.pending == 1

    clock.advance(11)
    playback.stepper("b")
    assert "a" not in playback
    assert scheduler.pending == 0


def test_poll_blocks_other_threads_until_dispatch_finishes(clock, scheduler):
    playback = SessionPlayback(3, scheduler=scheduler)
    a, b = playback.stepper("a"), playback.stepper("b")
    a.select_algorithm(get_algorithm("binary-search"))
    b.select_algorithm(get_algorithm("binary-search"))

    entered, release = threading.Event(), threading.Event()

    def hold_first_tick(step):
        entered.set()
        release.wait(5)

    a.on_step = hold_first_tick
    a.play()
    clock.advance(100)

    poller = threading.Thread(target=playback.poll)
    poller.start()
    assert entered.wait(5)

    def play_b():
        with playback.lock:
            b.play()

    player = threading.Thread(target=play_b)
    player.start()
    player.join(0.2)
    assert player.is_alive()  # still waiting on the lock

    release.set()
    poller.join(5)
    player.join(5)

    # b's first tick is timed from the real clock, not from a's tick
    assert scheduler.next_due() == pytest.approx(100.4)
    playback.poll()
    assert b.position == 0


def test_routes_wait_for_the_playback_lock(app):
    client = app.test_client()
    done = threading.Event()

    def request_state():
        client.get("/api/state")
        done.set()

    worker = threading.Thread(target=request_state)
    with app.extensions["algoviz"].lock:
        worker.start()
        assert not done.wait(0.2)
    worker.join(5)
    assert done.is_set()
