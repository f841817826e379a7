import pytest

from algorithms import get_algorithm
from engine.synced import SyncedPlayback


@pytest.fixture
def playback(scheduler):
    pb = SyncedPlayback(scheduler)
    pb.select(get_algorithm("binary-search"), get_algorithm("linear-search"))
    return pb


def test_unsynced_controls_drive_one_side(playback):
    playback.step_forward("right")
    assert playback.left.position == 0
    assert playback.right.position == 1


def test_unknown_side_raises(playback):
    with pytest.raises(ValueError):
        playback.side("middle")


def test_synced_controls_drive_both_sides(playback, clock, scheduler):
    playback.set_synced(True)
    playback.step_forward()
    assert (playback.left.position, playback.right.position) == (1, 1)
    playback.toggle_play()
    assert playback.left.is_playing and playback.right.is_playing
    clock.advance(0.5)
    scheduler.poll()
    assert (playback.left.position, playback.right.position) == (2, 2)
    playback.toggle_play()
    assert not playback.is_playing
    assert scheduler.pending == 0


def test_sync_pushes_shared_speed(playback):
    playback.left.set_speed(1)
    playback.right.set_speed(5)
    playback.set_synced(True)
    assert playback.left.speed == playback.right.speed == playback.sync_speed == 3
    playback.set_speed(4)
    assert playback.left.speed == playback.right.speed == 4


def test_unsync_keeps_individual_speeds(playback):
    playback.set_synced(True)
    playback.set_synced(False)
    playback.set_speed(1, side="left")
    assert (playback.left.speed, playback.right.speed) == (1, 3)
    assert playback.sync_speed == 3


def test_shorter_side_stops_first(playback, clock, scheduler):
    playback.set_synced(True)
    playback.play()
    clock.advance(60)
    scheduler.poll()
    assert playback.left.is_at_end and playback.right.is_at_end
    assert not playback.is_playing


def test_snapshot_and_close(playback, scheduler):
    playback.play("left")
    snap = playback.snapshot()
    assert snap["synced"] is False
    assert snap["left"]["is_playing"] is True
    assert snap["right"]["algorithm_id"] == "linear-search"
    playback.close()
    assert scheduler.pending == 0
