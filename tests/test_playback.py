"""Tests for PlaybackController and Hold."""

import random
from collections import Counter

import pytest

from errors import PlaybackInterruptedError, PlayerError
from services.playback import Hold, PlaybackController
from services.track_store import TrackStore


class InterruptingHold(Hold):
    """Hold that reports an interruption on every listed wait number."""

    def __init__(self, interrupt_on):
        super().__init__()
        self.interrupt_on = set(interrupt_on)
        self.waits = []

    def wait(self, seconds):
        self.waits.append(seconds)
        if len(self.waits) in self.interrupt_on:
            raise PlaybackInterruptedError()


class FailingPlayer:
    def __init__(self, player, bad_file):
        self.player = player
        self.bad_file = bad_file

    def start_playing(self, filename):
        if filename == self.bad_file:
            raise PlayerError(f"Cannot play {filename}")
        self.player.start_playing(filename)

    def play_sample(self, filename):
        raise PlayerError(f"Cannot play {filename}")

    def stop(self):
        self.player.stop()


@pytest.fixture
def messages():
    return []


@pytest.fixture
def controller(player, messages):
    return PlaybackController(player, reporter=messages.append)


@pytest.fixture
def store(track_a, track_b, messages):
    return TrackStore([track_a, track_b], reporter=messages.append)


def test_play_at_plays_sample_and_reports(controller, store, player, messages):
    controller.play_at(store, 0)

    assert player.calls == [("sample", "a.mp3")]
    assert messages == ["Now playing: Bob - Song1"]
    assert controller.now_playing is None


def test_play_at_invalid_index_leaves_player_alone(controller, store, player, messages):
    controller.play_at(store, 5)
    controller.play_at(store, -1)

    assert player.calls == []
    assert messages == ["Index is too large: 5", "Index cannot be negative: -1"]


def test_play_at_reports_player_failure(player, store, messages):
    controller = PlaybackController(FailingPlayer(player, "a.mp3"), reporter=messages.append)

    controller.play_at(store, 0)

    assert messages == ["Could not play: a.mp3"]


def test_play_first_starts_first_track_without_stopping(controller, store, player, messages, track_a):
    controller.play_first(store)

    assert player.calls == [("start", "a.mp3")]
    assert controller.now_playing == track_a
    assert messages == []


def test_play_first_on_empty_store_is_noop(controller, player, messages):
    controller.play_first(TrackStore(reporter=messages.append))

    assert player.calls == []
    assert messages == []


def test_stop_is_idempotent(controller, player):
    controller.stop()
    controller.stop()

    assert player.calls == [("stop", None), ("stop", None)]
    assert controller.now_playing is None


def test_play_random_stays_in_range(player, many_tracks):
    filenames = {track.filename for track in many_tracks}
    controller = PlaybackController(player, reporter=lambda line: None)

    for seed in range(50):
        store = TrackStore(many_tracks)
        controller.play_random(store, random.Random(seed))

    assert len(player.started()) == 50
    assert set(player.started()) <= filenames


def test_play_random_reports_chosen_track(controller, store, player, messages, rng):
    track = controller.play_random(store, rng)

    assert player.calls == [("start", track.filename)]
    assert messages == [f"Now playing: {track.artist} - {track.title}"]


def test_play_random_on_empty_store(controller, player, messages, rng):
    assert controller.play_random(TrackStore(), rng) is None

    assert player.calls == []
    assert messages == ["No tracks to play."]


def test_shuffle_plays_every_track_once_and_empties_store(player, many_tracks, rng, messages):
    controller = PlaybackController(player, reporter=messages.append)
    store = TrackStore(many_tracks)

    played = controller.shuffle_all(store, rng, 0)

    assert Counter(played) == Counter(many_tracks)
    assert store.count() == 0
    assert player.calls == [
        call
        for track in played
        for call in (("start", track.filename), ("stop", None))
    ]
    assert messages[0] == f"Now playing: {played[0].artist} - {played[0].title}"
    assert messages[1] == f"Stopped playing: {played[0].artist} - {played[0].title}"
    assert len(messages) == 2 * len(many_tracks)


def test_shuffle_order_follows_random_source(player, many_tracks):
    controller = PlaybackController(player, reporter=lambda line: None)

    first = controller.shuffle_all(TrackStore(many_tracks), random.Random(7), 0)
    second = controller.shuffle_all(TrackStore(many_tracks), random.Random(7), 0)

    assert first == second


def test_shuffle_on_empty_store(controller, player, messages, rng):
    assert controller.shuffle_all(TrackStore(), rng, 10) == []

    assert player.calls == []
    assert messages == []


def test_shuffle_holds_each_track(player, many_tracks, rng):
    hold = InterruptingHold(interrupt_on=())
    controller = PlaybackController(player, reporter=lambda line: None, hold=hold)

    controller.shuffle_all(TrackStore(many_tracks), rng, 2.5)

    assert hold.waits == [2.5] * len(many_tracks)


def test_interrupted_hold_continues_with_remaining_tracks(player, many_tracks, rng, messages):
    hold = InterruptingHold(interrupt_on={2})
    controller = PlaybackController(player, reporter=messages.append, hold=hold)

    played = controller.shuffle_all(TrackStore(many_tracks), rng, 10)

    assert len(played) == len(many_tracks)
    assert messages.count("Playback interrupted") == 1
    second = played[1]
    index = messages.index("Playback interrupted")
    assert messages[index - 1] == f"Now playing: {second.artist} - {second.title}"
    assert messages[index + 1] == f"Stopped playing: {second.artist} - {second.title}"


def test_shuffle_skips_tracks_the_player_cannot_start(player, track_a, track_b, rng, messages):
    controller = PlaybackController(FailingPlayer(player, "b.mp3"), reporter=messages.append)

    played = controller.shuffle_all(TrackStore([track_a, track_b]), rng, 0)

    assert played == [track_a]
    assert "Could not play: b.mp3" in messages
    assert player.started() == ["a.mp3"]


def test_interrupt_before_shuffle_is_discarded(player, many_tracks, rng, messages):
    controller = PlaybackController(player, reporter=messages.append)
    controller.interrupt()

    controller.shuffle_all(TrackStore(many_tracks), rng, 0)

    assert "Playback interrupted" not in messages


def test_hold_interrupt_applies_to_one_wait():
    hold = Hold()
    hold.interrupt()

    with pytest.raises(PlaybackInterruptedError):
        hold.wait(5)
    hold.wait(0)


def test_hold_turns_keyboard_interrupt_into_interruption(monkeypatch):
    hold = Hold()

    def raise_keyboard_interrupt(timeout=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(hold._event, "wait", raise_keyboard_interrupt)

    with pytest.raises(PlaybackInterruptedError):
        hold.wait(5)


def test_play_random_returns_none_when_player_fails(player, track_a, rng, messages):
    controller = PlaybackController(FailingPlayer(player, "a.mp3"), reporter=messages.append)

    assert controller.play_random(TrackStore([track_a]), rng) is None
    assert messages == ["Could not play: a.mp3"]
    assert controller.now_playing is None


class CancellingHold(Hold):
    """Hold that cancels the shuffle during its first wait."""

    def __init__(self):
        super().__init__()
        self.controller = None

    def wait(self, seconds):
        self.controller.cancel()
        super().wait(seconds)


def test_cancel_ends_shuffle_after_current_track(player, many_tracks, rng, messages):
    hold = CancellingHold()
    controller = PlaybackController(player, reporter=messages.append, hold=hold)
    hold.controller = controller

    played = controller.shuffle_all(TrackStore(many_tracks), rng, 10)

    assert len(played) == 1
    assert player.calls == [("start", played[0].filename), ("stop", None)]
    assert messages[-1] == f"Stopped playing: {played[0].artist} - {played[0].title}"


def test_cancel_before_shuffle_applies_once(player, many_tracks, rng):
    controller = PlaybackController(player, reporter=lambda line: None)
    controller.cancel()

    assert controller.shuffle_all(TrackStore(many_tracks), rng, 0) == []
    assert player.calls == []

    played = controller.shuffle_all(TrackStore(many_tracks), rng, 0)
    assert len(played) == len(many_tracks)
