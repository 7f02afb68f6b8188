"""Shared fixtures for the organizer tests."""

import random

import pytest

from models.config import OrganizerConfig
from models.track import Track


class RecordingPlayer:
    """Player double that records every call instead of making sound."""

    def __init__(self):
        self.calls: list[tuple[str, str | None]] = []

    def start_playing(self, filename: str) -> None:
        self.calls.append(("start", filename))

    def play_sample(self, filename: str) -> None:
        self.calls.append(("sample", filename))

    def stop(self) -> None:
        self.calls.append(("stop", None))

    def started(self) -> list[str]:
        return [name for kind, name in self.calls if kind == "start"]


class StaticLoader:
    """Loader double returning a fixed list of tracks."""

    def __init__(self, tracks=()):
        self.tracks = list(tracks)
        self.requests = []

    def load_tracks(self, source, extension):
        self.requests.append((source, extension))
        return list(self.tracks)


@pytest.fixture
def player():
    return RecordingPlayer()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def config(tmp_path):
    return OrganizerConfig(music_dir=tmp_path, hold_seconds=0, sample_seconds=0.1, seed=1234)


@pytest.fixture
def track_a():
    return Track("a.mp3", "Bob", "Song1")


@pytest.fixture
def track_b():
    return Track("b.mp3", "Ann", "Song2")


@pytest.fixture
def many_tracks():
    return [Track(f"t{i}.mp3", f"Artist {i % 3}", f"Title {i}") for i in range(8)]


@pytest.fixture
def make_organizer(player, rng, config):
    """Build an Organizer seeded with the given tracks and the recording player."""
    from services.organizer import Organizer

    def make(tracks=(), reporter=print, shared_rng=True):
        return Organizer(
            config=config,
            player=player,
            loader=StaticLoader(tracks),
            rng=rng if shared_rng else None,
            reporter=reporter,
        )

    return make
