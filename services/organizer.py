from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from errors import InvalidIndexError
from models.config import OrganizerConfig
from models.track import Track
from services.audio_player import AudioPlayer
from services.playback import PlaybackController, Player
from services.track_loader import TrackLoader
from services.track_store import TrackStore

logger = logging.getLogger(__name__)


class Organizer:
    """Holds a collection of tracks and plays them through one player.

    Every query and mutation goes through the TrackStore and every playback
    call through the PlaybackController.
    """

    def __init__(
        self,
        config: Optional[OrganizerConfig] = None,
        player: Optional[Player] = None,
        loader: Optional[TrackLoader] = None,
        rng: Optional[random.Random] = None,
        reporter: Callable[[str], None] = print,
    ):
        """Create the organizer and load the music library.

        Args:
            config: Library location, extension and timings. Defaults apply when None.
            player: Audio backend. An AudioPlayer is created when None.
            loader: Source of the initial tracks.
            rng: Random source shared by random play and shuffle.
            reporter: Receives user-facing status lines.
        """
        self.config = config or OrganizerConfig()
        self._report = reporter
        self.store = TrackStore(reporter=reporter)
        self.playback = PlaybackController(
            player or AudioPlayer(sample_seconds=self.config.sample_seconds),
            reporter=reporter,
        )
        self.loader = loader or TrackLoader()
        self.rng = rng or random.Random(self.config.seed)

        self._read_library(self.config.music_dir)
        self._report(f"Music library loaded. {self.get_number_of_tracks()} tracks.")
        self._report("")

    def _read_library(self, folder) -> None:
        for track in self.loader.load_tracks(folder, self.config.extension):
            self.add_track(track)
        logger.info(f"Library read from {folder}: {self.store.count()} tracks")

    def add_file(self, filename: str) -> None:
        """Add a track file to the collection."""
        self.store.add(Track.from_filename(filename))

    def add_track(self, track: Track) -> None:
        self.store.add(track)

    def get_number_of_tracks(self) -> int:
        return self.store.count()

    def get_track(self, index: int) -> Optional[Track]:
        """Return the track at index, or None after reporting a bad index."""
        if not self.store.validate_index(index):
            return None
        return self.store.get(index)

    @property
    def tracks(self) -> list[Track]:
        """Return a copy of the collection in stored order."""
        return self.store.snapshot()

    @property
    def now_playing(self) -> Optional[Track]:
        return self.playback.now_playing

    def list_track(self, index: int) -> None:
        """Print the details of the track at index."""
        track = self.get_track(index)
        if track is not None:
            self._report(f"Track {index}: {track.details()}")

    def list_all_tracks(self) -> None:
        self._report("Track listing: ")
        for track in self.store.list_all():
            self._report(track.details())
        self._report("")

    def list_by_artist(self, artist: str) -> None:
        """Print every track whose artist contains the given text."""
        for track in self.store.filter_by_artist(artist):
            self._report(track.details())

    def remove_track(self, index: int) -> Optional[Track]:
        removed = self.store.remove(index)
        if removed is not None:
            logger.info(f"Removed track {index}: {removed.filename}")
        return removed

    def play_track(self, index: int) -> None:
        """Play a sample of the track at index. Blocks until the sample ends."""
        self.playback.play_at(self.store, index)

    def play_first(self) -> None:
        self.playback.play_first(self.store)

    def play_random_track(self) -> Optional[Track]:
        return self.playback.play_random(self.store, self.rng)

    def shuffle(self) -> list[Track]:
        """Play every track once in random order, then leave the collection empty.

        Each track plays for config.hold_seconds; skip() moves on early.
        """
        return self.playback.shuffle_all(self.store, self.rng, self.config.hold_seconds)

    def skip(self) -> None:
        self.playback.interrupt()

    def cancel_shuffle(self) -> None:
        """Stop shuffling after the current track; the rest are not played."""
        self.playback.cancel()

    def stop_playing(self) -> None:
        self.playback.stop()

    def is_valid_index(self, index: int) -> bool:
        """Check an index without reporting anything."""
        try:
            self.store.check_index(index)
        except InvalidIndexError:
            return False
        return True
