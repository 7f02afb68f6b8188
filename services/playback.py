"""
Playback sequencing for the organizer.

PlaybackController is the only component that talks to the player. It plays
single tracks by index, the first track, a random track, and drains a
TrackStore in random order with a fixed hold per track.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable, Optional, Protocol

from errors import EmptyCollectionError, PlaybackInterruptedError, PlayerError
from models.track import Track
from services.track_store import TrackStore

logger = logging.getLogger(__name__)


class Player(Protocol):
    """The three operations the controller needs from an audio backend."""

    def start_playing(self, filename: str) -> None: ...

    def play_sample(self, filename: str) -> None: ...

    def stop(self) -> None: ...


class Hold:
    """Parks the calling thread for a fixed time unless interrupted."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def wait(self, seconds: float) -> None:
        """Block for seconds.

        Raises:
            PlaybackInterruptedError: If interrupt() was called before or
                during the wait, or the wait received a KeyboardInterrupt.
        """
        try:
            interrupted = self._event.wait(seconds)
        except KeyboardInterrupt:
            interrupted = True

        if interrupted:
            self._event.clear()
            raise PlaybackInterruptedError()

    def interrupt(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()


class PlaybackController:
    """Drives a single player on behalf of the organizer.

    Starting a track never stops the previous one; callers call stop()
    first when they need the at-most-one-playing guarantee.
    """

    def __init__(
        self,
        player: Player,
        reporter: Callable[[str], None] = print,
        hold: Hold | None = None,
    ):
        self.player = player
        self._report = reporter
        self._hold = hold or Hold()
        self._lock = threading.RLock()
        self._cancelled = threading.Event()
        self._now_playing: Optional[Track] = None

    @property
    def now_playing(self) -> Optional[Track]:
        """Return the track in the playing slot, or None."""
        return self._now_playing

    def _start(self, track: Track) -> bool:
        with self._lock:
            try:
                self.player.start_playing(track.filename)
            except PlayerError as e:
                logger.error(f"Player failed to start {track.filename}: {e}")
                self._report(f"Could not play: {track.filename}")
                return False
            self._now_playing = track
        return True

    def play_at(self, store: TrackStore, index: int) -> None:
        """Play a sample of the track at index, blocking until it ends."""
        if not store.validate_index(index):
            return

        track = store.get(index)
        # Not under the lock: stop() must be able to end a running sample.
        self._now_playing = track
        try:
            self.player.play_sample(track.filename)
        except PlayerError as e:
            logger.error(f"Player failed to sample {track.filename}: {e}")
            self._report(f"Could not play: {track.filename}")
            return
        finally:
            self._now_playing = None
        self._report(f"Now playing: {track.artist} - {track.title}")

    def play_first(self, store: TrackStore) -> None:
        """Start the first track, if there is one. Does not block."""
        if store.count() == 0:
            logger.debug("play_first on an empty store")
            return
        self._start(store.get(0))

    def stop(self) -> None:
        """Stop the player. Idempotent."""
        with self._lock:
            self.player.stop()
            self._now_playing = None

    def play_random(self, store: TrackStore, rng: random.Random) -> Optional[Track]:
        """Start one uniformly chosen track and return it.

        Reports "No tracks to play." and returns None on an empty store.
        Also returns None when the player cannot start the chosen track.
        """
        try:
            store.check_not_empty()
        except EmptyCollectionError as e:
            self._report(str(e))
            return None

        track = store.get(rng.randrange(store.count()))
        if not self._start(track):
            return None
        self._report(f"Now playing: {track.artist} - {track.title}")
        return track

    def shuffle_all(self, store: TrackStore, rng: random.Random, hold_seconds: float) -> list[Track]:
        """Play every track once in random order, holding each for hold_seconds.

        The store is emptied first; the tracks are not put back. cancel()
        ends the loop after the current track is stopped.

        Returns:
            The tracks in the order they were played.
        """
        pool = store.snapshot()
        store.clear()
        self._hold.reset()
        logger.info(f"Shuffling {len(pool)} tracks, {hold_seconds}s each")

        played = []
        try:
            while pool and not self._cancelled.is_set():
                index = rng.randrange(len(pool))
                track = pool[index]

                if self._start(track):
                    self._report(f"Now playing: {track.artist} - {track.title}")
                    try:
                        self._hold.wait(hold_seconds)
                    except PlaybackInterruptedError as e:
                        logger.info(f"Hold interrupted for {track.filename}")
                        self._report(str(e))

                    self.stop()
                    self._report(f"Stopped playing: {track.artist} - {track.title}")
                    played.append(track)

                pool.pop(index)
        finally:
            if self._cancelled.is_set():
                logger.info(f"Shuffle cancelled with {len(pool)} tracks unplayed")
            self._cancelled.clear()

        logger.info(f"Shuffle finished, played {len(played)} tracks")
        return played

    def interrupt(self) -> None:
        """Cut the current shuffle hold short."""
        self._hold.interrupt()

    def cancel(self) -> None:
        """End the running shuffle, or the next one if none is running.

        The current hold is cut short and no further track is started.
        """
        self._cancelled.set()
        self._hold.interrupt()
