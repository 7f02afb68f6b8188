import logging
import time
from typing import Optional

import pygame

from errors import PlayerError

logger = logging.getLogger(__name__)

SAMPLE_POLL_INTERVAL = 0.05


class AudioPlayer:
    """pygame mixer backed player that plays one file at a time."""

    def __init__(self, sample_seconds: float = 5.0, volume: float = 0.7):
        """Create the player without touching the audio device.

        Args:
            sample_seconds: Longest time play_sample blocks for.
            volume: Initial volume level (0.0 to 1.0).
        """
        self.sample_seconds = sample_seconds
        self._volume = max(0.0, min(1.0, volume))
        self._current_file: Optional[str] = None
        self._initialized = False

    def _ensure_mixer(self) -> None:
        if self._initialized:
            return
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            raise PlayerError(f"No audio output available: {e}") from e
        pygame.mixer.music.set_volume(self._volume)
        self._initialized = True

    def _load_and_play(self, filename: str) -> None:
        self._ensure_mixer()
        try:
            pygame.mixer.music.load(filename)
            pygame.mixer.music.play()
        except pygame.error as e:
            self._current_file = None
            raise PlayerError(f"Cannot play {filename}: {e}") from e
        self._current_file = filename

    def start_playing(self, filename: str) -> None:
        """Start playing a file and return immediately."""
        self._load_and_play(filename)
        logger.debug(f"Started {filename}")

    def play_sample(self, filename: str) -> None:
        """Play a file and block until it ends or the sample time runs out."""
        self._load_and_play(filename)
        deadline = time.monotonic() + self.sample_seconds
        while pygame.mixer.music.get_busy() and time.monotonic() < deadline:
            time.sleep(SAMPLE_POLL_INTERVAL)
        if pygame.mixer.music.get_busy():
            pygame.mixer.music.stop()
        self._current_file = None
        logger.debug(f"Sample of {filename} finished")

    def stop(self) -> None:
        """Stop playback. Safe to call when nothing is playing."""
        if self._initialized:
            pygame.mixer.music.stop()
        self._current_file = None

    def is_playing(self) -> bool:
        """Check if currently playing."""
        return self._initialized and bool(pygame.mixer.music.get_busy())

    def get_current_file(self) -> Optional[str]:
        """Return the file last started, or None after stop."""
        return self._current_file
