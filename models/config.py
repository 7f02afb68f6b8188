from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from errors import ConfigurationError

ENV_PREFIX = "MUSIC_ORGANIZER_"


@dataclass
class OrganizerConfig:
    """Configuration for the organizer and its playback.

    Attributes:
        music_dir: Folder scanned for tracks at startup
        extension: File extension of the tracks to load
        hold_seconds: Time each track plays during a shuffle
        sample_seconds: Upper bound on a blocking sample play
        seed: Seed for the random source, None for an unseeded one
    """
    music_dir: Path = Path("../audio")
    extension: str = ".mp3"
    hold_seconds: float = 10.0
    sample_seconds: float = 5.0
    seed: int | None = None

    def __post_init__(self) -> None:
        self.music_dir = Path(self.music_dir)
        if not self.extension:
            raise ConfigurationError("Track extension cannot be empty")
        if not self.extension.startswith("."):
            self.extension = f".{self.extension}"
        if self.hold_seconds < 0:
            raise ConfigurationError(f"Hold duration cannot be negative: {self.hold_seconds}")
        if self.sample_seconds <= 0:
            raise ConfigurationError(f"Sample duration must be positive: {self.sample_seconds}")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> OrganizerConfig:
        """Build a config from MUSIC_ORGANIZER_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            OrganizerConfig with defaults for every unset variable.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values = {}

        if music_dir := env.get(f"{ENV_PREFIX}DIR"):
            values["music_dir"] = Path(music_dir).expanduser()
        if extension := env.get(f"{ENV_PREFIX}EXTENSION"):
            values["extension"] = extension

        for key, name, convert in (
            ("hold_seconds", "HOLD_SECONDS", float),
            ("sample_seconds", "SAMPLE_SECONDS", float),
            ("seed", "SEED", int),
        ):
            raw = env.get(f"{ENV_PREFIX}{name}")
            if raw is None or raw == "":
                continue
            try:
                values[key] = convert(raw)
            except ValueError:
                raise ConfigurationError(f"Invalid value for {ENV_PREFIX}{name}: {raw!r}") from None

        return cls(**values)
