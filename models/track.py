from dataclasses import dataclass
from pathlib import Path

UNKNOWN = "unknown"


@dataclass(frozen=True)
class Track:
    """Represents a music track with metadata."""
    filename: str
    artist: str
    title: str

    @classmethod
    def from_filename(cls, filename: str) -> "Track":
        """Build a track whose details are parsed from the file name.

        Names of the form "Artist-Title.mp3" give artist and title; anything
        else keeps the whole stem as the title.

        Args:
            filename: Path or bare name of the audio file.

        Returns:
            Track for the given file.
        """
        artist, title = parse_filename(filename)
        return cls(filename=filename, artist=artist, title=title)

    def details(self) -> str:
        """Return the one-line listing used by the organizer."""
        return f"{self.artist}: {self.title}  (file: {self.filename})"


def parse_filename(filename: str) -> tuple[str, str]:
    """Split a file name into (artist, title)."""
    stem = Path(filename).stem
    if "-" not in stem:
        return UNKNOWN, stem.strip() or UNKNOWN

    artist, title = stem.split("-", 1)
    return artist.strip() or UNKNOWN, title.strip() or UNKNOWN
