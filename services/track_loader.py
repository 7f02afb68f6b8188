import logging
from pathlib import Path
from typing import Dict, List, Optional

from mutagen import File as MutagenFile

from models.track import Track, parse_filename

logger = logging.getLogger(__name__)


class TrackLoader:
    """Reads audio files from a folder and turns them into tracks."""

    def load_tracks(self, source: Path | str, extension: str) -> List[Track]:
        """Load every file under source that ends with extension.

        Args:
            source: Folder to search, recursively.
            extension: File extension such as ".mp3" (case-insensitive).

        Returns:
            List of Track objects ordered by path. Files that cannot be
            read are skipped.
        """
        folder = Path(source)
        if not folder.is_dir():
            logger.warning(f"Music folder not found: {folder}")
            return []

        suffix = extension.lower()
        audio_files = sorted(
            path for path in folder.rglob("*")
            if path.is_file() and path.suffix.lower() == suffix
        )

        tracks = []
        for file_path in audio_files:
            try:
                tracks.append(self._read_track(file_path))
            except Exception as e:
                logger.warning(f"Skipping unreadable file {file_path}: {e}")
                continue

        logger.info(f"Loaded {len(tracks)} of {len(audio_files)} files from {folder}")
        return tracks

    def _read_track(self, file_path: Path) -> Track:
        artist, title = parse_filename(file_path.name)
        tags = self._extract_tags(file_path)

        return Track(
            filename=str(file_path),
            artist=tags.get('artist') or artist,
            title=tags.get('title') or title,
        )

    @staticmethod
    def _extract_tags(file_path: Path) -> Dict[str, Optional[str]]:
        """Extract artist and title tags from an audio file using mutagen.

        Args:
            file_path: Path to audio file.

        Returns:
            Dictionary with 'artist' and 'title', None where a tag is missing.

        Raises:
            ValueError: If mutagen does not recognise the file.
        """
        audio = MutagenFile(file_path, easy=True)
        if audio is None:
            raise ValueError(f"Could not read audio file: {file_path}")

        tags = {'artist': None, 'title': None}
        if not audio.tags:
            return tags

        for key in tags:
            if key in audio.tags:
                value = audio.tags[key]
                tags[key] = str(value[0]) if isinstance(value, list) else str(value)
        return tags
