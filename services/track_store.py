from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

from errors import NEGATIVE, TOO_LARGE, EmptyCollectionError, InvalidIndexError
from models.track import Track

logger = logging.getLogger(__name__)


class _TrackView:
    """Restartable, lazy view over the store's tracks."""

    def __init__(self, tracks: list[Track], predicate: Callable[[Track], bool] | None = None):
        self._tracks = tracks
        self._predicate = predicate

    def __iter__(self) -> Iterator[Track]:
        for track in self._tracks:
            if self._predicate is None or self._predicate(track):
                yield track


class TrackStore:
    """Ordered, mutable collection of tracks.

    Insertion order is the only order. Duplicates are allowed; a track is
    identified by its position.
    """

    def __init__(self, tracks: Iterable[Track] = (), reporter: Callable[[str], None] = print):
        """Initialize the store.

        Args:
            tracks: Initial tracks, kept in the given order.
            reporter: Receives user-facing status lines.
        """
        self._tracks: list[Track] = list(tracks)
        self._report = reporter

    def __len__(self) -> int:
        return len(self._tracks)

    def add(self, track: Track) -> None:
        """Append a track to the end of the collection."""
        self._tracks.append(track)

    def count(self) -> int:
        """Return the number of tracks in the collection."""
        return len(self._tracks)

    def check_index(self, index: int) -> None:
        """Raise InvalidIndexError unless 0 <= index < count()."""
        if index < 0:
            raise InvalidIndexError(index, NEGATIVE)
        if index >= len(self._tracks):
            raise InvalidIndexError(index, TOO_LARGE)

    def check_not_empty(self) -> None:
        if not self._tracks:
            raise EmptyCollectionError()

    def validate_index(self, index: int) -> bool:
        """Determine whether the given index is valid for the collection.

        Reports an error line if it is not.

        Args:
            index: The index to be checked.

        Returns:
            True if the index is valid, False otherwise.
        """
        try:
            self.check_index(index)
        except InvalidIndexError as e:
            logger.debug(f"Rejected index {index} ({e.reason}), store has {len(self._tracks)} tracks")
            self._report(str(e))
            return False
        return True

    def get(self, index: int) -> Track:
        """Return the track at a valid index.

        Raises:
            InvalidIndexError: If the index is out of range.
        """
        self.check_index(index)
        return self._tracks[index]

    def remove(self, index: int) -> Track | None:
        """Remove the track at index, shifting later tracks down by one.

        Returns:
            The removed track, or None if the index was invalid.
        """
        if not self.validate_index(index):
            return None
        return self._tracks.pop(index)

    def list_all(self) -> Iterable[Track]:
        """Return a lazy, restartable sequence of every track in stored order."""
        return _TrackView(self._tracks)

    def filter_by_artist(self, query: str) -> Iterable[Track]:
        """Return tracks whose artist contains query (case-sensitive).

        An empty query matches every track.
        """
        return _TrackView(self._tracks, lambda track: query in track.artist)

    def snapshot(self) -> list[Track]:
        """Return an independent copy of the current contents."""
        return list(self._tracks)

    def clear(self) -> None:
        self._tracks.clear()
