from textual.app import ComposeResult
from textual.widgets import ListView, ListItem, Label
from textual.containers import Container
from models.track import Track


class LibraryView(Container):
    """Library view listing the organizer's tracks with vim navigation."""

    DEFAULT_CSS = """
    LibraryView {
        background: #1a1a1a;
        border: solid #ff8c00;
        padding: 1;
    }

    LibraryView > Label {
        color: #ff8c00;
        text-style: bold;
        padding: 0 0 1 0;
    }
    """

    BINDINGS = [
        ("j", "move_down", "Move down"),
        ("k", "move_up", "Move up"),
    ]

    def __init__(self, tracks: list[Track] | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.tracks: list[Track] = list(tracks or [])

    def compose(self) -> ComposeResult:
        """Compose the library view with a list of tracks."""
        yield Label("🎵 Music Library")
        yield ListView(*self._build_items(), id="track-list")

    def _build_items(self) -> list[ListItem]:
        return [
            ListItem(Label(f"{index:>3}  ♪ {track.details()}"))
            for index, track in enumerate(self.tracks)
        ]

    async def set_tracks(self, tracks: list[Track]) -> None:
        """Replace the listed tracks, keeping the cursor where possible."""
        self.tracks = list(tracks)
        list_view = self.query_one("#track-list", ListView)
        previous = list_view.index
        await list_view.clear()
        await list_view.extend(self._build_items())
        if self.tracks:
            list_view.index = min(previous or 0, len(self.tracks) - 1)

    @property
    def selected_index(self) -> int | None:
        """Return the index of the highlighted track, or None."""
        if not self.tracks:
            return None
        return self.query_one("#track-list", ListView).index

    def action_move_down(self) -> None:
        """Move selection down in the list (j key)."""
        list_view = self.query_one("#track-list", ListView)
        list_view.action_cursor_down()

    def action_move_up(self) -> None:
        """Move selection up in the list (k key)."""
        list_view = self.query_one("#track-list", ListView)
        list_view.action_cursor_up()
