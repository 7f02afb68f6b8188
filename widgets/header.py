from textual.widgets import Static
from textual.reactive import reactive
from textual.containers import Vertical
from textual.app import ComposeResult
from rich.text import Text
from styles import COLOR_PRIMARY, COLOR_HIGHLIGHT, COLOR_MUTED, COLOR_DIM

ORGANIZER_TITLE = "♫ MUSIC ORGANIZER"


class Header(Vertical):
    track_count: reactive[int] = reactive(0)
    now_playing: reactive[str] = reactive("")
    is_shuffle: reactive[bool] = reactive(False)

    DEFAULT_CSS = """
    Header {
        height: auto;
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(Text(ORGANIZER_TITLE, style=f"{COLOR_PRIMARY} bold"), id="header-logo")
        yield Static("─" * 80, id="header-divider")
        yield Static(self._render_status(), id="header-status")

    def _render_status(self) -> Text:
        result = Text()

        result.append("Tracks ", style=COLOR_MUTED)
        result.append(str(self.track_count), style=f"{COLOR_PRIMARY} bold")

        result.append("    │    Playing ", style=COLOR_MUTED)
        if self.now_playing:
            result.append(self.now_playing, style=f"{COLOR_HIGHLIGHT} bold")
        else:
            result.append("—", style=COLOR_DIM)

        result.append("    │    Shuffle ", style=COLOR_MUTED)
        if self.is_shuffle:
            result.append("ON", style=f"{COLOR_PRIMARY} bold")
        else:
            result.append("OFF", style=COLOR_DIM)

        return result

    def _refresh_status(self) -> None:
        try:
            status_widget = self.query_one("#header-status", Static)
            status_widget.update(self._render_status())
        except Exception:
            pass

    def watch_track_count(self, new_value: int) -> None:
        self._refresh_status()

    def watch_now_playing(self, new_value: str) -> None:
        self._refresh_status()

    def watch_is_shuffle(self, new_value: bool) -> None:
        self._refresh_status()
