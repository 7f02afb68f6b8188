from textual.app import App, ComposeResult
from textual.widgets import Footer, ListView, Static
from textual.containers import Vertical
from textual.binding import Binding
from textual.css.query import NoMatches
from rich.text import Text
import logging
import random
import sys
import threading
from pathlib import Path
from typing import Optional

from errors import ConfigurationError
from models.config import OrganizerConfig
from models.track import Track
from services.organizer import Organizer
from services.playback import Player
from services.track_loader import TrackLoader
from styles import COLOR_HIGHLIGHT, COLOR_ERROR
from views import LibraryView
from widgets import Header, HelpScreen

log_dir = Path.home() / '.local' / 'share' / 'music-organizer'
log_file = log_dir / 'music-organizer.log'

logger = logging.getLogger(__name__)

ERROR_PREFIXES = ("Index ", "No tracks", "Could not")


def configure_logging() -> None:
    """Send log records to the organizer's log file."""
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file)
        ]
    )


class OrganizerApp(App):
    """Terminal front end for the music organizer."""

    CSS = """
    #status-line {
        height: 1;
        padding: 0 1;
        background: #2d2d2d;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("f", "play_first", "First", priority=True),
        Binding("r", "play_random", "Random", priority=True),
        Binding("x", "shuffle", "Shuffle", priority=True),
        Binding("n", "skip", "Skip", priority=True),
        Binding("s", "stop", "Stop", priority=True),
        Binding("delete", "remove_track", "Remove", priority=True),
        Binding("h", "show_help", "Help", priority=True),
        Binding("?", "show_help", "Help", show=False, priority=True),
    ]

    def __init__(
        self,
        config: Optional[OrganizerConfig] = None,
        player: Optional[Player] = None,
        loader: Optional[TrackLoader] = None,
        rng: Optional[random.Random] = None,
        *args,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)

        logger.info("Starting music organizer")
        self._main_thread = threading.get_ident()
        self._busy = False
        self.last_status = ""

        self.organizer = Organizer(
            config=config,
            player=player,
            loader=loader,
            rng=rng,
            reporter=self._report,
        )
        logger.info("Organizer initialized")

    def compose(self) -> ComposeResult:
        """Compose the main application layout."""
        yield Header()
        with Vertical():
            yield LibraryView(self.organizer.tracks, id="library")
            yield Static(self.last_status, id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        library_view = self.query_one("#library", LibraryView)
        library_view.focus()
        self._sync_header()

    def _report(self, line: str) -> None:
        """Receive a status line from the organizer on any thread."""
        if not line:
            return
        if threading.get_ident() != self._main_thread:
            if self.is_running:
                self.call_from_thread(self._show_status, line)
        else:
            self._show_status(line)

    def _show_status(self, line: str) -> None:
        self.last_status = line
        if not self.is_running:
            return
        style = COLOR_ERROR if line.startswith(ERROR_PREFIXES) else COLOR_HIGHLIGHT
        try:
            status = self.query_one("#status-line", Static)
        except NoMatches:
            return
        status.update(Text(line, style=style))
        self._sync_header()

    def _sync_header(self) -> None:
        if not self.is_running:
            return
        try:
            header = self.query_one(Header)
        except NoMatches:
            return
        track: Optional[Track] = self.organizer.now_playing
        header.track_count = self.organizer.get_number_of_tracks()
        header.now_playing = f"{track.artist} - {track.title}" if track else ""

    async def _refresh_library(self) -> None:
        library_view = self.query_one("#library", LibraryView)
        await library_view.set_tracks(self.organizer.tracks)
        self._sync_header()

    def _guard_busy(self) -> bool:
        """Return True, and tell the user, when a blocking play is running."""
        if self._busy:
            self.notify("Playback in progress, press n to skip or s to stop", severity="warning", timeout=2)
            return True
        return False

    def _run_blocking(self, name: str, work, shuffle: bool = False) -> None:
        """Run a blocking organizer call on a worker thread."""
        if self._guard_busy():
            return
        self._busy = True
        self.query_one(Header).is_shuffle = shuffle

        def run() -> None:
            try:
                work()
            except Exception as e:
                logger.error(f"Error during {name}: {type(e).__name__}: {e}", exc_info=True)
                self.call_from_thread(self.notify, f"❌ {name} failed", severity="error", timeout=3)
            finally:
                if self.is_running:
                    self.call_from_thread(self._finish_blocking)

        self.run_worker(run, name=name, group="playback", thread=True)

    async def _finish_blocking(self) -> None:
        self._busy = False
        if not self.is_running:
            return
        try:
            self.query_one(Header).is_shuffle = False
            await self._refresh_library()
        except NoMatches:
            pass

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Play a sample of the selected track."""
        index = event.list_view.index
        if index is None:
            return
        self._run_blocking("play track", lambda: self.organizer.play_track(index))

    def action_play_first(self) -> None:
        if self._guard_busy():
            return
        self.organizer.play_first()
        self._sync_header()

    def action_play_random(self) -> None:
        if self._guard_busy():
            return
        self.organizer.play_random_track()
        self._sync_header()

    def action_shuffle(self) -> None:
        """Shuffle-play the whole library. Empties the library when done."""
        self._run_blocking("shuffle", self.organizer.shuffle, shuffle=True)

    def action_skip(self) -> None:
        self.organizer.skip()

    def action_stop(self) -> None:
        """Stop playback."""
        self.organizer.stop_playing()
        self._sync_header()

    async def action_remove_track(self) -> None:
        """Remove the highlighted track from the library."""
        if self._guard_busy():
            return
        index = self.query_one("#library", LibraryView).selected_index
        if index is None:
            self.notify("Library is empty", severity="warning", timeout=2)
            return
        removed = self.organizer.remove_track(index)
        if removed is not None:
            self._report(f"Removed: {removed.artist} - {removed.title}")
        await self._refresh_library()

    def action_show_help(self) -> None:
        self.push_screen(HelpScreen())

    def action_quit(self) -> None:
        """Handle quit action for clean shutdown."""
        if self._busy:
            self.organizer.cancel_shuffle()
        self.organizer.stop_playing()
        self.exit()


def main():
    """Entry point for the music organizer.

    Handles initialization errors and provides user-friendly error messages.
    """
    configure_logging()
    try:
        logger.info("=" * 60)
        logger.info("Music organizer starting up")
        logger.info("=" * 60)

        app = OrganizerApp(config=OrganizerConfig.from_env())
        app.run()

        logger.info("Music organizer shut down cleanly")

    except ConfigurationError as e:
        logger.critical(f"Invalid configuration: {e}")
        print("\n❌ Music organizer cannot start\n")
        print(f"{e}\n")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Music organizer interrupted by user")
        print("\n\nGoodbye! 👋\n")
        sys.exit(0)
    except Exception as e:
        logger.critical(f"Unexpected fatal error: {type(e).__name__}: {e}", exc_info=True)
        print("\n❌ Music organizer encountered an unexpected error\n")
        print(f"{type(e).__name__}: {e}\n")
        print(f"Check {log_file} for more details.\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
