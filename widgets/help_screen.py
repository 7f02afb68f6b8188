from __future__ import annotations

from textual.screen import ModalScreen
from textual.widgets import Static, Button
from textual.containers import Container, VerticalScroll
from textual.app import ComposeResult

HELP_TEXT = """[bold #ff8c00]🎵 MUSIC ORGANIZER[/bold #ff8c00]

[bold]NAVIGATION[/bold]
  j/k         Move down/up in track list
  Enter       Play a sample of the selected track
  Delete      Remove the selected track

[bold]PLAYBACK CONTROLS[/bold]
  f           Play the first track
  r           Play a random track
  x           Shuffle: play every track once, then empty the library
  n           Skip to the next track while shuffling
  s           Stop playback

[bold]OTHER[/bold]
  h/?         Show this help
  q           Quit application

[bold]LIBRARY[/bold]
  • Tracks are loaded from MUSIC_ORGANIZER_DIR (default ../audio)
  • Only files with MUSIC_ORGANIZER_EXTENSION are loaded (default .mp3)
  • Shuffle holds each track for MUSIC_ORGANIZER_HOLD_SECONDS
  • Start a new track with s first: playing does not stop the previous one"""


class HelpScreen(ModalScreen[None]):
    """Modal screen displaying help information."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-container {
        width: 90;
        height: 90%;
        background: #1a1a1a;
        border: thick #cc5500;
        padding: 1 2;
    }

    #help-scroll {
        width: 100%;
        height: 1fr;
        margin-bottom: 1;
    }

    #help-content {
        width: 100%;
        height: auto;
    }

    #help-close-button {
        width: 100%;
        height: auto;
        background: #2d2d2d;
        color: #ff8c00;
        border: solid #ff8c00;
        text-style: bold;
    }

    #help-close-button:hover {
        background: #3d3d3d;
        color: #ffb347;
    }

    #help-close-button:focus {
        border: solid #ffb347;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the help screen."""
        with Container(id="help-container"):
            with VerticalScroll(id="help-scroll"):
                yield Static(HELP_TEXT, id="help-content")

            yield Button("Close (Esc)", id="help-close-button", variant="primary")

    def on_mount(self) -> None:
        """Focus the button when screen mounts."""
        self.call_after_refresh(self._focus_button)

    def _focus_button(self) -> None:
        try:
            button = self.query_one("#help-close-button", Button)
            button.focus()
        except Exception:
            pass

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle close button press."""
        if event.button.id == "help-close-button":
            self.dismiss()

    async def on_key(self, event) -> None:
        """Handle key events."""
        if event.key == "escape":
            self.dismiss()
            event.prevent_default()
            event.stop()
        elif event.key == "j":
            scroll = self.query_one("#help-scroll", VerticalScroll)
            scroll.scroll_down()
            event.prevent_default()
            event.stop()
        elif event.key == "k":
            scroll = self.query_one("#help-scroll", VerticalScroll)
            scroll.scroll_up()
            event.prevent_default()
            event.stop()
