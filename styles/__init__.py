"""Shared style constants for the organizer UI."""

COLORS = {
    "primary": "#ff8c00",
    "highlight": "#ffb347",
    "error": "#cc5500",
    "muted": "#888888",
    "dim": "#555555",
}

COLOR_PRIMARY = COLORS["primary"]
COLOR_HIGHLIGHT = COLORS["highlight"]
COLOR_ERROR = COLORS["error"]
COLOR_MUTED = COLORS["muted"]
COLOR_DIM = COLORS["dim"]
