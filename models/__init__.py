from .track import Track
from .config import OrganizerConfig

__all__ = ["Track", "OrganizerConfig"]
