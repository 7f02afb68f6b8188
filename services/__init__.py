from .track_store import TrackStore
from .track_loader import TrackLoader
from .audio_player import AudioPlayer
from .playback import Hold, PlaybackController, Player
from .organizer import Organizer

__all__ = [
    'TrackStore',
    'TrackLoader',
    'AudioPlayer',
    'Hold',
    'PlaybackController',
    'Player',
    'Organizer',
]
