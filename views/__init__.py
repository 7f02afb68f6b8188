from .library import LibraryView

__all__ = ["LibraryView"]
