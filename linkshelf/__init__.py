"""linkshelf: a terminal bookmark shelf organized in collections."""

__version__ = "0.1.0"
