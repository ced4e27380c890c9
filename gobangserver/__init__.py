"""Account server for a gobang game: SQLite user storage, an HTTP service and its command."""

__version__ = "0.1.0"
__all__ = ["users", "service", "server"]