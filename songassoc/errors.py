"""Exceptions raised by the Song Association core."""


class SongAssociationError(Exception):
    """Base class for all Song Association errors."""


class WordSourceError(SongAssociationError):
    """The prompt words could not be loaded. The game cannot run without them."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load words from {source}: {reason}")


class ConfigError(SongAssociationError):
    """Invalid game configuration."""
