"""
Exceptions raised by lyrics_markup

Notation that does not match a chord or ruby rule is never an error; it is
passed through untouched. Exceptions are reserved for caller contract
violations and bad configuration.
"""

from typing import Optional


class LyricsMarkupError(Exception):
    """Base class for all lyrics_markup errors"""


class MissingMarkerError(LyricsMarkupError, ValueError):
    """A conversion entry point was given a block without its marker prefix"""

    PREVIEW_LENGTH = 20

    def __init__(self, expected: str, text: str):
        self.expected = expected
        self.preview = text[:self.PREVIEW_LENGTH]
        super().__init__(
            f"Block must start with {expected!r}, got {self.preview!r}"
        )


class ConfigError(LyricsMarkupError, ValueError):
    """Configuration file could not be read or contains invalid values"""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
