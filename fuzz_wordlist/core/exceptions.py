"""
Error hierarchy for fuzz-wordlist.

Errors raised while building an input source keep a reference to the
partially built source so the caller can decide whether to continue
without it or with whatever was read before the failure.
"""

from typing import Any, Optional


class FuzzWordlistError(Exception):
    """Base exception class for all fuzz-wordlist errors."""

    def __init__(self, message: str, path: Optional[str] = None, provider: Any = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.provider = provider

    def __str__(self) -> str:
        return self.message


class WordlistSourceError(FuzzWordlistError):
    """The wordlist path does not exist or cannot be opened for reading."""


class WordlistReadError(FuzzWordlistError):
    """Reading the wordlist failed part way through."""

    def __init__(
            self,
            message: str,
            path: Optional[str] = None,
            provider: Any = None,
            lines_read: int = 0
    ):
        super().__init__(message, path=path, provider=provider)
        self.lines_read = lines_read
