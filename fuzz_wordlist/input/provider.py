"""
Input provider contract

Abstract base class for sources that feed values to the job dispatch loop.
A dispatcher only relies on the methods declared here.
"""

from abc import ABC, abstractmethod


class InputProvider(ABC):
    """
    Cursor based source of fuzzing values.

    Implementations hold an ordered, immutable sequence of byte values and a
    position into it. Positions are not bounds checked; the caller keeps
    them within ``[0, total()]``. Not thread safe.
    """

    def __init__(self, keyword: str):
        self._keyword = keyword
        self._active = True
        self._position = 0

    def keyword(self) -> str:
        """Keyword assigned to this provider."""
        return self._keyword

    def position(self) -> int:
        """Current zero-based position."""
        return self._position

    def set_position(self, pos: int) -> None:
        self._position = pos

    def reset_position(self) -> None:
        self._position = 0

    def increment_position(self) -> None:
        self._position += 1

    def next(self) -> bool:
        """Check if values remain at or after the current position."""
        return self._position < self.total()

    @abstractmethod
    def value(self) -> bytes:
        """Value at the current position."""

    @abstractmethod
    def total(self) -> int:
        """Number of values held by the provider."""

    def active(self) -> bool:
        return self._active

    def enable(self) -> None:
        self._active = True

    def disable(self) -> None:
        self._active = False

    def __len__(self) -> int:
        return self.total()
