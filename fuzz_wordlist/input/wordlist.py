"""
Wordlist input provider.

Loads a newline delimited wordlist from a file or standard input, runs every
line through the line strategy selected for the wordlist and keeps the
resulting values in memory for cursor based iteration.
"""

import os
import sys
from typing import BinaryIO, Iterator, List, Tuple

from ..core.config import WordlistFilterConfig
from ..core.exceptions import WordlistReadError, WordlistSourceError
from ..core.logger import get_component_logger
from .provider import InputProvider
from .strategies import select_strategy

logger = get_component_logger("input")

STDIN_SENTINEL = "-"

# Lines are decoded so case checks see code points; surrogateescape keeps
# invalid UTF-8 bytes intact on the way back out.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class WordlistInput(InputProvider):
    """
    Wordlist backed input provider.

    The whole wordlist is read and filtered during construction. Failures
    raise WordlistSourceError or WordlistReadError; the ``provider``
    attribute of the error holds this instance with whatever values were
    read before the failure.
    """

    def __init__(self, keyword: str, path: str, config: WordlistFilterConfig):
        super().__init__(keyword)
        self.config = config
        self.path = path
        self.strategy = select_strategy(keyword, config)
        self._data: Tuple[bytes, ...] = ()

        if path != STDIN_SENTINEL:
            self._validate_file(path)
        self._read(path)

    def value(self) -> bytes:
        """Value at the current position."""
        return self._data[self._position]

    def total(self) -> int:
        """Size of the filtered wordlist."""
        return len(self._data)

    def __iter__(self) -> Iterator[bytes]:
        # Independent of the cursor
        return iter(self._data)

    def __repr__(self) -> str:
        return (f"WordlistInput(keyword={self._keyword!r}, path={self.path!r}, "
                f"total={self.total()}, position={self._position})")

    def _validate_file(self, path: str) -> None:
        """Check that the wordlist file exists and can be opened."""
        try:
            os.stat(path)
            with open(path, "rb"):
                pass
        except (OSError, ValueError) as e:
            # ValueError: embedded null byte in the path
            logger.error(f"Wordlist {path} is not readable: {e}")
            raise WordlistSourceError(
                f"Cannot read wordlist {path}: {getattr(e, 'strerror', None) or e}",
                path=path,
                provider=self
            ) from e

    def _read(self, path: str) -> None:
        """Read the source line by line into the value sequence."""
        if path == STDIN_SENTINEL:
            # Standard input belongs to the process and stays open
            self._scan(sys.stdin.buffer)
            return

        try:
            stream = open(path, "rb")
        except (OSError, ValueError) as e:
            logger.error(f"Failed to open wordlist {path}: {e}")
            raise WordlistSourceError(
                f"Cannot open wordlist {path}: {getattr(e, 'strerror', None) or e}",
                path=path,
                provider=self
            ) from e

        with stream:
            self._scan(stream)

    def _scan(self, stream: BinaryIO) -> None:
        data: List[bytes] = []
        lines_read = 0
        max_length = self.config.max_line_length

        try:
            while True:
                # Bounded read, an over-long line is never buffered whole
                raw = stream.readline(max_length + 1)
                if not raw:
                    break
                body = raw[:-1] if raw.endswith(b"\n") else raw
                if len(body) >= max_length:
                    raise WordlistReadError(
                        f"Line {lines_read + 1} of {self.path} is too long "
                        f"({len(body)} bytes, limit {max_length - 1})",
                        path=self.path,
                        provider=self,
                        lines_read=lines_read
                    )
                if body.endswith(b"\r"):
                    body = body[:-1]
                lines_read += 1

                line = body.decode(_ENCODING, _ERRORS)
                for text in self.strategy.process(line):
                    data.append(text.encode(_ENCODING, _ERRORS))
        except WordlistReadError as e:
            logger.error(e.message)
            raise
        except OSError as e:
            logger.error(f"Read error in wordlist {self.path} after {lines_read} lines: {e}")
            raise WordlistReadError(
                f"Error reading wordlist {self.path}: {e}",
                path=self.path,
                provider=self,
                lines_read=lines_read
            ) from e
        finally:
            self._data = tuple(data)

        logger.debug(
            f"Loaded {len(data)} values for {self._keyword} from {self.path} "
            f"({lines_read} lines, {self.strategy.name} strategy)"
        )
