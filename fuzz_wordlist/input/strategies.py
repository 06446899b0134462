"""
Line strategies used while reading a wordlist.

A strategy turns one raw line into zero, one or many output lines. The
strategy is chosen once per wordlist from its keyword and the filter
configuration:

- MarkerExpansionStrategy: dirsearch compatible wordlists with extensions
  configured. Lines holding the %EXT% marker fan out to one line per
  extension.
- DefaultStrategy: everything else. Lines go through comment stripping and
  category exclusion, and the FUZZ keyword appends each extension as a suffix.
"""

import re
from abc import ABC, abstractmethod
from typing import List

from ..core.config import WordlistFilterConfig
from .filters import should_exclude_line, strip_comments

EXTENSION_MARKER = re.compile(r"%ext%", re.IGNORECASE)
DEFAULT_KEYWORD = "FUZZ"


class LineStrategy(ABC):
    """Base class for per-line wordlist transformations."""

    name = "base"

    def __init__(self, keyword: str, config: WordlistFilterConfig):
        self.keyword = keyword
        self.config = config

    @abstractmethod
    def process(self, line: str) -> List[str]:
        """
        Transform a single line.

        Args:
            line: Line text without terminator

        Returns:
            Output lines in emission order, empty if the line is dropped
        """

    def _strip_comments(self, line: str):
        if not self.config.ignore_wordlist_comments:
            return line, True
        return strip_comments(line)


class MarkerExpansionStrategy(LineStrategy):
    """Substitute the %EXT% marker with every configured extension."""

    name = "marker_expansion"

    def process(self, line: str) -> List[str]:
        if EXTENSION_MARKER.search(line):
            # Extensions are literal text, never regex templates
            return [EXTENSION_MARKER.sub(lambda _: ext, line) for ext in self.config.extensions]

        # Lines without the marker are only comment stripped, never
        # category filtered.
        text, keep = self._strip_comments(line)
        if not keep:
            return []
        return [text]


class DefaultStrategy(LineStrategy):
    """Comment stripping, category exclusion and FUZZ suffix expansion."""

    name = "default"

    def __init__(self, keyword: str, config: WordlistFilterConfig):
        super().__init__(keyword, config)
        self.append_extensions = keyword == DEFAULT_KEYWORD and config.has_extensions()

    def process(self, line: str) -> List[str]:
        text, keep = self._strip_comments(line)
        if not keep:
            return []

        if should_exclude_line(text, self.config):
            return []

        output = [text]
        if self.append_extensions:
            output.extend(text + ext for ext in self.config.extensions)
        return output


def select_strategy(keyword: str, config: WordlistFilterConfig) -> LineStrategy:
    """
    Pick the line strategy for a wordlist.

    Args:
        keyword: Keyword bound to the wordlist
        config: Filter configuration

    Returns:
        MarkerExpansionStrategy in dirsearch compatibility mode with
        extensions configured, DefaultStrategy otherwise
    """
    if config.dirsearch_compat and config.has_extensions():
        return MarkerExpansionStrategy(keyword, config)
    return DefaultStrategy(keyword, config)
