"""
fuzz-wordlist - Wordlist input provider for keyword substitution fuzzing

Loads wordlists from files or standard input, applies comment stripping,
extension expansion and category exclusion filters, and exposes the result
through a cursor based input provider for a job dispatch loop.
"""

__version__ = "1.0.0"
__author__ = "fuzz-wordlist Team"
__license__ = "MIT"

from fuzz_wordlist.core.config import Config, WordlistFilterConfig, load_config
from fuzz_wordlist.input.wordlist import WordlistInput

__all__ = [
    "Config",
    "WordlistFilterConfig",
    "WordlistInput",
    "load_config",
    "__version__",
]
