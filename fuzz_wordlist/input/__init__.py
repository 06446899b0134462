"""
Wordlist input providers.

This module provides:
- Comment stripping and category exclusion filters
- Marker expansion and FUZZ suffix expansion strategies
- The cursor based input provider contract
- WordlistInput, the file/stdin backed provider
"""

from .filters import strip_comments, should_exclude_line
from .provider import InputProvider
from .strategies import (
    LineStrategy,
    DefaultStrategy,
    MarkerExpansionStrategy,
    select_strategy,
)
from .wordlist import WordlistInput, STDIN_SENTINEL

__all__ = [
    'strip_comments',
    'should_exclude_line',
    'InputProvider',
    'LineStrategy',
    'DefaultStrategy',
    'MarkerExpansionStrategy',
    'select_strategy',
    'WordlistInput',
    'STDIN_SENTINEL'
]
