"""
Per-line comment stripping and category exclusion for wordlists.

Both functions are pure: they never raise on line content and only read the
filter configuration.
"""

import unicodedata
from typing import Callable, List, Tuple

from ..core.config import WordlistFilterConfig


def strip_comments(text: str) -> Tuple[str, bool]:
    """
    Remove wordlist comments from a line.

    A line whose first non-space character is ``#`` is a full-line comment.
    Otherwise everything from the first " #" onwards is dropped; a ``#`` not
    preceded by a space is part of the word.

    Args:
        text: Raw line without terminator

    Returns:
        (stripped text, True), or ("", False) if the whole line is a comment
    """
    if text.lstrip(" ").startswith("#"):
        return "", False

    index = text.find(" #")
    if index == -1:
        return text, True
    return text[:index], True


# Unicode White_Space characters; the \x1c-\x1f separators are not trimmed
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _is_letter(c: str) -> bool:
    return unicodedata.category(c).startswith("L")


def _is_upper(c: str) -> bool:
    return unicodedata.category(c) == "Lu"


def _is_lower(c: str) -> bool:
    # Other_Lowercase letters such as \xaa are Lo, not lowercase
    return unicodedata.category(c) == "Ll"


def _starts_with_comment_char(text: str) -> bool:
    return text.startswith(("#", "~", "/"))


def _starts_with_dot(text: str) -> bool:
    return text.startswith(".")


def _starts_with_digit(text: str) -> bool:
    # ASCII digits only, Unicode digits do not count
    return "0" <= text[0] <= "9"


def _is_all_upper(text: str) -> bool:
    return all(_is_upper(c) for c in text if _is_letter(c))


def _is_all_lower(text: str) -> bool:
    return all(_is_lower(c) for c in text if _is_letter(c))


def _starts_upper(text: str) -> bool:
    return _is_upper(text[0])


def _starts_lower(text: str) -> bool:
    return _is_lower(text[0])


# (toggle name on WordlistFilterConfig, predicate over the trimmed line)
EXCLUSION_RULES: List[Tuple[str, Callable[[str], bool]]] = [
    ("exclude_comment_lines", _starts_with_comment_char),
    ("exclude_dot_lines", _starts_with_dot),
    ("exclude_number_lines", _starts_with_digit),
    ("exclude_uppercase", _is_all_upper),
    ("exclude_lowercase", _is_all_lower),
    ("exclude_start_upper", _starts_upper),
    ("exclude_start_lower", _starts_lower),
]


def should_exclude_line(text: str, config: WordlistFilterConfig) -> bool:
    """
    Decide whether a line is dropped by the category exclusion filters.

    The line is trimmed of surrounding whitespace first. Blank lines are
    always excluded; every other rule only applies when its toggle is set,
    and any single matching rule excludes the line.

    Args:
        text: Line after optional comment stripping
        config: Filter configuration

    Returns:
        True if the line must not be emitted
    """
    trimmed = text.strip(WHITESPACE)
    if not trimmed:
        return True

    for toggle, predicate in EXCLUSION_RULES:
        if getattr(config, toggle) and predicate(trimmed):
            return True
    return False
