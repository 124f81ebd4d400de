"""
The single authority for whether a string may be stored as a tag.

Used for automatic candidates and manually typed tags alike. Rejection is an
expected outcome and is signalled with None, never an exception.
"""
from typing import Optional

from . import config
from .lexicon import (
    is_activity_noun,
    is_any_stopword,
    is_capitalized,
    is_likely_noun,
    is_only_adjective_collision,
    is_stopword,
)
from .text_utils import is_numeric, normalize_tag_name


def _single_word_allowed(word: str, original: Optional[str]) -> bool:
    if is_any_stopword(word):
        if is_activity_noun(word):
            return True
        # A capitalized proper noun may override a weak-adjective collision
        return is_capitalized(original) and is_only_adjective_collision(word)
    return is_likely_noun(word, original)


def _phrase_allowed(phrase: str) -> bool:
    words = phrase.split(" ")
    if is_stopword(words[0]) or is_stopword(words[-1]):
        return False
    return any(len(w) >= 3 and not is_any_stopword(w) for w in words)


def validate_tag(
    raw: Optional[str],
    original: Optional[str] = None,
    min_length: int = config.DEFAULT_MIN_TAG_LENGTH,
    max_length: int = config.DEFAULT_MAX_TAG_LENGTH,
) -> Optional[str]:
    """
    Normalize and validate a tag name.

    `original` is the source-cased form; when it is capitalized it acts as a
    proper-noun signal. Returns the normalized lowercase name, or None.
    """
    name = normalize_tag_name(raw or "")
    if len(name) < min_length or len(name) > max_length:
        return None
    if is_numeric(name):
        return None
    if " " not in name:
        return name if _single_word_allowed(name, original) else None
    if is_any_stopword(name):
        return None
    return name if _phrase_allowed(name) else None
