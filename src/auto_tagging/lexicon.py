"""
Rule-based lexical classification over the closed lists in constants.py.

Stand-ins for part-of-speech tagging: every predicate is a pure lookup, case
insensitive, and deterministic.
"""
from typing import Optional

from .constants import (
    ACTIVITY_NOUNS,
    ADJECTIVE_STOPWORDS,
    NON_NOUN_SUFFIX_PATTERNS,
    NOUN_SUFFIX_EXCEPTIONS,
    NOUN_SUFFIX_PATTERNS,
    STOPWORDS,
    URL_PATH_JUNK_WORDS,
    VAGUE_WORDS,
    VERB_STOPWORDS,
    VIDEO_JUNK_WORDS,
    WEAK_WORDS,
)


def _key(word: str) -> str:
    return (word or "").strip().lower()


def is_stopword(word: str) -> bool:
    return _key(word) in STOPWORDS


def is_verb_stopword(word: str) -> bool:
    return _key(word) in VERB_STOPWORDS


def is_adjective_stopword(word: str) -> bool:
    return _key(word) in ADJECTIVE_STOPWORDS


def is_video_junk_word(word: str) -> bool:
    return _key(word) in VIDEO_JUNK_WORDS


def is_url_path_junk_word(word: str) -> bool:
    return _key(word) in URL_PATH_JUNK_WORDS


def is_any_stopword(word: str) -> bool:
    """True if the word is in any of the five stopword categories."""
    k = _key(word)
    return (
        k in STOPWORDS
        or k in VERB_STOPWORDS
        or k in ADJECTIVE_STOPWORDS
        or k in VIDEO_JUNK_WORDS
        or k in URL_PATH_JUNK_WORDS
    )


def is_vague_word(word: str) -> bool:
    return _key(word) in VAGUE_WORDS


def is_weak_word(word: str) -> bool:
    return _key(word) in WEAK_WORDS


def is_activity_noun(word: str) -> bool:
    return _key(word) in ACTIVITY_NOUNS


def is_capitalized(original: Optional[str]) -> bool:
    """Proper-noun signal: first character of the source form is uppercase."""
    return bool(original) and original[:1].isupper()


def is_only_adjective_collision(word: str) -> bool:
    """
    True when the word's only stopword membership is the weak-adjective list.
    Capitalized proper nouns ("Rich", "Young") may override such a collision.
    """
    k = _key(word)
    return (
        k in ADJECTIVE_STOPWORDS
        and k not in STOPWORDS
        and k not in VERB_STOPWORDS
        and k not in VIDEO_JUNK_WORDS
        and k not in URL_PATH_JUNK_WORDS
    )


def is_likely_noun(word: str, original: Optional[str] = None) -> bool:
    """
    Heuristically decide whether a single word is a noun worth tagging.

    Ordered rules, first match wins:
      1. activity nouns (cooking, programming) -> True, overriding the verb list
      2. any stopword -> False
      3. shorter than 3 characters -> False
      4. non-noun suffix (-ing, -ly, -ed, ...) -> True only when capitalized in
         the source or listed as a noun exception (animal, festival)
      5. noun-forming suffix (-tion, -ment, -ity, -phy, ...) -> True
      6. capitalized in the source -> True
      7. otherwise True; the other filters catch the rest
    """
    lower = _key(word)
    if lower in ACTIVITY_NOUNS:
        return True
    if is_any_stopword(lower):
        return False
    if len(lower) < 3:
        return False
    for pattern in NON_NOUN_SUFFIX_PATTERNS:
        if pattern.search(lower):
            return is_capitalized(original) or lower in NOUN_SUFFIX_EXCEPTIONS
    # Rules 5-7 all accept; a noun suffix or capitalization only matters for
    # callers that score with has_noun_suffix / is_capitalized.
    return True


def has_noun_suffix(word: str) -> bool:
    lower = _key(word)
    return any(p.search(lower) for p in NOUN_SUFFIX_PATTERNS)
