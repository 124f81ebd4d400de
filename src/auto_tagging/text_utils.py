import re
from typing import Iterator, List, Sequence, Tuple, Union

import wordninja

from .data_models import Token

# Sentinel inserted at removed-token positions so n-grams never bridge them.
BOUNDARY_TOKEN = "<_>"

_ws_re = re.compile(r"\s+")
_sent_split_re = re.compile(r"[.!?\n]+")
# Words keep internal hyphens and apostrophes ("how-to", "rock'n'roll"); no underscores.
_word_re = re.compile(r"[^\W_]+(?:[-'][^\W_]+)*", re.UNICODE)
# Split camelCase, PascalCase and letter/digit transitions
_camel_boundary_re = re.compile(
    r"(?<=[a-z0-9])(?=[A-Z])"          # lower/digit -> Upper
    r"|(?<=[A-Z])(?=[A-Z][a-z])"       # ACRONYM -> ProperCase boundary
    r"|(?<=[A-Za-z])(?=[0-9])"         # letter -> digit
    r"|(?<=[0-9])(?=[A-Za-z])"         # digit -> letter
)
_numeric_re = re.compile(r"[\d\s.,:/-]+")


def normalize_space(s: str) -> str:
    return _ws_re.sub(" ", s).strip()


def normalize_tag_name(raw: str) -> str:
    """
    Canonical tag form: lowercase, trimmed, internal whitespace collapsed.
    Idempotent; hyphenated compounds stay single tokens.
    """
    if not raw:
        return ""
    return normalize_space(raw.lower())


def generate_slug(name: str) -> str:
    """URL-safe slug: "React Native" -> "react-native"."""
    return re.sub(r"[^a-z0-9]+", "-", (name or "").lower().strip()).strip("-")


def is_numeric(s: str) -> bool:
    """Digits with optional separators ("2024", "3.14", "10-12")."""
    return bool(s) and any(ch.isdigit() for ch in s) and bool(_numeric_re.fullmatch(s))


def split_sentences(text: str) -> List[str]:
    if not text:
        return []
    return [s.strip() for s in _sent_split_re.split(text) if s and s.strip()]


def tokenize_with_casing(text: str, start: int = 0) -> List[Token]:
    """
    Word tokenizer that keeps the source form of every token.
    Positions count from `start` so callers can number tokens across sentences.
    """
    if not text:
        return []
    tokens: List[Token] = []
    for i, m in enumerate(_word_re.finditer(text)):
        original = m.group(0)
        tokens.append(Token(text=original.lower(), original=original, position=start + i))
    return tokens


def split_camel_and_digits(token: str) -> List[str]:
    """
    Split camel/pascal case and letter-digit boundaries.
    Preserves all-uppercase short acronyms as a single token.
    """
    if not token:
        return []
    if token.isupper() and len(token) <= 5:
        return [token]
    parts = _camel_boundary_re.split(token)
    out: List[str] = []
    for p in parts:
        if not p:
            continue
        out.extend(re.split(r"[^0-9A-Za-z]+", p))
    return [x for x in out if x]


def segment_glued(token: str, min_len: int = 8) -> List[str]:
    """
    Split a glued lowercase token ("reactnative") into words with wordninja.
    Returns [token] when the token is short, not alphabetic, or does not split
    into pieces of at least 3 characters.
    """
    if not token or not token.isalpha() or len(token) < min_len:
        return [token]
    parts = [p.lower() for p in wordninja.split(token) if p]
    if len(parts) < 2 or any(len(p) < 3 for p in parts):
        return [token]
    return parts


def iter_ngram_windows(
    tokens: Sequence[Union[Token, str]],
    max_n: int,
) -> Iterator[Tuple[int, Tuple[Token, ...]]]:
    """
    Yield (start_index, window) for contiguous n-grams of length 1..max_n.
    Any window that contains the boundary sentinel is skipped.
    """
    n = len(tokens)
    for k in range(1, max_n + 1):
        if n < k:
            break
        for i in range(0, n - k + 1):
            window = tokens[i : i + k]
            if any(t == BOUNDARY_TOKEN for t in window):
                continue
            yield i, tuple(window)  # type: ignore[misc]
