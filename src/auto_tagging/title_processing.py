"""
Functions for processing short titles.

Titles such as "Bruno Mars - Uptown Funk (Official Video)" are split into
independent phrase sources: each side of an artist/track separator, plus any
bracketed material at a reduced weight. Media junk ("official", "video")
falls out through the classifier.
"""
from typing import List, Optional, Tuple

from . import config
from .constants import TITLE_BRACKET_RE, TITLE_SEPARATOR_RE
from .data_models import Keyphrase
from .keyphrase import extract_keyphrases
from .scoring import merge_max, normalize_scores, rank_keyphrases, weight_scores
from .text_utils import normalize_space


def split_title(title: str) -> Tuple[List[str], List[str]]:
    """
    Returns (segments, bracketed) where segments are the separator-delimited
    parts of the title with bracketed material removed.
    """
    bracketed = [
        normalize_space(next(g for g in m.groups() if g is not None))
        for m in TITLE_BRACKET_RE.finditer(title)
    ]
    bare = TITLE_BRACKET_RE.sub(" ", title)
    segments = [normalize_space(s) for s in TITLE_SEPARATOR_RE.split(bare)]
    return [s for s in segments if s], [b for b in bracketed if b]


def extract_title_keyphrases(
    title: Optional[str],
    max_phrases: int = config.DEFAULT_TITLE_MAX_PHRASES,
    bracket_weight: float = config.DEFAULT_TITLE_BRACKET_WEIGHT,
) -> List[Keyphrase]:
    """Keyphrases from a short title, scores normalized into [0, 1]."""
    if not title or not title.strip():
        return []

    segments, bracketed = split_title(title)
    groups: List[List[Keyphrase]] = []
    for seg in segments:
        groups.append(extract_keyphrases(seg, max_phrases))
    for side in bracketed:
        groups.append(weight_scores(extract_keyphrases(side, max_phrases), bracket_weight))

    scores, first, originals = merge_max(groups)
    if not scores:
        return []
    ranked = rank_keyphrases(scores, first, originals, limit=max_phrases)
    return normalize_scores(ranked, ceiling=1.0)
