"""
Functions for normalizing keyphrase scores and fusing them across sources.
"""
from typing import Dict, Iterable, List, Optional, Set, Tuple

import numpy as np

from . import config
from .data_models import Keyphrase, SourceField
from .text_utils import normalize_tag_name


def rank_keyphrases(
    scores: Dict[str, float],
    first_pos: Dict[str, int],
    originals: Dict[str, str],
    limit: Optional[int] = None,
) -> List[Keyphrase]:
    """Sort descending by score, ties broken by first occurrence (earlier wins)."""
    order = sorted(scores, key=lambda p: (-scores[p], first_pos.get(p, 0)))
    if limit is not None:
        order = order[: max(0, limit)]
    return [Keyphrase(phrase=p, score=float(scores[p]), original=originals.get(p)) for p in order]


def normalize_scores(phrases: List[Keyphrase], ceiling: float = 1.0) -> List[Keyphrase]:
    """
    Rescale scores into [0, ceiling] by the maximum score, keeping order.
    An empty list, or one whose scores are all zero/non-finite, short-circuits.
    """
    if not phrases:
        return []
    arr = np.nan_to_num(
        np.array([kp.score for kp in phrases], dtype=float), nan=0.0, posinf=0.0, neginf=0.0
    )
    arr = np.clip(arr, 0.0, None)
    top = float(arr.max())
    if top <= 0.0:
        return [Keyphrase(kp.phrase, 0.0, kp.original) for kp in phrases]
    scaled = arr / top * float(ceiling)
    return [Keyphrase(kp.phrase, float(s), kp.original) for kp, s in zip(phrases, scaled)]


def weight_scores(phrases: Iterable[Keyphrase], weight: float) -> List[Keyphrase]:
    return [Keyphrase(kp.phrase, max(0.0, kp.score * weight), kp.original) for kp in phrases]


def merge_max(groups: Iterable[List[Keyphrase]]) -> Tuple[Dict[str, float], Dict[str, int], Dict[str, str]]:
    """
    Merge phrase lists keeping the max score per phrase.
    Returns (scores, first_seen_order, originals).
    """
    scores: Dict[str, float] = {}
    first: Dict[str, int] = {}
    originals: Dict[str, str] = {}
    seq = 0
    for group in groups:
        for kp in group:
            key = normalize_tag_name(kp.phrase)
            if not key:
                continue
            if key not in scores:
                scores[key] = kp.score
                first[key] = seq
                seq += 1
                if kp.original:
                    originals[key] = kp.original
            elif kp.score > scores[key]:
                scores[key] = kp.score
    return scores, first, originals


def fuse_sources(
    items: List[Tuple[SourceField, List[Keyphrase]]],
    corroboration: float = config.DEFAULT_FUSION_CORROBORATION,
    multiword_boost: float = config.DEFAULT_MULTIWORD_BOOST,
    cap: float = config.DEFAULT_FUSION_CAP,
) -> List[Tuple[str, float, frozenset, Optional[str]]]:
    """
    Fuse per-field candidates by normalized name.

    Within one field the max score is kept. Across fields:
        fused = best + corroboration * sum(other fields)
    multi-word names are multiplied by multiword_boost, and the result is
    clamped to [0, cap] so corroborated names rise without growing unbounded.
    Returns (name, score, sources, original) tuples sorted by score desc, ties
    by first appearance.
    """
    per_field: Dict[str, Dict[SourceField, float]] = {}
    first: Dict[str, int] = {}
    originals: Dict[str, str] = {}
    seq = 0
    for src, phrases in items:
        for kp in phrases:
            name = normalize_tag_name(kp.phrase)
            if not name:
                continue
            score = kp.score if np.isfinite(kp.score) else 0.0
            fields = per_field.setdefault(name, {})
            if name not in first:
                first[name] = seq
                seq += 1
            if kp.original and name not in originals:
                originals[name] = kp.original
            fields[src] = max(fields.get(src, 0.0), max(0.0, score))

    out: List[Tuple[str, float, frozenset, Optional[str]]] = []
    for name, fields in per_field.items():
        vals = np.sort(np.array(list(fields.values()), dtype=float))[::-1]
        fused = float(vals[0] + corroboration * vals[1:].sum())
        if " " in name:
            fused *= multiword_boost
        fused = float(np.clip(fused, 0.0, cap))
        sources: Set[SourceField] = set(fields)
        out.append((name, fused, frozenset(sources), originals.get(name)))
    out.sort(key=lambda t: (-t[1], first[t[0]]))
    return out
