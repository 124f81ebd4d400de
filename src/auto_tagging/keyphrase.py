"""
Keyphrase extraction from free text.

Text is split into sentences and tokens; every token is classified as a
content word, a bridge (allowed only inside a multi-word phrase) or a
boundary. Candidate 1-3 grams never cross a boundary or a sentence.

Scoring (all factors >= 1, so a phrase never scores below its unigrams):
  unigram:  base(t) = (1 + ln tf(t)) * noun_suffix_bonus?
  phrase:   boost(n) * max(base(content tokens)) * (1 + ln tf(phrase)) * proper_noun_boost?
"""
import logging
import math
from collections import Counter
from typing import Dict, List, Optional, Sequence, Union

from . import config
from .constants import CATEGORY_PATTERNS, CONNECTOR_WORDS
from .data_models import Keyphrase, Token
from .lexicon import (
    has_noun_suffix,
    is_adjective_stopword,
    is_any_stopword,
    is_capitalized,
    is_stopword,
    is_url_path_junk_word,
    is_vague_word,
    is_verb_stopword,
    is_video_junk_word,
    is_weak_word,
)
from .scoring import rank_keyphrases
from .text_utils import (
    BOUNDARY_TOKEN,
    is_numeric,
    iter_ngram_windows,
    split_sentences,
    tokenize_with_casing,
)

logger = logging.getLogger(__name__)

CONTENT = "content"
CONNECTOR = "connector"
PROPER = "proper"


def is_content_word(word: str, min_len: int = config.DEFAULT_MIN_TOKEN_LEN) -> bool:
    return (
        len(word) >= min_len
        and not is_numeric(word)
        and not is_any_stopword(word)
        and not is_vague_word(word)
    )


def _is_proper_bridge(tokens: Sequence[Token], i: int) -> bool:
    """
    A capitalized verb/adjective collision next to another capitalized word
    ("React Native", "Young Thug") is kept as part of the proper-noun run.
    """
    tok = tokens[i]
    w = tok.text
    if not (is_verb_stopword(w) or is_adjective_stopword(w)):
        return False
    if is_stopword(w) or is_video_junk_word(w) or is_url_path_junk_word(w):
        return False
    if not is_capitalized(tok.original):
        return False
    for j in (i - 1, i + 1):
        if 0 <= j < len(tokens):
            nb = tokens[j]
            if is_capitalized(nb.original) and not is_stopword(nb.text) \
                    and not is_video_junk_word(nb.text) and not is_url_path_junk_word(nb.text):
                return True
    return False


def classify_tokens(tokens: Sequence[Token]) -> List[Optional[str]]:
    kinds: List[Optional[str]] = []
    for i, tok in enumerate(tokens):
        if is_content_word(tok.text):
            kinds.append(CONTENT)
        elif tok.text in CONNECTOR_WORDS:
            kinds.append(CONNECTOR)
        elif _is_proper_bridge(tokens, i):
            kinds.append(PROPER)
        else:
            kinds.append(None)
    return kinds


def _window_ok(kinds: Sequence[Optional[str]], window_words: Sequence[str]) -> bool:
    n = len(kinds)
    if CONTENT not in kinds:
        return False
    if n == 1:
        return len(window_words[0]) >= config.DEFAULT_MIN_TAG_LENGTH and not is_weak_word(window_words[0])
    # proper bridges may end a bigram ("React Native"), never a longer
    # phrase ("Learn React Native")
    ends = (CONTENT, PROPER) if n == 2 else (CONTENT,)
    if kinds[0] not in ends or kinds[-1] not in ends:
        return False
    return all(k in (CONTENT, PROPER, CONNECTOR) for k in kinds[1:-1])


def _phrase_boost(n: int) -> float:
    if n == 2:
        return config.DEFAULT_PHRASE_BOOST_BIGRAM
    if n >= 3:
        return config.DEFAULT_PHRASE_BOOST_TRIGRAM
    return 1.0


def extract_keyphrases(
    text: Optional[str],
    max_phrases: int = config.DEFAULT_MAX_PHRASES,
    max_ngram: int = config.DEFAULT_MAX_NGRAM,
) -> List[Keyphrase]:
    """
    Extract scored 1-3 word keyphrases from free text.
    Empty or whitespace-only input, or max_phrases <= 0, yields [].
    """
    if not text or not text.strip() or max_phrases <= 0:
        return []

    stream: List[Union[Token, str]] = []
    kind_of: Dict[int, Optional[str]] = {}
    pos = 0
    for sentence in split_sentences(text):
        tokens = tokenize_with_casing(sentence, start=pos)
        if not tokens:
            continue
        pos = tokens[-1].position + 1
        for tok, kind in zip(tokens, classify_tokens(tokens)):
            kind_of[tok.position] = kind
            if kind is None:
                if stream and stream[-1] != BOUNDARY_TOKEN:
                    stream.append(BOUNDARY_TOKEN)
            else:
                stream.append(tok)
        if stream and stream[-1] != BOUNDARY_TOKEN:
            stream.append(BOUNDARY_TOKEN)

    token_tf = Counter(
        t.text for t in stream if isinstance(t, Token) and kind_of[t.position] == CONTENT
    )
    if not token_tf:
        return []

    def base(word: str) -> float:
        b = 1.0 + math.log(token_tf[word])
        return b * config.DEFAULT_NOUN_SUFFIX_BONUS if has_noun_suffix(word) else b

    phrase_tf: Counter = Counter()
    first_pos: Dict[str, int] = {}
    originals: Dict[str, str] = {}
    all_caps: Dict[str, bool] = {}
    best_base: Dict[str, float] = {}
    n_words: Dict[str, int] = {}

    for _, window in iter_ngram_windows(stream, max_ngram):
        kinds = [kind_of[t.position] for t in window]
        words = [t.text for t in window]
        if not _window_ok(kinds, words):
            continue
        phrase = " ".join(words)
        phrase_tf[phrase] += 1
        if phrase not in first_pos:
            first_pos[phrase] = window[0].position
            originals[phrase] = " ".join(t.original for t in window)
            n_words[phrase] = len(window)
            best_base[phrase] = max(base(w) for w, k in zip(words, kinds) if k == CONTENT)
            all_caps[phrase] = all(
                is_capitalized(t.original) for t, k in zip(window, kinds) if k != CONNECTOR
            )

    scores: Dict[str, float] = {}
    for phrase, tf in phrase_tf.items():
        n = n_words[phrase]
        if n == 1:
            score = best_base[phrase]
        else:
            score = _phrase_boost(n) * best_base[phrase] * (1.0 + math.log(tf))
            if all_caps[phrase]:
                score *= config.DEFAULT_PROPER_NOUN_BOOST
        scores[phrase] = score if math.isfinite(score) and score > 0 else 0.0

    ranked = rank_keyphrases(scores, first_pos, originals, limit=max_phrases)
    logger.debug("extracted %d of %d keyphrases", len(ranked), len(scores))
    return ranked


def detect_categories(text: Optional[str], score: float = config.DEFAULT_CATEGORY_SCORE) -> List[Keyphrase]:
    """Map closed category patterns (recipe -> cooking, nba -> basketball) onto broad tags."""
    if not text:
        return []
    out: List[Keyphrase] = []
    seen = set()
    for pattern, category in CATEGORY_PATTERNS:
        if category not in seen and pattern.search(text):
            seen.add(category)
            out.append(Keyphrase(phrase=category, score=score))
    return out
