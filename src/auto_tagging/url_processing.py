"""
Functions for deriving tag tokens from URLs and file names.
"""
import logging
import re
from typing import List, Optional
from urllib.parse import SplitResult, unquote, urlsplit

from . import config
from .constants import PLATFORM_TAGS, SECOND_LEVEL_SUFFIXES
from .data_models import Keyphrase
from .keyphrase import extract_keyphrases
from .lexicon import is_stopword, is_url_path_junk_word
from .scoring import merge_max, normalize_scores, rank_keyphrases
from .text_utils import is_numeric, normalize_space, segment_glued, split_camel_and_digits

logger = logging.getLogger(__name__)

_host_re = re.compile(r"^[a-z0-9-]+(\.[a-z0-9-]+)+$", re.IGNORECASE)
_version_re = re.compile(r"^v\d+(\.\d+)*$", re.IGNORECASE)
_extension_re = re.compile(r"\.[A-Za-z0-9]{1,5}$")


def _looks_like_opaque_id(segment: str) -> bool:
    """Video ids, hashes and similar: mixed letters and digits, no separators."""
    if "-" in segment or "_" in segment or len(segment) < 6:
        return False
    has_digit = any(ch.isdigit() for ch in segment)
    has_alpha = any(ch.isalpha() for ch in segment)
    return has_digit and has_alpha


def _parse_url(url: str) -> Optional[SplitResult]:
    """Permissive parse; None when the input is not usable as a URL."""
    raw = (url or "").strip()
    if not raw or " " in raw:
        return None
    try:
        parts = urlsplit(raw)
        if not parts.scheme or not parts.netloc:
            head = raw.split("/", 1)[0]
            if not _host_re.match(head):
                return None
            parts = urlsplit("http://" + raw)
        host = parts.hostname  # raises ValueError on malformed netloc
    except ValueError:
        return None
    if not host or not _host_re.match(host):
        return None
    return parts


def registrable_label(hostname: str) -> str:
    """
    The second-level label of a host: "www.reactnative.dev" -> "reactnative",
    "news.bbc.co.uk" -> "bbc".
    """
    labels = [l for l in hostname.lower().split(".") if l]
    if labels and labels[0] == "www":
        labels = labels[1:]
    if not labels:
        return ""
    if len(labels) == 1:
        return labels[0]
    if len(labels) >= 3 and len(labels[-1]) == 2 and labels[-2] in SECOND_LEVEL_SUFFIXES:
        return labels[-3]
    return labels[-2]


def _domain_tokens(hostname: str) -> List[Keyphrase]:
    label = registrable_label(hostname)
    if not label:
        return []
    if label in PLATFORM_TAGS:
        return [Keyphrase(PLATFORM_TAGS[label], config.DEFAULT_PLATFORM_SCORE, label)]
    if len(label) < 3 or is_numeric(label) or is_stopword(label):
        return []
    out = [Keyphrase(label, config.DEFAULT_DOMAIN_SCORE, label)]
    words = [w for w in label.replace("-", " ").split() if w]
    if len(words) == 1:
        words = segment_glued(words[0])
    if len(words) >= 2:
        out.append(Keyphrase(" ".join(words), config.DEFAULT_DOMAIN_SPLIT_SCORE))
    return out


def path_segments(path: str, limit: int = config.DEFAULT_URL_MAX_PATH_SEGMENTS) -> List[str]:
    """Meaningful path segments as space-separated words, junk and ids removed."""
    out: List[str] = []
    for seg in unquote(path or "").split("/"):
        seg = _extension_re.sub("", seg.strip())
        if not seg or is_numeric(seg) or _version_re.match(seg):
            continue
        if is_url_path_junk_word(seg) or _looks_like_opaque_id(seg):
            continue
        words = normalize_space(re.sub(r"[-_+.]+", " ", seg))
        if words:
            out.append(words)
        if len(out) >= limit:
            break
    return out


def _slug_tokens(text: str, ceiling: float) -> List[Keyphrase]:
    # Separate segments become sentences so phrases do not bridge them
    joined = ". ".join(path_segments(text.replace("\\", "/"), limit=config.DEFAULT_URL_MAX_PATH_SEGMENTS))
    return normalize_scores(extract_keyphrases(joined, config.DEFAULT_MAX_PHRASES), ceiling)


def extract_domain_tokens(url: Optional[str]) -> List[Keyphrase]:
    """
    Tag tokens from a URL: the registrable domain label at a fixed moderate
    score, its glued-word split, and keyphrases from the path. Never raises;
    unparsable input is treated as a plain slug.
    """
    if not url or not url.strip():
        return []
    parts = _parse_url(url)
    if parts is None:
        logger.debug("not a URL, treating as slug: %r", url)
        return _slug_tokens(url, config.DEFAULT_SLUG_SCORE_CEILING)

    groups = [_domain_tokens(parts.hostname or "")]
    groups.append(_slug_tokens(parts.path, config.DEFAULT_PATH_SCORE_CEILING))
    scores, first, originals = merge_max(groups)
    return rank_keyphrases(scores, first, originals)


def extract_filename_tokens(
    path: Optional[str],
    max_phrases: int = config.DEFAULT_FILENAME_MAX_PHRASES,
) -> List[Keyphrase]:
    """Tag tokens from a file name such as "/photos/GoldenGate_sunset.jpg"."""
    if not path:
        return []
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    name = _extension_re.sub("", name)
    if not name or _looks_like_opaque_id(name):
        return []
    words: List[str] = []
    for chunk in re.split(r"[-_\s.]+", name):
        words.extend(split_camel_and_digits(chunk))
    phrases = extract_keyphrases(" ".join(words), max_phrases)
    return normalize_scores(phrases, config.DEFAULT_FILENAME_SCORE_CEILING)
