"""
Tag candidate assembly and assignment.

Runs the field-specific extractors over a content item, fuses same-named
candidates across fields, and passes every surviving name through the
validation gate. Nothing is persisted until a full candidate list for one
item has been produced, so a batch can be abandoned at any item boundary.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from . import config
from .data_models import (
    AssociationSource,
    ContentItem,
    Keyphrase,
    SourceField,
    Tag,
    TagCandidate,
    TaggingResult,
    TagKind,
)
from .errors import InvalidTagError, StoreError
from .keyphrase import detect_categories, extract_keyphrases
from .scoring import fuse_sources, normalize_scores, weight_scores
from .store import TagStore
from .text_utils import normalize_tag_name
from .title_processing import extract_title_keyphrases
from .url_processing import extract_domain_tokens, extract_filename_tokens
from .validation import validate_tag

logger = logging.getLogger(__name__)


def _text_field(text: str, max_phrases: int, weight: float) -> List[Keyphrase]:
    return normalize_scores(extract_keyphrases(text, max_phrases), ceiling=weight)


def collect_field_candidates(
    item: ContentItem,
    extra_texts: Sequence[str] = (),
    extra_keywords: Sequence[str] = (),
) -> List[Tuple[SourceField, List[Keyphrase]]]:
    """Per-field keyphrases for one item; absent fields contribute nothing."""
    fields: List[Tuple[SourceField, List[Keyphrase]]] = []

    if item.title:
        title_kps = extract_title_keyphrases(item.title)
        fields.append((SourceField.TITLE, weight_scores(title_kps, config.DEFAULT_TITLE_WEIGHT)))
        fields.append((SourceField.TITLE, detect_categories(item.title)))

    if item.is_link and item.source_url:
        fields.append((SourceField.URL, extract_domain_tokens(item.source_url)))

    if item.notes:
        fields.append((SourceField.NOTES, _text_field(
            item.notes, config.DEFAULT_NOTES_MAX_PHRASES, config.DEFAULT_NOTES_WEIGHT)))
        fields.append((SourceField.NOTES, detect_categories(item.notes)))

    if item.extracted_text:
        fields.append((SourceField.EXTRACTED_TEXT, _text_field(
            item.extracted_text, config.DEFAULT_TEXT_MAX_PHRASES, config.DEFAULT_TEXT_WEIGHT)))
        fields.append((SourceField.EXTRACTED_TEXT, detect_categories(item.extracted_text)))

    for text in extra_texts:
        if text and text.strip():
            fields.append((SourceField.EXTRACTED_TEXT, _text_field(
                text, config.DEFAULT_TEXT_MAX_PHRASES, config.DEFAULT_EXTRA_TEXT_WEIGHT)))

    keywords = [normalize_tag_name(k) for k in extra_keywords if k]
    if keywords:
        fields.append((SourceField.EXTRACTED_TEXT, [
            Keyphrase(k, config.DEFAULT_EXTRA_KEYWORD_SCORE) for k in keywords if k
        ]))

    if item.local_uri:
        fields.append((SourceField.FILENAME, extract_filename_tokens(item.local_uri)))

    # Low-weight media type candidate; "image"/"video" usually fail validation
    media_type = normalize_tag_name(item.media_type or "")
    if media_type and media_type != "text":
        fields.append((SourceField.MEDIA_TYPE, [Keyphrase(media_type, config.DEFAULT_MEDIA_TYPE_SCORE)]))

    return fields


def extract_tag_candidates(
    item: ContentItem,
    extra_texts: Sequence[str] = (),
    extra_keywords: Sequence[str] = (),
) -> List[TagCandidate]:
    """
    Scored, validated tag candidates for one item, best first.
    Scores lie in [0, DEFAULT_FUSION_CAP]; values above 1.0 mean several
    fields corroborate the name.
    """
    fused = fuse_sources(collect_field_candidates(item, extra_texts, extra_keywords))
    out: List[TagCandidate] = []
    for name, score, sources, original in fused:
        valid = validate_tag(name, original)
        if valid is None:
            logger.debug("item %s: dropped candidate %r", item.id, name)
            continue
        out.append(TagCandidate(name=valid, score=score, sources=sources))
    return out


def select_for_assignment(
    candidates: Iterable[TagCandidate],
    max_tags: int = config.DEFAULT_MAX_TAGS_PER_ITEM,
    min_score: float = config.DEFAULT_MIN_SCORE_THRESHOLD,
) -> List[TagCandidate]:
    kept = [c for c in candidates if c.score >= min_score]
    kept.sort(key=lambda c: c.score, reverse=True)
    return kept[: max(0, max_tags)]


def assign_tags(
    store: TagStore,
    item_id: str,
    candidates: Iterable[TagCandidate],
    max_tags: int = config.DEFAULT_MAX_TAGS_PER_ITEM,
) -> TaggingResult:
    """
    Persist the top candidates as emergent tags. Association confidence is
    the candidate score clamped to [0, 1]. A failure on one tag is logged and
    the remaining tags are still attached.
    """
    result = TaggingResult(item_id=item_id)
    for cand in select_for_assignment(candidates, max_tags):
        try:
            with store.transaction():
                tag_id = store.find_or_create_tag(cand.name, TagKind.EMERGENT)
                store.upsert_association(item_id, tag_id, min(1.0, cand.score), AssociationSource.AUTO)
        except StoreError:
            logger.exception("failed to assign tag %r to item %s", cand.name, item_id)
            continue
        result.tags.append(cand)
        logger.info("assigned tag %r to item %s (score: %.2f)", cand.name, item_id, cand.score)
    return result


def max_tags_for(extra_texts: Sequence[str]) -> int:
    """Items with fetched page content carry enough signal for more tags."""
    if len(extra_texts) > 1:
        return config.DEFAULT_MAX_TAGS_WITH_CONTENT
    return config.DEFAULT_MAX_TAGS_PER_ITEM


def tag_item(
    store: TagStore,
    item: ContentItem,
    extra_texts: Sequence[str] = (),
    extra_keywords: Sequence[str] = (),
) -> TaggingResult:
    """Extract and assign tags for one item, optionally with fetched page content."""
    candidates = extract_tag_candidates(item, extra_texts, extra_keywords)
    logger.info("item %s (%s): %d tag candidates", item.id, item.media_type, len(candidates))
    return assign_tags(store, item.id, candidates, max_tags_for(extra_texts))


def add_manual_tag(store: TagStore, item_id: str, raw: str, original: Optional[str] = None) -> Tag:
    """
    Attach a user-typed tag at full confidence. The name goes through the same
    validation gate as automatic candidates; the typed text itself is the
    casing signal unless a separate original is given.

    Returns the tag as stored. A name that already exists keeps the kind it
    was created with.
    """
    name = validate_tag(raw, (raw or "").strip() if original is None else original)
    if name is None:
        raise InvalidTagError(raw)
    with store.transaction():
        tag_id = store.find_or_create_tag(name, TagKind.USER)
        store.upsert_association(item_id, tag_id, 1.0, AssociationSource.USER)
        tag = store.get_tag_by_name(name)
    return tag
