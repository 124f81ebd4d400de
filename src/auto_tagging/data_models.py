"""
Dataclasses for tag extraction and confidence feedback.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional


class SourceField(str, Enum):
    TITLE = "title"
    URL = "url"
    NOTES = "notes"
    EXTRACTED_TEXT = "extracted_text"
    MEDIA_TYPE = "media_type"
    FILENAME = "filename"


class SwipeDecision(str, Enum):
    LIKE = "like"
    DISLIKE = "dislike"
    SKIP = "skip"
    SUPER_LIKE = "super_like"


class TagKind(str, Enum):
    EMERGENT = "emergent"
    USER = "user"
    SYSTEM = "system"


class AssociationSource(str, Enum):
    AUTO = "auto"
    USER = "user"


# Media types whose items carry a URL worth mining
LINK_MEDIA_TYPES = frozenset({"url", "link"})


@dataclass(frozen=True)
class Token:
    """A normalized word with its source form and position within one text."""
    text: str
    original: str
    position: int


@dataclass(frozen=True)
class Keyphrase:
    phrase: str
    score: float
    original: Optional[str] = None  # source-cased form of the first occurrence


@dataclass(frozen=True)
class TagCandidate:
    name: str
    score: float
    sources: FrozenSet[SourceField] = frozenset()


@dataclass
class ContentItem:
    id: str
    media_type: str = "text"
    title: Optional[str] = None
    source_url: Optional[str] = None
    notes: Optional[str] = None
    extracted_text: Optional[str] = None
    local_uri: Optional[str] = None

    @property
    def is_link(self) -> bool:
        return (self.media_type or "").lower() in LINK_MEDIA_TYPES

    @classmethod
    def from_dict(cls, d: dict) -> "ContentItem":
        return cls(
            id=str(d.get("id", "")),
            media_type=d.get("type") or d.get("media_type") or "text",
            title=d.get("title"),
            source_url=d.get("source_url") or d.get("url"),
            notes=d.get("notes"),
            extracted_text=d.get("extracted_text"),
            local_uri=d.get("local_uri"),
        )


@dataclass(frozen=True)
class Tag:
    id: int
    name: str
    slug: Optional[str] = None
    kind: TagKind = TagKind.EMERGENT


@dataclass(frozen=True)
class Association:
    item_id: str
    tag_id: int
    confidence: Optional[float]
    source: AssociationSource = AssociationSource.AUTO


@dataclass(frozen=True)
class SwipeEvent:
    item_id: str
    decision: SwipeDecision
    timestamp: float

    @property
    def event_key(self) -> str:
        """Stable identity used to consume an event at most once."""
        return f"{self.item_id}:{self.decision.value}:{self.timestamp!r}"

    @classmethod
    def from_dict(cls, d: dict) -> "SwipeEvent":
        return cls(
            item_id=str(d["item_id"]),
            decision=SwipeDecision(d["decision"]),
            timestamp=float(d["timestamp"]),
        )


@dataclass
class TaggingResult:
    item_id: str
    tags: List[TagCandidate] = field(default_factory=list)

    @property
    def tags_assigned(self) -> int:
        return len(self.tags)


@dataclass(frozen=True)
class ConfidenceChange:
    tag_id: int
    old_confidence: Optional[float]
    new_confidence: float


@dataclass
class FeedbackResult:
    event: SwipeEvent
    changes: List[ConfidenceChange] = field(default_factory=list)
    already_consumed: bool = False
