"""
Exceptions raised by auto_tagging.

Extraction never raises on malformed input; these cover manual tag entry and
the persistence collaborator.
"""
from typing import Optional


class AutoTaggingError(Exception):
    """Base class for all auto_tagging errors."""


class InvalidTagError(AutoTaggingError, ValueError):
    """A manually entered tag was rejected by the validation gate."""

    def __init__(self, raw: str):
        super().__init__(f"not a valid tag: {raw!r}")
        self.raw = raw


class StoreError(AutoTaggingError):
    """The persistence collaborator failed or is unavailable."""


class FeedbackPersistenceError(StoreError):
    """
    A swipe event could not be applied durably. Recoverable: the event was
    not marked consumed and may be replayed.
    """

    def __init__(self, event, cause: Optional[BaseException] = None):
        msg = f"feedback for item {event.item_id!r} ({event.decision.value}) not applied"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)
        self.event = event
        self.cause = cause
