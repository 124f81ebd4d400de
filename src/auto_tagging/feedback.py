"""
Confidence feedback from swipe decisions.

A like moves an association a fixed fraction of the remaining distance toward
1.0, a dislike the same fraction of its current value toward 0.0, so repeated
feedback converges without ever leaving [0, 1].
"""
import logging
from typing import Iterable, List, Optional

import numpy as np

from . import config
from .data_models import (
    Association,
    ConfidenceChange,
    FeedbackResult,
    SwipeDecision,
    SwipeEvent,
)
from .errors import FeedbackPersistenceError, StoreError
from .store import TagStore

logger = logging.getLogger(__name__)


def _step_for(decision: SwipeDecision) -> float:
    if decision == SwipeDecision.SUPER_LIKE:
        return config.DEFAULT_SUPER_LIKE_STEP
    if decision == SwipeDecision.DISLIKE:
        return config.DEFAULT_DISLIKE_STEP
    return config.DEFAULT_LIKE_STEP


def _as_prior(value) -> float:
    """Stored confidence as a float; missing or unparsable values become NaN."""
    if value is None:
        return np.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return np.nan


def _update_array(values: np.ndarray, decision: SwipeDecision, step: Optional[float] = None) -> np.ndarray:
    vals = np.where(np.isfinite(values), values, config.DEFAULT_NEUTRAL_CONFIDENCE)
    vals = np.clip(vals, 0.0, 1.0)
    if decision == SwipeDecision.SKIP:
        return vals
    s = float(np.clip(_step_for(decision) if step is None else step, 0.0, 1.0))
    if decision == SwipeDecision.DISLIKE:
        out = vals - s * vals
    else:
        out = vals + s * (1.0 - vals)
    return np.clip(out, 0.0, 1.0)


def update_confidence(
    confidence: Optional[float],
    decision: SwipeDecision,
    step: Optional[float] = None,
) -> float:
    """
    New confidence for one association. A missing, non-finite or unparsable
    prior is treated as the neutral midpoint 0.5.
    """
    return float(_update_array(np.array([_as_prior(confidence)], dtype=float), SwipeDecision(decision), step)[0])


def apply_feedback(
    decision: SwipeDecision,
    associations: Iterable[Association],
    step: Optional[float] = None,
) -> List[Association]:
    """Apply one decision to every association; the inputs are not modified."""
    assocs = list(associations)
    if not assocs:
        return []
    priors = np.array([_as_prior(a.confidence) for a in assocs], dtype=float)
    updated = _update_array(priors, SwipeDecision(decision), step)
    return [
        Association(item_id=a.item_id, tag_id=a.tag_id, confidence=float(c), source=a.source)
        for a, c in zip(assocs, updated)
    ]


def process_swipe_event(store: TagStore, event: SwipeEvent) -> FeedbackResult:
    """
    Apply a swipe event to all tags of its item inside one store transaction.

    An event already consumed is a no-op. If any read or write fails, the
    transaction rolls back and FeedbackPersistenceError is raised; the event
    stays unconsumed so it can be replayed.
    """
    result = FeedbackResult(event=event)
    try:
        with store.transaction():
            if store.is_event_consumed(event.event_key):
                logger.debug("event %s already consumed", event.event_key)
                result.already_consumed = True
                return result

            if event.decision != SwipeDecision.SKIP:
                current = store.get_associations_for_item(event.item_id)
                for old, new in zip(current, apply_feedback(event.decision, current)):
                    store.upsert_association(new.item_id, new.tag_id, new.confidence, new.source)
                    result.changes.append(ConfidenceChange(old.tag_id, old.confidence, new.confidence))

            store.mark_event_consumed(event.event_key)
    except StoreError as e:
        logger.warning("feedback for item %s not applied: %s", event.item_id, e)
        raise FeedbackPersistenceError(event, e) from e

    logger.info(
        "%s on item %s: %d confidences updated", event.decision.value, event.item_id, len(result.changes)
    )
    return result
