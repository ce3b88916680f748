"""In-memory star rating ledger keyed by (event, user)."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from gathergo.core.constants import MAX_STARS, MIN_STARS
from gathergo.errors import ValidationError

from .models import RatingResult, RatingSummary

if TYPE_CHECKING:
    from .models import EventRecommendation


def scoped_event_id(group_id: str, event_id: str) -> str:
    """Ledger key for an event as recommended to one group.

    Every group is offered the same catalog ids, so ratings are kept apart by
    prefixing the group id.
    """
    return f"{group_id}/{event_id}"


class RatingLedger:
    """Per-user star ratings for events.

    Each user holds at most one rating per event; rating again replaces the
    earlier value. Vote counts are derived from the ratings, so a re-rating
    never counts twice.
    """

    def __init__(self) -> None:
        self._ratings: dict[tuple[str, str], int] = {}
        self._lock = threading.Lock()

    def rate(self, event_id: str, user_id: str, stars: int) -> RatingResult:
        """Record ``user_id``'s rating of ``event_id`` and return the new totals."""
        if isinstance(stars, bool) or not isinstance(stars, int):
            raise ValidationError("Rating must be a whole number of stars.")
        if not MIN_STARS <= stars <= MAX_STARS:
            raise ValidationError(
                f"Rating must be between {MIN_STARS} and {MAX_STARS} stars."
            )

        key = (event_id, user_id)
        with self._lock:
            is_new = key not in self._ratings
            self._ratings[key] = stars
            summary = self._summary(event_id)

        return RatingResult(
            average=summary.average,
            count=summary.count,
            votes=summary.count,
            vote_count_delta=1 if is_new else 0,
        )

    def has_voted(self, event_id: str, user_id: str) -> bool:
        with self._lock:
            return (event_id, user_id) in self._ratings

    def get_rating(self, event_id: str, user_id: str) -> int | None:
        with self._lock:
            return self._ratings.get((event_id, user_id))

    def votes(self, event_id: str) -> int:
        """Number of distinct users who have rated the event."""
        return self.summary(event_id).count

    def summary(self, event_id: str) -> RatingSummary:
        with self._lock:
            return self._summary(event_id)

    def apply_to(
        self, events: list[EventRecommendation], group_id: str | None = None
    ) -> list[EventRecommendation]:
        """Return copies of ``events`` with ledger ratings for rated events.

        With ``group_id`` only the ratings cast within that group count.
        """
        applied = []
        for event in events:
            key = scoped_event_id(group_id, event.id) if group_id else event.id
            summary = self.summary(key)
            if summary.count:
                event = event.with_ratings(summary, summary.count)
            applied.append(event)
        return applied

    def _summary(self, event_id: str) -> RatingSummary:
        stars = [
            value for (eid, _), value in self._ratings.items() if eid == event_id
        ]
        if not stars:
            return RatingSummary()
        return RatingSummary(average=round(sum(stars) / len(stars), 2), count=len(stars))
