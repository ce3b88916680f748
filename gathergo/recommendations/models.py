"""Data models for event recommendations and ratings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from gathergo.core.constants import DEFAULT_EVENT_EMOJI


@dataclass(frozen=True)
class RatingSummary:
    """Aggregate star rating of an event."""

    average: float = 0.0
    count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"average": self.average, "count": self.count}


@dataclass(frozen=True)
class RatingResult:
    """Outcome of a single ``rate`` call."""

    average: float
    count: int
    votes: int
    vote_count_delta: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "average": self.average,
            "count": self.count,
            "votes": self.votes,
            "voteCountDelta": self.vote_count_delta,
        }


@dataclass(frozen=True)
class EventRecommendation:
    """A candidate event shown to a group.

    Recommendations are derived per request and never persisted, so instances
    are immutable; use ``with_ratings`` to get an updated copy.
    """

    id: str
    title: str
    location: str
    time: str
    price: str
    description: str
    image_url: str
    match_score: int
    tags: tuple[str, ...] = ()
    emoji: str = DEFAULT_EVENT_EMOJI
    rating: RatingSummary = field(default_factory=RatingSummary)
    votes: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.match_score <= 100:
            raise ValueError(f"matchScore out of range: {self.match_score}")

    def with_ratings(self, rating: RatingSummary, votes: int) -> EventRecommendation:
        """Return a copy carrying the given rating summary and vote count."""
        return replace(self, rating=rating, votes=votes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase field names the front end reads."""
        return {
            "id": self.id,
            "title": self.title,
            "location": self.location,
            "time": self.time,
            "price": self.price,
            "description": self.description,
            "imageUrl": self.image_url,
            "matchScore": self.match_score,
            "tags": list(self.tags),
            "emoji": self.emoji or DEFAULT_EVENT_EMOJI,
            "rating": self.rating.to_dict(),
            "votes": self.votes,
        }
