"""Recommendation provider for groups."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from gathergo.group.services import GroupService
from gathergo.user.services import PreferenceService

from .catalog import default_recommendations

if TYPE_CHECKING:
    from gathergo.group.models import Group
    from gathergo.store import DocumentStore
    from gathergo.user.models import User

    from .models import EventRecommendation

    Matcher = Callable[[Group, list[User]], list[EventRecommendation]]

logger = logging.getLogger(__name__)


def catalog_matcher(
    group: Group, profiles: list[User]
) -> list[EventRecommendation]:
    """Stand-in matcher that offers the default catalog to every group."""
    return default_recommendations()


def sort_by_match_score(
    events: list[EventRecommendation],
) -> list[EventRecommendation]:
    """Order events by descending match score; ties keep their input order."""
    return sorted(events, key=lambda event: event.match_score, reverse=True)


class RecommendationService:
    """Produces ordered event recommendations for a group.

    Unlike the group and preference services this one never raises: any
    failure is logged and the default catalog is returned instead, so the
    events page always has something to show.
    """

    @staticmethod
    def get_recommendations(
        store: DocumentStore, group_id: str, matcher: Matcher | None = None
    ) -> list[EventRecommendation]:
        """Return recommendations for ``group_id``, best match first."""
        events, _ = RecommendationService.get_group_recommendations(
            store, group_id, matcher
        )
        return events

    @staticmethod
    def get_group_recommendations(
        store: DocumentStore, group_id: str, matcher: Matcher | None = None
    ) -> tuple[list[EventRecommendation], Group | None]:
        """Return recommendations together with the group they were built for.

        The group is None when it could not be loaded, in which case the
        events are the default catalog.
        """
        matcher = matcher or catalog_matcher
        group = None
        try:
            group = GroupService.get_group(store, group_id)
            profiles = PreferenceService.get_profiles(
                store, list(group.get("memberIds", []))
            )
            events = list(matcher(group, profiles))
            if events:
                ordered = sort_by_match_score(events)
                logger.info(
                    f"Generated {len(ordered)} recommendations for group {group_id}"
                )
                return ordered, group
            logger.warning(f"No matches for group {group_id}, using default catalog.")
        except Exception as e:
            logger.warning(
                f"Error getting recommendations for group {group_id}, "
                f"using default catalog: {e}"
            )
        return sort_by_match_score(default_recommendations()), group
