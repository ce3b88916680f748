"""Tests for the recommendation provider and event models."""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from gathergo.group.services import GroupService
from gathergo.recommendations.catalog import default_recommendations
from gathergo.recommendations.models import EventRecommendation
from gathergo.recommendations.services import (
    RecommendationService,
    sort_by_match_score,
)
from gathergo.store import DocumentStore
from gathergo.user.services import PreferenceService
from tests.conftest import StoreTestCase, unavailable_db


def make_event(event_id: str, score: int) -> EventRecommendation:
    return EventRecommendation(
        id=event_id,
        title=f"Event {event_id}",
        location="Somewhere",
        time="Saturday, 1:00 PM",
        price="Free",
        description="",
        image_url="https://example.com/e.jpg",
        match_score=score,
    )


class TestRecommendationService(StoreTestCase):
    def assert_sorted_non_empty(self, events: list[EventRecommendation]) -> None:
        self.assertTrue(events)
        scores = [event.match_score for event in events]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_known_group_gets_catalog(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")

        events = RecommendationService.get_recommendations(self.store, group_id)

        self.assert_sorted_non_empty(events)
        self.assertEqual(len(events), 10)
        self.assertEqual(events[0].id, "evt-1")

    def test_unknown_group_falls_back_to_catalog(self) -> None:
        events = RecommendationService.get_recommendations(self.store, "missing")

        self.assert_sorted_non_empty(events)
        self.assertEqual(
            [e.id for e in events], [e.id for e in default_recommendations()]
        )

    def test_unreachable_store_falls_back_to_catalog(self) -> None:
        store = DocumentStore(unavailable_db())

        events = RecommendationService.get_recommendations(store, "g1")

        self.assert_sorted_non_empty(events)

    def test_matcher_receives_group_and_member_profiles(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")
        GroupService.join_group(self.store, "u2", group_id)
        PreferenceService.save_user_preferences(self.store, "u2", {"interests": ["jazz"]})
        matcher = MagicMock(return_value=[make_event("a", 10), make_event("b", 90)])

        events = RecommendationService.get_recommendations(
            self.store, group_id, matcher=matcher
        )

        group, profiles = matcher.call_args[0]
        self.assertEqual(group["id"], group_id)
        self.assertEqual([p["id"] for p in profiles], ["u2"])
        self.assertEqual([e.id for e in events], ["b", "a"])

    def test_failing_matcher_falls_back_to_catalog(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")
        matcher = MagicMock(side_effect=RuntimeError("matching blew up"))

        events = RecommendationService.get_recommendations(
            self.store, group_id, matcher=matcher
        )

        self.assertEqual(len(events), 10)

    def test_empty_matcher_result_falls_back_to_catalog(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")

        events = RecommendationService.get_recommendations(
            self.store, group_id, matcher=lambda group, profiles: []
        )

        self.assert_sorted_non_empty(events)

    def test_malformed_matcher_items_fall_back_to_catalog(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")

        events = RecommendationService.get_recommendations(
            self.store,
            group_id,
            matcher=lambda group, profiles: [{"id": "x", "matchScore": 50}],
        )

        self.assertEqual(len(events), 10)
        self.assert_sorted_non_empty(events)

    def test_group_recommendations_return_the_loaded_group(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")
        GroupService.join_group(self.store, "u2", group_id)

        events, group = RecommendationService.get_group_recommendations(
            self.store, group_id
        )

        self.assert_sorted_non_empty(events)
        assert group is not None
        self.assertEqual(group["memberIds"], ["u1", "u2"])

    def test_group_recommendations_for_unknown_group(self) -> None:
        events, group = RecommendationService.get_group_recommendations(
            self.store, "missing"
        )

        self.assertIsNone(group)
        self.assertEqual(len(events), 10)


class TestEventOrdering(unittest.TestCase):
    def test_ties_keep_input_order(self) -> None:
        events = [make_event("a", 50), make_event("b", 80), make_event("c", 50)]
        self.assertEqual([e.id for e in sort_by_match_score(events)], ["b", "a", "c"])

    def test_catalog_returns_fresh_copies(self) -> None:
        first = default_recommendations()
        first.pop()
        self.assertEqual(len(default_recommendations()), 10)

    def test_match_score_must_be_a_percentage(self) -> None:
        with self.assertRaises(ValueError):
            make_event("a", 101)

    def test_to_dict_uses_front_end_field_names(self) -> None:
        data = make_event("a", 42).to_dict()
        self.assertEqual(data["imageUrl"], "https://example.com/e.jpg")
        self.assertEqual(data["matchScore"], 42)
        self.assertEqual(data["rating"], {"average": 0.0, "count": 0})
        self.assertEqual(data["votes"], 0)
        self.assertEqual(data["emoji"], "\U0001f389")


if __name__ == "__main__":
    unittest.main()
