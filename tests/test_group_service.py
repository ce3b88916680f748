"""Tests for GroupService."""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from gathergo.errors import AccessDenied, NotFoundError, StoreWriteError
from gathergo.group.services import GroupService
from gathergo.store import DocumentStore
from tests.conftest import (
    MOCK_SERVER_TIMESTAMP,
    StoreTestCase,
    unavailable_db,
)


class TestGroupService(StoreTestCase):
    def _members(self, group_id: str) -> list[str]:
        return GroupService.get_group(self.store, group_id)["memberIds"]

    def test_create_group(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")

        group = GroupService.get_group(self.store, group_id)
        self.assertEqual(group["id"], group_id)
        self.assertEqual(group["name"], "Trip")
        self.assertEqual(group["createdBy"], "u1")
        self.assertEqual(group["status"], "planning")
        self.assertEqual(group["memberIds"], ["u1"])
        self.assertEqual(group["invitedEmails"], [])
        self.assertEqual(group["createdAt"], MOCK_SERVER_TIMESTAMP)

    def test_join_group_adds_member_once(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")

        GroupService.join_group(self.store, "u2", group_id)
        GroupService.join_group(self.store, "u2", group_id)

        self.assertEqual(self._members(group_id), ["u1", "u2"])

    def test_join_sequence_keeps_each_member_once(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")

        for user_id in ["u2", "u3", "u1", "u2", "u4", "u3", "u1"]:
            GroupService.join_group(self.store, user_id, group_id)

        members = self._members(group_id)
        self.assertEqual(sorted(members), ["u1", "u2", "u3", "u4"])
        self.assertEqual(len(members), len(set(members)))
        self.assertIn("u1", members)

    def test_join_missing_group(self) -> None:
        with self.assertRaises(NotFoundError):
            GroupService.join_group(self.store, "u2", "missing")

    def test_get_user_groups(self) -> None:
        trip = GroupService.create_group(self.store, "u1", "Trip")
        dinner = GroupService.create_group(self.store, "u2", "Dinner")
        GroupService.join_group(self.store, "u1", dinner)
        GroupService.create_group(self.store, "u3", "Hike")

        groups = GroupService.get_user_groups(self.store, "u1")
        self.assertEqual({group["id"] for group in groups}, {trip, dinner})

    def test_invite_email_is_normalised_and_deduplicated(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")

        GroupService.invite_email(self.store, "u1", group_id, " Friend@Example.com ")
        GroupService.invite_email(self.store, "u1", group_id, "friend@example.com")

        group = GroupService.get_group(self.store, group_id)
        self.assertEqual(group["invitedEmails"], ["friend@example.com"])

    def test_invite_email_requires_membership(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")

        with self.assertRaises(AccessDenied):
            GroupService.invite_email(self.store, "u2", group_id, "spam@example.com")
        self.assertEqual(
            GroupService.get_group(self.store, group_id)["invitedEmails"], []
        )

    def test_finalize_group(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")

        GroupService.finalize_group(self.store, "u1", group_id)
        GroupService.finalize_group(self.store, "u1", group_id)

        group = GroupService.get_group(self.store, group_id)
        self.assertEqual(group["status"], "finalized")
        self.assertEqual(group["memberIds"], ["u1"])

    def test_finalize_group_requires_creator(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")
        GroupService.join_group(self.store, "u2", group_id)

        with self.assertRaises(AccessDenied):
            GroupService.finalize_group(self.store, "u2", group_id)
        self.assertEqual(
            GroupService.get_group(self.store, group_id)["status"], "planning"
        )

    def test_is_member(self) -> None:
        group_id = GroupService.create_group(self.store, "u1", "Trip")
        group = GroupService.get_group(self.store, group_id)
        self.assertTrue(GroupService.is_member(group, "u1"))
        self.assertFalse(GroupService.is_member(group, "u2"))


class TestGroupServiceStoreCalls(unittest.TestCase):
    def test_join_uses_atomic_union_not_read_modify_write(self) -> None:
        store = MagicMock(spec=DocumentStore)
        store.read.return_value = {"id": "g1", "memberIds": ["u1"]}

        GroupService.join_group(store, "u2", "g1")

        store.union_append.assert_called_once_with("groups", "g1", "memberIds", "u2")
        store.update_merge.assert_not_called()

    def test_create_group_propagates_write_error(self) -> None:
        store = DocumentStore(unavailable_db())
        with self.assertRaises(StoreWriteError):
            GroupService.create_group(store, "u1", "Trip")


if __name__ == "__main__":
    unittest.main()
