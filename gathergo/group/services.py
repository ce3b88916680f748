"""Service layer for group operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from gathergo.core.constants import (
    GROUP_INVITED_EMAILS,
    GROUP_MEMBER_IDS,
    GROUPS_COLLECTION,
    STATUS_FINALIZED,
)
from gathergo.errors import AccessDenied, NotFoundError, StoreError

from .models import Group, new_group_data

if TYPE_CHECKING:
    from gathergo.store import DocumentStore

logger = logging.getLogger(__name__)


class GroupService:
    """Service class for group-related operations.

    Store errors are logged and re-raised unchanged; membership writes favour
    correctness over availability.
    """

    @staticmethod
    def create_group(store: DocumentStore, user_id: str, name: str) -> str:
        """Create a group owned by ``user_id`` and return its new id."""
        data = new_group_data(user_id, name, store.server_timestamp())
        try:
            group_id = store.create(GROUPS_COLLECTION, data)
        except StoreError as e:
            logger.error(f"Error creating group {name!r} for {user_id}: {e}")
            raise
        logger.info(f"Group created with ID: {group_id}")
        return group_id

    @staticmethod
    def get_group(store: DocumentStore, group_id: str) -> Group:
        """Fetch a group, raising NotFoundError if it does not exist."""
        data = store.read(GROUPS_COLLECTION, group_id)
        if data is None:
            raise NotFoundError("Group not found.")
        return cast(Group, data)

    @staticmethod
    def join_group(store: DocumentStore, user_id: str, group_id: str) -> None:
        """Add ``user_id`` to a group's members.

        Joining is idempotent. Membership grows through the store's atomic
        union-append so concurrent joins cannot drop each other.
        """
        try:
            GroupService.get_group(store, group_id)
            store.union_append(GROUPS_COLLECTION, group_id, GROUP_MEMBER_IDS, user_id)
        except (NotFoundError, StoreError) as e:
            logger.error(f"Error joining group {group_id} for {user_id}: {e}")
            raise
        logger.info(f"User {user_id} joined group {group_id}")

    @staticmethod
    def get_user_groups(store: DocumentStore, user_id: str) -> list[Group]:
        """Return the groups ``user_id`` is a member of."""
        docs = store.where(
            GROUPS_COLLECTION, GROUP_MEMBER_IDS, "array_contains", user_id
        )
        return [cast(Group, doc) for doc in docs]

    @staticmethod
    def invite_email(
        store: DocumentStore, user_id: str, group_id: str, email: str
    ) -> None:
        """Record an invited email address on the group. Members only."""
        group = GroupService.get_group(store, group_id)
        if not GroupService.is_member(group, user_id):
            raise AccessDenied("Only group members can invite people.")
        store.union_append(
            GROUPS_COLLECTION,
            group_id,
            GROUP_INVITED_EMAILS,
            email.strip().lower(),
        )

    @staticmethod
    def finalize_group(store: DocumentStore, user_id: str, group_id: str) -> None:
        """Move a group from planning to finalized. Only the creator may do so."""
        group = GroupService.get_group(store, group_id)
        if group.get("createdBy") != user_id:
            raise AccessDenied("Only the group creator can finalize the plan.")
        if group.get("status") == STATUS_FINALIZED:
            return
        store.update_merge(GROUPS_COLLECTION, group_id, {"status": STATUS_FINALIZED})
        logger.info(f"Group {group_id} finalized by {user_id}")

    @staticmethod
    def is_member(group: Group, user_id: str) -> bool:
        """Check whether ``user_id`` belongs to the group."""
        return user_id in group.get("memberIds", [])
