"""Service layer for user profiles and preferences."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from gathergo.core.constants import USERS_COLLECTION
from gathergo.errors import StoreError

from .models import User

if TYPE_CHECKING:
    from gathergo.store import DocumentStore

logger = logging.getLogger(__name__)


class PreferenceService:
    """Upserts and reads user preference documents."""

    @staticmethod
    def save_user_preferences(
        store: DocumentStore, user_id: str, user_data: dict[str, Any]
    ) -> None:
        """Merge ``user_data`` into the user's document, creating it if needed.

        Fields missing from ``user_data`` keep their stored values. ``updatedAt``
        is set by the server on every call.
        """
        payload = {**user_data, "updatedAt": store.server_timestamp()}
        try:
            store.update_merge(USERS_COLLECTION, user_id, payload)
        except StoreError as e:
            logger.error(f"Error saving preferences for {user_id}: {e}")
            raise
        logger.info(f"User preferences saved for {user_id}")

    @staticmethod
    def get_user_profile(store: DocumentStore, user_id: str) -> User | None:
        """Return the user's profile, or None if they have never saved one."""
        data = store.read(USERS_COLLECTION, user_id)
        if data is None:
            return None
        return cast(User, data)

    @staticmethod
    def get_profiles(store: DocumentStore, user_ids: list[str]) -> list[User]:
        """Return the existing profiles for ``user_ids``, in the given order."""
        profiles = []
        for uid in user_ids:
            profile = PreferenceService.get_user_profile(store, uid)
            if profile is not None:
                profiles.append(profile)
        return profiles
