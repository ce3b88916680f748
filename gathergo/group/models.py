"""Data models for the group blueprint."""

from __future__ import annotations

from typing import Any

from gathergo.core.constants import STATUS_PLANNING
from gathergo.core.types import FirestoreDocument


class Group(FirestoreDocument, total=False):
    """A group document in Firestore."""

    name: str
    createdBy: str
    memberIds: list[str]
    invitedEmails: list[str]
    status: str


def new_group_data(user_id: str, name: str, created_at: Any) -> dict[str, Any]:
    """Build the document for a freshly created group owned by ``user_id``."""
    return {
        "name": name,
        "createdBy": user_id,
        "memberIds": [user_id],
        "invitedEmails": [],
        "status": STATUS_PLANNING,
        "createdAt": created_at,
    }
