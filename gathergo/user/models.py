"""Data models for the user blueprint."""

from __future__ import annotations

from typing import Any, TypedDict

from gathergo.core.types import FirestoreDocument


class Budget(TypedDict, total=False):
    """Per-person budget range."""

    min: float
    max: float
    currency: str


class Availability(TypedDict, total=False):
    """When a user is free."""

    timeSlots: list[str]
    dates: list[str]
    timeRange: str


class UserPreferences(TypedDict, total=False):
    """Trip preferences stored on a user document."""

    budget: Budget
    activities: list[str]
    interests: list[str]
    notes: str
    availability: Availability


class User(FirestoreDocument, total=False):
    """A user document in Firestore, keyed by the auth uid."""

    name: str
    email: str
    preferences: UserPreferences | dict[str, Any]
