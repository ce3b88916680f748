"""Common utilities for tests."""

import unittest
import unittest.mock
from typing import Any

from google.api_core import exceptions as google_exceptions
from mockfirestore import MockFirestore
from mockfirestore.document import DocumentReference

from gathergo.store import DocumentStore

MOCK_SERVER_TIMESTAMP = "2023-01-01"


class MockArrayUnion:
    """Stands in for ``firestore.ArrayUnion`` in the patched mockfirestore."""

    def __init__(self, values: list[Any]) -> None:
        self.values = values


def patch_mockfirestore() -> None:
    """Teach mockfirestore's ``update`` to apply ``MockArrayUnion`` values."""
    if hasattr(DocumentReference, "_orig_update"):
        return
    DocumentReference._orig_update = DocumentReference.update

    def update_with_union(self: Any, data: dict[str, Any]) -> Any:
        stored = self.get().to_dict() or {}
        resolved = {}
        for field, value in data.items():
            if not isinstance(value, MockArrayUnion):
                resolved[field] = value
                continue
            current = stored.get(field)
            merged = list(current) if isinstance(current, list) else []
            for item in value.values:
                if item not in merged:
                    merged.append(item)
            resolved[field] = merged
        return self._orig_update(resolved)

    DocumentReference.update = update_with_union


def mock_firestore_module(db: Any) -> unittest.mock.MagicMock:
    """Build a stand-in for ``firebase_admin.firestore`` bound to ``db``."""
    module = unittest.mock.MagicMock()
    module.client.return_value = db
    module.ArrayUnion = MockArrayUnion
    module.SERVER_TIMESTAMP = MOCK_SERVER_TIMESTAMP
    return module


def unavailable_db() -> unittest.mock.MagicMock:
    """A Firestore client whose every call fails as if the backend were down."""
    db = unittest.mock.MagicMock()
    error = google_exceptions.ServiceUnavailable("firestore is down")
    collection = db.collection.return_value
    collection.add.side_effect = error
    collection.stream.side_effect = error
    collection.where.return_value.stream.side_effect = error
    document = collection.document.return_value
    document.get.side_effect = error
    document.set.side_effect = error
    document.update.side_effect = error
    return db


class StoreTestCase(unittest.TestCase):
    """Base case wiring a DocumentStore to an in-memory mockfirestore."""

    def setUp(self) -> None:
        patch_mockfirestore()
        self.db = MockFirestore()
        patcher = unittest.mock.patch(
            "gathergo.store.firestore", new=mock_firestore_module(self.db)
        )
        patcher.start()
        self.addCleanup(patcher.stop)
        self.store = DocumentStore(self.db)
