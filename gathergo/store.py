"""Document store adapter over the Firestore Admin SDK."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions

from gathergo.errors import NotFoundError, StoreReadError, StoreWriteError

if TYPE_CHECKING:
    from google.cloud.firestore_v1.base_document import DocumentSnapshot
    from google.cloud.firestore_v1.client import Client

logger = logging.getLogger(__name__)


def _to_document(snapshot: DocumentSnapshot) -> dict[str, Any]:
    """Flatten a snapshot into a dict that carries its document id."""
    data = snapshot.to_dict() or {}
    data["id"] = snapshot.id
    return data


class DocumentStore:
    """Collection/key access to Firestore with errors mapped to the app taxonomy.

    Every SDK failure surfaces as ``StoreReadError`` or ``StoreWriteError`` so
    callers never have to know about ``google.api_core`` exceptions.
    """

    def __init__(self, db: Client) -> None:
        self.db = db

    def create(self, collection: str, data: dict[str, Any]) -> str:
        """Add a document with an auto-generated id and return that id."""
        try:
            _, doc_ref = self.db.collection(collection).add(data)
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Error creating document in {collection}: {e}")
            raise StoreWriteError(f"Could not create {collection} document.") from e
        return doc_ref.id

    def read(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return the document, or None when it does not exist."""
        try:
            snapshot = self.db.collection(collection).document(doc_id).get()
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Error reading {collection}/{doc_id}: {e}")
            raise StoreReadError(f"Could not read {collection} document.") from e
        if not snapshot.exists:
            return None
        return _to_document(snapshot)

    def update_merge(
        self, collection: str, doc_id: str, partial: dict[str, Any]
    ) -> None:
        """Merge ``partial`` into the document, creating it if needed."""
        try:
            self.db.collection(collection).document(doc_id).set(partial, merge=True)
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Error merging into {collection}/{doc_id}: {e}")
            raise StoreWriteError(f"Could not update {collection} document.") from e

    def list(self, collection: str) -> list[dict[str, Any]]:
        """Return every document in a collection."""
        try:
            return [
                _to_document(doc)
                for doc in self.db.collection(collection).stream()
                if doc.exists
            ]
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Error listing {collection}: {e}")
            raise StoreReadError(f"Could not list {collection}.") from e

    def where(
        self, collection: str, field: str, op: str, value: Any
    ) -> list[dict[str, Any]]:
        """Return the documents of a collection matching a single filter."""
        try:
            query = self.db.collection(collection).where(field, op, value)
            return [_to_document(doc) for doc in query.stream() if doc.exists]
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Error querying {collection} on {field}: {e}")
            raise StoreReadError(f"Could not query {collection}.") from e

    def union_append(
        self, collection: str, doc_id: str, field: str, value: Any
    ) -> None:
        """Atomically add ``value`` to an array field unless already present."""
        doc_ref = self.db.collection(collection).document(doc_id)
        try:
            doc_ref.update({field: firestore.ArrayUnion([value])})
        except google_exceptions.NotFound as e:
            raise NotFoundError(f"No {collection} document {doc_id}.") from e
        except google_exceptions.GoogleAPIError as e:
            logger.error(f"Error appending to {collection}/{doc_id}.{field}: {e}")
            raise StoreWriteError(f"Could not update {collection} document.") from e

    @staticmethod
    def server_timestamp() -> Any:
        """Sentinel that Firestore replaces with the commit time."""
        return firestore.SERVER_TIMESTAMP


def get_store() -> DocumentStore:
    """Return a store bound to the default Firebase app's Firestore client."""
    return DocumentStore(firestore.client())
