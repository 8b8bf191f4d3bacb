"""Data access helpers for mailing list subscribers."""
from __future__ import annotations

from bson import ObjectId
from pymongo.database import Database

from inkpress.db.session import Collections
from inkpress.models.subscriber import Subscriber

__all__ = ["SubscriberRepository"]


class SubscriberRepository:
    """Thin wrapper around the subscribers collection."""

    def __init__(self, db: Database) -> None:
        self.collection = db[Collections.SUBSCRIBERS]

    def exists(self, mail: str) -> bool:
        """Return True if ``mail`` is already subscribed (exact match)."""
        return self.collection.find_one({"mail": mail}) is not None

    def list_emails(self) -> list[str]:
        """Return every subscribed address."""
        return [document["mail"] for document in self.collection.find({}, {"mail": 1})]

    def create(self, subscriber: Subscriber) -> Subscriber:
        document = subscriber.model_dump()
        document["_id"] = ObjectId(subscriber.id)
        self.collection.insert_one(document)
        return subscriber
