"""
MongoDB integration.

This module owns the process‑wide ``MongoClient`` and exposes the store
facade every service works against:

* :class:`Repository` wraps one collection and speaks in plain entity
  dicts (``id`` instead of MongoDB's ``_id``);
* :class:`MongoStore` hands out repositories bound to one database and,
  optionally, one client session;
* :func:`open_store` / :func:`get_store` scope a session to a block or
  to one request and always end it on the way out.

Entity ids are UUID4 strings and are stored as the document ``_id``.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.client_session import ClientSession
from pymongo.database import Database

from .config import settings
from .query import QueryClause, SortDirection

logger = logging.getLogger(__name__)

_client: Optional[MongoClient] = None
_client_lock = threading.Lock()


def _to_entity(document: Mapping[str, Any]) -> Dict[str, Any]:
    entity = dict(document)
    if "_id" in entity:
        entity["id"] = entity.pop("_id")
    return entity


def _to_document(entity: Mapping[str, Any]) -> Dict[str, Any]:
    document = dict(entity)
    if "id" in document:
        document["_id"] = document.pop("id")
    return document


def _storage_field(name: str) -> str:
    return "_id" if name == "id" else name


class Repository:
    """Entity access for a single collection."""

    def __init__(self, database: Database, name: str, session: Optional[ClientSession] = None) -> None:
        self.name = name
        self._collection = database[name]
        self._session = session

    def _options(self) -> Dict[str, Any]:
        # Only pass the session when there is one; in‑memory test doubles
        # of the driver refuse the keyword.
        return {"session": self._session} if self._session is not None else {}

    def get(self, entity_id: str) -> Optional[Dict[str, Any]]:
        document = self._collection.find_one({"_id": entity_id}, **self._options())
        return _to_entity(document) if document is not None else None

    def list(self, clause: QueryClause = QueryClause(), filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """Return entities matching ``filters`` shaped by ``clause``."""
        if clause.limit == 0:
            return []
        cursor = self._collection.find(dict(filters or {}), **self._options())
        if clause.sort_field:
            direction = ASCENDING if clause.sort_direction is SortDirection.ASC else DESCENDING
            cursor = cursor.sort(_storage_field(clause.sort_field), direction)
        if clause.skip:
            cursor = cursor.skip(clause.skip)
        if clause.limit:
            cursor = cursor.limit(clause.limit)
        return [_to_entity(document) for document in cursor]

    def find_by_field(self, field: str, value: Any) -> List[Dict[str, Any]]:
        cursor = self._collection.find({_storage_field(field): value}, **self._options())
        return [_to_entity(document) for document in cursor]

    def insert(self, entity: Mapping[str, Any]) -> None:
        self._collection.insert_one(_to_document(entity), **self._options())

    def replace(self, entity: Mapping[str, Any]) -> bool:
        document = _to_document(entity)
        result = self._collection.replace_one({"_id": document["_id"]}, document, **self._options())
        return result.matched_count == 1

    def delete(self, entity_id: str) -> bool:
        result = self._collection.delete_one({"_id": entity_id}, **self._options())
        return result.deleted_count == 1


class MongoStore:
    """Store facade bound to one database and an optional session."""

    def __init__(self, database: Database, session: Optional[ClientSession] = None) -> None:
        self.database = database
        self.session = session

    def repository(self, collection: str) -> Repository:
        return Repository(self.database, collection, session=self.session)


def get_client() -> MongoClient:
    """Return the shared client, creating it on first use.

    ``connect=False`` defers the network handshake until the first
    operation, so importing the app never blocks on MongoDB.
    """
    global _client
    with _client_lock:
        if _client is None:
            logger.info("Connecting to MongoDB database %s", settings.mongo_database)
            _client = MongoClient(settings.mongo_url, connect=False)
        return _client


def close_client() -> None:
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None


@contextmanager
def open_store() -> Iterator[MongoStore]:
    """Yield a store whose session ends when the block exits, on any path."""
    client = get_client()
    session = client.start_session()
    logger.debug("Started store session %s", id(session))
    try:
        yield MongoStore(client[settings.mongo_database], session=session)
    finally:
        session.end_session()
        logger.debug("Ended store session %s", id(session))


def get_store() -> Iterator[MongoStore]:
    """FastAPI dependency: one store session per request."""
    with open_store() as store:
        yield store
