"""
Generic CRUD pipeline shared by every resource.

``ResourceService`` is parameterised by a :class:`ResourceRules` table
set on the subclass.  All methods are classmethods taking the request's
:class:`MongoStore` as first argument, so services hold no state of
their own.

Create:  payload → candidate → defaults → validate → prepare → insert
Update:  stored + payload → merged candidate → validate → prepare → replace

Subclasses customise ``apply_defaults``, ``prepare_create`` and
``prepare_update``; the pipeline itself is not meant to be overridden.
"""

import logging
import uuid
from typing import Any, Dict, List, Mapping, Optional

from ..core.db import MongoStore, Repository
from ..core.exceptions import MalformedIdentifier, NotFound
from ..core.query import QueryClause
from ..core.resources import (
    ResourceRules,
    changed_fields,
    merge_candidate,
    new_candidate,
    validate_candidate,
)

logger = logging.getLogger(__name__)


def parse_identifier(raw: str) -> str:
    """Return the canonical form of an entity id or raise ``MalformedIdentifier``."""
    try:
        return str(uuid.UUID(raw))
    except (TypeError, ValueError, AttributeError):
        raise MalformedIdentifier(raw) from None


def new_identifier() -> str:
    return str(uuid.uuid4())


class ResourceService:
    """Base class for resource services."""

    rules: ResourceRules

    @classmethod
    def repository(cls, store: MongoStore) -> Repository:
        return store.repository(cls.rules.collection)

    @classmethod
    def not_found(cls, entity_id: str) -> NotFound:
        return NotFound(cls.rules.label, entity_id)

    # -- hooks ---------------------------------------------------------

    @classmethod
    def apply_defaults(cls, candidate: Mapping[str, Any]) -> Mapping[str, Any]:
        """Fill server‑side defaults into a create candidate before validation."""
        return candidate

    @classmethod
    def prepare_create(cls, store: MongoStore, candidate: Mapping[str, Any]) -> Dict[str, Any]:
        """Turn a validated create candidate into the document to insert."""
        return dict(candidate)

    @classmethod
    def prepare_update(
        cls,
        store: MongoStore,
        stored: Mapping[str, Any],
        candidate: Mapping[str, Any],
    ) -> Dict[str, Any]:
        """Turn a validated merged candidate into the replacement document."""
        return dict(candidate)

    # -- operations ----------------------------------------------------

    @classmethod
    def list_entities(
        cls,
        store: MongoStore,
        clause: QueryClause = QueryClause(),
        filters: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        return cls.repository(store).list(clause, filters=filters)

    @classmethod
    def get_entity(cls, store: MongoStore, raw_id: str) -> Dict[str, Any]:
        """Fetch one entity; raises ``MalformedIdentifier`` or ``NotFound``."""
        entity_id = parse_identifier(raw_id)
        entity = cls.repository(store).get(entity_id)
        if entity is None:
            raise cls.not_found(entity_id)
        return entity

    @classmethod
    def create_entity(
        cls,
        store: MongoStore,
        payload: Mapping[str, Any],
        extra: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Validate and insert a new entity, returning it with its fresh ``id``.

        ``extra`` holds read‑only fields set by the server (for example
        the owning driver of a car); they bypass the payload rules.
        """
        candidate = cls.apply_defaults(new_candidate(payload, cls.rules))
        validate_candidate(candidate, cls.rules)
        document = cls.prepare_create(store, candidate)
        if extra:
            document.update(extra)
        entity = {"id": new_identifier(), **document}
        cls.repository(store).insert(entity)
        logger.info("Created %s %s", cls.rules.label, entity["id"])
        return entity

    @classmethod
    def update_entity(cls, store: MongoStore, raw_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``payload`` into the stored entity and write it back.

        Absent and empty fields keep their stored values.  When the
        merged candidate fails validation nothing is written.
        """
        stored = cls.get_entity(store, raw_id)
        candidate = merge_candidate(stored, payload, cls.rules)
        validate_candidate(candidate, cls.rules)
        document = cls.prepare_update(store, stored, candidate)
        if not cls.repository(store).replace(document):
            # Deleted by another request between the read and the write.
            raise cls.not_found(stored["id"])
        changed = changed_fields(stored, document, cls.rules.field_names)
        logger.info("Updated %s %s (%s)", cls.rules.label, stored["id"], ", ".join(changed) or "no changes")
        return document

    @classmethod
    def delete_entity(cls, store: MongoStore, raw_id: str) -> str:
        """Hard‑delete an entity and return its id; missing ids raise ``NotFound``."""
        entity_id = parse_identifier(raw_id)
        if not cls.repository(store).delete(entity_id):
            raise cls.not_found(entity_id)
        logger.info("Deleted %s %s", cls.rules.label, entity_id)
        return entity_id
