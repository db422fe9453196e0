"""
Router factory for the five standard resource endpoints.

``crud_router`` wires a :class:`ResourceService` subclass to::

    GET    ""            list (count / offsetId / sort / sortOrder)
    GET    "/{id}"       fetch one
    POST   ""            create, 201 with the stored entity
    DELETE "/{id}"       hard delete, confirmation string
    PATCH  "/{id}"       partial update, confirmation string

Resource modules call it and then add their own extra routes.
"""

from typing import List, Type

from fastapi import APIRouter, Depends, status

from ....core.db import MongoStore, get_store
from ....core.query import QueryClause
from ....schemas._base import PayloadModel, ReadModel
from ....services.resource_service import ResourceService
from ..dependencies import clause_dependency


def crud_router(
    service: Type[ResourceService],
    payload_model: Type[PayloadModel],
    read_model: Type[ReadModel],
) -> APIRouter:
    router = APIRouter()
    label = service.rules.label
    collection = service.rules.collection
    list_clause = clause_dependency(service.rules)

    @router.get("", response_model=List[read_model], name=f"list_{collection}")
    def list_resources(
        clause: QueryClause = Depends(list_clause),
        store: MongoStore = Depends(get_store),
    ):
        return service.list_entities(store, clause)

    @router.get("/{entity_id}", response_model=read_model, name=f"get_{collection}")
    def get_resource(entity_id: str, store: MongoStore = Depends(get_store)):
        return service.get_entity(store, entity_id)

    @router.post("", response_model=read_model, status_code=status.HTTP_201_CREATED, name=f"create_{collection}")
    def create_resource(payload: payload_model, store: MongoStore = Depends(get_store)):
        return service.create_entity(store, payload.to_fields())

    @router.delete("/{entity_id}", response_model=str, name=f"delete_{collection}")
    def delete_resource(entity_id: str, store: MongoStore = Depends(get_store)) -> str:
        deleted_id = service.delete_entity(store, entity_id)
        return f"{label}: {deleted_id} deleted"

    @router.patch("/{entity_id}", response_model=str, name=f"update_{collection}")
    def update_resource(entity_id: str, payload: payload_model, store: MongoStore = Depends(get_store)) -> str:
        updated = service.update_entity(store, entity_id, payload.to_fields())
        return f"{label}: {updated['id']} updated"

    return router
