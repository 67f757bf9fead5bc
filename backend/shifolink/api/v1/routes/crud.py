"""
Generic CRUD routes.

``build_router`` turns an ``EntityDescriptor`` into the six endpoints every
entity exposes. The request body types come from the descriptor, so the
handlers are defined inside the factory where those types are in scope.
"""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shifolink.api.v1.response import handle_response
from shifolink.api.v1.routes.deps import get_db
from shifolink.core.errors import ValidationError
from shifolink.entities import EntityDescriptor
from shifolink.repositories import Repository
from shifolink.schemas.common import PasswordChange
from shifolink.services import CrudService

MAX_SQL_INT = 2**63 - 1


# Validate and coerce UUID inputs from path payloads.
def _parse_uuid(value: str, field_name: str = "id") -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise ValidationError(f"Invalid {field_name} (must be UUID)")


def _parse_positive_int(value: str, field_name: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ValidationError(f"Invalid {field_name} (must be an integer)")
    if number < 1:
        raise ValidationError(f"Invalid {field_name} (must be positive)")
    return number


# LIMIT and OFFSET are bound as signed 64-bit integers.
def _check_page_window(page: int, limit: int) -> None:
    if limit > MAX_SQL_INT or (page - 1) * limit > MAX_SQL_INT:
        raise ValidationError("Invalid page/limit (offset out of range)")


def build_router(entity: EntityDescriptor) -> APIRouter:
    router = APIRouter()
    create_schema = entity.create_schema
    update_schema = entity.update_schema

    def get_service(db: Session = Depends(get_db)) -> CrudService:
        return CrudService(Repository(entity, db))

    @router.post("", status_code=201, summary=f"Create {entity.name}")
    def create(payload: create_schema, service: CrudService = Depends(get_service)):
        return handle_response(201, service.create(payload))

    @router.get("/{entity_id}", summary=f"Get {entity.name} by id")
    def get_by_id(entity_id: str, service: CrudService = Depends(get_service)):
        return handle_response(200, service.get(_parse_uuid(entity_id)))

    @router.get("", summary=f"List {entity.name} with pagination and search")
    def get_list(
        page: str = Query("1"),
        limit: str = Query("10"),
        search: str = Query(""),
        service: CrudService = Depends(get_service),
    ):
        page_number = _parse_positive_int(page, "page")
        page_size = _parse_positive_int(limit, "limit")
        _check_page_window(page_number, page_size)
        result = service.get_list(page_number, page_size, search)
        return handle_response(200, result.model_dump())

    @router.put("/{entity_id}", summary=f"Update {entity.name} by id")
    def update(entity_id: str, payload: update_schema, service: CrudService = Depends(get_service)):
        return handle_response(200, service.update(_parse_uuid(entity_id), payload))

    @router.delete("/{entity_id}", summary=f"Delete {entity.name} by id")
    def delete(entity_id: str, service: CrudService = Depends(get_service)):
        service.delete(_parse_uuid(entity_id))
        return handle_response(200, "data successfully deleted")

    if entity.account:

        @router.patch("/{entity_id}", summary=f"Change {entity.name} password")
        def change_password(entity_id: str, payload: PasswordChange, service: CrudService = Depends(get_service)):
            service.change_password(_parse_uuid(entity_id), payload)
            return handle_response(200, "password successfully updated")

    return router
