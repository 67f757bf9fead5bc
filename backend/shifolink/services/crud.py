"""
Pass-through service between the API routes and the generic repository.

Beyond forwarding it does two things: create/update re-read the row inside
the same transaction so callers always get the full entity back, and the
password change checks the current password and the length policy before
anything is written.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from shifolink.core.config import settings
from shifolink.core.errors import AppError, InvalidCredentials, StorageError, ValidationError
from shifolink.core.security import hash_password, validate_password, verify_password
from shifolink.repositories import Repository
from shifolink.schemas.common import ListPage, PasswordChange

logger = logging.getLogger(__name__)


class CrudService:
    def __init__(self, repository: Repository, password_min_length: int | None = None):
        self.repository = repository
        self.entity = repository.entity
        self.password_min_length = password_min_length or settings.password_min_length

    @contextmanager
    def _transaction(self):
        db = self.repository.db
        try:
            yield
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("commit failed for %s: %s", self.entity.name, exc)
            raise StorageError(str(getattr(exc, "orig", None) or exc)) from exc
        except Exception:
            db.rollback()
            raise

    def _reread(self, entity_id: uuid.UUID, action: str) -> dict[str, Any]:
        try:
            return self.repository.get(entity_id)
        except AppError:
            logger.error("read-after-%s failed for %s %s", action, self.entity.name, entity_id)
            raise

    def create(self, payload: BaseModel) -> dict[str, Any]:
        fields = payload.model_dump()
        if self.entity.account:
            validate_password(fields["password"], self.password_min_length)
            fields["password"] = hash_password(fields["password"])

        with self._transaction():
            entity_id = self.repository.create(fields)
            entity = self._reread(entity_id, "create")
        logger.info("created %s %s", self.entity.name, entity_id)
        return entity

    def get(self, entity_id: uuid.UUID) -> dict[str, Any]:
        return self.repository.get(entity_id)

    def get_list(self, page: int, limit: int, search: str = "") -> ListPage:
        items, count = self.repository.get_list(page, limit, search)
        return ListPage(items=items, count=count)

    def update(self, entity_id: uuid.UUID, payload: BaseModel) -> dict[str, Any]:
        # Explicit nulls mean "leave unchanged", the same as omitted fields.
        fields = payload.model_dump(exclude_none=True)
        with self._transaction():
            self.repository.update(entity_id, fields)
            entity = self._reread(entity_id, "update")
        return entity

    def delete(self, entity_id: uuid.UUID) -> None:
        with self._transaction():
            self.repository.delete(entity_id)
        logger.info("deleted %s %s", self.entity.name, entity_id)

    def change_password(self, entity_id: uuid.UUID, payload: PasswordChange) -> None:
        if not self.entity.account:
            raise ValidationError(f"{self.entity.name} has no password")

        with self._transaction():
            stored = self.repository.get_password(entity_id)
            if not verify_password(payload.old_password, stored):
                logger.info("password change rejected for %s %s: old password mismatch", self.entity.name, entity_id)
                raise InvalidCredentials()

            validate_password(payload.new_password, self.password_min_length)
            self.repository.update_password(entity_id, hash_password(payload.new_password))
        logger.info("password changed for %s %s", self.entity.name, entity_id)
