"""
Generic soft-delete repository.

One ``Repository`` instance serves one entity type for the lifetime of a
request session. Every method issues exactly one SQL statement (two for
``get_list``: the page and its count). Nothing is committed here; the service
layer owns the transaction.
"""

import logging
import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import String, cast, func, insert, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shifolink.core.errors import NotFoundError, StorageError
from shifolink.core.security import calculate_age
from shifolink.entities import EntityDescriptor

logger = logging.getLogger(__name__)

# Columns never returned in entity payloads.
HIDDEN_COLUMNS = frozenset({"password"})


def like_pattern(search: str) -> str:
    # Treat the search text literally: escape LIKE wildcards.
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class Repository:
    def __init__(self, entity: EntityDescriptor, db: Session):
        self.entity = entity
        self.db = db
        self.table = entity.table
        self._columns = [c for c in self.table.columns if c.key not in HIDDEN_COLUMNS]

    def _execute(self, statement, action: str):
        try:
            return self.db.execute(statement)
        except SQLAlchemyError as exc:
            logger.error("error while %s %s: %s", action, self.entity.name, exc)
            raise StorageError(str(getattr(exc, "orig", None) or exc)) from exc

    def _live(self, entity_id: uuid.UUID):
        return (self.table.c.id == entity_id, self.table.c.deleted_at.is_(None))

    def _search_clause(self, search: str):
        pattern = like_pattern(search)
        clauses = []
        for field in self.entity.search_fields:
            column = self.table.c[field]
            if not isinstance(column.type, String):
                column = cast(column, String)
            clauses.append(column.ilike(pattern, escape="\\"))
        return or_(*clauses)

    def create(self, fields: dict[str, Any]) -> uuid.UUID:
        values = dict(fields)
        entity_id = uuid.uuid4()
        values["id"] = entity_id
        if "age" in self.table.c:
            birth_date = values.get("birth_date")
            values["age"] = calculate_age(birth_date) if birth_date else None

        self._execute(insert(self.table).values(**values), "inserting")
        return entity_id

    def get(self, entity_id: uuid.UUID) -> dict[str, Any]:
        row = self._execute(
            select(*self._columns).where(*self._live(entity_id)),
            "selecting",
        ).mappings().one_or_none()
        if row is None:
            raise NotFoundError(self.entity.name, entity_id)
        return dict(row)

    def get_list(self, page: int, limit: int, search: str = "") -> tuple[list[dict[str, Any]], int]:
        conditions = [self.table.c.deleted_at.is_(None)]
        if search:
            conditions.append(self._search_clause(search))

        count = self._execute(
            select(func.count()).select_from(self.table).where(*conditions),
            "counting",
        ).scalar_one()

        rows = self._execute(
            select(*self._columns)
            .where(*conditions)
            .order_by(self.table.c.created_at, self.table.c.id)
            .limit(limit)
            .offset((page - 1) * limit),
            "listing",
        ).mappings().all()
        return [dict(r) for r in rows], int(count or 0)

    def update(self, entity_id: uuid.UUID, fields: dict[str, Any]) -> uuid.UUID:
        result = self._execute(
            update(self.table)
            .where(*self._live(entity_id))
            .values(**fields, updated_at=datetime.now(UTC)),
            "updating",
        )
        if result.rowcount == 0:
            raise NotFoundError(self.entity.name, entity_id)
        return entity_id

    def delete(self, entity_id: uuid.UUID) -> None:
        result = self._execute(
            update(self.table)
            .where(*self._live(entity_id))
            .values(deleted_at=datetime.now(UTC)),
            "deleting",
        )
        if result.rowcount == 0:
            raise NotFoundError(self.entity.name, entity_id)

    def get_password(self, entity_id: uuid.UUID) -> str:
        password = self._execute(
            select(self.table.c.password).where(*self._live(entity_id)),
            "selecting password of",
        ).scalar_one_or_none()
        if password is None:
            raise NotFoundError(self.entity.name, entity_id)
        return password

    def update_password(self, entity_id: uuid.UUID, password: str) -> None:
        result = self._execute(
            update(self.table)
            .where(*self._live(entity_id))
            .values(password=password, updated_at=datetime.now(UTC)),
            "updating password of",
        )
        if result.rowcount == 0:
            raise NotFoundError(self.entity.name, entity_id)
