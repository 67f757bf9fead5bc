"""Module: journals."""

import uuid

from pydantic import BaseModel, Field


class JournalCreate(BaseModel):
    author_id: uuid.UUID
    theme: str = Field(min_length=1, max_length=300)
    article: str | None = None


class JournalUpdate(BaseModel):
    author_id: uuid.UUID | None = None
    theme: str | None = Field(default=None, min_length=1, max_length=300)
    article: str | None = None
