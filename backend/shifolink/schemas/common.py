"""Module: common."""

from typing import Any

from pydantic import BaseModel, Field


class PasswordChange(BaseModel):
    old_password: str
    new_password: str


class ListPage(BaseModel):
    items: list[dict[str, Any]] = Field(default_factory=list)
    # Live rows matching the search filter, across all pages.
    count: int = 0
