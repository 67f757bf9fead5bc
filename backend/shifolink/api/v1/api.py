"""Module: api."""

# backend/shifolink/api/v1/api.py
from fastapi import APIRouter

# Operational routes.
from shifolink.api.v1.routes.health import router as health_router

# Domain routes, one generated router per entity.
from shifolink.api.v1.routes.crud import build_router
from shifolink.entities import ENTITIES

api_router = APIRouter()

# Register operational endpoints first for service-level concerns.
api_router.include_router(health_router, tags=["health"])

# Register business/domain endpoints (author, clinic, ..., super_admin).
for entity in ENTITIES:
    api_router.include_router(build_router(entity), prefix=f"/{entity.name}", tags=[entity.name])
