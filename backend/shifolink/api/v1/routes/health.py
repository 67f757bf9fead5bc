"""Module: health."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from shifolink.api.v1.response import handle_response
from shifolink.api.v1.routes.deps import get_db

router = APIRouter()


# Endpoint: lightweight health probe for service liveness.
@router.get("/health")
def health():
    return handle_response(200, {"status": "ok"})


# Endpoint: readiness probe, round-trips the shared pool.
@router.get("/health/db")
def health_db(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return handle_response(200, {"status": "ok", "database": "reachable"})
