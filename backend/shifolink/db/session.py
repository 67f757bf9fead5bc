"""Module: session."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shifolink.core.config import settings


def _engine_options(url: str) -> dict:
    # In-memory SQLite (tests) needs every session on the same connection.
    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }

    options: dict = {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
    }
    if settings.db_statement_timeout_ms > 0:
        options["connect_args"] = {"options": f"-c statement_timeout={settings.db_statement_timeout_ms}"}
    return options


# Process-wide engine; its pool is shared by every repository.
engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
