import logging

from shifolink.db.base import Base
from shifolink.db.session import engine

# IMPORTANT: import models so they register with Base.metadata
import shifolink.db.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured (%d)", len(Base.metadata.tables))
