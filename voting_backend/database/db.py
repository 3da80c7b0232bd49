"""
SQLAlchemy engine, session factory and declarative base.

The session is request-scoped: FastAPI endpoints receive one through the
`get_db` dependency and the service layer commits or rolls it back.
"""

import logging
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from voting_backend.database.config.config import settings

logger = logging.getLogger(__name__)

_connect_args = {"check_same_thread": False} if settings.DB_DRIVER_NAME.startswith("sqlite") else {}

engine = create_engine(
    settings.database_url,
    connect_args=_connect_args,
    pool_pre_ping=True,
    hide_parameters=True,
)
"""Engine bound to the configured database"""

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
"""Factory producing new `Session` objects"""


class Base(DeclarativeBase):
    """Declarative base shared by every entity."""


def get_db() -> Iterator[Session]:
    """
    FastAPI dependency yielding a database session for the duration of a request.

    Yields
    ------
    Session
        An open session, closed once the response has been produced.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create every table known to `Base.metadata` if it does not exist yet."""
    # entities must be imported so their tables are registered on the metadata
    from voting_backend.database import entities  # noqa: F401

    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info("Database schema ready on %s", target.url.render_as_string(hide_password=True))
