"""Application entry point managing the database lifecycle."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session, sessionmaker

from app.infrastructure.database import SessionLocal, engine, initialize_database


@contextmanager
def lifespan() -> Iterator[sessionmaker[Session]]:
    """Create missing tables on start and release pooled connections on exit.

    Yields the session factory that use cases should be given sessions from.
    """

    initialize_database()
    try:
        yield SessionLocal
    finally:
        engine.dispose()


__all__ = ["lifespan"]
