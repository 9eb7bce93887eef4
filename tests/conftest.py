"""Shared fixtures for the test-suite."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure the project root (which contains the ``app`` package) is importable
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Point the engine at a private in-memory database before ``app`` is imported
os.environ["DATABASE_URL"] = "sqlite://"


@pytest.fixture()
def session():
    """Yield a session bound to a freshly created schema."""

    from app.infrastructure import database

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)

    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
        database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
