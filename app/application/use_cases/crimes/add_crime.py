"""Use case for recording a new crime."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.entities import Crime, IdFactory
from app.infrastructure.repositories import CrimeRepository


def add_crime(
    session: Session,
    *,
    title: str = "",
    date: datetime | None = None,
    is_solved: bool = False,
    id_factory: IdFactory = uuid4,
) -> Crime:
    """Create and persist a new crime."""

    repository = CrimeRepository(session)
    crime = Crime.new(title, date, is_solved, id_factory=id_factory)
    return repository.add(crime)
