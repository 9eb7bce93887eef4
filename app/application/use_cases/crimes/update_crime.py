"""Use case for updating recorded crimes."""

from dataclasses import replace
from datetime import datetime
from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.entities import Crime
from app.infrastructure.repositories import CrimeNotFoundError, CrimeRepository


def update_crime(
    session: Session,
    crime_id: UUID | str,
    *,
    title: str | None = None,
    date: datetime | None = None,
    is_solved: bool | None = None,
) -> Crime:
    """Update the supplied fields of a crime, leaving the others untouched."""

    repository = CrimeRepository(session)
    current = repository.get(crime_id)
    if current is None:
        raise CrimeNotFoundError(crime_id)

    updated_crime = replace(
        current,
        title=title if title is not None else current.title,
        date=date if date is not None else current.date,
        is_solved=is_solved if is_solved is not None else current.is_solved,
    )

    return repository.update(updated_crime)
