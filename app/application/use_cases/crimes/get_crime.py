"""Use case for retrieving a single crime."""

from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.entities import Crime
from app.infrastructure.repositories import CrimeNotFoundError, CrimeRepository


def get_crime(session: Session, crime_id: UUID | str) -> Crime:
    """Return the crime identified by ``crime_id`` or raise an error."""

    repository = CrimeRepository(session)
    crime = repository.get(crime_id)
    if crime is None:
        raise CrimeNotFoundError(crime_id)
    return crime
