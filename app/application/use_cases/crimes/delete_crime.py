"""Use case for deleting recorded crimes."""

from uuid import UUID

from sqlalchemy.orm import Session

from app.infrastructure.repositories import CrimeRepository


def delete_crime(session: Session, crime_id: UUID | str) -> None:
    """Delete the specified crime."""

    CrimeRepository(session).delete(crime_id)
