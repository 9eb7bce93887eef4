"""Use case for listing recorded crimes."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Crime
from app.infrastructure.repositories import CrimeRepository


def list_crimes(session: Session) -> Sequence[Crime]:
    """Return every recorded crime, newest first."""

    return CrimeRepository(session).list()
