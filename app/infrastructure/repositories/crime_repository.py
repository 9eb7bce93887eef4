"""Persistence helpers for crime entities."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar
from uuid import UUID

from sqlalchemy.orm import Session

from app.domain.entities import Crime
from app.infrastructure.converters import InvalidIdentifierError, to_uuid
from app.infrastructure.models import CrimeModel

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class CrimeNotFoundError(LookupError):
    """Raised when no stored crime matches the requested identifier."""

    def __init__(self, crime_id: UUID) -> None:
        super().__init__(f"Crime with id {crime_id} not found")
        self.crime_id = crime_id


class CrimeRepository:
    """Provide CRUD operations for :class:`Crime` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Crime]:
        """Return every stored crime, newest first."""

        query = self.session.query(CrimeModel).order_by(
            CrimeModel.date.desc(), CrimeModel.id
        )
        models = self._load(query.all)
        return [self._to_entity(model) for model in models]

    def get(self, crime_id: UUID | str) -> Crime | None:
        crime_id = self._parse_id(crime_id)
        model = self._load(lambda: self.session.get(CrimeModel, crime_id))
        return self._to_entity(model) if model else None

    def add(self, crime: Crime) -> Crime:
        model = CrimeModel(id=crime.id)
        self._apply_entity_to_model(model, crime)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        logger.info("Stored crime %s", crime.id)
        return self._to_entity(model)

    def update(self, crime: Crime) -> Crime:
        model = self._load(lambda: self.session.get(CrimeModel, crime.id))
        if model is None:
            raise CrimeNotFoundError(crime.id)
        self._apply_entity_to_model(model, crime)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        logger.info("Updated crime %s", crime.id)
        return self._to_entity(model)

    def delete(self, crime_id: UUID | str) -> None:
        crime_id = self._parse_id(crime_id)
        model = self._load(lambda: self.session.get(CrimeModel, crime_id))
        if model is None:
            raise CrimeNotFoundError(crime_id)
        self.session.delete(model)
        self.session.commit()
        logger.info("Deleted crime %s", crime_id)

    @staticmethod
    def _parse_id(crime_id: UUID | str) -> UUID:
        """Return ``crime_id`` as a UUID, raising the converter error for bad text."""

        if isinstance(crime_id, UUID):
            return crime_id
        return to_uuid(crime_id)

    @staticmethod
    def _load(loader: Callable[[], _T]) -> _T:
        try:
            return loader()
        except InvalidIdentifierError:
            logger.error("Stored crime row has a malformed identifier", exc_info=True)
            raise

    @staticmethod
    def _apply_entity_to_model(model: CrimeModel, crime: Crime) -> None:
        model.title = crime.title
        model.date = crime.date
        model.is_solved = crime.is_solved

    @staticmethod
    def _to_entity(model: CrimeModel) -> Crime:
        return Crime(
            id=model.id,
            title=model.title,
            date=model.date,
            is_solved=model.is_solved,
        )


__all__ = ["CrimeNotFoundError", "CrimeRepository"]
