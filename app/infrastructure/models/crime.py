"""SQLAlchemy model for recorded crimes."""

from sqlalchemy import Boolean, Column, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.infrastructure.types import EpochMillis, UUIDText
from app.utils import utc_now


class CrimeModel(Base):
    """Database representation of a crime, one row per entity."""

    __tablename__ = "crime"

    id = Column(UUIDText(), primary_key=True)
    title = Column(Text, nullable=False, default="")
    date = Column(EpochMillis(), nullable=False, default=utc_now, index=True)
    is_solved = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )


__all__ = ["CrimeModel"]
