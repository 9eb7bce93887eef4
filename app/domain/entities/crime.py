"""Domain entity representing a recorded crime."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from app.utils import utc_now

IdFactory = Callable[[], UUID]
Clock = Callable[[], datetime]


@dataclass
class Crime:
    """A single crime record.

    ``id`` is the stable primary key and cannot be reassigned once the
    instance exists. The remaining fields are freely mutable.
    """

    id: UUID = field(default_factory=uuid4)
    title: str = ""
    date: datetime = field(default_factory=utc_now)
    is_solved: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Crime id cannot be reassigned")
        super().__setattr__(name, value)

    @classmethod
    def new(
        cls,
        title: str = "",
        date: datetime | None = None,
        is_solved: bool = False,
        *,
        id_factory: IdFactory = uuid4,
        clock: Clock = utc_now,
    ) -> "Crime":
        """Build a crime using the given identifier generator and clock."""

        return cls(
            id=id_factory(),
            title=title,
            date=date if date is not None else clock(),
            is_solved=is_solved,
        )


__all__ = ["Clock", "Crime", "IdFactory"]
