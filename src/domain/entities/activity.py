"""Activity domain entity and the request value used to create or change one."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date as Date
from typing import Any

from core.exceptions import ActivityIdentityError, ActivityValidationError


class Activity:
    """Domain entity for a logged activity.

    Every instance satisfies the entity rules: a non-blank name, a
    non-negative number of minutes and a date that is not after
    ``clock()``. Fields are read-only; ``update`` and ``assign_id`` are the
    only ways to change them, so the rules cannot be bypassed.
    """

    __slots__ = ("_id", "_name", "_minutes", "_date", "_clock", "_deleted")

    def __init__(
        self,
        name: str,
        minutes: int,
        date: Date,
        id: int | None = None,
        clock: Callable[[], Date] = Date.today,
    ) -> None:
        self._clock = clock
        self._validate(name, minutes, date)
        self._id = id
        self._name = name
        self._minutes = minutes
        self._date = date
        self._deleted = False

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def date(self) -> Date:
        return self._date

    @property
    def is_deleted(self) -> bool:
        """Whether the activity has been removed from storage."""
        return self._deleted

    def update(self, name: str, minutes: int, date: Date) -> None:
        """Replace all fields, or raise and leave the activity untouched."""
        if self._deleted:
            raise ActivityValidationError("Deleted activity cannot be modified")
        self._validate(name, minutes, date)
        self._name = name
        self._minutes = minutes
        self._date = date

    def assign_id(self, activity_id: int) -> None:
        """Set the storage identity. Only valid once."""
        if self._id is not None:
            raise ActivityIdentityError(self._id, activity_id)
        self._id = activity_id

    def mark_deleted(self) -> None:
        """Freeze the activity after storage has removed it."""
        self._deleted = True

    def _validate(self, name: str | None, minutes: int, date: Date | None) -> None:
        # First violation wins; order is part of the contract.
        if name is None or not name.strip():
            raise ActivityValidationError("Activity name cannot be null or empty", field="name")
        if minutes < 0:
            raise ActivityValidationError("Minutes cannot be negative", field="minutes")
        if date is None:
            raise ActivityValidationError("Date cannot be null", field="date")
        if date > self._clock():
            raise ActivityValidationError("Date cannot be in the future", field="date")

    def _key(self) -> tuple[int | None, str, int, Date]:
        return (self._id, self._name, self._minutes, self._date)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Activity):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Activity(id={self._id!r}, name={self._name!r}, "
            f"minutes={self._minutes!r}, date={self._date!r})"
        )


@dataclass(frozen=True, slots=True)
class NewActivityRequest:
    """Read-only input for creating or replacing an activity.

    ``duration`` is the raw duration string (e.g. ``"45m"``); it is parsed
    into minutes by the service.
    """

    name: str
    duration: str
    date: Date | None
