# mentormatch/schemas/availability.py
"""
Canonical weekly availability record.

A profile's availability column is only ever written with
``Availability.to_storage()`` and read back with ``Availability.from_storage()``,
so the stored JSON always has one shape:
``{"days": ["Monday", ...], "startTime": "HH:MM", "endTime": "HH:MM"}``.
"""

import enum
import logging
from datetime import time
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from mentormatch.schemas.base import CamelModel

logger = logging.getLogger(__name__)


class Weekday(str, enum.Enum):
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


# Sunday first, matching the order days are shown in.
WEEK_ORDER: List[Weekday] = list(Weekday)


class Availability(CamelModel):
    days: FrozenSet[Weekday] = Field(default_factory=frozenset)
    start_time: time
    end_time: time

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("days", mode="before")
    @classmethod
    def validate_days(cls, value: Any):
        if value is None:
            return frozenset()
        if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("days must be a list of weekday names")
        names = [str(day.value if isinstance(day, Weekday) else day).strip().capitalize() for day in value]
        if len(names) != len(set(names)):
            raise ValueError("days must not contain duplicates")
        return frozenset(names)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_clock(cls, value: Any):
        if isinstance(value, str) and len(value.strip()) == 5:
            # "HH:MM" is the stored form; pydantic handles "HH:MM:SS" itself.
            return value.strip() + ":00"
        return value

    @model_validator(mode="after")
    def check_window(self):
        if self.start_time >= self.end_time:
            raise ValueError("startTime must be earlier than endTime")
        return self

    @field_serializer("days")
    def serialize_days(self, days: FrozenSet[Weekday]) -> List[str]:
        return [day.value for day in WEEK_ORDER if day in days]

    @field_serializer("start_time", "end_time")
    def serialize_clock(self, value: time) -> str:
        return value.strftime("%H:%M")

    def to_storage(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_storage(cls, value: Any) -> Optional["Availability"]:
        """Decode the stored column; anything but the canonical object reads as unavailable."""
        if value is None:
            return None
        if not isinstance(value, dict):
            logger.warning("Ignoring non-canonical availability value of type %s", type(value).__name__)
            return None
        try:
            return cls.model_validate(value)
        except PydanticValidationError as exc:
            logger.warning("Ignoring invalid stored availability: %s", exc.errors()[0].get("msg"))
            return None
