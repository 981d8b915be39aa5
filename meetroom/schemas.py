"""
Request schemas checked before any business rule runs.

Field names follow the camelCase wire format; snake_case names are accepted
too.
"""

import re
from typing import List, Optional

import pendulum
from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")
SLOT_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}( ([01][0-9]|2[0-3]):[0-5][0-9])?")

MAX_NAME_LENGTH = 30


def _check_calendar_date(value: str) -> str:
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid date '{value}'. Use YYYY-MM-DD")
    try:
        pendulum.from_format(value, "YYYY-MM-DD")
    except ValueError as exc:
        raise ValueError(f"Invalid date '{value}': {exc}") from exc
    return value


def _check_slots(values: List[str]) -> List[str]:
    invalid = [value for value in values if not SLOT_PATTERN.fullmatch(value)]
    if invalid:
        raise ValueError(
            f"Invalid slot(s) {invalid}. Use YYYY-MM-DD or YYYY-MM-DD HH:MM"
        )
    for value in values:
        _check_calendar_date(value.split(" ")[0])
    return values


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class CreateRoomRequest(_Request):
    """Candidate window for a new room."""
    dates: List[str]
    date_only: bool = Field(default=False, alias="dateOnly")
    start_time: Optional[str] = Field(default=None, alias="startTime")
    end_time: Optional[str] = Field(default=None, alias="endTime")

    @field_validator("dates")
    @classmethod
    def validate_dates(cls, value: List[str]) -> List[str]:
        """Each date must be a real calendar date in YYYY-MM-DD form."""
        return [_check_calendar_date(date) for date in value]

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def blank_time_is_none(cls, value):
        if value == "":
            return None
        return value

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, value: Optional[str]) -> Optional[str]:
        """Times must be zero-padded HH:MM."""
        if value is not None and not TIME_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid time '{value}'. Use HH:MM")
        return value


class CreateParticipantRequest(_Request):
    """A participant joining a room with their first set of slots."""
    room_code: str = Field(alias="roomCode")
    name: str
    enable_times: List[str] = Field(default_factory=list, alias="enableTimes")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        if len(value) > MAX_NAME_LENGTH:
            raise ValueError(f"name must be at most {MAX_NAME_LENGTH} characters")
        return value

    @field_validator("enable_times")
    @classmethod
    def validate_enable_times(cls, value: List[str]) -> List[str]:
        return _check_slots(value)


class UpdateAvailabilityRequest(_Request):
    """Replacement slot list for an existing participant."""
    enable_times: List[str] = Field(alias="enableTimes")

    @field_validator("enable_times")
    @classmethod
    def validate_enable_times(cls, value: List[str]) -> List[str]:
        return _check_slots(value)
