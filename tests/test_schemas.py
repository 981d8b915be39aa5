"""
Tests for request schemas.
"""

import pydantic
import pytest

from meetroom.schemas import (
    CreateParticipantRequest,
    CreateRoomRequest,
    UpdateAvailabilityRequest,
)


class TestCreateRoomRequest:
    """Tests for CreateRoomRequest."""

    def test_wire_aliases(self):
        """camelCase payloads are accepted."""
        request = CreateRoomRequest.model_validate({
            "dates": ["2024-11-25"],
            "dateOnly": False,
            "startTime": "09:00",
            "endTime": "17:00",
        })

        assert request.date_only is False
        assert request.start_time == "09:00"
        assert request.end_time == "17:00"

    def test_field_names(self):
        """snake_case names are accepted too."""
        request = CreateRoomRequest(dates=["2024-11-25"], date_only=True)

        assert request.date_only is True
        assert request.start_time is None

    def test_date_only_defaults_to_false(self):
        """Without dateOnly the room is timed."""
        assert CreateRoomRequest(dates=["2024-11-25"]).date_only is False

    def test_invalid_date_format(self):
        """Dates must be YYYY-MM-DD."""
        with pytest.raises(pydantic.ValidationError, match="YYYY-MM-DD"):
            CreateRoomRequest(dates=["25.11.2024"])

    def test_impossible_calendar_date(self):
        """Well-formed but impossible dates are rejected."""
        with pytest.raises(pydantic.ValidationError):
            CreateRoomRequest(dates=["2024-02-30"])

    def test_invalid_time_format(self):
        """Times must be zero-padded HH:MM."""
        with pytest.raises(pydantic.ValidationError, match="HH:MM"):
            CreateRoomRequest(dates=["2024-11-25"], start_time="9:00", end_time="17:00")
        with pytest.raises(pydantic.ValidationError):
            CreateRoomRequest(dates=["2024-11-25"], start_time="24:00", end_time="17:00")

    def test_trailing_newline_rejected(self):
        """Dates and times must not carry trailing characters."""
        with pytest.raises(pydantic.ValidationError, match="HH:MM"):
            CreateRoomRequest(dates=["2024-03-10"], start_time="09:00\n", end_time="10:00")
        with pytest.raises(pydantic.ValidationError, match="YYYY-MM-DD"):
            CreateRoomRequest(dates=["2024-03-10\n"], date_only=True)

    def test_non_ascii_digits_rejected(self):
        """Only ASCII digits are accepted in times."""
        with pytest.raises(pydantic.ValidationError):
            CreateRoomRequest(dates=["2024-03-10"], start_time="\u0660\u0669:00", end_time="10:00")

    def test_blank_time_is_none(self):
        """An empty time string counts as absent."""
        request = CreateRoomRequest(dates=["2024-11-25"], date_only=True, start_time="")

        assert request.start_time is None

    def test_unknown_field(self):
        """Unexpected fields are rejected."""
        with pytest.raises(pydantic.ValidationError):
            CreateRoomRequest.model_validate({"dates": ["2024-11-25"], "title": "x"})

    def test_business_rules_not_checked(self):
        """Empty and unsorted date lists are left to the RangeValidator."""
        assert CreateRoomRequest(dates=[]).dates == []
        assert CreateRoomRequest(dates=["2024-11-26", "2024-11-25"]).dates == [
            "2024-11-26",
            "2024-11-25",
        ]


class TestParticipantRequests:
    """Tests for participant requests."""

    def test_create_participant(self):
        """Names are stripped and slots kept in order."""
        request = CreateParticipantRequest.model_validate({
            "roomCode": "AB12CD",
            "name": "  max ",
            "enableTimes": ["2024-11-25 09:00", "2024-11-25 09:30"],
        })

        assert request.name == "max"
        assert request.enable_times == ["2024-11-25 09:00", "2024-11-25 09:30"]

    def test_empty_name(self):
        """Blank names are rejected."""
        with pytest.raises(pydantic.ValidationError, match="name must not be empty"):
            CreateParticipantRequest(room_code="AB12CD", name="   ")

    def test_long_name(self):
        """Names are limited in length."""
        with pytest.raises(pydantic.ValidationError):
            CreateParticipantRequest(room_code="AB12CD", name="x" * 31)

    def test_invalid_slot(self):
        """Slots must be a date or a date and time."""
        with pytest.raises(pydantic.ValidationError, match="Invalid slot"):
            UpdateAvailabilityRequest(enable_times=["2024-11-25T09:00"])

    def test_slot_with_trailing_newline(self):
        """Slots must not carry trailing characters."""
        with pytest.raises(pydantic.ValidationError, match="Invalid slot"):
            UpdateAvailabilityRequest(enable_times=["2024-01-01 09:00\n"])
        with pytest.raises(pydantic.ValidationError, match="Invalid slot"):
            UpdateAvailabilityRequest(enable_times=["2024-01-01\n"])

    def test_accepts_both_slot_kinds(self):
        """Bare dates and date+time slots are well-formed."""
        request = UpdateAvailabilityRequest.model_validate(
            {"enableTimes": ["2024-11-25", "2024-11-25 09:00"]}
        )

        assert len(request.enable_times) == 2
