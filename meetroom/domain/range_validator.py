"""
Business rules for the candidate dates and time window of a new room.

Pure domain logic: the only outside input is the current instant, which is
read through an injectable clock so tests can pin "today".
"""

from typing import Callable, List, Optional, Sequence

import pendulum
from pendulum import DateTime

from .exceptions import ValidationError

DATES_LENGTH_MESSAGE = "dates must be between 1 and {max_dates}"
DATES_UNIQUE_MESSAGE = "dates must be unique"
DATES_SORTED_MESSAGE = "dates must be sorted"
FIRST_DATE_MESSAGE = "first date must be today no matter how early it is."
HORIZON_MESSAGE = "dates must be within {months} months"
TIMES_REQUIRED_MESSAGE = "startTime and endTime are required when dateOnly is false"
TIMES_FORBIDDEN_MESSAGE = "startTime and endTime are not allowed when dateOnly is true"
TIME_ORDER_MESSAGE = "startTime must be earlier than endTime"

Clock = Callable[[], DateTime]


def _utc_now() -> DateTime:
    return pendulum.now("UTC")


class RangeValidator:
    """
    Validates the dates and optional time window proposed for a room.

    Every rule is evaluated and all violations are reported together:
    1. Between 1 and ``max_dates`` dates
    2. Dates are unique
    3. Dates are already sorted ascending
    4. The first date is not before "today" in the reference timezone
    5. The last date is within ``horizon_months`` of "today"
    6. Times are given exactly when the room is not date-only
    7. The start time is before the end time

    Rule 4 compares month and day-of-month separately and ignores the year,
    so a first date of April 5th is rejected when today is March 10th.
    Existing rooms were accepted under that rule and it is kept unchanged.
    """

    def __init__(
        self,
        utc_offset_hours: int = 9,
        max_dates: int = 60,
        horizon_months: int = 6,
        clock: Optional[Clock] = None,
    ):
        self.utc_offset_hours = utc_offset_hours
        self.max_dates = max_dates
        self.horizon_months = horizon_months
        self._clock = clock or _utc_now
        # Flat offset, no DST.
        self._timezone = pendulum.fixed_timezone(utc_offset_hours * 3600)

    def reference_now(self) -> DateTime:
        """Current instant in the reference timezone."""
        return self._clock().in_timezone(self._timezone)

    def max_date(self, reference: Optional[DateTime] = None) -> str:
        """Latest date a room may include, formatted ``YYYY-MM-DD``."""
        reference = reference or self.reference_now()
        # pendulum clamps the day: Aug 31 + 6 months -> Feb 28/29.
        return reference.add(months=self.horizon_months).format("YYYY-MM-DD")

    def validate(
        self,
        dates: Sequence[str],
        date_only: bool,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> None:
        """
        Validate a room's candidate window.

        Raises:
            ValidationError: carrying every violated rule
        """
        errors = self.collect_violations(dates, date_only, start_time, end_time)
        if errors:
            raise ValidationError(errors)

    def collect_violations(
        self,
        dates: Sequence[str],
        date_only: bool,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> List[str]:
        """Return the messages of all violated rules (empty when valid)."""
        dates = list(dates)
        errors: List[str] = []

        reference = self.reference_now()

        if len(dates) < 1 or len(dates) > self.max_dates:
            errors.append(DATES_LENGTH_MESSAGE.format(max_dates=self.max_dates))

        if len(set(dates)) != len(dates):
            errors.append(DATES_UNIQUE_MESSAGE)

        sorted_dates = sorted(dates)
        if dates != sorted_dates:
            errors.append(DATES_SORTED_MESSAGE)

        if dates and self._starts_in_past(dates[0], reference):
            errors.append(FIRST_DATE_MESSAGE)

        if sorted_dates and sorted_dates[-1] > self.max_date(reference):
            errors.append(HORIZON_MESSAGE.format(months=self.horizon_months))

        if not date_only and (not start_time or not end_time):
            errors.append(TIMES_REQUIRED_MESSAGE)

        if date_only and (start_time or end_time):
            errors.append(TIMES_FORBIDDEN_MESSAGE)

        if start_time and end_time and not start_time < end_time:
            errors.append(TIME_ORDER_MESSAGE)

        return errors

    @staticmethod
    def _starts_in_past(first_date: str, reference: DateTime) -> bool:
        month = int(first_date[5:7])
        day = int(first_date[8:10])
        return month < reference.month or day < reference.day
