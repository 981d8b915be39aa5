"""
Reduces participants' submitted slots into a per-date availability histogram.

This is pure domain logic - no persistence, no I/O.
"""

from collections import Counter
from typing import Iterable, List

from .models import AggregationResult, UserAvailability, slot_date


class AvailabilityAggregator:
    """
    Counts how many participants are available on each slot.

    Algorithm:
    1. Date-only rooms: flatten every participant's dates as submitted
    2. Timed rooms: reduce each participant to the distinct dates they picked,
       so several times on one date count once for that participant
    3. Sort the flattened slots
    4. Count occurrences, keeping the order of first occurrence
    """

    def aggregate(
        self,
        date_only: bool,
        submissions: Iterable[UserAvailability],
    ) -> AggregationResult:
        if date_only:
            slots = self._flatten_dates(submissions)
        else:
            slots = self._flatten_timed(submissions)

        histogram = Counter(sorted(slots))

        return AggregationResult(enable_times=dict(histogram))

    @staticmethod
    def _flatten_dates(submissions: Iterable[UserAvailability]) -> List[str]:
        """Flatten date-only submissions without de-duplication."""
        slots: List[str] = []
        for submission in submissions:
            slots.extend(submission.enable_times)
        return slots

    @staticmethod
    def _flatten_timed(submissions: Iterable[UserAvailability]) -> List[str]:
        """
        Flatten timed submissions at date granularity.

        Example:
        User A: [2024-01-01 09:00, 2024-01-01 10:00, 2024-01-02 09:00]
        User B: [2024-01-01 13:00]
        Result: [2024-01-01, 2024-01-02, 2024-01-01]
        """
        slots: List[str] = []
        for submission in submissions:
            # dict.fromkeys keeps first-occurrence order while de-duplicating
            distinct_dates = dict.fromkeys(
                slot_date(slot) for slot in submission.enable_times
            )
            slots.extend(distinct_dates)
        return [slot_date(slot) for slot in slots]
