"""
Domain models for rooms, participant availability and aggregated results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def slot_date(slot: str) -> str:
    """Return the date component of a slot (``YYYY-MM-DD HH:MM`` -> ``YYYY-MM-DD``)."""
    return slot.split(" ")[0]


def is_timed_slot(slot: str) -> bool:
    """Check whether a slot carries a time-of-day suffix."""
    return " " in slot


@dataclass
class Room:
    """
    A scheduling event with candidate dates and a generated access code.

    Invariants (checked once at creation, by the RangeValidator):
    dates are unique, sorted and within the booking horizon; start_time and
    end_time are set exactly when date_only is False.
    """
    code: str
    dates: List[str]
    date_only: bool = False
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase field names of the wire format."""
        return {
            "code": self.code,
            "dates": list(self.dates),
            "dateOnly": self.date_only,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Room":
        return cls(
            code=data["code"],
            dates=list(data["dates"]),
            date_only=data.get("dateOnly", False),
            start_time=data.get("startTime"),
            end_time=data.get("endTime"),
        )


@dataclass
class UserAvailability:
    """
    One participant's submitted slots within a single room.

    Slots are bare dates in date-only rooms and ``YYYY-MM-DD HH:MM``
    composites in timed rooms.
    """
    room_code: str
    name: str
    enable_times: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roomCode": self.room_code,
            "name": self.name,
            "enableTimes": list(self.enable_times),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserAvailability":
        return cls(
            room_code=data["roomCode"],
            name=data["name"],
            enable_times=list(data.get("enableTimes", [])),
        )


@dataclass(frozen=True)
class AggregationResult:
    """
    Histogram of how many participants are available per date.

    Keys keep the order of their first occurrence.
    """
    enable_times: Dict[str, int]

    def most_popular(self) -> List[str]:
        """Return the date(s) with the highest count, in histogram order."""
        if not self.enable_times:
            return []
        best = max(self.enable_times.values())
        return [slot for slot, count in self.enable_times.items() if count == best]


@dataclass(frozen=True)
class RoomResult:
    """A room's fields together with its aggregated availability."""
    room: Room
    aggregation: AggregationResult

    @property
    def enable_times(self) -> Dict[str, int]:
        return self.aggregation.enable_times

    def to_dict(self) -> Dict[str, Any]:
        payload = self.room.to_dict()
        payload["enableTimes"] = dict(self.aggregation.enable_times)
        return payload
