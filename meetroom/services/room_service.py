"""
Application services for creating rooms and reading their results.

The service coordinates persistence via a repository adapter and delegates
the rules and the counting to the domain-level ``RangeValidator`` and
``AvailabilityAggregator``. The repository is described by a small protocol
so tests can use the in-memory adapter.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol

from ..domain.aggregator import AvailabilityAggregator
from ..domain.exceptions import ConflictError, NotFoundError
from ..domain.models import Room, RoomResult, UserAvailability
from ..domain.range_validator import RangeValidator
from ..schemas import CreateRoomRequest

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 10


class RoomRepositoryProtocol(Protocol):
    """Protocol describing the persistence behaviour needed by the services."""

    def get_room(self, code: str) -> Optional[Room]:
        """Return the room with this code, or None."""

    def save_room(self, room: Room) -> Room:
        """Insert or replace a room."""

    def list_participants(self, room_code: str) -> List[UserAvailability]:
        """Return every participant record of a room."""

    def get_participant(self, room_code: str, name: str) -> Optional[UserAvailability]:
        """Return one participant of a room, or None."""

    def save_participant(self, participant: UserAvailability) -> UserAvailability:
        """Insert or replace a participant record."""


class RoomService:
    """
    Orchestrates room creation and result retrieval.

    Validation always runs before anything is persisted; a request with any
    violation is rejected as a whole.
    """

    def __init__(
        self,
        repository: RoomRepositoryProtocol,
        validator: RangeValidator,
        code_generator: Callable[[], str],
        aggregator: AvailabilityAggregator | None = None,
    ) -> None:
        self._repository = repository
        self._validator = validator
        self._code_generator = code_generator
        self._aggregator = aggregator or AvailabilityAggregator()

    def create_room(self, request: CreateRoomRequest) -> Room:
        """
        Validate the candidate window and persist a new room.

        Raises:
            ValidationError: carrying every violated rule
        """
        self._validator.validate(
            dates=request.dates,
            date_only=request.date_only,
            start_time=request.start_time,
            end_time=request.end_time,
        )

        room = Room(
            code=self._unused_code(),
            dates=list(request.dates),
            date_only=request.date_only,
            start_time=request.start_time,
            end_time=request.end_time,
        )
        self._repository.save_room(room)

        logger.info(
            "Created room %s with %d date(s) (date_only=%s)",
            room.code,
            len(room.dates),
            room.date_only,
        )
        return room

    def _unused_code(self) -> str:
        """Draw codes until one is not taken by an existing room."""
        for _ in range(MAX_CODE_ATTEMPTS):
            code = self._code_generator()
            if self._repository.get_room(code) is None:
                return code
            logger.warning("Room code %s is already taken, drawing another", code)
        raise ConflictError(
            f"Could not find a free room code after {MAX_CODE_ATTEMPTS} attempts"
        )

    def find_room(self, code: str) -> Room:
        """Return the room with this code."""
        room = self._repository.get_room(code)
        if room is None:
            raise NotFoundError(f"Room with code {code} not found")
        return room

    def is_date_only(self, code: str) -> bool:
        """Return whether participants of this room pick whole days."""
        return self.find_room(code).date_only

    def get_room_result(self, code: str) -> RoomResult:
        """
        Aggregate every participant's slots into a per-date histogram.

        The raw participant list is not part of the result.
        """
        room = self.find_room(code)
        participants = self._repository.list_participants(code)

        aggregation = self._aggregator.aggregate(room.date_only, participants)
        logger.debug(
            "Aggregated %d participant(s) of room %s into %d slot(s)",
            len(participants),
            code,
            len(aggregation.enable_times),
        )

        return RoomResult(room=room, aggregation=aggregation)
