"""
Application service for participants joining a room and editing their slots.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..domain.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from ..domain.models import Room, UserAvailability, is_timed_slot
from ..schemas import CreateParticipantRequest, UpdateAvailabilityRequest
from .room_service import RoomRepositoryProtocol

logger = logging.getLogger(__name__)


class ParticipantService:
    """
    Registers participants and replaces their availability.

    Only the participant themselves may update their record; who the current
    participant is comes from the caller's authentication layer.
    """

    def __init__(self, repository: RoomRepositoryProtocol) -> None:
        self._repository = repository

    def register(self, request: CreateParticipantRequest) -> UserAvailability:
        """
        Add a participant to a room.

        Raises:
            NotFoundError: If the room doesn't exist
            ConflictError: If the name is already taken in the room
            ValidationError: If slots don't match the room's mode
        """
        room = self._get_room(request.room_code)

        if self._repository.get_participant(room.code, request.name) is not None:
            raise ConflictError(
                f"Participant '{request.name}' already exists in room {room.code}"
            )

        self._check_slots_match_room(room, request.enable_times)

        participant = UserAvailability(
            room_code=room.code,
            name=request.name,
            enable_times=list(request.enable_times),
        )
        self._repository.save_participant(participant)

        logger.info("Registered participant %s in room %s", participant.name, room.code)
        return participant

    def find_participant(self, room_code: str, name: str) -> UserAvailability:
        participant = self._repository.get_participant(room_code, name)
        if participant is None:
            raise NotFoundError(f"Participant '{name}' not found in room {room_code}")
        return participant

    def update_availability(
        self,
        current_user: UserAvailability,
        room_code: str,
        request: UpdateAvailabilityRequest,
    ) -> UserAvailability:
        """
        Replace the current participant's slots (last write wins).

        Raises:
            AuthorizationError: If the participant doesn't belong to this room
            NotFoundError: If the room or participant doesn't exist
            ValidationError: If slots don't match the room's mode
        """
        if current_user.room_code != room_code:
            raise AuthorizationError(
                f"Participant '{current_user.name}' may not edit room {room_code}"
            )

        room = self._get_room(room_code)
        participant = self.find_participant(room_code, current_user.name)

        self._check_slots_match_room(room, request.enable_times)

        participant.enable_times = list(request.enable_times)
        self._repository.save_participant(participant)

        logger.info(
            "Updated availability of %s in room %s (%d slot(s))",
            participant.name,
            room_code,
            len(participant.enable_times),
        )
        return participant

    def _get_room(self, code: str) -> Room:
        room = self._repository.get_room(code)
        if room is None:
            raise NotFoundError(f"Room with code {code} not found")
        return room

    @staticmethod
    def _check_slots_match_room(room: Room, slots: Sequence[str]) -> None:
        """Date-only rooms take bare dates, timed rooms take date+time slots."""
        mismatched: List[str] = [
            slot for slot in slots if is_timed_slot(slot) == room.date_only
        ]
        if mismatched:
            expected = "YYYY-MM-DD" if room.date_only else "YYYY-MM-DD HH:MM"
            raise ValidationError(
                [f"slot '{slot}' must use the {expected} format" for slot in mismatched]
            )
