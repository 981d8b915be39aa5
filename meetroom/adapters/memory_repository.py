"""
In-memory room repository, used by tests and short-lived sessions.
"""

from copy import deepcopy
from typing import Dict, List, Optional

from ..domain.models import Room, UserAvailability


class InMemoryRoomRepository:
    """
    Keeps rooms and participants in dictionaries.

    Records are copied on the way in and out so callers cannot mutate
    stored state behind the repository's back.
    """

    def __init__(self):
        self._rooms: Dict[str, Room] = {}
        self._participants: Dict[str, List[UserAvailability]] = {}

    def get_room(self, code: str) -> Optional[Room]:
        room = self._rooms.get(code)
        return deepcopy(room) if room else None

    def save_room(self, room: Room) -> Room:
        self._rooms[room.code] = deepcopy(room)
        self._participants.setdefault(room.code, [])
        return room

    def list_participants(self, room_code: str) -> List[UserAvailability]:
        return [deepcopy(user) for user in self._participants.get(room_code, [])]

    def get_participant(self, room_code: str, name: str) -> Optional[UserAvailability]:
        for user in self._participants.get(room_code, []):
            if user.name == name:
                return deepcopy(user)
        return None

    def save_participant(self, participant: UserAvailability) -> UserAvailability:
        users = self._participants.setdefault(participant.room_code, [])
        for idx, user in enumerate(users):
            if user.name == participant.name:
                users[idx] = deepcopy(participant)
                break
        else:
            users.append(deepcopy(participant))
        return participant
