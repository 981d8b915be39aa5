"""
Room repository persisted to a single JSON file.
"""

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..domain.exceptions import RepositoryError
from ..domain.models import Room, UserAvailability

logger = logging.getLogger(__name__)


class JsonRoomRepository:
    """
    Stores rooms and participants in a JSON document.

    File format:
    {
        "rooms": {"AB12CD": {"code": "AB12CD", "dates": [...], "dateOnly": true, ...}},
        "participants": {"AB12CD": [{"roomCode": "AB12CD", "name": "...", "enableTimes": [...]}]}
    }

    The whole document is rewritten on every save; the last write wins.
    Write failures raise RepositoryError.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data = self._load()

    def _load(self) -> Dict[str, Any]:
        """Load the JSON document, or start empty if the file doesn't exist."""
        if not self.path.exists():
            return {"rooms": {}, "participants": {}}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise RepositoryError(f"Invalid JSON in {self.path}: {exc}") from exc
        except OSError as exc:
            raise RepositoryError(f"Could not read {self.path}: {exc}") from exc

        if not isinstance(data, dict):
            raise RepositoryError(f"{self.path} must contain a mapping at the root level.")

        data.setdefault("rooms", {})
        data.setdefault("participants", {})
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        """
        Write the document, then adopt it as the in-memory state.

        The document goes to a temporary file that replaces the store, so a
        failed write leaves both the old file and the in-memory data intact.
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            tmp_path.replace(self.path)
        except OSError as exc:
            logger.error("Could not write room data to %s: %s", self.path, exc)
            tmp_path.unlink(missing_ok=True)
            raise RepositoryError(f"Could not write {self.path}: {exc}") from exc
        self._data = data

    def get_room(self, code: str) -> Optional[Room]:
        record = self._data["rooms"].get(code)
        return Room.from_dict(record) if record else None

    def save_room(self, room: Room) -> Room:
        data = deepcopy(self._data)
        data["rooms"][room.code] = room.to_dict()
        data["participants"].setdefault(room.code, [])
        self._save(data)
        return room

    def list_participants(self, room_code: str) -> List[UserAvailability]:
        return [
            UserAvailability.from_dict(record)
            for record in self._data["participants"].get(room_code, [])
        ]

    def get_participant(self, room_code: str, name: str) -> Optional[UserAvailability]:
        for record in self._data["participants"].get(room_code, []):
            if record.get("name") == name:
                return UserAvailability.from_dict(record)
        return None

    def save_participant(self, participant: UserAvailability) -> UserAvailability:
        data = deepcopy(self._data)
        records = data["participants"].setdefault(participant.room_code, [])
        for idx, record in enumerate(records):
            if record.get("name") == participant.name:
                records[idx] = participant.to_dict()
                break
        else:
            records.append(participant.to_dict())
        self._save(data)
        return participant
