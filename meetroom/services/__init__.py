"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .participant_service import ParticipantService
from .room_service import RoomRepositoryProtocol, RoomService

__all__ = ["ParticipantService", "RoomRepositoryProtocol", "RoomService"]
