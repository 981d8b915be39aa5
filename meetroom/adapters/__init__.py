"""
Adapters layer - Persistence for rooms and participants.
"""

from .json_repository import JsonRoomRepository
from .memory_repository import InMemoryRoomRepository

__all__ = ["JsonRoomRepository", "InMemoryRoomRepository"]
