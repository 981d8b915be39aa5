"""
Domain layer - Pure business logic without external dependencies.
"""

from .aggregator import AvailabilityAggregator
from .code_generator import RoomCodeGenerator
from .exceptions import (
    AuthorizationError,
    ConflictError,
    MeetroomError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from .models import AggregationResult, Room, RoomResult, UserAvailability
from .range_validator import RangeValidator

__all__ = [
    "AggregationResult",
    "AuthorizationError",
    "AvailabilityAggregator",
    "ConflictError",
    "MeetroomError",
    "NotFoundError",
    "RangeValidator",
    "RepositoryError",
    "Room",
    "RoomCodeGenerator",
    "RoomResult",
    "UserAvailability",
    "ValidationError",
]
