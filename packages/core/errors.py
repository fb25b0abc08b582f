"""Exception hierarchy for the room normalizer and registry."""

from __future__ import annotations


class RoomGeometryError(Exception):
    """Base exception for all project-specific errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(RoomGeometryError):
    """Raised when a submission is malformed (missing/invalid ``points``)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, {"field": field} if field else None)
        self.field = field


class ComputationError(RoomGeometryError):
    """Raised when geometry arithmetic produces a non-finite value."""


class RoomNotFoundError(RoomGeometryError):
    """Raised when a registry lookup misses."""

    def __init__(self, room_id: int) -> None:
        super().__init__("Room not found", {"id": str(room_id)})
        self.room_id = room_id
