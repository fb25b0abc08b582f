"""Pydantic models for room submissions and the normalized room payload.

A room is submitted as a 2D polygon (ordered vertices, implicitly closed) plus
free-form metadata.  The normalizer lifts it into a 3D-ready model of integer
ground-plane points and the wall segments joining them.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── points ────────────────────────────────────────────────────────────
class Point2D(BaseModel):
    """A polygon vertex exactly as submitted (unrounded)."""

    x: float
    y: float


class Point3D(BaseModel):
    """A lifted output vertex on the ground plane."""

    x: int
    y: int
    z: int = 0


# ── walls ─────────────────────────────────────────────────────────────
class WallSegment(BaseModel):
    """Edge between two consecutive vertices, by index into ``points``."""

    start: int
    end: int
    length: float = Field(description="Euclidean length on the unrounded input coordinates")


# ── submission / output ───────────────────────────────────────────────
class RoomSubmission(BaseModel):
    """A validated polygon.  Extra metadata fields are carried through as-is."""

    model_config = ConfigDict(extra="allow")

    points: list[Point2D] = Field(min_length=1)


class ProcessedRoom(BaseModel):
    """Normalized room: lifted points and the closed cycle of walls."""

    points: list[Point3D] = Field(default_factory=list)
    walls: list[WallSegment] = Field(default_factory=list)


# ── response envelope ─────────────────────────────────────────────────
class ResponseStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ProcessResponse(BaseModel):
    """Envelope returned for every process-room request."""

    status: ResponseStatus
    message: str
    data: Optional[ProcessedRoom] = None

    def to_payload(self) -> dict:
        """JSON-ready dict; ``data`` is omitted on failure."""
        return self.model_dump(mode="json", exclude_none=True)


# ── registry records ──────────────────────────────────────────────────
class RoomCreate(BaseModel):
    """Body for creating a room in the registry.

    ``name`` and ``points`` are the known fields; anything else is kept in
    the open extension map (``model_extra``).
    """

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    points: list[Point2D] = Field(default_factory=list)


class Room(BaseModel):
    """A stored room with registry-assigned id and timestamps."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    points: list[Point2D] = Field(default_factory=list)
    created_at: str
    updated_at: str
