"""In-memory, append-only room registry with sequential integer ids."""

from __future__ import annotations

import itertools
import logging
import threading
from datetime import datetime, timezone

from packages.core.errors import RoomNotFoundError
from packages.core.types import Room, RoomCreate

logger = logging.getLogger(__name__)

# Keys owned by the registry; never taken from a submission
_RESERVED = frozenset({"id", "created_at", "updated_at"})


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class RoomRegistry:
    """Thread-safe store for submitted rooms.

    Ids start at 1 and increase by one per :meth:`create`; id assignment and
    the append happen under a single lock.  Nothing survives a restart.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._rooms: list[Room] = []

    def create(self, fields: RoomCreate) -> Room:
        extra = {k: v for k, v in (fields.model_extra or {}).items() if k not in _RESERVED}
        timestamp = _now()
        with self._lock:
            room = Room(
                **extra,
                id=next(self._ids),
                name=fields.name or f"Room {timestamp}",
                points=fields.points,
                created_at=timestamp,
                updated_at=timestamp,
            )
            self._rooms.append(room)
        logger.info("Stored room %d (%r, %d points)", room.id, room.name, len(room.points))
        return room

    def list(self) -> list[Room]:
        """Return all rooms in creation order (a snapshot copy)."""
        with self._lock:
            return list(self._rooms)

    def get(self, room_id: int) -> Room:
        """Return the room with *room_id* or raise :class:`RoomNotFoundError`."""
        with self._lock:
            for room in self._rooms:
                if room.id == room_id:
                    return room
        raise RoomNotFoundError(room_id)

    def clear(self) -> None:
        """Drop every room and restart ids at 1."""
        with self._lock:
            self._rooms.clear()
            self._ids = itertools.count(1)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)
