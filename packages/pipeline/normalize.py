"""Polygon-to-wall normalization: lift vertices to 3D and close the wall cycle."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from packages.core.errors import ComputationError
from packages.core.types import Point2D, Point3D, ProcessedRoom, RoomSubmission, WallSegment

logger = logging.getLogger(__name__)

GROUND_Z = 0


def _as_array(points: Sequence[Point2D]) -> np.ndarray:
    """Stack points into an (N, 2) float64 array, rejecting non-finite values."""
    xy = np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)
    bad = ~np.isfinite(xy).all(axis=1)
    if bad.any():
        i = int(np.flatnonzero(bad)[0])
        raise ComputationError(
            f"points[{i}] has a non-finite coordinate",
            {"field": f"points[{i}]"},
        )
    return xy


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, ties away from zero (2.5 → 3, -2.5 → -3).

    ``np.round`` rounds ties to even, and ``floor(x + 0.5)`` misrounds
    0.49999999999999994, so the fractional part is compared directly.
    """
    mag = np.abs(values)
    whole = np.floor(mag)
    rounded = whole + (mag - whole >= 0.5)
    return np.copysign(rounded, values)


def lift_points(points: Sequence[Point2D]) -> list[Point3D]:
    """Round each vertex and place it on the ground plane (z = 0)."""
    xy = round_half_away(_as_array(points))
    return [Point3D(x=int(x), y=int(y), z=GROUND_Z) for x, y in xy]


def build_walls(points: Sequence[Point2D]) -> list[WallSegment]:
    """Return one wall per vertex, joining *i* to *(i + 1) mod N*.

    Lengths use the unrounded input coordinates.  A single vertex yields a
    zero-length wall from the point to itself.
    """
    xy = _as_array(points)
    n = len(xy)
    nxt = np.roll(xy, -1, axis=0)
    with np.errstate(over="ignore", invalid="ignore"):
        lengths = np.hypot(nxt[:, 0] - xy[:, 0], nxt[:, 1] - xy[:, 1])

    overflow = ~np.isfinite(lengths)
    if overflow.any():
        i = int(np.flatnonzero(overflow)[0])
        raise ComputationError(f"length of wall {i} is not finite", {"field": f"walls[{i}]"})

    return [
        WallSegment(start=i, end=(i + 1) % n, length=float(lengths[i]))
        for i in range(n)
    ]


def normalize_room(submission: RoomSubmission) -> ProcessedRoom:
    """Transform a validated submission into a :class:`ProcessedRoom`."""
    logger.info("Normalizing polygon with %d vertices …", len(submission.points))
    points = lift_points(submission.points)
    walls = build_walls(submission.points)
    logger.info("Built %d walls (perimeter %.3f)", len(walls), sum(w.length for w in walls))
    return ProcessedRoom(points=points, walls=walls)
