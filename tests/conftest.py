"""Shared test fixtures – sample room submissions."""

from __future__ import annotations

import pytest


def _points(*coords: tuple[float, float]) -> list[dict]:
    return [{"x": x, "y": y} for x, y in coords]


@pytest.fixture()
def rectangle_payload() -> dict:
    """A 3 × 4 rectangle, counter-clockwise from the origin."""
    return {"name": "Study", "points": _points((0, 0), (3, 0), (3, 4), (0, 4))}


@pytest.fixture()
def single_point_payload() -> dict:
    return {"points": _points((1.4, 1.6))}


@pytest.fixture()
def irregular_payload() -> dict:
    """An L-shaped room with fractional coordinates and extra metadata."""
    return {
        "name": "Kitchen",
        "floor": 2,
        "points": _points(
            (0.2, 0.1),
            (5.7, 0.1),
            (5.7, 2.5),
            (2.49, 2.5),
            (2.49, 4.8),
            (-0.5, 4.8),
        ),
    }
