"""Input validation for room submissions.

Gatekeeper in front of the normalizer: nothing is computed until the
submitted polygon is well-formed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from packages.core.errors import ComputationError, ValidationError
from packages.core.types import RoomSubmission


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_submission(payload: Any) -> RoomSubmission:
    """Check *payload* and return it as a :class:`RoomSubmission`.

    Raises :class:`ValidationError` naming the offending field when
    ``points`` is missing, not a list, empty, or holds a vertex without
    numeric ``x`` and ``y``.  Integers too large for a float raise
    :class:`ComputationError`.  Other fields are passed through unchecked.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("submission must be a JSON object", field="body")
    if "points" not in payload:
        raise ValidationError("points is required", field="points")

    points = payload["points"]
    if not isinstance(points, (list, tuple)):
        raise ValidationError("points must be a list of vertices", field="points")
    if len(points) < 1:
        raise ValidationError("points must contain at least one vertex", field="points")

    for i, point in enumerate(points):
        if not isinstance(point, Mapping):
            raise ValidationError(f"points[{i}] must be an object with x and y", field=f"points[{i}]")
        for axis in ("x", "y"):
            field = f"points[{i}].{axis}"
            if axis not in point:
                raise ValidationError(f"{field} is required", field=field)
            if not _is_number(point[axis]):
                raise ValidationError(f"{field} must be a number", field=field)
            try:
                float(point[axis])
            except OverflowError:
                raise ComputationError(f"{field} is too large", {"field": field}) from None

    return RoomSubmission.model_validate(dict(payload))
