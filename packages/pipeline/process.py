"""End-to-end pipeline: raw submission → validated polygon → normalized room → envelope."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from packages.core.errors import RoomGeometryError
from packages.core.result import Err, Ok, Result
from packages.core.types import ProcessedRoom, ProcessResponse, ResponseStatus
from packages.pipeline.normalize import normalize_room
from packages.pipeline.validate import validate_submission

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Room processed successfully"


def process_room(payload: Any) -> Result[ProcessedRoom, RoomGeometryError]:
    """Run validation and normalization on a single submission.

    1. Validate the submitted polygon.
    2. Lift points and build the closed wall cycle.

    Typed pipeline errors come back as :class:`Err`; they are never raised.
    """
    try:
        submission = validate_submission(payload)
        room = normalize_room(submission)
    except RoomGeometryError as e:
        logger.warning("Room rejected (%s): %s", type(e).__name__, e.message)
        return Err(e)
    return Ok(room)


def build_envelope(result: Result[ProcessedRoom, RoomGeometryError]) -> ProcessResponse:
    """Translate a pipeline result into the outward response envelope."""
    if isinstance(result, Ok):
        return ProcessResponse(
            status=ResponseStatus.SUCCESS,
            message=SUCCESS_MESSAGE,
            data=result.value,
        )
    return ProcessResponse(status=ResponseStatus.ERROR, message=result.error.message)


def process_room_to_json(
    input_path: str | Path,
    output_path: str | Path | None = None,
) -> str:
    """Normalize the room stored in a JSON file and write the envelope next to it.

    Returns the JSON string.
    """
    input_path = Path(input_path)
    logger.info("Loading %s …", input_path.name)
    try:
        payload = json.loads(input_path.read_bytes())
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        # Malformed files are reported through the envelope like any bad submission
        logger.warning("Could not parse %s: %s", input_path.name, e)
        reason = e.msg if isinstance(e, json.JSONDecodeError) else e.reason
        response = ProcessResponse(status=ResponseStatus.ERROR, message=f"invalid JSON: {reason}")
    else:
        response = build_envelope(process_room(payload))

    json_str = json.dumps(response.to_payload(), indent=2)

    if output_path is None:
        output_path = input_path.with_suffix(".normalized.json")
    Path(output_path).write_text(json_str)
    logger.info("Wrote normalized room → %s", output_path)
    return json_str
