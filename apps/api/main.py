"""FastAPI application for the room geometry normalizer.

Stores submitted rooms in an in-memory registry and turns floor-plan
polygons into the normalized points + walls payload consumed downstream.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import Body, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from packages.core import config
from packages.core.errors import RoomNotFoundError, ValidationError
from packages.core.result import Ok
from packages.core.types import ProcessResponse, ResponseStatus, RoomCreate
from packages.pipeline.process import build_envelope, process_room
from packages.registry.store import RoomRegistry

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Room Geometry Normalizer API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── In-memory store (lost on restart) ────────────────────────────────
registry = RoomRegistry()


def _status_for(error: Exception) -> int:
    if isinstance(error, ValidationError):
        return 400
    return 500


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/rooms")
def create_room(req: RoomCreate):
    """Store a room; the registry assigns its id and timestamps."""
    room = registry.create(req)
    logger.info(f"🏠 Created room {room.id}: {room.name}")
    return JSONResponse(content=json.loads(room.model_dump_json()))


@app.get("/api/rooms")
def list_rooms():
    """Return every stored room in creation order."""
    rooms = registry.list()
    logger.info(f"📋 Listing {len(rooms)} rooms")
    return JSONResponse(content=[json.loads(r.model_dump_json()) for r in rooms])


@app.get("/api/rooms/{room_id}")
def get_room(room_id: int):
    try:
        room = registry.get(room_id)
    except RoomNotFoundError as e:
        logger.info(f"🔍 Room {e.room_id} not found")
        return JSONResponse(status_code=404, content={"error": e.message})
    return JSONResponse(content=json.loads(room.model_dump_json()))


@app.post("/api/process-room")
def process_room_endpoint(payload: Any = Body(...)):
    """Normalize a submitted polygon into lifted points and closed walls.

    Always answers with the ``{status, message[, data]}`` envelope.
    """
    logger.info("📐 Processing room submission")
    try:
        result = process_room(payload)
    except Exception as e:
        logger.exception("❌ Processing failed")
        envelope = ProcessResponse(status=ResponseStatus.ERROR, message=str(e))
        return JSONResponse(status_code=500, content=envelope.to_payload())

    envelope = build_envelope(result)
    if isinstance(result, Ok):
        logger.info(f"✅ Room processed: {len(result.value.walls)} walls")
        return JSONResponse(content=envelope.to_payload())

    logger.info(f"⚠️  Room rejected: {envelope.message}")
    return JSONResponse(status_code=_status_for(result.error), content=envelope.to_payload())
