"""REST API routes for PatrolLink."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from constants import UNKNOWN_TOKEN
from ..services.command_service import command_service

router = APIRouter()


class TranscriptRequest(BaseModel):
    text: str | None = None


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"status": "error", "message": message}, status_code=status_code)


@router.post("/sessions/{session_id}/parse")
async def parse_transcript(session_id: str, body: TranscriptRequest):
    """Parse an utterance; returns descriptors, tokens and the updated context."""
    if not body.text or not body.text.strip():
        return _error("No text provided")
    result = command_service.process_transcript(session_id, body.text)
    return JSONResponse(result.to_dict())


@router.post("/bots/{bot_id}/nlp")
async def bot_nlp(bot_id: str, body: TranscriptRequest):
    """Token-only form: {"command": [...]} or {"command": "unknown"}."""
    if not body.text or not body.text.strip():
        return JSONResponse({"command": UNKNOWN_TOKEN}, status_code=400)
    result = command_service.process_transcript(bot_id, body.text)
    if not result.actionable:
        return JSONResponse({"command": UNKNOWN_TOKEN})
    return JSONResponse({"command": result.tokens})


@router.get("/sessions/{session_id}/context")
async def get_context(session_id: str):
    return JSONResponse({"session_id": session_id, "context": command_service.get_context(session_id)})


@router.post("/sessions/{session_id}/reset")
async def reset_session(session_id: str):
    context = command_service.reset_session(session_id)
    return JSONResponse({"status": "ok", "session_id": session_id, "context": context})


@router.delete("/sessions/{session_id}")
async def close_session(session_id: str):
    if not command_service.close_session(session_id):
        return _error(f"Unknown session: {session_id}", status_code=404)
    return JSONResponse({"status": "ok", "session_id": session_id})


@router.get("/sessions/{session_id}/transcripts")
async def get_transcripts(session_id: str):
    return JSONResponse({
        "session_id": session_id,
        "transcripts": command_service.get_transcripts(session_id),
    })


@router.get("/sessions")
async def list_sessions():
    return JSONResponse({"sessions": command_service.sessions.session_ids()})
