"""WebSocket endpoint — connection management + real-time transcript protocol."""

from __future__ import annotations

import json
import time

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..services.command_service import command_service

router = APIRouter()

# Connected WebSocket clients
connected_clients: list[WebSocket] = []

DEFAULT_SESSION_ID = "default"


async def broadcast(message: dict) -> None:
    """Send a message to all connected frontend clients."""
    text = json.dumps(message, default=str)
    disconnected = []
    for client in connected_clients:
        try:
            await client.send_text(text)
        except Exception:
            disconnected.append(client)
    for client in disconnected:
        if client in connected_clients:
            connected_clients.remove(client)


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()
    connected_clients.append(websocket)
    print(f"[Server] Client connected ({len(connected_clients)} total)")

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await _send_error(websocket, "Malformed JSON frame")
                continue
            if not isinstance(message, dict):
                await _send_error(websocket, "Expected a JSON object")
                continue
            await _handle_client_message(message, websocket)
    except WebSocketDisconnect:
        if websocket in connected_clients:
            connected_clients.remove(websocket)
        print(f"[Server] Client disconnected ({len(connected_clients)} total)")
    except Exception as e:
        if websocket in connected_clients:
            connected_clients.remove(websocket)
        print(f"[Server] WebSocket error: {e}")


async def _send_error(websocket: WebSocket, message: str) -> None:
    await websocket.send_text(json.dumps({
        "type": "error",
        "message": message,
        "timestamp": time.time(),
    }))


async def _handle_client_message(message: dict, websocket: WebSocket):
    """Handle incoming messages from operator clients."""
    msg_type = message.get("type", "")
    session_id = message.get("session_id") or DEFAULT_SESSION_ID
    if not isinstance(session_id, str):
        await _send_error(websocket, "session_id must be a string")
        return

    if msg_type == "voice_transcript":
        text = message.get("text", "")
        if not isinstance(text, str):
            await _send_error(websocket, "text must be a string")
            return
        if text.strip():
            result = command_service.process_transcript(session_id, text)
            await broadcast({
                "type": "command_log",
                "source": "voice",
                "session_id": session_id,
                **result.to_dict(),
            })

    elif msg_type == "reset":
        context = command_service.reset_session(session_id)
        await websocket.send_text(json.dumps({
            "type": "context_update",
            "session_id": session_id,
            "context": context,
            "timestamp": time.time(),
        }))
