"""Tests for the REST and WebSocket API."""

from __future__ import annotations

from fastapi.testclient import TestClient


class TestHealth:
    def test_root(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "PatrolLink"

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}


class TestParseEndpoint:
    def test_scenario(self, client: TestClient, session_id: str) -> None:
        response = client.post(
            f"/api/sessions/{session_id}/parse",
            json={"text": "move forward 2 meters then turn right a little and rotate 90 degrees then stop"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["tokens"] == [
            "move.forward", "move.distance:2m", "turn.right", "rotate.cw.deg:90", "move.stop",
        ]
        first = data["commands"][0]
        assert first["action"] == "move"
        assert first["direction"] == "forward"
        assert first["distance_m"] == 2
        assert data["context"]["last_heading_deg"] == 90

    def test_empty_text(self, client: TestClient, session_id: str) -> None:
        response = client.post(f"/api/sessions/{session_id}/parse", json={"text": "   "})
        assert response.status_code == 400
        assert response.json()["status"] == "error"

    def test_missing_text(self, client: TestClient, session_id: str) -> None:
        response = client.post(f"/api/sessions/{session_id}/parse", json={})
        assert response.status_code == 400

    def test_malformed_body(self, client: TestClient, session_id: str) -> None:
        response = client.post(f"/api/sessions/{session_id}/parse", json={"text": ["go"]})
        assert response.status_code == 422

    def test_unknown_feedback(self, client: TestClient, session_id: str) -> None:
        data = client.post(f"/api/sessions/{session_id}/parse", json={"text": "hello robot"}).json()
        assert data["tokens"] == ["unknown"]
        assert data["actionable"] is False
        assert data["feedback"] == "Didn't catch that. Please repeat."


class TestBotNlpEndpoint:
    def test_tokens(self, client: TestClient, session_id: str) -> None:
        response = client.post(f"/api/bots/{session_id}/nlp", json={"text": "set speed 45%"})
        assert response.json() == {"command": ["move.speed:45"]}

    def test_unknown(self, client: TestClient, session_id: str) -> None:
        response = client.post(f"/api/bots/{session_id}/nlp", json={"text": "hello robot"})
        assert response.status_code == 200
        assert response.json() == {"command": "unknown"}

    def test_no_text(self, client: TestClient, session_id: str) -> None:
        response = client.post(f"/api/bots/{session_id}/nlp", json={})
        assert response.status_code == 400
        assert response.json() == {"command": "unknown"}


class TestSessionEndpoints:
    def test_context_and_reset(self, client: TestClient, session_id: str) -> None:
        client.post(f"/api/sessions/{session_id}/parse", json={"text": "go forward"})
        context = client.get(f"/api/sessions/{session_id}/context").json()["context"]
        assert context["last_direction"] == "forward"

        reset = client.post(f"/api/sessions/{session_id}/reset").json()
        assert reset["context"]["last_direction"] is None

    def test_ellipsis_across_requests(self, client: TestClient, session_id: str) -> None:
        client.post(f"/api/sessions/{session_id}/parse", json={"text": "go left"})
        data = client.post(f"/api/sessions/{session_id}/parse", json={"text": "again"}).json()
        assert data["tokens"] == ["move.left"]

    def test_transcripts(self, client: TestClient, session_id: str) -> None:
        client.post(f"/api/sessions/{session_id}/parse", json={"text": "siren"})
        data = client.get(f"/api/sessions/{session_id}/transcripts").json()
        assert [t["text"] for t in data["transcripts"]] == ["siren"]

    def test_close(self, client: TestClient, session_id: str) -> None:
        client.post(f"/api/sessions/{session_id}/parse", json={"text": "siren"})
        assert session_id in client.get("/api/sessions").json()["sessions"]
        assert client.delete(f"/api/sessions/{session_id}").status_code == 200
        assert client.delete(f"/api/sessions/{session_id}").status_code == 404


class TestWebSocket:
    def test_voice_transcript(self, client: TestClient, session_id: str) -> None:
        with client.websocket_connect("/ws") as ws:
            ws.send_json({"type": "voice_transcript", "session_id": session_id, "text": "go forward"})
            message = ws.receive_json()
        assert message["type"] == "command_log"
        assert message["session_id"] == session_id
        assert message["tokens"] == ["move.forward"]

    def test_reset(self, client: TestClient, session_id: str) -> None:
        with client.websocket_connect("/ws") as ws:
            ws.send_json({"type": "voice_transcript", "session_id": session_id, "text": "go right"})
            ws.receive_json()
            ws.send_json({"type": "reset", "session_id": session_id})
            message = ws.receive_json()
        assert message["type"] == "context_update"
        assert message["context"]["last_direction"] is None

    def test_malformed_frame(self, client: TestClient) -> None:
        with client.websocket_connect("/ws") as ws:
            ws.send_text("not json")
            message = ws.receive_json()
        assert message["type"] == "error"

    def test_non_object_frame(self, client: TestClient, session_id: str) -> None:
        """A JSON array gets an error reply and the socket stays usable."""
        with client.websocket_connect("/ws") as ws:
            ws.send_text("[1, 2]")
            error = ws.receive_json()
            ws.send_json({"type": "voice_transcript", "session_id": session_id, "text": "stop"})
            message = ws.receive_json()
        assert error["type"] == "error"
        assert message["type"] == "command_log"
        assert message["tokens"] == ["move.stop"]

    def test_non_string_text(self, client: TestClient, session_id: str) -> None:
        with client.websocket_connect("/ws") as ws:
            ws.send_json({"type": "voice_transcript", "session_id": session_id, "text": 5})
            error = ws.receive_json()
            ws.send_json({"type": "voice_transcript", "session_id": session_id, "text": "go left"})
            message = ws.receive_json()
        assert error["type"] == "error"
        assert message["tokens"] == ["move.left"]

    def test_client_removed_after_disconnect(self, client: TestClient) -> None:
        from backend.api.websocket import connected_clients

        before = len(connected_clients)
        with client.websocket_connect("/ws") as ws:
            ws.send_text("[1, 2]")
            ws.receive_json()
        assert len(connected_clients) == before
