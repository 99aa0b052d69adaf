"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from arcade_snake.server.app import create_app


@pytest.fixture()
def tc():
    """Starlette TestClient run as a context manager so the lifespan
    creates the session manager and tick timers share one event loop."""
    with TestClient(create_app()) as client:
        yield client


def _create_session(tc, **body) -> str:
    resp = tc.post("/sessions", json=body)
    assert resp.status_code == 201
    return resp.json()["session_id"]


def _receive_until(ws, predicate, limit: int = 100) -> dict:
    for _ in range(limit):
        state = json.loads(ws.receive_text())
        if predicate(state):
            return state
    raise AssertionError("expected state never arrived")


class TestPlayWebSocket:
    def test_connect_and_receive_initial_state(self, tc):
        session_id = _create_session(tc)
        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            state = json.loads(ws.receive_text())
            assert state["status"] == "paused"
            assert state["snake"] == [[10, 10], [9, 10], [8, 10]]
            assert "food" in state

    def test_direction_starts_and_ticks_stream(self, tc):
        session_id = _create_session(tc, initial_speed_ms=50)
        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"direction": "down"}))
            state = json.loads(ws.receive_text())
            assert state["status"] == "running"
            assert state["pending_direction"] == "down"

            ticked = _receive_until(ws, lambda s: s["tick"] >= 1)
            assert ticked["snake"][0] == [10, 11]
            assert ticked["direction"] == "down"

    def test_pause_and_reset_actions(self, tc):
        session_id = _create_session(tc, initial_speed_ms=50)
        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"action": "pause"}))
            _receive_until(ws, lambda s: s["status"] == "running")
            _receive_until(ws, lambda s: s["tick"] >= 1)

            ws.send_text(json.dumps({"action": "reset"}))
            state = _receive_until(ws, lambda s: s["tick"] == 0)
            assert state["status"] == "paused"
            assert state["snake"] == [[10, 10], [9, 10], [8, 10]]

    def test_invalid_messages_ignored(self, tc):
        session_id = _create_session(tc)
        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            ws.send_text("not-json")
            ws.send_text("[]")
            ws.send_text("123")
            ws.send_text(json.dumps({"direction": "sideways"}))
            ws.send_text(json.dumps({"action": "explode"}))
            ws.send_text(json.dumps({"action": "pause"}))
            # Only the pause produced a snapshot.
            state = json.loads(ws.receive_text())
            assert state["status"] == "running"

    def test_nonexistent_session_rejected(self, tc):
        with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
            "/sessions/nonexistent/play",
        ):
            pass

    def test_disconnect_leaves_session_running(self, tc):
        session_id = _create_session(tc)
        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            ws.send_text(json.dumps({"direction": "up"}))
            ws.receive_text()

        resp = tc.get(f"/sessions/{session_id}")
        assert resp.json()["status"] in ("running", "over")


class TestSessionRemoval:
    def test_deleted_session_closes_open_socket(self, tc):
        session_id = _create_session(tc, initial_speed_ms=50)
        session = tc.app.state.session_manager.get_session(session_id).session
        with tc.websocket_connect(f"/sessions/{session_id}/play") as ws:
            ws.receive_text()
            assert tc.delete(f"/sessions/{session_id}").status_code == 204

            ws.send_text(json.dumps({"direction": "up"}))
            with pytest.raises(WebSocketDisconnect) as exc:
                ws.receive_text()
            assert exc.value.code == 4004

        assert session.closed
        assert not session.running
        assert session.engine.is_paused
        assert session.engine.tick_count == 0
