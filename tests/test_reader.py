"""Tests for the reader page and its live session."""

from typing import Any

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from starlette.testclient import WebSocketTestSession

from heidelberg.core import container


def _sliding(page: str) -> dict[str, Any]:
    return {"event": "sliding", "payload": {"reader_progress": page}}


def _scrollto(page: str) -> dict[str, Any]:
    return {"event": "scrollto", "payload": {"position": page}}


def _navigate(page: str) -> dict[str, Any]:
    return {"event": "navigate", "payload": {"page": page}}


def _assert_quiet(ws: WebSocketTestSession) -> None:
    """Nothing was queued before this point: the next frame answers a garbage frame."""
    ws.send_text("ping")
    assert ws.receive_json()["event"] == "error"


class TestReaderView:
    @pytest.mark.parametrize("page", [1, 2, 5, 30, 31, 32, 52])
    def test_page_renders_its_sections(self, client: TestClient, page: int) -> None:
        response = client.get("/heidelberg", params={"page": str(page)})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["page"] == page
        assert f"page_{page}" in data["sections"]
        assert data["url"] == f"/heidelberg?page={page}"
        assert data["slider"] == {"name": "reader_progress", "min": 1, "max": 52, "value": page}
        assert data["session_id"] is None

    def test_missing_page_defaults_to_first(self, client: TestClient) -> None:
        data = client.get("/heidelberg").json()
        assert data["page"] == 1
        assert data["grouping"]["name"] == "inleiding"
        assert data["sections"] == ["page_1"]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("abc", 1),
            ("", 1),
            ("99", 52),
            ("-3", 1),
            ("9" * 5000, 52),
            ("-" + "9" * 5000, 1),
        ],
    )
    def test_bad_page_never_errors(self, client: TestClient, raw: str, expected: int) -> None:
        response = client.get("/heidelberg", params={"page": raw})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["page"] == expected

    def test_scroll_marker_redirects_to_clean_url(self, client: TestClient) -> None:
        response = client.get("/heidelberg", params={"page": "15", "act": "scroll"})

        assert response.status_code == status.HTTP_307_TEMPORARY_REDIRECT
        assert response.headers["location"] == "/heidelberg?page=15"

    def test_grouping_details(self, client: TestClient) -> None:
        data = client.get("/heidelberg", params={"page": "3"}).json()
        assert data["grouping"] == {
            "name": "ellende",
            "title": "Van de ellende van de mens",
            "first_page": 2,
            "last_page": 4,
        }
        assert data["sections"] == ["page_2", "page_3", "page_4"]


class TestLiveSession:
    def test_mount_without_page(self, client: TestClient) -> None:
        with client.websocket_connect("/heidelberg/live") as ws:
            render = ws.receive_json()
            assert render["event"] == "render"
            assert render["payload"]["page"] == 1
            assert render["payload"]["session_id"]
            _assert_quiet(ws)

    def test_deep_link_scrolls_for_real(self, client: TestClient) -> None:
        with client.websocket_connect("/heidelberg/live?page=30") as ws:
            assert ws.receive_json()["payload"]["page"] == 30
            assert ws.receive_json() == {
                "event": "scrollto",
                "payload": {"page": "page_30", "confirm": False},
            }

    def test_scroll_marked_mount_does_not_scroll(self, client: TestClient) -> None:
        with client.websocket_connect("/heidelberg/live?page=30&act=scroll") as ws:
            assert ws.receive_json()["payload"]["page"] == 30
            _assert_quiet(ws)

    def test_slider_drag(self, client: TestClient) -> None:
        with client.websocket_connect("/heidelberg/live") as ws:
            ws.receive_json()

            ws.send_json(_sliding("12"))

            render = ws.receive_json()
            assert render["event"] == "render"
            assert render["payload"]["grouping"]["name"] == "verlossing"
            assert ws.receive_json() == {"event": "patch", "payload": {"to": "/heidelberg?page=12"}}
            assert ws.receive_json() == {
                "event": "scrollto",
                "payload": {"page": "page_12", "confirm": False},
            }

    def test_scroll_reports(self, client: TestClient) -> None:
        with client.websocket_connect("/heidelberg/live?page=10&act=scroll") as ws:
            ws.receive_json()

            ws.send_json(_scrollto("11"))
            ws.send_json(_scrollto("10"))
            _assert_quiet(ws)

            ws.send_json(_scrollto("15"))
            assert ws.receive_json() == {
                "event": "patch",
                "payload": {"to": "/heidelberg?page=15&act=scroll"},
            }
            assert ws.receive_json() == {
                "event": "scrollto",
                "payload": {"page": "page_15", "confirm": True},
            }

    def test_oversized_scroll_report_clamps(self, client: TestClient) -> None:
        with client.websocket_connect("/heidelberg/live?page=10&act=scroll") as ws:
            ws.receive_json()

            ws.send_json(_scrollto("9" * 5000))

            render = ws.receive_json()
            assert render["event"] == "render"
            assert render["payload"]["page"] == 52
            assert ws.receive_json() == {
                "event": "patch",
                "payload": {"to": "/heidelberg?page=52&act=scroll"},
            }
            assert ws.receive_json() == {
                "event": "scrollto",
                "payload": {"page": "page_52", "confirm": True},
            }

    def test_oversized_navigation_clamps_to_first_page(self, client: TestClient) -> None:
        with client.websocket_connect("/heidelberg/live?page=10&act=scroll") as ws:
            ws.receive_json()

            ws.send_json(_navigate("-" + "9" * 5000))

            assert ws.receive_json()["payload"]["page"] == 1
            assert ws.receive_json() == {"event": "patch", "payload": {"to": "/heidelberg?page=1"}}
            assert ws.receive_json() == {
                "event": "scrollto",
                "payload": {"page": "page_1", "confirm": False},
            }

    def test_oversized_deep_link_mounts_last_page(self, client: TestClient) -> None:
        with client.websocket_connect(f"/heidelberg/live?page={'9' * 5000}") as ws:
            assert ws.receive_json()["payload"]["page"] == 52
            assert ws.receive_json() == {
                "event": "scrollto",
                "payload": {"page": "page_52", "confirm": False},
            }

    def test_history_navigation(self, client: TestClient) -> None:
        with client.websocket_connect("/heidelberg/live?page=10&act=scroll") as ws:
            ws.receive_json()

            ws.send_json(_navigate("40"))

            render = ws.receive_json()
            assert render["event"] == "render"
            assert render["payload"]["page"] == 40
            assert ws.receive_json() == {
                "event": "scrollto",
                "payload": {"page": "page_40", "confirm": False},
            }

    @pytest.mark.parametrize(
        "frame",
        [
            "not json",
            '{"event": "teleport", "payload": {}}',
            '{"event": "sliding", "payload": {"reader_progress": "abc"}}',
            '{"event": "scrollto", "payload": {}}',
        ],
    )
    def test_malformed_frames_keep_session_open(self, client: TestClient, frame: str) -> None:
        with client.websocket_connect("/heidelberg/live?page=10&act=scroll") as ws:
            ws.receive_json()

            ws.send_text(frame)
            error = ws.receive_json()
            assert error["event"] == "error"
            assert error["payload"]["detail"]

            ws.send_json(_sliding("20"))
            assert ws.receive_json()["event"] == "patch"

    def test_disconnect_closes_session(self, client: TestClient) -> None:
        with client.websocket_connect("/heidelberg/live") as ws:
            ws.receive_json()
            assert container.reader_session_repository().count() == 1

        assert container.reader_session_repository().count() == 0
