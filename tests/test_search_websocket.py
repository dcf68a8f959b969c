"""Tests for the debounced search socket."""

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from tests.conftest import TOKEN


def test_search_socket_streams_latest_results(client: TestClient) -> None:
    with client.websocket_connect(f"/foods/search/ws?token={TOKEN}") as websocket:
        websocket.send_json({"query": "pineapple"})
        first = websocket.receive_json()
        websocket.send_json({"query": "a"})
        cleared = websocket.receive_json()

    assert first["query"] == "pineapple"
    assert first["generation"] == 1
    assert [item["name"] for item in first["results"]] == [
        "Pineapple juice, canned",
        "Pineapple, raw",
    ]
    assert first["results"][0]["source"] == "catalog"
    assert cleared == {"generation": 2, "query": "a", "results": []}


def test_search_socket_rejects_invalid_token(client: TestClient) -> None:
    with pytest.raises(WebSocketDisconnect):  # noqa: SIM117
        with client.websocket_connect("/foods/search/ws?token=nope"):
            pass
