from __future__ import annotations

import pytest
import requests

from hypview.common import api
from hypview.common.enums import GameChannel
from hypview.exceptions.api import ApiError, TransportError


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


def test_fetch_uses_channel_defaults(monkeypatch) -> None:
    captured = {}

    def fake_get(url, params=None, **kwargs):
        captured["url"] = url
        captured["params"] = params
        return FakeResponse("{}")

    monkeypatch.setattr(api.requests, "get", fake_get)

    assert api.fetch_game_packages(GameChannel.China) == "{}"
    assert captured["url"] == "https://hyp-api.mihoyo.com/hyp/hyp-connect/api/getGamePackages"
    assert captured["params"] == {
        "game_ids[]": ["1Z8W5NHUQb"],
        "launcher_id": "jGHBHlcOq1",
    }


def test_fetch_with_game_ids(monkeypatch) -> None:
    captured = {}

    def fake_get(url, params=None, **kwargs):
        captured["params"] = params
        return FakeResponse("{}")

    monkeypatch.setattr(api.requests, "get", fake_get)

    api.fetch_game_packages(game_ids=["abc", "def"])

    assert captured["params"]["game_ids[]"] == ["abc", "def"]
    assert captured["params"]["launcher_id"] == "VYTpXlbWo8"


def test_fetch_transport_error(monkeypatch) -> None:
    def fake_get(url, params=None, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(api.requests, "get", fake_get)

    with pytest.raises(TransportError) as excinfo:
        api.fetch_game_packages()

    assert "connection refused" in str(excinfo.value)


def test_fetch_http_error(monkeypatch) -> None:
    monkeypatch.setattr(
        api.requests, "get", lambda url, params=None, **kwargs: FakeResponse("", 502)
    )

    with pytest.raises(TransportError):
        api.fetch_game_packages()


def test_get_game_packages_decodes(monkeypatch, raw_text: str) -> None:
    monkeypatch.setattr(
        api.requests, "get", lambda url, params=None, **kwargs: FakeResponse(raw_text)
    )

    document = api.get_game_packages()

    game_info = document.game_packages[0]
    assert game_info.game.id == "gopR6Cufr3"
    assert game_info.game.biz == "hk4e_global"


def test_get_game_packages_api_error(monkeypatch) -> None:
    body = '{"retcode": -100, "message": "invalid game id", "data": null}'
    monkeypatch.setattr(
        api.requests, "get", lambda url, params=None, **kwargs: FakeResponse(body)
    )

    with pytest.raises(ApiError) as excinfo:
        api.get_game_packages()

    assert excinfo.value.message == "invalid game id"
