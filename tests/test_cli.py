from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

import wordfeud.client as client_module
from tests.conftest import FakeWordfeud
from wordfeud.cli import main
from wordfeud.config import Settings


@pytest.fixture()
def cli_fake(fake: FakeWordfeud, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> FakeWordfeud:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WORDFEUD_SESSION_FILE", str(tmp_path / "session"))

    def _create(settings: Settings, *, transport: httpx.BaseTransport | None = None) -> httpx.Client:
        return fake.http_client()

    monkeypatch.setattr(client_module, "create_http_client", _create)
    return fake


def test_login_then_games_reuses_session_file(cli_fake: FakeWordfeud, capsys: pytest.CaptureFixture[str]) -> None:
    cli_fake.reply("user/login/email", {"id": 1}, set_cookie="sessionid=CLI1;")
    cli_fake.reply("user/games", {"games": [{"id": 11}]})

    assert main(["login-email", "a@b.c", "pw"]) == 0
    assert json.loads(capsys.readouterr().out) == {"session_id": "CLI1"}

    assert main(["games"]) == 0
    assert json.loads(capsys.readouterr().out) == [{"id": 11}]
    assert cli_fake.last.headers["cookie"] == "sessionid=CLI1"

    assert main(["logout"]) == 0
    capsys.readouterr()
    assert main(["games"]) == 0
    assert "cookie" not in cli_fake.last.headers


def test_remote_error_exits_nonzero(cli_fake: FakeWordfeud, capsys: pytest.CaptureFixture[str]) -> None:
    cli_fake.reply("user/login/email", {"type": "wrong_password"}, status="error")

    assert main(["login-email", "a@b.c", "bad"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "wrong_password" in captured.err


def test_avatar_url_needs_no_network(cli_fake: FakeWordfeud, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["avatar-url", "123", "--size", "40"]) == 0
    assert json.loads(capsys.readouterr().out) == "https://avatars.wordfeud.com/40/123"
    assert cli_fake.requests == []
