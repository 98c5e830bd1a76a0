from __future__ import annotations

from pathlib import Path

from hypview import paths
from hypview.common import Settings
from hypview.common.enums import GameChannel


def test_missing_config_gives_defaults(tmp_path: Path) -> None:
    settings = Settings.load(tmp_path / "missing.ini")

    assert settings.channel is GameChannel.Overseas
    assert settings.game_ids is None


def test_config_values(tmp_path: Path) -> None:
    config = tmp_path / "config.ini"
    config.write_text("[hypview]\nchannel = china\ngame_ids = abc, def\n")

    settings = Settings.load(config)

    assert settings.channel is GameChannel.China
    assert settings.game_ids == ["abc", "def"]


def test_invalid_channel_falls_back(tmp_path: Path) -> None:
    config = tmp_path / "config.ini"
    config.write_text("[hypview]\nchannel = moon\n")

    assert Settings.load(config).channel is GameChannel.Overseas


def test_load_uses_default_config_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(paths, "config_file", tmp_path / "config.ini")
    (tmp_path / "config.ini").write_text("[hypview]\nchannel = cn\n")

    assert Settings.load().channel is GameChannel.China
