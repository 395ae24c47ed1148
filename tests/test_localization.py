"""Tests for localized status strings."""

import pytest

from snake_engine.engine import GameStatus, Snapshot, TickOutcome
from snake_engine.localization import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    localize,
    normalize_locale,
    status_text,
    system_locale,
)


def _snapshot(status=GameStatus.RUNNING, score=7, speed=12):
    return Snapshot(
        snake=((1, 1),),
        food=(2, 2),
        score=score,
        speed=speed,
        status=status,
        tick=3,
        outcome=TickOutcome.MOVED,
    )


class TestLocalize:
    def test_supported_locales(self):
        assert SUPPORTED_LOCALES == ("en", "tr")
        assert DEFAULT_LOCALE == "en"

    def test_english(self):
        assert localize("en", "score", 3) == "Score: 3"
        assert localize("en", "speed", 10) == "Speed: 10 fps"
        assert localize("en", "game_over") == "Game Over!"

    def test_turkish(self):
        assert localize("tr", "score", 3) == "Skor: 3"
        assert localize("tr", "restart") == "Yeniden Başlat"

    def test_unknown_locale_falls_back(self):
        assert localize("fr", "restart") == "Restart"
        assert localize(None, "restart") == "Restart"

    def test_unknown_key_returned(self):
        assert localize("en", "missing") == "missing"

    @pytest.mark.parametrize(
        ("name", "code"),
        [
            ("tr_TR.UTF-8", "tr"),
            ("tr-TR", "tr"),
            ("TR", "tr"),
            ("en_GB", "en"),
            ("de_DE", "en"),
            ("", "en"),
            (None, "en"),
        ],
    )
    def test_normalize(self, name, code):
        assert normalize_locale(name) == code


class TestSystemLocale:
    def test_uses_process_locale(self, monkeypatch):
        monkeypatch.setattr(
            "snake_engine.localization._locale.getlocale",
            lambda: ("tr_TR", "UTF-8"),
        )
        assert system_locale() == "tr"

    def test_unset_locale(self, monkeypatch):
        monkeypatch.setattr(
            "snake_engine.localization._locale.getlocale",
            lambda: (None, None),
        )
        assert system_locale() == DEFAULT_LOCALE


class TestStatusText:
    def test_running(self):
        labels = status_text(_snapshot(), "en")
        assert labels == {"score": "Score: 7", "speed": "Speed: 12 fps"}

    def test_game_over(self):
        labels = status_text(_snapshot(GameStatus.GAME_OVER), "tr")
        assert labels["message"] == "Oyun Bitti!"
        assert labels["restart"] == "Yeniden Başlat"

    def test_board_full(self):
        labels = status_text(_snapshot(GameStatus.WON), "en")
        assert labels["message"] == "Board cleared!"
