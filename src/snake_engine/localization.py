"""Localized UI strings for score, speed, and game-over labels."""

from __future__ import annotations

import locale as _locale
import logging

from snake_engine.engine import GameStatus, Snapshot

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

_STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "score": "Score: {0}",
        "speed": "Speed: {0} fps",
        "game_over": "Game Over!",
        "board_full": "Board cleared!",
        "restart": "Restart",
        "app_title": "Snake",
    },
    "tr": {
        "score": "Skor: {0}",
        "speed": "Hız: {0} fps",
        "game_over": "Oyun Bitti!",
        "board_full": "Tahta doldu!",
        "restart": "Yeniden Başlat",
        "app_title": "Yılan",
    },
}

SUPPORTED_LOCALES: tuple[str, ...] = tuple(_STRINGS)


def normalize_locale(name: str | None) -> str:
    """Reduce a locale name to a supported two-letter language code.

    ``"tr_TR.UTF-8"`` and ``"tr-TR"`` both become ``"tr"``. Anything
    unrecognised falls back to :data:`DEFAULT_LOCALE`.
    """
    if not name:
        return DEFAULT_LOCALE
    code = name.replace("-", "_").split("_", 1)[0].split(".", 1)[0].lower()
    return code if code in _STRINGS else DEFAULT_LOCALE


def system_locale() -> str:
    """Return the two-letter language code of the process locale."""
    name, _encoding = _locale.getlocale()
    code = normalize_locale(name)
    logger.debug("System locale %r resolved to %r.", name, code)
    return code


def localize(locale: str | None, key: str, *args: object) -> str:
    """Look up *key* for *locale* and format it with *args*.

    Unknown keys are returned unchanged.
    """
    table = _STRINGS[normalize_locale(locale)]
    text = table.get(key, key)
    return text.format(*args) if args else text


def status_text(snapshot: Snapshot, locale: str | None = None) -> dict[str, str]:
    """Labels a status panel shows for *snapshot*."""
    loc = normalize_locale(locale) if locale else system_locale()
    labels = {
        "score": localize(loc, "score", snapshot.score),
        "speed": localize(loc, "speed", snapshot.speed),
    }
    if snapshot.is_over:
        key = "board_full" if snapshot.status == GameStatus.WON else "game_over"
        labels["message"] = localize(loc, key)
        labels["restart"] = localize(loc, "restart")
    return labels
