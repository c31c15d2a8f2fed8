"""Pictographic symbols the Free Mobile SMS gateway delivers intact.

The gateway only renders symbols from the Basic Multilingual Plane; anything
else reaches the handset as garbage. Entries are stored without the U+FE0F
variation selector; :func:`is_supported_emoji` also accepts the selector form.
"""

from __future__ import annotations

from typing import FrozenSet

VARIATION_SELECTOR = "\ufe0f"
KEYCAP_MARK = "\u20e3"

_TECHNICAL = (
    "⌚", "⌛", "⌨", "⏏", "⏩", "⏪", "⏫", "⏬", "⏭", "⏮", "⏯",
    "⏰", "⏱", "⏲", "⏳", "⏸", "⏹", "⏺",
)

_LETTERLIKE = ("©", "®", "‼", "⁉", "™", "ℹ", "〰", "〽", "㊗", "㊙")

_ARROWS = (
    "↔", "↕", "↖", "↗", "↘", "↙", "↩", "↪",
    "➡", "⬅", "⬆", "⬇", "⤴", "⤵",
)

_SHAPES = ("▪", "▫", "▶", "◀", "◻", "◼", "◽", "◾", "⬛", "⬜", "⭐", "⭕")

_WEATHER_AND_NATURE = (
    "☀", "☁", "☂", "☃", "☄", "☔", "☘", "❄", "⛄", "⛅", "⛈", "⚡",
)

_OBJECTS = (
    "☎", "☕", "⚒", "⚓", "⚔", "⚕", "⚖", "⚗", "⚙", "⚰", "⚱",
    "⛏", "⛑", "⛓", "✂", "✈", "✉", "✏", "✒",
)

_PLACES_AND_SPORTS = (
    "⚽", "⚾", "⛩", "⛪", "⛰", "⛱", "⛲", "⛳", "⛴", "⛵",
    "⛷", "⛸", "⛹", "⛺", "⛽", "♨",
)

_RELIGION_AND_ZODIAC = (
    "☦", "☪", "☮", "☯", "☸", "✝", "✡",
    "♈", "♉", "♊", "♋", "♌", "♍", "♎", "♏", "♐", "♑", "♒", "♓", "⛎",
)

_PEOPLE_AND_HANDS = ("☝", "☹", "☺", "✊", "✋", "✌", "✍", "♀", "♂", "⚧")

_CARDS_AND_GAMES = ("♟", "♠", "♣", "♥", "♦")

_SIGNS = (
    "☑", "☠", "☢", "☣", "♻", "♾", "♿", "⚛", "⚜", "⚠", "⚪", "⚫", "⛔",
    "✅", "✔", "✖", "✨", "✳", "✴", "❇", "❌", "❎",
    "❓", "❔", "❕", "❗", "❣", "❤", "➕", "➖", "➗", "➰", "➿",
)

SUPPORTED_EMOJIS: FrozenSet[str] = frozenset(
    _TECHNICAL
    + _LETTERLIKE
    + _ARROWS
    + _SHAPES
    + _WEATHER_AND_NATURE
    + _OBJECTS
    + _PLACES_AND_SPORTS
    + _RELIGION_AND_ZODIAC
    + _PEOPLE_AND_HANDS
    + _CARDS_AND_GAMES
    + _SIGNS
)


def is_supported_emoji(cluster: str) -> bool:
    """Return True when ``cluster`` is on the allow-list, with or without U+FE0F."""
    if cluster in SUPPORTED_EMOJIS:
        return True
    return cluster.replace(VARIATION_SELECTOR, "") in SUPPORTED_EMOJIS
