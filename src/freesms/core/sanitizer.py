"""Emoji sanitization for SMS-safe text."""

from __future__ import annotations

import logging
from typing import Optional

import regex

from freesms.core.emojis import KEYCAP_MARK, VARIATION_SELECTOR, is_supported_emoji

PLACEHOLDER = "[]"

# A pictographic base, optionally followed by one variation selector or keycap mark.
EMOJI_PATTERN = regex.compile(
    r"[\p{Emoji_Presentation}\p{Extended_Pictographic}]"
    rf"[{VARIATION_SELECTOR}{KEYCAP_MARK}]?"
)

logger = logging.getLogger(__name__)


def sanitize(message: Optional[str]) -> str:
    """Keep supported emojis, replace every other pictograph with ``[]``.

    Non-pictographic text (accents, punctuation, other scripts) is returned
    untouched, and sanitizing twice gives the same result as sanitizing once.
    """
    text = message or ""
    replaced = 0

    def _replace_match(match: "regex.Match[str]") -> str:
        nonlocal replaced
        emoji = match.group(0)
        if is_supported_emoji(emoji):
            return emoji
        replaced += 1
        return PLACEHOLDER

    sanitized = EMOJI_PATTERN.sub(_replace_match, text)
    if replaced:
        logger.debug("sanitized message: replaced %d emoji(s) with placeholder", replaced)
    return sanitized
