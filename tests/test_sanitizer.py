"""Tests for emoji classification and sanitization."""

import logging

import pytest

from freesms.core.emojis import SUPPORTED_EMOJIS, VARIATION_SELECTOR, is_supported_emoji
from freesms.core.sanitizer import PLACEHOLDER, sanitize


class TestIsSupportedEmoji:
    def test_allow_list_members(self):
        for emoji in ("✅", "⚡", "❌", "⭐", "✔"):
            assert is_supported_emoji(emoji)

    def test_variation_selector_form_accepted(self):
        assert is_supported_emoji("⚡" + VARIATION_SELECTOR)
        assert is_supported_emoji("✔" + VARIATION_SELECTOR)

    def test_astral_emojis_rejected(self):
        for emoji in ("😀", "🚀", "📱", "🌟"):
            assert not is_supported_emoji(emoji)
            assert not is_supported_emoji(emoji + VARIATION_SELECTOR)

    def test_no_partial_matches(self):
        assert not is_supported_emoji("✅✅")
        assert not is_supported_emoji("✅ ")
        assert not is_supported_emoji("")

    def test_allow_list_is_immutable(self):
        assert isinstance(SUPPORTED_EMOJIS, frozenset)
        assert all(VARIATION_SELECTOR not in emoji for emoji in SUPPORTED_EMOJIS)


class TestSanitize:
    @pytest.mark.parametrize("emoji", ["⚡", "✅", "❌"])
    def test_supported_emojis_preserved(self, emoji):
        assert sanitize(emoji) == emoji

    @pytest.mark.parametrize("emoji", ["😀", "🚀", "📱"])
    def test_unsupported_emojis_replaced(self, emoji):
        assert sanitize(emoji) == PLACEHOLDER

    def test_variation_selectors_kept_on_supported(self):
        assert sanitize("⚡\ufe0f") == "⚡\ufe0f"
        assert sanitize("✔\ufe0f") == "✔\ufe0f"

    def test_variation_selector_swallowed_with_unsupported(self):
        assert sanitize("😀\ufe0f done") == "[] done"

    def test_mixed_content(self):
        message = "Test: ✅ supported 😀 unsupported ⚡ supported"
        expected = "Test: ✅ supported [] unsupported ⚡ supported"
        assert sanitize(message) == expected

    def test_accents_preserved(self):
        message = "Café résumé naïf"
        assert sanitize(message) == message

    def test_decomposed_accents_preserved(self):
        message = "Cafe\u0301 re\u0301sume\u0301"
        assert sanitize(message) == message

    def test_non_latin_scripts_preserved(self):
        message = "Привет мир, 你好, مرحبا, Γειά σου"
        assert sanitize(message) == message

    def test_no_emojis(self):
        message = "Simple text message, with punctuation! (and [brackets])"
        assert sanitize(message) == message

    def test_empty_and_none(self):
        assert sanitize("") == ""
        assert sanitize(None) == ""

    def test_debug_log_counts_only_replaced_emojis(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="freesms.core.sanitizer"):
            sanitize("ok ✅ ⚡ 😀")
        assert "replaced 1 emoji(s)" in caplog.text

    def test_nothing_logged_when_every_emoji_is_kept(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="freesms.core.sanitizer"):
            sanitize("ok ✅ ⚡")
        assert "replaced" not in caplog.text

    def test_each_unsupported_emoji_gets_its_own_placeholder(self):
        assert sanitize("🚀🚀 go") == "[][] go"

    @pytest.mark.parametrize(
        "message",
        [
            "Test: ✅ supported 😀 unsupported ⚡ supported",
            "🚀📱😀 rocket phone grin",
            "⚡\ufe0f✔\ufe0f😀\ufe0f",
            "Café résumé naïf ❤ ⭐",
            "[] already a placeholder",
        ],
    )
    def test_idempotent(self, message):
        once = sanitize(message)
        assert sanitize(once) == once
