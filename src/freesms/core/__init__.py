"""Message preparation pipeline: sanitize, chunk, format, dispatch."""

from freesms.core.chunker import chunk_message, format_chunks
from freesms.core.dispatch import dispatch_chunks
from freesms.core.emojis import SUPPORTED_EMOJIS, is_supported_emoji
from freesms.core.graphemes import grapheme_length, split_graphemes
from freesms.core.sanitizer import PLACEHOLDER, sanitize

__all__ = [
    "PLACEHOLDER",
    "SUPPORTED_EMOJIS",
    "chunk_message",
    "dispatch_chunks",
    "format_chunks",
    "grapheme_length",
    "is_supported_emoji",
    "sanitize",
    "split_graphemes",
]
