"""Grapheme cluster helpers; every length in freesms is measured here."""

from __future__ import annotations

from typing import List

import regex

GRAPHEME_PATTERN = regex.compile(r"\X")


def split_graphemes(text: str) -> List[str]:
    """Return the extended grapheme clusters of ``text`` in order."""
    if not text:
        return []
    return GRAPHEME_PATTERN.findall(text)


def grapheme_length(text: str) -> int:
    """Count user-perceived characters, not code points or bytes."""
    return len(split_graphemes(text))


def truncate_graphemes(text: str, limit: int) -> str:
    """Return at most ``limit`` leading grapheme clusters of ``text``."""
    return "".join(split_graphemes(text)[: max(0, limit)])


def is_blank(cluster: str) -> bool:
    """True for clusters made only of whitespace (a space carrying a mark is not)."""
    return cluster.isspace()
