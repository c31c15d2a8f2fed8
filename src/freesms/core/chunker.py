"""Split sanitized messages into SMS-sized parts and label them."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from freesms.config import MAX_MESSAGE_LENGTH, PREFIX_RESERVE_LENGTH
from freesms.core.graphemes import is_blank, split_graphemes

# A word boundary is used only when it lies past 1/MIN_BOUNDARY_RATIO of the window.
MIN_BOUNDARY_RATIO = 3

logger = logging.getLogger(__name__)


def _find_split(window: Sequence[str]) -> int:
    """Return how many clusters of ``window`` belong to the next chunk."""
    last_boundary = 0
    for position, cluster in enumerate(window, start=1):
        if is_blank(cluster):
            last_boundary = position

    scanned = len(window)
    if last_boundary > scanned // MIN_BOUNDARY_RATIO:
        return last_boundary
    return scanned


def chunk_message(
    message: Optional[str],
    *,
    max_length: Optional[int] = None,
    prefix_reserve: Optional[int] = None,
) -> List[str]:
    """Split ``message`` into ordered chunks measured in grapheme clusters.

    A message that fits ``max_length`` is returned as a single trimmed chunk.
    Longer messages are cut into chunks of at most
    ``max_length - prefix_reserve`` clusters so a ``[i/N] `` label can be
    added later, preferring the last whitespace in each window and falling
    back to a hard split inside long unbroken runs.
    """
    limit = MAX_MESSAGE_LENGTH if max_length is None else max_length
    reserve = PREFIX_RESERVE_LENGTH if prefix_reserve is None else prefix_reserve

    text = (message or "").strip()
    if not text:
        return []

    graphemes = split_graphemes(text)
    total = len(graphemes)
    if total <= limit:
        return [text]

    effective_limit = limit - reserve
    chunks: List[str] = []
    position = 0

    while position < total:
        if total - position <= effective_limit:
            tail = "".join(graphemes[position:]).strip()
            if tail:
                chunks.append(tail)
            break

        window = graphemes[position : position + max(effective_limit, 0)]
        split_at = _find_split(window) if window else 0

        if split_at <= 0:
            # Degenerate limit: still move forward one cluster at a time.
            chunks.append(graphemes[position])
            position += 1
            continue

        chunk = "".join(window[:split_at]).strip()
        if chunk:
            chunks.append(chunk)
        position += split_at

        while position < total and is_blank(graphemes[position]):
            position += 1

    logger.debug(
        "chunked %d graphemes into %d part(s) (effective limit %d)",
        total,
        len(chunks),
        effective_limit,
    )
    return chunks


def format_label(index: int, total: int) -> str:
    """Return the ``[i/N] `` prefix for the 1-based ``index`` of ``total``."""
    return f"[{index}/{total}] "


def label_length(index: int, total: int) -> int:
    return len(format_label(index, total))


def max_parts(prefix_reserve: Optional[int] = None) -> int:
    """Largest part count whose ``[N/N] `` label fits in the reserved prefix.

    A single part carries no label, so the result is never below 1.
    """
    reserve = PREFIX_RESERVE_LENGTH if prefix_reserve is None else prefix_reserve
    # "[" + N + "/" + N + "] " is four characters plus twice the digits of N.
    digits = (reserve - 4) // 2
    if digits <= 0:
        return 1
    return 10**digits - 1


def format_chunks(chunks: Sequence[str]) -> List[str]:
    """Prefix each chunk with its position when there is more than one."""
    if len(chunks) <= 1:
        return list(chunks)

    total = len(chunks)
    return [
        f"{format_label(index, total)}{chunk}"
        for index, chunk in enumerate(chunks, start=1)
    ]
