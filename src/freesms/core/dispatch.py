"""Ordered, paced delivery of formatted chunks."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence

from freesms.config import CHUNK_DELAY_MS

SendCallable = Callable[[str], None]
SleepCallable = Callable[[float], None]

logger = logging.getLogger(__name__)


def dispatch_chunks(
    chunks: Sequence[str],
    send: SendCallable,
    *,
    delay_ms: Optional[int] = None,
    sleep: SleepCallable = time.sleep,
) -> None:
    """Send chunks one by one, pausing ``delay_ms`` between consecutive sends.

    The first failure raised by ``send`` propagates as-is. Chunks sent before
    it stay delivered and the remaining ones are never attempted; there is no
    retry.
    """
    delay = CHUNK_DELAY_MS if delay_ms is None else delay_ms
    total = len(chunks)

    for index, chunk in enumerate(chunks, start=1):
        logger.debug("sending part %d/%d", index, total)
        send(chunk)
        if index < total and delay > 0:
            sleep(delay / 1000)

    if total:
        logger.info("delivered %d part(s)", total)
