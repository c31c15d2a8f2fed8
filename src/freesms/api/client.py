"""HTTP client for the Free Mobile SMS notification API."""

from __future__ import annotations

import logging
import time
from typing import List, Optional

import requests

from freesms.api.types import Credentials
from freesms.config import API_URL, CHUNK_DELAY_MS, REQUEST_TIMEOUT, USER_AGENT
from freesms.core.chunker import chunk_message, format_chunks, max_parts
from freesms.core.dispatch import SleepCallable, dispatch_chunks
from freesms.core.exceptions import (
    EmptyMessageError,
    InvalidCredentialsError,
    MessageTooLongError,
    TransportError,
    error_from_status,
)
from freesms.core.graphemes import grapheme_length
from freesms.core.sanitizer import sanitize
from freesms.logger import mask_user_id

logger = logging.getLogger(__name__)


class FreeMobileClient:
    """Send SMS to the account holder's own phone through Free Mobile.

    Every call to :meth:`send` sanitizes the text, splits it into labelled
    parts when it exceeds the per-message limit, and issues one GET request
    per part, in order, with a short pause between parts.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        session: Optional[requests.Session] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        chunk_delay_ms: Optional[int] = None,
        sleep: SleepCallable = time.sleep,
    ) -> None:
        if not credentials.is_valid():
            raise InvalidCredentialsError()
        self.credentials = credentials
        self.api_url = api_url or API_URL
        self.timeout = REQUEST_TIMEOUT if timeout is None else timeout
        self.chunk_delay_ms = CHUNK_DELAY_MS if chunk_delay_ms is None else chunk_delay_ms
        self._sleep = sleep
        self.user_agent = user_agent or USER_AGENT
        # Sent per request so a caller-supplied session is left untouched.
        self.session = session if session is not None else requests.Session()

    def sanitize_message(self, message: str) -> str:
        """Preview the text that :meth:`send` would transmit."""
        return sanitize(message)

    def prepare(self, sanitized_message: str) -> List[str]:
        """Return the formatted parts for an already sanitized message.

        Raises:
            MessageTooLongError: the part labels would not fit in the
                reserved prefix, so some part would exceed the SMS limit.
        """
        chunks = chunk_message(sanitized_message)
        limit = max_parts()
        if len(chunks) > limit:
            raise MessageTooLongError(
                grapheme_length(sanitized_message), limit, parts=len(chunks)
            )
        return format_chunks(chunks)

    def send(self, message: str) -> None:
        """Sanitize and send ``message``.

        Raises:
            EmptyMessageError: the message is blank.
            ApiError: the API rejected a part (see ``error_from_status``).
            TransportError: the HTTP request failed.
        """
        if not (message or "").strip():
            raise EmptyMessageError()
        self.send_sanitized(sanitize(message))

    def send_sanitized(self, sanitized_message: str) -> None:
        """Chunk, label and send a message that was sanitized by the caller."""
        if not (sanitized_message or "").strip():
            raise EmptyMessageError()

        parts = self.prepare(sanitized_message)
        logger.info(
            "sending message as %d part(s) for user %s",
            len(parts),
            mask_user_id(self.credentials.user),
        )
        dispatch_chunks(
            parts,
            self.send_chunk,
            delay_ms=self.chunk_delay_ms,
            sleep=self._sleep,
        )

    def send_chunk(self, text: str) -> None:
        """Issue a single API request for one formatted part."""
        params = {
            "user": self.credentials.user,
            "pass": self.credentials.password,
            "msg": text,
        }
        try:
            response = self.session.get(
                self.api_url,
                params=params,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("HTTP request to Free Mobile failed: %s", exc.__class__.__name__)
            # The exception text can echo the query string, which holds the API key.
            raise TransportError(
                f"HTTP request failed: {exc.__class__.__name__}"
            ) from exc

        if not 200 <= response.status_code < 300:
            error = error_from_status(response.status_code)
            logger.error(
                "Free Mobile rejected the message: status=%s (%s)",
                response.status_code,
                type(error).__name__,
            )
            raise error

        logger.debug("Free Mobile accepted part: status=%s", response.status_code)
