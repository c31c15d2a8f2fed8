"""Error taxonomy for message preparation and delivery."""

from __future__ import annotations

from typing import Dict, Optional, Type

INVALID_CREDENTIALS_STATUS = 400
TOO_MANY_REQUESTS_STATUS = 402
ACCESS_DENIED_STATUS = 403
SERVER_ERROR_STATUS = 500


class FreeSmsError(Exception):
    """Base error for freesms failures."""


class ConfigError(FreeSmsError):
    """Raised when settings or credentials cannot be resolved."""


class EmptyMessageError(FreeSmsError):
    """Raised when a message is empty or whitespace only."""

    def __init__(self, message: str = "Message is empty") -> None:
        super().__init__(message)


class MessageTooLongError(FreeSmsError):
    """Raised when a message exceeds the input ceiling or needs too many parts."""

    def __init__(self, length: int, limit: int, *, parts: Optional[int] = None) -> None:
        if parts is None:
            text = f"Message too long ({length} characters, maximum {limit} characters)"
        else:
            text = (
                f"Message too long ({length} characters would need {parts} parts, "
                f"maximum {limit} parts)"
            )
        super().__init__(text)
        self.length = length
        self.limit = limit
        self.parts = parts


class InputError(FreeSmsError):
    """Raised when the message source cannot be read."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class TransportError(FreeSmsError):
    """Raised when the HTTP request itself fails (network, TLS, timeout)."""


class ApiError(FreeSmsError):
    """Base class for failures reported by the Free Mobile API."""

    default_message = "Unknown error occurred"

    def __init__(
        self, message: Optional[str] = None, *, status_code: Optional[int] = None
    ) -> None:
        super().__init__(message or self.default_message)
        self.status_code = status_code


class InvalidCredentialsError(ApiError):
    default_message = "Invalid credentials provided"


class TooManyRequestsError(ApiError):
    default_message = "Too many requests sent (rate limit exceeded)"


class AccessDeniedError(ApiError):
    default_message = "Access denied - check your FreeMobile subscription"


class ServerError(ApiError):
    default_message = "FreeMobile server error"


class UnknownApiError(ApiError):
    default_message = "Unknown error occurred"


STATUS_ERRORS: Dict[int, Type[ApiError]] = {
    INVALID_CREDENTIALS_STATUS: InvalidCredentialsError,
    TOO_MANY_REQUESTS_STATUS: TooManyRequestsError,
    ACCESS_DENIED_STATUS: AccessDeniedError,
    SERVER_ERROR_STATUS: ServerError,
}


def error_from_status(status_code: int) -> ApiError:
    """Classify a non-success HTTP status returned by the API."""
    error_cls = STATUS_ERRORS.get(status_code, UnknownApiError)
    if error_cls is UnknownApiError:
        return UnknownApiError(
            f"Unexpected response status {status_code}", status_code=status_code
        )
    return error_cls(status_code=status_code)
