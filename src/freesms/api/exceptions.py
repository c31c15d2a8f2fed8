"""Public exception surface for freesms API consumers."""

from freesms.core.exceptions import (
    AccessDeniedError,
    ApiError,
    ConfigError,
    EmptyMessageError,
    FreeSmsError,
    InputError,
    InvalidCredentialsError,
    MessageTooLongError,
    ServerError,
    TooManyRequestsError,
    TransportError,
    UnknownApiError,
    error_from_status,
)

__all__ = [
    "AccessDeniedError",
    "ApiError",
    "ConfigError",
    "EmptyMessageError",
    "FreeSmsError",
    "InputError",
    "InvalidCredentialsError",
    "MessageTooLongError",
    "ServerError",
    "TooManyRequestsError",
    "TransportError",
    "UnknownApiError",
    "error_from_status",
]
