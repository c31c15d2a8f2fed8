"""Public programmatic API surface for freesms."""

from freesms.api.client import FreeMobileClient
from freesms.api.exceptions import (
    AccessDeniedError,
    ApiError,
    EmptyMessageError,
    FreeSmsError,
    InvalidCredentialsError,
    ServerError,
    TooManyRequestsError,
    TransportError,
    UnknownApiError,
)
from freesms.api.types import Credentials

__all__ = [
    "FreeMobileClient",
    "Credentials",
    "AccessDeniedError",
    "ApiError",
    "EmptyMessageError",
    "FreeSmsError",
    "InvalidCredentialsError",
    "ServerError",
    "TooManyRequestsError",
    "TransportError",
    "UnknownApiError",
]
