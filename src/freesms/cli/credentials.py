"""Credential resolution: command line, environment, then interactive prompt."""

from __future__ import annotations

import logging
import os
import re
import sys
from typing import Callable, Optional

from rich.prompt import Prompt

from freesms.api.types import Credentials
from freesms.config import PASS_ENV, USER_ENV
from freesms.core.exceptions import ConfigError

USER_ID_PATTERN = re.compile(r"[0-9]{8}")

Validator = Callable[[str], None]
logger = logging.getLogger(__name__)


def validate_user_id(user_id: str) -> None:
    """Free Mobile user ids are exactly eight ASCII digits."""
    if not USER_ID_PATTERN.fullmatch(user_id or ""):
        raise ConfigError("User ID must be exactly 8 digits")


def get_config_value(
    cli_value: Optional[str],
    env_var: str,
    missing_message: str,
    field_name: str,
    validator: Optional[Validator] = None,
) -> str:
    """Return the CLI value, else the environment value, validated."""
    value = cli_value if cli_value is not None else os.environ.get(env_var)
    if value is None:
        raise ConfigError(missing_message)
    if not value.strip():
        raise ConfigError(f"{field_name} cannot be empty")
    if validator is not None:
        validator(value)
    return value


def _is_interactive() -> bool:
    return sys.stdin.isatty()


def prompt_for_user_id() -> str:
    try:
        user_id = Prompt.ask("FreeMobile User ID [dim](8 digits)[/dim]")
    except EOFError as exc:
        raise ConfigError("Failed to read user ID") from exc
    if not user_id.strip():
        raise ConfigError("User ID cannot be empty")
    validate_user_id(user_id)
    return user_id


def prompt_for_api_key() -> str:
    try:
        api_key = Prompt.ask("FreeMobile API Key", password=True)
    except EOFError as exc:
        raise ConfigError("Failed to read API key") from exc
    if not api_key.strip():
        raise ConfigError("API key cannot be empty")
    return api_key


def resolve_user_id(cli_value: Optional[str], *, interactive: bool) -> str:
    try:
        return get_config_value(
            cli_value,
            USER_ENV,
            f"FreeMobile user ID not found. Set {USER_ENV} environment variable or use -u option",
            "User ID",
            validate_user_id,
        )
    except ConfigError:
        if not interactive:
            raise
        logger.debug("user id missing or invalid; prompting")
        return prompt_for_user_id()


def resolve_api_key(cli_value: Optional[str], *, interactive: bool) -> str:
    try:
        return get_config_value(
            cli_value,
            PASS_ENV,
            f"FreeMobile API key not found. Set {PASS_ENV} environment variable or use -p option",
            "API key",
        )
    except ConfigError:
        if not interactive:
            raise
        logger.debug("api key missing; prompting")
        return prompt_for_api_key()


def resolve_credentials(
    user: Optional[str],
    password: Optional[str],
    *,
    interactive: Optional[bool] = None,
) -> Credentials:
    """Build credentials, prompting only when stdin is a terminal."""
    can_prompt = _is_interactive() if interactive is None else interactive
    return Credentials(
        user=resolve_user_id(user, interactive=can_prompt),
        password=resolve_api_key(password, interactive=can_prompt),
    )
