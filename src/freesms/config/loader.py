"""Configuration loading and merging logic."""

import logging
import sys
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any, Dict

CONFIG_FILENAME = "general.toml"

logger = logging.getLogger(__name__)


def _get_config_dir() -> Path:
    """Return the configuration directory path."""
    return Path.home() / ".config" / "freesms"


def _merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``update`` into ``base`` in place."""
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config() -> Dict[str, Any]:
    """Load bundled defaults, then overlay the user's general.toml if present."""
    final_config: Dict[str, Any] = {
        "general": {},
        "api": {},
        "sms": {},
    }

    resource_path = resources.files("freesms.data.config").joinpath(CONFIG_FILENAME)
    try:
        with resource_path.open("rb") as f:
            _merge(final_config, tomllib.load(f))
    except Exception as e:
        print(f"Warning: Failed to load bundled config {CONFIG_FILENAME}: {e}")

    user_file_path = _get_config_dir() / CONFIG_FILENAME
    if user_file_path.exists():
        try:
            with open(user_file_path, "rb") as f:
                _merge(final_config, tomllib.load(f))
            logger.debug("loaded user config from %s", user_file_path)
        except tomllib.TOMLDecodeError as e:
            print(
                f"Error: Invalid configuration file at {user_file_path}",
                file=sys.stderr,
            )
            print(f"Details: {e}", file=sys.stderr)
            sys.exit(1)
        except OSError as e:
            print(f"Warning: Failed to load config from {user_file_path}: {e}")

    return final_config
