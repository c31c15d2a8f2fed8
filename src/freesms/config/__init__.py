"""Configuration constants for freesms."""

from freesms.config.loader import load_config


# --- Initialize Configuration ---
_CONFIG = load_config()

# --- Expose Constants ---

# General
_gen = _CONFIG["general"]
LOG_LEVEL = _gen.get("log_level", "INFO")
LOG_FILE = _gen.get("log_file", "~/.config/freesms/logs/freesms.log")
MAX_INPUT_LENGTH = int(_gen.get("max_input_length", 5000))
MESSAGE_PREVIEW_LENGTH = int(_gen.get("message_preview_length", 100))

# Free Mobile API
_api = _CONFIG["api"]
API_URL = _api.get("url", "https://smsapi.free-mobile.fr/sendmsg")
REQUEST_TIMEOUT = _api.get("request_timeout", 30)
USER_AGENT = _api.get("user_agent", "freesms/0.1.0")
USER_ENV = _api.get("user_env", "FREEMOBILE_USER")
PASS_ENV = _api.get("pass_env", "FREEMOBILE_PASS")

# SMS limits
_sms = _CONFIG["sms"]
MAX_MESSAGE_LENGTH = int(_sms.get("max_message_length", 999))
PREFIX_RESERVE_LENGTH = int(_sms.get("prefix_reserve_length", 8))
CHUNK_DELAY_MS = int(_sms.get("chunk_delay_ms", 500))
