"""Command-line interface for freesms (``send-sms``)."""

import argparse
import logging
import os
import sys
from typing import Dict, Optional, Type

from dotenv import load_dotenv
from rich.console import Console

from freesms import __version__
from freesms.api.client import FreeMobileClient
from freesms.cli import credentials as credentials_module
from freesms.cli import input as input_module
from freesms.config import LOG_FILE, LOG_LEVEL
from freesms.core.exceptions import (
    AccessDeniedError,
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
)
from freesms.core.graphemes import truncate_graphemes
from freesms.core.sanitizer import sanitize
from freesms.logger import mask_user_id, setup_logging

DEBUG_ORIGINAL_PREVIEW_LENGTH = 50
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

ERROR_HINTS: Dict[Type[FreeSmsError], str] = {
    EmptyMessageError: "Provide some text with -m, -f, stdin or the prompt.",
    MessageTooLongError: "Shorten the message or split it into several sends.",
    InvalidCredentialsError: "Check your user ID and API key.",
    TooManyRequestsError: "Wait a moment before sending again.",
    AccessDeniedError: "Enable the SMS notifications option in your Free Mobile account.",
    ServerError: "Free Mobile is having trouble; try again later.",
    UnknownApiError: "Free Mobile returned an unexpected response.",
    TransportError: "Check your network connection.",
    ConfigError: "Pass -u/-p or set the credentials environment variables.",
    InputError: "Check that the message source is readable UTF-8 text.",
}

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="send-sms",
        description="Send SMS messages via the FreeMobile API.",
    )
    parser.add_argument(
        "-u",
        "--user",
        metavar="USER_ID",
        help="FreeMobile user ID (8 digits). Defaults to $FREEMOBILE_USER.",
    )
    parser.add_argument(
        "-p",
        "--pass",
        dest="password",
        metavar="API_KEY",
        help="FreeMobile API key. Defaults to $FREEMOBILE_PASS.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-m", "--message", metavar="TEXT", help="Message to send")
    source.add_argument("-f", "--file", metavar="PATH", help="Read message from file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def describe_error(exc: FreeSmsError) -> str:
    """Return the user-facing text for ``exc`` including a hint when known."""
    for cls in type(exc).__mro__:
        hint = ERROR_HINTS.get(cls)
        if hint:
            return f"{exc}. {hint}"
    return str(exc)


def get_message(args: argparse.Namespace) -> str:
    """Resolve the message: argument, file, piped stdin, then prompt."""
    if args.message is not None:
        return args.message

    if args.file:
        if args.verbose:
            console.print(f"📁 Reading message from file: {args.file}", markup=False)
        return input_module.read_message_file(args.file)

    if input_module.has_stdin_input():
        if args.verbose:
            console.print("📥 Detected stdin input...")
        return input_module.read_message_stdin()

    if args.verbose:
        console.print("💬 No input detected, using interactive mode...")
    return input_module.read_message_interactive(console)


def run(args: argparse.Namespace) -> None:
    """Resolve credentials and message, then send."""
    creds = credentials_module.resolve_credentials(args.user, args.password)

    if args.verbose:
        console.print(f"🚀 Starting send-sms v{__version__}")
        console.print(f"📱 User ID: {mask_user_id(creds.user)}")

    client = FreeMobileClient(creds)
    message = get_message(args)
    input_module.validate_message(message)

    sanitized = sanitize(message)
    if os.environ.get("DEBUG") and sanitized != message:
        console.print("🐛 DEBUG - Original message:")
        console.print(
            f"{truncate_graphemes(message, DEBUG_ORIGINAL_PREVIEW_LENGTH)}...",
            markup=False,
            emoji=False,
        )
        console.print("🐛 DEBUG - Sanitized message (what will be sent):")

    input_module.preview_message(sanitized, args.verbose, console)

    if args.verbose:
        parts = client.prepare(sanitized)
        console.print(f"📤 Sending SMS ({len(parts)} part(s))...")

    client.send_sanitized(sanitized)

    if args.verbose:
        console.print("✅ SMS sent successfully!")
    else:
        console.print("✅ SMS sent")


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(LOG_LEVEL, LOG_FILE)
    load_dotenv()

    try:
        run(args)
    except KeyboardInterrupt:
        logger.info("interrupted by user")
        err_console.print("\n🛑 Interrupted by user")
        sys.exit(EXIT_INTERRUPTED)
    except FreeSmsError as exc:
        logger.error("send-sms failed: %s", type(exc).__name__)
        err_console.print(f"❌ Error: {describe_error(exc)}", markup=False)
        sys.exit(EXIT_FAILURE)
