"""Message sources (argument, file, stdin, prompt) and pre-send checks."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from rich.console import Console
from rich.prompt import Prompt

from freesms.config import MAX_INPUT_LENGTH, MESSAGE_PREVIEW_LENGTH
from freesms.core.exceptions import EmptyMessageError, InputError, MessageTooLongError
from freesms.core.graphemes import grapheme_length, truncate_graphemes

logger = logging.getLogger(__name__)


def _non_empty(text: str) -> str:
    cleaned = text.strip()
    if not cleaned:
        raise EmptyMessageError()
    return cleaned


def read_message_file(path: Union[str, Path]) -> str:
    """Read and trim a message from a UTF-8 text file."""
    file_path = Path(path).expanduser()
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(
            f"Cannot read message file {file_path}: {exc}", path=str(file_path)
        ) from exc
    logger.debug("read %d characters from %s", len(content), file_path)
    return _non_empty(content)


def read_message_stdin(stream: Optional[TextIO] = None) -> str:
    source = stream if stream is not None else sys.stdin
    try:
        content = source.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read message from stdin: {exc}") from exc
    return _non_empty(content)


def read_message_interactive(console: Console) -> str:
    console.print("Enter your message (press Enter to send, Ctrl+C to cancel):")
    try:
        message = Prompt.ask(">", console=console)
    except EOFError as exc:
        raise InputError("Interactive input failed") from exc
    return _non_empty(message)


def has_stdin_input() -> bool:
    """True when something is piped or redirected into stdin."""
    return not sys.stdin.isatty()


def validate_message(message: str, max_length: Optional[int] = None) -> None:
    """Reject blank messages and ones above the input ceiling."""
    limit = MAX_INPUT_LENGTH if max_length is None else max_length
    if not (message or "").strip():
        raise EmptyMessageError()
    length = grapheme_length(message)
    if length > limit:
        raise MessageTooLongError(length, limit)


def preview_message(
    message: str,
    verbose: bool,
    console: Console,
    preview_length: Optional[int] = None,
) -> None:
    if not verbose:
        return

    limit = MESSAGE_PREVIEW_LENGTH if preview_length is None else preview_length
    length = grapheme_length(message)
    console.print("📄 Message preview:")
    console.print(f"Length: {length} characters")
    if length > limit:
        console.print(f"Content (first {limit} characters):")
        console.print(truncate_graphemes(message, limit), markup=False, emoji=False)
        console.print("... (truncated for preview)")
    else:
        console.print("Content:")
        console.print(message, markup=False, emoji=False)
    console.print()
