"""Tests for ordered, paced chunk delivery."""

from unittest.mock import Mock, call

import pytest

from freesms.core.dispatch import dispatch_chunks
from freesms.core.exceptions import TooManyRequestsError


def test_sends_in_order_with_pauses_between():
    events = []
    dispatch_chunks(
        ["[1/3] a", "[2/3] b", "[3/3] c"],
        lambda chunk: events.append(("send", chunk)),
        delay_ms=500,
        sleep=lambda seconds: events.append(("sleep", seconds)),
    )

    assert events == [
        ("send", "[1/3] a"),
        ("sleep", 0.5),
        ("send", "[2/3] b"),
        ("sleep", 0.5),
        ("send", "[3/3] c"),
    ]


def test_single_chunk_does_not_sleep():
    send = Mock()
    sleep = Mock()
    dispatch_chunks(["hello"], send, delay_ms=500, sleep=sleep)

    send.assert_called_once_with("hello")
    sleep.assert_not_called()


def test_empty_sequence_is_a_no_op():
    send = Mock()
    sleep = Mock()
    dispatch_chunks([], send, delay_ms=500, sleep=sleep)

    send.assert_not_called()
    sleep.assert_not_called()


def test_zero_delay_skips_sleep():
    send = Mock()
    sleep = Mock()
    dispatch_chunks(["a", "b"], send, delay_ms=0, sleep=sleep)

    assert send.call_args_list == [call("a"), call("b")]
    sleep.assert_not_called()


def test_default_delay_comes_from_config():
    from freesms.config import CHUNK_DELAY_MS

    sleep = Mock()
    dispatch_chunks(["a", "b"], Mock(), sleep=sleep)
    sleep.assert_called_once_with(CHUNK_DELAY_MS / 1000)


def test_failure_stops_remaining_chunks():
    """Earlier parts stay sent; later parts are never attempted."""
    sent = []

    def send(chunk):
        if chunk == "b":
            raise TooManyRequestsError(status_code=402)
        sent.append(chunk)

    sleep = Mock()
    with pytest.raises(TooManyRequestsError):
        dispatch_chunks(["a", "b", "c"], send, delay_ms=500, sleep=sleep)

    assert sent == ["a"]
    sleep.assert_called_once_with(0.5)


def test_interrupt_during_pause_aborts():
    send = Mock()
    sleep = Mock(side_effect=KeyboardInterrupt)

    with pytest.raises(KeyboardInterrupt):
        dispatch_chunks(["a", "b"], send, delay_ms=500, sleep=sleep)

    send.assert_called_once_with("a")
