import io
import os
import signal
from unittest import mock

import pytest

from sigtalk.client import send_message
from sigtalk.protocol import bit_to_signal, encode_bits
from sigtalk.server import Server, main


@pytest.fixture
def restore_handlers():
    saved = {s: signal.getsignal(s) for s in (signal.SIGUSR1, signal.SIGUSR2)}
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def _deliver(server, message):
    for bit in encode_bits(message):
        server.handle_signal(bit_to_signal(bit), None)


def test_message_is_written_with_newline():
    out = io.StringIO()
    server = Server(out)
    _deliver(server, "hi there")
    assert out.getvalue() == "hi there\n"


def test_consecutive_messages():
    out = io.StringIO()
    server = Server(out)
    _deliver(server, "one")
    _deliver(server, "two")
    assert out.getvalue().splitlines() == ["one", "two"]


def test_unicode_round_trip():
    out = io.StringIO()
    server = Server(out)
    _deliver(server, "grüße €")
    assert out.getvalue() == "grüße €\n"


def test_partial_byte_writes_nothing():
    out = io.StringIO()
    server = Server(out)
    for bit in list(encode_bits("A"))[:7]:
        server.handle_signal(bit_to_signal(bit), None)
    assert out.getvalue() == ""


def test_unexpected_signal_reports_error():
    out = io.StringIO()
    server = Server(out)
    server.handle_signal(signal.SIGINT, None)
    assert out.getvalue() == "Error: Unexpected signal received\n"


def test_install_routes_signals(restore_handlers):
    server = Server(io.StringIO())
    previous = server.install()
    assert set(previous) == {signal.SIGUSR1, signal.SIGUSR2}
    assert signal.getsignal(signal.SIGUSR1) == server.handle_signal
    assert signal.getsignal(signal.SIGUSR2) == server.handle_signal


@mock.patch("sigtalk.client.time.sleep")
def test_real_signals_to_own_process(_sleep, restore_handlers):
    out = io.StringIO()
    server = Server(out)
    server.install()
    send_message(os.getpid(), "ok")
    assert out.getvalue() == "ok\n"


@mock.patch("sigtalk.server.signal.pause", side_effect=KeyboardInterrupt)
def test_main_prints_pid(_pause, capsys, restore_handlers):
    assert main([]) == 0
    assert capsys.readouterr().out == f"Server PID: {os.getpid()}\n"