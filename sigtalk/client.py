"""Send a text message to a server process, one signal per bit."""

from __future__ import annotations

import os
import sys
import time

from .cstring import atoi
from .format import printf
from .protocol import SIGNAL_DELAY_SECONDS, bit_to_signal, encode_bits

__all__ = ["SignalSendError", "send_bit", "send_message", "main"]


class SignalSendError(OSError):
    """Raised when a signal cannot be delivered to the server."""


def send_bit(pid: int, bit: int) -> None:
    """Send one bit to ``pid`` and wait briefly for the receiver."""
    signum = bit_to_signal(bit)
    try:
        os.kill(pid, signum)
    except OSError as exc:
        raise SignalSendError(f"failed to send signal to process {pid}") from exc
    time.sleep(SIGNAL_DELAY_SECONDS)


def send_message(pid: int, message: str | bytes) -> None:
    """Send ``message`` to ``pid``, followed by the terminating NUL byte."""
    for bit in encode_bits(message):
        send_bit(pid, bit)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``client <server_pid> <message>``."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "client"
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        printf("Usage: %s <server_pid> <message>\n", prog)
        return 1
    server_pid = atoi(args[0])
    if server_pid <= 0:
        printf("Error: Invalid server PID\n")
        return 1
    try:
        send_message(server_pid, args[1])
    except SignalSendError:
        printf("Error: Failed to send signal\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())