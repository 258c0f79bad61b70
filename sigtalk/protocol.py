"""Bit-level wire protocol for messages carried by SIGUSR1 and SIGUSR2.

Each byte of a message is sent most significant bit first. SIGUSR1 carries
a 1 bit and SIGUSR2 a 0 bit. A message ends with a NUL byte, i.e. eight
0 bits.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator

__all__ = [
    "SIGNAL_DELAY_SECONDS",
    "encode_bits",
    "bit_to_signal",
    "signal_to_bit",
    "MessageDecoder",
]

# Pause between two consecutive signals so the receiver can keep up.
SIGNAL_DELAY_SECONDS = 42e-6

_BITS_PER_BYTE = 8


def _check_bit(bit: int) -> int:
    if bit not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, got {bit!r}")
    return int(bit)


def encode_bits(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` followed by a terminating NUL byte.

    Text is encoded as UTF-8. As with any NUL-terminated string, the
    message ends at its first NUL character.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.partition(b"\0")[0]
    for byte in data + b"\0":
        for shift in range(_BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


def bit_to_signal(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``: SIGUSR1 for 1, SIGUSR2 for 0."""
    return signal.SIGUSR1 if _check_bit(bit) == 1 else signal.SIGUSR2


def signal_to_bit(signum: int) -> int:
    """Return the bit carried by ``signum``.

    Raises ValueError for any signal other than SIGUSR1 and SIGUSR2.
    """
    if signum == signal.SIGUSR1:
        return 1
    if signum == signal.SIGUSR2:
        return 0
    raise ValueError(f"unexpected signal received: {signum}")


class MessageDecoder:
    """Assembles incoming bits into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: int) -> int | None:
        """Add one bit.

        Returns the completed byte once eight bits have arrived (0 marks the
        end of a message), otherwise None.
        """
        self._value = (self._value << 1) | _check_bit(bit)
        self._count += 1
        if self._count < _BITS_PER_BYTE:
            return None
        completed = self._value
        self.reset()
        return completed

    def reset(self) -> None:
        """Discard any partially received byte."""
        self._value = 0
        self._count = 0