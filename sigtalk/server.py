"""Receive messages sent bit by bit over SIGUSR1 and SIGUSR2."""

from __future__ import annotations

import codecs
import os
import signal
import sys
from types import FrameType
from typing import Any, TextIO

from .format import printf
from .protocol import MessageDecoder, signal_to_bit

__all__ = ["Server", "main"]


class Server:
    """Decodes incoming signals and writes each message to ``output``.

    Characters are written as soon as they are complete; the end of a
    message is written as a newline.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output
        self._decoder = MessageDecoder()
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _write(self, text: str) -> None:
        if text:
            self.output.write(text)
            self.output.flush()

    def handle_signal(self, signum: int, frame: FrameType | None = None) -> None:
        """Process one received signal."""
        try:
            bit = signal_to_bit(signum)
        except ValueError:
            self._write("Error: Unexpected signal received\n")
            return
        byte = self._decoder.feed(bit)
        if byte is None:
            return
        if byte == 0:
            self._write(self._text.decode(b"", final=True) + "\n")
            self._text.reset()
        else:
            self._write(self._text.decode(bytes([byte])))

    def install(self) -> dict[signal.Signals, Any]:
        """Route SIGUSR1 and SIGUSR2 to this server; return the old handlers."""
        return {
            signum: signal.signal(signum, self.handle_signal)
            for signum in (signal.SIGUSR1, signal.SIGUSR2)
        }


def main(argv: list[str] | None = None) -> int:
    """Command entry point: print the PID and print messages as they arrive."""
    server = Server()
    printf("Server PID: %d\n", os.getpid())
    server.install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())