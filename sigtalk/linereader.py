"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["BUFFER_SIZE", "LineReader", "read_lines"]

BUFFER_SIZE = 101


class LineReader(Generic[AnyStr]):
    """Yields lines from a text or binary stream.

    Data is pulled from the stream in chunks of ``buffer_size`` until a
    newline is seen or the stream is exhausted. Each line keeps its
    terminating newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _fill(self) -> None:
        while (
            self._stash is None
            or self._newline is None
            or self._newline not in self._stash
        ):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            if self._newline is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"  # type: ignore[assignment]
            self._stash = chunk if self._stash is None else self._stash + chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted.

        A read error discards any buffered data and is re-raised.
        """
        try:
            self._fill()
        except Exception:
            self._stash = None
            raise
        stash = self._stash
        if not stash or self._newline is None:
            self._stash = None
            return None
        index = stash.find(self._newline)
        if index < 0:
            self._stash = None
            return stash
        line, rest = stash[: index + 1], stash[index + 1 :]
        self._stash = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``."""
    yield from LineReader(stream, buffer_size)