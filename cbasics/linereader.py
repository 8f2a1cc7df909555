"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional, Tuple

BUFFER_SIZE = 5


def _split_line(data: AnyStr) -> Tuple[AnyStr, AnyStr]:
    """Split ``data`` after its first newline into (line, rest)."""
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    cut = data.find(newline)
    end = len(data) if cut < 0 else cut + 1
    return data[:end], data[end:]


class LineReader(Generic[AnyStr]):
    """Returns successive lines of a stream, each with its trailing newline if it had one.

    Data is read ``buffer_size`` units at a time; whatever follows the returned
    line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        pending = self._pending
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
            newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            if newline in chunk:
                break
        return pending

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        try:
            pending = self._fill()
        except OSError:
            self._pending = None
            raise
        if not pending:
            self._pending = None
            return None
        line, self._pending = _split_line(pending)
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``."""
    yield from LineReader(stream, buffer_size)