"""Read lines from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 4


class LineReader(Generic[AnyStr]):
    """Return lines, newline included, from a text or binary stream.

    Data is pulled ``buffer_size`` units at a time; whatever follows the
    returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _take(self, end: int) -> AnyStr:
        assert self._pending is not None
        line = self._pending[:end]
        self._pending = self._pending[end:]
        return line

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending is not None:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                found = self._pending.find(newline)  # type: ignore[arg-type]
                if found != -1:
                    return self._take(found + 1)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk
        if self._pending:
            return self._take(len(self._pending))
        return None

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream``, newline included."""
    yield from LineReader(stream, buffer_size)