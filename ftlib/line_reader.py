"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 4


def _newline_index(data: AnyStr) -> int:
    """Return the index of the first newline in ``data``, or -1."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past a newline is held for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if stream is None:
            raise ValueError("stream must not be None")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._store: Optional[AnyStr] = None

    def _fill(self) -> None:
        while self._store is None or _newline_index(self._store) < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._store = chunk if self._store is None else self._store + chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when no data is left."""
        self._fill()
        store = self._store
        if not store:
            self._store = None
            return None
        index = _newline_index(store)
        if index < 0:
            self._store = None
            return store
        self._store = store[index + 1:]
        return store[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> list[AnyStr]:
    """Read every remaining line of ``stream``."""
    return list(LineReader(stream, buffer_size))