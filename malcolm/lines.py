"""Line-by-line reading from streams through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

DEFAULT_BUFFER_SIZE = 64


class LineReader:
    """Reads one line at a time, keeping leftover data separately per stream."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: dict[int, tuple[IO, AnyStr]] = {}

    def next_line(self, stream: IO[AnyStr]) -> AnyStr | None:
        """Return the next line of ``stream`` with its newline, or ``None`` at the end.

        The final line is returned without a newline when the stream does not
        end with one. Works on both text and binary streams. If reading fails,
        the data buffered for this stream is dropped and the error is raised.
        """
        entry = self._pending.pop(id(stream), None)
        chunk = entry[1] if entry is not None and entry[0] is stream else None
        parts: list[AnyStr] = []
        while True:
            if chunk is None:
                chunk = stream.read(self.buffer_size)
            if not chunk:
                break
            newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            index = chunk.find(newline)
            if index != -1:
                parts.append(chunk[:index + 1])
                rest = chunk[index + 1:]
                if rest:
                    self._pending[id(stream)] = (stream, rest)
                break
            parts.append(chunk)
            chunk = None
        if not parts:
            return None
        return parts[0][:0].join(parts)


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` in order."""
    reader = LineReader(buffer_size)
    while (line := reader.next_line(stream)) is not None:
        yield line