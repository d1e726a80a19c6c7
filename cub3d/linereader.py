"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 500


class LineReader(Generic[AnyStr]):
    """Split what a stream yields into lines, each ending with its newline.

    The stream may be text or binary; lines come back as the same type.
    A chunk read from the stream ends at its first NUL character, if it
    has one, and whatever follows the NUL in that chunk is dropped.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[AnyStr] = None

    @staticmethod
    def _find_newline(text: AnyStr) -> int:
        newline = b"\n" if isinstance(text, bytes) else "\n"
        return text.find(newline)  # type: ignore[arg-type]

    @staticmethod
    def _until_nul(chunk: AnyStr) -> AnyStr:
        nul = b"\0" if isinstance(chunk, bytes) else "\0"
        end = chunk.find(nul)  # type: ignore[arg-type]
        return chunk if end < 0 else chunk[:end]

    def _has_line(self) -> bool:
        stash = self._stash
        return stash is not None and self._find_newline(stash) >= 0

    def read_line(self) -> Optional[AnyStr]:
        """The next line, newline included, or None once the stream is exhausted."""
        while not self._has_line():
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._stash = None
                raise
            if not chunk:
                break
            chunk = self._until_nul(chunk)
            self._stash = chunk if self._stash is None else self._stash + chunk
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        index = self._find_newline(stash)
        end = len(stash) if index < 0 else index + 1
        line, rest = stash[:end], stash[end:]
        self._stash = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line