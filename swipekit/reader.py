"""Seekable byte readers over files and in-memory buffers."""

from __future__ import annotations

from abc import ABC, abstractmethod


def buffer_hash(data: bytes) -> int:
    """Simple multiplicative hash (``h * 31 + byte``) wrapped to a signed 32-bit int."""
    result = 0
    for byte in data:
        result = (result * 31 + byte) & 0xFFFFFFFF
    return result - (1 << 32) if result >= 1 << 31 else result


class Reader(ABC):
    """A seekable source of bytes."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means the end was reached."""

    @abstractmethod
    def reached_end(self) -> bool: ...

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def tell(self) -> int: ...

    @abstractmethod
    def seek_from_begin(self, offset: int = 0) -> None: ...

    @abstractmethod
    def seek_from_end(self, offset: int = 0) -> None: ...

    def bytes_remaining(self) -> int:
        return self.size() - self.tell()

    def read_rest(self) -> bytes:
        """Read everything from the current position to the end."""
        return self.read(self.bytes_remaining())

    def read_whole(self) -> bytes:
        """Read the whole stream from its beginning."""
        self.seek_from_begin()
        return self.read_rest()


class BufferReader(Reader):
    """Reads from an in-memory byte buffer."""

    def __init__(self, data: bytes) -> None:
        self._buf = bytes(data)
        self._pos = 0

    def size(self) -> int:
        return len(self._buf)

    def tell(self) -> int:
        return self._pos

    def read(self, size: int) -> bytes:
        chunk = self._buf[self._pos : self._pos + max(size, 0)]
        self._pos += len(chunk)
        return chunk

    def reached_end(self) -> bool:
        return self._pos == len(self._buf)

    def _seek_to(self, pos: int) -> None:
        if not 0 <= pos <= len(self._buf):
            raise ValueError(f"position {pos} outside buffer of {len(self._buf)} bytes")
        self._pos = pos

    def seek_from_begin(self, offset: int = 0) -> None:
        self._seek_to(offset)

    def seek_from_end(self, offset: int = 0) -> None:
        """Move to ``offset`` bytes before the end."""
        self._seek_to(len(self._buf) - offset)


class StringReader(BufferReader):
    """Reads the UTF-8 bytes of a string."""

    def __init__(self, text: str) -> None:
        super().__init__(text.encode("utf-8"))