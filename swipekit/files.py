"""File and directory helpers, binary file reader/writer and vocabulary loading."""

from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, Union, cast

from swipekit.endian import read_le_int16, read_le_int32, write_little_endian
from swipekit.reader import Reader

PathLike = Union[str, "os.PathLike[str]"]

_PRECISION = 10_000_000


class FileType(enum.Enum):
    NONE = 0
    FILE = 1
    DIR = 2
    LINK = 3
    SOCK = 4
    OTHER = 5
    UNKNOWN_ERROR = 6


class DirCreateResult(enum.Enum):
    SUCCESS = 0
    DIR_ALREADY_EXISTS = 1


def file_type(path: PathLike) -> FileType:
    """Report what, if anything, exists at ``path``."""
    try:
        mode = os.stat(path).st_mode
    except FileNotFoundError:
        return FileType.NONE
    except OSError:
        return FileType.UNKNOWN_ERROR
    if stat.S_ISDIR(mode):
        return FileType.DIR
    if stat.S_ISREG(mode):
        return FileType.FILE
    if stat.S_ISLNK(mode):
        return FileType.LINK
    if stat.S_ISSOCK(mode):
        return FileType.SOCK
    return FileType.OTHER


def make_dir_with_checks(path: PathLike) -> DirCreateResult:
    """Create a directory unless one already exists.

    Raises FileExistsError when something other than a directory is in the way.
    """
    kind = file_type(path)
    if kind is FileType.DIR:
        return DirCreateResult.DIR_ALREADY_EXISTS
    if kind is not FileType.NONE:
        raise FileExistsError(
            f"can't create dir for path {os.fspath(path)!r}: a {kind.name} exists there"
        )
    os.mkdir(path, 0o755)
    return DirCreateResult.SUCCESS


def delete_file(path: PathLike) -> None:
    os.remove(path)


def file_exists(path: PathLike) -> bool:
    """True when ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def file_size(path: PathLike) -> int:
    return os.path.getsize(path)


@dataclass
class Vocab:
    """A word with its count and relative frequency."""

    word: str
    cnt: int = 0
    p: float = 0.0
    pint: int = 0


def _atoi(text: str) -> int:
    sign, digits = 1, text
    if digits[:1] in "+-" and digits:
        sign = -1 if digits[0] == "-" else 1
        digits = digits[1:]
    end = 0
    while end < len(digits) and digits[end].isdigit():
        end += 1
    return sign * int(digits[:end]) if end else 0


def read_vocab(stream: Iterable[str]) -> dict[str, Vocab]:
    """Read ``word count`` lines into a word-sorted mapping.

    Blank lines are skipped; a missing or non-numeric count counts as 0. Each
    entry's ``pint`` is its share of the total count in units of 1e-7 and ``p``
    the same share as a fraction. A later duplicate word replaces an earlier one.
    """
    entries: list[Vocab] = []
    total = 0
    for line in stream:
        fields = line.split()
        if not fields:
            continue
        count = _atoi(fields[1]) if len(fields) > 1 else 0
        entries.append(Vocab(fields[0], count))
        total += count
    if entries and total == 0:
        raise ValueError("vocabulary counts sum to zero")
    result: dict[str, Vocab] = {}
    for entry in entries:
        numerator = entry.cnt * _PRECISION
        quotient = abs(numerator) // abs(total)
        entry.pint = quotient if (numerator >= 0) == (total > 0) else -quotient
        entry.p = entry.pint / _PRECISION
        result[entry.word] = entry
    return dict(sorted(result.items()))


class FileReader(Reader):
    """Binary file reader with little-endian integer and string helpers."""

    def __init__(self, path: PathLike, mode: str = "rb") -> None:
        self._fp = cast(BinaryIO, open(path, mode))
        self._size: int | None = None

    def __enter__(self) -> "FileReader":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._fp.close()

    def read(self, size: int) -> bytes:
        return self._fp.read(max(size, 0))

    def size(self) -> int:
        if self._size is None:
            here = self.tell()
            self._size = self._fp.seek(0, os.SEEK_END)
            self._fp.seek(here)
        return self._size

    def tell(self) -> int:
        return self._fp.tell()

    def seek_from_begin(self, offset: int = 0) -> None:
        self._fp.seek(offset, os.SEEK_SET)

    def seek_from_end(self, offset: int = 0) -> None:
        self._fp.seek(offset, os.SEEK_END)

    def reached_end(self) -> bool:
        return self.tell() >= self.size()

    def read_le_int16(self) -> int:
        return read_le_int16(self._fp)

    def read_le_int32(self) -> int:
        return read_le_int32(self._fp)

    def read_string(self) -> str:
        """Read a string stored as a 32-bit length followed by UTF-8 bytes."""
        length = self.read_le_int32()
        if length <= 0:
            return ""
        data = self.read(length)
        if len(data) < length:
            raise EOFError(f"expected {length} string bytes, got {len(data)}")
        return data.decode("utf-8")


class FileWriter:
    """Binary file writer with little-endian integer and string helpers."""

    def __init__(self, path: PathLike, mode: str = "wb") -> None:
        self._fp = cast(BinaryIO, open(path, mode))

    def __enter__(self) -> "FileWriter":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._fp.close()

    def flush(self) -> None:
        self._fp.flush()

    def write(self, data: bytes) -> int:
        return self._fp.write(data)

    def tell(self) -> int:
        return self._fp.tell()

    def seek_from_begin(self, offset: int = 0) -> None:
        self._fp.seek(offset, os.SEEK_SET)

    def seek_from_end(self, offset: int = 0) -> None:
        self._fp.seek(offset, os.SEEK_END)

    def write_string(self, text: str) -> None:
        """Write a 32-bit length followed by the UTF-8 bytes, with no terminator."""
        data = text.encode("utf-8")
        self.write_le_int32(len(data))
        if data:
            self.write(data)

    def write_le_int16(self, value: int) -> None:
        """Write the low 16 bits of ``value``."""
        write_little_endian(self._fp, value & 0xFFFF, 2)

    def write_le_int32(self, value: int) -> None:
        """Write the low 32 bits of ``value``."""
        write_little_endian(self._fp, value & 0xFFFFFFFF, 4)


def read_whole_file(path: PathLike) -> bytes:
    """Return the whole content of a binary file."""
    return Path(path).read_bytes()