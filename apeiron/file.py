"""A text file opened in a read or a write mode, with typed value I/O."""

from __future__ import annotations

import io
import os
from enum import Enum
from pathlib import Path
from types import TracebackType
from typing import Any, Callable, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class Mode(Enum):
    """Ways in which a file can be opened."""

    READ = "read"
    WRITE = "write"
    APPEND = "append"
    TRUNCATE = "truncate"
    AT_END = "at_end"
    BINARY = "binary"


_WRITE_MODES = frozenset({Mode.WRITE, Mode.APPEND, Mode.TRUNCATE})


def _check_sep(sep: Optional[str]) -> None:
    if sep is not None and len(sep) != 1:
        raise ValueError("A separator must be a single character.")


class File:
    """A UTF-8 file opened for either reading or writing."""

    def __init__(self, file_path: Optional[PathLike] = None, *modes: Mode) -> None:
        self._path: Optional[Path] = None
        self._stream: Optional[io.TextIOBase] = None
        self._modes: tuple[Mode, ...] = ()
        self._peeked = ""
        self._at_end = False
        self._precision = 6
        if file_path is not None:
            self.open(file_path, *modes)

    def __enter__(self) -> File:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self.is_open():
            self.close()

    @property
    def path(self) -> Optional[Path]:
        """Path of the open file, or None."""
        return self._path

    def open(self, file_path: PathLike, *args: Mode) -> None:
        """Open ``file_path`` in the given modes; exactly one of read or write must be among them."""
        if self.is_open():
            raise RuntimeError(f"The file {Path(file_path).name!r} is already open.")
        for mode in args:
            if not isinstance(mode, Mode):
                raise TypeError(f"Expected a Mode, got {mode!r}.")
        path = Path(file_path)
        if path.is_dir():
            raise IsADirectoryError(f"The following is a directory, not a file: {path.name!r}")
        modes = set(args)
        readable = Mode.READ in modes
        writable = bool(modes & _WRITE_MODES)
        if readable == writable:
            raise ValueError("A file must be opened in either a read or a write mode.")
        if readable and not path.exists():
            raise FileNotFoundError(f"The file {path.name!r} was not found.")

        if readable:
            flag = "r"
        elif Mode.APPEND in modes:
            flag = "a"
        else:
            flag = "w"
        newline = "" if Mode.BINARY in modes else None
        stream = open(path, flag, encoding="utf-8", newline=newline)
        if Mode.AT_END in modes:
            stream.seek(0, io.SEEK_END)

        self._path = path
        self._stream = stream
        self._modes = tuple(args)
        self._peeked = ""
        self._at_end = False

    def close(self) -> None:
        """Close the file."""
        if self._stream is None:
            raise RuntimeError("The file had not been opened yet.")
        self._stream.close()
        self._stream = None
        self._path = None
        self._modes = ()
        self._peeked = ""
        self._at_end = False

    def is_open(self) -> bool:
        """Whether a file is open."""
        return self._stream is not None

    def is_valid(self) -> bool:
        """Whether the file is open and has not run past its end."""
        return self.is_open() and not self._at_end

    def is_end(self) -> bool:
        """Whether a read has reached the end of the file."""
        return self._at_end

    def set_precision(self, n: int) -> None:
        """Number of significant digits used when writing floats."""
        if n < 0:
            raise ValueError("The precision cannot be negative.")
        self._precision = n

    # Mode checks

    def _readable(self) -> bool:
        return Mode.READ in self._modes

    def _writable(self) -> bool:
        return any(mode in _WRITE_MODES for mode in self._modes)

    def _require_readable(self) -> io.TextIOBase:
        if self._stream is None:
            raise RuntimeError("The file is not yet open.")
        if not self._readable():
            raise io.UnsupportedOperation("The file must be readable to read data.")
        return self._stream

    def _require_writable(self) -> io.TextIOBase:
        if self._stream is None:
            raise RuntimeError("The file is not yet open.")
        if not self._writable():
            raise io.UnsupportedOperation("The file must be writable to write data.")
        return self._stream

    # Character access with one character of look-ahead

    def _read_char(self) -> str:
        if self._peeked:
            char, self._peeked = self._peeked, ""
            return char
        char = self._stream.read(1)
        if not char:
            self._at_end = True
        return char

    def _peek_char(self) -> str:
        if not self._peeked:
            self._peeked = self._stream.read(1)
            if not self._peeked:
                self._at_end = True
        return self._peeked

    def _read_token(self, sep: Optional[str]) -> str:
        char = self._read_char()
        while char and char.isspace():
            char = self._read_char()
        if not char:
            raise EOFError("No data left to read.")
        chars = []
        while char and not char.isspace() and char != sep:
            chars.append(char)
            char = self._read_char()
        self._peeked = char
        return "".join(chars)

    # Reading

    def read_line(self) -> str:
        """Read the next line without its line ending."""
        stream = self._require_readable()
        if self._peeked:
            first, self._peeked = self._peeked, ""
            if first == "\n":
                return ""
            line = first + stream.readline()
        else:
            line = stream.readline()
        if line.endswith("\n"):
            return line[:-1]
        self._at_end = True
        return line

    def read_values(self, *args: Callable[[str], Any], sep: Optional[str] = None) -> tuple:
        """Read one value per given type, separated by whitespace or by ``sep``."""
        self._require_readable()
        if not args:
            raise TypeError("At least one type to read is required.")
        _check_sep(sep)
        values = []
        last = len(args) - 1
        for i, kind in enumerate(args):
            token = self._read_token(sep)
            values.append(_convert(kind, token))
            if i < last and sep is not None:
                if self._peek_char() != sep:
                    raise ValueError(f"The data to be read in is not delimited by a {sep!r} character.")
                self._read_char()
        return tuple(values)

    # Writing

    def write(self, text: str) -> None:
        """Write ``text`` as it is."""
        self._require_writable().write(text)

    def write_values(self, *args: Any, sep: Optional[str] = None) -> None:
        """Write values one after another, with ``sep`` between them if given."""
        stream = self._require_writable()
        _check_sep(sep)
        stream.write((sep or "").join(self._format(value) for value in args))

    def _format(self, value: Any) -> str:
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, float):
            return f"{value:.{max(self._precision, 1)}g}"
        return str(value)


def _convert(kind: Callable[[str], Any], token: str) -> Any:
    if kind is bool:
        number = int(token)
        if number not in (0, 1):
            raise ValueError(f"Cannot read {token!r} as a boolean.")
        return bool(number)
    return kind(token)