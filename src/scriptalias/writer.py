from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, TextIO


class IndentedWriter:
    """Text sink that indents every new line by the current scope depth."""

    def __init__(self, stream: TextIO, *, indent: str = "    "):
        self._stream = stream
        self._indent = indent
        self._level = 0
        self._at_line_start = True

    @property
    def level(self) -> int:
        return self._level

    @property
    def stream(self) -> TextIO:
        return self._stream

    def write(self, text: str) -> None:
        if not text:
            return
        for chunk in text.splitlines(keepends=True):
            if self._at_line_start and chunk not in ("\n", "\r\n"):
                self._stream.write(self._indent * self._level)
            self._stream.write(chunk)
            self._at_line_start = chunk.endswith("\n")

    def write_line(self, text: str = "") -> None:
        self.write(text)
        self._stream.write("\n")
        self._at_line_start = True

    @contextmanager
    def scope(self) -> Iterator["IndentedWriter"]:
        """Open an indented block; the previous level is restored on any exit."""
        self._level += 1
        try:
            self.write_line()
            yield self
        finally:
            self._level -= 1
            self.write_line()
