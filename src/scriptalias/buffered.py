from __future__ import annotations

import io
from pathlib import PurePosixPath


class BufferedFile:
    """In-memory script file used to hand generated source to a consumer.

    The content is exposed with a trailing newline. Mutating operations are
    no-ops: the file only exists in memory.
    """

    def __init__(self, path: str | PurePosixPath, content: str):
        self.path = PurePosixPath(path)
        self._content = content + "\n"

    @property
    def length(self) -> int:
        return len(self._content)

    @property
    def exists(self) -> bool:
        return True

    @property
    def hidden(self) -> bool:
        return False

    def open(self) -> io.BytesIO:
        return io.BytesIO(self._content.encode("utf-8"))

    def read_text(self) -> str:
        return self._content

    def copy(self, destination, overwrite: bool = False) -> None:
        return None

    def move(self, destination) -> None:
        return None

    def delete(self) -> None:
        return None
