"""MessagePack codec for editor file-change events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import msgpack

from .errors import InvalidArgumentError, TransportDecodeError, TypeAndVersionError

# High byte: message type (file change), low byte: format version.
FILE_CHANGE_TYPE_AND_VERSION = 0x0101


@dataclass(frozen=True)
class LineChange:
    start_line: int = 0
    end_line: int = 0
    start_column: int = 0
    end_column: int = 0
    new_text: str = ""


@dataclass(frozen=True)
class FileChange:
    file_name: str
    buffer: str | None = None
    from_disk: bool = False
    line_changes: list[LineChange | None] = field(default_factory=list)


def encode_file_change(change: FileChange) -> bytes:
    if change is None:
        raise InvalidArgumentError("file change is required")

    lines = []
    for lc in change.line_changes:
        lc = lc or LineChange()
        lines.append([lc.start_line, lc.end_line, lc.start_column, lc.end_column, lc.new_text])

    payload = [
        FILE_CHANGE_TYPE_AND_VERSION,
        bool(change.from_disk),
        change.buffer,
        change.file_name,
        lines,
    ]
    return msgpack.packb(payload, use_bin_type=True)


def decode_file_change(payload: bytes) -> FileChange:
    if payload is None:
        raise InvalidArgumentError("payload is required")
    try:
        obj = msgpack.unpackb(payload, raw=False)
    except Exception as e:  # noqa: BLE001 - boundary decoding error
        raise TransportDecodeError(str(e)) from e

    if not isinstance(obj, list) or len(obj) != 5:
        raise TransportDecodeError("invalid file change envelope")

    type_and_version, from_disk, buffer, file_name, raw_lines = obj
    if type_and_version != FILE_CHANGE_TYPE_AND_VERSION:
        raise TypeAndVersionError("type and version does not match")
    if not isinstance(file_name, str) or not isinstance(raw_lines, list):
        raise TransportDecodeError("invalid file change fields")
    if buffer is not None and not isinstance(buffer, str):
        raise TransportDecodeError("invalid file change buffer")

    return FileChange(
        file_name=file_name,
        buffer=buffer,
        from_disk=bool(from_disk),
        line_changes=[_decode_line_change(x) for x in raw_lines],
    )


def _decode_line_change(raw: Any) -> LineChange:
    if not isinstance(raw, list) or len(raw) != 5:
        raise TransportDecodeError("invalid line change entry")
    start_line, end_line, start_column, end_column, new_text = raw
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in raw[:4]):
        raise TransportDecodeError("line change positions must be integers")
    if not isinstance(new_text, str):
        raise TransportDecodeError("line change text must be a string")
    return LineChange(
        start_line=start_line,
        end_line=end_line,
        start_column=start_column,
        end_column=end_column,
        new_text=new_text,
    )
