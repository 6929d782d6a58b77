from __future__ import annotations

from ..emitters import TypeEmitter
from ..model import AliasDescriptor
from ..writer import IndentedWriter
from .base import AliasGenerator
from .helpers import CONTEXT, PUBLIC, write_docs, write_guarded_body


class PropertyAliasGenerator(AliasGenerator):
    """Generates a read-only script property backed by the alias's library function.

    Cached aliases store the first value in a private backing field; a
    separate flag records the fetch, so value types are cached too.
    """

    def __init__(self, type_emitter: TypeEmitter | None = None, *, indent: str = "    "):
        super().__init__(indent=indent)
        self._type_emitter = type_emitter or TypeEmitter()

    def emit(self, writer: IndentedWriter, descriptor: AliasDescriptor) -> None:
        type_text = self._type_emitter.get_string(descriptor.return_type)
        cached = descriptor.cached and not (descriptor.obsolete and descriptor.obsolete.is_error)
        field = f"_{descriptor.name}"

        if cached:
            writer.write_line(f"private {type_text} {field};")
            writer.write_line(f"private bool {field}Cached;")

        write_docs(writer, descriptor.documentation)
        writer.write(f"{PUBLIC} {type_text} {descriptor.name}")
        writer.write_line()
        writer.write("{")
        with writer.scope():
            writer.write("get")
            writer.write_line()
            writer.write("{")
            with writer.scope():
                write_guarded_body(
                    writer,
                    self._type_emitter,
                    descriptor,
                    lambda: self._write_getter(writer, descriptor, field if cached else None),
                )
            writer.write("}")
        writer.write("}")

    def _call(self, descriptor: AliasDescriptor) -> str:
        return f"{self._type_emitter.get_string(descriptor.declaring_type)}.{descriptor.name}({CONTEXT})"

    def _write_getter(self, writer: IndentedWriter, descriptor: AliasDescriptor, field: str | None) -> None:
        if field is None:
            writer.write(f"return {self._call(descriptor)};")
            return

        writer.write(f"if (!{field}Cached)")
        writer.write_line()
        writer.write("{")
        with writer.scope():
            writer.write(f"{field} = {self._call(descriptor)};")
            writer.write_line()
            writer.write(f"{field}Cached = true;")
        writer.write("}")
        writer.write_line()
        writer.write(f"return {field};")
