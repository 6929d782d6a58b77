from __future__ import annotations

from ..emitters import ParameterEmitOptions, ParameterEmitter, TypeEmitter
from ..model import AliasDescriptor
from ..writer import IndentedWriter
from .base import AliasGenerator
from .helpers import (
    CONTEXT,
    PUBLIC,
    generic_suffix,
    write_docs,
    write_guarded_body,
    write_return_type,
)


class MethodAliasGenerator(AliasGenerator):
    """Generates a script method that forwards to the alias's library function.

    The receiver (first parameter) is hidden from the script-facing signature
    and passed as `Context` at the call site.
    """

    def __init__(
        self,
        type_emitter: TypeEmitter | None = None,
        parameter_emitter: ParameterEmitter | None = None,
        *,
        indent: str = "    ",
    ):
        super().__init__(indent=indent)
        self._type_emitter = type_emitter or TypeEmitter()
        self._parameter_emitter = parameter_emitter or ParameterEmitter(self._type_emitter)

    def emit(self, writer: IndentedWriter, descriptor: AliasDescriptor) -> None:
        write_docs(writer, descriptor.documentation)

        writer.write(f"{PUBLIC} ")
        write_return_type(writer, self._type_emitter, descriptor)
        writer.write(" ")
        writer.write(descriptor.name)
        writer.write(generic_suffix(descriptor))

        writer.write("(")
        writer.write(self.parameter_list(descriptor, invocation=False))
        writer.write(")")

        # One clause per constrained generic parameter.
        for gp in descriptor.generic_parameters:
            if gp.constraints:
                writer.write(f" where {gp.name} : {','.join(gp.constraints)}")

        writer.write_line()
        writer.write("{")
        with writer.scope():
            write_guarded_body(
                writer,
                self._type_emitter,
                descriptor,
                lambda: self._write_invocation(writer, descriptor),
            )
        writer.write("}")

    def _write_invocation(self, writer: IndentedWriter, descriptor: AliasDescriptor) -> None:
        if not descriptor.return_type.is_void():
            writer.write("return ")
        self._type_emitter.write(writer, descriptor.declaring_type)
        writer.write(".")
        writer.write(descriptor.name)
        writer.write(generic_suffix(descriptor))
        writer.write("(")
        writer.write(self.parameter_list(descriptor, invocation=True))
        writer.write(");")

    def parameter_list(self, descriptor: AliasDescriptor, *, invocation: bool) -> str:
        if not descriptor.parameters:
            return ""

        options = ParameterEmitOptions.INVOCATION if invocation else ParameterEmitOptions.DEFAULT
        fragments = self._parameter_emitter.render(descriptor.parameters[1:], options)
        if invocation:
            fragments.insert(0, CONTEXT)
        return ", ".join(fragments)
