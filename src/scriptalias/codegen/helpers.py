"""Emission pieces shared by the alias generation strategies."""

from __future__ import annotations

from typing import Callable

from ..emitters import TypeEmitter, escape_string
from ..model import AliasDescriptor
from ..writer import IndentedWriter

PUBLIC = "public"
VOID = "void"
CONTEXT = "Context"
OBSOLETE_EXCEPTION = "Cake.ScriptServer.CakeException"
SUPPRESS_OBSOLETE_BEGIN = "#pragma warning disable 0618"
SUPPRESS_OBSOLETE_END = "#pragma warning restore 0618"


def write_docs(writer: IndentedWriter, documentation: str | None) -> None:
    # Documentation is an opaque blob: written as-is, never reformatted.
    if not documentation:
        return
    writer.write(documentation)
    if not documentation.endswith("\n"):
        writer.write_line()


def qualified_name(type_emitter: TypeEmitter, alias: AliasDescriptor) -> str:
    return f"{type_emitter.get_string(alias.declaring_type)}.{alias.name}"


def obsolete_message(type_emitter: TypeEmitter, alias: AliasDescriptor) -> str:
    message = f"The alias {qualified_name(type_emitter, alias)} has been made obsolete."
    detail = (alias.obsolete.message if alias.obsolete else "") or ""
    if detail.strip():
        message = f"{message} {detail.strip()}"
    return escape_string(message)


def generic_suffix(alias: AliasDescriptor) -> str:
    if not alias.generic_parameters:
        return ""
    return "<" + ",".join(p.name for p in alias.generic_parameters) + ">"


def write_return_type(writer: IndentedWriter, type_emitter: TypeEmitter, alias: AliasDescriptor) -> None:
    if alias.return_type.is_void():
        writer.write(VOID)
    else:
        type_emitter.write(writer, alias.return_type)


def write_guarded_body(
    writer: IndentedWriter,
    type_emitter: TypeEmitter,
    alias: AliasDescriptor,
    write_invocation: Callable[[], None],
) -> None:
    """Write the invocation, honouring the alias's obsolete state.

    An obsolete-as-error alias throws instead of invoking. An obsolete-as-warning
    alias logs a warning and invokes with the obsolete diagnostic suppressed.
    """
    obsolete = alias.obsolete
    if obsolete is None:
        write_invocation()
        return

    message = obsolete_message(type_emitter, alias)
    if obsolete.is_error:
        writer.write(f'throw new {OBSOLETE_EXCEPTION}("{message}");')
        return

    writer.write(f'{CONTEXT}.Log.Warning("Warning: {message}");')
    writer.write_line()
    writer.write(SUPPRESS_OBSOLETE_BEGIN)
    writer.write_line()
    write_invocation()
    writer.write_line()
    writer.write(SUPPRESS_OBSOLETE_END)
