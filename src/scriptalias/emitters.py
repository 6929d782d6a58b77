"""Type and parameter renderers for the script dialect."""

from __future__ import annotations

import enum
import math
from typing import Any, Sequence

from .model import Parameter, TypeRef
from .writer import IndentedWriter


_KEYWORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char",
        "checked", "class", "const", "continue", "decimal", "default", "delegate",
        "do", "double", "else", "enum", "event", "explicit", "extern", "false",
        "finally", "fixed", "float", "for", "foreach", "goto", "if", "implicit",
        "in", "int", "interface", "internal", "is", "lock", "long", "namespace",
        "new", "null", "object", "operator", "out", "override", "params", "private",
        "protected", "public", "readonly", "ref", "return", "sbyte", "sealed",
        "short", "sizeof", "stackalloc", "static", "string", "struct", "switch",
        "this", "throw", "true", "try", "typeof", "uint", "ulong", "unchecked",
        "unsafe", "ushort", "using", "virtual", "void", "volatile", "while",
    }
)

# Types whose integer defaults are written as plain literals (anything else is cast).
_NUMERIC_TYPES = frozenset(
    {
        "Byte", "SByte", "Int16", "UInt16", "Int32", "UInt32", "Int64", "UInt64",
        "Single", "Double", "Decimal", "Object",
        "byte", "sbyte", "short", "ushort", "int", "uint", "long", "ulong",
        "float", "double", "decimal", "object",
    }
)


class TypeEmitter:
    def get_string(self, type_ref: TypeRef) -> str:
        if type_ref.is_generic_parameter:
            return type_ref.name + "[]" * type_ref.array_rank

        # Strip CLR arity suffixes (`List`1` -> `List`).
        name = type_ref.name.split("`", 1)[0]
        text = f"{type_ref.namespace}.{name}" if type_ref.namespace else name
        if type_ref.generic_arguments:
            text += "<" + ", ".join(self.get_string(a) for a in type_ref.generic_arguments) + ">"
        return text + "[]" * type_ref.array_rank

    def write(self, writer: IndentedWriter, type_ref: TypeRef) -> None:
        writer.write(self.get_string(type_ref))


class ParameterEmitOptions(enum.Flag):
    DEFAULT = 0
    INVOCATION = enum.auto()


def escape_identifier(name: str) -> str:
    return f"@{name}" if name in _KEYWORDS else name


def escape_string(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )


class ParameterEmitter:
    def __init__(self, type_emitter: TypeEmitter):
        if type_emitter is None:
            raise ValueError("type_emitter is required")
        self._type_emitter = type_emitter

    def get_tokens(self, parameter: Parameter, options: ParameterEmitOptions) -> list[str]:
        tokens: list[str] = []
        name = escape_identifier(parameter.name)

        if ParameterEmitOptions.INVOCATION in options:
            if parameter.modifier in {"ref", "out", "in"}:
                tokens.append(parameter.modifier)
            tokens.append(name)
            return tokens

        if parameter.modifier:
            tokens.append(parameter.modifier)
        tokens.append(self._type_emitter.get_string(parameter.type))
        tokens.append(name)
        if parameter.has_default:
            tokens.extend(["=", self.format_default(parameter.type, parameter.default)])
        return tokens

    def render(self, parameters: Sequence[Parameter], options: ParameterEmitOptions) -> list[str]:
        """Render one fragment per parameter, in order."""
        return [" ".join(self.get_tokens(p, options)) for p in parameters]

    def format_default(self, type_ref: TypeRef, value: Any) -> str:
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            if type_ref.namespace == "System" and type_ref.name == "Char" and len(value) == 1:
                return "'" + escape_string(value).replace("'", "\\'") + "'"
            return '"' + escape_string(value) + '"'
        if isinstance(value, int):
            if type_ref.namespace in {"", "System"} and type_ref.name in _NUMERIC_TYPES:
                return str(value)
            # Enum defaults arrive as their underlying integer value.
            return f"({self._type_emitter.get_string(type_ref)}){value}"
        if isinstance(value, float):
            if not math.isfinite(value):
                return self._format_non_finite(type_ref, value)
            suffix = {"Single": "f", "float": "f", "Decimal": "m", "decimal": "m"}.get(type_ref.name, "")
            return repr(value) + suffix
        return str(value)

    def _format_non_finite(self, type_ref: TypeRef, value: float) -> str:
        if type_ref.name in {"Decimal", "decimal"}:
            raise ValueError(f"decimal default cannot be {value!r}")
        owner = "float" if type_ref.name in {"Single", "float"} else "double"
        if math.isnan(value):
            return f"{owner}.NaN"
        return f"{owner}.PositiveInfinity" if value > 0 else f"{owner}.NegativeInfinity"
