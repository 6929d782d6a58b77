"""Alias descriptor model."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable


# Marks a parameter without a default value; `None` is an explicit `null` default.
NO_DEFAULT: Any = object()


def _split_suffix(t: str) -> tuple[str, str]:
    t = t.strip()
    if t.endswith("[]"):
        return "[]", t[:-2].strip()
    return "", t


def _split_generic_args(inner: str) -> list[str]:
    out: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(inner):
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
        elif ch == "," and depth == 0:
            out.append(inner[start:i].strip())
            start = i + 1
    tail = inner[start:].strip()
    if tail:
        out.append(tail)
    return out


@dataclass(frozen=True)
class TypeRef:
    name: str
    namespace: str = ""
    generic_arguments: tuple["TypeRef", ...] = ()
    array_rank: int = 0
    is_generic_parameter: bool = False

    VOID: ClassVar["TypeRef"]

    def is_void(self) -> bool:
        # Identity by name + namespace; decorations are irrelevant for the marker.
        return self.namespace == "System" and self.name == "Void"


TypeRef.VOID = TypeRef(name="Void", namespace="System")


def parse_type(text: str, *, generic_names: Iterable[str] = ()) -> TypeRef:
    """Parse a textual type reference such as ``System.Collections.Generic.List<T>[]``.

    Names listed in ``generic_names`` are parsed as generic parameter references.
    """
    generic_names = frozenset(generic_names)
    t = text.strip()
    if not t:
        raise ValueError("empty type reference")

    rank = 0
    while True:
        s, rest = _split_suffix(t)
        if not s:
            break
        rank += 1
        t = rest

    args: tuple[TypeRef, ...] = ()
    if t.endswith(">") and "<" in t:
        i = t.index("<")
        head = t[:i].strip()
        args = tuple(
            parse_type(a, generic_names=generic_names) for a in _split_generic_args(t[i + 1 : -1])
        )
    else:
        head = t

    if head in generic_names and not args:
        return TypeRef(name=head, array_rank=rank, is_generic_parameter=True)
    if head == "void" and not args and not rank:
        # The dialect keyword names the same no-value marker as System.Void.
        return TypeRef.VOID

    namespace, _, name = head.rpartition(".")
    return TypeRef(name=name, namespace=namespace, generic_arguments=args, array_rank=rank)


@dataclass(frozen=True)
class GenericParameter:
    name: str
    constraints: tuple[str, ...] = ()


PARAMETER_MODIFIERS = frozenset({"", "ref", "out", "in", "params"})


@dataclass(frozen=True)
class Parameter:
    name: str
    type: TypeRef
    default: Any = NO_DEFAULT
    # One of PARAMETER_MODIFIERS.
    modifier: str = ""

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


@dataclass(frozen=True)
class ObsoleteInfo:
    message: str = ""
    is_error: bool = False


class AliasKind(str, enum.Enum):
    METHOD = "method"
    PROPERTY = "property"


@dataclass(frozen=True)
class AliasDescriptor:
    """A library function exposed to build scripts as an alias.

    When ``parameters`` is non-empty its first entry is the receiver (the
    script context). ``return_type`` is never ``None``; functions returning
    nothing carry ``TypeRef.VOID``.
    """

    name: str
    return_type: TypeRef
    declaring_type: TypeRef
    generic_parameters: tuple[GenericParameter, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    documentation: str | None = None
    obsolete: ObsoleteInfo | None = None
    kind: AliasKind = AliasKind.METHOD
    # Property aliases only: memoize the value in a backing field.
    cached: bool = False
