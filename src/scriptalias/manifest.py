"""Descriptor manifest parsing."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any

from .errors import DescriptorError
from .model import (
    NO_DEFAULT,
    PARAMETER_MODIFIERS,
    AliasDescriptor,
    AliasKind,
    GenericParameter,
    ObsoleteInfo,
    Parameter,
    parse_type,
)

logger = logging.getLogger(__name__)


def read_descriptors(path: str | Path) -> list[AliasDescriptor]:
    path = Path(path)
    if not path.exists():
        raise DescriptorError(f"descriptor manifest not found at {path}")
    try:
        obj = json.loads(path.read_text(encoding="utf-8"))
    except Exception as e:  # noqa: BLE001 - boundary parse
        raise DescriptorError(f"failed to parse descriptor manifest {path}: {e}") from e
    return load_descriptors(obj)


def load_descriptors(manifest: dict[str, Any]) -> list[AliasDescriptor]:
    """Build descriptors from a parsed manifest; malformed entries are skipped."""
    if not isinstance(manifest, dict):
        raise DescriptorError("descriptor manifest must be a JSON object")
    raw_aliases = manifest.get("aliases")
    if not isinstance(raw_aliases, list):
        raise DescriptorError("descriptor manifest is missing an 'aliases' list")

    out: list[AliasDescriptor] = []
    for i, raw in enumerate(raw_aliases):
        try:
            out.append(_parse_alias(raw))
        except (TypeError, ValueError) as e:
            logger.warning("skipping alias #%d: %s", i, e)
    return out


def _parse_alias(raw: Any) -> AliasDescriptor:
    if not isinstance(raw, dict):
        raise TypeError("expected an object")

    name = raw.get("name")
    ret = raw.get("return_type")
    decl = raw.get("declaring_type")
    if not (isinstance(name, str) and name):
        raise ValueError("missing name")
    if not isinstance(ret, str):
        raise ValueError(f"{name}: missing return_type")
    if not isinstance(decl, str):
        raise ValueError(f"{name}: missing declaring_type")

    generics = tuple(_parse_generic(g, alias=name) for g in raw.get("generic_parameters") or [])
    generic_names = [g.name for g in generics]

    params = tuple(
        _parse_parameter(p, alias=name, generic_names=generic_names)
        for p in raw.get("parameters") or []
    )

    docs = raw.get("documentation")
    if docs is not None and not isinstance(docs, str):
        raise ValueError(f"{name}: documentation must be a string")

    obsolete = None
    ro = raw.get("obsolete")
    if isinstance(ro, dict):
        msg = ro.get("message")
        obsolete = ObsoleteInfo(
            message=msg if isinstance(msg, str) else "",
            is_error=bool(ro.get("is_error", False)),
        )

    kind = AliasKind(raw.get("kind", AliasKind.METHOD.value))

    return AliasDescriptor(
        name=name,
        return_type=parse_type(ret, generic_names=generic_names),
        declaring_type=parse_type(decl),
        generic_parameters=generics,
        parameters=params,
        documentation=docs,
        obsolete=obsolete,
        kind=kind,
        cached=bool(raw.get("cached", False)),
    )


def _parse_generic(raw: Any, *, alias: str) -> GenericParameter:
    if isinstance(raw, str):
        return GenericParameter(name=raw)
    if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
        raise ValueError(f"{alias}: invalid generic parameter")
    constraints = raw.get("constraints") or []
    if not isinstance(constraints, list) or not all(isinstance(c, str) for c in constraints):
        raise ValueError(f"{alias}: constraints must be a list of strings")
    return GenericParameter(name=raw["name"], constraints=tuple(constraints))


def _parse_parameter(raw: Any, *, alias: str, generic_names: list[str]) -> Parameter:
    if not isinstance(raw, dict):
        raise ValueError(f"{alias}: invalid parameter")
    pname = raw.get("name")
    ptype = raw.get("type")
    if not (isinstance(pname, str) and pname and isinstance(ptype, str)):
        raise ValueError(f"{alias}: parameter needs a name and a type")
    modifier = raw.get("modifier") or ""
    if modifier not in PARAMETER_MODIFIERS:
        raise ValueError(f"{alias}: unknown parameter modifier {modifier!r}")
    # A present "default" key (even null) means the parameter is optional.
    default = raw["default"] if "default" in raw else NO_DEFAULT
    if isinstance(default, (list, dict)):
        raise ValueError(f"{alias}: parameter {pname} has a non-scalar default")
    ty = parse_type(ptype, generic_names=generic_names)
    if isinstance(default, float) and not math.isfinite(default) and ty.name in {"Decimal", "decimal"}:
        raise ValueError(f"{alias}: parameter {pname} has a non-finite decimal default")
    return Parameter(name=pname, type=ty, default=default, modifier=modifier)
