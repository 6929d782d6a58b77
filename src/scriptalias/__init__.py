"""scriptalias: generate build-script alias definitions from library metadata."""

from __future__ import annotations

from . import errors
from .caching import CachingAliasGenerator
from .codegen import (
    AliasGenerator,
    CompositeAliasGenerator,
    MethodAliasGenerator,
    PropertyAliasGenerator,
    default_generator,
)
from .manifest import load_descriptors, read_descriptors
from .model import AliasDescriptor, AliasKind, GenericParameter, ObsoleteInfo, Parameter, TypeRef
from .unit import UnitOptions, generate_aliases, render_aliases

__all__ = [
    "AliasDescriptor",
    "AliasGenerator",
    "AliasKind",
    "CachingAliasGenerator",
    "CompositeAliasGenerator",
    "GenericParameter",
    "MethodAliasGenerator",
    "ObsoleteInfo",
    "Parameter",
    "PropertyAliasGenerator",
    "TypeRef",
    "UnitOptions",
    "default_generator",
    "errors",
    "generate_aliases",
    "load_descriptors",
    "read_descriptors",
    "render_aliases",
]
