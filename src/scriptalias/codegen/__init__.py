"""Alias generation strategies."""

from __future__ import annotations

from ..emitters import ParameterEmitter, TypeEmitter
from ..model import AliasKind
from .base import AliasGenerator, CompositeAliasGenerator
from .method import MethodAliasGenerator
from .property import PropertyAliasGenerator

__all__ = [
    "AliasGenerator",
    "CompositeAliasGenerator",
    "MethodAliasGenerator",
    "PropertyAliasGenerator",
    "default_generator",
]


def default_generator(*, indent: str = "    ") -> CompositeAliasGenerator:
    """Return a generator handling every built-in alias kind."""
    type_emitter = TypeEmitter()
    parameter_emitter = ParameterEmitter(type_emitter)
    return CompositeAliasGenerator(
        {
            AliasKind.METHOD: MethodAliasGenerator(type_emitter, parameter_emitter, indent=indent),
            AliasKind.PROPERTY: PropertyAliasGenerator(type_emitter, indent=indent),
        },
        indent=indent,
    )
