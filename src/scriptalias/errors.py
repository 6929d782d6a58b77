"""Domain-specific errors for scriptalias."""

from __future__ import annotations


class ScriptAliasError(Exception):
    """Base error for scriptalias."""


class InvalidArgumentError(ScriptAliasError, ValueError):
    """Raised when a required argument (sink, descriptor, payload) is missing."""


class UnsupportedAliasKindError(ScriptAliasError):
    """Raised when no generation strategy is registered for an alias kind."""


class DescriptorError(ScriptAliasError):
    """Raised when a descriptor manifest cannot be read."""


class TransportDecodeError(ScriptAliasError):
    """Raised when a file-change payload cannot be decoded from MessagePack."""


class TypeAndVersionError(TransportDecodeError):
    """Raised when a payload carries an unexpected type/version marker."""
