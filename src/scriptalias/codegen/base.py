from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import Mapping, TextIO

from ..errors import InvalidArgumentError, UnsupportedAliasKindError
from ..model import AliasDescriptor, AliasKind
from ..writer import IndentedWriter


class AliasGenerator(ABC):
    """Renders one alias descriptor to script source text.

    Implementations only provide `emit`; `generate` and `render` buffer the
    output so a failed generation never leaves partial text in the sink.
    """

    def __init__(self, *, indent: str = "    "):
        self.indent = indent

    def generate(self, sink: TextIO | IndentedWriter, descriptor: AliasDescriptor) -> None:
        if sink is None:
            raise InvalidArgumentError("sink is required")
        if descriptor is None:
            raise InvalidArgumentError("descriptor is required")
        sink.write(self.render(descriptor))

    def render(self, descriptor: AliasDescriptor) -> str:
        if descriptor is None:
            raise InvalidArgumentError("descriptor is required")
        buf = io.StringIO()
        self.emit(IndentedWriter(buf, indent=self.indent), descriptor)
        return buf.getvalue()

    @abstractmethod
    def emit(self, writer: IndentedWriter, descriptor: AliasDescriptor) -> None:
        raise NotImplementedError


class CompositeAliasGenerator(AliasGenerator):
    """Dispatches each descriptor to the strategy registered for its kind."""

    def __init__(self, strategies: Mapping[AliasKind, AliasGenerator], *, indent: str = "    "):
        super().__init__(indent=indent)
        self._strategies = dict(strategies)

    @property
    def kinds(self) -> list[AliasKind]:
        return list(self._strategies)

    def strategy_for(self, kind: AliasKind) -> AliasGenerator:
        strategy = self._strategies.get(kind)
        if strategy is None:
            raise UnsupportedAliasKindError(f"no alias generator registered for kind {kind!r}")
        return strategy

    def emit(self, writer: IndentedWriter, descriptor: AliasDescriptor) -> None:
        self.strategy_for(descriptor.kind).emit(writer, descriptor)
