import pytest

from scriptalias.model import AliasDescriptor, AliasKind, Parameter, TypeRef

CONTEXT_PARAM = Parameter(name="context", type=TypeRef(name="ICakeContext", namespace="Cake.Core"))
ALIASES = TypeRef(name="Aliases", namespace="Demo")


@pytest.fixture
def make_alias():
    """Build a descriptor whose parameters start with the script context."""

    def _make(
        name: str = "Run",
        *,
        return_type: TypeRef = TypeRef.VOID,
        declaring_type: TypeRef = ALIASES,
        parameters: tuple[Parameter, ...] = (),
        receiver: bool = True,
        generic_parameters=(),
        documentation=None,
        obsolete=None,
        kind: AliasKind = AliasKind.METHOD,
        cached: bool = False,
    ) -> AliasDescriptor:
        params = (CONTEXT_PARAM, *parameters) if receiver else tuple(parameters)
        return AliasDescriptor(
            name=name,
            return_type=return_type,
            declaring_type=declaring_type,
            generic_parameters=tuple(generic_parameters),
            parameters=params,
            documentation=documentation,
            obsolete=obsolete,
            kind=kind,
            cached=cached,
        )

    return _make
