from __future__ import annotations

import pytest

from scriptalias.model import NO_DEFAULT, AliasDescriptor, Parameter, TypeRef, parse_type


def test_void_marker_is_identified_by_name_and_namespace():
    assert TypeRef.VOID.is_void()
    assert TypeRef(name="Void", namespace="System", array_rank=1).is_void()
    assert not TypeRef(name="Void").is_void()
    assert not TypeRef(name="Void", namespace="Other").is_void()


def test_parse_type_handles_generic_arguments_and_arrays():
    t = parse_type("System.Collections.Generic.Dictionary<System.String, List<T[]>>[]", generic_names=["T"])

    assert t.namespace == "System.Collections.Generic"
    assert t.name == "Dictionary"
    assert t.array_rank == 1
    key, value = t.generic_arguments
    assert key == TypeRef(name="String", namespace="System")
    assert value.name == "List"
    assert value.generic_arguments == (TypeRef(name="T", array_rank=1, is_generic_parameter=True),)


def test_parse_type_rejects_empty_text():
    with pytest.raises(ValueError):
        parse_type("  ")


def test_parameter_default_presence():
    string = TypeRef(name="String", namespace="System")

    assert not Parameter("a", string).has_default
    assert Parameter("a", string).default is NO_DEFAULT
    assert Parameter("a", string, default=None).has_default


def test_descriptors_are_hashable_values():
    a = AliasDescriptor(name="Run", return_type=TypeRef.VOID, declaring_type=TypeRef(name="Aliases"))
    b = AliasDescriptor(name="Run", return_type=TypeRef.VOID, declaring_type=TypeRef(name="Aliases"))

    assert a == b
    assert len({a, b}) == 1


def test_parse_type_maps_void_keyword_to_marker():
    assert parse_type("void") is TypeRef.VOID
    assert parse_type("System.Void").is_void()
    assert not parse_type("Void").is_void()
