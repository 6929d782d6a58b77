from __future__ import annotations

import io
from concurrent.futures import ThreadPoolExecutor

import pytest

from scriptalias.caching import CachingAliasGenerator
from scriptalias.codegen import MethodAliasGenerator
from scriptalias.errors import InvalidArgumentError
from scriptalias.model import Parameter, TypeRef


class _CountingGenerator(MethodAliasGenerator):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def render(self, descriptor):
        self.calls += 1
        return super().render(descriptor)


def test_caching_generator_renders_each_descriptor_once(make_alias):
    inner = _CountingGenerator()
    gen = CachingAliasGenerator(inner)
    alias = make_alias("Run")

    first, second = io.StringIO(), io.StringIO()
    gen.generate(first, alias)
    gen.generate(second, make_alias("Run"))

    assert first.getvalue() == second.getvalue() == MethodAliasGenerator().render(alias)
    assert inner.calls == 1
    assert len(gen) == 1

    gen.generate(io.StringIO(), make_alias("Other"))
    assert inner.calls == 2

    gen.clear()
    assert len(gen) == 0


def test_caching_generator_is_safe_across_threads(make_alias):
    gen = CachingAliasGenerator(MethodAliasGenerator())
    aliases = [make_alias(f"Run{i % 3}") for i in range(30)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        out = list(pool.map(gen.render, aliases))

    assert out == [MethodAliasGenerator().render(a) for a in aliases]
    assert len(gen) == 3


def test_caching_generator_validates_arguments(make_alias):
    with pytest.raises(InvalidArgumentError):
        CachingAliasGenerator(None)

    gen = CachingAliasGenerator(MethodAliasGenerator())
    with pytest.raises(InvalidArgumentError):
        gen.render(None)
    with pytest.raises(InvalidArgumentError):
        gen.generate(None, make_alias())
    assert len(gen) == 0


def test_defaults_equal_in_python_but_spelled_differently_do_not_share_a_rendering(make_alias):
    obj = TypeRef(name="Object", namespace="System")
    gen = CachingAliasGenerator(MethodAliasGenerator())

    as_int = gen.render(make_alias(parameters=(Parameter("v", obj, default=1),)))
    as_bool = gen.render(make_alias(parameters=(Parameter("v", obj, default=True),)))
    as_float = gen.render(make_alias(parameters=(Parameter("v", obj, default=1.0),)))

    assert as_int.startswith("public void Run(System.Object v = 1)")
    assert as_bool.startswith("public void Run(System.Object v = true)")
    assert as_float.startswith("public void Run(System.Object v = 1.0)")
    assert len(gen) == 3


def test_caching_generator_evicts_least_recently_used(make_alias):
    inner = _CountingGenerator()
    gen = CachingAliasGenerator(inner, max_entries=2)

    gen.render(make_alias("A"))
    gen.render(make_alias("B"))
    gen.render(make_alias("A"))
    gen.render(make_alias("C"))
    assert len(gen) == 2
    assert inner.calls == 3

    gen.render(make_alias("A"))
    assert inner.calls == 3
    gen.render(make_alias("B"))
    assert inner.calls == 4


def test_caching_generator_rejects_non_positive_bound():
    with pytest.raises(InvalidArgumentError):
        CachingAliasGenerator(MethodAliasGenerator(), max_entries=0)
