"""Benchmarks for Collection.

Run with: pytest benchmarks/ --benchmark-only -v
"""

import pytest

from kettle_result import Collection, Equality


@pytest.fixture
def left():
    return Collection.from_iterable((f'k{i}', i) for i in range(1000))


@pytest.fixture
def right():
    return Collection.from_iterable((f'k{i}', i * 2) for i in range(500, 1500))


class TestCollectionAccess:
    def test_get_hit(self, benchmark, left):
        benchmark(left.get, 'k500')

    def test_get_miss(self, benchmark, left):
        benchmark(left.get, 'missing')

    def test_dict_get_baseline(self, benchmark):
        inner = {f'k{i}': i for i in range(1000)}
        benchmark(inner.get, 'k500')


class TestCollectionSetAlgebra:
    def test_diff(self, benchmark, left, right):
        benchmark(left.diff, right)

    def test_sym_diff(self, benchmark, left, right):
        benchmark(left.sym_diff, right)

    def test_intersect(self, benchmark, left, right):
        benchmark(left.intersect, right, lambda v, ov, k: v)

    def test_union_value(self, benchmark, left, right):
        benchmark(left.union, right, lambda v, ov, k: ov, equality=Equality.VALUE)

    def test_union_identity(self, benchmark, left, right):
        benchmark(left.union, right, lambda v, ov, k: ov, equality=Equality.IDENTITY)


class TestCollectionSerialization:
    def test_to_json(self, benchmark, left):
        benchmark(left.to_json)

    def test_from_json(self, benchmark, left):
        text = left.to_json().unwrap()
        benchmark(Collection.from_json, text)

    def test_clone(self, benchmark, left):
        benchmark(left.clone)
