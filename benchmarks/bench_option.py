"""Benchmarks for Option type.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from kettle_result import Nothing, OptionCell, Some, match

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        benchmark(Some, 42)

    def test_create_1000_some(self, benchmark):
        """Create 1000 Some objects."""

        def create():
            return [Some(i) for i in range(1000)]

        benchmark(create)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_unwrap_or(self, benchmark):
        some = Some(5)
        benchmark(some.unwrap_or, 0)

    def test_some_clone(self, benchmark):
        some = Some({'a': [1, 2, 3]})
        benchmark(some.clone)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        def chain():
            return Some(5).map(lambda x: x + 1).map(lambda x: x * 2).and_then(lambda x: Some(x - 1))

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (should short-circuit)."""

        def chain():
            return Nothing.map(lambda x: x + 1).map(lambda x: x * 2).and_then(lambda x: Some(x - 1))

        benchmark(chain)


# =============================================================================
# Dispatch benchmarks
# =============================================================================


class TestOptionDispatch:
    """Compare pattern matching, the match method and match()."""

    def test_pattern_match(self, benchmark):
        some = Some(42)

        def match_it():
            match some:
                case Some(v):
                    return v
                case _:
                    return None

        benchmark(match_it)

    def test_match_method(self, benchmark):
        some = Some(42)
        benchmark(some.match, some=lambda v: v, none=lambda: None)

    def test_match_function(self, benchmark):
        some = Some(42)
        benchmark(match, some, some=lambda v: v, none=lambda: None)


class TestOptionCell:
    def test_take_replace(self, benchmark):
        cell = OptionCell.some(1)

        def cycle():
            cell.replace(2)
            return cell.take()

        benchmark(cycle)
