"""Benchmarks for Result type and tea_call.

Run with: pytest benchmarks/ --benchmark-only -v
"""

import json

from kettle_result import Err, Ok, collect, safe, tea_call

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    def test_ok_creation(self, benchmark):
        benchmark(Ok, 42)

    def test_err_creation(self, benchmark):
        benchmark(Err, 'error')


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestResultMethods:
    def test_ok_map(self, benchmark):
        ok = Ok(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_err_map(self, benchmark):
        err = Err('error')
        benchmark(err.map, lambda x: x * 2)

    def test_ok_and_then_chain(self, benchmark):
        def chain():
            return Ok(5).and_then(lambda x: Ok(x + 1)).and_then(lambda x: Ok(x * 2))

        benchmark(chain)

    def test_collect_100(self, benchmark):
        results = [Ok(i) for i in range(100)]
        benchmark(collect, results)


# =============================================================================
# Exception bridging benchmarks
# =============================================================================


class TestExceptionBridge:
    """Compare tea_call, @safe and a bare try/except."""

    payload = '{"name": "Charlie", "age": 33}'

    def test_tea_call_ok(self, benchmark):
        benchmark(tea_call, json.loads, self.payload)

    def test_tea_call_err(self, benchmark):
        benchmark(tea_call, json.loads, '{"name":')

    def test_safe_ok(self, benchmark):
        loads = safe(json.loads)
        benchmark(loads, self.payload)

    def test_try_except_baseline(self, benchmark):
        def parse():
            try:
                return json.loads(self.payload)
            except ValueError:
                return None

        benchmark(parse)
