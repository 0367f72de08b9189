"""Benchmarks for the Result type and the bridging helpers.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from ferrum import Err, Ok, safe, try_result

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark Ok/Err creation."""

    def test_ok_creation(self, benchmark):
        """Benchmark Ok creation."""
        benchmark(Ok, 42)

    def test_err_creation(self, benchmark):
        """Benchmark Err creation."""
        benchmark(Err, 'error')


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestMethods:
    """Benchmark Result method calls."""

    def test_ok_map(self, benchmark):
        """Benchmark Ok.map."""
        benchmark(Ok(5).map, lambda x: x * 2)

    def test_err_map(self, benchmark):
        """Benchmark Err.map (short-circuits)."""
        benchmark(Err('e').map, lambda x: x * 2)

    def test_ok_and_then(self, benchmark):
        """Benchmark Ok.and_then."""
        benchmark(Ok(5).and_then, lambda x: Ok(x * 2))

    def test_err_unwrap_or(self, benchmark):
        """Benchmark Err.unwrap_or."""
        benchmark(Err('e').unwrap_or, 0)


# =============================================================================
# Bridging benchmarks
# =============================================================================


class TestBridging:
    """Compare the ways of turning exceptions into Results."""

    def test_try_result_success(self, benchmark):
        """Benchmark try_result on a call that succeeds."""
        benchmark(try_result, int, '42')

    def test_try_result_failure(self, benchmark):
        """Benchmark try_result on a call that raises."""
        benchmark(try_result, int, 'abc')

    def test_safe_success(self, benchmark):
        """Benchmark a @safe function that succeeds."""

        @safe
        def parse(text):
            return int(text)

        benchmark(parse, '42')

    def test_safe_failure(self, benchmark):
        """Benchmark a @safe function that raises."""

        @safe
        def parse(text):
            return int(text)

        benchmark(parse, 'abc')
