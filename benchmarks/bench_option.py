"""Benchmarks for the Option type.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from ferrum import Nothing, Some, match

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation."""
        benchmark(Some, 42)

    def test_nothing_access(self, benchmark):
        """Benchmark Nothing singleton access."""

        def get_nothing():
            return Nothing

        benchmark(get_nothing)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        """Benchmark Some.map."""
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        """Benchmark Nothing.map."""
        benchmark(Nothing.map, lambda x: x * 2)

    def test_some_and_then(self, benchmark):
        """Benchmark Some.and_then."""
        some = Some(5)
        benchmark(some.and_then, lambda x: Some(x * 2))

    def test_some_unwrap_or(self, benchmark):
        """Benchmark Some.unwrap_or."""
        benchmark(Some(5).unwrap_or, 0)

    def test_nothing_unwrap_or(self, benchmark):
        """Benchmark Nothing.unwrap_or."""
        benchmark(Nothing.unwrap_or, 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        """Benchmark 3-step chain on Some."""

        def chain():
            return Some(5).map(lambda x: x + 1).map(lambda x: x * 2).and_then(lambda x: Some(x - 1))

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (short-circuits)."""

        def chain():
            return Nothing.map(lambda x: x + 1).map(lambda x: x * 2).and_then(lambda x: Some(x - 1))

        benchmark(chain)

    def test_some_zip(self, benchmark):
        """Benchmark Some.zip."""
        benchmark(Some(1).zip, Some(2))


# =============================================================================
# Dispatch benchmarks
# =============================================================================


class TestOptionDispatch:
    """Compare match() with structural pattern matching."""

    def test_match_function(self, benchmark):
        """Benchmark ferrum.match on Some."""
        some = Some(42)
        benchmark(match, some, some=lambda v: v, nothing=lambda: None)

    def test_match_statement(self, benchmark):
        """Benchmark a match statement on Some."""
        some = Some(42)

        def match_it():
            match some:
                case Some(v):
                    return v
                case _:
                    return None

        benchmark(match_it)


class TestOptionMemory:
    """Rough allocation cost."""

    def test_create_1000_some(self, benchmark):
        """Create 1000 Some objects."""

        def create():
            return [Some(i) for i in range(1000)]

        benchmark(create)
