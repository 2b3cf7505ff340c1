"""
Tests for valuerandom.sampling.choice

Verify boolean models, element selection and sign choice.
"""

from collections import Counter

import numpy as np
import pytest
from valuerandom.core.state import ValueRandom, advance
from valuerandom.core.exceptions import InvalidArgumentError
from valuerandom.sampling.choice import (
    next_bool,
    next_bool_one_in,
    next_bool_chance,
    next_sign,
    next_element,
    next_indexed_element,
    next_streamed_element,
)


class TestNextBool:
    """Fair coin on the raw 32-bit draw."""

    def test_known_values(self, rng):
        # w1 = 0x104bf2de (low half), w2 = 0x9e8c0ea7 (high half)
        a, rng = next_bool(rng)
        b, rng = next_bool(rng)
        assert (a, b) == (False, True)

    def test_roughly_fair(self, rng):
        heads = 0
        for _ in range(20_000):
            value, rng = next_bool(rng)
            heads += value
        assert 0.48 < heads / 20_000 < 0.52


class TestNextBoolOneIn:
    """One-in-N chance."""

    @pytest.mark.parametrize("denominator", [0, -1, -100])
    def test_non_positive_is_false_without_advancing(self, rng, denominator):
        value, nxt = next_bool_one_in(rng, denominator)
        assert value is False
        assert nxt is rng

    def test_one_is_always_true(self, rng):
        for _ in range(1_000):
            value, rng = next_bool_one_in(rng, 1)
            assert value

    def test_advances_for_positive(self, rng):
        _, nxt = next_bool_one_in(rng, 4)
        assert nxt == advance(rng)

    def test_frequency(self, rng):
        hits = 0
        for _ in range(40_000):
            value, rng = next_bool_one_in(rng, 4)
            hits += value
        assert 0.23 < hits / 40_000 < 0.27


class TestNextBoolChance:
    """Arbitrary probability."""

    def test_zero_always_false(self, rng):
        for _ in range(10_000):
            value, rng = next_bool_chance(rng, 0.0)
            assert not value

    def test_one_always_true(self, rng):
        for _ in range(10_000):
            value, rng = next_bool_chance(rng, 1.0)
            assert value

    def test_frequency(self, rng):
        hits = 0
        for _ in range(40_000):
            value, rng = next_bool_chance(rng, 0.3)
            hits += value
        assert 0.28 < hits / 40_000 < 0.32


class TestNextSign:
    """-1 or +1 built on the fair coin."""

    def test_known_values(self, rng):
        a, rng = next_sign(rng)
        b, rng = next_sign(rng)
        assert (a, b) == (1, -1)

    def test_only_signs(self, rng):
        seen = set()
        for _ in range(1_000):
            value, rng = next_sign(rng)
            seen.add(value)
        assert seen == {-1, 1}


class TestIndexedElement:
    """Selection from sized, indexable collections."""

    def test_empty_returns_default_without_draw(self, rng):
        value, nxt = next_indexed_element(rng, [])
        assert value is None
        assert nxt is rng

    def test_empty_with_default(self, rng):
        value, nxt = next_indexed_element(rng, (), default=-1)
        assert value == -1
        assert nxt is rng

    def test_single_without_draw(self, rng):
        value, nxt = next_indexed_element(rng, ["only"])
        assert value == "only"
        assert nxt is rng

    def test_known_value(self, rng):
        # index = trunc(273412830 / 2**31 * 3) = 0
        value, nxt = next_indexed_element(rng, [10, 20, 30])
        assert value == 10
        assert nxt == advance(rng)

    def test_all_elements_reachable(self, rng):
        seen = set()
        for _ in range(500):
            value, rng = next_indexed_element(rng, "abcd")
            seen.add(value)
        assert seen == set("abcd")

    def test_none_raises(self, rng):
        with pytest.raises(InvalidArgumentError):
            next_indexed_element(rng, None)


class TestStreamedElement:
    """Reservoir sampling over single-pass iterables."""

    def test_empty_returns_default_without_draw(self, rng):
        value, nxt = next_streamed_element(rng, iter([]))
        assert value is None
        assert nxt is rng

    def test_empty_with_supplied_default(self, rng):
        value, nxt = next_streamed_element(rng, iter([]), default="none")
        assert value == "none"
        assert nxt is rng

    def test_single_element_consumes_a_draw(self, rng):
        value, nxt = next_streamed_element(rng, iter(["x"]))
        assert value == "x"
        assert nxt == advance(rng)

    def test_known_value(self, rng):
        # count 1 always keeps "a"; count 2 draws trunc(0.477 * 2) = 0 -> "b"
        value, nxt = next_streamed_element(rng, iter(["a", "b"]))
        assert value == "b"
        assert nxt == advance(advance(rng))

    def test_visits_each_element_once(self, rng):
        visited = []

        def source():
            for i in range(50):
                visited.append(i)
                yield i

        value, _ = next_streamed_element(rng, source())
        assert visited == list(range(50))
        assert 0 <= value < 50

    def test_uniform_two_elements(self, rng):
        counts = Counter()
        n = 100_000
        for _ in range(n):
            value, rng = next_streamed_element(rng, (c for c in "ab"))
            counts[value] += 1
        assert abs(counts["a"] / n - 0.5) < 0.01
        assert abs(counts["b"] / n - 0.5) < 0.01

    def test_roughly_uniform_many_elements(self, rng):
        counts = Counter()
        n = 20_000
        for _ in range(n):
            value, rng = next_streamed_element(rng, iter(range(5)))
            counts[value] += 1
        for i in range(5):
            assert 0.17 < counts[i] / n < 0.23

    def test_none_raises(self, rng):
        with pytest.raises(InvalidArgumentError):
            next_streamed_element(rng, None)


class TestNextElement:
    """Dispatch between indexed and streamed selection."""

    def test_list_uses_indexing(self, rng):
        assert next_element(rng, [10, 20, 30]) == next_indexed_element(rng, [10, 20, 30])

    def test_numpy_array_uses_indexing(self, rng):
        arr = np.array([10, 20, 30])
        value, nxt = next_element(rng, arr)
        assert value == 10
        assert nxt == advance(rng)

    def test_generator_uses_reservoir(self, rng):
        expected = next_streamed_element(rng, iter(["a", "b"]))
        assert next_element(rng, (c for c in "ab")) == expected

    def test_set_uses_reservoir(self, rng):
        value, nxt = next_element(rng, {"only"})
        assert value == "only"
        assert nxt == advance(rng)

    def test_default_passed_through(self, rng):
        value, _ = next_element(rng, iter([]), default=0)
        assert value == 0

    def test_none_raises(self, rng):
        with pytest.raises(InvalidArgumentError, match="source"):
            next_element(rng, None)

    def test_non_mutation(self):
        rng = ValueRandom.from_seed(3)
        first, _ = next_element(rng, range(100))
        second, _ = next_element(rng, range(100))
        assert first == second
