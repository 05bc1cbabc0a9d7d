"""
Tests for the binary converters.

Validates:
  - Zero base case for both variants
  - Agreement between iterative and recursive output
  - Round trip through base-2 parsing
  - Step counts equal the bit-length
  - Input validation
"""

import sys

import pytest
from bitbench.core.converter import (
    STACK_HEADROOM,
    BinaryResult,
    max_recursive_bits,
    iterative_binary,
    recursive_binary,
    iterative_with_steps,
    recursive_with_steps,
)


SAMPLE = list(range(0, 4097)) + list(range(4097, 1_000_001, 997)) + [
    999_999, 1_000_000, 2**20 - 1, 2**20, 2**20 + 1,
]


class TestZero:
    def test_iterative_zero(self):
        assert iterative_with_steps(0) == BinaryResult("0", 1)

    def test_recursive_zero(self):
        assert recursive_with_steps(0) == BinaryResult("0", 1)

    def test_plain_zero(self):
        assert iterative_binary(0) == "0"
        assert recursive_binary(0) == "0"


class TestAgreement:
    def test_variants_agree(self):
        for n in SAMPLE:
            it = iterative_with_steps(n)
            rec = recursive_with_steps(n)
            assert it == rec, n

    def test_plain_matches_step_counting(self):
        for n in SAMPLE[:2000]:
            assert iterative_binary(n) == iterative_with_steps(n).binary
            assert recursive_binary(n) == recursive_with_steps(n).binary

    def test_parses_back(self):
        for n in SAMPLE:
            assert int(iterative_with_steps(n).binary, 2) == n

    def test_matches_builtin(self):
        for n in (1, 2, 3, 10, 255, 256, 1_000_000_000):
            assert iterative_binary(n) == format(n, 'b')
            assert recursive_binary(n) == format(n, 'b')


class TestSteps:
    def test_steps_equal_bit_length(self):
        for n in SAMPLE:
            if n == 0:
                continue
            assert iterative_with_steps(n).steps == n.bit_length()
            assert recursive_with_steps(n).steps == n.bit_length()

    def test_ten(self):
        binary, steps = iterative_with_steps(10)
        assert binary == "1010"
        assert steps == 4
        assert recursive_with_steps(10) == BinaryResult("1010", 4)

    def test_one(self):
        assert recursive_with_steps(1) == BinaryResult("1", 1)

    def test_billion(self):
        result = recursive_with_steps(1_000_000_000)
        assert result.steps == 30
        assert result == iterative_with_steps(1_000_000_000)

    def test_deep_but_allowed(self):
        n = 2**500 + 12345
        assert recursive_with_steps(n) == iterative_with_steps(n)

    def test_beyond_depth_limit_rejected(self):
        n = 2**1500
        assert n.bit_length() > max_recursive_bits()
        assert int(iterative_with_steps(n).binary, 2) == n
        with pytest.raises(ValueError, match="recursion depth"):
            recursive_with_steps(n)

    def test_depth_limit_follows_recursion_limit(self, monkeypatch):
        monkeypatch.setattr(sys, "getrecursionlimit", lambda: STACK_HEADROOM + 8)
        assert max_recursive_bits() == 8
        assert recursive_with_steps(255).steps == 8
        with pytest.raises(ValueError):
            recursive_with_steps(256)


class TestValidation:
    @pytest.mark.parametrize("func", [iterative_with_steps, recursive_with_steps])
    def test_negative_rejected(self, func):
        with pytest.raises(ValueError):
            func(-1)

    @pytest.mark.parametrize("func", [iterative_with_steps, recursive_with_steps])
    @pytest.mark.parametrize("value", [1.5, "10", None, True])
    def test_non_int_rejected(self, func, value):
        with pytest.raises(TypeError):
            func(value)
