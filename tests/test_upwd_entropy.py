# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Test the entropy/length conversions."""

from __future__ import annotations

import math
import sys

import hypothesis
import pytest
from hypothesis import strategies

from upwd import entropy
from upwd.pool import EmptyPoolError


class TestCalculateEntropy:
    """Test [`entropy.calculate_entropy`][]."""

    @pytest.mark.parametrize(
        ['length', 'pool_size', 'expected'],
        [
            pytest.param(12, 64, 72.0, id='12-of-64'),
            pytest.param(15, 64, 90.0, id='15-of-64'),
            pytest.param(8, 2, 8.0, id='8-of-2'),
            pytest.param(1, 1024, 10.0, id='1-of-1024'),
            pytest.param(0, 64, 0.0, id='empty-password'),
            pytest.param(12, 1, 0.0, id='single-character-pool'),
        ],
    )
    def test_200_known_values(
        self,
        length: int,
        pool_size: int,
        expected: float,
    ) -> None:
        """Known lengths and pool sizes give the expected entropy."""
        assert entropy.calculate_entropy(length, pool_size) == expected

    def test_201_non_power_of_two(self) -> None:
        """Pool sizes other than powers of two give fractional bits."""
        assert entropy.calculate_entropy(12, 62) == pytest.approx(
            12 * math.log2(62)
        )
        assert round(entropy.calculate_entropy(12, 62)) == 71

    def test_210_empty_pool(self) -> None:
        """An empty pool is rejected."""
        with pytest.raises(EmptyPoolError):
            entropy.calculate_entropy(12, 0)

    @pytest.mark.parametrize(
        ['length', 'pool_size'],
        [
            pytest.param(-1, 64, id='negative-length'),
            pytest.param(12, -64, id='negative-pool-size'),
        ],
    )
    def test_211_negative_arguments(self, length: int, pool_size: int) -> None:
        """Negative arguments are rejected."""
        with pytest.raises(ValueError, match='invalid'):
            entropy.calculate_entropy(length, pool_size)

    @pytest.mark.parametrize(
        ['length', 'pool_size'],
        [
            pytest.param(1024, 2, id='exactly-beyond-float-range'),
            pytest.param(1000, 64, id='far-beyond-float-range'),
            pytest.param(10**6, 95, id='huge'),
            pytest.param(1024, 2.0, id='float-pool-size'),
            pytest.param(512, 4.0, id='float-pool-size-power-of-four'),
        ],
    )
    def test_220_saturation(self, length: int, pool_size: float) -> None:
        """Entropies beyond the float range saturate.

        This also holds for float pool sizes, whose power overflows
        before any conversion.

        """
        assert entropy.calculate_entropy(length, pool_size) == (
            entropy.MAX_ENTROPY
        )

    def test_221_max_entropy(self) -> None:
        """The saturation boundary is the log of the largest float."""
        assert entropy.MAX_ENTROPY == math.log2(sys.float_info.max)
        assert 1023 < entropy.MAX_ENTROPY <= 1024

    @hypothesis.given(
        length=strategies.integers(min_value=0, max_value=5000),
        pool_size=strategies.integers(min_value=1, max_value=100_000),
    )
    def test_230_bounds(self, length: int, pool_size: int) -> None:
        """The entropy lies between 0 and the saturation boundary."""
        result = entropy.calculate_entropy(length, pool_size)
        assert 0.0 <= result <= entropy.MAX_ENTROPY

    @hypothesis.given(
        length=strategies.integers(min_value=0, max_value=200),
        pool_size=strategies.integers(min_value=1, max_value=1000),
    )
    def test_231_monotonic_in_length(
        self, length: int, pool_size: int
    ) -> None:
        """Longer passwords never have less entropy."""
        assert entropy.calculate_entropy(
            length, pool_size
        ) <= entropy.calculate_entropy(length + 1, pool_size)

    @hypothesis.given(
        length=strategies.integers(min_value=0, max_value=100),
        pool_size=strategies.integers(min_value=2, max_value=1000),
    )
    def test_232_product_formula(self, length: int, pool_size: int) -> None:
        """Below saturation, the entropy is `length * log2(pool_size)`."""
        expected = length * math.log2(pool_size)
        hypothesis.assume(expected < entropy.MAX_ENTROPY - 1)
        assert entropy.calculate_entropy(length, pool_size) == pytest.approx(
            expected
        )


class TestCalculateLength:
    """Test [`entropy.calculate_length`][] and [`entropy.required_length`][]."""

    @pytest.mark.parametrize(
        ['target', 'pool_size', 'expected'],
        [
            pytest.param(128.0, 64, 22, id='128-bits-of-64'),
            pytest.param(72.0, 64, 12, id='exact'),
            pytest.param(72.5, 64, 13, id='round-up'),
            pytest.param(0.0, 64, 0, id='zero'),
            pytest.param(1.0, 2, 1, id='one-bit'),
            pytest.param(128.0, 62, 22, id='default-pool'),
        ],
    )
    def test_200_known_values(
        self,
        target: float,
        pool_size: int,
        expected: int,
    ) -> None:
        """Known entropies and pool sizes give the expected lengths."""
        assert (
            math.ceil(entropy.calculate_length(target, pool_size)) == expected
        )
        assert entropy.required_length(target, pool_size) == expected

    def test_201_fractional(self) -> None:
        """The length is real-valued."""
        assert entropy.calculate_length(128.0, 64) == pytest.approx(128 / 6)

    @pytest.mark.parametrize('pool_size', [1, 0, 0.5, -3, float('nan')])
    def test_210_degenerate_pool_size(self, pool_size: float) -> None:
        """Pool sizes of 1 and less cannot be converted."""
        with pytest.raises(entropy.DegeneratePoolSizeError) as excinfo:
            entropy.calculate_length(128.0, pool_size)
        assert isinstance(excinfo.value, ValueError)
        with pytest.raises(entropy.DegeneratePoolSizeError):
            entropy.required_length(128.0, pool_size)

    def test_211_degenerate_pool_size_attribute(self) -> None:
        """The degenerate pool size is recorded on the exception."""
        with pytest.raises(entropy.DegeneratePoolSizeError) as excinfo:
            entropy.calculate_length(10.0, 1)
        assert excinfo.value.pool_size == 1
        assert 'degenerate pool size' in str(excinfo.value)

    @pytest.mark.parametrize(
        'target', [-1.0, float('inf'), float('-inf'), float('nan')]
    )
    def test_212_invalid_entropy(self, target: float) -> None:
        """Negative or non-finite entropies are rejected."""
        with pytest.raises(ValueError, match='invalid entropy'):
            entropy.calculate_length(target, 64)

    @hypothesis.given(
        target=strategies.floats(min_value=0.0, max_value=2.0**20),
        pool_size=strategies.integers(min_value=2, max_value=100_000),
    )
    def test_220_monotonic_in_entropy(
        self, target: float, pool_size: int
    ) -> None:
        """A larger entropy target never needs a shorter password."""
        assert entropy.calculate_length(
            target, pool_size
        ) <= entropy.calculate_length(target + 1.0, pool_size)

    @hypothesis.given(
        target=strategies.floats(min_value=0.0, max_value=2.0**20),
        small=strategies.integers(min_value=2, max_value=1000),
        extra=strategies.integers(min_value=1, max_value=1000),
    )
    def test_221_antitonic_in_pool_size(
        self, target: float, small: int, extra: int
    ) -> None:
        """A larger pool never needs a longer password."""
        assert entropy.calculate_length(
            target, small + extra
        ) <= entropy.calculate_length(target, small)

    @hypothesis.given(
        target=strategies.floats(min_value=0.0, max_value=900.0),
        pool_size=strategies.integers(min_value=2, max_value=10_000),
    )
    def test_230_round_trip(self, target: float, pool_size: int) -> None:
        """The required length reaches the target entropy.

        Checked below the saturation boundary only.

        """
        length = entropy.required_length(target, pool_size)
        hypothesis.assume(
            length * math.log2(pool_size) < entropy.MAX_ENTROPY - 1
        )
        achieved = entropy.calculate_entropy(length, pool_size)
        assert achieved >= target - 1e-9 * max(1.0, target)
        if length > 0:
            shorter = entropy.calculate_entropy(length - 1, pool_size)
            assert shorter < target + 1e-9 * max(1.0, target)

    @hypothesis.given(
        length=strategies.integers(min_value=0, max_value=60),
        pool_size=strategies.integers(min_value=2, max_value=100_000),
    )
    @hypothesis.example(length=0, pool_size=2)
    @hypothesis.example(length=1000, pool_size=2)
    @hypothesis.example(length=12, pool_size=62)
    def test_231_length_survives_entropy_round_trip(
        self, length: int, pool_size: int
    ) -> None:
        """Converting a length to entropy and back recovers the length.

        Checked below the saturation boundary only.

        """
        hypothesis.assume(
            length * math.log2(pool_size) < entropy.MAX_ENTROPY - 1
        )
        bits = entropy.calculate_entropy(length, pool_size)
        assert entropy.calculate_length(bits, pool_size) == pytest.approx(
            length
        )
