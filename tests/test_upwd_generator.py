# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Test password generation."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import hypothesis
import pytest
from hypothesis import strategies

import tests
from upwd import entropy, generator
from upwd.pool import EmptyPoolError, Pool

if TYPE_CHECKING:
    from collections.abc import Iterator


class CountingRandom(random.Random):
    """A seeded random number generator that counts its draws."""

    def __init__(self, seed: int = 0) -> None:
        super().__init__(seed)
        self.draws = 0

    def randrange(self, *args: int, **kwargs: int) -> int:  # type: ignore[override]
        self.draws += 1
        return super().randrange(*args, **kwargs)


class TestGeneratePassword:
    """Test [`generator.generate_password`][]."""

    @pytest.mark.parametrize('length', [0, 1, 6, 12, 15, 100])
    def test_200_length(self, length: int) -> None:
        """Passwords have exactly the requested length."""
        pool = Pool(tests.DEFAULT_POOL_CHARS)
        assert len(generator.generate_password(pool, length)) == length

    @hypothesis.given(
        chars=strategies.text(min_size=1, max_size=30),
        length=strategies.integers(min_value=0, max_value=64),
        seed=strategies.integers(min_value=0, max_value=2**32 - 1),
    )
    def test_201_membership(self, chars: str, length: int, seed: int) -> None:
        """Every password character is drawn from the pool."""
        pool = Pool(chars)
        password = generator.generate_password(
            pool, length, rng=random.Random(seed)
        )
        assert len(password) == length
        assert pool.contains_all(password)

    def test_202_single_character_pool(self) -> None:
        """A pool of one character gives a repetition of it."""
        assert generator.generate_password(Pool('x'), 5) == 'xxxxx'

    def test_203_coverage(self, seeded_rng: random.Random) -> None:
        """Long passwords from small pools use every character."""
        pool = Pool('0123456789')
        password = generator.generate_password(pool, 1000, rng=seeded_rng)
        assert set(password) == set('0123456789')

    def test_204_deterministic_with_seeded_rng(self) -> None:
        """An injected random source makes generation reproducible."""
        pool = Pool(tests.DEFAULT_POOL_CHARS)
        first = generator.generate_password(pool, 20, rng=random.Random(42))
        second = generator.generate_password(pool, 20, rng=random.Random(42))
        assert first == second

    def test_205_roughly_uniform(self, seeded_rng: random.Random) -> None:
        """Each character is drawn with roughly equal frequency."""
        pool = Pool('abcd')
        password = generator.generate_password(pool, 40_000, rng=seeded_rng)
        for char in 'abcd':
            assert 9000 < password.count(char) < 11000

    def test_210_empty_pool(self) -> None:
        """Empty pools are rejected before any randomness is consumed."""
        rng = CountingRandom()
        with pytest.raises(EmptyPoolError):
            generator.generate_password(Pool(), 12, rng=rng)
        assert rng.draws == 0

    def test_211_negative_length(self) -> None:
        """Negative lengths are rejected."""
        rng = CountingRandom()
        with pytest.raises(ValueError, match='invalid password length'):
            generator.generate_password(Pool('abc'), -1, rng=rng)
        assert rng.draws == 0

    def test_212_one_draw_per_character(self) -> None:
        """Each character costs exactly one draw."""
        rng = CountingRandom()
        generator.generate_password(Pool('abc'), 17, rng=rng)
        assert rng.draws == 17


class TestGeneratePasswords:
    """Test [`generator.generate_passwords`][]."""

    @pytest.mark.parametrize('count', [0, 1, 10])
    def test_200_count(self, count: int) -> None:
        """The requested number of passwords is generated."""
        pool = Pool(tests.DEFAULT_POOL_CHARS)
        passwords = list(generator.generate_passwords(pool, 8, count))
        assert len(passwords) == count
        assert all(len(p) == 8 for p in passwords)

    def test_201_independent(self, seeded_rng: random.Random) -> None:
        """Passwords in a batch are drawn independently."""
        pool = Pool(tests.DEFAULT_POOL_CHARS)
        passwords = list(
            generator.generate_passwords(pool, 16, 50, rng=seeded_rng)
        )
        assert len(set(passwords)) == 50

    @pytest.mark.parametrize(
        ['chars', 'length', 'count', 'exc_type'],
        [
            pytest.param('', 12, 1, EmptyPoolError, id='empty-pool'),
            pytest.param('abc', -1, 1, ValueError, id='negative-length'),
            pytest.param('abc', 12, -1, ValueError, id='negative-count'),
        ],
    )
    def test_210_eager_validation(
        self,
        chars: str,
        length: int,
        count: int,
        exc_type: type[Exception],
    ) -> None:
        """Invalid requests fail upon calling, not upon iterating."""
        rng = CountingRandom()
        with pytest.raises(exc_type):
            generator.generate_passwords(Pool(chars), length, count, rng=rng)
        assert rng.draws == 0

    def test_211_lazy_generation(self) -> None:
        """Passwords are generated on demand."""
        rng = CountingRandom()
        passwords: Iterator[str] = generator.generate_passwords(
            Pool('abc'), 4, 3, rng=rng
        )
        assert rng.draws == 0
        next(passwords)
        assert rng.draws == 4


class TestPasswordInfo:
    """Test [`generator.PasswordInfo`][]."""

    @pytest.mark.parametrize(
        ['length', 'pool_size', 'expected'],
        [
            pytest.param(
                15,
                64,
                'Entropy: 90 bits | Length: 15 chars | Pool size: 64 chars',
                id='15-of-64',
            ),
            pytest.param(
                12,
                62,
                'Entropy: 71 bits | Length: 12 chars | Pool size: 62 chars',
                id='default',
            ),
            pytest.param(
                0,
                10,
                'Entropy: 0 bits | Length: 0 chars | Pool size: 10 chars',
                id='empty-password',
            ),
        ],
    )
    def test_200_format(
        self,
        length: int,
        pool_size: int,
        expected: str,
    ) -> None:
        """The summary line has a fixed format."""
        info = generator.PasswordInfo(length=length, pool_size=pool_size)
        assert info.format() == expected

    def test_201_entropy(self) -> None:
        """The entropy is derived from length and pool size."""
        info = generator.PasswordInfo(length=22, pool_size=64)
        assert info.entropy == entropy.calculate_entropy(22, 64) == 132.0

    def test_202_saturated_entropy(self) -> None:
        """Saturated entropies are reported as such."""
        info = generator.PasswordInfo(length=1000, pool_size=64)
        assert info.entropy == entropy.MAX_ENTROPY
        assert info.format().startswith('Entropy: 1024 bits |')
