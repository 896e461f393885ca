# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Random password generation from a character pool."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from typing_extensions import NamedTuple

from upwd import entropy
from upwd.pool import EmptyPoolError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from upwd.pool import Pool

__all__ = ('PasswordInfo', 'generate_password', 'generate_passwords')
__author__ = 'Marco Ricci <software@the13thletter.info>'

_system_random = random.SystemRandom()


def _check_request(pool: Pool, length: int, /) -> None:
    if pool.is_empty():
        raise EmptyPoolError
    if length < 0:
        msg = f'invalid password length: {length!r}'
        raise ValueError(msg)


def generate_password(
    pool: Pool,
    length: int,
    /,
    *,
    rng: random.Random | None = None,
) -> str:
    """Generate a random password.

    Each character is drawn independently and uniformly from the pool,
    with replacement.

    Args:
        pool:
            The characters to draw from.  Must not be empty.
        length:
            The password length.  Must be non-negative.
        rng:
            The source of randomness.  Defaults to a shared
            [`random.SystemRandom`][] instance.

    Returns:
        A password of exactly `length` characters.

    Raises:
        EmptyPoolError:
            The pool is empty.  Raised before any randomness is
            consumed.
        ValueError:
            The length is negative.

    Examples:
        >>> from upwd.pool import Pool
        >>> pool = Pool().extend_from_string('0123456789')
        >>> len(generate_password(pool, 15))
        15
        >>> generate_password(pool, 0)
        ''

    """
    _check_request(pool, length)
    if rng is None:
        rng = _system_random
    size = len(pool)
    return ''.join(pool[rng.randrange(size)] for _ in range(length))


def generate_passwords(
    pool: Pool,
    length: int,
    count: int,
    /,
    *,
    rng: random.Random | None = None,
) -> Iterator[str]:
    """Generate `count` independent random passwords.

    The request is validated eagerly, upon calling, so that an invalid
    request never yields a partial batch of passwords.

    Raises:
        EmptyPoolError:
            The pool is empty.
        ValueError:
            The length or the count is negative.

    """
    _check_request(pool, length)
    if count < 0:
        msg = f'invalid password count: {count!r}'
        raise ValueError(msg)

    def gen() -> Iterator[str]:
        for _ in range(count):
            yield generate_password(pool, length, rng=rng)

    return gen()


class PasswordInfo(NamedTuple):
    """Summary information about generated passwords.

    Attributes:
        length: The password length.
        pool_size: The number of distinct characters in the pool.

    """

    length: int
    """"""
    pool_size: int
    """"""

    @property
    def entropy(self) -> float:
        """The entropy actually achieved, in bits.

        Derived from the (integral) length and the pool size, not from
        any requested entropy target.

        """
        return entropy.calculate_entropy(self.length, self.pool_size)

    def format(self) -> str:
        """Format the summary as a single line.

        Examples:
            >>> PasswordInfo(length=15, pool_size=64).format()
            'Entropy: 90 bits | Length: 15 chars | Pool size: 64 chars'

        """
        return (
            f'Entropy: {self.entropy:.0f} bits | '
            f'Length: {self.length} chars | '
            f'Pool size: {self.pool_size} chars'
        )
