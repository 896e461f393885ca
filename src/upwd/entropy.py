# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Conversion between password length and password entropy.

A password of length `L`, drawn uniformly from a pool of `N` distinct
characters, is one of `N ** L` equally likely passwords, and thus has
an entropy of `log2(N ** L) = L * log2(N)` bits.  This module converts
in both directions.

"""

from __future__ import annotations

import math
import sys

from upwd.pool import EmptyPoolError

__all__ = (
    'MAX_ENTROPY',
    'DegeneratePoolSizeError',
    'calculate_entropy',
    'calculate_length',
    'required_length',
)
__author__ = 'Marco Ricci <software@the13thletter.info>'

MAX_ENTROPY = math.log2(sys.float_info.max)
"""
The saturation boundary of [`calculate_entropy`][], in bits.

Passwords with more possibilities than the largest finite float are
reported with this entropy.  Just under 1024 bits for IEEE 754 double
precision.
"""


class DegeneratePoolSizeError(ValueError):
    """The pool size does not permit converting entropy to length.

    With at most one character to choose from, every character adds
    zero bits of entropy, so no length achieves a positive entropy.

    """

    def __init__(self, pool_size: float) -> None:  # noqa: D107
        self.pool_size = pool_size
        super().__init__(f'degenerate pool size: {pool_size!r}')


def calculate_entropy(length: int, pool_size: float) -> float:
    """Calculate the entropy of a password, in bits.

    The number of possible passwords, `pool_size ** length`, is
    computed exactly (as an unbounded `int`) and converted to a float
    before taking the base 2 logarithm.  If that number is too large
    for a float, the largest finite float is used instead, i.e. the
    result saturates at [`MAX_ENTROPY`][].  If the result would
    obviously saturate, we return [`MAX_ENTROPY`][] directly, without
    computing the power.

    Args:
        length:
            The password length.  Must be non-negative.
        pool_size:
            The number of distinct characters in the pool.  Must be
            positive.

    Returns:
        The entropy in bits, between 0 and [`MAX_ENTROPY`][] inclusive.

    Raises:
        EmptyPoolError:
            The pool size is zero, so there are no possible passwords.
        ValueError:
            The length or the pool size is negative.

    Examples:
        >>> calculate_entropy(12, 64)
        72.0
        >>> calculate_entropy(0, 64)
        0.0
        >>> calculate_entropy(12, 1)
        0.0
        >>> calculate_entropy(1000, 64) == MAX_ENTROPY
        True
        >>> calculate_entropy(1024, 2.0) == MAX_ENTROPY
        True

    """
    if length < 0:
        msg = f'invalid password length: {length!r}'
        raise ValueError(msg)
    if pool_size < 0:
        msg = f'invalid pool size: {pool_size!r}'
        raise ValueError(msg)
    if pool_size == 0:
        raise EmptyPoolError
    if length == 0 or pool_size == 1:
        return 0.0
    # The estimate is accurate to far less than one bit.
    if length * math.log2(pool_size) > MAX_ENTROPY + 1:
        return MAX_ENTROPY
    # Float pool sizes overflow in the power already, int pool sizes
    # only in the conversion.
    try:
        possibilities_float = float(pool_size**length)
    except OverflowError:
        possibilities_float = sys.float_info.max
    return math.log2(possibilities_float)


def calculate_length(entropy: float, pool_size: float) -> float:
    """Calculate the password length needed for the given entropy.

    The result is real-valued.  Round it up (see [`required_length`][])
    to obtain a usable password length; rounding down would fall short
    of the requested entropy.

    Args:
        entropy:
            The desired entropy, in bits.  Must be finite and
            non-negative.
        pool_size:
            The number of distinct characters in the pool.  Must
            exceed 1.

    Returns:
        The (fractional) password length.

    Raises:
        DegeneratePoolSizeError:
            The pool size is 1 or less.
        ValueError:
            The entropy is negative or not finite.

    Examples:
        >>> calculate_length(72.0, 64)
        12.0
        >>> math.ceil(calculate_length(128.0, 64.0))
        22
        >>> calculate_length(0.0, 64)
        0.0

    """
    if not math.isfinite(entropy) or entropy < 0:
        msg = f'invalid entropy: {entropy!r}'
        raise ValueError(msg)
    if not pool_size > 1:
        raise DegeneratePoolSizeError(pool_size)
    if entropy == 0:
        return 0.0
    return entropy / math.log2(pool_size)


def required_length(entropy: float, pool_size: float) -> int:
    """Return the shortest password length reaching the given entropy.

    This is [`calculate_length`][], rounded up.

    Raises:
        DegeneratePoolSizeError:
            The pool size is 1 or less.
        ValueError:
            The entropy is negative or not finite.

    Examples:
        >>> required_length(128.0, 64)
        22
        >>> required_length(72.0, 64)
        12

    """
    return math.ceil(calculate_length(entropy, pool_size))
