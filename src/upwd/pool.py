# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Character pools for password generation.

A character pool is the working alphabet of a single password
generation request: an ordered set of unique characters, assembled from
one or more character class strings.  The main API is the [`Pool`][]
class.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from typing_extensions import Self

__all__ = ('EmptyPoolError', 'Pool')
__author__ = 'Marco Ricci <software@the13thletter.info>'


class EmptyPoolError(ValueError):
    """The character pool contains no characters.

    No password can be drawn from an empty pool, and no meaningful
    entropy can be attributed to it.

    """

    def __init__(self) -> None:  # noqa: D107
        super().__init__('character pool is empty')


class Pool:
    """An insertion-ordered set of unique characters.

    Characters are added by merging in whole strings via
    [`extend_from_string`][Pool.extend_from_string]; characters already
    present are skipped, so the first occurrence determines the
    position.  The position is stable, which makes uniform sampling by
    integer index possible.

    Examples:
        >>> pool = Pool().extend_from_string('abc').extend_from_string('cbd')
        >>> pool
        Pool('abcd')
        >>> len(pool)
        4
        >>> pool.get(3)
        'd'
        >>> pool.get(4) is None
        True
        >>> pool.contains_all('dab')
        True
        >>> 'x' in pool
        False

    """

    __slots__ = ('_chars', '_index')

    def __init__(self, chars: Iterable[str] = (), /) -> None:
        """Initialize the pool.

        Args:
            chars:
                Initial characters.  Usually left empty; use
                [`extend_from_string`][Pool.extend_from_string] instead.

        """
        self._index: dict[str, int] = {}
        self._chars: list[str] = []
        for char in chars:
            self._add(char)

    def _add(self, char: str, /) -> None:
        if char not in self._index:
            self._index[char] = len(self._chars)
            self._chars.append(char)

    def extend_from_string(self, s: str, /) -> Self:
        """Merge all characters of `s` into the pool.

        Args:
            s: The characters to add.  Duplicates are ignored.

        Returns:
            The pool itself, to allow chaining.

        """
        for char in s:
            self._add(char)
        return self

    def __len__(self) -> int:
        return len(self._chars)

    def is_empty(self) -> bool:
        """Return true if the pool contains no characters."""
        return not self._chars

    def get(self, index: int, /) -> str | None:
        """Return the character at `index`, or `None` if out of range.

        Negative indices are out of range.

        """
        if 0 <= index < len(self._chars):
            return self._chars[index]
        return None

    def __getitem__(self, index: int, /) -> str:
        char = self.get(index)
        if char is None:
            msg = f'pool index out of range: {index!r}'
            raise IndexError(msg)
        return char

    def contains(self, char: str, /) -> bool:
        """Return true if `char` is a member of the pool."""
        return char in self._index

    __contains__ = contains

    def contains_all(self, s: str, /) -> bool:
        """Return true if every character of `s` is in the pool.

        The empty string is trivially contained in every pool.

        """
        return all(char in self._index for char in s)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __str__(self) -> str:
        return ''.join(self._chars)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({str(self)!r})'
