# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Types used by upwd."""

from __future__ import annotations

import enum
import json
import types
from typing import TYPE_CHECKING

from typing_extensions import NotRequired, TypedDict

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from typing_extensions import Any, TypeIs

__all__ = (
    'DEFAULT_CHARSETS',
    'DEFAULT_SET_CLASSES',
    'CharacterClass',
    'CharsetConfig',
    'is_charset_config',
    'validate_charset_config',
)


class CharacterClass(str, enum.Enum):
    """A configurable character class.

    The declaration order is the order in which the classes are merged
    into a character pool.

    Attributes:
        UPPERCASE: Uppercase letters.
        LOWERCASE: Lowercase letters.
        DIGITS: Digits.
        SYMBOLS: Special symbols.
        OTHERS: Other symbols, typically outside of ASCII.

    """

    UPPERCASE = 'uppercase'
    """"""
    LOWERCASE = 'lowercase'
    """"""
    DIGITS = 'digits'
    """"""
    SYMBOLS = 'symbols'
    """"""
    OTHERS = 'others'
    """"""


DEFAULT_SET_CLASSES = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGITS,
)
"""The character classes used if no character class is requested."""


class CharsetConfig(TypedDict, total=False):
    r"""Configuration for upwd: the characters of each character class.

    Usually stored as JSON.  Missing entries default to the
    corresponding entry in [`DEFAULT_CHARSETS`][].

    Attributes:
        uppercase:
            Uppercase letters.  Default: `A` through `Z`.
        lowercase:
            Lowercase letters.  Default: `a` through `z`.
        digits:
            Digits.  Default: `0` through `9`.
        symbols:
            Special symbols.  Default: `*&^%$#@!~`.
        others:
            Other symbols.  Default: chess pieces, card suits and
            musical symbols.

    """

    uppercase: NotRequired[str]
    """"""
    lowercase: NotRequired[str]
    """"""
    digits: NotRequired[str]
    """"""
    symbols: NotRequired[str]
    """"""
    others: NotRequired[str]
    """"""


DEFAULT_CHARSETS: Mapping[CharacterClass, str] = types.MappingProxyType({
    CharacterClass.UPPERCASE: 'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    CharacterClass.LOWERCASE: 'abcdefghijklmnopqrstuvwxyz',
    CharacterClass.DIGITS: '0123456789',
    CharacterClass.SYMBOLS: '*&^%$#@!~',
    CharacterClass.OTHERS: '♕♖♗♘♙♚♛♜♝♞♟♠♡♢♣♤♥♦♧♩♪♫♬♭♮♯',
})
"""The built-in character class defaults.  Read-only."""


def json_path(path: Sequence[str | int], /) -> str:
    r"""Transform a series of keys and indices into a JSONPath selector.

    The selector is rooted at `$`, and uses shorthand dot notation
    where possible.

    Examples:
        >>> json_path(['symbols'])
        '$.symbols'
        >>> json_path(['odd key'])
        '$["odd key"]'
        >>> json_path([])
        '$'

    """

    def needs_longhand(x: str | int) -> bool:
        initial = (
            frozenset('abcdefghijklmnopqrstuvwxyz')
            | frozenset('ABCDEFGHIJKLMNOPQRSTUVWXYZ')
            | frozenset('_')
        )
        chars = initial | frozenset('0123456789')
        return not (
            isinstance(x, str)
            and x
            and set(x).issubset(chars)
            and x[:1] in initial
        )

    chunks = ['$']
    chunks.extend(
        f'[{json.dumps(x)}]' if needs_longhand(x) else f'.{x}' for x in path
    )
    return ''.join(chunks)


def validate_charset_config(
    obj: Any,  # noqa: ANN401
    /,
    *,
    allow_unknown_settings: bool = False,
) -> None:
    """Check that `obj` is a valid charset config.

    Args:
        obj:
            The object to test.
        allow_unknown_settings:
            If false, abort on unknown settings.

    Raises:
        TypeError:
            An entry in the charset config, or the charset config
            itself, has the wrong type.
        ValueError:
            The charset config contains an unknown setting.

    """
    err_obj_not_a_dict = 'charset config is not a dict'

    def err_not_a_string(key: str, /) -> str:
        json_path_str = json_path([key])
        return f'charset config entry {json_path_str} is not a string'

    def err_unknown_setting(key: str, /) -> str:
        return f'charset config uses unknown setting {key!r}'

    if not isinstance(obj, dict):
        raise TypeError(err_obj_not_a_dict)
    known_settings = {c.value for c in CharacterClass}
    for key, value in obj.items():
        if key in known_settings:
            if not isinstance(value, str):
                raise TypeError(err_not_a_string(key))
        elif not allow_unknown_settings:
            raise ValueError(err_unknown_setting(key))


def is_charset_config(obj: Any) -> TypeIs[CharsetConfig]:  # noqa: ANN401
    """Check if `obj` is a valid charset config, according to typing.

    Args:
        obj: The object to test.

    Returns:
        True if this is a charset config, false otherwise.

    """
    try:
        validate_charset_config(obj, allow_unknown_settings=True)
    except (TypeError, ValueError) as exc:
        if 'charset config ' not in str(exc):  # pragma: no cover
            raise  # noqa: DOC501
        return False
    return True
