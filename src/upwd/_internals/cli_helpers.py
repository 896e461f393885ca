# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Helper functions for the upwd command-line interface.

Warning:
    Non-public module (implementation detail), provided for didactical and
    educational purposes only. Subject to change without notice, including
    removal.

"""

from __future__ import annotations

import json
import os
import pathlib
from typing import TYPE_CHECKING

import click

from upwd import _internals, _types
from upwd.pool import EmptyPoolError, Pool

if TYPE_CHECKING:
    from collections.abc import Mapping

__author__ = _internals.AUTHOR

PROG_NAME = _internals.PROG_NAME
INVALID_CHARSET_CONFIG = 'Invalid charset config'

config_filename_table = {
    None: '.',
    'charsets': 'charsets.json',
}


def config_filename(
    subsystem: str | None = 'charsets',
) -> pathlib.Path:
    """Return the filename of the configuration file for the subsystem.

    The file is located within the configuration directory as
    determined by the `UPWD_PATH` environment variable, or by
    [`click.get_app_dir`][] in POSIX mode.

    Args:
        subsystem:
            Name of the configuration subsystem whose configuration
            filename to return.  If `None`, return the configuration
            directory instead.

    Raises:
        AssertionError:
            An unknown subsystem was passed.

    """
    path = pathlib.Path(
        os.getenv(PROG_NAME.upper() + '_PATH')
        or click.get_app_dir(PROG_NAME, force_posix=True)
    )
    try:
        filename = config_filename_table[subsystem]
    except (KeyError, TypeError):  # pragma: no cover
        msg = f'Unknown configuration subsystem: {subsystem!r}'
        raise AssertionError(msg) from None
    return path / filename


def load_config() -> _types.CharsetConfig:
    """Load the charset config from the application directory.

    The filename is obtained via [`config_filename`][].  This must be
    a JSON file.  Unknown settings are retained; see
    [`unknown_settings`][].

    Returns:
        The charset settings.  See [`_types.CharsetConfig`][] for
        details.

    Raises:
        OSError:
            There was an OS error accessing the file.  In particular,
            [`FileNotFoundError`][] if there is no config file.
        TypeError:
            The data loaded from the file is not a charset config: an
            entry, or the whole config, has the wrong type.
        ValueError:
            The file does not contain valid JSON.  (This raises
            [`json.JSONDecodeError`][], a subclass.)

    """
    filename = config_filename(subsystem='charsets')
    with filename.open('rb') as fileobj:
        data = json.load(fileobj)
    _types.validate_charset_config(data, allow_unknown_settings=True)
    return data


def save_config(config: _types.CharsetConfig, /) -> None:
    """Save the charset config to the application directory.

    The filename is obtained via [`config_filename`][].  The config
    will be stored as a JSON file.

    Args:
        config:
            Charset configuration to save.

    Raises:
        OSError:
            There was an OS error accessing or writing the file.
        ValueError:
            The data cannot be stored as a charset config.

    """
    if not _types.is_charset_config(config):
        raise ValueError(INVALID_CHARSET_CONFIG)
    filename = config_filename(subsystem='charsets')
    filedir = filename.resolve().parent
    filedir.mkdir(parents=True, exist_ok=True)
    with filename.open('w', encoding='UTF-8') as fileobj:
        json.dump(
            config, fileobj, ensure_ascii=False, indent=2, sort_keys=True
        )


def reset_config() -> pathlib.Path:
    """Overwrite the charset config with the built-in defaults.

    Returns:
        The filename of the config file just written.

    Raises:
        OSError:
            There was an OS error accessing or writing the file.

    """
    config: _types.CharsetConfig = {
        c.value: s  # type: ignore[misc]
        for c, s in _types.DEFAULT_CHARSETS.items()
    }
    save_config(config)
    return config_filename(subsystem='charsets')


def unknown_settings(config: Mapping[str, object], /) -> list[str]:
    """Return the settings in `config` that upwd does not know about.

    Examples:
        >>> unknown_settings({'digits': '01', 'emoji': '🙂'})
        ['emoji']

    """
    known_settings = {c.value for c in _types.CharacterClass}
    return [key for key in config if key not in known_settings]


def charsets(
    config: _types.CharsetConfig,
    /,
) -> dict[_types.CharacterClass, str]:
    """Merge a charset config with the built-in defaults.

    Examples:
        >>> merged = charsets({'digits': '01'})
        >>> merged[_types.CharacterClass.DIGITS]
        '01'
        >>> merged[_types.CharacterClass.UPPERCASE][:5]
        'ABCDE'

    """
    return {
        c: config.get(c.value, default)  # type: ignore[misc]
        for c, default in _types.DEFAULT_CHARSETS.items()
    }


def default_set(config: _types.CharsetConfig, /) -> str:
    """Return the implicit default character set of a charset config.

    This is the concatenation of the uppercase, lowercase and digits
    settings, in this order.

    Examples:
        >>> default_set({'uppercase': 'AB', 'lowercase': 'ab'})
        'ABab0123456789'

    """
    merged = charsets(config)
    return ''.join(merged[c] for c in _types.DEFAULT_SET_CLASSES)


def requested_classes(
    *,
    uppercase: bool = False,
    lowercase: bool = False,
    digits: bool = False,
    symbols: bool = False,
    others: bool = False,
) -> tuple[_types.CharacterClass, ...]:
    """Return the character classes to merge, in merge order.

    If no class is explicitly requested, return the default classes
    (uppercase, lowercase and digits).

    Examples:
        >>> [c.value for c in requested_classes(symbols=True, digits=True)]
        ['digits', 'symbols']
        >>> [c.value for c in requested_classes()]
        ['uppercase', 'lowercase', 'digits']

    """
    flags = {
        _types.CharacterClass.UPPERCASE: uppercase,
        _types.CharacterClass.LOWERCASE: lowercase,
        _types.CharacterClass.DIGITS: digits,
        _types.CharacterClass.SYMBOLS: symbols,
        _types.CharacterClass.OTHERS: others,
    }
    classes = tuple(c for c in _types.CharacterClass if flags[c])
    return classes or _types.DEFAULT_SET_CLASSES


def collect_pool(
    config: _types.CharsetConfig,
    /,
    *,
    uppercase: bool = False,
    lowercase: bool = False,
    digits: bool = False,
    symbols: bool = False,
    others: bool = False,
) -> Pool:
    """Assemble the character pool for the requested character classes.

    The configured strings of the requested classes (see
    [`requested_classes`][]) are merged into a fresh pool, in the order
    uppercase, lowercase, digits, symbols, others.

    Args:
        config:
            The charset config.  Missing entries use the built-in
            defaults.
        uppercase:
            Include the uppercase class.
        lowercase:
            Include the lowercase class.
        digits:
            Include the digits class.
        symbols:
            Include the symbols class.
        others:
            Include the others class.

    Returns:
        The assembled pool.

    Raises:
        EmptyPoolError:
            The requested classes are all configured as empty.

    Examples:
        >>> str(collect_pool({'digits': '0110'}, digits=True))
        '01'
        >>> len(collect_pool({}))
        62

    """
    merged = charsets(config)
    pool = Pool()
    for character_class in requested_classes(
        uppercase=uppercase,
        lowercase=lowercase,
        digits=digits,
        symbols=symbols,
        others=others,
    ):
        pool.extend_from_string(merged[character_class])
    if pool.is_empty():
        raise EmptyPoolError
    return pool
