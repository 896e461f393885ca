# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

"""Messages for the command-line interface of `upwd`.

Also contains some machinery related to internationalization and
localization.

!!! warning

    Non-public module (implementation detail), provided for didactical and
    educational purposes only.  Subject to change without notice, including
    removal.

"""

from __future__ import annotations

import contextlib
import enum
import functools
import gettext
import inspect
import os
import pathlib
import string
import sys
import textwrap
import types
from typing import TYPE_CHECKING, NamedTuple, Protocol, Union, cast

from typing_extensions import TypeAlias

from upwd import _internals

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from typing_extensions import Any, Self

__all__ = ('PROG_NAME',)

PROG_NAME = _internals.PROG_NAME
VERSION = _internals.VERSION
AUTHOR = _internals.AUTHOR


def load_translations(
    localedirs: list[str | bytes | os.PathLike] | None = None,
    languages: Sequence[str] | None = None,
    class_: type[gettext.NullTranslations] | None = None,
) -> gettext.NullTranslations:  # pragma: no cover
    """Load a translation catalog for upwd.

    Runs [`gettext.translation`][] under the hood for multiple locale
    directories.  `fallback=True` is implied.

    Args:
        localedirs:
            A list of directories to run [`gettext.translation`][]
            against.  Defaults to `$XDG_DATA_HOME/locale` (usually
            `~/.local/share/locale`), `{sys.prefix}/share/locale` and
            `{sys.base_prefix}/share/locale` if not given.
        languages:
            Passed directly to [`gettext.translation`][].
        class_:
            Passed directly to [`gettext.translation`][].

    Returns:
        A (potentially dummy) translation catalog.

    """
    if localedirs is None:
        if sys.platform.startswith('win'):
            xdg_data_home = (
                pathlib.Path(os.environ['APPDATA'])
                if os.environ.get('APPDATA')
                else pathlib.Path('~').expanduser()
            )
        elif os.environ.get('XDG_DATA_HOME'):
            xdg_data_home = pathlib.Path(os.environ['XDG_DATA_HOME'])
        else:
            xdg_data_home = pathlib.Path('~').expanduser() / '.local' / 'share'
        localedirs = [
            pathlib.Path(xdg_data_home, 'locale'),
            pathlib.Path(sys.prefix, 'share', 'locale'),
            pathlib.Path(sys.base_prefix, 'share', 'locale'),
        ]
    for localedir in localedirs:
        with contextlib.suppress(OSError):
            return gettext.translation(
                PROG_NAME,
                localedir=os.fsdecode(localedir),
                languages=languages,
                class_=class_,
            )
    return gettext.NullTranslations()


translation = load_translations()


class TranslatableString(NamedTuple):
    """Translatable string as used by the `upwd` command-line.

    For typing purposes.

    Attributes:
        l10n_context:
            The localization context, as per [`gettext`][].  Used to
            disambiguate different uses of the same translatable string.
        singular:
            The translatable message, base case.
        plural:
            The translatable message, plural case.  Usually unset.
        flags:
            `.mo` file flags for this message, e.g. to indicate the
            string formatting style in use.
        translator_comments:
            Explicit commentary for the translator.

    """

    l10n_context: str
    """"""
    singular: str
    """"""
    plural: str = ''
    """"""
    flags: frozenset[str] = frozenset()
    """"""
    translator_comments: str = ''
    """"""

    def fields(self) -> list[str]:
        """Return the replacement fields this template requires.

        Examples:
            >>> translatable(
            ...     'ctx', '{b} and {a} and {b}', flags='python-brace-format'
            ... ).fields()
            ['b', 'a']

        """
        if (
            'no-python-brace-format' in self.flags
            or 'python-brace-format' not in self.flags
        ):
            return []
        formatter = string.Formatter()
        fields: dict[str, int] = {}
        for _lit, field, _spec, _conv in formatter.parse(self.singular):
            if field is not None and field not in fields:
                fields[field] = len(fields)
        return sorted(fields, key=fields.__getitem__)

    @staticmethod
    def _maybe_rewrap(
        string: str,
        /,
        *,
        fix_sentence_endings: bool = True,
    ) -> str:
        string = inspect.cleandoc(string)
        return '\n'.join(
            textwrap.wrap(
                string,
                width=float('inf'),  # type: ignore[arg-type]
                fix_sentence_endings=fix_sentence_endings,
            )
        )

    def rewrapped(self) -> Self:
        """Return a rewrapped version of self.

        Normalizes all parts assumed to contain English prose.

        """
        msg = self._maybe_rewrap(self.singular, fix_sentence_endings=True)
        plural = self._maybe_rewrap(self.plural, fix_sentence_endings=True)
        context = self.l10n_context.strip()
        comments = self._maybe_rewrap(
            self.translator_comments, fix_sentence_endings=False
        )
        return self._replace(
            singular=msg,
            plural=plural,
            l10n_context=context,
            translator_comments=comments,
        )

    def with_comments(self, comments: str, /) -> Self:
        """Add or replace the string's translator comments.

        Returns:
            A new [`TranslatableString`][] with the specified comments.

        """
        if comments.strip() and not comments.lstrip().startswith(
            'TRANSLATORS:'
        ):
            comments = 'TRANSLATORS: ' + comments.lstrip()
        comments = self._maybe_rewrap(comments, fix_sentence_endings=False)
        return self._replace(translator_comments=comments)

    def validate_flags(self, *extra_flags: str) -> Self:
        """Add all flags, then validate them against the string.

        Returns:
            A new [`TranslatableString`][] with the extra flags added,
            and all flags validated.

        Raises:
            ValueError:
                The flags failed to validate.  See the exact error
                message for details.

        Examples:
            >>> TranslatableString('', '20% OK').validate_flags(
            ...     'no-python-format'
            ... ).flags
            frozenset({'no-python-format'})
            >>> TranslatableString('', '%d items').validate_flags()
            ... # doctest: +ELLIPSIS
            Traceback (most recent call last):
                ...
            ValueError: Missing flag for how to deal with percent character ...

        """
        all_flags = frozenset(f.strip() for f in self.flags.union(extra_flags))
        if '{' in self.singular and not bool(
            all_flags & {'python-brace-format', 'no-python-brace-format'}
        ):
            msg = (
                f'Missing flag for how to deal with brace character '
                f'in {self.singular!r}'
            )
            raise ValueError(msg)
        if '%' in self.singular and not bool(
            all_flags & {'python-format', 'no-python-format'}
        ):
            msg = (
                f'Missing flag for how to deal with percent character '
                f'in {self.singular!r}'
            )
            raise ValueError(msg)
        if (
            all_flags & {'python-format', 'python-brace-format'}
            and '%' not in self.singular
            and '{' not in self.singular
        ):
            msg = f'Missing format string parameters in {self.singular!r}'
            raise ValueError(msg)
        return self._replace(flags=all_flags)


def translatable(
    context: str,
    single: str,
    /,
    flags: Iterable[str] = (),
    plural: str = '',
    comments: str = '',
) -> TranslatableString:
    """Return a [`TranslatableString`][] with validated parts.

    This factory function is really only there to make the enum
    definitions more readable.

    """
    flags = (
        frozenset(flags) if not isinstance(flags, str) else frozenset({flags})
    )
    return (
        TranslatableString(context, single, plural=plural, flags=flags)
        .rewrapped()
        .with_comments(comments)
        .validate_flags()
    )


class TranslatedString:
    """A string object that stringifies to its translation.

    The translation and replacement value rendering is only performed
    when this string object is actually stringified.

    """

    def __init__(
        self,
        template: str | TranslatableString | MsgTemplate,
        args_dict: Mapping[str, Any] = types.MappingProxyType({}),
        /,
        **kwargs: Any,  # noqa: ANN401
    ) -> None:
        """Initializer.

        Args:
            template:
                A template string, suitable for [`str.format`][].  If
                a string, use it directly.  If
                a [`TranslatableString`][], or a known enum value whose
                value is a `TranslatableString`, then use that string's
                "singular" entry.
            args_dict:
                Keyword arguments to be passed to [`str.format`][].
            kwargs:
                More keyword arguments to be passed to [`str.format`][].

        """
        if isinstance(template, MSG_TEMPLATE_CLASSES):
            template = cast('TranslatableString', template.value)
        self.template = template
        self.kwargs = {**args_dict, **kwargs}
        self._rendered: str | None = None

    def __bool__(self) -> bool:
        """Return true if the rendered string is truthy."""
        return bool(str(self))

    def __eq__(self, other: object) -> bool:  # pragma: no cover
        """Return true if the rendered string is equal to `other`."""
        return str(self) == other

    def __hash__(self) -> int:  # pragma: no cover
        """Return the hash of the rendered string."""
        return hash(str(self))

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f'{self.__class__.__name__}({self.template!r}, '
            f'{dict(self.kwargs)!r})'
        )

    def __str__(self) -> str:
        """Return the rendered translation of this string.

        First, look up the translation of the string's template.  Then
        fill in the replacement fields.  Cache the result for future
        calls.

        """
        if self._rendered is None:
            do_escape = False
            if isinstance(self.template, str):
                context = ''
                template = self.template
            else:
                context = self.template.l10n_context
                template = self.template.singular
                do_escape = 'python-brace-format' not in self.template.flags
            template = (
                translation.pgettext(context, template)
                if context
                else translation.gettext(template)
            )
            template = self._escape(template) if do_escape else template
            kwargs = {
                k: str(v) if isinstance(v, TranslatedString) else v
                for k, v in self.kwargs.items()
            }
            self._rendered = template.format(**kwargs)
        return self._rendered

    @staticmethod
    def _escape(template: str) -> str:
        return template.translate({
            ord('{'): '{{',
            ord('}'): '}}',
        })

    @classmethod
    def constant(cls, template: str) -> Self:
        return cls(cls._escape(template))


class TranslatableStringConstructor(Protocol):
    """Construct a [`TranslatableString`][]."""

    def __call__(
        self,
        context: str,
        single: str,
        /,
        flags: Iterable[str] = (),
        plural: str = '',
        comments: str = '',
    ) -> TranslatableString:
        """Return a [`TranslatableString`][] from these parts."""


def commented(comments: str = '', /) -> TranslatableStringConstructor:
    """A "decorator" for readably constructing commented enum values.

    Returns a partial application of [`translatable`][] with the
    `comments` argument pre-filled.

    """  # noqa: DOC201
    return functools.partial(translatable, comments=comments)


class Label(enum.Enum):
    """Labels for the `upwd` command-line.

    Includes help text (long-form and short-form), help metavar names,
    and option group names.

    """

    UPWD_01 = commented(
        'This is the first paragraph of the command help text, '
        'but it also appears (in truncated form, if necessary) '
        'as one-line help text for this command.',
    )(
        'Label :: Help text :: One-line description',
        'Generate random passwords, and report their entropy.',
    )
    """"""
    UPWD_02 = commented(
        '',
    )(
        'Label :: Help text :: Explanation',
        'Passwords are drawn uniformly at random from a pool of '
        'characters, assembled from the selected character classes.  '
        'The length may be given directly, or derived from a minimum '
        'entropy.',
    )
    """"""
    UPWD_EPILOG_01 = commented(
        'The option names are literal and should not be translated.',
    )(
        'Label :: Help text :: Explanation',
        'If you do not specify any of the --uppercase, --lowercase, '
        '--digits, --symbols or --others options, then uppercase and '
        'lowercase letters and digits will be used.',
    )
    """"""
    UPWD_EPILOG_02 = commented(
        '',
    )(
        'Label :: Help text :: Explanation',
        'The character classes are configured in a file in the '
        'directory given by the `UPWD_PATH` variable, which defaults '
        'to `~/.upwd` on UNIX-like systems and '
        r'`C:\Users\<user>\AppData\Roaming\Upwd` on Windows.',
    )
    """"""
    CHARACTER_CLASS_LABEL = commented(
        '',
    )(
        'Label :: Help text :: Option group name',
        'Character classes',
    )
    """"""
    PASSWORD_GENERATION_LABEL = commented(
        '',
    )(
        'Label :: Help text :: Option group name',
        'Password generation',
    )
    """"""
    CONFIGURATION_LABEL = commented(
        '',
    )(
        'Label :: Help text :: Option group name',
        'Configuration',
    )
    """"""
    LOGGING_LABEL = commented(
        '',
    )(
        'Label :: Help text :: Option group name',
        'Logging',
    )
    """"""
    OPTIONS_LABEL = commented(
        '',
    )(
        'Label :: Help text :: Option group name',
        'Options',
    )
    """"""
    OTHER_OPTIONS_LABEL = commented(
        '',
    )(
        'Label :: Help text :: Option group name',
        'Other options',
    )
    """"""
    PASSWORD_GENERATION_METAVAR_NUMBER = commented(
        'This metavar is used in Label.UPWD_LENGTH_HELP_TEXT and others, '
        'yielding e.g. "Generate passwords of NUMBER characters.".',
    )(
        'Label :: Help text :: Metavar',
        'NUMBER',
    )
    """"""
    UPWD_UPPERCASE_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Use UPPERCASE letters [A-Z].',
    )
    """"""
    UPWD_LOWERCASE_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Use lowercase letters [a-z].',
    )
    """"""
    UPWD_DIGITS_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Use digits [0-9].',
    )
    """"""
    UPWD_SYMBOLS_HELP_TEXT = commented(
        'The bracketed characters are the default special symbols.',
    )(
        'Label :: Help text :: One-line description',
        'Use special symbols [*&^%$#@!~].',
        flags='no-python-format',
    )
    """"""
    UPWD_OTHERS_HELP_TEXT = commented(
        'The bracketed characters are a sample of the default '
        'other symbols.',
    )(
        'Label :: Help text :: One-line description',
        'Use other symbols [♕♖♗♘♙♚...].',
    )
    """"""
    UPWD_LENGTH_HELP_TEXT = commented(
        'The metavar is Label.PASSWORD_GENERATION_METAVAR_NUMBER.',
    )(
        'Label :: Help text :: One-line description',
        'Generate passwords of {metavar} characters (default: {default}).',
        flags='python-brace-format',
    )
    """"""
    UPWD_ENTROPY_HELP_TEXT = commented(
        'The metavar is Label.PASSWORD_GENERATION_METAVAR_NUMBER.  '
        'The option name is literal and should not be translated.',
    )(
        'Label :: Help text :: One-line description',
        'Generate passwords with at least {metavar} bits of entropy '
        '(conflicts with --length).',
        flags='python-brace-format',
    )
    """"""
    UPWD_COUNT_HELP_TEXT = commented(
        'The metavar is Label.PASSWORD_GENERATION_METAVAR_NUMBER.',
    )(
        'Label :: Help text :: One-line description',
        'Generate {metavar} passwords (default: 1).',
        flags='python-brace-format',
    )
    """"""
    UPWD_INFO_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Print entropy, length and pool size after the passwords.',
    )
    """"""
    UPWD_CONFIG_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Reset the configuration file to the built-in defaults, then exit.',
    )
    """"""
    DEBUG_OPTION_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Also emit debug information.  Implies --verbose.',
    )
    """"""
    HELP_OPTION_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Show this help text, then exit.',
    )
    """"""
    QUIET_OPTION_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Suppress even warnings; emit only errors.',
    )
    """"""
    VERBOSE_OPTION_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Emit extra/progress information to standard error.',
    )
    """"""
    VERSION_OPTION_HELP_TEXT = commented(
        '',
    )(
        'Label :: Help text :: One-line description',
        'Show applicable version information, then exit.',
    )
    """"""
    VERSION_INFO_MAJOR_LIBRARY_TEXT = commented(
        'This message reports on the version of a major library that '
        'currently provides functionality to upwd, '
        'such as click.',
    )(
        'Label :: Info Message',
        'Using {dependency_name_and_version}',
        flags='python-brace-format',
    )
    """"""
    SUPPORTED_CHARACTER_CLASSES = commented(
        'This is part of the version output, emitting lists of '
        'supported character classes.  A comma-separated English list '
        'of items follows, with standard English punctuation.',
    )(
        'Label :: Info Message:: Table row header',
        'Supported character classes:',
    )
    """"""


class DebugMsgTemplate(enum.Enum):
    """Debug messages for the `upwd` command-line."""

    CONFIG_FILE_NOT_FOUND = commented(
        '',
    )(
        'Debug message',
        'Configuration file {filename!r} not found.  '
        'Using the built-in defaults.',
        flags='python-brace-format',
    )
    """"""
    DEFAULT_CHARACTER_CLASSES = commented(
        '"classes" is a comma-separated list of character class names, '
        'which are not translated.',
    )(
        'Debug message',
        'No character class requested.  Using the default classes: '
        '{classes}.',
        flags='python-brace-format',
    )
    """"""
    POOL_ASSEMBLED = commented(
        '"classes" is a comma-separated list of character class names, '
        'which are not translated.',
    )(
        'Debug message',
        'Assembled a pool of {pool_size} characters from the classes '
        '{classes}.',
        flags='python-brace-format',
    )
    """"""
    LENGTH_FROM_ENTROPY = commented(
        '',
    )(
        'Debug message',
        'Requested entropy of {entropy} bits needs a length of {length} '
        'characters from a pool of {pool_size} characters.',
        flags='python-brace-format',
    )
    """"""


class InfoMsgTemplate(enum.Enum):
    """Info messages for the `upwd` command-line."""

    CONFIG_RESET = commented(
        '',
    )(
        'Info message',
        'Reset the configuration file {filename!r} to the built-in '
        'defaults.',
        flags='python-brace-format',
    )
    """"""
    GENERATING_PASSWORDS = commented(
        '',
    )(
        'Info message',
        'Generating {count} password(s) of length {length}.',
        flags='python-brace-format',
    )
    """"""


class WarnMsgTemplate(enum.Enum):
    """Warning messages for the `upwd` command-line."""

    EMPTY_CHARACTER_CLASS = commented(
        '"class_name" is a character class name, which is not translated.',
    )(
        'Warning message',
        'The character class {class_name!r} is configured as empty, '
        'and contributes no characters.',
        flags='python-brace-format',
    )
    """"""
    UNKNOWN_CONFIG_SETTING = commented(
        '',
    )(
        'Warning message',
        'Ignoring unknown setting {key!r} in configuration file '
        '{filename!r}.',
        flags='python-brace-format',
    )
    """"""


class ErrMsgTemplate(enum.Enum):
    """Error messages for the `upwd` command-line."""

    CANNOT_DECODE_CONFIG = commented(
        '"error" is supplied by the JSON decoder.',
    )(
        'Error message',
        'Cannot load configuration: cannot decode JSON: {error}: '
        '{filename!r}.',
        flags='python-brace-format',
    )
    """"""
    CANNOT_LOAD_CONFIG = commented(
        '"error" is supplied by the operating system (errno/strerror).',
    )(
        'Error message',
        'Cannot load configuration: {error}: {filename!r}.',
        flags='python-brace-format',
    )
    """"""
    CANNOT_LOAD_CONFIG_INVALID = commented(
        '"error" describes the offending configuration entry, '
        'and is not translated.',
    )(
        'Error message',
        'Cannot load configuration: invalid configuration: {error}: '
        '{filename!r}.',
        flags='python-brace-format',
    )
    """"""
    CANNOT_RESET_CONFIG = commented(
        '"error" is supplied by the operating system (errno/strerror).',
    )(
        'Error message',
        'Cannot reset configuration: {error}: {filename!r}.',
        flags='python-brace-format',
    )
    """"""
    DEGENERATE_POOL_SIZE = commented(
        '',
    )(
        'Error message',
        'Cannot derive a password length from an entropy target: '
        'the character pool has only {pool_size} character(s).',
        flags='python-brace-format',
    )
    """"""
    EMPTY_POOL = commented(
        '',
    )(
        'Error message',
        'The character pool is empty.  '
        'Check the configured character classes.',
    )
    """"""
    PARAMS_MUTUALLY_EXCLUSIVE = commented(
        'The params are long-form command-line option names.  '
        'Typical example: "--length is mutually exclusive with --entropy."',
    )(
        'Error message',
        '{param1} is mutually exclusive with {param2}.',
        flags='python-brace-format',
    )
    """"""


MsgTemplate: TypeAlias = Union[
    Label,
    DebugMsgTemplate,
    InfoMsgTemplate,
    WarnMsgTemplate,
    ErrMsgTemplate,
]
MSG_TEMPLATE_CLASSES = (
    Label,
    DebugMsgTemplate,
    InfoMsgTemplate,
    WarnMsgTemplate,
    ErrMsgTemplate,
)
"""A collection all enums containing translatable strings as values."""
