# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

# ruff: noqa: TRY400

"""Command-line interface for upwd."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Final, NoReturn

import click
from typing_extensions import Any

from upwd import _internals, _types, entropy, generator
from upwd._internals import cli_helpers, cli_machinery
from upwd._internals import cli_messages as _msg
from upwd.pool import EmptyPoolError

if TYPE_CHECKING:
    from upwd.pool import Pool

__all__ = ('upwd',)

PROG_NAME = _internals.PROG_NAME
VERSION = _internals.VERSION

DEFAULT_LENGTH = 12
"""The password length if neither length nor entropy is requested."""
DEFAULT_COUNT = 1
"""The number of passwords if no count is requested."""


class _UpwdContext:
    """The context for the `upwd` command-line interface.

    This context object -- wrapping a [`click.Context`][] object --
    encapsulates a single call to the `upwd` command-line.  It is an
    implementation detail of the command-line, and should not be
    instantiated directly by users or API clients.

    Attributes:
        logger:
            The logger used for warnings and error messages.
        ctx:
            The underlying [`click.Context`][] from which the
            command-line settings and parameter values are queried.
        params_by_str:
            A mapping of option names (long names, short names, etc.) to
            option objects.  Used during the validation of the command
            line.

    """

    logger: Final = logging.getLogger(PROG_NAME)
    """"""
    ctx: Final[click.Context]
    """"""
    params_by_str: dict[str, click.Parameter]

    def __init__(self, ctx: click.Context, /) -> None:
        self.ctx = ctx
        self.params_by_str = {}
        for param in ctx.command.params:
            self.params_by_str[param.human_readable_name] = param
            for name in param.opts + param.secondary_opts:
                self.params_by_str[name] = param

    def is_param_set(self, param: click.Parameter, /) -> bool:
        """Return true if the parameter was given a value.

        Numeric options count as set even if their value is zero.

        """
        value = self.ctx.params.get(param.human_readable_name)
        return value is not None and value is not False

    def option_name(self, param: click.Parameter | str, /) -> str:
        """Return the shortest long-form option name of a parameter."""
        param = self.params_by_str[param] if isinstance(param, str) else param
        names = [param.human_readable_name, *param.opts, *param.secondary_opts]
        option_names = [n for n in names if n.startswith('--')]
        return min(option_names, key=len)

    def check_incompatible_options(
        self,
        param1: click.Parameter | str,
        param2: click.Parameter | str,
    ) -> None:
        """Raise an error if the two options are incompatible.

        Raises:
            click.BadOptionUsage: The given options are incompatible.

        """
        param1 = (
            self.params_by_str[param1] if isinstance(param1, str) else param1
        )
        param2 = (
            self.params_by_str[param2] if isinstance(param2, str) else param2
        )
        if param1 == param2:
            return
        if not self.is_param_set(param1):
            return
        if self.is_param_set(param2):
            param1_str = self.option_name(param1)
            param2_str = self.option_name(param2)
            raise click.BadOptionUsage(
                param1_str,
                str(
                    _msg.TranslatedString(
                        _msg.ErrMsgTemplate.PARAMS_MUTUALLY_EXCLUSIVE,
                        param1=param1_str,
                        param2=param2_str,
                    )
                ),
                ctx=self.ctx,
            )

    def err(self, msg: Any, /, **kwargs: Any) -> NoReturn:  # noqa: ANN401
        """Log an error, then abort the function call.

        We ensure that color handling is done properly before the error
        is logged.

        """
        stacklevel = kwargs.pop('stacklevel', 1)
        stacklevel += 1
        extra = kwargs.pop('extra', {})
        extra.setdefault('color', self.ctx.color)
        self.logger.error(msg, stacklevel=stacklevel, extra=extra, **kwargs)
        self.ctx.exit(1)

    def warning(self, msg: Any, /, **kwargs: Any) -> None:  # noqa: ANN401
        """Log a warning.

        We ensure that color handling is done properly before the
        warning is logged.

        """
        stacklevel = kwargs.pop('stacklevel', 1)
        stacklevel += 1
        extra = kwargs.pop('extra', {})
        extra.setdefault('color', self.ctx.color)
        self.logger.warning(msg, stacklevel=stacklevel, extra=extra, **kwargs)

    def get_config(self) -> _types.CharsetConfig:
        """Return the charset configuration stored on disk.

        If no configuration is stored, return an empty configuration,
        i.e., use the built-in defaults.  Warn about unknown settings.

        """
        filename = str(cli_helpers.config_filename(subsystem='charsets'))
        try:
            config = cli_helpers.load_config()
        except FileNotFoundError:
            self.logger.debug(
                _msg.TranslatedString(
                    _msg.DebugMsgTemplate.CONFIG_FILE_NOT_FOUND,
                    filename=filename,
                )
            )
            return {}
        except OSError as exc:
            self.err(
                _msg.TranslatedString(
                    _msg.ErrMsgTemplate.CANNOT_LOAD_CONFIG,
                    error=exc.strerror,
                    filename=filename,
                ),
            )
        except json.JSONDecodeError as exc:
            self.err(
                _msg.TranslatedString(
                    _msg.ErrMsgTemplate.CANNOT_DECODE_CONFIG,
                    error=exc.msg,
                    filename=filename,
                ),
            )
        except (TypeError, ValueError) as exc:
            self.err(
                _msg.TranslatedString(
                    _msg.ErrMsgTemplate.CANNOT_LOAD_CONFIG_INVALID,
                    error=str(exc),
                    filename=filename,
                ),
            )
        for key in cli_helpers.unknown_settings(config):
            self.warning(
                _msg.TranslatedString(
                    _msg.WarnMsgTemplate.UNKNOWN_CONFIG_SETTING,
                    key=key,
                    filename=filename,
                ),
            )
        return config

    def reset_config(self) -> None:
        """Overwrite the charset configuration with the built-in defaults."""
        filename = str(cli_helpers.config_filename(subsystem='charsets'))
        try:
            cli_helpers.reset_config()
        except OSError as exc:
            self.err(
                _msg.TranslatedString(
                    _msg.ErrMsgTemplate.CANNOT_RESET_CONFIG,
                    error=exc.strerror,
                    filename=filename,
                ),
            )
        self.logger.info(
            _msg.TranslatedString(
                _msg.InfoMsgTemplate.CONFIG_RESET,
                filename=filename,
            ),
            extra={'color': self.ctx.color},
        )

    def get_pool(self, config: _types.CharsetConfig, /) -> Pool:
        """Assemble the character pool requested on the command-line."""
        flags = {
            c.value: bool(self.ctx.params.get(c.value))
            for c in _types.CharacterClass
        }
        classes = cli_helpers.requested_classes(**flags)
        class_names = ', '.join(c.value for c in classes)
        if not any(flags.values()):
            self.logger.debug(
                _msg.TranslatedString(
                    _msg.DebugMsgTemplate.DEFAULT_CHARACTER_CLASSES,
                    classes=class_names,
                )
            )
        merged = cli_helpers.charsets(config)
        for character_class in classes:
            if not merged[character_class]:
                self.warning(
                    _msg.TranslatedString(
                        _msg.WarnMsgTemplate.EMPTY_CHARACTER_CLASS,
                        class_name=character_class.value,
                    ),
                )
        try:
            pool = cli_helpers.collect_pool(config, **flags)
        except EmptyPoolError:
            self.err(_msg.TranslatedString(_msg.ErrMsgTemplate.EMPTY_POOL))
        self.logger.debug(
            _msg.TranslatedString(
                _msg.DebugMsgTemplate.POOL_ASSEMBLED,
                pool_size=len(pool),
                classes=class_names,
            )
        )
        return pool

    def get_length(self, pool: Pool, /) -> int:
        """Return the password length, possibly derived from an entropy."""
        length: int | None = self.ctx.params.get('length')
        target: float | None = self.ctx.params.get('entropy')
        if length is not None:
            return length
        if target is None:
            return DEFAULT_LENGTH
        try:
            length = entropy.required_length(target, len(pool))
        except entropy.DegeneratePoolSizeError as exc:
            self.err(
                _msg.TranslatedString(
                    _msg.ErrMsgTemplate.DEGENERATE_POOL_SIZE,
                    pool_size=exc.pool_size,
                ),
            )
        self.logger.debug(
            _msg.TranslatedString(
                _msg.DebugMsgTemplate.LENGTH_FROM_ENTROPY,
                entropy=target,
                length=length,
                pool_size=len(pool),
            )
        )
        return length

    def validate_command_line(self) -> None:
        """Check for incompatible options on the command-line.

        Raises:
            click.UsageError: The command-line is invalid.

        """
        self.check_incompatible_options('--length', '--entropy')

    def generate(self) -> None:
        """Generate and print the requested passwords."""
        if self.ctx.params.get('reset_config'):
            self.reset_config()
            return
        config = self.get_config()
        pool = self.get_pool(config)
        length = self.get_length(pool)
        count: int | None = self.ctx.params.get('count')
        if count is None:
            count = DEFAULT_COUNT
        self.logger.info(
            _msg.TranslatedString(
                _msg.InfoMsgTemplate.GENERATING_PASSWORDS,
                count=count,
                length=length,
            ),
            extra={'color': self.ctx.color},
        )
        for password in generator.generate_passwords(pool, length, count):
            click.echo(password)
        if self.ctx.params.get('info'):
            info = generator.PasswordInfo(length=length, pool_size=len(pool))
            click.echo(info.format())


@click.command(
    context_settings={'help_option_names': ['-h', '--help']},
    cls=cli_machinery.TopLevelCLIEntryPoint,
    help=(
        _msg.TranslatedString(_msg.Label.UPWD_01),
        _msg.TranslatedString(_msg.Label.UPWD_02),
    ),
    epilog=_msg.TranslatedString(_msg.Label.UPWD_EPILOG_02),
)
@click.option(
    '-u',
    '--uppercase',
    is_flag=True,
    help=_msg.TranslatedString(_msg.Label.UPWD_UPPERCASE_HELP_TEXT),
    cls=cli_machinery.CharacterClassOption,
)
@click.option(
    '-l',
    '--lowercase',
    is_flag=True,
    help=_msg.TranslatedString(_msg.Label.UPWD_LOWERCASE_HELP_TEXT),
    cls=cli_machinery.CharacterClassOption,
)
@click.option(
    '-d',
    '--digits',
    is_flag=True,
    help=_msg.TranslatedString(_msg.Label.UPWD_DIGITS_HELP_TEXT),
    cls=cli_machinery.CharacterClassOption,
)
@click.option(
    '-s',
    '--symbols',
    is_flag=True,
    help=_msg.TranslatedString(_msg.Label.UPWD_SYMBOLS_HELP_TEXT),
    cls=cli_machinery.CharacterClassOption,
)
@click.option(
    '-o',
    '--others',
    is_flag=True,
    help=_msg.TranslatedString(_msg.Label.UPWD_OTHERS_HELP_TEXT),
    cls=cli_machinery.CharacterClassOption,
)
@click.option(
    '-L',
    '--length',
    metavar=_msg.TranslatedString(
        _msg.Label.PASSWORD_GENERATION_METAVAR_NUMBER
    ),
    callback=cli_machinery.validate_length,
    help=_msg.TranslatedString(
        _msg.Label.UPWD_LENGTH_HELP_TEXT,
        metavar=_msg.TranslatedString(
            _msg.Label.PASSWORD_GENERATION_METAVAR_NUMBER
        ),
        default=DEFAULT_LENGTH,
    ),
    cls=cli_machinery.PasswordGenerationOption,
)
@click.option(
    '-E',
    '--entropy',
    metavar=_msg.TranslatedString(
        _msg.Label.PASSWORD_GENERATION_METAVAR_NUMBER
    ),
    callback=cli_machinery.validate_entropy,
    help=_msg.TranslatedString(
        _msg.Label.UPWD_ENTROPY_HELP_TEXT,
        metavar=_msg.TranslatedString(
            _msg.Label.PASSWORD_GENERATION_METAVAR_NUMBER
        ),
    ),
    cls=cli_machinery.PasswordGenerationOption,
)
@click.option(
    '-c',
    '--count',
    metavar=_msg.TranslatedString(
        _msg.Label.PASSWORD_GENERATION_METAVAR_NUMBER
    ),
    callback=cli_machinery.validate_count,
    help=_msg.TranslatedString(
        _msg.Label.UPWD_COUNT_HELP_TEXT,
        metavar=_msg.TranslatedString(
            _msg.Label.PASSWORD_GENERATION_METAVAR_NUMBER
        ),
    ),
    cls=cli_machinery.PasswordGenerationOption,
)
@click.option(
    '-i',
    '--info',
    is_flag=True,
    help=_msg.TranslatedString(_msg.Label.UPWD_INFO_HELP_TEXT),
    cls=cli_machinery.PasswordGenerationOption,
)
@click.option(
    '--config',
    'reset_config',
    is_flag=True,
    help=_msg.TranslatedString(_msg.Label.UPWD_CONFIG_HELP_TEXT),
    cls=cli_machinery.ConfigurationOption,
)
@cli_machinery.version_option(cli_machinery.upwd_version_option_callback)
@cli_machinery.standard_logging_options
@click.pass_context
def upwd(
    ctx: click.Context,
    /,
    **_kwargs: Any,  # noqa: ANN401
) -> None:
    """Generate random passwords, and report their entropy.

    This is a [`click`][CLICK]-powered command-line interface function,
    and not intended for programmatic use.  Call with arguments
    `--help` to see full documentation of the interface.  (See also
    [`click.testing.CliRunner`][] for controlled, programmatic
    invocation.)

    [CLICK]: https://pypi.org/package/click/

    Parameters:
        ctx (click.Context):
            The `click` context.

    Other Parameters:
        uppercase (bool):
            Command-line argument `-u`/`--uppercase`.  Use uppercase
            letters.
        lowercase (bool):
            Command-line argument `-l`/`--lowercase`.  Use lowercase
            letters.
        digits (bool):
            Command-line argument `-d`/`--digits`.  Use digits.
        symbols (bool):
            Command-line argument `-s`/`--symbols`.  Use special
            symbols.
        others (bool):
            Command-line argument `-o`/`--others`.  Use other symbols.
        length (int | None):
            Command-line argument `-L`/`--length`.  The password
            length.  Defaults to 12, unless an entropy is requested.
        entropy (float | None):
            Command-line argument `-E`/`--entropy`.  Derive the password
            length from this minimum entropy, in bits.  Incompatible
            with `--length`.
        count (int | None):
            Command-line argument `-c`/`--count`.  The number of
            passwords to generate.  Defaults to 1.
        info (bool):
            Command-line argument `-i`/`--info`.  Print entropy, length
            and pool size after the passwords.
        reset_config (bool):
            Command-line argument `--config`.  Reset the configuration
            file to the built-in defaults, then exit.

    """
    upwd_context = _UpwdContext(ctx)
    upwd_context.validate_command_line()
    upwd_context.generate()


if __name__ == '__main__':
    upwd()
