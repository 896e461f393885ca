# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib


"""Command-line machinery for upwd.

Warning:
    Non-public module (implementation detail), provided for didactical and
    educational purposes only. Subject to change without notice, including
    removal.

"""

from __future__ import annotations

import collections
import importlib.metadata
import inspect
import logging
import math
import warnings
from typing import TYPE_CHECKING, Callable, Literal, TextIO, TypeVar

import click
from typing_extensions import Any, ParamSpec

from upwd import _internals, _types, entropy
from upwd._internals import cli_messages as _msg

if TYPE_CHECKING:
    import types
    from collections.abc import MutableSequence

    from typing_extensions import Self

    ShowWarning = Callable[
        [
            str | Warning,
            type[Warning],
            str,
            int,
            TextIO | None,
            str | None,
        ],
        None,
    ]
    ExitFunc = Callable[
        [
            type[BaseException] | None,
            BaseException | None,
            types.TracebackType | None,
        ],
        None,
    ]

PROG_NAME = _internals.PROG_NAME
VERSION = _internals.VERSION
VERSION_OUTPUT_WRAPPING_WIDTH = 72

# Error messages
NOT_AN_INTEGER = 'not an integer'
NOT_A_NONNEGATIVE_INTEGER = 'not a non-negative integer'
NOT_A_POSITIVE_INTEGER = 'not a positive integer'
NOT_A_NUMBER = 'not a number'
NOT_A_NONNEGATIVE_FINITE_NUMBER = 'not a non-negative finite number'
ABOVE_MAX_ENTROPY = 'larger than the maximum supported entropy'


# Logging
# =======


class ClickEchoStderrHandler(logging.Handler):
    """Echo formatted log records to standard error, via `click`.

    The record's `color` attribute, if any, is passed on to
    [`click.echo`][], so that `upwd` errors and warnings honor the
    context's color setting.

    """

    def emit(self, record: logging.LogRecord) -> None:
        click.echo(
            self.format(record),
            err=True,
            color=getattr(record, 'color', None),
        )


class CLIofPackageFormatter(logging.Formatter):
    """Format `upwd` log records as console diagnostics.

    Every line of the message is prefixed with `upwd: `, followed by
    a level label: `Debug: ` for debug messages, a bold `Warning: ` for
    warnings, and nothing for informational and error messages.

    """

    level_labels: dict[str, str | None] = {
        'DEBUG': 'Debug',
        'INFO': None,
        'WARNING': 'Warning',
        'ERROR': None,
        'CRITICAL': None,
    }
    """"""

    def __init__(
        self,
        *,
        prog_name: str = PROG_NAME,
        package_name: str | None = None,
    ) -> None:
        super().__init__()
        self.prog_name = prog_name
        self.package_name = (
            package_name
            if package_name is not None
            else prog_name.lower().replace(' ', '_').replace('-', '_')
        )

    def level_indicator(self, levelname: str, /) -> str:
        """Return the label to print after the program name.

        Raises:
            AssertionError:
                The log level is not supported.

        """
        try:
            label = self.level_labels[levelname]
        except KeyError:  # pragma: no cover [failsafe]
            msg = f'Unsupported logging level: {levelname}'
            raise AssertionError(msg) from None
        if label is None:
            return ''
        if levelname == 'WARNING':
            label = click.style(label, bold=True)
        return f'{label}: '

    def format(self, record: logging.LogRecord) -> str:
        prefix = f'{self.prog_name}: ' + self.level_indicator(
            record.levelname
        )
        text = ''.join(
            prefix + line
            for line in record.getMessage().splitlines(True)  # noqa: FBT003
        )
        if record.exc_info:
            text += self.formatException(record.exc_info) + '\n'
        return text


class StandardCLILogging:
    """The handlers that `upwd` installs while running.

    `cli_handler` receives the records of the `upwd` logger hierarchy.
    `warnings_handler` receives Python warnings, diverted to the
    `py.warnings` logger.  Both default to the warning level; the
    `--verbose`, `--debug` and `--quiet` options adjust `cli_handler`.

    """

    prog_name = PROG_NAME
    package_name = PROG_NAME.lower().replace(' ', '_').replace('-', '_')
    cli_formatter = CLIofPackageFormatter(
        prog_name=prog_name, package_name=package_name
    )
    cli_handler = ClickEchoStderrHandler()
    cli_handler.addFilter(logging.Filter(name=package_name))
    cli_handler.setFormatter(cli_formatter)
    cli_handler.setLevel(logging.WARNING)
    warnings_handler = ClickEchoStderrHandler()
    warnings_handler.addFilter(logging.Filter(name='py.warnings'))
    warnings_handler.setFormatter(cli_formatter)
    warnings_handler.setLevel(logging.WARNING)

    @classmethod
    def ensure_standard_logging(cls) -> StandardLoggingContextManager:
        return StandardLoggingContextManager(
            handler=cls.cli_handler,
            root_logger=cls.package_name,
        )

    @classmethod
    def ensure_standard_warnings_logging(
        cls,
    ) -> StandardWarningsLoggingContextManager:
        return StandardWarningsLoggingContextManager(
            handler=cls.warnings_handler,
        )


class StandardLoggingContextManager:
    """Attach a handler to a logger for the duration of a context.

    The handler is only removed again by the context that attached it,
    so nested contexts (e.g. a test runner wrapping the entry point)
    are fine.  Not thread safe.

    """

    def __init__(
        self,
        handler: logging.Handler,
        root_logger: str | None = None,
    ) -> None:
        self.handler = handler
        self.root_logger_name = root_logger
        self.base_logger = logging.getLogger(self.root_logger_name)
        self.action_required: MutableSequence[bool] = collections.deque()

    def __enter__(self) -> Self:
        attach = self.handler not in self.base_logger.handlers
        self.action_required.append(attach)
        if attach:
            self.base_logger.addHandler(self.handler)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> Literal[False]:
        if self.action_required.pop():
            self.base_logger.removeHandler(self.handler)
        return False


class StandardWarningsLoggingContextManager(StandardLoggingContextManager):
    """Route Python warnings to the `py.warnings` logger in a context.

    Warnings that target an explicit file still go to the previously
    installed `warnings.showwarning`.  Nestable like its base class.

    """

    def __init__(
        self,
        handler: logging.Handler,
    ) -> None:
        super().__init__(handler=handler, root_logger='py.warnings')
        self.stack: MutableSequence[tuple[ExitFunc, ShowWarning]] = (
            collections.deque()
        )

    def __enter__(self) -> Self:
        def showwarning(  # noqa: PLR0913,PLR0917
            message: str | Warning,
            category: type[Warning],
            filename: str,
            lineno: int,
            file: TextIO | None = None,
            line: str | None = None,
        ) -> None:
            if file is not None:  # pragma: no cover [external-api]
                self.stack[0][1](
                    message, category, filename, lineno, file, line
                )
                return
            logging.getLogger('py.warnings').warning(
                warnings.formatwarning(
                    message, category, filename, lineno, line
                )
            )

        catcher = warnings.catch_warnings()
        catcher.__enter__()
        self.stack.append((catcher.__exit__, warnings.showwarning))
        warnings.showwarning = showwarning
        return super().__enter__()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> Literal[False]:
        ret = super().__exit__(exc_type, exc_value, exc_tb)
        exit_func, _showwarning = self.stack.pop()
        assert not exit_func(exc_type, exc_value, exc_tb)
        return ret


P = ParamSpec('P')
R = TypeVar('R')


def adjust_logging_level(
    ctx: click.Context,
    /,
    param: click.Parameter | None = None,
    value: int | None = None,
) -> None:
    """Set the level of `upwd` diagnostics on standard error.

    Callback for `--debug`, `--verbose` and `--quiet`.  Each of these
    stores its level via `flag_value`; the last one given wins.

    """
    if param is None or value is None or ctx.resilient_parsing:
        return
    StandardCLILogging.cli_handler.setLevel(value)
    logging.getLogger(StandardCLILogging.package_name).setLevel(value)


# Option parsing and grouping
# ===========================


class OptionGroupOption(click.Option):
    """A [`click.Option`][] with an associated group name and group epilog.

    Used by [`CommandWithHelpGroups`][] to print help sections.  Each
    subclass contains its own group name and epilog.

    Attributes:
        option_group_name:
            The name of the option group.  Used as a heading on the help
            text for options in this section.
        epilog:
            An epilog to print after listing the options in this
            section.

    """

    option_group_name: object = ''
    """"""
    epilog: object = ''
    """"""

    def __init__(self, *args: Any, **kwargs: Any) -> None:  # noqa: ANN401
        if self.__class__ == __class__:  # type: ignore[name-defined]
            raise NotImplementedError
        # click preprocesses the help text in the Option constructor,
        # and insists on a string.  Our help texts are translated string
        # objects, so re-add the help text after construction.
        unset = object()
        help = kwargs.pop('help', unset)  # noqa: A001
        super().__init__(*args, **kwargs)
        if help is not unset:  # pragma: no branch
            self.help = help


class StandardOption(OptionGroupOption):
    pass



# Portions of this class are based directly on code from click 8.1.
# (This does not in general include docstrings, unless otherwise noted.)
# They are subject to the 3-clause BSD license in the following
# paragraphs.  Modifications to their code are marked with respective
# comments; they too are released under the same license below.  The
# original code did not contain any "noqa" or "pragma" comments.
#
#     Copyright 2024 Pallets
#
#     Redistribution and use in source and binary forms, with or
#     without modification, are permitted provided that the
#     following conditions are met:
#
#      1. Redistributions of source code must retain the above
#         copyright notice, this list of conditions and the
#         following disclaimer.
#
#      2. Redistributions in binary form must reproduce the above
#         copyright notice, this list of conditions and the
#         following disclaimer in the documentation and/or other
#         materials provided with the distribution.
#
#      3. Neither the name of the copyright holder nor the names
#         of its contributors may be used to endorse or promote
#         products derived from this software without specific
#         prior written permission.
#
#     THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND
#     CONTRIBUTORS “AS IS” AND ANY EXPRESS OR IMPLIED WARRANTIES,
#     INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
#     MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
#     DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR
#     CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
#     SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT
#     NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES;
#     LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION)
#     HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
#     CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR
#     OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS
#     SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
class CommandWithHelpGroups(click.Command):
    """A [`click.Command`][] with support for some help text customizations.

    Supports help/option groups, group epilogs, and help text objects
    (objects that stringify to help texts).  The latter is primarily
    used to implement translations.

    Inspired by [a comment on `pallets/click#373`][CLICK_ISSUE] for
    help/option group support, and further modified to include group
    epilogs and help text objects.

    [CLICK_ISSUE]: https://github.com/pallets/click/issues/373#issuecomment-515293746

    """

    @staticmethod
    def _text(text: object, /) -> str:
        if isinstance(text, (list, tuple)):
            return '\n\n'.join(str(x) for x in text)
        return str(text)

    # This method is based on click 8.1; see the comment above the class
    # declaration for license details.
    def get_help_option(
        self,
        ctx: click.Context,
    ) -> click.Option | None:
        """Return a standard help option object, with a translated help text.

        Args:
            ctx:
                The click context.

        """
        help_options = self.get_help_option_names(ctx)

        if (
            not help_options or not self.add_help_option
        ):  # pragma: no cover [external-api]
            return None

        def show_help(
            ctx: click.Context,
            param: click.Parameter,  # noqa: ARG001
            value: str,
        ) -> None:
            if value and not ctx.resilient_parsing:
                click.echo(ctx.get_help(), color=ctx.color)
                ctx.exit()

        # Modified from click 8.1: We use StandardOption and a non-str
        # object as the help string.
        return StandardOption(
            help_options,
            is_flag=True,
            is_eager=True,
            expose_value=False,
            callback=show_help,
            help=_msg.TranslatedString(_msg.Label.HELP_OPTION_HELP_TEXT),
        )

    # This method is based on click 8.1; see the comment above the class
    # declaration for license details.
    def get_short_help_str(
        self,
        limit: int = 45,
    ) -> str:
        """Return the short help string for a command.

        If only a long help string is given, shorten it.

        Args:
            limit:
                The maximum width of the short help string.

        """
        # Modification against click 8.1: Call `_text()` on `self.help`
        # to allow help texts to be general objects, not just strings.
        # Used to implement translatable strings, as objects that
        # stringify to the translation.
        if self.short_help:  # pragma: no cover [external-api]
            text = inspect.cleandoc(self._text(self.short_help))
        elif self.help:
            text = click.utils.make_default_short_help(
                self._text(self.help), limit
            )
        else:  # pragma: no cover [external-api]
            text = ''
        return text.strip()

    # This method is based on click 8.1; see the comment above the class
    # declaration for license details.
    def format_help_text(
        self,
        ctx: click.Context,
        formatter: click.HelpFormatter,
    ) -> None:
        """Format the help text prologue, if any.

        Args:
            ctx:
                The click context.
            formatter:
                The formatter for the `--help` listing.

        """
        del ctx
        # Modification against click 8.1: Call `_text()` on `self.help`
        # to allow help texts to be general objects, not just strings.
        # Used to implement translatable strings, as objects that
        # stringify to the translation.
        text = (
            inspect.cleandoc(self._text(self.help).partition('\f')[0])
            if self.help is not None
            else ''
        )
        if text:  # pragma: no branch
            formatter.write_paragraph()
            with formatter.indentation():
                formatter.write_text(text)

    # This method is based on click 8.1; see the comment above the class
    # declaration for license details.  Consider the whole section
    # marked as modified; the code modifications are too numerous to
    # mark individually.
    def format_options(
        self,
        ctx: click.Context,
        formatter: click.HelpFormatter,
    ) -> None:
        r"""Format options on the help listing, grouped into sections.

        We list all options, grouped into sections according to the
        concrete [`click.Option`][] subclass being used.  If the option
        is an instance of some subclass of [`OptionGroupOption`][], then
        the section heading and the epilog are taken from the
        `option_group_name` and `epilog` attributes; otherwise, the
        section heading is "Options" (or "Other options" if there are
        other option groups) and the epilog is empty.

        Args:
            ctx:
                The click context.
            formatter:
                The formatter for the `--help` listing.

        """
        default_group_name = ''
        help_records: dict[str, list[tuple[str, str]]] = {}
        epilogs: dict[str, str] = {}
        params = self.params[:]
        if (  # pragma: no branch
            (help_opt := self.get_help_option(ctx)) is not None
            and help_opt not in params
        ):
            params.append(help_opt)
        for param in params:
            rec = param.get_help_record(ctx)
            if rec is not None:
                rec = (rec[0], self._text(rec[1]))
                if isinstance(param, OptionGroupOption):
                    group_name = self._text(param.option_group_name)
                    epilogs.setdefault(group_name, self._text(param.epilog))
                else:  # pragma: no cover [external-api]
                    group_name = default_group_name
                help_records.setdefault(group_name, []).append(rec)
        if default_group_name in help_records:  # pragma: no branch
            default_group = help_records.pop(default_group_name)
            default_group_label = (
                _msg.Label.OTHER_OPTIONS_LABEL
                if len(default_group) > 1
                else _msg.Label.OPTIONS_LABEL
            )
            default_group_name = self._text(
                _msg.TranslatedString(default_group_label)
            )
            help_records[default_group_name] = default_group
        for group_name, records in help_records.items():
            with formatter.section(group_name):
                formatter.write_dl(records)
            epilog = inspect.cleandoc(epilogs.get(group_name, ''))
            if epilog:
                formatter.write_paragraph()
                with formatter.indentation():
                    formatter.write_text(epilog)

    # This method is based on click 8.1; see the comment above the class
    # declaration for license details.
    def format_epilog(
        self,
        ctx: click.Context,
        formatter: click.HelpFormatter,
    ) -> None:
        """Format the epilog, if any.

        Args:
            ctx:
                The click context.
            formatter:
                The formatter for the `--help` listing.

        """
        del ctx
        if self.epilog:  # pragma: no branch
            # Modification against click 8.1: Call `_text()` on
            # `self.epilog` to allow help texts to be general objects,
            # not just strings.  Used to implement translatable strings,
            # as objects that stringify to the translation.
            epilog = inspect.cleandoc(self._text(self.epilog))
            formatter.write_paragraph()
            with formatter.indentation():
                formatter.write_text(epilog)


class TopLevelCLIEntryPoint(CommandWithHelpGroups):
    """A [`CommandWithHelpGroups`][] for the top-level command.

    When called as a function, this sets up the environment properly
    before invoking the actual callbacks.  Currently, this means setting
    up the logging subsystem and the delegation of Python warnings to
    the logging subsystem.

    The environment setup can be bypassed by calling the `.main` method
    directly.

    """

    def __call__(  # pragma: no cover [external-api]
        self,
        *args: Any,  # noqa: ANN401
        **kwargs: Any,  # noqa: ANN401
    ) -> Any:  # noqa: ANN401
        """"""  # noqa: D419
        # Coverage testing is done with the `click.testing` module,
        # which does not use the `__call__` shortcut.
        with (
            StandardCLILogging.ensure_standard_logging(),
            StandardCLILogging.ensure_standard_warnings_logging(),
        ):
            return self.main(*args, **kwargs)


# Actual option groups and callbacks used by upwd
# ===============================================


def _parse_integer(value: Any) -> int:  # noqa: ANN401
    if isinstance(value, int):
        return value
    try:
        return int(value, 10)
    except ValueError as exc:
        raise click.BadParameter(NOT_AN_INTEGER) from exc


def validate_length(
    ctx: click.Context,
    param: click.Parameter,
    value: Any,  # noqa: ANN401
) -> int | None:
    """Check that the length is valid (int, 0 or larger).

    Args:
        ctx: The `click` context.
        param: The current command-line parameter.
        value: The parameter value to be checked.

    Returns:
        The parsed parameter value.

    Raises:
        click.BadParameter: The parameter value is invalid.

    """
    del ctx  # Unused.
    del param  # Unused.
    if value is None:
        return value
    int_value = _parse_integer(value)
    if int_value < 0:
        raise click.BadParameter(NOT_A_NONNEGATIVE_INTEGER)
    return int_value


def validate_count(
    ctx: click.Context,
    param: click.Parameter,
    value: Any,  # noqa: ANN401
) -> int | None:
    """Check that the count is valid (int, 1 or larger).

    Args:
        ctx: The `click` context.
        param: The current command-line parameter.
        value: The parameter value to be checked.

    Returns:
        The parsed parameter value.

    Raises:
        click.BadParameter: The parameter value is invalid.

    """
    del ctx  # Unused.
    del param  # Unused.
    if value is None:
        return value
    int_value = _parse_integer(value)
    if int_value < 1:
        raise click.BadParameter(NOT_A_POSITIVE_INTEGER)
    return int_value


def validate_entropy(
    ctx: click.Context,
    param: click.Parameter,
    value: Any,  # noqa: ANN401
) -> float | None:
    """Check that the entropy is valid (a float from 0 to `MAX_ENTROPY`).

    Args:
        ctx: The `click` context.
        param: The current command-line parameter.
        value: The parameter value to be checked.

    Returns:
        The parsed parameter value.

    Raises:
        click.BadParameter: The parameter value is invalid.

    """
    del ctx  # Unused.
    del param  # Unused.
    if value is None:
        return value
    try:
        float_value = float(value)
    except ValueError as exc:
        raise click.BadParameter(NOT_A_NUMBER) from exc
    if not math.isfinite(float_value) or float_value < 0:
        raise click.BadParameter(NOT_A_NONNEGATIVE_FINITE_NUMBER)
    if float_value > entropy.MAX_ENTROPY:
        raise click.BadParameter(ABOVE_MAX_ENTROPY)
    return float_value


def common_version_output(
    ctx: click.Context,
    param: click.Parameter,
    value: bool,  # noqa: FBT001
) -> None:
    del param, value
    major_dependencies = [f'click {importlib.metadata.version("click")}']
    click.echo(
        ' '.join([
            click.style(PROG_NAME, bold=True),
            VERSION,
        ]),
        color=ctx.color,
    )
    for dependency in major_dependencies:
        click.echo(
            str(
                _msg.TranslatedString(
                    _msg.Label.VERSION_INFO_MAJOR_LIBRARY_TEXT,
                    dependency_name_and_version=dependency,
                )
            ),
            color=ctx.color,
        )


def print_version_info_types(
    version_info_types: dict[_msg.Label, list[str]],
    /,
    *,
    ctx: click.Context,
) -> None:
    for message_label, item_list in version_info_types.items():
        if item_list:
            current_length = len(str(_msg.TranslatedString(message_label)))
            formatted_item_list_pieces: list[str] = []
            n = len(item_list)
            for i, item in enumerate(item_list, start=1):
                space = ' '
                punctuation = '.' if i == n else ','
                if (
                    current_length + len(space) + len(item) + len(punctuation)
                    <= VERSION_OUTPUT_WRAPPING_WIDTH
                ):
                    current_length += len(space) + len(item) + len(punctuation)
                    piece = f'{space}{item}{punctuation}'
                else:
                    space = '    '
                    current_length = len(space) + len(item) + len(punctuation)
                    piece = f'\n{space}{item}{punctuation}'
                formatted_item_list_pieces.append(piece)
            click.echo(
                ''.join([
                    click.style(
                        str(_msg.TranslatedString(message_label)),
                        bold=True,
                    ),
                    ''.join(formatted_item_list_pieces),
                ]),
                color=ctx.color,
            )


def upwd_version_option_callback(
    ctx: click.Context,
    param: click.Parameter,
    value: bool,  # noqa: FBT001
) -> None:
    if value and not ctx.resilient_parsing:
        common_version_output(ctx, param, value)
        click.echo()
        version_info_types: dict[_msg.Label, list[str]] = {
            _msg.Label.SUPPORTED_CHARACTER_CLASSES: [
                c.value for c in _types.CharacterClass
            ],
        }
        print_version_info_types(version_info_types, ctx=ctx)
        ctx.exit()


def version_option(
    version_option_callback: Callable[
        [click.Context, click.Parameter, Any], Any
    ],
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    return click.option(
        '--version',
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=version_option_callback,
        cls=StandardOption,
        help=_msg.TranslatedString(_msg.Label.VERSION_OPTION_HELP_TEXT),
    )


class CharacterClassOption(OptionGroupOption):
    """Character class options for the CLI."""

    option_group_name = _msg.TranslatedString(
        _msg.Label.CHARACTER_CLASS_LABEL
    )
    epilog = _msg.TranslatedString(_msg.Label.UPWD_EPILOG_01)


class PasswordGenerationOption(OptionGroupOption):
    """Password generation options for the CLI."""

    option_group_name = _msg.TranslatedString(
        _msg.Label.PASSWORD_GENERATION_LABEL
    )


class ConfigurationOption(OptionGroupOption):
    """Configuration options for the CLI."""

    option_group_name = _msg.TranslatedString(_msg.Label.CONFIGURATION_LABEL)


class LoggingOption(OptionGroupOption):
    """Logging options for the CLI."""

    option_group_name = _msg.TranslatedString(_msg.Label.LOGGING_LABEL)
    epilog = ''


debug_option = click.option(
    '--debug',
    'logging_level',
    is_flag=True,
    flag_value=logging.DEBUG,
    expose_value=False,
    callback=adjust_logging_level,
    help=_msg.TranslatedString(_msg.Label.DEBUG_OPTION_HELP_TEXT),
    cls=LoggingOption,
)
verbose_option = click.option(
    '-v',
    '--verbose',
    'logging_level',
    is_flag=True,
    flag_value=logging.INFO,
    expose_value=False,
    callback=adjust_logging_level,
    help=_msg.TranslatedString(_msg.Label.VERBOSE_OPTION_HELP_TEXT),
    cls=LoggingOption,
)
quiet_option = click.option(
    '-q',
    '--quiet',
    'logging_level',
    is_flag=True,
    flag_value=logging.ERROR,
    expose_value=False,
    callback=adjust_logging_level,
    help=_msg.TranslatedString(_msg.Label.QUIET_OPTION_HELP_TEXT),
    cls=LoggingOption,
)


def standard_logging_options(f: Callable[P, R]) -> Callable[P, R]:
    """Decorate the function with standard logging click options.

    Adds the three click options `-v`/`--verbose`, `-q`/`--quiet` and
    `--debug`, which calls back into the [`adjust_logging_level`][]
    function (with different argument values).

    Args:
        f: A callable to decorate.

    Returns:
        The decorated callable.

    """
    return debug_option(verbose_option(quiet_option(f)))
