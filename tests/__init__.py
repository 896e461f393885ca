# SPDX-FileCopyrightText: 2025 Marco Ricci <software@the13thletter.info>
#
# SPDX-License-Identifier: Zlib

from __future__ import annotations

import contextlib
import inspect
import json
import logging
import os
from typing import TYPE_CHECKING

import click.testing
from typing_extensions import NamedTuple, Self

from upwd import cli
from upwd._internals import cli_helpers, cli_machinery

__all__ = ()

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    import pytest
    from typing_extensions import Any


DEFAULT_POOL_CHARS = (
    'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789'
)
"""The characters of the implicit default pool, in pool order."""

SIXTY_FOUR_CHARS = (
    'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'
)
"""A 64-character alphabet, for nice round entropy values."""


@contextlib.contextmanager
def isolated_config(
    monkeypatch: pytest.MonkeyPatch,
    runner: CliRunner,
) -> Iterator[None]:
    prog_name = cli.PROG_NAME
    env_name = prog_name.replace(' ', '_').upper() + '_PATH'
    with runner.isolated_filesystem():
        monkeypatch.setenv('HOME', os.getcwd())
        monkeypatch.setenv('USERPROFILE', os.getcwd())
        monkeypatch.delenv(env_name, raising=False)
        config_dir = cli_helpers.config_filename(subsystem=None)
        os.makedirs(config_dir, exist_ok=True)
        yield


@contextlib.contextmanager
def isolated_charset_config(
    monkeypatch: pytest.MonkeyPatch,
    runner: CliRunner,
    config: Any,  # noqa: ANN401
) -> Iterator[None]:
    with isolated_config(monkeypatch=monkeypatch, runner=runner):
        config_filename = cli_helpers.config_filename(subsystem='charsets')
        with open(config_filename, 'w', encoding='UTF-8') as outfile:
            json.dump(config, outfile)
        yield


@contextlib.contextmanager
def isolated_raw_config(
    monkeypatch: pytest.MonkeyPatch,
    runner: CliRunner,
    contents: str,
) -> Iterator[None]:
    with isolated_config(monkeypatch=monkeypatch, runner=runner):
        config_filename = cli_helpers.config_filename(subsystem='charsets')
        with open(config_filename, 'w', encoding='UTF-8') as outfile:
            outfile.write(contents)
        yield


class ReadableResult(NamedTuple):
    """Helper class for formatting and testing click.testing.Result objects."""

    exception: BaseException | None
    exit_code: int
    output: str
    stderr: str

    @classmethod
    def parse(cls, r: click.testing.Result, /) -> Self:
        try:
            stderr = r.stderr
        except ValueError:  # pragma: no cover [external-api]
            stderr = r.output
        return cls(r.exception, r.exit_code, r.stdout or '', stderr or '')

    def clean_exit(
        self, *, output: str = '', empty_stderr: bool = False
    ) -> bool:
        """Return whether the invocation exited cleanly.

        Args:
            output:
                An expected output string.
            empty_stderr:
                If true, require standard error to be empty.

        """
        return (
            (
                not self.exception
                or (
                    isinstance(self.exception, SystemExit)
                    and self.exit_code == 0
                )
            )
            and (not output or output in self.output)
            and (not empty_stderr or not self.stderr)
        )

    def error_exit(
        self,
        *,
        error: str | type[BaseException] = BaseException,
        exit_code: int | None = None,
    ) -> bool:
        """Return whether the invocation exited uncleanly.

        Args:
            error:
                An expected error message, or an expected exception
                type.
            exit_code:
                An expected exit code, if any.

        """
        if exit_code is not None and self.exit_code != exit_code:
            return False
        if isinstance(error, str):
            return (
                isinstance(self.exception, SystemExit)
                and self.exit_code > 0
                and (not error or error in self.stderr)
            )
        else:  # noqa: RET505
            return isinstance(self.exception, error)

    def lines(self) -> list[str]:
        """Return the lines of standard output, without line endings."""
        return self.output.splitlines()


class CliRunner:
    """An abstracted CLI runner class.

    Wraps [`click.testing.CliRunner`][] so that the command output is
    a [`ReadableResult`][], standard error is kept separate across
    `click` versions, and the standard logging handlers are installed
    (and reset) for each invocation, as the top-level entry point would
    do.

    """

    def __init__(self) -> None:
        kwargs: dict[str, Any] = {}
        params = inspect.signature(click.testing.CliRunner).parameters
        if 'mix_stderr' in params:  # pragma: no cover [external-api]
            kwargs['mix_stderr'] = False
        self.click_testing_clirunner = click.testing.CliRunner(**kwargs)

    def invoke(
        self,
        cli: click.BaseCommand,
        args: Sequence[str] | str | None = None,
        input: str | bytes | None = None,  # noqa: A002
        env: Mapping[str, str | None] | None = None,
        *,
        catch_exceptions: bool = True,
        color: bool | None = None,
    ) -> ReadableResult:
        logging_handler = cli_machinery.StandardCLILogging.cli_handler
        package_logger = logging.getLogger(
            cli_machinery.StandardCLILogging.package_name
        )
        handler_level = logging_handler.level
        logger_level = package_logger.level
        logging_setup = cli_machinery.StandardCLILogging
        try:
            with contextlib.ExitStack() as stack:
                stack.enter_context(logging_setup.ensure_standard_logging())
                stack.enter_context(
                    logging_setup.ensure_standard_warnings_logging()
                )
                result = self.click_testing_clirunner.invoke(
                    cli,
                    args=args,
                    input=input,
                    env=env,
                    catch_exceptions=catch_exceptions,
                    color=bool(color),
                )
        finally:
            logging_handler.setLevel(handler_level)
            package_logger.setLevel(logger_level)
        return ReadableResult.parse(result)

    def isolated_filesystem(
        self,
        temp_dir: str | os.PathLike[str] | None = None,
    ) -> contextlib.AbstractContextManager[str]:
        return self.click_testing_clirunner.isolated_filesystem(
            temp_dir=temp_dir
        )
