# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-level orchestration: build a `Cli`, populate a `FromCli` type, verify the
stream is empty, and turn the outcome into an exit code.

This is the one place where Argstream catches its own errors. A `CliError` is
rendered to stderr with its usage line and exits with `CLI_ERROR_EXIT_CODE`; a
`HelpSignal` renders the help text and exits with zero.

Example:
    if __name__ == "__main__":
        sys.exit(run(Op, context=None))
"""
from __future__ import annotations

import sys
from typing import Any, Sequence, TypeVar

from rich.console import Console
from rich.markup import escape

from argstream.command import FromCli
from argstream.config import CliConfig, load_config
from argstream.console import console, error_console
from argstream.exceptions import CliError, ConfigError
from argstream.logger import logger
from argstream.signals import HelpSignal
from argstream.utils import get_program_invocation, setup_logging

T = TypeVar("T", bound=FromCli)

CLI_ERROR_EXIT_CODE = 101


def parse(command: type[T], args: Sequence[str], config: CliConfig | None = None) -> T:
    """
    Populate `command` from `args` and verify nothing unexpected is left.

    Raises:
        CliError: On any problem with the command line.
        HelpSignal: If the user asked for help.
    """
    config = config or CliConfig()
    cli = config.build_cli(list(args))
    help = config.to_help()
    if help is not None:
        cli.help(help)
    instance = command.from_cli(cli)
    cli.is_empty()
    return instance


def render_error(error: CliError, target: Console = error_console) -> None:
    """Print a user-facing error, its usage line, and a pointer to help."""
    target.print(f"[bold red]error:[/] {escape(error.message)}")
    usage = error.usage()
    if usage:
        target.print(f"\n{escape(usage)}")
    if error.help is not None:
        flag = escape(str(error.help.flag))
        target.print(
            f"\nFor more information, try '[bold]{escape(get_program_invocation())} {flag}[/]'."
        )


def run(
    command: type[T],
    args: Sequence[str] | None = None,
    context: Any = None,
    config: CliConfig | None = None,
) -> int:
    """
    Parse the command line into `command`, execute it, and return an exit code.

    Args:
        command (type[T]): A `FromCli` type that also provides `exec(context)`.
        args (Sequence[str] | None): Raw arguments including the program name.
            Defaults to `sys.argv`.
        context (Any): Passed to `exec`.
        config (CliConfig | None): Engine settings. Loaded with `load_config()`
            when omitted.

    Returns:
        int: 0 on success or help, `CLI_ERROR_EXIT_CODE` on a command-line or
        configuration error,
        or the command's own status when it returns an int.
    """
    if args is None:
        args = sys.argv
    try:
        if config is None:
            config = load_config()
        if config.log_mode:
            setup_logging(mode=config.log_mode)
    except ConfigError as error:
        logger.debug("Configuration rejected: %s", error)
        error_console.print(f"[bold red]error:[/] {escape(str(error))}")
        return CLI_ERROR_EXIT_CODE

    try:
        instance = parse(command, args, config)
    except HelpSignal as signal:
        if signal.help is not None:
            signal.help.render(console)
        return 0
    except CliError as error:
        logger.debug("Command line rejected: %s", error.message)
        render_error(error)
        return CLI_ERROR_EXIT_CODE

    status = instance.exec(context)  # type: ignore[attr-defined]
    return status if isinstance(status, int) else 0
